"""
Pytest fixtures for codecondense tests.
"""

import os
import sys
import tempfile
from pathlib import Path
from typing import Generator

import pytest

# Add project root to path for codecondense imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Keep tests away from the user's ~/.codecondense/config.yaml
os.environ["CODECONDENSE_DATA_PATH"] = "/tmp/codecondense_test_data"
os.environ.pop("CODECONDENSE_CONFIG", None)


SAMPLE_GO_SOURCE = '''package main

import (
	"fmt"
	"os"
)

var x, y int

const limit = 10

type Server struct {
	addr string
}

func Add(a, b int) int {
	return a + b
}

func (s *Server) Start() error {
	fmt.Println("starting", s.addr)
	return nil
}

func main() {
	os.Exit(Add(x, y))
}
'''


SAMPLE_PYTHON_SOURCE = '''import os
from pathlib import Path

TIMEOUT: int = 30
registry = {}


def hello_world():
    """Say hello to the world."""
    print("Hello, World!")


class Calculator:
    def add(self, a: int, b: int) -> int:
        return a + b


@cached
async def fetch(url: str, retries: int = 3) -> bytes:
    return b""
'''


class StubSummarizer:
    """Deterministic summarizer recording every call."""

    def __init__(self, comment: str = "Does something useful.", error: Exception | None = None):
        self.comment = comment
        self.error = error
        self.calls: list[tuple[str, str]] = []

    def __call__(self, signature: str, language: str) -> str:
        self.calls.append((signature, language))
        if self.error is not None:
            raise self.error
        return self.comment


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_go_file(temp_dir: Path) -> Path:
    """Create a sample Go file for testing."""
    file_path = temp_dir / "main.go"
    file_path.write_text(SAMPLE_GO_SOURCE)
    return file_path


@pytest.fixture
def sample_python_file(temp_dir: Path) -> Path:
    """Create a sample Python file for testing."""
    file_path = temp_dir / "sample.py"
    file_path.write_text(SAMPLE_PYTHON_SOURCE)
    return file_path


@pytest.fixture
def stub_summarizer() -> StubSummarizer:
    return StubSummarizer()


@pytest.fixture
def summarizer_factory():
    """Build StubSummarizers with a custom comment or error."""
    return StubSummarizer


@pytest.fixture
def clean_env(monkeypatch):
    """Remove environment variables that change provider or config selection."""
    for name in (
        "OPENAI_API_KEY",
        "ANTHROPIC_API_KEY",
        "CODECONDENSE_LLM_PROVIDER",
        "CODECONDENSE_WORKERS",
        "CODECONDENSE_OUTPUT",
        "CODECONDENSE_CONFIG",
        "CODECONDENSE_DEBUG",
        "CODECONDENSE_LOG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch

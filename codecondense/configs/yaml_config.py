"""
codecondense YAML Configuration

Loading and defaults for ~/.codecondense/config.yaml.
"""

import os
from pathlib import Path
from typing import Optional

import yaml

from codecondense.configs.paths import get_data_path
from codecondense.exceptions import ConfigurationError

# --- Default Config Template ---

DEFAULT_CONFIG_YAML = """\
# codecondense Configuration
# Edit this file to customize codecondense behavior.
# Command-line flags override everything set here.

# Which declarations to keep from each source file
extraction:
  imports: true
  globals: true
  functions: true
  # Include Go methods (functions with a receiver)
  include_methods: true

# Directory walk filters
walk:
  sub_dirs: false
  # Skip files smaller than this many bytes
  min_size: 0
  # Only keep files with this extension, e.g. ".go" (empty = all)
  file_type: ""
  # RFC 3339 timestamp, e.g. "2024-01-01T00:00:00Z" (empty = no filter)
  modified_since: ""

# Combined output
output:
  path: "output.txt"

# Number of files extracted in parallel
workers: 1

# LLM Provider Configuration
# Used to generate one-line summaries for extracted functions
llm:
  # Primary provider: openai, anthropic, ollama
  primary_provider: "openai"

  # Fallback chain (tried in order if primary is unavailable)
  fallback_chain:
    - "anthropic"
    - "ollama"

  # Provider-specific settings
  openai:
    model: "gpt-4"
    base_url: "https://api.openai.com/v1"
    # API key read from OPENAI_API_KEY env var

  anthropic:
    model: "claude-3-haiku-20240307"
    # API key read from ANTHROPIC_API_KEY env var

  ollama:
    model: "llama3.2"
    base_url: "http://localhost:11434"

# Function comment generation
comments:
  enabled: false
  max_tokens: 256
  temperature: 0.5
  timeout: 60
  retries: 3
"""


def get_config_path() -> Path:
    """Get the path to config.yaml (CODECONDENSE_CONFIG overrides)."""
    override = os.environ.get("CODECONDENSE_CONFIG")
    if override:
        return Path(override).expanduser()
    return get_data_path() / "config.yaml"


def load_yaml_config(config_path: Optional[Path] = None) -> dict:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Explicit file to read. Defaults to get_config_path().

    Returns:
        Configuration dictionary (empty if the default file doesn't exist)

    Raises:
        ConfigurationError: If the file is unreadable, is not valid YAML, or
            does not contain a mapping at the root. An explicitly requested
            file that does not exist is also an error.
    """
    explicit = config_path is not None
    config_path = Path(config_path).expanduser() if explicit else get_config_path()

    if not config_path.exists():
        if explicit:
            raise ConfigurationError(
                "Config file not found", {"path": str(config_path)}
            )
        return {}

    try:
        content = config_path.read_text(encoding="utf-8")
        loaded = yaml.safe_load(content)
    except OSError as e:
        raise ConfigurationError(f"Cannot read {config_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigurationError(
            f"{config_path.name} must contain a mapping at the root"
        )
    return loaded


def create_default_config() -> bool:
    """
    Create default config.yaml if it doesn't exist.

    Returns:
        True if file was created, False if it already exists
    """
    config_path = get_config_path()
    if config_path.exists():
        return False

    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(DEFAULT_CONFIG_YAML, encoding="utf-8")
    return True

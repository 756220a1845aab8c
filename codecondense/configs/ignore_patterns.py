"""
codecondense Ignore Patterns

Default patterns and loading logic for .codecondenseignore files.
Follows .gitignore-style format for filtering files during a walk.
"""

from pathlib import Path

from codecondense.configs.logging import get_logger

logger = get_logger("configs.ignore")

# --- Default Ignore Patterns ---
# Hardcoded sensible defaults for all projects

DEFAULT_IGNORE_PATTERNS = {
    # Version control
    ".git",
    ".svn",
    ".hg",
    # Dependencies
    "node_modules",
    "vendor",
    ".venv",
    "venv",
    "__pycache__",
    ".pytest_cache",
    ".mypy_cache",
    ".ruff_cache",
    # IDE
    ".idea",
    ".vscode",
    # Misc
    ".cache",
    ".tox",
    ".eggs",
    "*.egg-info",
}

IGNORE_FILE_NAME = ".codecondenseignore"


def _parse_ignore_file(content: str) -> set[str]:
    """Parse an ignore file into a set of patterns (comments and blanks dropped)."""
    patterns = set()
    for line in content.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        patterns.add(line.rstrip("/"))
    return patterns


def load_ignore_patterns(root_path: str, use_ignore_file: bool = True) -> set[str]:
    """
    Load ignore patterns for a walk.

    Merges DEFAULT_IGNORE_PATTERNS with <root_path>/.codecondenseignore when present.

    Args:
        root_path: Root directory being walked
        use_ignore_file: If False, only the defaults are returned

    Returns:
        Set of fnmatch-style patterns
    """
    patterns = set(DEFAULT_IGNORE_PATTERNS)
    if not use_ignore_file:
        return patterns

    ignore_file = Path(root_path) / IGNORE_FILE_NAME
    if ignore_file.is_file():
        try:
            patterns |= _parse_ignore_file(ignore_file.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read {ignore_file}: {e}")

    return patterns

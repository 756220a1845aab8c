"""
codecondense Constants

Static configuration values that rarely change: output defaults
and timeout configuration.
"""

# --- Output ---

DEFAULT_OUTPUT_FILE = "output.txt"

# Delimiter wrapped around each file's extracted text in the combined output
BLOCK_DELIMITER = "'''"

# --- Timeout Configuration ---
# Centralized timeout values (in seconds)

TIMEOUTS = {
    # HTTP requests
    "http_default": 10,  # Default HTTP request timeout
    # LLM providers
    "llm_availability_check": 5,  # Provider availability check
    # Comment generation
    "generate_comment": 60,  # Per-function summary request
}


def get_timeout(key: str, default: int | float | None = None) -> int | float:
    """
    Get a timeout value by key.

    Args:
        key: Timeout key from TIMEOUTS dict
        default: Default value if key not found

    Returns:
        Timeout value in seconds
    """
    if default is None:
        default = TIMEOUTS.get("http_default", 10)
    return TIMEOUTS.get(key, default)

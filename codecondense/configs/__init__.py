"""
codecondense Configuration Module

Re-exports commonly used functions for cleaner imports across the codebase.
"""

# Logging (most commonly used)
from codecondense.configs.logging import get_logger, setup_logging

# Paths
from codecondense.configs.paths import get_data_path

# Constants
from codecondense.configs.constants import (
    BLOCK_DELIMITER,
    DEFAULT_OUTPUT_FILE,
    TIMEOUTS,
    get_timeout,
)

# Ignore patterns
from codecondense.configs.ignore_patterns import (
    DEFAULT_IGNORE_PATTERNS,
    load_ignore_patterns,
)

# YAML config
from codecondense.configs.yaml_config import (
    DEFAULT_CONFIG_YAML,
    create_default_config,
    get_config_path,
    load_yaml_config,
)

# Runtime
from codecondense.configs.runtime import (
    DEFAULT_CONFIG,
    get_full_config,
    get_llm_provider,
)

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    # Paths
    "get_data_path",
    # Constants
    "BLOCK_DELIMITER",
    "DEFAULT_OUTPUT_FILE",
    "TIMEOUTS",
    "get_timeout",
    # Ignore patterns
    "DEFAULT_IGNORE_PATTERNS",
    "load_ignore_patterns",
    # YAML config
    "DEFAULT_CONFIG_YAML",
    "get_config_path",
    "load_yaml_config",
    "create_default_config",
    # Runtime
    "DEFAULT_CONFIG",
    "get_llm_provider",
    "get_full_config",
]

"""
codecondense Runtime Configuration

Runtime defaults and configuration merging logic.
Combines defaults, YAML config, and environment variables.
"""

import copy
import os
from pathlib import Path
from typing import Optional

from codecondense.configs.constants import DEFAULT_OUTPUT_FILE, get_timeout
from codecondense.configs.logging import get_logger
from codecondense.configs.yaml_config import load_yaml_config

logger = get_logger("configs.runtime")

KNOWN_PROVIDERS = ("openai", "anthropic", "ollama", "none")

# --- Default Runtime Configuration ---

DEFAULT_CONFIG = {
    "extraction": {
        "imports": True,
        "globals": True,
        "functions": True,
        "include_methods": True,
    },
    "walk": {
        "sub_dirs": False,
        "min_size": 0,
        "file_type": "",
        "modified_since": "",
    },
    "output": {
        "path": DEFAULT_OUTPUT_FILE,
    },
    "workers": 1,
    "llm": {
        "primary_provider": "openai",
        "fallback_chain": ["anthropic", "ollama"],
        "openai": {},
        "anthropic": {},
        "ollama": {},
    },
    "comments": {
        "enabled": False,
        "max_tokens": 256,
        "temperature": 0.5,
        "timeout": get_timeout("generate_comment"),
        "retries": 3,
    },
}


def _merge(base: dict, override: dict) -> dict:
    """Recursively merge override into a copy of base."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def get_llm_provider(config: Optional[dict] = None) -> str:
    """
    Get the configured primary LLM provider.

    Priority:
    1. CODECONDENSE_LLM_PROVIDER env var
    2. llm.primary_provider from config
    3. Default: "openai"

    Returns:
        Provider name: "openai", "anthropic", "ollama", or "none"
    """
    env_provider = os.environ.get("CODECONDENSE_LLM_PROVIDER", "").lower()
    if env_provider in KNOWN_PROVIDERS:
        return env_provider

    llm_config = (config or {}).get("llm", {})
    config_provider = str(llm_config.get("primary_provider", "")).lower()
    if config_provider in KNOWN_PROVIDERS:
        return config_provider

    return "openai"


def get_full_config(config_path: Optional[Path] = None) -> dict:
    """
    Get full configuration merged from defaults, YAML, and environment.

    Priority (highest wins):
    1. Environment variables
    2. YAML config file
    3. DEFAULT_CONFIG

    Args:
        config_path: Explicit YAML file; defaults to ~/.codecondense/config.yaml

    Returns:
        Merged configuration dictionary
    """
    yaml_config = load_yaml_config(config_path)
    config = _merge(DEFAULT_CONFIG, yaml_config)

    config["llm"]["primary_provider"] = get_llm_provider(config)

    # Environment overrides
    if os.environ.get("CODECONDENSE_WORKERS"):
        try:
            config["workers"] = int(os.environ["CODECONDENSE_WORKERS"])
        except ValueError:
            logger.warning(
                f"Ignoring non-integer CODECONDENSE_WORKERS={os.environ['CODECONDENSE_WORKERS']!r}"
            )

    if os.environ.get("CODECONDENSE_OUTPUT"):
        config["output"]["path"] = os.environ["CODECONDENSE_OUTPUT"]

    return config

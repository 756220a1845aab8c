"""
LLM Provider Abstraction

Unified interface for multiple LLM providers with fallback chain support.
Used to generate summaries for extracted function signatures.
"""

from typing import Optional

from codecondense.configs.logging import get_logger
from codecondense.exceptions import ConfigurationError

from .anthropic_provider import AnthropicProvider
from .ollama_provider import OllamaProvider
from .openai_provider import OpenAIProvider
from .provider import LLMConfig, LLMProvider, LLMResponse

logger = get_logger("llm")

__all__ = [
    "LLMProvider",
    "LLMConfig",
    "LLMResponse",
    "AnthropicProvider",
    "OllamaProvider",
    "OpenAIProvider",
    "get_provider",
]


def get_provider(config: Optional[dict] = None) -> LLMProvider:
    """
    Get an LLM provider based on configuration.

    Tries primary provider first, then fallback chain.

    Args:
        config: Configuration dict with 'llm' section containing:
            - primary_provider: str (openai, anthropic, ollama)
            - fallback_chain: list[str] of provider names to try if primary fails
            - Provider-specific config sections (openai, anthropic, ollama)

    Returns:
        An available LLMProvider instance

    Raises:
        ConfigurationError: If no providers are available
    """
    config = config or {}
    llm_config = config.get("llm", {})

    primary = llm_config.get("primary_provider", "openai")
    fallback_chain = llm_config.get("fallback_chain", ["anthropic", "ollama"])

    providers_to_try = [primary] + [p for p in fallback_chain if p != primary]

    for provider_name in providers_to_try:
        if provider_name == "none":
            continue
        try:
            provider = _create_provider(provider_name, llm_config)
        except ValueError as e:
            logger.warning(str(e))
            continue
        if provider.is_available():
            logger.info(f"Using LLM provider: {provider.name}")
            return provider
        logger.debug(f"Provider {provider_name} not available, trying next")

    raise ConfigurationError(
        "No LLM providers available. Please configure at least one of: "
        "openai (OPENAI_API_KEY or --api-key), anthropic (ANTHROPIC_API_KEY), "
        "or ollama (local server)"
    )


def _create_provider(name: str, llm_config: dict) -> LLMProvider:
    """Create a provider instance by name."""
    if name == "openai":
        return OpenAIProvider(llm_config.get("openai") or {})
    elif name == "anthropic":
        return AnthropicProvider(llm_config.get("anthropic") or {})
    elif name == "ollama":
        return OllamaProvider(llm_config.get("ollama") or {})
    else:
        raise ValueError(f"Unknown provider: {name}")

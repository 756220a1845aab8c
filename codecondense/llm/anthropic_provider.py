"""
Anthropic API Provider

Uses the Anthropic SDK for direct API access.
Requires ANTHROPIC_API_KEY environment variable (or api_key in config).
"""

import os
import time
from typing import Optional

import anthropic
from anthropic import Anthropic

from codecondense.configs.logging import get_logger
from codecondense.exceptions import LLMConnectionError, LLMResponseError, LLMTimeoutError

from .provider import LLMConfig, LLMProvider, LLMResponse

logger = get_logger("llm.anthropic")


class AnthropicProvider(LLMProvider):
    """
    LLM provider using the Anthropic API directly.

    Configuration:
        model: Model to use (default: claude-3-haiku-20240307)
        api_key: Optional key, overrides the environment

    Environment:
        ANTHROPIC_API_KEY: API key
    """

    def __init__(self, config: Optional[dict] = None):
        self._config = config or {}
        self._client: Optional[Anthropic] = None

    @property
    def name(self) -> str:
        return "anthropic"

    @property
    def default_model(self) -> str:
        return self._config.get("model", "claude-3-haiku-20240307")

    def is_available(self) -> bool:
        """Check if API key is set and client can be created."""
        api_key = self._config.get("api_key") or os.environ.get("ANTHROPIC_API_KEY")
        if not api_key:
            logger.debug("ANTHROPIC_API_KEY not set")
            return False

        if self._client is None:
            self._client = Anthropic(api_key=api_key)
        return True

    def generate(self, prompt: str, config: Optional[LLMConfig] = None) -> LLMResponse:
        """Generate completion using Anthropic API."""
        if self._client is None:
            if not self.is_available():
                raise LLMConnectionError("Anthropic API key not configured")

        config = config or LLMConfig()
        model = config.model or self.default_model

        request = {
            "model": model,
            "max_tokens": config.max_tokens,
            "temperature": config.temperature,
            "messages": [{"role": "user", "content": prompt}],
            "timeout": config.timeout,
        }
        if config.system:
            request["system"] = config.system

        start_time = time.time()

        try:
            response = self._client.messages.create(**request)
        except anthropic.APITimeoutError as e:
            raise LLMTimeoutError(f"Anthropic request timed out after {config.timeout}s") from e
        except anthropic.APIConnectionError as e:
            raise LLMConnectionError(f"Anthropic connection failed: {e}") from e
        except anthropic.APIStatusError as e:
            logger.error(f"Anthropic API error: {e}")
            raise LLMResponseError(
                f"Anthropic API error: {e}", {"status_code": e.status_code}
            ) from e
        except anthropic.APIError as e:
            raise LLMResponseError(f"Anthropic API error: {e}") from e

        latency_ms = (time.time() - start_time) * 1000

        text = getattr(response.content[0], "text", None) if response.content else None
        if not isinstance(text, str) or not text:
            raise LLMResponseError("Anthropic returned no content")

        # Extract token usage
        tokens_used = 0
        if hasattr(response, "usage"):
            tokens_used = (
                getattr(response.usage, "input_tokens", 0)
                + getattr(response.usage, "output_tokens", 0)
            )

        return LLMResponse(
            text=text,
            model=model,
            tokens_used=tokens_used,
            latency_ms=latency_ms,
            provider=self.name,
        )

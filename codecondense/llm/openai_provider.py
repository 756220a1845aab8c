"""
OpenAI Provider

Uses the OpenAI chat completions API. Any OpenAI-compatible endpoint
(OpenRouter, a local gateway) works by changing base_url.
Requires OPENAI_API_KEY environment variable (or api_key in config).
"""

import os
import time
from typing import Optional

from codecondense.configs.logging import get_logger
from codecondense.exceptions import LLMConnectionError, LLMResponseError, LLMTimeoutError
from codecondense.utils.http_client import HTTPError, http_post

from .provider import LLMConfig, LLMProvider, LLMResponse

logger = get_logger("llm.openai")


class OpenAIProvider(LLMProvider):
    """
    LLM provider using the OpenAI chat completions API.

    Configuration:
        model: Model to use (default: gpt-4)
        base_url: API URL (default: https://api.openai.com/v1)
        api_key: Optional key, overrides the environment

    Environment:
        OPENAI_API_KEY: API key
    """

    def __init__(self, config: Optional[dict] = None):
        self._config = config or {}
        self._base_url = self._config.get(
            "base_url", "https://api.openai.com/v1"
        ).rstrip("/")
        self._api_key: Optional[str] = None

    @property
    def name(self) -> str:
        return "openai"

    @property
    def default_model(self) -> str:
        return self._config.get("model", "gpt-4")

    def is_available(self) -> bool:
        """Check if API key is set."""
        self._api_key = self._config.get("api_key") or os.environ.get("OPENAI_API_KEY")
        if not self._api_key:
            logger.debug("OPENAI_API_KEY not set")
            return False
        return True

    def generate(self, prompt: str, config: Optional[LLMConfig] = None) -> LLMResponse:
        """Generate completion using the chat completions endpoint."""
        if self._api_key is None:
            if not self.is_available():
                raise LLMConnectionError("OpenAI API key not configured")

        config = config or LLMConfig()
        model = config.model or self.default_model

        messages = []
        if config.system:
            messages.append({"role": "system", "content": config.system})
        messages.append({"role": "user", "content": prompt})

        payload = {
            "model": model,
            "messages": messages,
            "max_tokens": config.max_tokens,
            "temperature": config.temperature,
        }

        start_time = time.time()

        try:
            response = http_post(
                f"{self._base_url}/chat/completions",
                json=payload,
                headers={"Authorization": f"Bearer {self._api_key}"},
                timeout=config.timeout,
            )
            data = response.json()
        except (LLMConnectionError, LLMTimeoutError):
            raise
        except HTTPError as e:
            logger.error(f"OpenAI HTTP error: {e}")
            raise LLMResponseError(
                f"OpenAI API error: {e}", {"status_code": e.status_code}
            ) from e
        except ValueError as e:
            raise LLMResponseError("OpenAI returned invalid JSON") from e

        latency_ms = (time.time() - start_time) * 1000

        # Extract response
        if not isinstance(data, dict):
            raise LLMResponseError("OpenAI returned a non-object body")
        choices = data.get("choices")
        if not isinstance(choices, list) or not choices:
            raise LLMResponseError("OpenAI returned no choices")

        message = choices[0].get("message") if isinstance(choices[0], dict) else None
        if not isinstance(message, dict):
            raise LLMResponseError("OpenAI returned a choice without a message")

        text = message.get("content")
        if not isinstance(text, str) or not text:
            raise LLMResponseError("OpenAI returned empty response")

        # Extract token usage
        tokens_used = 0
        usage = data.get("usage")
        if isinstance(usage, dict):
            tokens_used = usage.get("total_tokens") or 0

        model_used = data.get("model")
        return LLMResponse(
            text=text,
            model=model_used if isinstance(model_used, str) else model,
            tokens_used=tokens_used,
            latency_ms=latency_ms,
            provider=self.name,
        )

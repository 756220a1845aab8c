"""
Ollama Provider

Describes functions with a model served by a local Ollama server through its
chat endpoint. No API key required.
"""

import time
from typing import Optional

from codecondense.configs.constants import get_timeout
from codecondense.configs.logging import get_logger
from codecondense.exceptions import LLMConnectionError, LLMResponseError, LLMTimeoutError
from codecondense.utils.http_client import HTTPError, http_json_get, http_json_post

from .provider import LLMConfig, LLMProvider, LLMResponse

logger = get_logger("llm.ollama")


def _model_matches(installed: str, wanted: str) -> bool:
    # "llama3.2" is served as "llama3.2:latest"
    return installed == wanted or installed.split(":", 1)[0] == wanted


class OllamaProvider(LLMProvider):
    """
    LLM provider using a local Ollama server.

    Configuration:
        model: Model to use (default: llama3.2)
        base_url: Ollama server URL (default: http://localhost:11434)

    The provider only counts as available when the configured model has been
    pulled, so a running server without it falls through to the next provider.
    """

    def __init__(self, config: Optional[dict] = None):
        self._config = config or {}
        self._base_url = self._config.get("base_url", "http://localhost:11434").rstrip("/")

    @property
    def name(self) -> str:
        return "ollama"

    @property
    def default_model(self) -> str:
        return self._config.get("model", "llama3.2")

    def is_available(self) -> bool:
        """Check the server is running and has the configured model installed."""
        try:
            data = http_json_get(
                f"{self._base_url}/api/tags",
                timeout=get_timeout("llm_availability_check"),
            )
        except (LLMConnectionError, LLMTimeoutError, HTTPError) as e:
            logger.debug(f"Ollama not reachable: {e}")
            return False

        models = data.get("models") if isinstance(data, dict) else None
        names = [str(m.get("name", "")) for m in models or [] if isinstance(m, dict)]
        if any(_model_matches(name, self.default_model) for name in names):
            return True
        logger.debug(f"Ollama running but model {self.default_model} is not installed")
        return False

    def generate(self, prompt: str, config: Optional[LLMConfig] = None) -> LLMResponse:
        """Describe a function through the chat endpoint."""
        config = config or LLMConfig()
        model = config.model or self.default_model

        messages = []
        if config.system:
            messages.append({"role": "system", "content": config.system})
        messages.append({"role": "user", "content": prompt})

        payload = {
            "model": model,
            "messages": messages,
            "stream": False,
            "options": {
                "temperature": config.temperature,
                "num_predict": config.max_tokens,
            },
        }

        start_time = time.time()

        try:
            data = http_json_post(
                f"{self._base_url}/api/chat",
                json=payload,
                timeout=config.timeout,
            )
        except (LLMConnectionError, LLMTimeoutError) as e:
            logger.error(f"Ollama request failed: {e}")
            raise
        except HTTPError as e:
            logger.error(f"Ollama HTTP error: {e}")
            raise LLMResponseError(
                f"Ollama API error: {e}", {"status_code": e.status_code}
            ) from e

        latency_ms = (time.time() - start_time) * 1000

        message = data.get("message") if isinstance(data, dict) else None
        text = message.get("content") if isinstance(message, dict) else None
        if not isinstance(text, str) or not text:
            raise LLMResponseError("Ollama returned empty response")

        tokens_used = 0
        prompt_tokens, output_tokens = data.get("prompt_eval_count"), data.get("eval_count")
        if isinstance(prompt_tokens, int) and isinstance(output_tokens, int):
            tokens_used = prompt_tokens + output_tokens

        return LLMResponse(
            text=text,
            model=model,
            tokens_used=tokens_used,
            latency_ms=latency_ms,
            provider=self.name,
        )

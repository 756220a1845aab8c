"""
LLM Provider Interface

Request/response types and the abstract provider every backend implements.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass
class LLMConfig:
    """Per-request generation settings."""

    model: Optional[str] = None  # None = provider's default_model
    max_tokens: int = 256
    temperature: float = 0.5
    timeout: int = 60  # seconds
    system: Optional[str] = None


@dataclass
class LLMResponse:
    """Text produced by a provider, with usage metadata."""

    text: str
    model: str
    tokens_used: int = 0
    latency_ms: float = 0.0
    provider: str = ""


class LLMProvider(ABC):
    """
    A text-generation backend.

    Subclasses report whether they can be used right now (credentials set,
    server reachable) and turn a prompt into an LLMResponse.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier used in config and logs (e.g. 'openai')."""

    @property
    @abstractmethod
    def default_model(self) -> str:
        """Model used when LLMConfig.model is None."""

    @abstractmethod
    def is_available(self) -> bool:
        """True when the provider is configured and reachable."""

    @abstractmethod
    def generate(self, prompt: str, config: Optional[LLMConfig] = None) -> LLMResponse:
        """
        Generate a completion.

        Raises:
            LLMConnectionError: Provider unreachable
            LLMTimeoutError: Request exceeded config.timeout
            LLMResponseError: Provider answered with an error or no text
        """

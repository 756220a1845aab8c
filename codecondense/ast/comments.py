"""
Function Comment Generation

Turns extracted function signatures into one-line descriptions using the
configured LLM provider. A CommentGenerator is the Summarizer handed to the
extraction engine.
"""

from typing import Optional

from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from codecondense.configs.constants import get_timeout
from codecondense.configs.logging import get_logger
from codecondense.exceptions import (
    LLMConnectionError,
    LLMError,
    LLMTimeoutError,
    SummaryServiceError,
)
from codecondense.llm import LLMConfig, LLMProvider, get_provider

logger = get_logger("ast.comments")


COMMENT_PROMPT = "Generate a descriptive comment for the following {language} function:\n\n{signature}"

COMMENT_SYSTEM = "You are a helpful assistant that describes code. Do not use // or any other identifier."

_LANGUAGE_NAMES = {"go": "Go", "python": "Python"}


class CommentGenerator:
    """
    Summarizer backed by an LLMProvider.

    Transient failures (connection errors, timeouts) are retried with
    exponential backoff. Any failure left after the last attempt, or any
    unexpected error raised by the provider, surfaces as
    SummaryServiceError.
    """

    def __init__(
        self,
        provider: LLMProvider,
        config: Optional[dict] = None,
        retries: Optional[int] = None,
    ):
        comments_config = (config or {}).get("comments", {})
        self.provider = provider
        self.retries = max(1, retries if retries is not None else comments_config.get("retries", 3))
        self.llm_config = LLMConfig(
            model=comments_config.get("model"),
            max_tokens=comments_config.get("max_tokens", 256),
            temperature=comments_config.get("temperature", 0.5),
            timeout=comments_config.get("timeout", get_timeout("generate_comment")),
            system=COMMENT_SYSTEM,
        )
        self._generate = retry(
            retry=retry_if_exception_type((LLMConnectionError, LLMTimeoutError)),
            wait=wait_exponential(multiplier=1, min=1, max=30),
            stop=stop_after_attempt(self.retries),
            reraise=True,
        )(self._request)

    def _request(self, prompt: str) -> str:
        response = self.provider.generate(prompt, self.llm_config)
        return response.text

    def __call__(self, signature: str, language: str) -> str:
        """
        Generate a comment for a function signature.

        Args:
            signature: Rendered function header
            language: Language name of the source file

        Returns:
            Comment text (stripped)

        Raises:
            SummaryServiceError: If the provider failed or returned nothing
        """
        prompt = COMMENT_PROMPT.format(
            language=_LANGUAGE_NAMES.get(language, language),
            signature=signature,
        )
        try:
            text = self._generate(prompt)
        except LLMError as e:
            raise SummaryServiceError(
                f"{self.provider.name} failed to describe function: {e}",
                {"signature": signature},
            ) from e
        except Exception as e:
            logger.exception(f"Unexpected error from {self.provider.name}")
            raise SummaryServiceError(
                f"{self.provider.name} failed to describe function: {type(e).__name__}: {e}",
                {"signature": signature},
            ) from e

        text = text.strip() if isinstance(text, str) else ""
        if not text:
            raise SummaryServiceError(
                f"{self.provider.name} returned an empty comment",
                {"signature": signature},
            )

        logger.debug(f"Generated comment for {signature}: {text[:50]}")
        return text


def create_comment_generator(config: Optional[dict] = None) -> CommentGenerator:
    """
    Build a CommentGenerator from the first available configured provider.

    Raises:
        ConfigurationError: If no LLM provider is available
    """
    return CommentGenerator(get_provider(config), config)

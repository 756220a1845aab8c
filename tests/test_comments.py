"""
Tests for Function Comment Generation
"""

from unittest.mock import Mock, patch

import pytest
import requests

from codecondense.ast.comments import COMMENT_SYSTEM, CommentGenerator, create_comment_generator
from codecondense.ast.engine import extract_source
from codecondense.ast.models import ExtractionRequest
from codecondense.exceptions import (
    ConfigurationError,
    LLMConnectionError,
    LLMResponseError,
    LLMTimeoutError,
    SummaryServiceError,
)
from codecondense.llm import LLMResponse, OpenAIProvider


def make_provider(*results):
    provider = Mock()
    provider.name = "mock"
    provider.generate.side_effect = list(results)
    return provider


def response(text: str) -> LLMResponse:
    return LLMResponse(text=text, model="test-model", tokens_used=10)


class TestCommentGenerator:
    """Test the LLM-backed summarizer."""

    def test_returns_stripped_comment(self):
        provider = make_provider(response("  Adds two integers.  \n"))
        comment = CommentGenerator(provider)("func Add(a, b int) (int)", "go")
        assert comment == "Adds two integers."

    def test_prompt_and_request_settings(self):
        provider = make_provider(response("Starts the server."))
        CommentGenerator(provider)("func (s *Server) Start() (error)", "go")

        prompt, llm_config = provider.generate.call_args[0]
        assert prompt == (
            "Generate a descriptive comment for the following Go function:\n\n"
            "func (s *Server) Start() (error)"
        )
        assert llm_config.system == COMMENT_SYSTEM
        assert llm_config.max_tokens == 256
        assert llm_config.temperature == 0.5

    def test_config_overrides(self):
        provider = make_provider(response("ok"))
        config = {"comments": {"max_tokens": 64, "temperature": 0.1, "timeout": 5, "model": "gpt-4o"}}
        CommentGenerator(provider, config)("def f()", "python")

        prompt, llm_config = provider.generate.call_args[0]
        assert "Python function" in prompt
        assert llm_config.max_tokens == 64
        assert llm_config.timeout == 5
        assert llm_config.model == "gpt-4o"

    def test_transient_error_is_retried(self):
        provider = make_provider(LLMConnectionError("reset"), response("Recovered."))
        assert CommentGenerator(provider, retries=2)("func F()", "go") == "Recovered."
        assert provider.generate.call_count == 2

    def test_retries_exhausted(self):
        provider = make_provider(LLMTimeoutError("slow"), LLMTimeoutError("slow"))
        with pytest.raises(SummaryServiceError):
            CommentGenerator(provider, retries=2)("func F()", "go")
        assert provider.generate.call_count == 2

    def test_response_error_is_not_retried(self):
        provider = make_provider(LLMResponseError("bad request"))
        with pytest.raises(SummaryServiceError):
            CommentGenerator(provider, retries=3)("func F()", "go")
        assert provider.generate.call_count == 1

    def test_empty_comment_is_an_error(self):
        provider = make_provider(response("   "))
        with pytest.raises(SummaryServiceError):
            CommentGenerator(provider)("func F()", "go")

    def test_unexpected_provider_error_is_wrapped(self):
        provider = make_provider(RuntimeError("provider bug"))
        with pytest.raises(SummaryServiceError, match="RuntimeError"):
            CommentGenerator(provider, retries=3)("func F()", "go")
        assert provider.generate.call_count == 1

    def test_non_text_response_is_an_error(self):
        provider = make_provider(LLMResponse(text=None, model="test-model"))
        with pytest.raises(SummaryServiceError):
            CommentGenerator(provider)("func F()", "go")


class TestCommentGeneratorOverHTTP:
    """Failures from a real provider surface as SummaryServiceError."""

    ADD = "package calc\n\nfunc Add(a, b int) int {\n\treturn a + b\n}\n"

    def test_dropped_stream(self, clean_env):
        generator = CommentGenerator(OpenAIProvider({"api_key": "sk-test"}), retries=1)
        with patch("requests.request", side_effect=requests.exceptions.ChunkedEncodingError("dropped")):
            with pytest.raises(SummaryServiceError):
                generator("func Add(a, b int) (int)", "go")

    def test_invalid_url(self, clean_env):
        generator = CommentGenerator(OpenAIProvider({"api_key": "sk-test", "base_url": "not a url"}), retries=1)
        with pytest.raises(SummaryServiceError):
            generator("func Add(a, b int) (int)", "go")

    def test_message_without_content(self, clean_env):
        generator = CommentGenerator(OpenAIProvider({"api_key": "sk-test"}), retries=1)
        body = Mock(status_code=200)
        body.json.return_value = {"choices": [{"message": None}]}
        with patch("requests.request", return_value=body):
            with pytest.raises(SummaryServiceError):
                generator("func Add(a, b int) (int)", "go")

    def test_extraction_degrades_to_no_comment(self, clean_env):
        generator = CommentGenerator(OpenAIProvider({"api_key": "sk-test"}), retries=1)
        with patch("requests.request", side_effect=requests.exceptions.ChunkedEncodingError("dropped")):
            result = extract_source(self.ADD, ".go", ExtractionRequest(generate_comments=True), summarizer=generator)
        assert result.text == "func Add(a, b int) (int) {\n}\n"
        assert result.comment_failures == ["Add"]


class TestCreateCommentGenerator:

    def test_no_provider_available(self):
        with patch("codecondense.ast.comments.get_provider", side_effect=ConfigurationError("none")):
            with pytest.raises(ConfigurationError):
                create_comment_generator({})

    def test_uses_selected_provider(self):
        provider = make_provider(response("ok"))
        with patch("codecondense.ast.comments.get_provider", return_value=provider):
            generator = create_comment_generator({"comments": {"retries": 5}})
        assert generator.provider is provider
        assert generator.retries == 5

"""
codecondense Exception Hierarchy

Centralized exception classes for structured error handling across the codebase.
All codecondense-specific exceptions inherit from CodeCondenseError.

Usage:
    from codecondense.exceptions import CodeCondenseError, ParseError

    try:
        extract_file(path, request)
    except ParseError as e:
        logger.error(f"Extraction failed: {e}")
"""


class CodeCondenseError(Exception):
    """Base exception for all codecondense errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(CodeCondenseError):
    """Error in codecondense configuration."""

    pass


# =============================================================================
# Extraction Errors
# =============================================================================


class ExtractionError(CodeCondenseError):
    """Base class for declaration extraction errors."""

    pass


class ParseError(ExtractionError):
    """Source file could not be parsed for its declared language."""

    def __init__(self, file_path: str, diagnostic: str, language: str | None = None):
        details = {"file": file_path}
        if language:
            details["language"] = language
        super().__init__(f"Failed to parse {file_path}: {diagnostic}", details)
        self.file_path = file_path
        self.diagnostic = diagnostic
        self.language = language


# =============================================================================
# Walk / Output Errors
# =============================================================================


class WalkError(CodeCondenseError):
    """Directory traversal failed or was given invalid filters."""

    pass


class OutputError(CodeCondenseError):
    """Combined output could not be written."""

    pass


# =============================================================================
# LLM Provider Errors
# =============================================================================


class LLMError(CodeCondenseError):
    """Base class for LLM provider errors."""

    pass


class LLMConnectionError(LLMError):
    """Failed to connect to LLM provider."""

    pass


class LLMTimeoutError(LLMError):
    """LLM request timed out."""

    pass


class LLMResponseError(LLMError):
    """Invalid or unexpected response from LLM."""

    pass


class SummaryServiceError(LLMError):
    """Function summary could not be generated."""

    pass

"""
HTTP Client Utilities

Thin wrappers over `requests` used by the HTTP-based LLM providers. Transport
failures are mapped onto the codecondense LLM error types so providers only
have to deal with one set of exceptions:

    requests Timeout         -> LLMTimeoutError
    any other request error  -> LLMConnectionError
    4xx / 5xx status         -> HTTPError

Usage:
    from codecondense.utils.http_client import http_json_post

    data = http_json_post("http://localhost:11434/api/generate", json=payload, timeout=60)
"""

from typing import Any

import requests

from codecondense.configs.constants import get_timeout
from codecondense.exceptions import LLMConnectionError, LLMTimeoutError

DEFAULT_TIMEOUT = get_timeout("http_default", 10)


class HTTPError(Exception):
    """Request reached the server but failed (bad status or unparseable body)."""

    def __init__(self, message: str, status_code: int | None = None, response_text: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.response_text = response_text


def _send(method: str, url: str, raise_for_status: bool = True, **kwargs: Any) -> requests.Response:
    try:
        response = requests.request(method, url, **kwargs)
    except requests.exceptions.ConnectionError as e:
        raise LLMConnectionError(f"Connection failed: {url}") from e
    except requests.exceptions.Timeout as e:
        raise LLMTimeoutError(f"Request timed out: {url}") from e
    except requests.exceptions.RequestException as e:
        # Dropped streams, bad URLs, too many redirects
        raise LLMConnectionError(f"Request failed: {url}: {e}") from e

    if raise_for_status and response.status_code >= 400:
        body = response.text or ""
        raise HTTPError(
            f"HTTP {response.status_code}: {method} {url}",
            status_code=response.status_code,
            response_text=body[:500] or None,
        )
    return response


def _json(response: requests.Response, url: str) -> dict[str, Any]:
    try:
        return response.json()
    except ValueError as e:
        raise HTTPError(f"Invalid JSON response from {url}", status_code=response.status_code) from e


def http_get(
    url: str,
    headers: dict[str, str] | None = None,
    timeout: float = DEFAULT_TIMEOUT,
    raise_for_status: bool = True,
) -> requests.Response:
    """
    GET a URL.

    Raises:
        LLMConnectionError: Connection failed
        LLMTimeoutError: Request timed out
        HTTPError: Bad status code (if raise_for_status=True)
    """
    return _send("GET", url, raise_for_status, headers=headers, timeout=timeout)


def http_post(
    url: str,
    json: dict[str, Any] | None = None,
    data: bytes | str | None = None,
    headers: dict[str, str] | None = None,
    timeout: float = DEFAULT_TIMEOUT,
    raise_for_status: bool = True,
) -> requests.Response:
    """
    POST a JSON or raw body.

    Raises:
        LLMConnectionError: Connection failed
        LLMTimeoutError: Request timed out
        HTTPError: Bad status code (if raise_for_status=True)
    """
    return _send("POST", url, raise_for_status, json=json, data=data, headers=headers, timeout=timeout)


def http_json_get(
    url: str,
    headers: dict[str, str] | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> dict[str, Any]:
    """GET returning the decoded JSON body."""
    return _json(http_get(url, headers=headers, timeout=timeout), url)


def http_json_post(
    url: str,
    json: dict[str, Any],
    headers: dict[str, str] | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> dict[str, Any]:
    """POST a JSON body, returning the decoded JSON response."""
    return _json(http_post(url, json=json, headers=headers, timeout=timeout), url)

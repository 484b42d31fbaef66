"""
Factories for FetchErrorInfo payloads.

Recoverability: timeouts and network errors are transient, HTTP errors only
for 5xx, parse and validation errors never.
"""

from typing import Any

import httpx

from .types import FetchErrorCode, FetchErrorInfo, HttpMethod


def create_fetch_error(
    code: FetchErrorCode,
    message: str,
    *,
    url: str,
    method: HttpMethod,
    status_code: int | None = None,
    response: Any = None,
    recoverable: bool = False,
    cause: BaseException | None = None,
) -> FetchErrorInfo:
    return FetchErrorInfo(
        message=message,
        recoverable=recoverable,
        code=FetchErrorCode(code).value,
        cause=cause,
        url=url,
        method=HttpMethod(method),
        status_code=status_code,
        response=response,
    )


def timeout_error(timeout_ms: float | None, url: str, method: HttpMethod, cause: BaseException | None = None) -> FetchErrorInfo:
    return create_fetch_error(
        FetchErrorCode.TIMEOUT,
        f"Request timed out after {timeout_ms}ms",
        url=url,
        method=method,
        recoverable=True,
        cause=cause,
    )


def network_error(error: BaseException | str, url: str, method: HttpMethod) -> FetchErrorInfo:
    cause = error if isinstance(error, BaseException) else None
    return create_fetch_error(
        FetchErrorCode.NETWORK_ERROR,
        f"Network error: {error}",
        url=url,
        method=method,
        recoverable=True,
        cause=cause,
    )


def http_error(
    status_code: int,
    reason: str,
    url: str,
    method: HttpMethod,
    response: Any = None,
) -> FetchErrorInfo:
    return create_fetch_error(
        FetchErrorCode.HTTP_ERROR,
        f"HTTP error: {status_code} {reason}".rstrip(),
        url=url,
        method=method,
        status_code=status_code,
        response=response,
        recoverable=500 <= status_code < 600,
    )


def parse_error(error: BaseException, url: str, method: HttpMethod) -> FetchErrorInfo:
    return create_fetch_error(
        FetchErrorCode.PARSE_ERROR,
        f"Failed to parse response: {error}",
        url=url,
        method=method,
        cause=error,
    )


def validation_error(message: str, url: str, method: HttpMethod, response: Any) -> FetchErrorInfo:
    return create_fetch_error(
        FetchErrorCode.VALIDATION_ERROR,
        f"Validation error: {message}",
        url=url,
        method=method,
        response=response,
    )


def error_from_response(response: httpx.Response, url: str, method: HttpMethod) -> FetchErrorInfo:
    """
    Build an HTTP error from a non-2xx response.

    The body is attached as decoded JSON when the response declares a JSON
    content type and parses; otherwise as text. The body must already be read.
    """
    body: Any = response.text
    if "application/json" in response.headers.get("content-type", ""):
        try:
            body = response.json()
        except ValueError:
            body = response.text
    return http_error(response.status_code, response.reason_phrase, url, method, response=body)

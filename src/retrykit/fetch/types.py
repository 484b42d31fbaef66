"""
HTTP client types: methods, error payloads and retry configuration.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from ..exceptions import (
    FetchError,
    HttpStatusError,
    NetworkError,
    ParseError,
    TimeoutError,
    ValidationError,
)
from ..result import ErrorInfo
from ..retry import BackoffOptions


class HttpMethod(str, Enum):
    """HTTP request methods."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


class FetchErrorCode(str, Enum):
    """Failure categories reported by the HTTP clients."""

    TIMEOUT = "timeout"
    NETWORK_ERROR = "network_error"
    HTTP_ERROR = "http_error"
    PARSE_ERROR = "parse_error"
    VALIDATION_ERROR = "validation_error"
    FETCH_ERROR = "fetch_error"


_EXCEPTION_TYPES: dict[str, type[FetchError]] = {
    FetchErrorCode.TIMEOUT.value: TimeoutError,
    FetchErrorCode.NETWORK_ERROR.value: NetworkError,
    FetchErrorCode.PARSE_ERROR.value: ParseError,
    FetchErrorCode.VALIDATION_ERROR.value: ValidationError,
}


@dataclass(frozen=True)
class FetchErrorInfo(ErrorInfo):
    """
    ErrorInfo for a failed HTTP request.

    Attributes:
        url: Full request URL
        method: Request method
        status_code: Response status, when a response was received
        response: Decoded response body (JSON data or text), when available
    """

    type: str = "fetch"
    code: str = FetchErrorCode.FETCH_ERROR.value
    url: str = ""
    method: HttpMethod = HttpMethod.GET
    status_code: int | None = None
    response: Any = None

    def to_exception(self) -> FetchError:
        """Convert to the matching FetchError subclass, e.g. for unwrap_or_raise."""
        context = {"url": self.url, "method": HttpMethod(self.method).value}
        if self.code == FetchErrorCode.HTTP_ERROR.value:
            exc: FetchError = HttpStatusError(self.message, status_code=self.status_code, **context)
        elif self.code in _EXCEPTION_TYPES:
            exc = _EXCEPTION_TYPES[self.code](self.message, **context)
        else:
            exc = FetchError(
                self.message,
                recoverable=self.recoverable,
                code=self.code,
                status_code=self.status_code,
                **context,
            )
        if self.cause is not None:
            exc.__cause__ = self.cause
        return exc


@dataclass(frozen=True)
class FetchRetryOptions:
    """
    Retry configuration for HTTP requests.

    Only recoverable failures are retried: timeouts, network errors and 5xx
    responses.

    Attributes:
        max_retries: Retries allowed after the first attempt
        base_ms: Base backoff delay in milliseconds (default: 100)
        max_ms: Backoff cap in milliseconds (default: 10000)
        jitter_factor: Backoff jitter fraction (default: 0.1 = ±10%)
        on_retry: Optional callback(attempt, error) called before each retry
    """

    max_retries: int
    base_ms: float = 100
    max_ms: float = 10_000
    jitter_factor: float = 0.1
    on_retry: Callable[[int, FetchErrorInfo], None] | None = None

    def __post_init__(self) -> None:
        if self.max_retries < 0:
            raise ValueError(f"max_retries must be non-negative, got {self.max_retries}")

    def backoff_options(self) -> BackoffOptions:
        return BackoffOptions(base_ms=self.base_ms, max_ms=self.max_ms, jitter_factor=self.jitter_factor)

    @classmethod
    def aggressive(cls) -> "FetchRetryOptions":
        """Preset for aggressive retry (more attempts, longer delays)."""
        return cls(max_retries=10, base_ms=2_000, max_ms=120_000)

    @classmethod
    def conservative(cls) -> "FetchRetryOptions":
        """Preset for conservative retry (fewer attempts, shorter delays)."""
        return cls(max_retries=3, base_ms=500, max_ms=10_000)

    @classmethod
    def no_retry(cls) -> "FetchRetryOptions":
        """Preset for no retry (single attempt only)."""
        return cls(max_retries=0)

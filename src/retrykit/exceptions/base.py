"""
Base exception classes for retrykit.

Each exception carries a `recoverable` flag indicating whether repeating the
failed operation could plausibly succeed. The flag is what `recoverable_only`
inspects when the exception-based retry engine decides to continue.
"""

from typing import Any


class RetryKitError(Exception):
    """Base exception for all retrykit errors."""

    def __init__(
        self,
        message: str,
        *,
        recoverable: bool = False,
        code: str | None = None,
        status_code: int | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.recoverable = recoverable
        self.code = code
        self.status_code = status_code

    def __str__(self) -> str:
        parts = [self.message]
        if self.code:
            parts.insert(0, f"[{self.code}]")
        if self.status_code:
            parts.append(f"(status: {self.status_code})")
        return " ".join(parts)


class UnwrapError(RetryKitError, RuntimeError):
    """Raised by unwrap_or_raise when a Failure is unwrapped without a transform."""

    def __init__(self, message: str = "Called unwrap on a failure", *, error: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.error = error


class FetchError(RetryKitError):
    """Raised when an HTTP request fails and the caller asked for an exception."""

    def __init__(
        self,
        message: str = "Fetch failed",
        *,
        url: str | None = None,
        method: str | None = None,
        **kwargs,
    ):
        super().__init__(message, **kwargs)
        self.url = url
        self.method = method


class TimeoutError(FetchError):
    """Raised when a request times out. Always recoverable."""

    def __init__(self, message: str = "Request timed out", **kwargs):
        kwargs.setdefault("code", "timeout")
        super().__init__(message, recoverable=True, **kwargs)


class NetworkError(FetchError):
    """Raised when the connection fails. Always recoverable."""

    def __init__(self, message: str = "Network error", **kwargs):
        kwargs.setdefault("code", "network_error")
        super().__init__(message, recoverable=True, **kwargs)


class HttpStatusError(FetchError):
    """Raised on a non-2xx response. Recoverable only for 5xx."""

    def __init__(self, message: str = "HTTP error", *, status_code: int | None = None, **kwargs):
        kwargs.setdefault("code", "http_error")
        recoverable = status_code is not None and 500 <= status_code < 600
        super().__init__(message, recoverable=recoverable, status_code=status_code, **kwargs)


class ParseError(FetchError):
    """Raised when a response body cannot be decoded. Not recoverable."""

    def __init__(self, message: str = "Failed to parse response", **kwargs):
        kwargs.setdefault("code", "parse_error")
        super().__init__(message, recoverable=False, **kwargs)


class ValidationError(FetchError):
    """Raised when a response does not match the expected schema. Not recoverable."""

    def __init__(self, message: str = "Validation error", **kwargs):
        kwargs.setdefault("code", "validation_error")
        super().__init__(message, recoverable=False, **kwargs)

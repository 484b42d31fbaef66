"""
retrykit - Exception Hierarchy.

Exceptions carrying a `recoverable` flag for retry-aware error handling.
"""

from .base import (
    RetryKitError,
    UnwrapError,
    FetchError,
    TimeoutError,
    NetworkError,
    HttpStatusError,
    ParseError,
    ValidationError,
)

__all__ = [
    "RetryKitError",
    "UnwrapError",
    "FetchError",
    "TimeoutError",
    "NetworkError",
    "HttpStatusError",
    "ParseError",
    "ValidationError",
]

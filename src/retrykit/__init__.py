"""
retrykit - Composable primitives for resilient application code.

A Result type for exception-free error handling, a retry/backoff engine,
a pluggable logger, and HTTP clients built on top of them.
"""

from .result import (
    Result,
    Success,
    Failure,
    ErrorInfo,
    success,
    failure,
    is_success,
    is_failure,
    unwrap,
    unwrap_or_raise,
    map_result,
    flat_map,
    map_error,
    map_async,
    flat_map_async,
    try_async,
    try_call,
    all_results,
)
from .exceptions import (
    RetryKitError,
    UnwrapError,
    FetchError,
    TimeoutError,
    NetworkError,
    HttpStatusError,
    ParseError,
    ValidationError,
)
from .retry import (
    BackoffOptions,
    RetryOptions,
    compute_delay,
    create_backoff,
    exponential_backoff,
    exponential_backoff_with_jitter,
    no_backoff,
    retry,
    retry_async,
    async_with_retry,
    recoverable_only,
    retry_result,
)
from .logger import (
    LogLevel,
    Logger,
    create_logger,
    StdlibStrategy,
    StderrStrategy,
    JsonlStrategy,
)
from .fetch import (
    FetchClient,
    JsonClient,
    StreamingClient,
    FetchErrorInfo,
    FetchRetryOptions,
    HttpMethod,
    parse_sse,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Result
    "Result",
    "Success",
    "Failure",
    "ErrorInfo",
    "success",
    "failure",
    "is_success",
    "is_failure",
    "unwrap",
    "unwrap_or_raise",
    "map_result",
    "flat_map",
    "map_error",
    "map_async",
    "flat_map_async",
    "try_async",
    "try_call",
    "all_results",
    # Exceptions
    "RetryKitError",
    "UnwrapError",
    "FetchError",
    "TimeoutError",
    "NetworkError",
    "HttpStatusError",
    "ParseError",
    "ValidationError",
    # Retry
    "BackoffOptions",
    "RetryOptions",
    "compute_delay",
    "create_backoff",
    "exponential_backoff",
    "exponential_backoff_with_jitter",
    "no_backoff",
    "retry",
    "retry_async",
    "async_with_retry",
    "recoverable_only",
    "retry_result",
    # Logger
    "LogLevel",
    "Logger",
    "create_logger",
    "StdlibStrategy",
    "StderrStrategy",
    "JsonlStrategy",
    # HTTP
    "FetchClient",
    "JsonClient",
    "StreamingClient",
    "FetchErrorInfo",
    "FetchRetryOptions",
    "HttpMethod",
    "parse_sse",
]

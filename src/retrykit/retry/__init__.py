"""
retrykit - Retry Logic.

Retry engines for raising and Result-returning operations, with exponential
backoff and jitter.
"""

from .config import (
    BackoffFunction,
    BackoffOptions,
    OnRetry,
    PreparedRetry,
    RetryCondition,
    RetryOptions,
    prepare_options,
)
from .backoff import (
    compute_delay,
    create_backoff,
    exponential_backoff,
    exponential_backoff_with_jitter,
    no_backoff,
)
from .engine import retry, retry_async, async_with_retry, recoverable_only
from .result_engine import retry_result

__all__ = [
    # Configuration
    "BackoffFunction",
    "BackoffOptions",
    "OnRetry",
    "PreparedRetry",
    "RetryCondition",
    "RetryOptions",
    "prepare_options",
    # Backoff
    "compute_delay",
    "create_backoff",
    "exponential_backoff",
    "exponential_backoff_with_jitter",
    "no_backoff",
    # Engines
    "retry",
    "retry_async",
    "async_with_retry",
    "recoverable_only",
    "retry_result",
]

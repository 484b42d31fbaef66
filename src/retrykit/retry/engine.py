"""
Exception-based retry engine.

The operation signals failure by raising. Once the retry budget is spent or the
retry condition declines, the operation's own exception is re-raised unchanged.
"""

import functools
import logging
from typing import Any, Awaitable, Callable, ParamSpec, TypeVar

from .config import RetryOptions, prepare_options

logger = logging.getLogger(__name__)

P = ParamSpec("P")
T = TypeVar("T")


def _truthy(error: Any, attempt: int) -> bool:
    return bool(error)


def recoverable_only(error: Any, attempt: int) -> bool:
    """Retry condition that continues only for errors flagged `recoverable=True`."""
    return getattr(error, "recoverable", False) is True


async def retry_async(
    operation: Callable[[], Awaitable[T]],
    options: RetryOptions[Exception],
) -> T:
    """
    Run an async operation, retrying when it raises.

    Attempt 1 runs immediately. After a failed attempt n the session stops and
    re-raises when n > max_retries or retry_condition(error, n) is false;
    otherwise on_retry(n, error) is called, backoff(n) is awaited and attempt
    n + 1 starts. Total attempts never exceed max_retries + 1.

    Args:
        operation: Zero-argument coroutine function to run
        options: Retry configuration

    Returns:
        The operation's first successful return value

    Raises:
        The last exception raised by the operation
    """
    prepared = prepare_options(options, _truthy)
    attempt = 1

    while True:
        try:
            return await operation()
        except Exception as e:
            if attempt > prepared.max_retries or not prepared.retry_condition(e, attempt):
                raise
            if prepared.on_retry:
                prepared.on_retry(attempt, e)
            await prepared.backoff(attempt)
            attempt += 1


async def retry(
    operation: Callable[[], T],
    options: RetryOptions[Exception],
) -> T:
    """
    Run a synchronous operation under the async retry engine.

    The operation is lifted into a coroutine; attempt counting, callbacks and
    backoff are exactly those of retry_async.
    """

    async def lifted() -> T:
        return operation()

    return await retry_async(lifted, options)


def async_with_retry(
    options: RetryOptions[Exception],
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[T]]]:
    """
    Decorator for async functions with retry logic.

    Args:
        options: Retry configuration; when it has no on_retry, each retry is
            logged at warning level

    Returns:
        Decorated async function with retry behavior
    """
    if options.on_retry is None:

        def log_retry(attempt: int, error: Exception) -> None:
            logger.warning(f"Retry {attempt}/{options.max_retries}: {error}")

        options = RetryOptions(
            max_retries=options.max_retries,
            backoff=options.backoff,
            retry_condition=options.retry_condition,
            on_retry=log_retry,
        )

    def decorator(func: Callable[P, Awaitable[T]]) -> Callable[P, Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            return await retry_async(lambda: func(*args, **kwargs), options)

        return wrapper

    return decorator

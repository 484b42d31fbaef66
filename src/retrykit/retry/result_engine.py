"""
Result-based retry engine.

The operation signals failure by returning a Failure. This engine never raises
on exhaustion: the last Failure is returned as a value.
"""

from typing import Awaitable, Callable, TypeVar

from ..result import Result, is_success
from .config import RetryOptions, prepare_options
from .engine import recoverable_only

T = TypeVar("T")
E = TypeVar("E")


async def retry_result(
    operation: Callable[[], Awaitable[Result[T, E]]],
    options: RetryOptions[E],
) -> Result[T, E]:
    """
    Run a Result-returning async operation, retrying recoverable failures.

    By default a failure is retried only when its payload has
    `recoverable=True`. A caller-supplied retry_condition replaces that check
    entirely. Attempt counting matches retry_async: at most max_retries + 1
    attempts, with on_retry and backoff only between attempts.

    Args:
        operation: Zero-argument coroutine function returning a Result
        options: Retry configuration

    Returns:
        The first Success, or the last Failure once retrying stops
    """
    prepared = prepare_options(options, recoverable_only)
    attempt = 1

    while True:
        result = await operation()
        if is_success(result):
            return result

        error = result.error
        if attempt > prepared.max_retries or not prepared.retry_condition(error, attempt):
            return result

        if prepared.on_retry:
            prepared.on_retry(attempt, error)
        await prepared.backoff(attempt)
        attempt += 1

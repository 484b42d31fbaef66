"""
Retry and backoff configuration.
"""

from dataclasses import dataclass
from typing import Awaitable, Callable, Generic, TypeVar

E = TypeVar("E")

BackoffFunction = Callable[[int], Awaitable[None]]
RetryCondition = Callable[[E, int], bool]
OnRetry = Callable[[int, E], None]


@dataclass(frozen=True)
class BackoffOptions:
    """
    Configuration for exponential backoff.

    Attributes:
        base_ms: Delay before the first retry in milliseconds (default: 200)
        max_ms: Delay cap in milliseconds (default: 8000)
        jitter_factor: Random spread as a fraction of the delay (default: 0.2 = ±20%)
    """

    base_ms: float = 200
    max_ms: float = 8000
    jitter_factor: float = 0.2

    def __post_init__(self) -> None:
        if self.base_ms < 0:
            raise ValueError(f"base_ms must be non-negative, got {self.base_ms}")
        if self.max_ms < 0:
            raise ValueError(f"max_ms must be non-negative, got {self.max_ms}")
        if not 0 <= self.jitter_factor <= 1:
            raise ValueError(f"jitter_factor must be within [0, 1], got {self.jitter_factor}")


@dataclass(frozen=True)
class RetryOptions(Generic[E]):
    """
    Configuration for one retry session.

    Attributes:
        max_retries: Retries allowed after the first attempt (required)
        backoff: Awaitable wait between attempts, called with the attempt number
        retry_condition: Predicate over (error, attempt) deciding whether to continue
        on_retry: Callback(attempt, error) invoked before each retry
    """

    max_retries: int
    backoff: BackoffFunction | None = None
    retry_condition: RetryCondition[E] | None = None
    on_retry: OnRetry[E] | None = None

    def __post_init__(self) -> None:
        if self.max_retries < 0:
            raise ValueError(f"max_retries must be non-negative, got {self.max_retries}")

    @classmethod
    def no_retry(cls) -> "RetryOptions[E]":
        """Preset for a single attempt only."""
        return cls(max_retries=0)


@dataclass(frozen=True)
class PreparedRetry(Generic[E]):
    """RetryOptions with the backoff and condition filled in."""

    max_retries: int
    backoff: BackoffFunction
    retry_condition: RetryCondition[E]
    on_retry: OnRetry[E] | None


def prepare_options(
    options: RetryOptions[E],
    default_condition: RetryCondition[E],
) -> PreparedRetry[E]:
    """
    Fill in defaults shared by both retry engines.

    Args:
        options: Caller-supplied options
        default_condition: Condition to use when the caller supplied none

    Returns:
        Fully populated options
    """
    # Imported here: backoff imports this module for BackoffOptions
    from .backoff import exponential_backoff_with_jitter

    return PreparedRetry(
        max_retries=options.max_retries,
        backoff=options.backoff or exponential_backoff_with_jitter(),
        retry_condition=options.retry_condition or default_condition,
        on_retry=options.on_retry,
    )

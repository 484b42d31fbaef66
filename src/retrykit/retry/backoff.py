"""
Backoff calculation and backoff function constructors.
"""

import asyncio
import math
import random
from typing import Awaitable, Callable, Protocol

from .config import BackoffFunction, BackoffOptions


class RandomSource(Protocol):
    """Anything with `random.Random.uniform` semantics."""

    def uniform(self, a: float, b: float) -> float: ...


Sleep = Callable[[float], Awaitable[None]]


def compute_delay(
    attempt: int,
    options: BackoffOptions,
    rng: RandomSource | None = None,
) -> float:
    """
    Calculate the backoff delay for a given attempt.

    Args:
        attempt: One-based attempt number that just failed
        options: Backoff configuration
        rng: Random source for jitter (default: the `random` module)

    Returns:
        Delay in milliseconds, never negative
    """
    if attempt < 1:
        raise ValueError(f"attempt must be >= 1, got {attempt}")

    # Cap the exponent before multiplying so huge attempt numbers stay finite
    exponent = min(attempt - 1, 1023)
    delay = min(options.base_ms * (2**exponent), options.max_ms)

    # Zero jitter must not consume a random draw
    if options.jitter_factor == 0:
        return delay

    source = rng if rng is not None else random
    jitter = delay * options.jitter_factor * source.uniform(-1, 1)
    return max(0, math.floor(delay + jitter))


def exponential_backoff_with_jitter(
    options: BackoffOptions | None = None,
    *,
    rng: RandomSource | None = None,
    sleep: Sleep = asyncio.sleep,
) -> BackoffFunction:
    """
    Build an exponential backoff with ±jitter.

    Args:
        options: Backoff configuration (default: BackoffOptions())
        rng: Random source for jitter, injectable for deterministic tests
        sleep: Awaitable sleep taking seconds (default: asyncio.sleep)

    Returns:
        Async function that waits the computed delay for an attempt number
    """
    if options is None:
        options = BackoffOptions()

    async def backoff(attempt: int) -> None:
        delay_ms = compute_delay(attempt, options, rng)
        await sleep(delay_ms / 1000)

    return backoff


def exponential_backoff(
    base_ms: float = 200,
    *,
    rng: RandomSource | None = None,
    sleep: Sleep = asyncio.sleep,
) -> BackoffFunction:
    """Build a deterministic exponential backoff (no jitter, default 8000ms cap)."""
    return exponential_backoff_with_jitter(
        BackoffOptions(base_ms=base_ms, jitter_factor=0), rng=rng, sleep=sleep
    )


def create_backoff(
    options: BackoffOptions | None = None,
    *,
    rng: RandomSource | None = None,
    sleep: Sleep = asyncio.sleep,
) -> BackoffFunction:
    """Build the default backoff. Same algorithm as exponential_backoff_with_jitter."""
    return exponential_backoff_with_jitter(options, rng=rng, sleep=sleep)


def no_backoff() -> BackoffFunction:
    """Build a backoff that never waits."""

    async def backoff(attempt: int) -> None:
        return None

    return backoff

"""
Constructors, predicates and combinators for the Result type.

None of these raise, except `unwrap_or_raise` when handed a Failure: it is the
one place where Result-based code re-enters exception-based control flow.
`try_async` and `try_call` are the opposite boundary.
"""

from typing import Any, Awaitable, Callable, Iterable, ParamSpec, TypeGuard, TypeVar

from ..exceptions import UnwrapError
from .types import Failure, Result, Success

P = ParamSpec("P")
T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")


def success(value: T) -> Success[T]:
    """Create a successful Result."""
    return Success(value)


def failure(error: E) -> Failure[E]:
    """Create a failed Result."""
    return Failure(error)


def is_success(result: Result[T, E]) -> TypeGuard[Success[T]]:
    """Check whether a Result is a Success."""
    return isinstance(result, Success)


def is_failure(result: Result[T, E]) -> TypeGuard[Failure[E]]:
    """Check whether a Result is a Failure."""
    return isinstance(result, Failure)


def unwrap(result: Result[T, E], fallback: T) -> T:
    """Return the success value, or `fallback` on failure."""
    return result.value if is_success(result) else fallback


def _default_transform(error: Any) -> BaseException:
    return UnwrapError(str(error), error=error)


def unwrap_or_raise(
    result: Result[T, E],
    transform: Callable[[E], BaseException] | None = None,
) -> T:
    """
    Return the success value or raise.

    Args:
        result: Result to unwrap
        transform: Converts the failure payload into the exception to raise
            (default: UnwrapError built from the payload's string form)

    Returns:
        The success value

    Raises:
        The exception produced by `transform` when the Result is a Failure
    """
    if is_success(result):
        return result.value
    raise (transform or _default_transform)(result.error)


def map_result(result: Result[T, E], fn: Callable[[T], U]) -> Result[U, E]:
    """Transform the success value; failures pass through untouched."""
    if is_success(result):
        return success(fn(result.value))
    return result


def flat_map(result: Result[T, E], fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
    """Chain a Result-returning function onto a success."""
    if is_success(result):
        return fn(result.value)
    return result


def map_error(result: Result[T, E], fn: Callable[[E], F]) -> Result[T, F]:
    """Transform the failure payload; successes pass through untouched."""
    if is_failure(result):
        return failure(fn(result.error))
    return result


async def map_async(result: Result[T, E], fn: Callable[[T], Awaitable[U]]) -> Result[U, E]:
    """Async counterpart of map_result."""
    if is_success(result):
        return success(await fn(result.value))
    return result


async def flat_map_async(
    result: Result[T, E],
    fn: Callable[[T], Awaitable[Result[U, E]]],
) -> Result[U, E]:
    """Async counterpart of flat_map."""
    if is_success(result):
        return await fn(result.value)
    return result


async def try_async(
    fn: Callable[P, Awaitable[T]],
    *args: P.args,
    **kwargs: P.kwargs,
) -> Result[T, Exception]:
    """Await `fn(*args, **kwargs)` and capture a raised exception as a Failure."""
    try:
        return success(await fn(*args, **kwargs))
    except Exception as e:
        return failure(e)


def try_call(fn: Callable[P, T], *args: P.args, **kwargs: P.kwargs) -> Result[T, Exception]:
    """Call `fn(*args, **kwargs)` and capture a raised exception as a Failure."""
    try:
        return success(fn(*args, **kwargs))
    except Exception as e:
        return failure(e)


def all_results(results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """
    Combine Results into one.

    Returns a Success with every value in order, or the earliest Failure.
    """
    values: list[T] = []
    for result in results:
        if is_failure(result):
            return result
        values.append(result.value)
    return success(values)

"""Tests for result module - behavior focused."""

import pytest

from retrykit.exceptions import UnwrapError
from retrykit.result import (
    ErrorInfo,
    Failure,
    Success,
    all_results,
    create_error_info,
    database_error,
    failure,
    flat_map,
    flat_map_async,
    http_error,
    io_error,
    is_failure,
    is_success,
    map_async,
    map_error,
    map_result,
    network_error,
    success,
    system_error,
    try_async,
    try_call,
    unwrap,
    unwrap_or_raise,
    validation_error,
)


def explode(*args):
    raise AssertionError("transform must not be called")


async def explode_async(*args):
    raise AssertionError("transform must not be called")


class TestConstructors:
    """Test Success/Failure construction and predicates."""

    def test_success_holds_value(self):
        """success() wraps a value and is recognised as a Success."""
        result = success(42)

        assert isinstance(result, Success)
        assert result.value == 42
        assert is_success(result) is True
        assert is_failure(result) is False

    def test_failure_holds_error(self):
        """failure() wraps an error and is recognised as a Failure."""
        result = failure("bad")

        assert isinstance(result, Failure)
        assert result.error == "bad"
        assert is_failure(result) is True
        assert is_success(result) is False

    def test_success_of_none_is_still_success(self):
        """A None value does not make a Result a failure."""
        assert is_success(success(None))

    def test_variants_have_no_foreign_field(self):
        """A Success has no error attribute and a Failure has no value."""
        assert not hasattr(success(1), "error")
        assert not hasattr(failure(1), "value")

    def test_results_are_immutable(self):
        """Result variants are frozen."""
        result = success(1)

        with pytest.raises(AttributeError):
            result.value = 2

    def test_results_compare_by_content(self):
        """Equal payloads give equal Results."""
        assert success([1, 2]) == success([1, 2])
        assert failure("x") != success("x")


class TestUnwrap:
    """Test extracting values out of Results."""

    def test_unwrap_success_returns_value(self):
        """unwrap on Success ignores the fallback."""
        assert unwrap(success("v"), "fallback") == "v"

    def test_unwrap_failure_returns_fallback(self):
        """unwrap on Failure returns the fallback."""
        assert unwrap(failure("e"), "fallback") == "fallback"

    def test_unwrap_or_raise_returns_value(self):
        """unwrap_or_raise on Success returns the value."""
        assert unwrap_or_raise(success(3)) == 3

    def test_unwrap_or_raise_default_exception(self):
        """Without a transform, a Failure raises UnwrapError with the payload attached."""
        error = system_error("disk full")

        with pytest.raises(UnwrapError) as exc_info:
            unwrap_or_raise(failure(error))

        assert exc_info.value.error is error
        assert "disk full" in str(exc_info.value)

    def test_unwrap_or_raise_custom_transform(self):
        """The transform decides which exception is raised."""
        with pytest.raises(KeyError, match="missing"):
            unwrap_or_raise(failure("missing"), lambda e: KeyError(e))

    def test_try_call_round_trip(self):
        """Unwrapping a captured value gives back what the function returned."""
        assert unwrap_or_raise(try_call(lambda: {"a": 1})) == {"a": 1}


class TestCombinators:
    """Test map/flat_map/map_error and async variants."""

    def test_map_transforms_success(self):
        """map_result applies fn to the success value."""
        assert map_result(success(2), lambda v: v * 10) == success(20)

    def test_map_skips_failure(self):
        """map_result passes a Failure through without calling fn."""
        original = failure("e")

        assert map_result(original, explode) is original

    def test_flat_map_chains(self):
        """flat_map returns fn's Result as-is."""
        assert flat_map(success(2), lambda v: failure(f"bad {v}")) == failure("bad 2")

    def test_flat_map_skips_failure(self):
        """flat_map passes a Failure through without calling fn."""
        original = failure("e")

        assert flat_map(original, explode) is original

    def test_map_error_transforms_failure(self):
        """map_error rewrites the error payload."""
        assert map_error(failure("e"), str.upper) == failure("E")

    def test_map_error_skips_success(self):
        """map_error passes a Success through without calling fn."""
        original = success(1)

        assert map_error(original, explode) is original

    @pytest.mark.asyncio
    async def test_map_async_transforms_success(self):
        """map_async awaits fn on the success value."""

        async def double(v):
            return v * 2

        assert await map_async(success(4), double) == success(8)

    @pytest.mark.asyncio
    async def test_map_async_skips_failure(self):
        """map_async passes a Failure through without awaiting fn."""
        original = failure("e")

        assert await map_async(original, explode_async) is original

    @pytest.mark.asyncio
    async def test_flat_map_async_chains(self):
        """flat_map_async returns the awaited Result."""

        async def check(v):
            return success(v) if v > 0 else failure("non-positive")

        assert await flat_map_async(success(1), check) == success(1)
        assert await flat_map_async(success(-1), check) == failure("non-positive")

    @pytest.mark.asyncio
    async def test_flat_map_async_skips_failure(self):
        """flat_map_async passes a Failure through without awaiting fn."""
        original = failure("e")

        assert await flat_map_async(original, explode_async) is original


class TestCapture:
    """Test turning raised exceptions into Failures."""

    def test_try_call_captures_exception(self):
        """A raised exception becomes the Failure payload."""
        result = try_call(int, "not a number")

        assert is_failure(result)
        assert isinstance(result.error, ValueError)

    def test_try_call_passes_arguments(self):
        """Positional and keyword arguments reach the function."""
        assert try_call(int, "ff", base=16) == success(255)

    @pytest.mark.asyncio
    async def test_try_async_success(self):
        """try_async wraps the awaited value."""

        async def fetch(x):
            return x + 1

        assert await try_async(fetch, 1) == success(2)

    @pytest.mark.asyncio
    async def test_try_async_captures_exception(self):
        """try_async turns a raised exception into a Failure."""
        error = ConnectionError("down")

        async def fetch():
            raise error

        result = await try_async(fetch)

        assert is_failure(result)
        assert result.error is error


class TestAllResults:
    """Test combining Results."""

    def test_all_success_collects_values(self):
        """Every Success contributes its value, in order."""
        assert all_results([success(1), success(2), success(3)]) == success([1, 2, 3])

    def test_empty_input_is_success(self):
        """No Results combine to an empty list."""
        assert all_results([]) == success([])

    def test_earliest_failure_wins(self):
        """The first Failure in order is returned."""
        first = failure("first")

        result = all_results([success(1), first, failure("second")])

        assert result is first

    def test_accepts_generators(self):
        """Any iterable of Results is accepted."""
        assert all_results(success(i) for i in range(3)) == success([0, 1, 2])


class TestErrorFactories:
    """Test ErrorInfo factories."""

    def test_error_info_defaults(self):
        """ErrorInfo defaults to a non-recoverable general error."""
        info = ErrorInfo(message="oops")

        assert info.recoverable is False
        assert info.type == "general"
        assert str(info) == "[general:error] oops"

    def test_create_error_info_collects_details(self):
        """Extra keyword arguments land in details."""
        cause = RuntimeError("root")
        info = create_error_info("queue", "full", "Queue is full", recoverable=True, cause=cause, size=10)

        assert info.type == "queue"
        assert info.code == "full"
        assert info.recoverable is True
        assert info.cause is cause
        assert info.details == {"size": 10}

    def test_validation_error_is_recoverable(self):
        """Validation errors carry the field and are recoverable."""
        info = validation_error("must be positive", field="age")

        assert info.type == "validation"
        assert info.recoverable is True
        assert info.details["field"] == "age"

    def test_network_error_is_recoverable(self):
        """Network errors are recoverable."""
        assert network_error("reset", url="https://x.test").recoverable is True

    def test_system_error_not_recoverable(self):
        """System errors are not recoverable."""
        assert system_error("segfault").recoverable is False

    @pytest.mark.parametrize("status,expected", [(404, False), (429, False), (500, True), (503, True)])
    def test_http_error_recoverable_for_5xx(self, status, expected):
        """HTTP errors are recoverable only for server errors."""
        info = http_error("failed", status)

        assert info.recoverable is expected
        assert info.code == f"http_{status}"

    def test_database_and_io_errors_not_recoverable(self):
        """Database and IO errors default to non-recoverable."""
        db = database_error("locked", operation="insert", table="users")
        io = io_error("denied", path="/tmp/x", operation="write")

        assert db.recoverable is False
        assert db.details == {"operation": "insert", "table": "users"}
        assert io.recoverable is False
        assert io.details["path"] == "/tmp/x"

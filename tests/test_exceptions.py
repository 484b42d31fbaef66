"""Tests for exceptions module - behavior focused."""

import pytest

from retrykit.exceptions import (
    FetchError,
    HttpStatusError,
    NetworkError,
    ParseError,
    RetryKitError,
    TimeoutError,
    UnwrapError,
    ValidationError,
)
from retrykit.fetch import FetchErrorCode, FetchErrorInfo, HttpMethod


class TestRecoverableFlag:
    """Test that exceptions have correct recoverable defaults."""

    def test_timeout_error_is_recoverable(self):
        """Timeout errors should be recoverable."""
        assert TimeoutError().recoverable is True

    def test_network_error_is_recoverable(self):
        """Network errors should be recoverable."""
        assert NetworkError().recoverable is True

    @pytest.mark.parametrize("status", [500, 502, 503, 599])
    def test_server_status_is_recoverable(self, status):
        """5xx status errors should be recoverable."""
        assert HttpStatusError(status_code=status).recoverable is True

    @pytest.mark.parametrize("status", [400, 401, 404, 429])
    def test_client_status_not_recoverable(self, status):
        """4xx status errors should not be recoverable."""
        assert HttpStatusError(status_code=status).recoverable is False

    def test_parse_error_not_recoverable(self):
        """Parse errors should not be recoverable."""
        assert ParseError().recoverable is False

    def test_validation_error_not_recoverable(self):
        """Validation errors should not be recoverable."""
        assert ValidationError().recoverable is False

    def test_base_error_not_recoverable_by_default(self):
        """Base RetryKitError should not be recoverable by default."""
        assert RetryKitError("test").recoverable is False


class TestExceptionStringRepresentation:
    """Test exception string formatting."""

    def test_message_only(self):
        """Error with just message shows message."""
        assert str(RetryKitError("Something went wrong")) == "Something went wrong"

    def test_with_code(self):
        """Error with code shows code prefix."""
        assert str(RetryKitError("Failed", code="E001")) == "[E001] Failed"

    def test_with_status_code(self):
        """Error with status code shows status suffix."""
        assert str(RetryKitError("Failed", status_code=500)) == "Failed (status: 500)"

    def test_with_code_and_status(self):
        """Error with both shows full format."""
        error = HttpStatusError("HTTP error: 503 Service Unavailable", status_code=503)
        assert str(error) == "[http_error] HTTP error: 503 Service Unavailable (status: 503)"

    def test_subclass_default_code(self):
        """Subclasses set their own error code."""
        assert TimeoutError().code == "timeout"
        assert NetworkError().code == "network_error"
        assert ParseError().code == "parse_error"


class TestExceptionHierarchy:
    """Test exception inheritance for catch patterns."""

    @pytest.mark.parametrize(
        "exc_type", [TimeoutError, NetworkError, HttpStatusError, ParseError, ValidationError]
    )
    def test_fetch_errors_catchable_as_fetch_error(self, exc_type):
        """All HTTP failures can be caught as FetchError and RetryKitError."""
        with pytest.raises(FetchError):
            raise exc_type()
        assert issubclass(exc_type, RetryKitError)

    def test_unwrap_error_is_runtime_error(self):
        """UnwrapError can be caught as a plain RuntimeError."""
        with pytest.raises(RuntimeError):
            raise UnwrapError("boom", error="payload")

    def test_unwrap_error_keeps_payload(self):
        """UnwrapError carries the failure payload it was built from."""
        assert UnwrapError("boom", error={"code": 1}).error == {"code": 1}

    def test_fetch_error_keeps_request_context(self):
        """FetchError records url and method."""
        error = FetchError("failed", url="https://api.test/x", method="POST")
        assert error.url == "https://api.test/x"
        assert error.method == "POST"


class TestFetchErrorInfoConversion:
    """Test FetchErrorInfo.to_exception mapping."""

    def test_timeout_maps_to_timeout_error(self):
        """Timeout payload converts to TimeoutError with request context."""
        cause = OSError("slow")
        info = FetchErrorInfo(
            message="Request timeout after 100ms",
            code=FetchErrorCode.TIMEOUT.value,
            recoverable=True,
            url="https://api.test/slow",
            method=HttpMethod.GET,
            cause=cause,
        )

        exc = info.to_exception()

        assert isinstance(exc, TimeoutError)
        assert exc.url == "https://api.test/slow"
        assert exc.method == "GET"
        assert exc.__cause__ is cause

    def test_http_error_keeps_status(self):
        """HTTP payload converts to HttpStatusError with the status code."""
        info = FetchErrorInfo(
            message="HTTP error: 404 Not Found",
            code=FetchErrorCode.HTTP_ERROR.value,
            status_code=404,
        )

        exc = info.to_exception()

        assert isinstance(exc, HttpStatusError)
        assert exc.status_code == 404
        assert exc.recoverable is False

    def test_unknown_code_falls_back_to_fetch_error(self):
        """Unmapped codes produce a generic FetchError preserving the flag."""
        info = FetchErrorInfo(message="odd", code="custom", recoverable=True)

        exc = info.to_exception()

        assert type(exc) is FetchError
        assert exc.code == "custom"
        assert exc.recoverable is True

"""
Factories for common ErrorInfo payloads.

Each factory fixes the error category and a sensible `recoverable` default;
category-specific fields land in `details`.
"""

from typing import Any

from .types import ErrorInfo


def create_error_info(
    type: str,
    code: str,
    message: str,
    *,
    recoverable: bool = False,
    cause: BaseException | None = None,
    **details: Any,
) -> ErrorInfo:
    """Create an ErrorInfo with arbitrary extra details."""
    return ErrorInfo(
        message=message,
        recoverable=recoverable,
        type=type,
        code=code,
        cause=cause,
        details=details,
    )


def validation_error(message: str, field: str | None = None) -> ErrorInfo:
    """Input validation failure. Recoverable: the caller may correct the input."""
    return create_error_info("validation", "validation_error", message, recoverable=True, field=field)


def system_error(message: str, code: str = "system_error") -> ErrorInfo:
    return create_error_info("system", code, message, recoverable=False)


def network_error(message: str, url: str | None = None) -> ErrorInfo:
    return create_error_info("network", "network_error", message, recoverable=True, url=url)


def http_error(message: str, status_code: int, url: str | None = None) -> ErrorInfo:
    """HTTP failure; 5xx responses are treated as transient."""
    return create_error_info(
        "http",
        f"http_{status_code}",
        message,
        recoverable=status_code >= 500,
        status_code=status_code,
        url=url,
    )


def database_error(
    message: str,
    operation: str | None = None,
    table: str | None = None,
) -> ErrorInfo:
    return create_error_info(
        "database", "database_error", message, recoverable=False, operation=operation, table=table
    )


def io_error(message: str, path: str | None = None, operation: str | None = None) -> ErrorInfo:
    return create_error_info("io", "io_error", message, recoverable=False, path=path, operation=operation)

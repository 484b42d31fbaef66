"""
retrykit - Result Type.

Exception-free success/failure container with transformation helpers.
"""

from .types import Result, Success, Failure, ErrorInfo
from .utils import (
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
from .errors import (
    create_error_info,
    validation_error,
    system_error,
    network_error,
    http_error,
    database_error,
    io_error,
)

__all__ = [
    # Types
    "Result",
    "Success",
    "Failure",
    "ErrorInfo",
    # Constructors and combinators
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
    # Error factories
    "create_error_info",
    "validation_error",
    "system_error",
    "network_error",
    "http_error",
    "database_error",
    "io_error",
]

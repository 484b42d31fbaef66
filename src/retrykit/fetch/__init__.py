"""
retrykit - HTTP Clients.

Result-returning HTTP, JSON and streaming clients with retry.
"""

from .types import FetchErrorCode, FetchErrorInfo, FetchRetryOptions, HttpMethod
from .errors import (
    create_fetch_error,
    error_from_response,
    http_error,
    network_error,
    parse_error,
    timeout_error,
    validation_error,
)
from .base import BaseHttpClient, build_url, encode_body
from .client import FetchClient
from .json_client import JsonClient
from .streaming import SSEEvent, StreamingClient, parse_sse

__all__ = [
    # Types
    "FetchErrorCode",
    "FetchErrorInfo",
    "FetchRetryOptions",
    "HttpMethod",
    # Errors
    "create_fetch_error",
    "error_from_response",
    "http_error",
    "network_error",
    "parse_error",
    "timeout_error",
    "validation_error",
    # Clients
    "BaseHttpClient",
    "build_url",
    "encode_body",
    "FetchClient",
    "JsonClient",
    "StreamingClient",
    "SSEEvent",
    "parse_sse",
]

"""
Base HTTP client.

Holds the configuration shared by every client (base URL, default headers,
timeout, retry, logger, transport) and the request-building helpers.
"""

import json
from abc import ABC, abstractmethod
from typing import Any, Mapping
from urllib.parse import urlencode

import httpx

from ..logger import Logger, create_logger
from .types import FetchRetryOptions

QueryParams = Mapping[str, str | int | float | bool | None]


def build_url(url: str, base_url: str | None = None, params: QueryParams | None = None) -> str:
    """
    Join `url` onto `base_url` and append query parameters.

    Exactly one slash separates base and path. Parameters whose value is None
    are dropped; the rest are appended with "?" or, when the URL already has
    a query string, "&".
    """
    full_url = url
    if base_url:
        if base_url.endswith("/") and url.startswith("/"):
            full_url = base_url + url[1:]
        elif not base_url.endswith("/") and not url.startswith("/"):
            full_url = f"{base_url}/{url}"
        else:
            full_url = base_url + url

    if params:
        query = urlencode([(key, _param_str(value)) for key, value in params.items() if value is not None])
        if query:
            full_url = f"{full_url}{'&' if '?' in full_url else '?'}{query}"

    return full_url


def _param_str(value: Any) -> str:
    # "true"/"false", not "True"/"False"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_body(body: Any) -> str | bytes | None:
    """Serialize a request body: strings and bytes pass through, anything else becomes JSON."""
    if body is None or isinstance(body, (str, bytes)):
        return body
    return json.dumps(body)


class BaseHttpClient(ABC):
    """
    Abstract base class for HTTP clients.

    All clients share this configuration and never raise for transport or
    HTTP failures; they return a Failure instead.
    """

    def __init__(
        self,
        base_url: str | None = None,
        headers: Mapping[str, str] | None = None,
        timeout_ms: float | None = None,
        retry: FetchRetryOptions | None = None,
        logger: Logger | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: Prefix joined onto every request URL
            headers: Default headers, overridden per request
            timeout_ms: Default request timeout in milliseconds (None: no timeout)
            retry: Default retry configuration (None: single attempt)
            logger: Logger for request tracing (default: shared retrykit logger)
            transport: httpx transport override, e.g. httpx.MockTransport
        """
        self.base_url = base_url
        self.headers = dict(headers or {})
        self.timeout_ms = timeout_ms
        self.retry = retry
        self.logger = (logger or create_logger()).with_context(self.client_name)
        self.transport = transport

    @property
    @abstractmethod
    def client_name(self) -> str:
        """Return the client name used as log context."""
        ...

    def _merge_headers(self, headers: Mapping[str, str] | None) -> dict[str, str]:
        return {**self.headers, **(headers or {})}

    def _http_client(self, timeout_ms: float | None) -> httpx.AsyncClient:
        timeout = timeout_ms / 1000 if timeout_ms else None
        return httpx.AsyncClient(timeout=timeout, transport=self.transport)

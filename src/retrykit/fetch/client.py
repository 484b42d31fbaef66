"""
Result-returning HTTP client over httpx.

Every attempt opens its own `httpx.AsyncClient`. Retries go through
`retry_result`, so only recoverable failures (timeouts, network errors, 5xx)
are retried.
"""

from typing import Any, Mapping

import httpx

from ..result import Result, failure, success
from ..retry import RetryOptions, exponential_backoff_with_jitter, retry_result
from .base import BaseHttpClient, QueryParams, build_url, encode_body
from .errors import error_from_response, network_error, timeout_error
from .types import FetchErrorInfo, FetchRetryOptions, HttpMethod

FetchResult = Result[httpx.Response, FetchErrorInfo]


class FetchClient(BaseHttpClient):
    """
    HTTP client returning `Result[httpx.Response, FetchErrorInfo]`.

    Features:
    - Base URL joining and query parameter encoding
    - Per-request timeout
    - Retry with exponential backoff and jitter for recoverable failures
    - Debug tracing of requests, responses, errors and retries
    """

    @property
    def client_name(self) -> str:
        return "fetch"

    async def _send_once(
        self,
        url: str,
        method: HttpMethod,
        headers: dict[str, str],
        content: str | bytes | None,
        timeout_ms: float | None,
    ) -> FetchResult:
        """Perform a single attempt, converting every failure into a FetchErrorInfo."""
        self.logger.debug(f"Fetch request: {method.value} {url}")
        try:
            async with self._http_client(timeout_ms) as client:
                response = await client.request(method.value, url, headers=headers, content=content)
        except httpx.TimeoutException as e:
            error = timeout_error(timeout_ms, url, method, cause=e)
            self.logger.debug(f"Fetch timeout: {error.message}")
            return failure(error)
        except httpx.HTTPError as e:
            error = network_error(e, url, method)
            self.logger.debug(f"Fetch network error: {error.message}")
            return failure(error)

        self.logger.debug(f"Fetch response: {response.status_code} {response.reason_phrase}")
        if not response.is_success:
            error = error_from_response(response, url, method)
            self.logger.debug(f"Fetch error: {error.code} - {error.message}")
            return failure(error)
        return success(response)

    def _retry_options(self, retry: FetchRetryOptions) -> RetryOptions[FetchErrorInfo]:
        def log_retry(attempt: int, error: FetchErrorInfo) -> None:
            self.logger.debug(f"Fetch retry {attempt}/{retry.max_retries}: {error.message}")

        return RetryOptions(
            max_retries=retry.max_retries,
            backoff=exponential_backoff_with_jitter(retry.backoff_options()),
            retry_condition=lambda error, attempt: error.recoverable,
            on_retry=retry.on_retry or log_retry,
        )

    async def request(
        self,
        url: str,
        method: HttpMethod | str = HttpMethod.GET,
        *,
        params: QueryParams | None = None,
        headers: Mapping[str, str] | None = None,
        body: Any = None,
        timeout_ms: float | None = None,
        retry: FetchRetryOptions | None = None,
    ) -> FetchResult:
        """
        Send a request.

        Args:
            url: Request URL, joined onto the client's base_url
            method: HTTP method
            params: Query parameters; None values are dropped
            headers: Extra headers, overriding the client defaults
            body: Request body; non-string values are JSON-encoded
            timeout_ms: Timeout override in milliseconds
            retry: Retry override (default: the client's retry configuration)

        Returns:
            Success with the response for 2xx, otherwise a Failure
        """
        method = HttpMethod(method)
        full_url = build_url(url, self.base_url, params)
        merged_headers = self._merge_headers(headers)
        content = encode_body(body)
        timeout_ms = timeout_ms if timeout_ms is not None else self.timeout_ms
        retry = retry if retry is not None else self.retry

        async def attempt() -> FetchResult:
            return await self._send_once(full_url, method, merged_headers, content, timeout_ms)

        if retry is None:
            return await attempt()

        self.logger.debug(
            f"Fetch with retry: max_retries={retry.max_retries}, "
            f"base_ms={retry.base_ms}, max_ms={retry.max_ms}"
        )
        return await retry_result(attempt, self._retry_options(retry))

    async def get(self, url: str, **kwargs: Any) -> FetchResult:
        return await self.request(url, HttpMethod.GET, **kwargs)

    async def post(self, url: str, body: Any = None, **kwargs: Any) -> FetchResult:
        return await self.request(url, HttpMethod.POST, body=body, **kwargs)

    async def put(self, url: str, body: Any = None, **kwargs: Any) -> FetchResult:
        return await self.request(url, HttpMethod.PUT, body=body, **kwargs)

    async def delete(self, url: str, **kwargs: Any) -> FetchResult:
        return await self.request(url, HttpMethod.DELETE, **kwargs)

    async def patch(self, url: str, body: Any = None, **kwargs: Any) -> FetchResult:
        return await self.request(url, HttpMethod.PATCH, body=body, **kwargs)

    async def head(self, url: str, **kwargs: Any) -> FetchResult:
        return await self.request(url, HttpMethod.HEAD, **kwargs)

    async def options(self, url: str, **kwargs: Any) -> FetchResult:
        return await self.request(url, HttpMethod.OPTIONS, **kwargs)

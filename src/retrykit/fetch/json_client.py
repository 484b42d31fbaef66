"""
JSON client with pydantic response validation.
"""

from typing import Any, Mapping, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..logger import Logger, create_logger
from ..result import Result, failure, is_failure, success
from .base import build_url
from .client import FetchClient
from .errors import parse_error, validation_error
from .types import FetchErrorInfo, FetchRetryOptions, HttpMethod

T = TypeVar("T")

JSON_HEADERS = {"Content-Type": "application/json", "Accept": "application/json"}


class JsonClient:
    """
    Client for JSON APIs.

    Request bodies are JSON-encoded (pydantic models via `model_dump`) and
    responses are parsed and validated against a schema: any type pydantic's
    TypeAdapter accepts, typically a BaseModel subclass.
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
        self.logger = (logger or create_logger()).with_context("json")
        self.fetch_client = FetchClient(
            base_url=base_url,
            headers={**JSON_HEADERS, **(headers or {})},
            timeout_ms=timeout_ms,
            retry=retry,
            logger=logger,
            transport=transport,
        )

    def _validate(
        self,
        response: httpx.Response,
        schema: type[T],
        url: str,
        method: HttpMethod,
    ) -> Result[T, FetchErrorInfo]:
        """Parse the response body as JSON and validate it against `schema`."""
        try:
            data = response.json()
        except ValueError as e:
            self.logger.debug(f"JSON parse error: {e}")
            return failure(parse_error(e, url, method))

        try:
            return success(TypeAdapter(schema).validate_python(data))
        except PydanticValidationError as e:
            self.logger.debug(f"Validation error: {e.error_count()} error(s)")
            return failure(validation_error(f"Invalid response format: {e}", url, method, data))

    async def request(
        self,
        schema: type[T],
        url: str,
        method: HttpMethod | str = HttpMethod.GET,
        *,
        body: Any = None,
        **kwargs: Any,
    ) -> Result[T, FetchErrorInfo]:
        """
        Send a JSON request and validate the response.

        Args:
            schema: Expected response type
            url: Request URL
            method: HTTP method
            body: Request body; pydantic models are dumped in JSON mode
            **kwargs: Passed through to FetchClient.request

        Returns:
            Success with the validated data, or a Failure (HTTP, parse or
            validation error)
        """
        method = HttpMethod(method)
        self.logger.debug(f"JSON request: {method.value} {url}")
        if isinstance(body, BaseModel):
            body = body.model_dump(mode="json")

        result = await self.fetch_client.request(url, method, body=body, **kwargs)
        if is_failure(result):
            return result
        full_url = build_url(url, self.fetch_client.base_url, kwargs.get("params"))
        return self._validate(result.value, schema, full_url, method)

    async def get(self, schema: type[T], url: str, **kwargs: Any) -> Result[T, FetchErrorInfo]:
        return await self.request(schema, url, HttpMethod.GET, **kwargs)

    async def post(self, schema: type[T], url: str, body: Any = None, **kwargs: Any) -> Result[T, FetchErrorInfo]:
        return await self.request(schema, url, HttpMethod.POST, body=body, **kwargs)

    async def put(self, schema: type[T], url: str, body: Any = None, **kwargs: Any) -> Result[T, FetchErrorInfo]:
        return await self.request(schema, url, HttpMethod.PUT, body=body, **kwargs)

    async def delete(self, schema: type[T], url: str, **kwargs: Any) -> Result[T, FetchErrorInfo]:
        return await self.request(schema, url, HttpMethod.DELETE, **kwargs)

    async def patch(self, schema: type[T], url: str, body: Any = None, **kwargs: Any) -> Result[T, FetchErrorInfo]:
        return await self.request(schema, url, HttpMethod.PATCH, body=body, **kwargs)

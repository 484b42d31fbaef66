"""
Streaming (Server-Sent Events) client.
"""

from dataclasses import dataclass
from typing import Any, Callable, Mapping

from ..result import Result, failure, success
from .base import BaseHttpClient, QueryParams, build_url, encode_body
from .errors import error_from_response, network_error
from .types import FetchErrorInfo, HttpMethod

EVENT_SEPARATOR = "\n\n"


@dataclass(frozen=True)
class SSEEvent:
    """A parsed Server-Sent Event."""

    event: str | None = None
    data: str | None = None
    id: str | None = None
    retry: int | None = None


def parse_sse(event_data: str) -> SSEEvent:
    """
    Parse one SSE event block.

    Multiple `data` lines are joined with newlines; lines without a colon and
    unknown fields are ignored, as is a `retry` value that is not an integer.
    """
    fields: dict[str, Any] = {}
    for line in event_data.split("\n"):
        if not line.strip() or ":" not in line:
            continue
        name, _, value = line.partition(":")
        value = value.strip()
        if name == "data":
            fields["data"] = f"{fields['data']}\n{value}" if "data" in fields else value
        elif name in ("event", "id"):
            fields[name] = value
        elif name == "retry" and value.isdigit():
            fields["retry"] = int(value)
    return SSEEvent(**fields)


class StreamingClient(BaseHttpClient):
    """
    Client for streaming endpoints.

    The response body is split on blank lines and each non-blank event is
    handed to `on_chunk` as it arrives. Streams are never retried: events
    already delivered cannot be taken back. An exception raised by a
    callback ends the stream with a Failure.
    """

    @property
    def client_name(self) -> str:
        return "stream"

    async def stream(
        self,
        url: str,
        method: HttpMethod | str = HttpMethod.GET,
        *,
        params: QueryParams | None = None,
        headers: Mapping[str, str] | None = None,
        body: Any = None,
        on_chunk: Callable[[str], None] | None = None,
        on_complete: Callable[[], None] | None = None,
        on_error: Callable[[FetchErrorInfo], None] | None = None,
    ) -> Result[None, FetchErrorInfo]:
        """
        Send a streaming request.

        Args:
            url: Request URL, joined onto base_url
            method: HTTP method
            params: Query parameters
            headers: Extra headers
            body: Request body; non-string values are JSON-encoded
            on_chunk: Called with each event block
            on_complete: Called once the stream ends normally
            on_error: Called with the error before a Failure is returned

        Returns:
            Success(None) once the stream is fully consumed, otherwise a Failure
        """
        method = HttpMethod(method)
        full_url = build_url(url, self.base_url, params)
        merged_headers = {"Accept": "text/event-stream", **self._merge_headers(headers)}

        def fail(error: FetchErrorInfo) -> Result[None, FetchErrorInfo]:
            self.logger.debug(f"Stream error: {error.code} - {error.message}")
            if on_error:
                on_error(error)
            return failure(error)

        self.logger.debug(f"Stream request: {method.value} {full_url}")
        http_failure: FetchErrorInfo | None = None
        try:
            async with self._http_client(self.timeout_ms) as client:
                async with client.stream(
                    method.value,
                    full_url,
                    headers=merged_headers,
                    content=encode_body(body),
                ) as response:
                    if not response.is_success:
                        await response.aread()
                        http_failure = error_from_response(response, full_url, method)
                    else:
                        buffer = ""
                        async for text in response.aiter_text():
                            buffer += text
                            if EVENT_SEPARATOR in buffer:
                                *events, buffer = buffer.split(EVENT_SEPARATOR)
                                for event in events:
                                    if event.strip() and on_chunk:
                                        on_chunk(event)

                        if buffer.strip() and on_chunk:
                            on_chunk(buffer)
            if http_failure is None and on_complete:
                on_complete()
        except Exception as e:
            # Transport errors and exceptions raised by callbacks
            return fail(network_error(e, full_url, method))

        if http_failure is not None:
            return fail(http_failure)
        self.logger.debug("Stream completed successfully")
        return success(None)

"""Request executor with auth, retry, and response classification.

Every feed operation funnels through ``RequestExecutor.execute``:

- JSON encoding of the request body
- ``Content-Type`` and auth headers
- Retry with linear backoff on transport errors, 5xx and 429
- Size-limited body reads
- Classification into typed responses or ``APIError``

Example:
    >>> from gyokaclient.http import RequestExecutor
    >>> from gyokaclient.core.options import ClientOptions
    >>> from gyokaclient.models import TrimResponse
    >>>
    >>> executor = RequestExecutor("http://localhost:8787", ClientOptions.defaults())
    >>> params = {"feed": "at://did:plc:abc/app.bsky.feed.generator/news", "within-count": 100}
    >>> resp = await executor.execute("GET", "/feed/trim", TrimResponse, params=params)
    >>> await executor.close()
"""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Mapping
from typing import Any, TypeVar, Union

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from gyokaclient.auth import apply_auth
from gyokaclient.core.exceptions import (
    APIError,
    GyokaClientError,
    RetryExhaustedError,
    SerializationError,
    ServerStatusError,
)
from gyokaclient.core.options import MAX_RESPONSE_BYTES, ClientOptions
from gyokaclient.models.messages import ErrorResponse


ModelT = TypeVar("ModelT", bound=BaseModel)
LoggerLike = Union[logging.Logger, logging.LoggerAdapter]


def is_retryable_status(status_code: int) -> bool:
    """5xx and 429 are worth another attempt; everything else is final."""
    return status_code >= 500 or status_code == 429


def encode_body(body: Any) -> bytes:
    """Serialize a request body to JSON bytes.

    Raises:
        SerializationError: If the body cannot be encoded
    """
    try:
        if isinstance(body, BaseModel):
            return body.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")
        return json.dumps(body).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise SerializationError(f"failed to marshal request body: {e}") from e


async def read_limited(response: httpx.Response, limit: int = MAX_RESPONSE_BYTES) -> bytes:
    """Read at most ``limit`` bytes from a streamed response."""
    buffer = bytearray()
    try:
        async for chunk in response.aiter_bytes():
            buffer.extend(chunk)
            if len(buffer) >= limit:
                break
    except httpx.HTTPError as e:
        raise GyokaClientError(f"failed to read response body: {e}") from e
    return bytes(buffer[:limit])


def classify_error(response: httpx.Response, raw: bytes) -> APIError:
    """Turn a non-200 response into an ``APIError``."""
    text = raw.decode("utf-8", errors="replace")
    try:
        payload = ErrorResponse.model_validate_json(raw)
    except PydanticValidationError:
        status = f"{response.status_code} {response.reason_phrase}".strip()
        return APIError(
            f"unexpected status {status}: {text}",
            response.status_code,
            body=text,
        )
    return APIError(
        f"api error: {payload.message or payload.error or ''}",
        response.status_code,
        message=payload.message,
        error=payload.error,
        body=text,
    )


class RequestExecutor:
    """Owns the connection pool and runs requests against the feed service.

    Safe to share between concurrent tasks; no state is kept per call.

    Attributes:
        base_url: Service base URL that request paths are appended to
        options: Immutable client options
    """

    def __init__(
        self,
        base_url: str,
        options: ClientOptions,
        *,
        logger: LoggerLike | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the executor.

        Args:
            base_url: Service base URL
            options: Timeout, pool, retry and auth settings
            logger: Logger for request records (default: module logger)
            transport: Custom httpx transport, mainly for tests
        """
        self.base_url = base_url.rstrip("/")
        self.options = options
        self._logger = logger if logger is not None else logging.getLogger(__name__)
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def max_attempts(self) -> int:
        """Delivery attempts per request; at least one."""
        return max(1, self.options.max_retries)

    def _ensure_client(self) -> httpx.AsyncClient:
        """Get or create the pooled HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.options.timeout),
                limits=httpx.Limits(
                    max_connections=None,
                    max_keepalive_connections=self.options.max_idle_conns,
                    keepalive_expiry=self.options.idle_conn_timeout,
                ),
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Release pooled connections. Safe to call more than once.

        Calls waiting between retries open a fresh pool on their next attempt.
        """
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    def build_request(
        self,
        method: str,
        url: httpx.URL | str,
        *,
        content: bytes | None = None,
        params: Mapping[str, Any] | None = None,
        stamp_headers: bool = True,
    ) -> httpx.Request:
        """Build a request; with ``stamp_headers`` it carries JSON and auth headers."""
        request = self._ensure_client().build_request(
            method,
            url,
            content=content,
            params=params,
        )
        if stamp_headers:
            request.headers["Content-Type"] = "application/json"
            apply_auth(self.options.auth, request.headers)
        return request

    async def send_with_retry(self, request: httpx.Request) -> httpx.Response:
        """Send ``request``, retrying transport errors, 5xx and 429.

        Attempt ``n`` (counting from zero) is preceded by a sleep of
        ``retry_wait_time * n``. Cancelling the calling task during the
        sleep aborts the call.

        Returns:
            An open streamed response; the caller must close it

        Raises:
            RetryExhaustedError: If no attempt produced a final response
        """
        attempts = self.max_attempts
        last_error: Exception | None = None

        for attempt in range(attempts):
            if attempt > 0:
                self._logger.warning(
                    f"Retrying {request.method} {request.url} "
                    f"(attempt {attempt + 1}/{attempts}): {last_error}"
                )
                await asyncio.sleep(self.options.retry_wait_time * attempt)

            # close() may have dropped the pool during the backoff sleep.
            client = self._ensure_client()
            try:
                response = await client.send(request, stream=True)
            except httpx.TransportError as e:
                last_error = e
                continue

            if is_retryable_status(response.status_code):
                await response.aclose()
                last_error = ServerStatusError(response.status_code, response.reason_phrase)
                continue

            return response

        raise RetryExhaustedError(last_error, attempts) from last_error

    async def execute(
        self,
        method: str,
        path: str,
        response_model: type[ModelT],
        *,
        body: Any = None,
        params: Mapping[str, Any] | None = None,
    ) -> ModelT:
        """Run one API call and decode the result.

        Args:
            method: HTTP method
            path: Path relative to the base URL
            response_model: Model the 200 body is decoded into
            body: Optional JSON body (pydantic model or JSON-serializable value)
            params: Optional query parameters

        Returns:
            Decoded ``response_model`` instance

        Raises:
            SerializationError: Body encoding or response decoding failed
            RetryExhaustedError: Every attempt failed
            APIError: Server answered with a non-200 status
        """
        content = encode_body(body) if body is not None else None
        request = self.build_request(method, path, content=content, params=params)

        self._logger.debug(f"Sending {method} {path}")
        try:
            response = await self.send_with_retry(request)
        except RetryExhaustedError as e:
            self._logger.error(f"Request failed: {method} {path}: {e}")
            raise

        try:
            raw = await read_limited(response)
        finally:
            await response.aclose()

        if response.status_code != httpx.codes.OK:
            error = classify_error(response, raw)
            self._logger.error(f"Request failed: {method} {path}: {error}")
            raise error

        try:
            result = response_model.model_validate_json(raw)
        except PydanticValidationError as e:
            raise SerializationError(f"failed to unmarshal response: {e}") from e

        self._logger.debug(f"Request successful: {method} {path} ({response.status_code})")
        return result


__all__ = [
    "RequestExecutor",
    "classify_error",
    "encode_body",
    "is_retryable_status",
    "read_limited",
]

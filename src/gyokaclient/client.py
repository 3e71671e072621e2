"""Feed editor client.

Typed, validated operations on feeds served by a Gyoka feed editor.

Example:
    >>> from gyokaclient import GyokaClient, ClientOptionsBuilder, Post
    >>>
    >>> options = ClientOptionsBuilder().with_token("secret").build()
    >>> async with GyokaClient("https://feeds.example.com", options) as client:
    ...     await client.ping()
    ...     await client.add([Post(feed=feed, uri=post_uri, cid=cid, indexed_at=ts)])
    ...     listing = await client.list_posts(feed, limit=50)
    ...     await client.trim_with_count(feed, 1000)
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import httpx

from gyokaclient.auth import AuthType
from gyokaclient.core.config import Settings
from gyokaclient.core.exceptions import (
    InvalidCountError,
    PingError,
    RetryExhaustedError,
    TooManyPostsError,
)
from gyokaclient.core.options import MAX_POSTS_PER_REQUEST, ClientOptions
from gyokaclient.http.executor import RequestExecutor
from gyokaclient.models.messages import (
    AddPostsResponse,
    DeletePostsResponse,
    ListPostsResponse,
    PostsRequest,
    TrimResponse,
)
from gyokaclient.models.post import Post
from gyokaclient.models.uri import FeedUri

COMPONENT = "gyoka-editor-client"


def _check_batch(posts: Sequence[Post]) -> None:
    if len(posts) > MAX_POSTS_PER_REQUEST:
        raise TooManyPostsError(len(posts), MAX_POSTS_PER_REQUEST)


class GyokaClient:
    """Async client for the feed editor API.

    One client is meant to be created at startup, shared by every task, and
    closed at shutdown. A call made after ``close()`` opens a new pool.

    Attributes:
        base_url: Service base URL
        options: Immutable client options
    """

    def __init__(
        self,
        base_url: str,
        options: ClientOptions | None = None,
        *,
        logger: logging.Logger | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the client.

        Args:
            base_url: Service base URL, e.g. ``http://localhost:8787``
            options: Client options (default: ``ClientOptions.defaults()``)
            logger: Parent logger (default: ``gyokaclient`` logger)
            transport: Custom httpx transport, mainly for tests
        """
        self.base_url = base_url
        self.options = options or ClientOptions.defaults()
        self._logger = logging.LoggerAdapter(
            logger or logging.getLogger("gyokaclient"),
            {"component": COMPONENT},
        )
        self._executor = RequestExecutor(
            base_url,
            self.options,
            logger=self._logger,
            transport=transport,
        )
        self._logger.info(
            f"Creating new client (base_url={base_url}, "
            f"auth_type={self.auth_type.value})"
        )

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: Any) -> GyokaClient:
        """Create a client from environment settings."""
        return cls(settings.base_url, settings.to_options(), **kwargs)

    @property
    def auth_type(self) -> AuthType:
        """Configured authentication mode."""
        return self.options.auth.auth_type

    async def close(self) -> None:
        """Release pooled idle connections. Safe to call more than once."""
        await self._executor.close()

    async def __aenter__(self) -> GyokaClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def add(self, posts: Sequence[Post]) -> AddPostsResponse:
        """Add up to 40 posts to their feeds.

        An empty batch returns an empty response without contacting the server.

        Raises:
            TooManyPostsError: More than 40 posts were given
        """
        if not posts:
            return AddPostsResponse()
        _check_batch(posts)
        return await self._executor.execute(
            "POST",
            "/feed/add",
            AddPostsResponse,
            body=PostsRequest(posts=list(posts)),
        )

    async def delete(self, posts: Sequence[Post]) -> DeletePostsResponse:
        """Delete up to 40 posts from their feeds.

        An empty batch returns an empty response without contacting the server.

        Raises:
            TooManyPostsError: More than 40 posts were given
        """
        if not posts:
            return DeletePostsResponse()
        _check_batch(posts)
        return await self._executor.execute(
            "POST",
            "/feed/delete",
            DeletePostsResponse,
            body=PostsRequest(posts=list(posts)),
        )

    async def list_posts(self, feed: FeedUri | str, limit: int = 0) -> ListPostsResponse:
        """List posts of a feed.

        Args:
            feed: Feed URI
            limit: Maximum posts to return; sent only when positive

        Raises:
            InvalidUriError: ``feed`` is not a feed generator URI
        """
        feed = FeedUri(feed)
        feed.validate()

        params: dict[str, Any] = {"feed": feed}
        if limit > 0:
            params["limit"] = limit
        return await self._executor.execute("GET", "/feed/list", ListPostsResponse, params=params)

    async def trim_with_count(self, feed: FeedUri | str, count: int) -> TrimResponse:
        """Trim a feed so that at most ``count`` posts remain.

        Raises:
            InvalidCountError: ``count`` is negative
            InvalidUriError: ``feed`` is not a feed generator URI
        """
        if count < 0:
            raise InvalidCountError(count)
        feed = FeedUri(feed)
        feed.validate()

        return await self._executor.execute(
            "GET",
            "/feed/trim",
            TrimResponse,
            params={"feed": feed, "within-count": count},
        )

    async def ping(self) -> None:
        """Check that the server is alive.

        Sends a bare ``GET /`` to the origin of the base URL through the
        retry path.

        Raises:
            PingError: Retries were exhausted or the status was not 200
        """
        url = httpx.URL(self._executor.base_url).join("/")
        request = self._executor.build_request("GET", url, stamp_headers=False)
        try:
            response = await self._executor.send_with_retry(request)
        except RetryExhaustedError as e:
            raise PingError(f"failed to ping server: {e}") from e
        await response.aclose()

        if response.status_code != httpx.codes.OK:
            raise PingError(
                f"unexpected status code: {response.status_code}",
                response.status_code,
            )


__all__ = ["GyokaClient"]

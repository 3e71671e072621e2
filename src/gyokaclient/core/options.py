"""Client options and their defaults.

``ClientOptions`` is the immutable snapshot a client is built from.
``ClientOptionsBuilder`` assembles one step by step.

Auth setters are first-writer-wins: once any auth mode is set, later auth
calls are ignored rather than overwriting it.

Example:
    >>> from gyokaclient.core.options import ClientOptionsBuilder
    >>> opts = (
    ...     ClientOptionsBuilder()
    ...     .with_token("first")
    ...     .with_basic_auth("user", "pass")  # ignored, auth already set
    ...     .with_max_retries(5)
    ...     .build()
    ... )
    >>> opts.auth.auth_type.value
    'BearerToken'
    >>> opts.max_retries
    5
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace

from gyokaclient.auth import (
    AuthConfig,
    BasicAuth,
    BearerToken,
    CloudflareAccess,
    NoAuth,
)

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_IDLE_CONNS = 100
DEFAULT_IDLE_CONN_TIMEOUT = 90.0
DEFAULT_MAX_RETRIES = 3
DEFAULT_RETRY_WAIT_TIME = 1.0

MAX_POSTS_PER_REQUEST = 40
MAX_RESPONSE_BYTES = 1024 * 1024


@dataclass(frozen=True)
class ClientOptions:
    """Immutable client configuration.

    Attributes:
        timeout: Per-request timeout in seconds
        max_idle_conns: Keep-alive connections retained in the pool
        max_retries: Total delivery attempts per request (including the first)
        retry_wait_time: Base backoff in seconds; attempt n waits n * base
        auth: Authentication mode
        idle_conn_timeout: Seconds an idle pooled connection is kept
    """

    timeout: float = DEFAULT_TIMEOUT
    max_idle_conns: int = DEFAULT_MAX_IDLE_CONNS
    max_retries: int = DEFAULT_MAX_RETRIES
    retry_wait_time: float = DEFAULT_RETRY_WAIT_TIME
    auth: AuthConfig = field(default_factory=NoAuth)
    idle_conn_timeout: float = DEFAULT_IDLE_CONN_TIMEOUT

    @classmethod
    def defaults(cls) -> ClientOptions:
        """Default options: 30s timeout, 3 attempts, 1s base wait, no auth."""
        return cls()


class ClientOptionsBuilder:
    """Fluent builder for ``ClientOptions``."""

    def __init__(self, base: ClientOptions | None = None) -> None:
        self._options = base or ClientOptions.defaults()

    def _set_auth(self, auth: AuthConfig) -> ClientOptionsBuilder:
        if not isinstance(self._options.auth, NoAuth):
            logger.debug(
                f"Ignoring {auth.auth_type.value} auth, "
                f"{self._options.auth.auth_type.value} already configured"
            )
            return self
        self._options = replace(self._options, auth=auth)
        return self

    def with_token(self, token: str) -> ClientOptionsBuilder:
        return self._set_auth(BearerToken(token=token))

    def with_cloudflare_access(self, client_id: str, client_secret: str) -> ClientOptionsBuilder:
        return self._set_auth(CloudflareAccess(client_id=client_id, client_secret=client_secret))

    def with_basic_auth(self, username: str, password: str) -> ClientOptionsBuilder:
        return self._set_auth(BasicAuth(username=username, password=password))

    def with_timeout(self, seconds: float) -> ClientOptionsBuilder:
        self._options = replace(self._options, timeout=seconds)
        return self

    def with_max_idle_conns(self, count: int) -> ClientOptionsBuilder:
        self._options = replace(self._options, max_idle_conns=count)
        return self

    def with_max_retries(self, attempts: int) -> ClientOptionsBuilder:
        self._options = replace(self._options, max_retries=attempts)
        return self

    def with_retry_wait_time(self, seconds: float) -> ClientOptionsBuilder:
        self._options = replace(self._options, retry_wait_time=seconds)
        return self

    def build(self) -> ClientOptions:
        return self._options


__all__ = [
    "ClientOptions",
    "ClientOptionsBuilder",
    "DEFAULT_IDLE_CONN_TIMEOUT",
    "DEFAULT_MAX_IDLE_CONNS",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_RETRY_WAIT_TIME",
    "DEFAULT_TIMEOUT",
    "MAX_POSTS_PER_REQUEST",
    "MAX_RESPONSE_BYTES",
]

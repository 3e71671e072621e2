"""Authentication strategies for outgoing requests.

Each mode is a small frozen dataclass carrying only the credentials it needs.
``apply_auth`` is the single dispatch point that stamps headers.

Example:
    >>> import httpx
    >>> from gyokaclient.auth import BearerToken, apply_auth
    >>> headers = httpx.Headers()
    >>> apply_auth(BearerToken("secret"), headers)
    >>> headers["Authorization"]
    'Bearer secret'
"""

from __future__ import annotations

import base64
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

import httpx


class AuthType(str, Enum):
    """Authentication mode tag."""

    NONE = "NoAuth"
    CLOUDFLARE_ACCESS = "CloudflareAccess"
    BEARER_TOKEN = "BearerToken"
    BASIC_AUTH = "BasicAuth"


@dataclass(frozen=True)
class NoAuth:
    """No credentials are sent."""

    auth_type: ClassVar[AuthType] = AuthType.NONE


@dataclass(frozen=True)
class BearerToken:
    """``Authorization: Bearer <token>``."""

    token: str = ""

    auth_type: ClassVar[AuthType] = AuthType.BEARER_TOKEN

    def __repr__(self) -> str:
        return "BearerToken(token='***')"


@dataclass(frozen=True)
class CloudflareAccess:
    """Cloudflare Access service token headers."""

    client_id: str = ""
    client_secret: str = ""

    auth_type: ClassVar[AuthType] = AuthType.CLOUDFLARE_ACCESS

    def __repr__(self) -> str:
        return f"CloudflareAccess(client_id={self.client_id!r}, client_secret='***')"


@dataclass(frozen=True)
class BasicAuth:
    """HTTP basic authentication."""

    username: str = ""
    password: str = ""

    auth_type: ClassVar[AuthType] = AuthType.BASIC_AUTH

    def __repr__(self) -> str:
        return f"BasicAuth(username={self.username!r}, password='***')"


AuthConfig = Union[NoAuth, BearerToken, CloudflareAccess, BasicAuth]


def _basic_auth_header(username: str, password: str) -> str:
    userpass = f"{username}:{password}".encode("utf-8")
    return "Basic " + base64.b64encode(userpass).decode("ascii")


def apply_auth(auth: AuthConfig, headers: httpx.Headers) -> None:
    """Stamp ``headers`` with the credentials for ``auth``.

    Setting the same mode twice yields the same headers. Missing credential
    fields produce empty header values rather than errors; an empty bearer
    token sends no Authorization header at all.

    Args:
        auth: Authentication mode and credentials
        headers: Outgoing request headers, modified in place
    """
    if isinstance(auth, BearerToken):
        if auth.token:
            headers["Authorization"] = f"Bearer {auth.token}"
    elif isinstance(auth, CloudflareAccess):
        headers["CF-Access-Client-Id"] = auth.client_id
        headers["CF-Access-Client-Secret"] = auth.client_secret
    elif isinstance(auth, BasicAuth):
        headers["Authorization"] = _basic_auth_header(auth.username, auth.password)


__all__ = [
    "AuthConfig",
    "AuthType",
    "BasicAuth",
    "BearerToken",
    "CloudflareAccess",
    "NoAuth",
    "apply_auth",
]

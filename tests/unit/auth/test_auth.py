"""Tests for gyokaclient.auth."""

from __future__ import annotations

import base64

import httpx

from gyokaclient.auth import (
    AuthType,
    BasicAuth,
    BearerToken,
    CloudflareAccess,
    NoAuth,
    apply_auth,
)


class TestApplyAuth:
    """Tests for header stamping."""

    def test_no_auth_adds_nothing(self) -> None:
        headers = httpx.Headers()
        apply_auth(NoAuth(), headers)
        assert len(headers) == 0

    def test_bearer_token(self) -> None:
        headers = httpx.Headers()
        apply_auth(BearerToken("test-token"), headers)
        assert headers["Authorization"] == "Bearer test-token"

    def test_empty_bearer_token_skipped(self) -> None:
        headers = httpx.Headers()
        apply_auth(BearerToken(""), headers)
        assert "Authorization" not in headers

    def test_cloudflare_access(self) -> None:
        headers = httpx.Headers()
        apply_auth(CloudflareAccess("id", "secret"), headers)
        assert headers["CF-Access-Client-Id"] == "id"
        assert headers["CF-Access-Client-Secret"] == "secret"

    def test_cloudflare_access_empty_credentials(self) -> None:
        """Missing credentials produce empty header values."""
        headers = httpx.Headers()
        apply_auth(CloudflareAccess(), headers)
        assert headers["CF-Access-Client-Id"] == ""
        assert headers["CF-Access-Client-Secret"] == ""

    def test_basic_auth(self) -> None:
        headers = httpx.Headers()
        apply_auth(BasicAuth("user", "pass"), headers)
        expected = base64.b64encode(b"user:pass").decode()
        assert headers["Authorization"] == f"Basic {expected}"

    def test_idempotent(self) -> None:
        headers = httpx.Headers()
        auth = BearerToken("t")
        apply_auth(auth, headers)
        apply_auth(auth, headers)
        assert headers.get_list("Authorization") == ["Bearer t"]


class TestAuthVariants:
    """Tests for the auth variant types."""

    def test_auth_type_tags(self) -> None:
        assert NoAuth().auth_type is AuthType.NONE
        assert BearerToken("t").auth_type is AuthType.BEARER_TOKEN
        assert CloudflareAccess("i", "s").auth_type is AuthType.CLOUDFLARE_ACCESS
        assert BasicAuth("u", "p").auth_type is AuthType.BASIC_AUTH

    def test_auth_type_names(self) -> None:
        assert [t.value for t in AuthType] == [
            "NoAuth",
            "CloudflareAccess",
            "BearerToken",
            "BasicAuth",
        ]

    def test_secrets_hidden_in_repr(self) -> None:
        assert "secret" not in repr(BearerToken("secret"))
        assert "secret" not in repr(CloudflareAccess("id", "secret"))
        assert "secret" not in repr(BasicAuth("user", "secret"))

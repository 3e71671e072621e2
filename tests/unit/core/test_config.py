"""Tests for gyokaclient.core.config."""

from __future__ import annotations

import pytest

from gyokaclient.auth import AuthType, BasicAuth, BearerToken, CloudflareAccess, NoAuth
from gyokaclient.core.config import Settings, get_settings
from gyokaclient.core.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Isolate tests from the developer's environment and .env file."""
    monkeypatch.chdir(tmp_path)
    for name in (
        "GYOKA_BASE_URL",
        "GYOKA_TIMEOUT",
        "GYOKA_MAX_RETRIES",
        "GYOKA_AUTH_TYPE",
        "GYOKA_TOKEN",
    ):
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self) -> None:
        s = Settings()
        assert s.base_url == "http://localhost:8787"
        assert s.max_retries == 3
        assert s.auth_type is AuthType.NONE

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GYOKA_BASE_URL", "https://feeds.example.com")
        monkeypatch.setenv("GYOKA_TIMEOUT", "5")
        monkeypatch.setenv("GYOKA_AUTH_TYPE", "BearerToken")
        monkeypatch.setenv("GYOKA_TOKEN", "env-token")

        s = Settings()

        assert s.base_url == "https://feeds.example.com"
        assert s.timeout == 5.0
        assert s.to_options().auth == BearerToken("env-token")

    def test_overrides(self) -> None:
        s = get_settings(max_retries=5, retry_wait_time=0.5)
        assert s.max_retries == 5
        assert s.retry_wait_time == 0.5

    def test_rejects_zero_retries(self) -> None:
        with pytest.raises(ValueError):
            get_settings(max_retries=0)


class TestToOptions:
    """Tests for Settings.to_options."""

    def test_no_auth(self) -> None:
        opts = get_settings(timeout=3.0).to_options()
        assert isinstance(opts.auth, NoAuth)
        assert opts.timeout == 3.0

    def test_cloudflare(self) -> None:
        opts = get_settings(
            auth_type="CloudflareAccess", cf_client_id="id", cf_client_secret="secret"
        ).to_options()
        assert opts.auth == CloudflareAccess("id", "secret")

    def test_basic(self) -> None:
        opts = get_settings(
            auth_type="BasicAuth", basic_username="u", basic_password="p"
        ).to_options()
        assert opts.auth == BasicAuth("u", "p")

    def test_bearer_requires_token(self) -> None:
        with pytest.raises(ConfigurationError):
            get_settings(auth_type="BearerToken").to_options()

    @pytest.mark.parametrize(
        "overrides",
        [
            {"auth_type": "CloudflareAccess"},
            {"auth_type": "CloudflareAccess", "cf_client_id": "id"},
            {"auth_type": "CloudflareAccess", "cf_client_secret": "secret"},
            {"auth_type": "BasicAuth", "basic_password": "p"},
        ],
    )
    def test_missing_credentials_rejected(self, overrides: dict) -> None:
        with pytest.raises(ConfigurationError):
            get_settings(**overrides).to_options()

    def test_basic_allows_empty_password(self) -> None:
        opts = get_settings(auth_type="BasicAuth", basic_username="u").to_options()
        assert opts.auth == BasicAuth("u", "")

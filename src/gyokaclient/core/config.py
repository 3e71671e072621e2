"""Environment-backed client settings.

The client itself never reads the environment. Callers that want
environment or ``.env`` configuration load a ``Settings`` object and turn it
into ``ClientOptions``. Variables use the ``GYOKA_`` prefix.

Example:
    >>> from gyokaclient.core.config import get_settings
    >>> settings = get_settings(base_url="http://localhost:8787", auth_type="BearerToken", token="t")
    >>> settings.to_options().auth.auth_type.value
    'BearerToken'
"""

from __future__ import annotations

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from gyokaclient.auth import AuthType
from gyokaclient.core.exceptions import ConfigurationError
from gyokaclient.core.options import (
    DEFAULT_MAX_IDLE_CONNS,
    DEFAULT_MAX_RETRIES,
    DEFAULT_RETRY_WAIT_TIME,
    DEFAULT_TIMEOUT,
    ClientOptions,
    ClientOptionsBuilder,
)


class Settings(BaseSettings):
    """Client settings.

    Loads from environment variables with GYOKA_ prefix.

    Example:
        >>> from gyokaclient.core.config import Settings
        >>> s = Settings(base_url="https://feeds.example.com")
        >>> s.max_retries
        3
    """

    model_config = SettingsConfigDict(
        env_prefix="GYOKA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_url: str = Field(default="http://localhost:8787", description="Feed editor service URL")

    # Transport
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0.0, description="Request timeout in seconds")
    max_idle_conns: int = Field(default=DEFAULT_MAX_IDLE_CONNS, ge=0)
    max_retries: int = Field(default=DEFAULT_MAX_RETRIES, ge=1, description="Attempts per request")
    retry_wait_time: float = Field(default=DEFAULT_RETRY_WAIT_TIME, ge=0.0, description="Base backoff in seconds")

    # Auth
    auth_type: AuthType = Field(default=AuthType.NONE, description="NoAuth, BearerToken, CloudflareAccess or BasicAuth")
    token: str = ""
    cf_client_id: str = ""
    cf_client_secret: str = ""
    basic_username: str = ""
    basic_password: str = ""

    def to_options(self) -> ClientOptions:
        """Build ``ClientOptions`` from these settings.

        Raises:
            ConfigurationError: The selected auth mode is missing a credential
        """
        builder = (
            ClientOptionsBuilder()
            .with_timeout(self.timeout)
            .with_max_idle_conns(self.max_idle_conns)
            .with_max_retries(self.max_retries)
            .with_retry_wait_time(self.retry_wait_time)
        )
        if self.auth_type is AuthType.BEARER_TOKEN:
            if not self.token:
                raise ConfigurationError("GYOKA_TOKEN is required for BearerToken auth")
            builder.with_token(self.token)
        elif self.auth_type is AuthType.CLOUDFLARE_ACCESS:
            if not (self.cf_client_id and self.cf_client_secret):
                raise ConfigurationError(
                    "GYOKA_CF_CLIENT_ID and GYOKA_CF_CLIENT_SECRET are required for CloudflareAccess auth"
                )
            builder.with_cloudflare_access(self.cf_client_id, self.cf_client_secret)
        elif self.auth_type is AuthType.BASIC_AUTH:
            if not self.basic_username:
                raise ConfigurationError("GYOKA_BASIC_USERNAME is required for BasicAuth auth")
            builder.with_basic_auth(self.basic_username, self.basic_password)
        return builder.build()


def get_settings(**overrides: Any) -> Settings:
    """Get settings with optional overrides.

    Example:
        >>> from gyokaclient.core.config import get_settings
        >>> s = get_settings(retry_wait_time=0.5)
        >>> s.retry_wait_time
        0.5
    """
    return Settings(**overrides)

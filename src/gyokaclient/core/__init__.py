"""Core configuration, options and exceptions."""

from gyokaclient.core.exceptions import (
    APIError,
    ConfigurationError,
    GyokaClientError,
    InvalidCountError,
    InvalidUriError,
    PingError,
    RetryExhaustedError,
    SerializationError,
    ServerStatusError,
    TooManyPostsError,
    ValidationError,
)
from gyokaclient.core.options import (
    MAX_POSTS_PER_REQUEST,
    MAX_RESPONSE_BYTES,
    ClientOptions,
    ClientOptionsBuilder,
)

__all__ = [
    # Options
    "ClientOptions",
    "ClientOptionsBuilder",
    "MAX_POSTS_PER_REQUEST",
    "MAX_RESPONSE_BYTES",
    # Exceptions
    "GyokaClientError",
    "ConfigurationError",
    "ValidationError",
    "InvalidUriError",
    "TooManyPostsError",
    "InvalidCountError",
    "SerializationError",
    "APIError",
    "ServerStatusError",
    "RetryExhaustedError",
    "PingError",
]

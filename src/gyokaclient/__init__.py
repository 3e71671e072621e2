"""
gyokaclient - Async client for the Gyoka feed editor API.

Gyoka serves custom Bluesky feeds. This package adds, deletes, lists and
trims the posts of those feeds over HTTP, with authentication, retries and
typed errors.

Key Features:
- Four auth modes (none, bearer token, Cloudflare Access, basic auth)
- Retry with linear backoff on network errors, 5xx and 429
- Pydantic models for posts and every request/response body
- Local validation of AT URIs before any request is sent

Quick Start:
    >>> from gyokaclient import GyokaClient, ClientOptionsBuilder, FeedUri
    >>> options = ClientOptionsBuilder().with_token("secret").build()
    >>> async with GyokaClient("http://localhost:8787", options) as client:
    ...     feed = FeedUri("at://did:plc:abc/app.bsky.feed.generator/news")
    ...     listing = await client.list_posts(feed, limit=20)
"""

from gyokaclient.client import GyokaClient

# Auth
from gyokaclient.auth import (
    AuthConfig,
    AuthType,
    BasicAuth,
    BearerToken,
    CloudflareAccess,
    NoAuth,
)

# Configuration
from gyokaclient.core.config import Settings, get_settings
from gyokaclient.core.options import (
    MAX_POSTS_PER_REQUEST,
    ClientOptions,
    ClientOptionsBuilder,
)

# Errors
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

# Models
from gyokaclient.models import (
    AddPostsResponse,
    AtUri,
    DeletePostsResponse,
    FeedUri,
    ListPostsResponse,
    Post,
    PostUri,
    TrimResponse,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "GyokaClient",
    # Auth
    "AuthConfig",
    "AuthType",
    "NoAuth",
    "BearerToken",
    "CloudflareAccess",
    "BasicAuth",
    # Configuration
    "ClientOptions",
    "ClientOptionsBuilder",
    "MAX_POSTS_PER_REQUEST",
    "Settings",
    "get_settings",
    # Models
    "AtUri",
    "FeedUri",
    "PostUri",
    "Post",
    "AddPostsResponse",
    "DeletePostsResponse",
    "ListPostsResponse",
    "TrimResponse",
    # Errors
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
    # Version
    "__version__",
]

"""Custom exceptions.

gyokaclient uses a hierarchy of exceptions so callers can tell local input
problems apart from transport and server failures:

Example:
    >>> from gyokaclient.core.exceptions import GyokaClientError, InvalidCountError
    >>> isinstance(InvalidCountError(-1), GyokaClientError)
    True
    >>> try:
    ...     raise InvalidCountError(-1)
    ... except GyokaClientError as e:
    ...     print(f"Caught: {type(e).__name__}")
    Caught: InvalidCountError
"""

from __future__ import annotations


class GyokaClientError(Exception):
    """Base exception for gyokaclient.

    Example:
        >>> from gyokaclient.core.exceptions import GyokaClientError
        >>> e = GyokaClientError("something went wrong")
        >>> str(e)
        'something went wrong'
    """


class ConfigurationError(GyokaClientError):
    """Client configuration is invalid."""


class ValidationError(GyokaClientError):
    """Input rejected locally, before any network call.

    Never retried.
    """


class InvalidUriError(ValidationError):
    """An AT URI failed validation.

    Example:
        >>> from gyokaclient.core.exceptions import InvalidUriError
        >>> e = InvalidUriError("at://x", "invalid did format")
        >>> e.reason
        'invalid did format'
    """

    def __init__(self, uri: str, reason: str):
        self.uri = uri
        self.reason = reason
        super().__init__(reason)


class TooManyPostsError(ValidationError):
    """A post batch exceeds the per-request limit."""

    def __init__(self, count: int, limit: int):
        self.count = count
        self.limit = limit
        super().__init__(f"too many posts: {count} (max {limit})")


class InvalidCountError(ValidationError):
    """A trim count is negative."""

    def __init__(self, count: int):
        self.count = count
        super().__init__(f"invalid count: {count}")


class SerializationError(GyokaClientError):
    """Request body could not be encoded or a 200 response could not be decoded.

    Treated as a contract error, never retried.
    """


class APIError(GyokaClientError):
    """The server answered with a status other than 200.

    Attributes:
        status_code: HTTP status code
        message: ``message`` field of the error payload, if decodable
        error: ``error`` field of the error payload, if decodable
        body: Raw (size-limited) response body
    """

    def __init__(
        self,
        text: str,
        status_code: int,
        *,
        message: str | None = None,
        error: str | None = None,
        body: str = "",
    ):
        self.status_code = status_code
        self.message = message
        self.error = error
        self.body = body
        super().__init__(text)


class ServerStatusError(APIError):
    """A retryable status (5xx or 429) was returned."""

    def __init__(self, status_code: int, reason: str = ""):
        status = f"{status_code} {reason}".strip()
        super().__init__(f"server error: {status}", status_code)


class RetryExhaustedError(GyokaClientError):
    """Every delivery attempt failed.

    Attributes:
        last_error: The error observed on the final attempt
        attempts: Number of attempts made
    """

    def __init__(self, last_error: BaseException | None, attempts: int):
        self.last_error = last_error
        self.attempts = attempts
        super().__init__(f"max retries exceeded: {last_error}")


class PingError(GyokaClientError):
    """The liveness check failed."""

    def __init__(self, text: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(text)

"""gyokaclient HTTP layer.

Provides the request executor: pooled connections, retry with linear
backoff, and classification of responses into models or errors.

Example:
    >>> from gyokaclient.http import RequestExecutor
    >>> from gyokaclient.core.options import ClientOptions
    >>>
    >>> executor = RequestExecutor("http://localhost:8787", ClientOptions.defaults())
    >>> response = await executor.send_with_retry(executor.build_request("GET", "/"))
"""

from gyokaclient.http.executor import RequestExecutor, is_retryable_status

__all__ = [
    "RequestExecutor",
    "is_retryable_status",
]

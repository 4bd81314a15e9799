"""Klara API client package.

Provides a thin asynchronous HTTP client for the Klara API that returns
the decoded response payload with minimal processing.

Exports:
    KlaraApiClient: HTTP client with bearer authentication and error handling.
    AccessTokenStore: Token holder that clients may share explicitly.
    KlaraApiError: Single exception type raised for failed requests.
    ErrorKind: Failure categories carried by KlaraApiError.
    HttpMethod: Supported HTTP methods.
    RequestSpec: Pydantic model describing one request.
    build_url: URL builder for path templates and parameters.
    KLARA_BASE_URL: Default API origin.
    DEFAULT_TIMEOUT: Default HTTP request timeout.
"""

from .client import (
    DEFAULT_ENVELOPE_KEY,
    DEFAULT_TIMEOUT,
    KLARA_BASE_URL,
    AccessTokenStore,
    KlaraApiClient,
)
from .errors import ErrorKind, KlaraApiError
from .types import HttpMethod, RequestSpec
from .urls import build_url, serialize_query_params

__all__ = [
    "DEFAULT_ENVELOPE_KEY",
    "DEFAULT_TIMEOUT",
    "KLARA_BASE_URL",
    "AccessTokenStore",
    "ErrorKind",
    "HttpMethod",
    "KlaraApiClient",
    "KlaraApiError",
    "RequestSpec",
    "build_url",
    "serialize_query_params",
]

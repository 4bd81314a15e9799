"""Klara API client.

Provides an asynchronous HTTP client with bearer-token authentication,
path/query parameter handling, and uniform error reporting.
"""

import threading
import time
from collections.abc import Mapping
from typing import Any

import httpx
import structlog

from .errors import ErrorKind, KlaraApiError
from .types import HttpMethod, RequestSpec
from .urls import build_url, stringify

logger = structlog.get_logger(__name__)

KLARA_BASE_URL = "https://api.klara.ch"

DEFAULT_TIMEOUT = 30.0

# Key of the response envelope holding the payload
DEFAULT_ENVELOPE_KEY = "data"


class AccessTokenStore:
    """Holder for the bearer token used by one or more clients.

    Clients only share a token when they are given the same store.
    """

    def __init__(self, token: str | None = None):
        self._lock = threading.Lock()
        self._token = token

    def get(self) -> str | None:
        with self._lock:
            return self._token

    def set(self, token: str) -> None:
        with self._lock:
            self._token = token


class KlaraApiClient:
    """Asynchronous HTTP client for the Klara API.

    Builds request URLs from path templates, attaches the bearer token
    from its token store, and unwraps the response envelope. Every
    failure is logged and raised as :class:`KlaraApiError`.

    The underlying httpx.AsyncClient is created lazily and reused.
    Can be used as an async context manager for automatic cleanup.
    """

    def __init__(
        self,
        base_url: str = KLARA_BASE_URL,
        token_store: AccessTokenStore | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        envelope_key: str | None = DEFAULT_ENVELOPE_KEY,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the API client.

        Args:
            base_url: API origin (default: https://api.klara.ch).
            token_store: Token holder, shared with other clients if the same
                instance is passed to them. A private store is created when
                omitted.
            timeout: Request timeout in seconds (default: 30.0).
            envelope_key: Field of the response envelope returned by
                fetch(). None returns the whole decoded body.
            transport: Optional httpx transport, mainly for tests.

        Raises:
            ValueError: If base_url is empty or timeout is not positive.
        """
        if not base_url:
            msg = "base_url cannot be empty"
            raise ValueError(msg)
        if timeout <= 0:
            msg = "timeout must be positive"
            raise ValueError(msg)

        self.base_url = base_url.rstrip("/")
        self.token_store = token_store if token_store is not None else AccessTokenStore()
        self.envelope_key = envelope_key
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Get or create the underlying httpx client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                headers={"Accept": "application/json"},
                timeout=self._timeout,
                transport=self._transport,
            )
        return self._client

    async def __aenter__(self):
        """Enter async context manager."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context manager and cleanup resources."""
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client if open."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()

    def set_access_token(self, access_token: str) -> None:
        """Set the bearer token for all clients sharing this token store."""
        self.token_store.set(access_token)

    def get_authorization_header(self) -> dict[str, str]:
        """Return the Authorization header for the current token.

        An unset token is rendered as ``Bearer null``.
        """
        return {"Authorization": f"Bearer {stringify(self.token_store.get())}"}

    def build_url(
        self,
        path: str,
        query_params: Mapping[str, Any] | None = None,
        path_params: Mapping[str, Any] | None = None,
    ) -> str:
        """Build the absolute URL for ``path`` against the client's base URL."""
        return build_url(self.base_url, path, query_params, path_params)

    async def fetch(
        self,
        path: str,
        method: HttpMethod | str = HttpMethod.GET,
        query_params: Mapping[str, Any] | None = None,
        path_params: Mapping[str, Any] | None = None,
        body: Any = None,
    ) -> Any:
        """Make a request to the Klara API.

        Args:
            path: Endpoint path, may contain ``:name`` placeholders
                (e.g., "/organisations/:id/letters").
            method: HTTP method (default: GET).
            query_params: Query parameters, serialized without encoding.
            path_params: Values for the path placeholders.
            body: JSON payload, omitted when None.

        Returns:
            The ``data`` field of the response envelope.

        Raises:
            KlaraApiError: If the request fails for any reason.
            pydantic.ValidationError: If the method is not supported.
        """
        spec = RequestSpec(
            path=path,
            method=method,
            query_params=query_params,
            path_params=path_params,
            body=body,
        )
        return await self.execute(spec)

    async def execute(self, spec: RequestSpec) -> Any:
        """Execute a prepared request.

        Handles request execution, status checking, and envelope decoding.
        Logs request details and duration.

        Args:
            spec: The request to send.

        Returns:
            The ``data`` field of the response envelope, or the whole
            decoded body when no envelope key is configured.

        Raises:
            KlaraApiError: If the request fails for any reason.
        """
        # Token snapshot for this call
        headers = self.get_authorization_header()
        url = self.build_url(spec.path, spec.query_params, spec.path_params)
        method = spec.method.value

        start_time = time.time()
        logger.debug("Making API request", method=method, url=url)
        try:
            response = await self.client.request(
                method,
                url,
                headers=headers,
                json=spec.body,
            )
        except httpx.TransportError as exc:
            logger.exception(
                "API request failed",
                method=method,
                url=url,
                duration_seconds=round(time.time() - start_time, 3),
            )
            msg = f"{method} {url} failed: {exc}"
            raise KlaraApiError(msg, kind=ErrorKind.NETWORK) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.exception("API request failed", method=method, url=url)
            msg = f"{method} {url} failed: {exc}"
            raise KlaraApiError(msg, kind=ErrorKind.UNKNOWN) from exc
        except (TypeError, ValueError) as exc:
            # Body could not be encoded as JSON
            logger.exception("API request preparation failed", method=method, url=url)
            msg = f"{method} {url} could not be prepared: {exc}"
            raise KlaraApiError(msg, kind=ErrorKind.UNKNOWN) from exc

        logger.debug(
            "API request completed",
            method=method,
            url=url,
            status_code=response.status_code,
            duration_seconds=round(time.time() - start_time, 3),
        )

        if not response.is_success:
            payload = _decode_payload(response)
            logger.error(
                "API error response",
                method=method,
                url=url,
                status_code=response.status_code,
                payload=payload,
            )
            msg = f"{method} {url} returned HTTP {response.status_code}"
            raise KlaraApiError(
                msg,
                kind=ErrorKind.from_status(response.status_code),
                status_code=response.status_code,
                payload=payload,
            )

        return self._unwrap(response, method, url)

    def _unwrap(self, response: httpx.Response, method: str, url: str) -> Any:
        if not response.content:
            return None

        try:
            data = response.json()
        except ValueError as exc:
            logger.error(
                "Undecodable API response",
                method=method,
                url=url,
                status_code=response.status_code,
                payload=response.text,
            )
            msg = f"{method} {url} returned a body that is not JSON"
            raise KlaraApiError(
                msg,
                kind=ErrorKind.DECODE,
                status_code=response.status_code,
                payload=response.text,
            ) from exc

        if self.envelope_key is None:
            return data

        if not isinstance(data, dict) or self.envelope_key not in data:
            logger.error(
                "API response missing envelope field",
                method=method,
                url=url,
                envelope_key=self.envelope_key,
                payload=data,
            )
            msg = f"{method} {url} response has no '{self.envelope_key}' field"
            raise KlaraApiError(
                msg,
                kind=ErrorKind.DECODE,
                status_code=response.status_code,
                payload=data,
            )
        return data[self.envelope_key]


def _decode_payload(response: httpx.Response) -> Any:
    """Return the JSON error body, falling back to raw text."""
    try:
        return response.json()
    except ValueError:
        return response.text

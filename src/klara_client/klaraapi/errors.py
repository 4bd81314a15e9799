"""Exceptions raised by the Klara API client."""

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Cause of a failed Klara API request."""

    NOT_FOUND = "not_found"
    UNAUTHORIZED = "unauthorized"
    HTTP_STATUS = "http_status"
    NETWORK = "network"
    DECODE = "decode"
    UNKNOWN = "unknown"

    @classmethod
    def from_status(cls, status_code: int) -> "ErrorKind":
        """Map a non-2xx HTTP status code to an error kind."""
        if status_code == 404:  # noqa: PLR2004
            return cls.NOT_FOUND
        if status_code in (401, 403):
            return cls.UNAUTHORIZED
        return cls.HTTP_STATUS


class KlaraApiError(Exception):
    """Raised for every failed Klara API request.

    A single exception type covers all failures; ``kind`` tells callers
    what went wrong without having to catch several classes.

    Attributes:
        kind: Category of the failure.
        message: Human readable description.
        status_code: HTTP status if a response was received, else None.
        payload: Decoded error body returned by the API, if any.
    """

    def __init__(
        self,
        message: str,
        kind: ErrorKind = ErrorKind.UNKNOWN,
        status_code: int | None = None,
        payload: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.status_code = status_code
        self.payload = payload

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(kind={self.kind.value!r}, "
            f"status_code={self.status_code!r}, message={self.message!r})"
        )

"""Request types for the Klara API client.

Pydantic models describing a single API call. Validation copies the
caller's mappings, so building a request never mutates caller input.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, field_validator


class HttpMethod(str, Enum):
    """HTTP methods accepted by the Klara API."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"


class RequestSpec(BaseModel):
    """A single Klara API request before URL construction."""

    # Path template, may contain ":name" placeholders
    path: str
    method: HttpMethod = HttpMethod.GET

    query_params: dict[str, Any] = {}
    path_params: dict[str, Any] = {}

    # Sent as JSON when not None
    body: Any = None

    @field_validator("method", mode="before")
    @classmethod
    def normalize_method(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.upper()
        return value

    @field_validator("query_params", "path_params", mode="before")
    @classmethod
    def default_empty(cls, value: Any) -> Any:
        return {} if value is None else value

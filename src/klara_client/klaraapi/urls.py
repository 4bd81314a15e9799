"""URL construction for Klara API requests.

Pure helpers that resolve a path template against the API origin,
substitute ``:name`` path parameters, and append the query string.

Query strings are serialized without percent-encoding. The Klara API
expects parameters verbatim, so values containing ``&`` or ``=`` produce
ambiguous boundaries; callers must avoid such values.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any
from urllib.parse import quote, urljoin, urlsplit, urlunsplit

# Characters allowed verbatim in a path segment value
PATH_SAFE_CHARS = "/:@!$&'()*+,;="


def stringify(value: Any) -> str:
    """Coerce a parameter value to the string sent on the wire.

    Enum members are sent by value, booleans as ``true``/``false`` and
    ``None`` as ``null``.
    """
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    return str(value)


def serialize_query_params(params: Mapping[str, Any] | None) -> str:
    """Join ``key=value`` pairs with ``&`` in mapping order, unencoded."""
    if not params:
        return ""
    return "&".join(f"{key}={stringify(value)}" for key, value in params.items())


def substitute_path_params(path: str, path_params: Mapping[str, Any] | None) -> str:
    """Replace the first ``:key`` occurrence for each path parameter.

    Values are percent-encoded as path data, so ``#``, ``?`` and spaces
    cannot change the URL structure. Unknown placeholders and parameters
    without a placeholder are left alone.
    """
    for key, value in (path_params or {}).items():
        encoded = quote(stringify(value), safe=PATH_SAFE_CHARS)
        path = path.replace(f":{key}", encoded, 1)
    return path


def build_url(
    base_url: str,
    path: str,
    query_params: Mapping[str, Any] | None = None,
    path_params: Mapping[str, Any] | None = None,
) -> str:
    """Build an absolute request URL.

    Args:
        base_url: API origin, e.g. ``https://api.klara.ch``.
        path: Path template, may contain ``:name`` placeholders.
        query_params: Query parameters, appended in mapping order.
        path_params: Values substituted into the path placeholders.

    Returns:
        The absolute URL as a string.
    """
    parts = urlsplit(urljoin(base_url, path))
    resolved_path = substitute_path_params(parts.path, path_params)

    query = parts.query
    serialized = serialize_query_params(query_params)
    if serialized:
        query = f"{query}&{serialized}" if query else serialized

    return urlunsplit(
        (parts.scheme, parts.netloc, resolved_path, query, parts.fragment),
    )

r"""URL construction for API requests.

This module resolves endpoint paths against the configured base URL and
merges the query string embedded in an endpoint path with explicit query
parameters.
"""

from __future__ import annotations

__all__ = ["build_url", "join_paths"]

from typing import TYPE_CHECKING

import httpx

from pandadoc.exceptions import ConfigurationError, EncodeError, ErrorKind

if TYPE_CHECKING:
    from collections.abc import Iterable


def join_paths(base_path: str, rel_path: str) -> str:
    """Join a base path and a relative path with exactly one ``/``.

    Leading and trailing slashes on either side do not matter. The result
    always starts with ``/`` and is never empty.

    Args:
        base_path: The base URL path.
        rel_path: The endpoint path to append.

    Returns:
        The joined path.

    Example:
        ```pycon
        >>> from pandadoc.core.url import join_paths
        >>> join_paths("/a/", "/b")
        '/a/b'
        >>> join_paths("/a", "b")
        '/a/b'
        >>> join_paths("/public/v1/", "")
        '/public/v1'
        >>> join_paths("", "")
        '/'

        ```
    """
    base_path = base_path.strip() or "/"
    rel_path = rel_path.strip()
    if not base_path.startswith("/"):
        base_path = "/" + base_path

    rel_path = rel_path.removeprefix("/")
    trimmed_base = base_path.removesuffix("/")
    if not rel_path:
        return trimmed_base or "/"
    return f"{trimmed_base}/{rel_path}"


def build_url(
    base_url: str | httpx.URL,
    endpoint_path: str,
    query: Iterable[tuple[str, str]] = (),
) -> str:
    """Resolve an endpoint path against the base URL.

    The query string embedded in ``endpoint_path`` is merged with
    ``query``. Repeated keys are all kept: the embedded values come first,
    then the explicit ones. Keys are emitted in sorted order.

    Args:
        base_url: The normalized API base URL.
        endpoint_path: Endpoint path, optionally with a query string.
        query: Explicit query parameters as key/value pairs.

    Returns:
        The absolute request URL.

    Raises:
        ConfigurationError: If ``endpoint_path`` is blank.
        EncodeError: If ``endpoint_path`` cannot be parsed.

    Example:
        ```pycon
        >>> from pandadoc.core.url import build_url
        >>> build_url("https://api.example.com/public/v1/", "documents?a=1", [("b", "2")])
        'https://api.example.com/public/v1/documents?a=1&b=2'

        ```
    """
    if not endpoint_path or not endpoint_path.strip():
        raise ConfigurationError(ErrorKind.ENDPOINT_PATH_REQUIRED)

    try:
        base = httpx.URL(base_url)
        rel = httpx.URL(endpoint_path)
    except httpx.InvalidURL as exc:
        raise EncodeError(message=f"parse endpoint path: {exc}") from exc

    pairs = [
        *base.params.multi_items(),
        *rel.params.multi_items(),
        *query,
    ]
    # Stable sort keeps the relative order of values sharing a key
    pairs.sort(key=lambda pair: pair[0])
    # Raw paths keep escaped path parameters such as "%2F" intact
    path = join_paths(_raw_path(base), _raw_path(rel))
    return str(base.copy_with(path=path, params=pairs))


def _raw_path(url: httpx.URL) -> str:
    return url.raw_path.decode("ascii").partition("?")[0]

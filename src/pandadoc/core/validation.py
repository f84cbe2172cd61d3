r"""Parameter validation utilities for client configuration and request
construction.

This module provides validation functions that reject invalid input
before any network traffic happens.
"""

from __future__ import annotations

__all__ = ["escape_path_param", "normalize_base_url", "validate_timeout"]

from urllib.parse import quote

import httpx

from pandadoc.exceptions import ConfigurationError, ErrorKind


def validate_timeout(timeout: float | httpx.Timeout) -> None:
    """Validate timeout parameter.

    Args:
        timeout: Maximum seconds to wait for server responses.
            Must be > 0 if provided as a numeric value.

    Raises:
        ConfigurationError: If timeout is a numeric value <= 0.

    Example:
        ```pycon
        >>> from pandadoc.core.validation import validate_timeout
        >>> validate_timeout(10.0)
        >>> validate_timeout(30)
        >>> validate_timeout(0)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        pandadoc.exceptions.ConfigurationError: timeout must be > 0, got 0

        ```
    """
    if isinstance(timeout, (int, float)) and timeout <= 0:
        raise ConfigurationError(ErrorKind.INVALID_TIMEOUT, f"timeout must be > 0, got {timeout}")


def normalize_base_url(raw: str, default: str) -> str:
    """Normalize the API base URL so that its path ends with ``/``.

    Args:
        raw: The configured base URL. Blank means ``default``.
        default: The fallback base URL.

    Returns:
        The normalized base URL.

    Raises:
        ConfigurationError: If the URL cannot be parsed or lacks a scheme
            or host.

    Example:
        ```pycon
        >>> from pandadoc.core.validation import normalize_base_url
        >>> normalize_base_url("https://api.example.com/public/v1", "https://x.io/")
        'https://api.example.com/public/v1/'
        >>> normalize_base_url("  ", "https://api.pandadoc.com/")
        'https://api.pandadoc.com/'

        ```
    """
    raw = (raw or "").strip() or default
    try:
        url = httpx.URL(raw)
    except httpx.InvalidURL as exc:
        raise ConfigurationError(
            ErrorKind.INVALID_BASE_URL, f"invalid base URL: {exc}"
        ) from exc
    if not url.scheme or not url.host:
        raise ConfigurationError(ErrorKind.INVALID_BASE_URL, f"invalid base URL: {raw!r}")

    path = url.raw_path.decode("ascii").partition("?")[0]
    if not path.endswith("/"):
        path += "/"
    return str(url.copy_with(path=path))


def escape_path_param(value: str) -> str:
    """Validate and percent-escape a single path segment.

    Args:
        value: The raw path parameter (e.g. a document id).

    Returns:
        The stripped value with every reserved character escaped.

    Raises:
        ConfigurationError: If the value is blank.

    Example:
        ```pycon
        >>> from pandadoc.core.validation import escape_path_param
        >>> escape_path_param(" doc/1 ")
        'doc%2F1'

        ```
    """
    trimmed = (value or "").strip()
    if not trimmed:
        raise ConfigurationError(ErrorKind.EMPTY_PATH_PARAMETER)
    return quote(trimmed, safe="")

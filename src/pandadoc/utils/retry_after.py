r"""Retry-After header parsing utilities.

This module provides functions for parsing the Retry-After header value
from HTTP responses according to RFC 9110.
"""

from __future__ import annotations

__all__ = ["parse_retry_after"]

import logging
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime

logger: logging.Logger = logging.getLogger(__name__)


def parse_retry_after(retry_after_header: str | None) -> float | None:
    """Parse the Retry-After header value from an HTTP response.

    The Retry-After header can be specified in two formats:
    1. A non-negative integer number of seconds (e.g., "120")
    2. An HTTP-date (e.g., "Wed, 21 Oct 2015 07:28:00 GMT")

    Surrounding whitespace is ignored. A date in the past yields ``0.0``.
    Anything else, including negative or fractional numbers, yields
    ``None`` so the caller falls back to the computed backoff.

    Args:
        retry_after_header: The value of the Retry-After header, or None
            if the header is not present in the response.

    Returns:
        The number of seconds to wait before retrying, or None.

    Example:
        ```pycon
        >>> from pandadoc.utils import parse_retry_after
        >>> parse_retry_after("120")
        120.0
        >>> parse_retry_after(" 0 ")
        0.0
        >>> parse_retry_after("Wed, 21 Oct 2015 07:28:00 GMT")
        0.0
        >>> parse_retry_after("-1") is None
        True
        >>> parse_retry_after("soon") is None
        True
        >>> parse_retry_after(None) is None
        True

        ```
    """
    if retry_after_header is None:
        return None
    value = retry_after_header.strip()
    if not value:
        return None

    # Delay in seconds
    if value.isascii() and value.isdigit():
        try:
            return float(int(value))
        except (ValueError, OverflowError):
            logger.debug(f"Retry-After header out of range: {value[:20]}...")
            return None

    # HTTP-date
    try:
        retry_date: datetime = parsedate_to_datetime(value)
    except (ValueError, TypeError, IndexError, OverflowError):
        logger.debug(f"Failed to parse Retry-After header: {retry_after_header!r}")
        return None
    if retry_date.tzinfo is None:
        retry_date = retry_date.replace(tzinfo=timezone.utc)
    delta_seconds = (retry_date - datetime.now(timezone.utc)).total_seconds()
    return max(0.0, delta_seconds)

r"""Retry strategy for calculating backoff delays.

This module provides the RetryStrategy class which combines the backoff
strategy with the server's ``Retry-After`` hint.
"""

from __future__ import annotations

__all__ = ["RetryStrategy"]

import logging
from typing import TYPE_CHECKING

from pandadoc.utils.retry_after import parse_retry_after

if TYPE_CHECKING:
    import httpx

    from pandadoc.backoff.base import BaseBackoffStrategy

logger: logging.Logger = logging.getLogger(__name__)


class RetryStrategy:
    """Strategy for calculating the delay before the next attempt.

    A valid ``Retry-After`` header on the response replaces the computed
    backoff, even when it is longer than the backoff cap.

    Args:
        backoff_strategy: Backoff strategy instance.

    Example:
        ```pycon
        >>> import httpx
        >>> from pandadoc.backoff import ExponentialBackoff
        >>> from pandadoc.retry import RetryStrategy
        >>> strategy = RetryStrategy(ExponentialBackoff(initial=0.2, maximum=2.0))
        >>> strategy.calculate_delay(1)
        0.4
        >>> strategy.calculate_delay(0, httpx.Response(429, headers={"Retry-After": "3"}))
        3.0

        ```
    """

    def __init__(self, backoff_strategy: BaseBackoffStrategy) -> None:
        self.backoff_strategy = backoff_strategy

    def calculate_delay(self, attempt: int, response: httpx.Response | None = None) -> float:
        """Calculate delay before next retry.

        Args:
            attempt: Current attempt number (0-indexed).
            response: Optional HTTP response.

        Returns:
            Sleep time in seconds.
        """
        if response is not None:
            retry_after = parse_retry_after(response.headers.get("Retry-After"))
            if retry_after is not None:
                logger.debug(f"Using Retry-After header value: {retry_after:.2f}s")
                return retry_after
        return self.backoff_strategy.calculate(attempt)

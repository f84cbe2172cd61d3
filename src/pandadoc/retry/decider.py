r"""Retry decision logic for determining whether to retry requests.

This module provides the RetryDecider class that encapsulates the logic
for deciding whether a request should be retried based on the response
status code or the transport exception, and the retry policy.
"""

from __future__ import annotations

__all__ = ["RetryDecider"]

from http import HTTPStatus
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

    from pandadoc.core.config import RetryPolicy


class RetryDecider:
    """Decides whether a request should be retried.

    Args:
        policy: The normalized retry policy.

    Example:
        ```pycon
        >>> from pandadoc.core.config import RetryPolicy
        >>> from pandadoc.retry import RetryDecider
        >>> decider = RetryDecider(RetryPolicy(max_retries=1, retry_on_5xx=False))
        >>> decider.is_retryable_status(429)
        True
        >>> decider.is_retryable_status(503)
        False

        ```
    """

    def __init__(self, policy: RetryPolicy) -> None:
        self.policy = policy

    def is_retryable_status(self, status_code: int) -> bool:
        """Return ``True`` if the policy retries ``status_code``."""
        if status_code == HTTPStatus.TOO_MANY_REQUESTS:
            return self.policy.retry_on_429
        if 500 <= status_code <= 599:
            return self.policy.retry_on_5xx
        return False

    def should_retry_response(self, attempt: int, response: httpx.Response) -> tuple[bool, str]:
        """Determine if response should trigger retry.

        Args:
            attempt: Current attempt number (0-indexed).
            response: The HTTP response to evaluate.

        Returns:
            Tuple of (should_retry, reason).
        """
        if attempt >= self.policy.max_retries:
            return (False, "max retries exhausted")
        if not self.is_retryable_status(response.status_code):
            return (False, f"status {response.status_code} is not retryable")
        return (True, f"status {response.status_code}")

    def should_retry_exception(self, attempt: int, exception: Exception) -> tuple[bool, str]:
        """Determine if a transport exception should trigger retry.

        Every transport failure is retryable until the retry budget is
        spent.

        Args:
            attempt: Current attempt number (0-indexed).
            exception: The exception to evaluate.

        Returns:
            Tuple of (should_retry, reason).
        """
        if attempt >= self.policy.max_retries:
            return (False, "max retries exhausted")
        return (True, f"{type(exception).__name__}")

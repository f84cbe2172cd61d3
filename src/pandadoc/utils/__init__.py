r"""Utility functions for retry timing.

This package provides the Retry-After header parser and the cancellable
sleep helpers used between retry attempts.
"""

from __future__ import annotations

__all__ = ["parse_retry_after", "sleep", "sleep_async"]

from pandadoc.utils.retry_after import parse_retry_after
from pandadoc.utils.sleep import sleep, sleep_async

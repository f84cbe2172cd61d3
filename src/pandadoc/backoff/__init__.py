r"""Backoff strategies for retry delays."""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy", "ExponentialBackoff"]

from pandadoc.backoff.base import BaseBackoffStrategy
from pandadoc.backoff.exponential import ExponentialBackoff

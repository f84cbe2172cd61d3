r"""Retry package implementing the request execution loop.

This package splits the retry machinery into small collaborators.

Public API:
    - RetryDecider: Logic for deciding whether to retry
    - RetryStrategy: Strategy for calculating retry delays
    - RequestExecutor: Synchronous request executor
    - AsyncRequestExecutor: Asynchronous request executor
"""

from __future__ import annotations

__all__ = [
    "AsyncRequestExecutor",
    "RequestExecutor",
    "RetryDecider",
    "RetryStrategy",
]

from pandadoc.retry.decider import RetryDecider
from pandadoc.retry.executor import RequestExecutor
from pandadoc.retry.executor_async import AsyncRequestExecutor
from pandadoc.retry.strategy import RetryStrategy

r"""Asynchronous request executor.

This module provides the AsyncRequestExecutor class, the ``asyncio``
counterpart of ``RequestExecutor``. It shares the URL, body and header
logic with the synchronous executor and waits with ``asyncio.sleep`` so
other tasks keep running between attempts.
"""

from __future__ import annotations

__all__ = ["AsyncRequestExecutor"]

import logging
from typing import TYPE_CHECKING

import httpx

from pandadoc.backoff.exponential import ExponentialBackoff
from pandadoc.core.errors import parse_api_error
from pandadoc.exceptions import TransportError
from pandadoc.retry.decider import RetryDecider
from pandadoc.retry.executor_core import (
    build_attempt_request,
    drain_and_close_async,
    prepare_call,
)
from pandadoc.retry.strategy import RetryStrategy
from pandadoc.utils.sleep import sleep_async

if TYPE_CHECKING:
    from pandadoc.core.config import ClientConfig
    from pandadoc.request import RequestSpec

logger: logging.Logger = logging.getLogger(__name__)


class AsyncRequestExecutor:
    """Executes async API calls with automatic retry logic.

    Cancelling the awaiting task, directly or through ``asyncio.timeout``,
    interrupts an in-flight attempt or a backoff wait and propagates to the
    caller unchanged.

    Args:
        config: The client configuration.
        client: The httpx async client used to send requests.

    Example:
        ```pycon
        >>> import asyncio
        >>> import httpx
        >>> from pandadoc.core.config import ClientConfig
        >>> from pandadoc.request import RequestSpec
        >>> from pandadoc.retry import AsyncRequestExecutor
        >>> async def main():
        ...     transport = httpx.MockTransport(lambda request: httpx.Response(204))
        ...     async with httpx.AsyncClient(transport=transport) as client:
        ...         executor = AsyncRequestExecutor(ClientConfig(api_key="key"), client)
        ...         response = await executor.execute(RequestSpec("DELETE", "/public/v1/documents/1"))
        ...         await response.aclose()
        ...     return response.status_code
        ...
        >>> asyncio.run(main())
        204

        ```
    """

    def __init__(self, config: ClientConfig, client: httpx.AsyncClient) -> None:
        policy = config.retry_policy
        self.config = config
        self.client = client
        self.decider = RetryDecider(policy)
        self.strategy = RetryStrategy(
            ExponentialBackoff(initial=policy.initial_backoff, maximum=policy.max_backoff)
        )
        self.logger = config.logger or logger

    async def execute(self, spec: RequestSpec | None) -> httpx.Response:
        """Send a call and return the live successful response.

        Args:
            spec: The request descriptor.

        Returns:
            The successful response, still streaming. The caller must
            close it.

        Raises:
            ConfigurationError: If the descriptor is missing or invalid.
            EncodeError: If the URL or body cannot be encoded.
            AuthenticationError: If credentials are required but missing.
            TransportError: If the last attempt failed at transport level.
            APIError: If the final response has an unexpected status.
        """
        call = prepare_call(self.config, spec)
        method, url = call.method, call.url

        attempt = 0
        while True:
            request = build_attempt_request(self.client, self.config, call)
            self.logger.debug(f"API request: {method} {url} (attempt {attempt + 1})")

            try:
                response = await self.client.send(request, stream=True)
            except httpx.RequestError as exc:
                should_retry, reason = self.decider.should_retry_exception(attempt, exc)
                if not should_retry:
                    self.logger.error(f"{method} request to {url} failed: {exc}")
                    raise TransportError(method, url, exc, attempts=attempt + 1) from exc
                delay = self.strategy.calculate_delay(attempt)
                self.logger.info(
                    f"Retrying {method} request to {url} after error ({reason}), "
                    f"waiting {delay:.2f}s"
                )
                await sleep_async(delay)
                attempt += 1
                continue

            self.logger.debug(
                f"API response: {response.status_code} {response.reason_phrase} "
                f"for {method} {url}"
            )
            should_retry, reason = self.decider.should_retry_response(attempt, response)
            if should_retry:
                delay = self.strategy.calculate_delay(attempt, response)
                self.logger.info(
                    f"Retrying {method} request to {url} on {reason}, waiting {delay:.2f}s"
                )
                await drain_and_close_async(response)
                await sleep_async(delay)
                attempt += 1
                continue

            if not call.spec.is_expected(response.status_code):
                try:
                    try:
                        await response.aread()
                    except (httpx.HTTPError, httpx.StreamError) as exc:
                        self.logger.debug(f"Failed to read error response body: {exc}")
                    error = parse_api_error(response)
                finally:
                    await response.aclose()
                self.logger.error(f"{method} request to {url} failed: {error}")
                raise error

            return response

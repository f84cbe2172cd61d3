r"""Synchronous request executor.

This module provides the RequestExecutor class that sends one logical
API call, retrying transport failures and retryable status codes with
capped exponential backoff.
"""

from __future__ import annotations

__all__ = ["RequestExecutor"]

import logging
from typing import TYPE_CHECKING

import httpx

from pandadoc.backoff.exponential import ExponentialBackoff
from pandadoc.core.errors import parse_api_error
from pandadoc.exceptions import RequestCancelledError, TransportError
from pandadoc.retry.decider import RetryDecider
from pandadoc.retry.executor_core import (
    build_attempt_request,
    drain_and_close,
    prepare_call,
)
from pandadoc.retry.strategy import RetryStrategy
from pandadoc.utils.sleep import sleep

if TYPE_CHECKING:
    import threading

    from pandadoc.core.config import ClientConfig
    from pandadoc.request import RequestSpec

logger: logging.Logger = logging.getLogger(__name__)


class RequestExecutor:
    """Executes API calls with automatic retry logic.

    The executor holds no per-call state: the URL and body are computed
    once per call and every attempt builds a fresh ``httpx.Request``.

    The executor orchestrates the following components:
    - RetryDecider: Determines whether to retry based on responses/exceptions
    - RetryStrategy: Calculates backoff delays between retries

    Args:
        config: The client configuration.
        client: The httpx client used to send requests.

    Attributes:
        config: The client configuration.
        client: The httpx client used to send requests.
        decider: Logic for deciding whether to retry.
        strategy: Strategy for calculating retry delays.
        logger: Logger receiving attempt, retry and failure records.

    Example:
        ```pycon
        >>> import httpx
        >>> from pandadoc.core.config import ClientConfig
        >>> from pandadoc.request import RequestSpec
        >>> from pandadoc.retry import RequestExecutor
        >>> transport = httpx.MockTransport(lambda request: httpx.Response(200, text="ok"))
        >>> with httpx.Client(transport=transport) as client:
        ...     executor = RequestExecutor(ClientConfig(api_key="key"), client)
        ...     response = executor.execute(RequestSpec("GET", "/public/v1/documents"))
        ...     response.read()
        ...
        b'ok'

        ```
    """

    def __init__(self, config: ClientConfig, client: httpx.Client) -> None:
        policy = config.retry_policy
        self.config = config
        self.client = client
        self.decider = RetryDecider(policy)
        self.strategy = RetryStrategy(
            ExponentialBackoff(initial=policy.initial_backoff, maximum=policy.max_backoff)
        )
        self.logger = config.logger or logger

    def execute(
        self, spec: RequestSpec | None, cancel: threading.Event | None = None
    ) -> httpx.Response:
        """Send a call and return the live successful response.

        Attempts the call up to ``max_retries + 1`` times. Transport
        failures and retryable status codes (429, 5xx) are retried; the
        body of a retried response is drained and closed before waiting.

        Args:
            spec: The request descriptor.
            cancel: Optional event that aborts the call when set before
                an attempt or during a backoff wait.

        Returns:
            The successful response, still streaming. The caller must
            close it.

        Raises:
            ConfigurationError: If the descriptor is missing or invalid.
            EncodeError: If the URL or body cannot be encoded.
            AuthenticationError: If credentials are required but missing.
            TransportError: If the last attempt failed at transport level.
            APIError: If the final response has an unexpected status.
            RequestCancelledError: If ``cancel`` is set.
        """
        call = prepare_call(self.config, spec)
        method, url = call.method, call.url

        attempt = 0
        while True:
            if cancel is not None and cancel.is_set():
                raise RequestCancelledError
            request = build_attempt_request(self.client, self.config, call)
            self.logger.debug(f"API request: {method} {url} (attempt {attempt + 1})")

            try:
                response = self.client.send(request, stream=True)
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
                sleep(delay, cancel)
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
                drain_and_close(response)
                sleep(delay, cancel)
                attempt += 1
                continue

            if not call.spec.is_expected(response.status_code):
                try:
                    error = parse_api_error(response)
                finally:
                    response.close()
                self.logger.error(f"{method} request to {url} failed: {error}")
                raise error

            return response

r"""Shared core logic for request executors.

This module provides helper functions used by both the synchronous and
the asynchronous request executors: preparing the URL and body once per
call, building each attempt's ``httpx.Request`` and releasing responses
that are not handed to the caller.
"""

from __future__ import annotations

__all__ = [
    "PreparedCall",
    "build_attempt_request",
    "drain_and_close",
    "drain_and_close_async",
    "prepare_call",
]

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

import httpx

from pandadoc.core.body import EncodedBody, encode_body
from pandadoc.core.config import DEFAULT_ACCEPT
from pandadoc.core.url import build_url
from pandadoc.exceptions import ConfigurationError, ErrorKind

if TYPE_CHECKING:
    from pandadoc.core.config import ClientConfig
    from pandadoc.request import RequestSpec

logger: logging.Logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PreparedCall:
    """URL and body of a call, computed once and reused by every attempt.

    Args:
        spec: The request descriptor.
        url: The absolute request URL.
        body: The encoded body.
    """

    spec: RequestSpec
    url: str
    body: EncodedBody

    @property
    def method(self) -> str:
        return self.spec.method


def prepare_call(config: ClientConfig, spec: RequestSpec | None) -> PreparedCall:
    """Resolve the URL and encode the body of a request descriptor.

    Args:
        config: The client configuration.
        spec: The request descriptor.

    Returns:
        The prepared call.

    Raises:
        ConfigurationError: If ``spec`` is ``None`` or invalid.
        EncodeError: If the URL or the body cannot be encoded.
    """
    if spec is None:
        raise ConfigurationError(ErrorKind.NIL_REQUEST)
    url = build_url(config.base_url, spec.path, spec.params)
    return PreparedCall(spec=spec, url=url, body=encode_body(spec))


def build_attempt_request(
    client: httpx.Client | httpx.AsyncClient,
    config: ClientConfig,
    call: PreparedCall,
) -> httpx.Request:
    """Build the ``httpx.Request`` for one attempt.

    ``Content-Type`` is only set when there is a body. ``Accept`` and
    ``User-Agent`` are set first, then the descriptor's extra headers are
    appended in order, then the ``Authorization`` header is applied.

    Args:
        client: The httpx client that will send the request.
        config: The client configuration.
        call: The prepared call.

    Returns:
        A fresh request carrying the same body bytes as every other
        attempt of the call.

    Raises:
        AuthenticationError: If the call requires authentication and no
            credential is configured.
    """
    headers: list[tuple[str, str]] = []
    if call.body:
        headers.append(("Content-Type", call.body.content_type))
    headers.append(("Accept", call.spec.accept or DEFAULT_ACCEPT))
    headers.append(("User-Agent", config.user_agent))
    headers.extend(call.spec.headers)

    request = client.build_request(
        call.method,
        call.url,
        content=call.body.content or None,
        headers=headers,
        timeout=config.timeout,
    )
    config.credentials.inject(request, call.spec.require_auth)
    return request


def drain_and_close(response: httpx.Response) -> None:
    """Read and discard the rest of a response body, then close it."""
    try:
        response.read()
    except (httpx.HTTPError, httpx.StreamError) as exc:
        logger.debug(f"Failed to drain response body: {exc}")
    finally:
        response.close()


async def drain_and_close_async(response: httpx.Response) -> None:
    """Read and discard the rest of a response body, then close it."""
    try:
        await response.aread()
    except (httpx.HTTPError, httpx.StreamError) as exc:
        logger.debug(f"Failed to drain response body: {exc}")
    finally:
        await response.aclose()

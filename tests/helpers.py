r"""Shared test helpers for clients backed by ``httpx.MockTransport``.

This module contains the scripted mock server and the client factories
used across the executor, client and service tests.
"""

from __future__ import annotations

__all__ = ["BASE_URL", "MockServer", "make_async_client", "make_client"]

from typing import TYPE_CHECKING, Any, Union

import httpx

from pandadoc import PandaDocClient

if TYPE_CHECKING:
    from collections.abc import Callable

Reply = Union[httpx.Response, Exception, "Callable[[httpx.Request], httpx.Response]"]

BASE_URL = "https://api.example.com/"


class MockServer:
    """Scripted request handler for ``httpx.MockTransport``.

    Every call records the request and answers with the next scripted
    reply. The last reply is repeated once the script is exhausted. A
    reply is either a response template, an exception to raise, or a
    callable receiving the request.

    Args:
        *replies: The scripted replies. Defaults to ``200 {}``.
    """

    def __init__(self, *replies: Reply) -> None:
        self.replies: list[Reply] = list(replies) or [httpx.Response(200, json={})]
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        reply = self.replies.pop(0) if len(self.replies) > 1 else self.replies[0]
        if isinstance(reply, Exception):
            raise reply
        if isinstance(reply, httpx.Response):
            # Fresh copy so that each attempt gets an unread response
            return httpx.Response(reply.status_code, headers=reply.headers, content=reply.content)
        return reply(request)

    @property
    def calls(self) -> int:
        return len(self.requests)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def script(self, *replies: Reply) -> MockServer:
        """Replace the scripted replies and return the server."""
        self.replies = list(replies)
        return self


def _client_options(kwargs: dict[str, Any]) -> dict[str, Any]:
    options: dict[str, Any] = {"api_key": "test-key", "base_url": BASE_URL}
    options.update(kwargs)
    return options


def make_client(server: MockServer, **kwargs: Any) -> PandaDocClient:
    """Create a client whose synchronous requests are answered by
    ``server``."""
    http_client = httpx.Client(transport=httpx.MockTransport(server))
    return PandaDocClient(http_client=http_client, **_client_options(kwargs))


def make_async_client(server: MockServer, **kwargs: Any) -> PandaDocClient:
    """Create a client whose asynchronous requests are answered by
    ``server``."""
    async_http_client = httpx.AsyncClient(transport=httpx.MockTransport(server))
    return PandaDocClient(async_http_client=async_http_client, **_client_options(kwargs))

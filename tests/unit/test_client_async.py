r"""Unit tests for the asynchronous PandaDocClient API."""

from __future__ import annotations

from unittest.mock import Mock

import httpx
import pytest

from pandadoc import APIError, DecodeError, DownloadResponse, PandaDocClient, RequestSpec
from pandadoc.models import DocumentSummary
from tests.helpers import MockServer, make_async_client


@pytest.mark.asyncio
async def test_client_request_async(server: MockServer) -> None:
    """Test that request_async returns the live response."""
    server.script(httpx.Response(200, text="plain"))
    async with make_async_client(server) as client:
        response = await client.request_async(RequestSpec("GET", "/x"))
        assert await response.aread() == b"plain"
        await response.aclose()
    assert server.last_request.headers["Authorization"] == "API-Key test-key"


@pytest.mark.asyncio
async def test_client_decode_json_async_model(server: MockServer) -> None:
    """Test decoding into a pydantic model."""
    server.script(httpx.Response(200, json={"id": "doc-1", "name": "Quote"}))
    async with make_async_client(server) as client:
        summary = await client.decode_json_async(RequestSpec("GET", "/x"), DocumentSummary)
    assert summary.id == "doc-1"
    assert summary.name == "Quote"


@pytest.mark.asyncio
async def test_client_decode_json_async_empty_body(server: MockServer) -> None:
    """Test that an empty body decodes to None."""
    server.script(httpx.Response(204))
    async with make_async_client(server) as client:
        assert await client.decode_json_async(RequestSpec("DELETE", "/x")) is None


@pytest.mark.asyncio
async def test_client_decode_json_async_invalid_json(server: MockServer) -> None:
    """Test that an invalid JSON body raises a decode error."""
    server.script(httpx.Response(200, text="<html>"))
    async with make_async_client(server) as client:
        with pytest.raises(DecodeError):
            await client.decode_json_async(RequestSpec("GET", "/x"))


@pytest.mark.asyncio
async def test_client_decode_json_async_retries(server: MockServer, mock_asleep: Mock) -> None:
    """Test that the async path retries transient failures."""
    server.script(httpx.Response(429), httpx.Response(200, json={"ok": True}))
    async with make_async_client(server) as client:
        assert await client.decode_json_async(RequestSpec("GET", "/x")) == {"ok": True}
    assert server.calls == 2
    mock_asleep.assert_called_once_with(0.2)


@pytest.mark.asyncio
async def test_client_decode_json_async_api_error(server: MockServer) -> None:
    """Test that an unexpected status raises an API error."""
    server.script(httpx.Response(403, json={"type": "permission_error", "detail": "Forbidden"}))
    async with make_async_client(server) as client:
        with pytest.raises(APIError) as exc_info:
            await client.decode_json_async(RequestSpec("GET", "/x"))
    assert exc_info.value.is_forbidden


@pytest.mark.asyncio
async def test_client_download_async(server: MockServer) -> None:
    """Test that download_async wraps the streaming response."""
    server.script(
        httpx.Response(
            200,
            headers={
                "Content-Type": "application/pdf",
                "Content-Disposition": 'attachment; filename="a.pdf"',
            },
            content=b"%PDF",
        )
    )
    async with make_async_client(server) as client:
        download = await client.download_async(RequestSpec("GET", "/x"))
        assert isinstance(download, DownloadResponse)
        assert download.content_disposition == 'attachment; filename="a.pdf"'
        assert await download.aread() == b"%PDF"


@pytest.mark.asyncio
async def test_client_aclose_owned_async_client() -> None:
    """Test that an async client created lazily is closed by aclose."""
    client = PandaDocClient(api_key="key", http_client=httpx.Client())
    client._get_async_executor()
    async_http_client = client._async_client
    await client.aclose()
    assert async_http_client.is_closed
    assert not client.config.http_client.is_closed
    client.config.http_client.close()


@pytest.mark.asyncio
async def test_client_aclose_supplied_async_client() -> None:
    """Test that a supplied async client is left open."""
    async_http_client = httpx.AsyncClient()
    async with PandaDocClient(async_http_client=async_http_client):
        pass
    assert not async_http_client.is_closed
    await async_http_client.aclose()


@pytest.mark.asyncio
async def test_client_aclose_without_async_use() -> None:
    """Test that aclose works when the async path was never used."""
    client = PandaDocClient()
    await client.aclose()
    assert client._async_client is None
    assert client._client.is_closed

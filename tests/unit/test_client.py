r"""Unit tests for the synchronous PandaDocClient API."""

from __future__ import annotations

import threading
from unittest.mock import Mock

import httpx
import pytest
from pydantic import BaseModel

from pandadoc import (
    APIError,
    ClientConfig,
    DecodeError,
    DownloadResponse,
    PandaDocClient,
    RequestCancelledError,
    RequestSpec,
    RetryPolicy,
)
from pandadoc.exceptions import ConfigurationError, ErrorKind
from pandadoc.models import DocumentSummary
from pandadoc.services import (
    DocumentsService,
    OAuthService,
    ProductCatalogService,
    WebhookEventsService,
    WebhookSubscriptionsService,
)
from tests.helpers import MockServer, make_client


class _Item(BaseModel):
    id: int


##############################################
#     Tests for PandaDocClient construction  #
##############################################


def test_client_default_config() -> None:
    """Test that a client without arguments uses the defaults."""
    with PandaDocClient() as client:
        assert client.config == ClientConfig()


def test_client_from_kwargs() -> None:
    """Test that keyword arguments build the configuration."""
    with PandaDocClient(api_key="key", timeout=5.0) as client:
        assert client.config.api_key == "key"
        assert client.config.timeout == 5.0


def test_client_config_with_overrides() -> None:
    """Test that keyword arguments override the given configuration."""
    config = ClientConfig(api_key="key", timeout=10.0)
    with PandaDocClient(config, timeout=2.0) as client:
        assert client.config.timeout == 2.0
        assert client.config.api_key == "key"


def test_client_invalid_config() -> None:
    """Test that invalid settings fail at construction time."""
    with pytest.raises(ConfigurationError) as exc_info:
        PandaDocClient(api_key="key", access_token="tok")
    assert exc_info.value.kind is ErrorKind.MULTIPLE_AUTHENTICATION_METHODS


def test_client_with_api_key() -> None:
    """Test the API key factory."""
    with PandaDocClient.with_api_key("key", base_url="https://api.example.com") as client:
        assert client.config.credentials.authorization_header() == "API-Key key"
        assert client.config.base_url == "https://api.example.com/"


def test_client_with_access_token() -> None:
    """Test the OAuth access token factory."""
    with PandaDocClient.with_access_token("tok") as client:
        assert client.config.credentials.authorization_header() == "Bearer tok"


def test_client_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test the environment factory."""
    monkeypatch.setenv("PANDADOC_ACCESS_TOKEN", "env-tok")
    monkeypatch.delenv("PANDADOC_API_KEY", raising=False)
    with PandaDocClient.from_env(timeout=3.0) as client:
        assert client.config.access_token == "env-tok"
        assert client.config.timeout == 3.0


def test_client_services() -> None:
    """Test that every service is bound to the client."""
    with PandaDocClient() as client:
        assert isinstance(client.documents, DocumentsService)
        assert isinstance(client.product_catalog, ProductCatalogService)
        assert isinstance(client.oauth, OAuthService)
        assert isinstance(client.webhook_subscriptions, WebhookSubscriptionsService)
        assert isinstance(client.webhook_events, WebhookEventsService)


def test_client_closes_owned_http_client() -> None:
    """Test that an httpx client created by the client is closed."""
    client = PandaDocClient()
    http_client = client._client
    client.close()
    assert http_client.is_closed


def test_client_keeps_supplied_http_client_open() -> None:
    """Test that a supplied httpx client is left open."""
    http_client = httpx.Client()
    with PandaDocClient(http_client=http_client):
        pass
    assert not http_client.is_closed
    http_client.close()


def test_client_supplied_http_client_is_used(server: MockServer) -> None:
    """Test that requests go through the supplied httpx client."""
    with make_client(server) as client:
        client.request(RequestSpec("GET", "/x")).close()
    assert server.calls == 1
    assert str(server.last_request.url) == "https://api.example.com/x"


#####################################
#     Tests for request methods     #
#####################################


def test_client_request_returns_live_response(server: MockServer) -> None:
    """Test that request returns the response for the caller to read."""
    server.script(httpx.Response(200, text="plain"))
    with make_client(server) as client:
        response = client.request(RequestSpec("GET", "/x"))
        assert response.read() == b"plain"
        response.close()


def test_client_request_cancel(server: MockServer) -> None:
    """Test that a set cancellation event stops the call."""
    cancel = threading.Event()
    cancel.set()
    with make_client(server) as client, pytest.raises(RequestCancelledError):
        client.request(RequestSpec("GET", "/x"), cancel=cancel)
    assert server.calls == 0


def test_client_decode_json_raw(server: MockServer) -> None:
    """Test decoding into plain Python values."""
    server.script(httpx.Response(200, json={"results": [{"id": "a"}]}))
    with make_client(server) as client:
        assert client.decode_json(RequestSpec("GET", "/x")) == {"results": [{"id": "a"}]}


def test_client_decode_json_model(server: MockServer) -> None:
    """Test decoding into a pydantic model."""
    server.script(
        httpx.Response(200, json={"id": "doc-1", "status": "document.draft", "extra": 1})
    )
    with make_client(server) as client:
        summary = client.decode_json(RequestSpec("GET", "/x"), DocumentSummary)
    assert isinstance(summary, DocumentSummary)
    assert summary.id == "doc-1"
    assert summary.status == "document.draft"
    assert summary.model_extra == {"extra": 1}


@pytest.mark.parametrize("body", [b"", b"  \n"])
def test_client_decode_json_empty_body(server: MockServer, body: bytes) -> None:
    """Test that an empty body decodes to None."""
    server.script(httpx.Response(204, content=body))
    with make_client(server) as client:
        assert client.decode_json(RequestSpec("DELETE", "/x"), DocumentSummary) is None


def test_client_decode_json_invalid_json(server: MockServer) -> None:
    """Test that an invalid JSON body raises a decode error."""
    server.script(httpx.Response(200, text="{not json"))
    with make_client(server) as client, pytest.raises(DecodeError) as exc_info:
        client.decode_json(RequestSpec("GET", "/x"))
    assert exc_info.value.kind is ErrorKind.DECODE


def test_client_decode_json_model_mismatch(server: MockServer) -> None:
    """Test that a body not matching the model raises a decode error."""
    server.script(httpx.Response(200, json={"id": "not-an-int"}))
    with make_client(server) as client, pytest.raises(DecodeError):
        client.decode_json(RequestSpec("GET", "/x"), _Item)


def test_client_decode_json_retries(server: MockServer, mock_sleep: Mock) -> None:
    """Test that decode_json goes through the retry loop."""
    server.script(httpx.Response(503), httpx.Response(200, json={"id": 3}))
    with make_client(server) as client:
        assert client.decode_json(RequestSpec("GET", "/x"), _Item) == _Item(id=3)
    assert server.calls == 2


def test_client_retry_policy(server: MockServer, mock_sleep: Mock) -> None:
    """Test that the configured retry policy is applied."""
    server.script(httpx.Response(500))
    policy = RetryPolicy(max_retries=4, initial_backoff=0.1, max_backoff=0.3)
    with make_client(server, retry_policy=policy) as client, pytest.raises(APIError):
        client.request(RequestSpec("GET", "/x"))
    assert server.calls == 5
    assert [c.args[0] for c in mock_sleep.call_args_list] == [0.1, 0.2, 0.3, 0.3]


def test_client_download(server: MockServer) -> None:
    """Test that download wraps the streaming response."""
    server.script(
        httpx.Response(200, headers={"Content-Type": "application/pdf"}, content=b"%PDF")
    )
    with make_client(server) as client:
        download = client.download(RequestSpec("GET", "/x", accept="application/pdf"))
        assert isinstance(download, DownloadResponse)
        assert download.content_type == "application/pdf"
        assert download.read() == b"%PDF"
    assert server.last_request.headers["Accept"] == "application/pdf"

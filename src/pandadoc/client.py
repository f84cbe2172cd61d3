r"""Client for the PandaDoc public REST API.

This module provides ``PandaDocClient``, which owns the configuration,
the underlying httpx clients and the request executors, and exposes the
per-resource services. Both a synchronous and an asynchronous path are
available on the same instance.
"""

from __future__ import annotations

__all__ = ["PandaDocClient"]

import json
import logging
from typing import TYPE_CHECKING, Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from pandadoc.core.config import ClientConfig
from pandadoc.download import DownloadResponse
from pandadoc.exceptions import DecodeError
from pandadoc.retry.executor import RequestExecutor
from pandadoc.retry.executor_async import AsyncRequestExecutor
from pandadoc.services.catalog import ProductCatalogService
from pandadoc.services.documents import DocumentsService
from pandadoc.services.oauth import OAuthService
from pandadoc.services.webhooks import WebhookEventsService, WebhookSubscriptionsService

if TYPE_CHECKING:
    import threading
    from types import TracebackType
    from typing import Self

    from pandadoc.request import RequestSpec

logger: logging.Logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class PandaDocClient:
    r"""Client for the PandaDoc API.

    The client creates its own ``httpx.Client`` (and, on first async use,
    its own ``httpx.AsyncClient``) unless the configuration supplies them.
    Clients it created are closed by ``close()`` / ``aclose()`` or when
    leaving a ``with`` / ``async with`` block; supplied clients are left
    open for their owner to close.

    Args:
        config: Optional validated configuration. If ``None``, one is
            built from ``**kwargs``.
        **kwargs: ``ClientConfig`` fields. When ``config`` is given they
            override its values.

    Raises:
        ConfigurationError: If the configuration is invalid.

    Example:
        ```pycon
        >>> from pandadoc import PandaDocClient
        >>> with PandaDocClient.with_api_key("my-key") as client:  # doctest: +SKIP
        ...     page = client.documents.list()
        ...     for document in page.results:
        ...         print(document.id, document.status)
        ...

        ```
    """

    def __init__(self, config: ClientConfig | None = None, **kwargs: Any) -> None:
        if config is None:
            config = ClientConfig(**kwargs)
        elif kwargs:
            config = config.merge(**kwargs)
        self._config = config

        self._owns_client = config.http_client is None
        self._client: httpx.Client = config.http_client or httpx.Client(timeout=config.timeout)
        self._owns_async_client = config.async_http_client is None
        self._async_client: httpx.AsyncClient | None = config.async_http_client

        self._executor = RequestExecutor(config, self._client)
        self._async_executor: AsyncRequestExecutor | None = None

        self.documents = DocumentsService(self)
        self.product_catalog = ProductCatalogService(self)
        self.oauth = OAuthService(self)
        self.webhook_subscriptions = WebhookSubscriptionsService(self)
        self.webhook_events = WebhookEventsService(self)

    @classmethod
    def with_api_key(cls, api_key: str, **kwargs: Any) -> PandaDocClient:
        r"""Create a client authenticating with ``Authorization: API-Key``."""
        return cls(ClientConfig(api_key=api_key, **kwargs))

    @classmethod
    def with_access_token(cls, access_token: str, **kwargs: Any) -> PandaDocClient:
        r"""Create a client authenticating with an OAuth ``Bearer`` token."""
        return cls(ClientConfig(access_token=access_token, **kwargs))

    @classmethod
    def from_env(cls, **overrides: Any) -> PandaDocClient:
        """Create a client configured from ``PANDADOC_*`` environment
        variables.

        Args:
            **overrides: ``ClientConfig`` fields taking precedence over
                the environment.

        Returns:
            The configured client.
        """
        return cls(ClientConfig.from_env(**overrides))

    @property
    def config(self) -> ClientConfig:
        r"""The validated client configuration."""
        return self._config

    def _get_async_executor(self) -> AsyncRequestExecutor:
        if self._async_executor is None:
            if self._async_client is None:
                self._async_client = httpx.AsyncClient(timeout=self._config.timeout)
            self._async_executor = AsyncRequestExecutor(self._config, self._async_client)
        return self._async_executor

    def request(self, spec: RequestSpec, cancel: threading.Event | None = None) -> httpx.Response:
        """Send a call and return the live successful response.

        The caller must close the returned response.

        Args:
            spec: The request descriptor.
            cancel: Optional event aborting the call while it waits
                between attempts.

        Returns:
            The successful streaming response.
        """
        return self._executor.execute(spec, cancel=cancel)

    def decode_json(
        self,
        spec: RequestSpec,
        model: type[ModelT] | None = None,
        cancel: threading.Event | None = None,
    ) -> ModelT | Any:
        """Send a call and decode its JSON body.

        Args:
            spec: The request descriptor.
            model: Optional pydantic model to validate the body into.
            cancel: Optional event aborting the call while it waits
                between attempts.

        Returns:
            ``None`` for an empty body, the validated model when ``model``
            is given, otherwise the decoded JSON value.

        Raises:
            DecodeError: If the body is not valid JSON or does not match
                ``model``.
        """
        response = self._executor.execute(spec, cancel=cancel)
        try:
            content = response.read()
        finally:
            response.close()
        return _decode(content, model)

    def download(
        self, spec: RequestSpec, cancel: threading.Event | None = None
    ) -> DownloadResponse:
        """Send a call and wrap the streaming body for the caller.

        Args:
            spec: The request descriptor.
            cancel: Optional event aborting the call while it waits
                between attempts.

        Returns:
            The download. The caller must close it.
        """
        return DownloadResponse(self._executor.execute(spec, cancel=cancel))

    def close(self) -> None:
        r"""Close the httpx client if this client created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    async def request_async(self, spec: RequestSpec) -> httpx.Response:
        r"""Asynchronous version of ``request``."""
        return await self._get_async_executor().execute(spec)

    async def decode_json_async(
        self, spec: RequestSpec, model: type[ModelT] | None = None
    ) -> ModelT | Any:
        r"""Asynchronous version of ``decode_json``."""
        response = await self._get_async_executor().execute(spec)
        try:
            content = await response.aread()
        finally:
            await response.aclose()
        return _decode(content, model)

    async def download_async(self, spec: RequestSpec) -> DownloadResponse:
        r"""Asynchronous version of ``download``."""
        return DownloadResponse(await self._get_async_executor().execute(spec))

    async def aclose(self) -> None:
        r"""Close every httpx client this client created."""
        if self._owns_async_client and self._async_client is not None:
            await self._async_client.aclose()
        self.close()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()


def _decode(content: bytes, model: type[ModelT] | None) -> ModelT | Any:
    if not content.strip():
        return None
    try:
        data = json.loads(content)
    except ValueError as exc:
        raise DecodeError(message=f"decode response body: {exc}") from exc
    if model is None:
        return data
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        logger.debug(f"Response body does not match {model.__name__}: {exc}")
        raise DecodeError(message=f"decode response body: {exc}") from exc

r"""pandadoc - Client for the PandaDoc public REST API.

This package provides a synchronous and asynchronous client for the
PandaDoc API built on top of httpx, with automatic retries of transient
failures and structured API errors.

Key Features:
    - API key and OAuth bearer token authentication
    - Automatic retries of transport failures, 429 and 5xx responses with
      capped exponential backoff
    - Retry-After header support (both integer seconds and HTTP-date formats)
    - Structured ``APIError`` built from the various PandaDoc error bodies
    - Streaming document downloads
    - Typed pydantic models for documents, product catalog, OAuth and webhooks

Example:
    ```pycon
    >>> from pandadoc import PandaDocClient, is_not_found
    >>> with PandaDocClient.with_api_key("my-key") as client:  # doctest: +SKIP
    ...     try:
    ...         details = client.documents.details("doc-id")
    ...     except Exception as exc:
    ...         if not is_not_found(exc):
    ...             raise
    ...

    ```
"""

from __future__ import annotations

__all__ = [
    "APIError",
    "AuthenticationError",
    "ClientConfig",
    "ConfigurationError",
    "DecodeError",
    "DownloadResponse",
    "EncodeError",
    "ErrorKind",
    "MultipartFile",
    "MultipartPayload",
    "PandaDocClient",
    "PandaDocError",
    "RequestCancelledError",
    "RequestSpec",
    "RetryPolicy",
    "TransportError",
    "__version__",
    "is_forbidden",
    "is_not_found",
    "is_rate_limited",
    "is_unauthorized",
]

from importlib.metadata import PackageNotFoundError, version

from pandadoc.client import PandaDocClient
from pandadoc.core.config import ClientConfig, RetryPolicy
from pandadoc.download import DownloadResponse
from pandadoc.exceptions import (
    APIError,
    AuthenticationError,
    ConfigurationError,
    DecodeError,
    EncodeError,
    ErrorKind,
    PandaDocError,
    RequestCancelledError,
    TransportError,
    is_forbidden,
    is_not_found,
    is_rate_limited,
    is_unauthorized,
)
from pandadoc.request import MultipartFile, MultipartPayload, RequestSpec

try:
    __version__ = version("pandadoc-client")
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"

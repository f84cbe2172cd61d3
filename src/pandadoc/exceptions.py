r"""Exception types raised by the PandaDoc client.

Every failure surfaces as a subclass of ``PandaDocError``. Each instance
carries an ``ErrorKind`` so callers can match on the kind of failure
without relying on identity of module-level sentinels.

Example:
    ```pycon
    >>> from pandadoc.exceptions import APIError, ErrorKind
    >>> err = APIError(status_code=429, message="Too Many Requests")
    >>> err.kind is ErrorKind.API
    True
    >>> err.is_rate_limited
    True

    ```
"""

from __future__ import annotations

__all__ = [
    "APIError",
    "AuthenticationError",
    "ConfigurationError",
    "DecodeError",
    "EncodeError",
    "ErrorKind",
    "PandaDocError",
    "RequestCancelledError",
    "TransportError",
    "is_forbidden",
    "is_not_found",
    "is_rate_limited",
    "is_unauthorized",
    "reason_phrase",
]

from enum import Enum
from http import HTTPStatus
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping


class ErrorKind(Enum):
    """Closed set of failure kinds raised by the client."""

    INVALID_BASE_URL = "invalid base URL"
    INVALID_HTTP_CLIENT = "http client must be an httpx client"
    INVALID_TIMEOUT = "timeout must be > 0"
    INVALID_ENVIRONMENT = "invalid environment variable"
    MULTIPLE_AUTHENTICATION_METHODS = "only one authentication method can be configured"
    MISSING_AUTHENTICATION = "missing authentication credentials"
    EMPTY_PATH_PARAMETER = "path parameter cannot be empty"
    ENDPOINT_PATH_REQUIRED = "endpoint path is required"
    NIL_REQUEST = "request payload cannot be nil"
    NIL_FILE_READER = "file reader is required"
    ONLY_ONE_BODY_TYPE = "only one request body type can be set"
    ENCODE = "request encoding failed"
    TRANSPORT = "transport failure"
    API = "API error"
    DECODE = "response decoding failed"
    CANCELLED = "request cancelled"


class PandaDocError(Exception):
    """Base class for all errors raised by the client.

    Args:
        kind: The kind of failure.
        message: Optional human readable message. Defaults to the kind's
            description.
    """

    default_kind: ErrorKind | None = None

    def __init__(self, kind: ErrorKind | None = None, message: str | None = None) -> None:
        kind = kind or self.default_kind
        if kind is None:
            msg = f"{type(self).__name__} requires an error kind"
            raise TypeError(msg)
        self.kind = kind
        super().__init__(message or kind.value)


class ConfigurationError(PandaDocError, ValueError):
    """Raised for invalid client configuration or request construction.

    These errors are detected before any network traffic and are never
    retried.
    """


class AuthenticationError(PandaDocError):
    r"""Raised when an authenticated call is made without credentials."""

    default_kind = ErrorKind.MISSING_AUTHENTICATION


class EncodeError(PandaDocError):
    r"""Raised when a request URL or body cannot be encoded."""

    default_kind = ErrorKind.ENCODE


class DecodeError(PandaDocError):
    r"""Raised when a successful response body is not valid JSON."""

    default_kind = ErrorKind.DECODE


class RequestCancelledError(PandaDocError):
    r"""Raised when a request is cancelled while waiting between attempts."""

    default_kind = ErrorKind.CANCELLED


class TransportError(PandaDocError):
    """Raised when the HTTP call itself failed after all retries.

    Args:
        method: The HTTP method of the failed request.
        url: The URL of the failed request.
        cause: The underlying transport exception.
        attempts: Number of attempts made.
    """

    default_kind = ErrorKind.TRANSPORT

    def __init__(self, method: str, url: str, cause: Exception, attempts: int = 1) -> None:
        super().__init__(
            message=f"{method} request to {url} failed after {attempts} attempts: {cause}"
        )
        self.method = method
        self.url = url
        self.cause = cause
        self.attempts = attempts


class APIError(PandaDocError):
    """Structured error parsed from a non-success API response.

    Args:
        status_code: HTTP status code of the response.
        message: Human readable message. Falls back to the standard reason
            phrase of ``status_code`` when empty.
        code: Optional machine readable error code.
        details: Optional structured detail payload.
        request_id: Optional request correlation id.
        retry_after: Raw ``Retry-After`` header value, if any.
        raw_body: The response body as text.
        headers: Copy of the response headers, repeated values included.
    """

    default_kind = ErrorKind.API

    def __init__(
        self,
        status_code: int,
        message: str = "",
        *,
        code: str = "",
        details: Any = None,
        request_id: str = "",
        retry_after: str = "",
        raw_body: str = "",
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self.status_code = status_code
        self.code = code
        self.message = message or reason_phrase(status_code)
        self.details = details
        self.request_id = request_id
        self.retry_after = retry_after
        self.raw_body = raw_body
        self.headers = headers or {}
        super().__init__(message=self._format())

    def _format(self) -> str:
        if self.code:
            return (
                f"pandadoc API error: status={self.status_code} code={self.code} "
                f"message={self.message}"
            )
        return f"pandadoc API error: status={self.status_code} message={self.message}"

    @property
    def is_unauthorized(self) -> bool:
        return self.status_code == HTTPStatus.UNAUTHORIZED

    @property
    def is_forbidden(self) -> bool:
        return self.status_code == HTTPStatus.FORBIDDEN

    @property
    def is_not_found(self) -> bool:
        return self.status_code == HTTPStatus.NOT_FOUND

    @property
    def is_rate_limited(self) -> bool:
        return self.status_code == HTTPStatus.TOO_MANY_REQUESTS


def reason_phrase(status_code: int) -> str:
    """Return the standard reason phrase for a status code, or ``""``.

    Example:
        ```pycon
        >>> from pandadoc.exceptions import reason_phrase
        >>> reason_phrase(401)
        'Unauthorized'
        >>> reason_phrase(599)
        ''

        ```
    """
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return ""


def is_unauthorized(err: BaseException | None) -> bool:
    r"""Return ``True`` if ``err`` is a 401 ``APIError``."""
    return isinstance(err, APIError) and err.is_unauthorized


def is_forbidden(err: BaseException | None) -> bool:
    r"""Return ``True`` if ``err`` is a 403 ``APIError``."""
    return isinstance(err, APIError) and err.is_forbidden


def is_not_found(err: BaseException | None) -> bool:
    r"""Return ``True`` if ``err`` is a 404 ``APIError``."""
    return isinstance(err, APIError) and err.is_not_found


def is_rate_limited(err: BaseException | None) -> bool:
    r"""Return ``True`` if ``err`` is a 429 ``APIError``."""
    return isinstance(err, APIError) and err.is_rate_limited

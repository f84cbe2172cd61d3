r"""Base class and argument helpers shared by the services."""

from __future__ import annotations

__all__ = ["BaseService", "format_bool", "json_payload", "require_payload"]

from typing import TYPE_CHECKING, Any, TypeVar

from pandadoc.exceptions import ConfigurationError, ErrorKind

if TYPE_CHECKING:
    from pandadoc.client import PandaDocClient

T = TypeVar("T")


class BaseService:
    """Base class for the API services.

    Args:
        client: The client sending the requests built by the service.
    """

    def __init__(self, client: PandaDocClient) -> None:
        self._client = client


def require_payload(payload: T | None) -> T:
    """Return ``payload`` or raise if it is ``None``.

    Raises:
        ConfigurationError: If ``payload`` is ``None``.
    """
    if payload is None:
        raise ConfigurationError(ErrorKind.NIL_REQUEST)
    return payload


def format_bool(value: bool) -> str:
    r"""Format a boolean the way the API expects in queries and forms."""
    return "true" if value else "false"


def json_payload(payload: Any) -> Any:
    r"""Return the JSON-compatible form of a request body."""
    to_payload = getattr(payload, "to_payload", None)
    if to_payload is not None:
        return to_payload()
    return dict(payload)

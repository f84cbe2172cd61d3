r"""Authentication header injection.

PandaDoc accepts either an API key (``Authorization: API-Key <key>``) or
an OAuth access token (``Authorization: Bearer <token>``). A client is
configured with at most one of them.
"""

from __future__ import annotations

__all__ = ["Credentials"]

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pandadoc.exceptions import AuthenticationError, ConfigurationError, ErrorKind

if TYPE_CHECKING:
    import httpx


@dataclass(frozen=True)
class Credentials:
    """Credentials used to authenticate outgoing requests.

    Surrounding whitespace is stripped; a blank value counts as absent.

    Args:
        api_key: Optional PandaDoc API key.
        access_token: Optional OAuth access token.

    Raises:
        ConfigurationError: If both credentials are set.

    Example:
        ```pycon
        >>> from pandadoc.core.auth import Credentials
        >>> Credentials(access_token=" tok ").authorization_header()
        'Bearer tok'
        >>> Credentials().authorization_header() is None
        True

        ```
    """

    api_key: str = ""
    access_token: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "api_key", (self.api_key or "").strip())
        object.__setattr__(self, "access_token", (self.access_token or "").strip())
        if self.api_key and self.access_token:
            raise ConfigurationError(ErrorKind.MULTIPLE_AUTHENTICATION_METHODS)

    def authorization_header(self) -> str | None:
        r"""Return the ``Authorization`` header value, or ``None``."""
        if self.api_key:
            return f"API-Key {self.api_key}"
        if self.access_token:
            return f"Bearer {self.access_token}"
        return None

    def inject(self, request: httpx.Request, require_auth: bool) -> None:
        """Set the ``Authorization`` header on an outgoing request.

        Args:
            request: The request to authenticate.
            require_auth: Whether the endpoint requires credentials.

        Raises:
            AuthenticationError: If ``require_auth`` is set and no
                credential is configured.
        """
        header = self.authorization_header()
        if header is not None:
            request.headers["Authorization"] = header
        elif require_auth:
            raise AuthenticationError

r"""Service for the OAuth 2.0 token endpoint."""

from __future__ import annotations

__all__ = ["OAuthService"]

from typing import TYPE_CHECKING

from pandadoc.models.oauth import OAuthTokenResponse
from pandadoc.request import RequestSpec
from pandadoc.services.base import BaseService, require_payload

if TYPE_CHECKING:
    import threading

    from pandadoc.models.oauth import OAuthTokenRequest


class OAuthService(BaseService):
    """Service for exchanging authorization codes and refreshing tokens.

    The token endpoint does not require the client to be authenticated.

    Example:
        ```pycon
        >>> from pandadoc import PandaDocClient
        >>> from pandadoc.models import OAuthTokenRequest
        >>> client = PandaDocClient()  # doctest: +SKIP
        >>> token = client.oauth.token(
        ...     OAuthTokenRequest(
        ...         grant_type="authorization_code",
        ...         client_id="id",
        ...         client_secret="secret",
        ...         code="code",
        ...     )
        ... )  # doctest: +SKIP
        >>> authed = PandaDocClient.with_access_token(token.access_token)  # doctest: +SKIP

        ```
    """

    def token(
        self, request: OAuthTokenRequest, *, cancel: threading.Event | None = None
    ) -> OAuthTokenResponse:
        """Create or refresh an access token.

        Args:
            request: The token form. Only non-empty fields are sent.
            cancel: Optional event aborting the call between attempts.

        Returns:
            The access token response.

        Raises:
            ConfigurationError: If ``request`` is ``None``.
        """
        return self._client.decode_json(self._token_spec(request), OAuthTokenResponse, cancel)

    async def token_async(self, request: OAuthTokenRequest) -> OAuthTokenResponse:
        return await self._client.decode_json_async(self._token_spec(request), OAuthTokenResponse)

    def _token_spec(self, request: OAuthTokenRequest | None) -> RequestSpec:
        return RequestSpec(
            "POST",
            "/oauth2/access_token",
            require_auth=False,
            form=require_payload(request).form_fields(),
        )

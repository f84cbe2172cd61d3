r"""Models for the OAuth 2.0 token endpoint."""

from __future__ import annotations

__all__ = ["OAuthTokenRequest", "OAuthTokenResponse"]

from dataclasses import dataclass

from pandadoc.models.base import PandaDocModel


@dataclass(frozen=True)
class OAuthTokenRequest:
    """Form fields for creating or refreshing an access token.

    Only non-empty fields are sent.

    Example:
        ```pycon
        >>> from pandadoc.models import OAuthTokenRequest
        >>> OAuthTokenRequest(grant_type="refresh_token", refresh_token="r").form_fields()
        [('grant_type', 'refresh_token'), ('refresh_token', 'r')]

        ```
    """

    grant_type: str = ""
    client_id: str = ""
    client_secret: str = ""
    code: str = ""
    refresh_token: str = ""
    scope: str = ""
    redirect_uri: str = ""

    def form_fields(self) -> list[tuple[str, str]]:
        fields = (
            ("grant_type", self.grant_type),
            ("client_id", self.client_id),
            ("client_secret", self.client_secret),
            ("code", self.code),
            ("refresh_token", self.refresh_token),
            ("scope", self.scope),
            ("redirect_uri", self.redirect_uri),
        )
        return [(key, value) for key, value in fields if value]


class OAuthTokenResponse(PandaDocModel):
    access_token: str = ""
    refresh_token: str | None = None
    token_type: str = ""
    scope: str | None = None
    expires_in: int = 0

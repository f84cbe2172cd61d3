r"""Small payload shapes reused across endpoints."""

from __future__ import annotations

__all__ = ["MoneyAmount", "NamedContentBlock", "UserReference"]

from pandadoc.models.base import PandaDocModel


class UserReference(PandaDocModel):
    """Compact user descriptor."""

    id: str | None = None
    membership_id: str | None = None
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    avatar: str | None = None


class MoneyAmount(PandaDocModel):
    """Amount and currency pair. The amount is a decimal string."""

    amount: str | None = None
    currency: str | None = None


class NamedContentBlock(PandaDocModel):
    """Image, table or text block reference in document details."""

    name: str | None = None

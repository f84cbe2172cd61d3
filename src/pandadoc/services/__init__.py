r"""Per-resource services of the PandaDoc API.

Services only validate their arguments and build a ``RequestSpec``; the
owning ``PandaDocClient`` sends it.
"""

from __future__ import annotations

__all__ = [
    "DocumentsService",
    "OAuthService",
    "ProductCatalogService",
    "WebhookEventsService",
    "WebhookSubscriptionsService",
]

from pandadoc.services.catalog import ProductCatalogService
from pandadoc.services.documents import DocumentsService
from pandadoc.services.oauth import OAuthService
from pandadoc.services.webhooks import WebhookEventsService, WebhookSubscriptionsService

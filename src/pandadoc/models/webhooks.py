r"""Models for the webhook subscription and webhook event endpoints."""

from __future__ import annotations

__all__ = [
    "ListWebhookEventsOptions",
    "ListWebhookSubscriptionsOptions",
    "UpdateWebhookSubscriptionSharedKeyResponse",
    "WebhookEventDetailsResponse",
    "WebhookEventItem",
    "WebhookEventListResponse",
    "WebhookPayloadOption",
    "WebhookSubscription",
    "WebhookSubscriptionListResponse",
    "WebhookSubscriptionRequest",
    "WebhookTrigger",
]

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import Field

from pandadoc.models.base import PandaDocModel


class WebhookPayloadOption(str, Enum):
    """Optional sections included in webhook deliveries."""

    METADATA = "metadata"
    FIELDS = "fields"
    PRODUCTS = "products"
    TOKENS = "tokens"
    PRICING = "pricing"


class WebhookTrigger(str, Enum):
    """Events that trigger a webhook delivery."""

    RECIPIENT_COMPLETED = "recipient_completed"
    DOCUMENT_UPDATED = "document_updated"
    DOCUMENT_DELETED = "document_deleted"
    DOCUMENT_STATE_CHANGED = "document_state_changed"
    DOCUMENT_CREATION_FAILED = "document_creation_failed"
    DOCUMENT_COMPLETED_PDF_READY = "document_completed_pdf_ready"
    DOCUMENT_SECTION_ADDED = "document_section_added"
    QUOTE_UPDATED = "quote_updated"
    TEMPLATE_CREATED = "template_created"
    TEMPLATE_UPDATED = "template_updated"
    TEMPLATE_DELETED = "template_deleted"
    CONTENT_LIBRARY_ITEM_CREATED = "content_library_item_created"
    CONTENT_LIBRARY_ITEM_CREATION_FAILED = "content_library_item_creation_failed"


@dataclass(frozen=True)
class ListWebhookSubscriptionsOptions:
    count: int = 0
    page: int = 0


class WebhookSubscriptionRequest(PandaDocModel):
    """Body for creating or updating a webhook subscription.

    Unset fields are omitted, so an update only touches what is given.

    Example:
        ```pycon
        >>> from pandadoc.models import WebhookSubscriptionRequest, WebhookTrigger
        >>> WebhookSubscriptionRequest(
        ...     name="hook", triggers=[WebhookTrigger.DOCUMENT_UPDATED]
        ... ).to_payload()
        {'name': 'hook', 'triggers': ['document_updated']}

        ```
    """

    name: str | None = None
    url: str | None = None
    active: bool | None = None
    triggers: list[WebhookTrigger] | None = None
    payload: list[WebhookPayloadOption] | None = None


class WebhookSubscription(PandaDocModel):
    uuid: str | None = None
    workspace_id: str | None = None
    name: str | None = None
    url: str | None = None
    active: bool = False
    status: str | None = None
    shared_key: str | None = None
    triggers: list[str] = Field(default_factory=list)
    payload: list[str] = Field(default_factory=list)


class WebhookSubscriptionListResponse(PandaDocModel):
    items: list[WebhookSubscription] = Field(default_factory=list)


class UpdateWebhookSubscriptionSharedKeyResponse(PandaDocModel):
    shared_key: str = ""


@dataclass(frozen=True)
class ListWebhookEventsOptions:
    """Filters for listing webhook deliveries.

    ``since`` and ``to`` are ISO 8601 timestamps.
    """

    since: str = ""
    to: str = ""
    type: str = ""
    http_status_code: int = 0
    error: bool | None = None


class WebhookEventItem(PandaDocModel):
    uuid: str | None = None
    name: str | None = None
    type: str | None = None
    http_status_code: int | None = None
    delivery_time: str | None = None
    error: bool = False


class WebhookEventListResponse(PandaDocModel):
    items: list[WebhookEventItem] = Field(default_factory=list)


class WebhookEventDetailsResponse(PandaDocModel):
    """A single webhook delivery, including request and response bodies."""

    uuid: str | None = None
    name: str | None = None
    type: str | None = None
    event_time: str | None = None
    delivery_time: str | None = None
    url: str | None = None
    http_status_code: int | None = None
    error: bool = False
    request_body: Any = None
    response_body: Any = None
    response_headers: Any = None
    signature: str | None = None

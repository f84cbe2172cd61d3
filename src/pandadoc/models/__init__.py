r"""Request and response models of the PandaDoc API."""

from __future__ import annotations

__all__ = [
    "AppendContentLibraryItemResponse",
    "ChangeDocumentStatusRequest",
    "ChangeDocumentStatusWithUploadRequest",
    "CreateDocumentEditingSessionResponse",
    "CreateDocumentFromUploadRequest",
    "CreateDocumentSessionResponse",
    "DocumentCreateResponse",
    "DocumentDetailsResponse",
    "DocumentESignDisclosure",
    "DocumentESignDisclosureResponse",
    "DocumentField",
    "DocumentLink",
    "DocumentListResponse",
    "DocumentOrderBy",
    "DocumentRecipient",
    "DocumentSendResponse",
    "DocumentStatusCode",
    "DocumentSummary",
    "DocumentTemplateReference",
    "DocumentToken",
    "LinkedObject",
    "ListDocumentsOptions",
    "ListWebhookEventsOptions",
    "ListWebhookSubscriptionsOptions",
    "MoneyAmount",
    "NamedContentBlock",
    "OAuthTokenRequest",
    "OAuthTokenResponse",
    "PandaDocModel",
    "ProductCatalogBillingType",
    "ProductCatalogItemResponse",
    "ProductCatalogItemType",
    "ProductCatalogSearchItem",
    "SearchProductCatalogItemsOptions",
    "SearchProductCatalogItemsResponse",
    "UpdateWebhookSubscriptionSharedKeyResponse",
    "UserReference",
    "WebhookEventDetailsResponse",
    "WebhookEventItem",
    "WebhookEventListResponse",
    "WebhookPayloadOption",
    "WebhookSubscription",
    "WebhookSubscriptionListResponse",
    "WebhookSubscriptionRequest",
    "WebhookTrigger",
]

from pandadoc.models.base import PandaDocModel
from pandadoc.models.catalog import (
    ProductCatalogBillingType,
    ProductCatalogItemResponse,
    ProductCatalogItemType,
    ProductCatalogSearchItem,
    SearchProductCatalogItemsOptions,
    SearchProductCatalogItemsResponse,
)
from pandadoc.models.common import MoneyAmount, NamedContentBlock, UserReference
from pandadoc.models.documents import (
    AppendContentLibraryItemResponse,
    ChangeDocumentStatusRequest,
    ChangeDocumentStatusWithUploadRequest,
    CreateDocumentEditingSessionResponse,
    CreateDocumentFromUploadRequest,
    CreateDocumentSessionResponse,
    DocumentCreateResponse,
    DocumentDetailsResponse,
    DocumentESignDisclosure,
    DocumentESignDisclosureResponse,
    DocumentField,
    DocumentLink,
    DocumentListResponse,
    DocumentOrderBy,
    DocumentRecipient,
    DocumentSendResponse,
    DocumentStatusCode,
    DocumentSummary,
    DocumentTemplateReference,
    DocumentToken,
    LinkedObject,
    ListDocumentsOptions,
)
from pandadoc.models.oauth import OAuthTokenRequest, OAuthTokenResponse
from pandadoc.models.webhooks import (
    ListWebhookEventsOptions,
    ListWebhookSubscriptionsOptions,
    UpdateWebhookSubscriptionSharedKeyResponse,
    WebhookEventDetailsResponse,
    WebhookEventItem,
    WebhookEventListResponse,
    WebhookPayloadOption,
    WebhookSubscription,
    WebhookSubscriptionListResponse,
    WebhookSubscriptionRequest,
    WebhookTrigger,
)

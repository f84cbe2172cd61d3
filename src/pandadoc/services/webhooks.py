r"""Services for the webhook subscription and webhook event endpoints."""

from __future__ import annotations

__all__ = ["WebhookEventsService", "WebhookSubscriptionsService"]

from typing import TYPE_CHECKING

from pandadoc.core.validation import escape_path_param
from pandadoc.models.webhooks import (
    UpdateWebhookSubscriptionSharedKeyResponse,
    WebhookEventDetailsResponse,
    WebhookEventListResponse,
    WebhookSubscription,
    WebhookSubscriptionListResponse,
)
from pandadoc.request import RequestSpec
from pandadoc.services.base import BaseService, format_bool, json_payload, require_payload

if TYPE_CHECKING:
    import threading

    from pandadoc.models.webhooks import (
        ListWebhookEventsOptions,
        ListWebhookSubscriptionsOptions,
        WebhookSubscriptionRequest,
    )

_SUBSCRIPTIONS_PATH = "/public/v1/webhook-subscriptions"
_EVENTS_PATH = "/public/v1/webhook-events"


class WebhookSubscriptionsService(BaseService):
    """Service for managing webhook subscriptions."""

    def list(
        self,
        options: ListWebhookSubscriptionsOptions | None = None,
        *,
        cancel: threading.Event | None = None,
    ) -> WebhookSubscriptionListResponse:
        r"""List webhook subscriptions."""
        return self._client.decode_json(
            self._list_spec(options), WebhookSubscriptionListResponse, cancel
        )

    async def list_async(
        self, options: ListWebhookSubscriptionsOptions | None = None
    ) -> WebhookSubscriptionListResponse:
        return await self._client.decode_json_async(
            self._list_spec(options), WebhookSubscriptionListResponse
        )

    def create(
        self, request: WebhookSubscriptionRequest, *, cancel: threading.Event | None = None
    ) -> WebhookSubscription:
        r"""Create a webhook subscription."""
        return self._client.decode_json(self._create_spec(request), WebhookSubscription, cancel)

    async def create_async(self, request: WebhookSubscriptionRequest) -> WebhookSubscription:
        return await self._client.decode_json_async(
            self._create_spec(request), WebhookSubscription
        )

    def get(
        self, subscription_id: str, *, cancel: threading.Event | None = None
    ) -> WebhookSubscription:
        r"""Return a webhook subscription."""
        return self._client.decode_json(
            self._get_spec(subscription_id), WebhookSubscription, cancel
        )

    async def get_async(self, subscription_id: str) -> WebhookSubscription:
        return await self._client.decode_json_async(
            self._get_spec(subscription_id), WebhookSubscription
        )

    def update(
        self,
        subscription_id: str,
        request: WebhookSubscriptionRequest,
        *,
        cancel: threading.Event | None = None,
    ) -> WebhookSubscription:
        """Update a webhook subscription.

        Only the fields set on ``request`` are sent.
        """
        return self._client.decode_json(
            self._update_spec(subscription_id, request), WebhookSubscription, cancel
        )

    async def update_async(
        self, subscription_id: str, request: WebhookSubscriptionRequest
    ) -> WebhookSubscription:
        return await self._client.decode_json_async(
            self._update_spec(subscription_id, request), WebhookSubscription
        )

    def delete(self, subscription_id: str, *, cancel: threading.Event | None = None) -> None:
        r"""Delete a webhook subscription."""
        self._client.decode_json(self._delete_spec(subscription_id), cancel=cancel)

    async def delete_async(self, subscription_id: str) -> None:
        await self._client.decode_json_async(self._delete_spec(subscription_id))

    def regenerate_shared_key(
        self, subscription_id: str, *, cancel: threading.Event | None = None
    ) -> UpdateWebhookSubscriptionSharedKeyResponse:
        r"""Regenerate the key used to sign deliveries of a subscription."""
        return self._client.decode_json(
            self._regenerate_shared_key_spec(subscription_id),
            UpdateWebhookSubscriptionSharedKeyResponse,
            cancel,
        )

    async def regenerate_shared_key_async(
        self, subscription_id: str
    ) -> UpdateWebhookSubscriptionSharedKeyResponse:
        return await self._client.decode_json_async(
            self._regenerate_shared_key_spec(subscription_id),
            UpdateWebhookSubscriptionSharedKeyResponse,
        )

    def _list_spec(self, options: ListWebhookSubscriptionsOptions | None) -> RequestSpec:
        params: list[tuple[str, str]] = []
        if options is not None:
            if options.count > 0:
                params.append(("count", str(options.count)))
            if options.page > 0:
                params.append(("page", str(options.page)))
        return RequestSpec("GET", _SUBSCRIPTIONS_PATH, params=params)

    def _create_spec(self, request: WebhookSubscriptionRequest | None) -> RequestSpec:
        return RequestSpec(
            "POST",
            _SUBSCRIPTIONS_PATH,
            json=json_payload(require_payload(request)),
            expected_status=(201,),
        )

    def _get_spec(self, subscription_id: str) -> RequestSpec:
        return RequestSpec("GET", _subscription_path(subscription_id))

    def _update_spec(
        self, subscription_id: str, request: WebhookSubscriptionRequest | None
    ) -> RequestSpec:
        path = _subscription_path(subscription_id)
        return RequestSpec("PATCH", path, json=json_payload(require_payload(request)))

    def _delete_spec(self, subscription_id: str) -> RequestSpec:
        return RequestSpec("DELETE", _subscription_path(subscription_id), expected_status=(204,))

    def _regenerate_shared_key_spec(self, subscription_id: str) -> RequestSpec:
        return RequestSpec("PATCH", f"{_subscription_path(subscription_id)}/shared-key")


class WebhookEventsService(BaseService):
    """Service for inspecting webhook deliveries."""

    def list(
        self,
        options: ListWebhookEventsOptions | None = None,
        *,
        cancel: threading.Event | None = None,
    ) -> WebhookEventListResponse:
        r"""List webhook deliveries."""
        return self._client.decode_json(self._list_spec(options), WebhookEventListResponse, cancel)

    async def list_async(
        self, options: ListWebhookEventsOptions | None = None
    ) -> WebhookEventListResponse:
        return await self._client.decode_json_async(
            self._list_spec(options), WebhookEventListResponse
        )

    def get(
        self, event_id: str, *, cancel: threading.Event | None = None
    ) -> WebhookEventDetailsResponse:
        r"""Return a single webhook delivery."""
        return self._client.decode_json(
            self._get_spec(event_id), WebhookEventDetailsResponse, cancel
        )

    async def get_async(self, event_id: str) -> WebhookEventDetailsResponse:
        return await self._client.decode_json_async(
            self._get_spec(event_id), WebhookEventDetailsResponse
        )

    def _list_spec(self, options: ListWebhookEventsOptions | None) -> RequestSpec:
        params: list[tuple[str, str]] = []
        if options is not None:
            if options.since:
                params.append(("since", options.since))
            if options.to:
                params.append(("to", options.to))
            if options.type:
                params.append(("type", options.type))
            if options.http_status_code > 0:
                params.append(("http_status_code", str(options.http_status_code)))
            if options.error is not None:
                params.append(("error", format_bool(options.error)))
        return RequestSpec("GET", _EVENTS_PATH, params=params)

    def _get_spec(self, event_id: str) -> RequestSpec:
        return RequestSpec("GET", f"{_EVENTS_PATH}/{escape_path_param(event_id)}")


def _subscription_path(subscription_id: str) -> str:
    return f"{_SUBSCRIPTIONS_PATH}/{escape_path_param(subscription_id)}"

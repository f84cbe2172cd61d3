r"""Unit tests for the webhook subscription and event models."""

from __future__ import annotations

from pandadoc.models import (
    WebhookEventDetailsResponse,
    WebhookEventListResponse,
    WebhookPayloadOption,
    WebhookSubscriptionListResponse,
    WebhookSubscriptionRequest,
    WebhookTrigger,
)


def test_webhook_subscription_request_payload() -> None:
    """Test that enum members are sent as their values."""
    request = WebhookSubscriptionRequest(
        name="hook",
        url="https://hooks.example.com",
        active=True,
        triggers=[WebhookTrigger.DOCUMENT_STATE_CHANGED, WebhookTrigger.RECIPIENT_COMPLETED],
        payload=[WebhookPayloadOption.METADATA],
    )
    assert request.to_payload() == {
        "name": "hook",
        "url": "https://hooks.example.com",
        "active": True,
        "triggers": ["document_state_changed", "recipient_completed"],
        "payload": ["metadata"],
    }


def test_webhook_subscription_request_partial_update() -> None:
    """Test that only the given fields are sent."""
    assert WebhookSubscriptionRequest(active=False).to_payload() == {"active": False}


def test_webhook_subscription_list_response() -> None:
    """Test parsing of a subscription page."""
    page = WebhookSubscriptionListResponse.model_validate(
        {"items": [{"uuid": "w1", "active": True, "triggers": ["document_updated"]}]}
    )
    assert page.items[0].uuid == "w1"
    assert page.items[0].active
    assert page.items[0].triggers == ["document_updated"]
    assert page.items[0].payload == []


def test_webhook_event_list_response() -> None:
    """Test parsing of a webhook event page."""
    page = WebhookEventListResponse.model_validate(
        {"items": [{"uuid": "e1", "http_status_code": 500, "error": True}]}
    )
    assert page.items[0].http_status_code == 500
    assert page.items[0].error


def test_webhook_event_details_response() -> None:
    """Test that delivery bodies are kept as raw values."""
    event = WebhookEventDetailsResponse.model_validate(
        {"uuid": "e1", "request_body": [{"event": "document_updated"}], "signature": "sig"}
    )
    assert event.request_body == [{"event": "document_updated"}]
    assert event.signature == "sig"
    assert not event.error

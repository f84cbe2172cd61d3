r"""Unit tests for the documents endpoint models."""

from __future__ import annotations

import pytest

from pandadoc.models import (
    ChangeDocumentStatusRequest,
    DocumentDetailsResponse,
    DocumentListResponse,
    DocumentOrderBy,
    DocumentStatusCode,
    ListDocumentsOptions,
)


def test_document_status_code_values() -> None:
    """Test a few of the numeric status codes."""
    assert DocumentStatusCode.DRAFT == 0
    assert DocumentStatusCode.COMPLETED == 2
    assert DocumentStatusCode.EXTERNAL_REVIEW == 13


def test_document_order_by_descending() -> None:
    """Test that descending sort keys carry a leading minus."""
    assert DocumentOrderBy.DATE_CREATED_DESC.value == "-date_created"


def test_list_documents_options_defaults() -> None:
    """Test that the default options hold no filter."""
    options = ListDocumentsOptions()
    assert options.metadata == {}
    assert options.status is None
    assert options.deleted is None


def test_change_document_status_request_payload() -> None:
    """Test that the status is sent as its numeric value."""
    request = ChangeDocumentStatusRequest(status=DocumentStatusCode.COMPLETED)
    assert request.to_payload() == {"status": 2}


def test_change_document_status_request_payload_full() -> None:
    """Test that the note and notify flag are sent when set."""
    request = ChangeDocumentStatusRequest(
        status=DocumentStatusCode.VOIDED, note="cancelled", notify_recipients=False
    )
    assert request.to_payload() == {"status": 11, "note": "cancelled", "notify_recipients": False}


def test_change_document_status_request_invalid_status() -> None:
    """Test that an unknown status code is rejected."""
    with pytest.raises(ValueError):
        ChangeDocumentStatusRequest(status=99)


def test_document_list_response() -> None:
    """Test parsing of a document list page."""
    page = DocumentListResponse.model_validate(
        {
            "results": [
                {"id": "a", "name": "Quote", "status": "document.sent"},
                {"id": "b", "name": "Contract", "status": "document.draft"},
            ]
        }
    )
    assert [document.id for document in page.results] == ["a", "b"]
    assert page.results[0].status == "document.sent"


def test_document_list_response_empty() -> None:
    """Test that a missing result list parses as empty."""
    assert DocumentListResponse.model_validate({}).results == []


def test_document_details_response_nested() -> None:
    """Test parsing of the nested document details."""
    details = DocumentDetailsResponse.model_validate(
        {
            "id": "doc-1",
            "created_by": {"id": "u1", "email": "a@example.com"},
            "grand_total": {"amount": "120.50", "currency": "USD"},
            "recipients": [{"email": "b@example.com", "has_completed": True}],
            "tokens": [{"name": "Client.Company", "value": "ACME"}],
            "tags": ["q4"],
            "metadata": {"crm_id": 7},
        }
    )
    assert details.created_by.email == "a@example.com"
    assert details.grand_total.amount == "120.50"
    assert details.recipients[0].has_completed
    assert details.tokens[0].value == "ACME"
    assert details.tags == ["q4"]
    assert details.metadata == {"crm_id": 7}
    assert details.fields == []

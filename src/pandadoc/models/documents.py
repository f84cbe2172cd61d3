r"""Models for the documents endpoints."""

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
]

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import IO, Any

from pydantic import Field

from pandadoc.models.base import PandaDocModel
from pandadoc.models.common import MoneyAmount, NamedContentBlock, UserReference


class DocumentStatusCode(IntEnum):
    """Numeric document status used by list filters and status changes."""

    DRAFT = 0
    SENT = 1
    COMPLETED = 2
    UPLOADED = 3
    ERROR = 4
    VIEWED = 5
    WAITING_APPROVAL = 6
    APPROVED = 7
    REJECTED = 8
    WAITING_PAY = 9
    PAID = 10
    VOIDED = 11
    DECLINED = 12
    EXTERNAL_REVIEW = 13


class DocumentOrderBy(str, Enum):
    """Sort keys accepted by the document list endpoint.

    A leading ``-`` sorts in descending order.
    """

    NAME = "name"
    DATE_CREATED = "date_created"
    DATE_STATUS_CHANGED = "date_status_changed"
    DATE_OF_LAST_ACTION = "date_of_last_action"
    DATE_MODIFIED = "date_modified"
    DATE_SENT = "date_sent"
    DATE_COMPLETED = "date_completed"
    DATE_EXPIRATION = "date_expiration"
    DATE_DECLINED = "date_declined"
    STATUS = "status"
    NAME_DESC = "-name"
    DATE_CREATED_DESC = "-date_created"
    DATE_STATUS_CHANGED_DESC = "-date_status_changed"
    DATE_OF_LAST_ACTION_DESC = "-date_of_last_action"
    DATE_MODIFIED_DESC = "-date_modified"
    DATE_SENT_DESC = "-date_sent"
    DATE_COMPLETED_DESC = "-date_completed"
    DATE_EXPIRATION_DESC = "-date_expiration"
    DATE_DECLINED_DESC = "-date_declined"
    STATUS_DESC = "-status"


@dataclass(frozen=True)
class ListDocumentsOptions:
    """Filters for listing documents.

    Empty strings, zero counts and ``None`` values are not sent.
    """

    template_id: str = ""
    form_id: str = ""
    folder_uuid: str = ""
    contact_id: str = ""
    count: int = 0
    page: int = 0
    order_by: DocumentOrderBy | str = ""
    created_from: str = ""
    created_to: str = ""
    deleted: bool | None = None
    id: str = ""
    completed_from: str = ""
    completed_to: str = ""
    membership_id: str = ""
    metadata: dict[str, str] = field(default_factory=dict)
    modified_from: str = ""
    modified_to: str = ""
    q: str = ""
    status: DocumentStatusCode | int | None = None
    status_ne: DocumentStatusCode | int | None = None
    tag: str = ""


class DocumentSummary(PandaDocModel):
    """Core document fields shared by several endpoints."""

    id: str | None = None
    uuid: str | None = None
    name: str | None = None
    status: str | None = None
    date_created: str | None = None
    date_modified: str | None = None
    date_completed: str | None = None
    expiration_date: str | None = None
    version: str | None = None


class DocumentListResponse(PandaDocModel):
    results: list[DocumentSummary] = Field(default_factory=list)


class DocumentLink(PandaDocModel):
    rel: str | None = None
    href: str | None = None
    type: str | None = None


class DocumentCreateResponse(DocumentSummary):
    links: list[DocumentLink] = Field(default_factory=list)
    info_message: str | None = None


class DocumentField(PandaDocModel):
    uuid: str | None = None
    name: str | None = None
    title: str | None = None
    merge_field: str | None = None
    placeholder: str | None = None
    field_id: str | None = None
    type: str | None = None
    value: Any = None
    assigned_to: Any = None


class DocumentToken(PandaDocModel):
    name: str | None = None
    value: Any = None


class DocumentRecipient(PandaDocModel):
    id: str | None = None
    contact_id: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    role: str | None = None
    recipient_type: str | None = None
    has_completed: bool = False


class LinkedObject(PandaDocModel):
    """Reference to a linked CRM object."""

    id: str | None = None
    provider: str | None = None
    entity_type: str | None = None
    entity_id: str | None = None


class DocumentTemplateReference(PandaDocModel):
    id: str | None = None
    name: str | None = None


class DocumentDetailsResponse(PandaDocModel):
    """Full document details, including fields, tokens and recipients."""

    approval_execution: Any = None
    autonumbering_sequence_name_prefix: str | None = None
    content_date_modified: str | None = None
    created_by: UserReference | None = None
    date_completed: str | None = None
    date_created: str | None = None
    date_modified: str | None = None
    date_sent: str | None = None
    expiration_date: str | None = None
    fields: list[DocumentField] = Field(default_factory=list)
    folder_uuid: str | None = None
    grand_total: MoneyAmount | None = None
    id: str | None = None
    images: list[NamedContentBlock] = Field(default_factory=list)
    linked_objects: list[LinkedObject] = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict)
    name: str | None = None
    pricing: Any = None
    recipients: list[DocumentRecipient] = Field(default_factory=list)
    ref_number: str | None = None
    sent_by: UserReference | None = None
    status: str | None = None
    tables: list[NamedContentBlock] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    template: DocumentTemplateReference | None = None
    texts: list[NamedContentBlock] = Field(default_factory=list)
    tokens: list[DocumentToken] = Field(default_factory=list)
    version: str | None = None


class DocumentESignDisclosure(PandaDocModel):
    is_enabled: bool = False
    company_name: str | None = None
    esign_disclosure_text: str | None = None


class DocumentESignDisclosureResponse(PandaDocModel):
    result: DocumentESignDisclosure | None = None


class ChangeDocumentStatusRequest(PandaDocModel):
    """Manual status change of a document.

    Example:
        ```pycon
        >>> from pandadoc.models import ChangeDocumentStatusRequest, DocumentStatusCode
        >>> ChangeDocumentStatusRequest(status=DocumentStatusCode.COMPLETED).to_payload()
        {'status': 2}

        ```
    """

    status: DocumentStatusCode
    note: str | None = None
    notify_recipients: bool | None = None


@dataclass(frozen=True)
class CreateDocumentFromUploadRequest:
    """File upload that creates a new document.

    Args:
        file: The file content. Required.
        file_name: File name sent to the server. Empty means ``"upload.bin"``.
        file_field: Form field carrying the file. Empty means ``"file"``.
        fields: Extra form fields, e.g. ``{"data": "<json>"}``.
    """

    file: IO[bytes] | bytes | None
    file_name: str = ""
    file_field: str = ""
    fields: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ChangeDocumentStatusWithUploadRequest:
    """Status change that attaches a file, e.g. a signed copy.

    ``status``, ``note`` and ``notify_recipients`` are sent as form fields.
    ``fields`` may replace ``status``; a non-empty ``note`` and a set
    ``notify_recipients`` always win over ``fields``.
    """

    status: DocumentStatusCode | int
    file: IO[bytes] | bytes | None
    note: str = ""
    notify_recipients: bool | None = None
    file_name: str = ""
    file_field: str = ""
    fields: dict[str, str] = field(default_factory=dict)


class DocumentSendResponse(DocumentSummary):
    recipients: list[DocumentRecipient] = Field(default_factory=list)


class CreateDocumentEditingSessionResponse(PandaDocModel):
    id: str | None = None
    token: str | None = None
    key: str | None = None
    email: str | None = None
    expires_at: str | None = None
    document_id: str | None = None


class CreateDocumentSessionResponse(PandaDocModel):
    """Embedded view session. Use ``id`` to build the session URL."""

    id: str | None = None
    expires_at: str | None = None


class AppendContentLibraryItemResponse(PandaDocModel):
    block_mapping: dict[str, str] = Field(default_factory=dict)
    cli: dict[str, Any] = Field(default_factory=dict)

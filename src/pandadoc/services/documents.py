r"""Service for the documents endpoints."""

from __future__ import annotations

__all__ = ["DocumentsService", "build_document_list_query"]

from typing import TYPE_CHECKING, Any

from pandadoc.core.validation import escape_path_param
from pandadoc.exceptions import ConfigurationError, ErrorKind
from pandadoc.models.documents import (
    AppendContentLibraryItemResponse,
    CreateDocumentEditingSessionResponse,
    CreateDocumentSessionResponse,
    DocumentCreateResponse,
    DocumentDetailsResponse,
    DocumentESignDisclosureResponse,
    DocumentListResponse,
    DocumentSendResponse,
    DocumentSummary,
)
from pandadoc.request import MultipartFile, MultipartPayload, RequestSpec
from pandadoc.services.base import BaseService, format_bool, json_payload, require_payload

if TYPE_CHECKING:
    import threading
    from collections.abc import Mapping

    from pandadoc.download import DownloadResponse
    from pandadoc.models.documents import (
        ChangeDocumentStatusRequest,
        ChangeDocumentStatusWithUploadRequest,
        CreateDocumentFromUploadRequest,
        ListDocumentsOptions,
    )

_BASE_PATH = "/public/v1/documents"


def build_document_list_query(options: ListDocumentsOptions | None) -> list[tuple[str, str]]:
    """Build the query of the document list endpoint.

    Empty strings, non-positive numbers and ``None`` values are skipped.
    Each metadata entry becomes a ``metadata=metadata_<key>=<value>`` pair,
    in sorted key order.

    Args:
        options: The list filters.

    Returns:
        The query as key/value pairs.

    Example:
        ```pycon
        >>> from pandadoc.models import DocumentStatusCode, ListDocumentsOptions
        >>> from pandadoc.services.documents import build_document_list_query
        >>> build_document_list_query(
        ...     ListDocumentsOptions(
        ...         count=10,
        ...         deleted=False,
        ...         metadata={"b": "2", "a": "1"},
        ...         status=DocumentStatusCode.COMPLETED,
        ...     )
        ... )
        [('count', '10'), ('deleted', 'false'), ('metadata', 'metadata_a=1'), ('metadata', 'metadata_b=2'), ('status', '2')]

        ```
    """
    if options is None:
        return []

    query: list[tuple[str, str]] = []

    def add_text(key: str, value: Any) -> None:
        value = getattr(value, "value", value)
        if value:
            query.append((key, str(value)))

    def add_positive(key: str, value: int) -> None:
        if value > 0:
            query.append((key, str(value)))

    add_text("template_id", options.template_id)
    add_text("form_id", options.form_id)
    add_text("folder_uuid", options.folder_uuid)
    add_text("contact_id", options.contact_id)
    add_positive("count", options.count)
    add_positive("page", options.page)
    add_text("order_by", options.order_by)
    add_text("created_from", options.created_from)
    add_text("created_to", options.created_to)
    if options.deleted is not None:
        query.append(("deleted", format_bool(options.deleted)))
    add_text("id", options.id)
    add_text("completed_from", options.completed_from)
    add_text("completed_to", options.completed_to)
    add_text("membership_id", options.membership_id)
    for key in sorted(options.metadata):
        query.append(("metadata", f"metadata_{key}={options.metadata[key]}"))
    add_text("modified_from", options.modified_from)
    add_text("modified_to", options.modified_to)
    add_text("q", options.q)
    if options.status is not None:
        query.append(("status", str(int(options.status))))
    if options.status_ne is not None:
        query.append(("status__ne", str(int(options.status_ne))))
    add_text("tag", options.tag)
    return query


class DocumentsService(BaseService):
    """Service for creating, sending and managing documents.

    Flexible payloads (``create``, ``update``, ``send``, sessions,
    ownership transfers and content library items) are plain mappings
    passed through as JSON.

    Example:
        ```pycon
        >>> from pandadoc import PandaDocClient
        >>> client = PandaDocClient.with_api_key("my-key")  # doctest: +SKIP
        >>> created = client.documents.create({"name": "Quote", "template_uuid": "t-1"})  # doctest: +SKIP
        >>> client.documents.status(created.id).status  # doctest: +SKIP
        'document.draft'

        ```
    """

    def list(
        self,
        options: ListDocumentsOptions | None = None,
        *,
        cancel: threading.Event | None = None,
    ) -> DocumentListResponse:
        """List or search documents.

        Args:
            options: Optional filters.
            cancel: Optional event aborting the call between attempts.

        Returns:
            One page of document summaries.
        """
        return self._client.decode_json(self._list_spec(options), DocumentListResponse, cancel)

    async def list_async(self, options: ListDocumentsOptions | None = None) -> DocumentListResponse:
        return await self._client.decode_json_async(self._list_spec(options), DocumentListResponse)

    def create(
        self, payload: Mapping[str, Any], *, cancel: threading.Event | None = None
    ) -> DocumentCreateResponse:
        """Create a document from a template or from a file URL.

        Args:
            payload: The create-document body.
            cancel: Optional event aborting the call between attempts.

        Returns:
            The created document. Creation continues asynchronously on the
            server until its status leaves ``document.uploaded``.

        Raises:
            ConfigurationError: If ``payload`` is ``None``.
        """
        return self._client.decode_json(self._create_spec(payload), DocumentCreateResponse, cancel)

    async def create_async(self, payload: Mapping[str, Any]) -> DocumentCreateResponse:
        return await self._client.decode_json_async(
            self._create_spec(payload), DocumentCreateResponse
        )

    def create_from_upload(
        self,
        upload: CreateDocumentFromUploadRequest,
        *,
        cancel: threading.Event | None = None,
    ) -> DocumentCreateResponse:
        """Create a document by uploading a file.

        Args:
            upload: The file and extra form fields.
            cancel: Optional event aborting the call between attempts.

        Returns:
            The created document.

        Raises:
            ConfigurationError: If ``upload`` or its file is missing.
        """
        return self._client.decode_json(
            self._create_from_upload_spec(upload), DocumentCreateResponse, cancel
        )

    async def create_from_upload_async(
        self, upload: CreateDocumentFromUploadRequest
    ) -> DocumentCreateResponse:
        return await self._client.decode_json_async(
            self._create_from_upload_spec(upload), DocumentCreateResponse
        )

    def status(self, document_id: str, *, cancel: threading.Event | None = None) -> DocumentSummary:
        r"""Return the status of a document."""
        return self._client.decode_json(self._status_spec(document_id), DocumentSummary, cancel)

    async def status_async(self, document_id: str) -> DocumentSummary:
        return await self._client.decode_json_async(self._status_spec(document_id), DocumentSummary)

    def delete(self, document_id: str, *, cancel: threading.Event | None = None) -> None:
        r"""Delete a document."""
        self._client.decode_json(self._delete_spec(document_id), cancel=cancel)

    async def delete_async(self, document_id: str) -> None:
        await self._client.decode_json_async(self._delete_spec(document_id))

    def update(
        self,
        document_id: str,
        payload: Mapping[str, Any],
        *,
        cancel: threading.Event | None = None,
    ) -> None:
        r"""Update a draft document. The API returns no body."""
        self._client.decode_json(self._update_spec(document_id, payload), cancel=cancel)

    async def update_async(self, document_id: str, payload: Mapping[str, Any]) -> None:
        await self._client.decode_json_async(self._update_spec(document_id, payload))

    def esign_disclosure(
        self, document_id: str, *, cancel: threading.Event | None = None
    ) -> DocumentESignDisclosureResponse:
        r"""Return the e-sign disclosure settings of a document."""
        return self._client.decode_json(
            self._esign_disclosure_spec(document_id), DocumentESignDisclosureResponse, cancel
        )

    async def esign_disclosure_async(self, document_id: str) -> DocumentESignDisclosureResponse:
        return await self._client.decode_json_async(
            self._esign_disclosure_spec(document_id), DocumentESignDisclosureResponse
        )

    def change_status(
        self,
        document_id: str,
        request: ChangeDocumentStatusRequest,
        *,
        cancel: threading.Event | None = None,
    ) -> None:
        """Change the status of a document manually.

        Args:
            document_id: The document id.
            request: The new status, with an optional note.
            cancel: Optional event aborting the call between attempts.
        """
        self._client.decode_json(self._change_status_spec(document_id, request), cancel=cancel)

    async def change_status_async(
        self, document_id: str, request: ChangeDocumentStatusRequest
    ) -> None:
        await self._client.decode_json_async(self._change_status_spec(document_id, request))

    def change_status_with_upload(
        self,
        document_id: str,
        request: ChangeDocumentStatusWithUploadRequest,
        *,
        cancel: threading.Event | None = None,
    ) -> None:
        r"""Change the status of a document and attach a file."""
        self._client.decode_json(
            self._change_status_with_upload_spec(document_id, request), cancel=cancel
        )

    async def change_status_with_upload_async(
        self, document_id: str, request: ChangeDocumentStatusWithUploadRequest
    ) -> None:
        await self._client.decode_json_async(
            self._change_status_with_upload_spec(document_id, request)
        )

    def revert_to_draft(
        self, document_id: str, *, cancel: threading.Event | None = None
    ) -> DocumentSummary:
        r"""Move a sent document back to the draft status."""
        return self._client.decode_json(
            self._revert_to_draft_spec(document_id), DocumentSummary, cancel
        )

    async def revert_to_draft_async(self, document_id: str) -> DocumentSummary:
        return await self._client.decode_json_async(
            self._revert_to_draft_spec(document_id), DocumentSummary
        )

    def details(
        self, document_id: str, *, cancel: threading.Event | None = None
    ) -> DocumentDetailsResponse:
        r"""Return the full details of a document."""
        return self._client.decode_json(
            self._details_spec(document_id), DocumentDetailsResponse, cancel
        )

    async def details_async(self, document_id: str) -> DocumentDetailsResponse:
        return await self._client.decode_json_async(
            self._details_spec(document_id), DocumentDetailsResponse
        )

    def send(
        self,
        document_id: str,
        payload: Mapping[str, Any],
        *,
        cancel: threading.Event | None = None,
    ) -> DocumentSendResponse:
        """Send a draft document to its recipients.

        Args:
            document_id: The document id.
            payload: The send body, e.g. ``{"message": "...", "silent": False}``.
            cancel: Optional event aborting the call between attempts.

        Returns:
            The sent document with its recipients.
        """
        return self._client.decode_json(
            self._send_spec(document_id, payload), DocumentSendResponse, cancel
        )

    async def send_async(
        self, document_id: str, payload: Mapping[str, Any]
    ) -> DocumentSendResponse:
        return await self._client.decode_json_async(
            self._send_spec(document_id, payload), DocumentSendResponse
        )

    def create_editing_session(
        self,
        document_id: str,
        payload: Mapping[str, Any],
        *,
        cancel: threading.Event | None = None,
    ) -> CreateDocumentEditingSessionResponse:
        r"""Create an embedded editing session for a document."""
        return self._client.decode_json(
            self._create_editing_session_spec(document_id, payload),
            CreateDocumentEditingSessionResponse,
            cancel,
        )

    async def create_editing_session_async(
        self, document_id: str, payload: Mapping[str, Any]
    ) -> CreateDocumentEditingSessionResponse:
        return await self._client.decode_json_async(
            self._create_editing_session_spec(document_id, payload),
            CreateDocumentEditingSessionResponse,
        )

    def create_session(
        self,
        document_id: str,
        payload: Mapping[str, Any],
        *,
        cancel: threading.Event | None = None,
    ) -> CreateDocumentSessionResponse:
        r"""Create an embedded signing session for a document."""
        return self._client.decode_json(
            self._create_session_spec(document_id, payload), CreateDocumentSessionResponse, cancel
        )

    async def create_session_async(
        self, document_id: str, payload: Mapping[str, Any]
    ) -> CreateDocumentSessionResponse:
        return await self._client.decode_json_async(
            self._create_session_spec(document_id, payload), CreateDocumentSessionResponse
        )

    def download(
        self, document_id: str, *, cancel: threading.Event | None = None
    ) -> DownloadResponse:
        """Download a document as PDF.

        Args:
            document_id: The document id.
            cancel: Optional event aborting the call between attempts.

        Returns:
            The streaming download. The caller must close it.
        """
        return self._client.download(self._download_spec(document_id, "download"), cancel)

    async def download_async(self, document_id: str) -> DownloadResponse:
        return await self._client.download_async(self._download_spec(document_id, "download"))

    def download_protected(
        self, document_id: str, *, cancel: threading.Event | None = None
    ) -> DownloadResponse:
        r"""Download a completed document as a signature-protected PDF."""
        return self._client.download(
            self._download_spec(document_id, "download-protected"), cancel
        )

    async def download_protected_async(self, document_id: str) -> DownloadResponse:
        return await self._client.download_async(
            self._download_spec(document_id, "download-protected")
        )

    def transfer_ownership(
        self,
        document_id: str,
        payload: Mapping[str, Any],
        *,
        cancel: threading.Event | None = None,
    ) -> None:
        r"""Transfer the ownership of one document."""
        self._client.decode_json(self._transfer_ownership_spec(document_id, payload), cancel=cancel)

    async def transfer_ownership_async(self, document_id: str, payload: Mapping[str, Any]) -> None:
        await self._client.decode_json_async(self._transfer_ownership_spec(document_id, payload))

    def transfer_all_ownership(
        self, payload: Mapping[str, Any], *, cancel: threading.Event | None = None
    ) -> None:
        r"""Transfer the ownership of all documents of a member."""
        self._client.decode_json(self._transfer_all_ownership_spec(payload), cancel=cancel)

    async def transfer_all_ownership_async(self, payload: Mapping[str, Any]) -> None:
        await self._client.decode_json_async(self._transfer_all_ownership_spec(payload))

    def move_to_folder(
        self, document_id: str, folder_id: str, *, cancel: threading.Event | None = None
    ) -> None:
        r"""Move a document to another folder."""
        self._client.decode_json(self._move_to_folder_spec(document_id, folder_id), cancel=cancel)

    async def move_to_folder_async(self, document_id: str, folder_id: str) -> None:
        await self._client.decode_json_async(self._move_to_folder_spec(document_id, folder_id))

    def append_content_library_item(
        self,
        document_id: str,
        payload: Mapping[str, Any],
        *,
        cancel: threading.Event | None = None,
    ) -> AppendContentLibraryItemResponse:
        r"""Append a content library item to a draft document."""
        return self._client.decode_json(
            self._append_content_library_item_spec(document_id, payload),
            AppendContentLibraryItemResponse,
            cancel,
        )

    async def append_content_library_item_async(
        self, document_id: str, payload: Mapping[str, Any]
    ) -> AppendContentLibraryItemResponse:
        return await self._client.decode_json_async(
            self._append_content_library_item_spec(document_id, payload),
            AppendContentLibraryItemResponse,
        )

    def _list_spec(self, options: ListDocumentsOptions | None) -> RequestSpec:
        return RequestSpec("GET", _BASE_PATH, params=build_document_list_query(options))

    def _create_spec(self, payload: Mapping[str, Any] | None) -> RequestSpec:
        return RequestSpec(
            "POST",
            _BASE_PATH,
            json=json_payload(require_payload(payload)),
            expected_status=(201,),
        )

    def _create_from_upload_spec(
        self, upload: CreateDocumentFromUploadRequest | None
    ) -> RequestSpec:
        upload = require_payload(upload)
        if upload.file is None:
            raise ConfigurationError(ErrorKind.NIL_FILE_READER)
        return RequestSpec(
            "POST",
            f"{_BASE_PATH}?upload",
            multipart=MultipartPayload(
                fields=dict(upload.fields),
                files=(
                    MultipartFile(
                        content=upload.file,
                        field_name=upload.file_field or "file",
                        file_name=upload.file_name,
                    ),
                ),
            ),
            expected_status=(201,),
        )

    def _status_spec(self, document_id: str) -> RequestSpec:
        return RequestSpec("GET", _document_path(document_id))

    def _delete_spec(self, document_id: str) -> RequestSpec:
        return RequestSpec("DELETE", _document_path(document_id), expected_status=(204,))

    def _update_spec(self, document_id: str, payload: Mapping[str, Any] | None) -> RequestSpec:
        path = _document_path(document_id)
        return RequestSpec(
            "PATCH", path, json=json_payload(require_payload(payload)), expected_status=(204,)
        )

    def _esign_disclosure_spec(self, document_id: str) -> RequestSpec:
        return RequestSpec("GET", _document_path(document_id, "esign-disclosure"))

    def _change_status_spec(
        self, document_id: str, request: ChangeDocumentStatusRequest | None
    ) -> RequestSpec:
        path = _document_path(document_id, "status")
        return RequestSpec(
            "PATCH", path, json=json_payload(require_payload(request)), expected_status=(204,)
        )

    def _change_status_with_upload_spec(
        self, document_id: str, request: ChangeDocumentStatusWithUploadRequest | None
    ) -> RequestSpec:
        path = _document_path(document_id, "status")
        request = require_payload(request)
        if request.file is None:
            raise ConfigurationError(ErrorKind.NIL_FILE_READER)

        fields = {"status": str(int(request.status))}
        fields.update(request.fields)
        if request.note:
            fields["note"] = request.note
        if request.notify_recipients is not None:
            fields["notify_recipients"] = format_bool(request.notify_recipients)
        return RequestSpec(
            "PATCH",
            f"{path}?upload",
            multipart=MultipartPayload(
                fields=fields,
                files=(
                    MultipartFile(
                        content=request.file,
                        field_name=request.file_field or "file",
                        file_name=request.file_name,
                    ),
                ),
            ),
            expected_status=(204,),
        )

    def _revert_to_draft_spec(self, document_id: str) -> RequestSpec:
        return RequestSpec("POST", _document_path(document_id, "draft"))

    def _details_spec(self, document_id: str) -> RequestSpec:
        return RequestSpec("GET", _document_path(document_id, "details"))

    def _send_spec(self, document_id: str, payload: Mapping[str, Any] | None) -> RequestSpec:
        path = _document_path(document_id, "send")
        return RequestSpec("POST", path, json=json_payload(require_payload(payload)))

    def _create_editing_session_spec(
        self, document_id: str, payload: Mapping[str, Any] | None
    ) -> RequestSpec:
        path = _document_path(document_id, "editing-sessions")
        return RequestSpec(
            "POST", path, json=json_payload(require_payload(payload)), expected_status=(201,)
        )

    def _create_session_spec(
        self, document_id: str, payload: Mapping[str, Any] | None
    ) -> RequestSpec:
        path = _document_path(document_id, "session")
        return RequestSpec(
            "POST", path, json=json_payload(require_payload(payload)), expected_status=(201,)
        )

    def _download_spec(self, document_id: str, action: str) -> RequestSpec:
        return RequestSpec("GET", _document_path(document_id, action), accept="application/pdf")

    def _transfer_ownership_spec(
        self, document_id: str, payload: Mapping[str, Any] | None
    ) -> RequestSpec:
        path = _document_path(document_id, "ownership")
        return RequestSpec(
            "PATCH", path, json=json_payload(require_payload(payload)), expected_status=(204,)
        )

    def _transfer_all_ownership_spec(self, payload: Mapping[str, Any] | None) -> RequestSpec:
        return RequestSpec(
            "PATCH",
            f"{_BASE_PATH}/ownership",
            json=json_payload(require_payload(payload)),
            expected_status=(204,),
        )

    def _move_to_folder_spec(self, document_id: str, folder_id: str) -> RequestSpec:
        path = _document_path(document_id, "move-to-folder")
        try:
            escaped_folder_id = escape_path_param(folder_id)
        except ConfigurationError as exc:
            raise ConfigurationError(exc.kind, f"folder id: {exc}") from exc
        return RequestSpec("POST", f"{path}/{escaped_folder_id}", expected_status=(204,))

    def _append_content_library_item_spec(
        self, document_id: str, payload: Mapping[str, Any] | None
    ) -> RequestSpec:
        path = _document_path(document_id, "append-content-library-item")
        return RequestSpec(
            "POST", path, json=json_payload(require_payload(payload)), expected_status=(201,)
        )


def _document_path(document_id: str, action: str = "") -> str:
    path = f"{_BASE_PATH}/{escape_path_param(document_id)}"
    return f"{path}/{action}" if action else path

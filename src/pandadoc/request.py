r"""Request descriptors consumed by the request executors.

A ``RequestSpec`` describes one API call: method, endpoint path, query,
extra headers, authentication requirement, accepted media type, at most
one body and the status codes that count as success. Services build a
fresh spec per call and hand it to the client; the executors only read
it.
"""

from __future__ import annotations

__all__ = ["MultipartFile", "MultipartPayload", "RequestSpec"]

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import IO, Any, Union

Pairs = tuple[tuple[str, str], ...]
PairsInput = Union[Mapping[str, Any], Iterable[tuple[str, Any]], None]


def _to_pairs(value: PairsInput) -> Pairs:
    if value is None:
        return ()
    items = value.items() if isinstance(value, Mapping) else value
    pairs: list[tuple[str, str]] = []
    for key, raw in items:
        if isinstance(raw, (list, tuple)):
            pairs.extend((key, str(v)) for v in raw)
        else:
            pairs.append((key, str(raw)))
    return tuple(pairs)


@dataclass(frozen=True)
class MultipartFile:
    """A single file part of a multipart body.

    Args:
        content: Readable binary stream or raw bytes. Must not be ``None``.
        field_name: Form field name. Empty means ``"file"``.
        file_name: File name sent to the server. Empty means ``"upload.bin"``.
        content_type: Media type of the part.
    """

    content: IO[bytes] | bytes | None
    field_name: str = "file"
    file_name: str = "upload.bin"
    content_type: str = "application/octet-stream"


@dataclass(frozen=True)
class MultipartPayload:
    """Plain string fields plus an ordered sequence of file parts.

    Fields are written before files, in the order supplied.
    """

    fields: Mapping[str, str] = field(default_factory=dict)
    files: tuple[MultipartFile, ...] = ()


@dataclass(frozen=True)
class RequestSpec:
    """Immutable description of a single API call.

    Args:
        method: HTTP method.
        path: Endpoint path relative to the base URL. May carry a query
            string, e.g. ``"/public/v1/documents?upload"``.
        params: Explicit query parameters. A mapping or a sequence of
            pairs; list values and repeated keys are all sent.
        headers: Extra headers, appended in order after the defaults.
        require_auth: Whether the call fails without credentials.
        accept: ``Accept`` header override. Empty means
            ``application/json``.
        json: JSON body.
        form: URL-encoded form body.
        multipart: Multipart body.
        expected_status: Status codes treated as success. Empty means any
            2xx.

    Example:
        ```pycon
        >>> from pandadoc.request import RequestSpec
        >>> spec = RequestSpec("GET", "/public/v1/documents", params={"page": 2, "count": 50})
        >>> spec.params
        (('page', '2'), ('count', '50'))
        >>> spec.is_expected(204)
        True

        ```
    """

    method: str
    path: str
    params: Pairs = ()
    headers: Pairs = ()
    require_auth: bool = True
    accept: str = ""
    json: Any = None
    form: Pairs | None = None
    multipart: MultipartPayload | None = None
    expected_status: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "method", self.method.upper())
        object.__setattr__(self, "params", _to_pairs(self.params))
        object.__setattr__(self, "headers", _to_pairs(self.headers))
        if self.form is not None:
            object.__setattr__(self, "form", _to_pairs(self.form))
        object.__setattr__(self, "expected_status", tuple(self.expected_status))

    def is_expected(self, status_code: int) -> bool:
        """Return ``True`` if ``status_code`` counts as success for this call."""
        if not self.expected_status:
            return 200 <= status_code < 300
        return status_code in self.expected_status

r"""Request body encoding.

A request carries at most one of a JSON, URL-encoded form or multipart
body. The body is encoded once into bytes so that every retry attempt
replays exactly the same payload.
"""

from __future__ import annotations

__all__ = ["EncodedBody", "encode_body"]

import json
import logging
import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import httpx

from pandadoc.exceptions import ConfigurationError, EncodeError, ErrorKind

if TYPE_CHECKING:
    from collections.abc import Mapping

    from pandadoc.request import MultipartPayload, Pairs, RequestSpec

logger: logging.Logger = logging.getLogger(__name__)

# Placeholder URL for letting httpx encode form and multipart bodies
_ENCODING_URL = "http://encoding.invalid/"


@dataclass(frozen=True)
class EncodedBody:
    """Encoded request payload.

    Args:
        content: The encoded bytes. Empty when the request has no body.
        content_type: The ``Content-Type`` header value. Empty when the
            request has no body.
    """

    content: bytes = b""
    content_type: str = ""

    def __bool__(self) -> bool:
        return bool(self.content)


def encode_body(spec: RequestSpec) -> EncodedBody:
    """Encode the single body of a request descriptor.

    Args:
        spec: The request descriptor.

    Returns:
        The encoded body, or an empty ``EncodedBody`` if the request has
        none.

    Raises:
        ConfigurationError: If more than one body type is set, or a
            multipart file part has no content.
        EncodeError: If the body cannot be serialized.

    Example:
        ```pycon
        >>> from pandadoc.core.body import encode_body
        >>> from pandadoc.request import RequestSpec
        >>> encode_body(RequestSpec("POST", "/x", json={"a": 1}))
        EncodedBody(content=b'{"a":1}', content_type='application/json')
        >>> encode_body(RequestSpec("POST", "/x", form={"grant_type": "code"}))
        EncodedBody(content=b'grant_type=code', content_type='application/x-www-form-urlencoded')
        >>> encode_body(RequestSpec("GET", "/x"))
        EncodedBody(content=b'', content_type='')

        ```
    """
    body_count = sum(
        body is not None for body in (spec.json, spec.form, spec.multipart)
    )
    if body_count > 1:
        raise ConfigurationError(ErrorKind.ONLY_ONE_BODY_TYPE)

    if spec.json is not None:
        return _encode_json(spec.json)
    if spec.form is not None:
        return _encode_form(spec.form)
    if spec.multipart is not None:
        return _encode_multipart(spec.multipart)
    return EncodedBody()


def _encode_json(payload: Any) -> EncodedBody:
    try:
        content = json.dumps(payload, allow_nan=False, separators=(",", ":"))
    except (TypeError, ValueError) as exc:
        raise EncodeError(message=f"encode JSON body: {exc}") from exc
    return EncodedBody(content=content.encode("utf-8"), content_type="application/json")


def _encode_form(pairs: Pairs) -> EncodedBody:
    if not pairs:
        return EncodedBody()
    data: dict[str, list[str]] = {}
    for key, value in pairs:
        data.setdefault(key, []).append(value)
    request = httpx.Request("POST", _ENCODING_URL, data=data)
    return EncodedBody(content=request.read(), content_type=request.headers["Content-Type"])


def _encode_multipart(payload: MultipartPayload) -> EncodedBody:
    if not payload.files:
        # httpx falls back to a URL-encoded form when there is no file part
        return _encode_multipart_fields(payload.fields)

    files = []
    for part in payload.files:
        if part.content is None:
            raise ConfigurationError(ErrorKind.NIL_FILE_READER)
        files.append(
            (
                part.field_name or "file",
                (
                    part.file_name or "upload.bin",
                    part.content,
                    part.content_type or "application/octet-stream",
                ),
            )
        )
    try:
        request = httpx.Request("POST", _ENCODING_URL, data=dict(payload.fields), files=files)
        content = request.read()
    except (TypeError, ValueError, OSError) as exc:
        raise EncodeError(message=f"encode multipart body: {exc}") from exc
    logger.debug(f"Encoded multipart body with {len(files)} file part(s), {len(content)} bytes")
    return EncodedBody(content=content, content_type=request.headers["Content-Type"])


def _encode_multipart_fields(fields: Mapping[str, str]) -> EncodedBody:
    boundary = os.urandom(16).hex()
    parts = []
    for name, value in fields.items():
        parts.append(
            f"--{boundary}\r\n"
            f'Content-Disposition: form-data; name="{_quote_form_name(name)}"\r\n\r\n'
            f"{value}\r\n"
        )
    parts.append(f"--{boundary}--\r\n")
    content = "".join(parts).encode("utf-8")
    logger.debug(f"Encoded multipart body with {len(fields)} field(s), {len(content)} bytes")
    return EncodedBody(content=content, content_type=f"multipart/form-data; boundary={boundary}")


def _quote_form_name(name: str) -> str:
    return (
        name.replace("\\", "\\\\")
        .replace('"', "%22")
        .replace("\r", "%0D")
        .replace("\n", "%0A")
    )

r"""Normalization of non-success API responses into ``APIError``.

PandaDoc error bodies are not uniform: depending on the endpoint the
code and message live under different keys, and some responses are not
JSON at all. This module folds them into one ``APIError`` shape.
"""

from __future__ import annotations

__all__ = ["parse_api_error"]

import json
import logging
from typing import Any

import httpx

from pandadoc.exceptions import APIError

logger: logging.Logger = logging.getLogger(__name__)

_REQUEST_ID_HEADERS = ("X-Request-Id", "X-Request-ID", "Request-Id")
_CODE_KEYS = ("code", "type", "error")
_MESSAGE_KEYS = ("message", "detail", "error_description", "error")


def parse_api_error(response: httpx.Response) -> APIError:
    """Build an ``APIError`` from a non-success response.

    The body is read in full if it was not read yet. This function never
    raises: a body that cannot be read or decoded only leaves the
    corresponding fields empty.

    Args:
        response: The non-success HTTP response.

    Returns:
        The structured error.

    Example:
        ```pycon
        >>> import httpx
        >>> from pandadoc.core.errors import parse_api_error
        >>> response = httpx.Response(
        ...     400,
        ...     json={"type": "validation_error", "detail": "Bad field"},
        ...     headers={"X-Request-Id": "req-1"},
        ... )
        >>> err = parse_api_error(response)
        >>> err.code, err.message, err.request_id
        ('validation_error', 'Bad field', 'req-1')
        >>> parse_api_error(httpx.Response(503)).message
        'Service Unavailable'

        ```
    """
    headers = httpx.Headers(response.headers)
    request_id = ""
    for name in _REQUEST_ID_HEADERS:
        if value := response.headers.get(name, "").strip():
            request_id = value
            break

    fields: dict[str, Any] = {}
    raw_body = ""
    try:
        body = response.read()
    except (httpx.HTTPError, httpx.StreamError, RuntimeError) as exc:
        logger.debug(f"Failed to read error response body: {exc}")
    else:
        raw_body = body.decode(response.encoding or "utf-8", errors="replace")
        fields = _fields_from_body(raw_body)

    return APIError(
        status_code=response.status_code,
        request_id=request_id,
        retry_after=response.headers.get("Retry-After", ""),
        raw_body=raw_body,
        headers=headers,
        **fields,
    )


def _fields_from_body(text: str) -> dict[str, Any]:
    if not text:
        return {}
    try:
        obj = json.loads(text)
    except ValueError:
        return {"message": text.strip()}
    if obj is None:
        return {}
    if not isinstance(obj, dict):
        return {"message": text.strip()}

    fields: dict[str, Any] = {}
    if code := _first_string(obj, _CODE_KEYS):
        fields["code"] = code
    if message := _first_string(obj, _MESSAGE_KEYS):
        fields["message"] = message
    if "details" in obj:
        fields["details"] = obj["details"]
    elif isinstance(obj.get("detail"), (dict, list)):
        fields["details"] = obj["detail"]
    return fields


def _first_string(obj: dict[str, Any], keys: tuple[str, ...]) -> str:
    for key in keys:
        value = obj.get(key)
        if isinstance(value, str) and value:
            return value
    return ""

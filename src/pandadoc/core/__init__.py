r"""Core building blocks of the request pipeline.

This package contains the configuration, credential handling, URL and
body encoding, and error normalization used by the request executors.
"""

from __future__ import annotations

__all__ = [
    "ClientConfig",
    "Credentials",
    "EncodedBody",
    "RetryPolicy",
    "build_url",
    "encode_body",
    "escape_path_param",
    "join_paths",
    "parse_api_error",
]

from pandadoc.core.auth import Credentials
from pandadoc.core.body import EncodedBody, encode_body
from pandadoc.core.config import ClientConfig, RetryPolicy
from pandadoc.core.errors import parse_api_error
from pandadoc.core.url import build_url, join_paths
from pandadoc.core.validation import escape_path_param

r"""Configuration dataclasses and defaults for the PandaDoc client.

This module provides the default constants, the retry policy and the
validated client configuration consumed by ``PandaDocClient``.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_ACCEPT",
    "DEFAULT_BASE_URL",
    "DEFAULT_INITIAL_BACKOFF",
    "DEFAULT_MAX_BACKOFF",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_TIMEOUT",
    "DEFAULT_USER_AGENT",
    "ClientConfig",
    "RetryPolicy",
]

import logging
import os
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

import httpx

from pandadoc.core.auth import Credentials
from pandadoc.core.validation import normalize_base_url, validate_timeout
from pandadoc.exceptions import ConfigurationError, ErrorKind

if TYPE_CHECKING:
    from collections.abc import Mapping

# Default PandaDoc API base URL
DEFAULT_BASE_URL = "https://api.pandadoc.com/"

# Default timeout in seconds for HTTP requests
DEFAULT_TIMEOUT = 30.0

# Client identifier sent as User-Agent on every request
DEFAULT_USER_AGENT = "python-pandadoc/0.2.0"

# Accept header used when a request does not override it
DEFAULT_ACCEPT = "application/json"

# Default maximum number of retry attempts
# Total attempts = max_retries + 1 (initial attempt)
DEFAULT_MAX_RETRIES = 2

# Backoff bounds in seconds
# Wait time = min(initial_backoff * (2 ** attempt), max_backoff)
DEFAULT_INITIAL_BACKOFF = 0.2
DEFAULT_MAX_BACKOFF = 2.0


@dataclass(frozen=True)
class RetryPolicy:
    """Transport-level retry policy.

    Use ``normalize()`` before handing a policy to the executors;
    ``ClientConfig`` does this automatically.

    Args:
        max_retries: Maximum number of retries after the initial attempt.
        initial_backoff: Delay in seconds before the first retry.
        max_backoff: Upper bound in seconds for any computed delay.
        retry_on_429: Whether ``429 Too Many Requests`` is retried.
        retry_on_5xx: Whether ``5xx`` responses are retried.

    Example:
        ```pycon
        >>> from pandadoc.core.config import RetryPolicy
        >>> policy = RetryPolicy(max_retries=-1, initial_backoff=0, max_backoff=0.1).normalize()
        >>> policy.max_retries, policy.initial_backoff, policy.max_backoff
        (0, 0.2, 0.2)

        ```
    """

    max_retries: int = DEFAULT_MAX_RETRIES
    initial_backoff: float = DEFAULT_INITIAL_BACKOFF
    max_backoff: float = DEFAULT_MAX_BACKOFF
    retry_on_429: bool = True
    retry_on_5xx: bool = True

    def normalize(self) -> RetryPolicy:
        """Return a copy with every bound clamped to a usable value.

        Returns:
            A policy where ``max_retries >= 0``, both backoff bounds are
            positive and ``max_backoff >= initial_backoff``.
        """
        max_retries = max(self.max_retries, 0)
        initial_backoff = (
            self.initial_backoff if self.initial_backoff > 0 else DEFAULT_INITIAL_BACKOFF
        )
        max_backoff = self.max_backoff if self.max_backoff > 0 else DEFAULT_MAX_BACKOFF
        max_backoff = max(max_backoff, initial_backoff)
        return replace(
            self,
            max_retries=max_retries,
            initial_backoff=initial_backoff,
            max_backoff=max_backoff,
        )


@dataclass(frozen=True)
class ClientConfig:
    """Validated configuration for ``PandaDocClient``.

    All validation happens at construction time; an invalid field raises
    ``ConfigurationError`` and no client is built.

    Args:
        base_url: API base URL. Normalized to end with ``/``.
        timeout: Per-request timeout in seconds. Must be > 0.
        user_agent: Client identifier header. Blank falls back to the default.
        retry_policy: Retry policy. Always stored normalized.
        api_key: Optional API key for ``API-Key`` authentication.
        access_token: Optional OAuth token for ``Bearer`` authentication.
            Mutually exclusive with ``api_key``.
        http_client: Optional ``httpx.Client`` to send synchronous requests.
            The caller keeps ownership of it. Any other type raises
            ``ConfigurationError`` with ``INVALID_HTTP_CLIENT``.
        async_http_client: Optional ``httpx.AsyncClient`` for the async path.
        logger: Optional logger replacing the executors' module logger.

    Example:
        ```pycon
        >>> from pandadoc.core.config import ClientConfig
        >>> config = ClientConfig(api_key="key", base_url="https://api.example.com")
        >>> config.base_url
        'https://api.example.com/'
        >>> config.credentials.authorization_header()
        'API-Key key'

        ```
    """

    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    retry_policy: RetryPolicy = field(default_factory=RetryPolicy)
    api_key: str = ""
    access_token: str = ""
    http_client: httpx.Client | None = None
    async_http_client: httpx.AsyncClient | None = None
    logger: logging.Logger | None = None

    def __post_init__(self) -> None:
        """Validate and normalize configuration parameters.

        Raises:
            ConfigurationError: If any parameter fails validation.
        """
        validate_timeout(self.timeout)
        if self.http_client is not None and not isinstance(self.http_client, httpx.Client):
            raise ConfigurationError(
                ErrorKind.INVALID_HTTP_CLIENT,
                f"http_client must be an httpx.Client, got {type(self.http_client).__name__}",
            )
        if self.async_http_client is not None and not isinstance(
            self.async_http_client, httpx.AsyncClient
        ):
            raise ConfigurationError(
                ErrorKind.INVALID_HTTP_CLIENT,
                "async_http_client must be an httpx.AsyncClient, "
                f"got {type(self.async_http_client).__name__}",
            )
        # Raises on conflicting credentials
        credentials = Credentials(api_key=self.api_key, access_token=self.access_token)

        object.__setattr__(self, "base_url", normalize_base_url(self.base_url, DEFAULT_BASE_URL))
        object.__setattr__(self, "user_agent", self.user_agent.strip() or DEFAULT_USER_AGENT)
        object.__setattr__(self, "retry_policy", self.retry_policy.normalize())
        object.__setattr__(self, "api_key", credentials.api_key)
        object.__setattr__(self, "access_token", credentials.access_token)

    @property
    def credentials(self) -> Credentials:
        r"""The configured credentials."""
        return Credentials(api_key=self.api_key, access_token=self.access_token)

    def merge(self, **overrides: Any) -> ClientConfig:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied. The result is validated
        like any other configuration.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new ClientConfig instance with overrides applied.

        Example:
            ```pycon
            >>> from pandadoc.core.config import ClientConfig
            >>> config = ClientConfig(timeout=10.0)
            >>> config.merge(timeout=5.0).timeout
            5.0
            >>> config.timeout
            10.0

            ```
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides: Any) -> ClientConfig:
        """Build a configuration from ``PANDADOC_*`` environment variables.

        Recognized variables: ``PANDADOC_API_KEY``, ``PANDADOC_ACCESS_TOKEN``,
        ``PANDADOC_BASE_URL``, ``PANDADOC_TIMEOUT`` and
        ``PANDADOC_MAX_RETRIES``. Keyword overrides win over the
        environment.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.
            **overrides: Explicit ``ClientConfig`` fields.

        Returns:
            The validated configuration.

        Raises:
            ConfigurationError: If a variable holds an invalid value.
        """
        env = os.environ if environ is None else environ
        kwargs: dict[str, Any] = {}
        if api_key := env.get("PANDADOC_API_KEY", "").strip():
            kwargs["api_key"] = api_key
        if access_token := env.get("PANDADOC_ACCESS_TOKEN", "").strip():
            kwargs["access_token"] = access_token
        if base_url := env.get("PANDADOC_BASE_URL", "").strip():
            kwargs["base_url"] = base_url
        if timeout := env.get("PANDADOC_TIMEOUT", "").strip():
            try:
                kwargs["timeout"] = float(timeout)
            except ValueError as exc:
                raise ConfigurationError(
                    ErrorKind.INVALID_ENVIRONMENT, f"PANDADOC_TIMEOUT is not a number: {timeout!r}"
                ) from exc
        if max_retries := env.get("PANDADOC_MAX_RETRIES", "").strip():
            try:
                kwargs["retry_policy"] = RetryPolicy(max_retries=int(max_retries))
            except ValueError as exc:
                msg = f"PANDADOC_MAX_RETRIES is not an integer: {max_retries!r}"
                raise ConfigurationError(ErrorKind.INVALID_ENVIRONMENT, msg) from exc
        kwargs.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**kwargs)

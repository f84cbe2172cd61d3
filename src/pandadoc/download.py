r"""Streaming download responses.

A ``DownloadResponse`` wraps the live ``httpx.Response`` of a binary
endpoint (e.g. a document PDF). The body is not read up front: the
caller streams it and must close the response.
"""

from __future__ import annotations

__all__ = ["DownloadResponse"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Iterator
    from types import TracebackType
    from typing import Self

    import httpx


class DownloadResponse:
    """A successful binary response whose body is still streaming.

    Args:
        response: The live successful response.

    Attributes:
        headers: Copy of the response headers.
        status_code: The HTTP status code.
        content_type: The ``Content-Type`` header, or ``""``.
        content_disposition: The ``Content-Disposition`` header, or ``""``.
        content_length: The declared body length, or ``-1`` when unknown.

    Example:
        ```pycon
        >>> from pandadoc import PandaDocClient
        >>> with PandaDocClient.with_api_key("key") as client:  # doctest: +SKIP
        ...     with client.documents.download("doc-id") as download:
        ...         with open("document.pdf", "wb") as fp:
        ...             for chunk in download.iter_bytes():
        ...                 fp.write(chunk)
        ...

        ```
    """

    def __init__(self, response: httpx.Response) -> None:
        self._response = response
        self.headers = response.headers.copy()
        self.status_code = response.status_code
        self.content_type = response.headers.get("Content-Type", "")
        self.content_disposition = response.headers.get("Content-Disposition", "")
        try:
            self.content_length = int(response.headers.get("Content-Length", "-1"))
        except ValueError:
            self.content_length = -1

    def __repr__(self) -> str:
        return (
            f"{type(self).__qualname__}(status_code={self.status_code}, "
            f"content_type={self.content_type!r}, content_length={self.content_length})"
        )

    @property
    def is_closed(self) -> bool:
        return self._response.is_closed

    def iter_bytes(self, chunk_size: int | None = None) -> Iterator[bytes]:
        """Iterate over the decoded body in chunks."""
        return self._response.iter_bytes(chunk_size)

    def read(self) -> bytes:
        """Read the whole body and close the response."""
        try:
            return self._response.read()
        finally:
            self._response.close()

    def close(self) -> None:
        """Release the underlying connection."""
        self._response.close()

    def aiter_bytes(self, chunk_size: int | None = None) -> AsyncIterator[bytes]:
        """Iterate asynchronously over the decoded body in chunks."""
        return self._response.aiter_bytes(chunk_size)

    async def aread(self) -> bytes:
        """Read the whole body and close the response."""
        try:
            return await self._response.aread()
        finally:
            await self._response.aclose()

    async def aclose(self) -> None:
        """Release the underlying connection."""
        await self._response.aclose()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()

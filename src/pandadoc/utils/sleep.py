r"""Cancellable sleep helpers used between retry attempts."""

from __future__ import annotations

__all__ = ["sleep", "sleep_async"]

import asyncio
import time
from typing import TYPE_CHECKING

from pandadoc.exceptions import RequestCancelledError

if TYPE_CHECKING:
    import threading


def sleep(delay: float, cancel: threading.Event | None = None) -> None:
    """Block for ``delay`` seconds unless cancelled.

    Args:
        delay: Seconds to wait. Zero or negative values return at once.
        cancel: Optional event. When it is set before or during the wait,
            the wait stops early.

    Raises:
        RequestCancelledError: If ``cancel`` is set.

    Example:
        ```pycon
        >>> import threading
        >>> from pandadoc.utils import sleep
        >>> sleep(0)
        >>> event = threading.Event()
        >>> event.set()
        >>> sleep(1.0, cancel=event)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        pandadoc.exceptions.RequestCancelledError: request cancelled

        ```
    """
    if cancel is not None and cancel.is_set():
        raise RequestCancelledError
    if delay <= 0:
        return
    if cancel is None:
        time.sleep(delay)
        return
    if cancel.wait(delay):
        raise RequestCancelledError


async def sleep_async(delay: float) -> None:
    """Wait for ``delay`` seconds without blocking the event loop.

    Cancellation of the surrounding task propagates as
    ``asyncio.CancelledError``.

    Args:
        delay: Seconds to wait. Zero or negative values return at once.
    """
    if delay <= 0:
        return
    await asyncio.sleep(delay)

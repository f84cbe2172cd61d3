r"""Capped exponential backoff strategy."""

from __future__ import annotations

__all__ = ["ExponentialBackoff"]

from pandadoc.backoff.base import BaseBackoffStrategy


class ExponentialBackoff(BaseBackoffStrategy):
    """Exponential backoff strategy with an upper bound.

    Calculates delay as ``min(initial * 2 ** attempt, maximum)``. The
    doubling is done step by step and stops as soon as the cap is
    reached, so large attempt numbers never overflow.

    Args:
        initial: The delay before the first retry, in seconds. Must be
            positive.
        maximum: The upper bound for any delay, in seconds. Must be
            positive.

    Raises:
        ValueError: If a bound is not positive.

    Example:
        ```pycon
        >>> from pandadoc.backoff import ExponentialBackoff
        >>> backoff = ExponentialBackoff(initial=0.2, maximum=2.0)
        >>> backoff.calculate(0)
        0.2
        >>> backoff.calculate(1)
        0.4
        >>> backoff.calculate(3)
        1.6
        >>> backoff.calculate(4)
        2.0
        >>> backoff.calculate(10_000)
        2.0

        ```
    """

    def __init__(self, initial: float, maximum: float) -> None:
        if initial <= 0:
            msg = f"initial must be positive, got {initial}"
            raise ValueError(msg)
        if maximum <= 0:
            msg = f"maximum must be positive, got {maximum}"
            raise ValueError(msg)

        self.initial = initial
        self.maximum = maximum

    def __repr__(self) -> str:
        return f"{type(self).__qualname__}(initial={self.initial}, maximum={self.maximum})"

    def calculate(self, attempt: int) -> float:
        """Calculate the capped exponential delay.

        Args:
            attempt: The retry number (0-indexed). Negative values are
                treated as 0.

        Returns:
            ``min(initial * 2 ** attempt, maximum)``.
        """
        delay = self.initial
        for _ in range(max(attempt, 0)):
            if delay >= self.maximum:
                break
            delay *= 2
        return min(delay, self.maximum)

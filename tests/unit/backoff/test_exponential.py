r"""Unit tests for ExponentialBackoff strategy."""

from __future__ import annotations

import pytest

from pandadoc.backoff import BaseBackoffStrategy, ExponentialBackoff


def test_exponential_backoff_is_backoff_strategy() -> None:
    """Test that ExponentialBackoff implements the base strategy."""
    assert isinstance(ExponentialBackoff(initial=0.2, maximum=2.0), BaseBackoffStrategy)


def test_exponential_backoff_basic() -> None:
    """Test basic exponential backoff calculation."""
    backoff = ExponentialBackoff(initial=0.2, maximum=10.0)
    assert backoff.calculate(0) == 0.2  # 0.2 * 2^0
    assert backoff.calculate(1) == 0.4  # 0.2 * 2^1
    assert backoff.calculate(2) == 0.8  # 0.2 * 2^2
    assert backoff.calculate(3) == 1.6  # 0.2 * 2^3


def test_exponential_backoff_with_cap() -> None:
    """Test exponential backoff with the maximum cap."""
    backoff = ExponentialBackoff(initial=1.0, maximum=5.0)
    assert backoff.calculate(0) == 1.0
    assert backoff.calculate(1) == 2.0
    assert backoff.calculate(2) == 4.0
    assert backoff.calculate(3) == 5.0  # Would be 8.0, but capped
    assert backoff.calculate(10) == 5.0  # Would be 1024.0, but capped


def test_exponential_backoff_default_policy_sequence() -> None:
    """Test the delays produced by the default retry policy bounds."""
    backoff = ExponentialBackoff(initial=0.2, maximum=2.0)
    assert [backoff.calculate(attempt) for attempt in range(6)] == [0.2, 0.4, 0.8, 1.6, 2.0, 2.0]


@pytest.mark.parametrize("attempt", [64, 1_000, 10**9])
def test_exponential_backoff_large_attempt(attempt: int) -> None:
    """Test that huge attempt numbers stay at the cap without overflow."""
    assert ExponentialBackoff(initial=0.2, maximum=2.0).calculate(attempt) == 2.0


def test_exponential_backoff_negative_attempt() -> None:
    """Test that a negative attempt is treated as the first retry."""
    assert ExponentialBackoff(initial=0.2, maximum=2.0).calculate(-3) == 0.2


def test_exponential_backoff_initial_above_maximum() -> None:
    """Test that the cap applies to the first delay too."""
    assert ExponentialBackoff(initial=5.0, maximum=1.0).calculate(0) == 1.0


@pytest.mark.parametrize("initial", [0, -1.0])
def test_exponential_backoff_invalid_initial(initial: float) -> None:
    """Test that a non-positive initial delay raises ValueError."""
    with pytest.raises(ValueError, match=r"initial must be positive"):
        ExponentialBackoff(initial=initial, maximum=1.0)


@pytest.mark.parametrize("maximum", [0, -5.0])
def test_exponential_backoff_invalid_maximum(maximum: float) -> None:
    """Test that a non-positive maximum raises ValueError."""
    with pytest.raises(ValueError, match=r"maximum must be positive"):
        ExponentialBackoff(initial=1.0, maximum=maximum)


def test_exponential_backoff_repr() -> None:
    """Test the representation of the strategy."""
    assert repr(ExponentialBackoff(initial=0.2, maximum=2.0)) == (
        "ExponentialBackoff(initial=0.2, maximum=2.0)"
    )

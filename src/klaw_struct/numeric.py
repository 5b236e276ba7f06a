"""Small numeric helpers."""

from __future__ import annotations

import random

__all__ = ['clamp', 'number_range', 'random_between']


def clamp(value: float, lo: float, hi: float) -> float:
    """Bound value to the closed interval [lo, hi]."""
    return min(max(value, lo), hi)


def random_between(lo: float, hi: float) -> float:
    """Return a uniformly distributed float in [lo, hi)."""
    return random.random() * (hi - lo) + lo  # noqa: S311


def number_range(start: float, stop: float, step: float = 1) -> list[float]:
    """Return the numbers from start (inclusive) to stop (exclusive).

    Unlike ``range`` this accepts floats. An empty list is returned when
    ``stop <= start``.

    Raises:
        ValueError: If step is not positive.
    """
    if stop <= start:
        return []
    if step <= 0:
        msg = f'step must be positive, got {step}'
        raise ValueError(msg)
    values: list[float] = []
    current = start
    while current < stop:
        values.append(current)
        current += step
    return values

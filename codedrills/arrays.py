"""Small drills on sequences: Fibonacci terms, reversal, rotation and search."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TypeVar

T = TypeVar("T")


def fibonacci(n: int) -> int:
    """Return the n-th term of the series 0, 1, 1, 2, 3, 5, ... (1-based)."""
    if n < 1:
        raise ValueError(f"term position must be at least 1, got {n}")
    previous, current = 0, 1
    if n == 1:
        return previous
    for _ in range(n - 2):
        previous, current = current, previous + current
    return current


def reverse(values: Iterable[T]) -> list[T]:
    """Return the values in reverse order."""
    return list(values)[::-1]


def rotate_by_one(values: Iterable[T]) -> list[T]:
    """Rotate the values one place to the right: the last becomes the first."""
    items = list(values)
    if not items:
        return items
    return [items[-1], *items[:-1]]


def search(values: Sequence[T], target: T) -> int:
    """Return the index of the first value equal to target, or -1 if absent."""
    return next(
        (position for position, value in enumerate(values) if value == target),
        -1,
    )
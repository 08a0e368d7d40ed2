"""Classic comparison sorts, each returning a new sorted list."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

T = TypeVar("T", bound=Any)


def bubble_sort(values: Iterable[T]) -> list[T]:
    """Sort by repeatedly swapping adjacent pairs, stopping once a pass swaps nothing."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        swapped = False
        for left in range(end):
            if items[left] > items[left + 1]:
                items[left], items[left + 1] = items[left + 1], items[left]
                swapped = True
        if not swapped:
            break
    return items


def insertion_sort(values: Iterable[T]) -> list[T]:
    """Sort by sinking each element left into the sorted prefix before it."""
    items: list[T] = []
    for value in values:
        position = len(items)
        items.append(value)
        while position > 0 and items[position] < items[position - 1]:
            items[position], items[position - 1] = items[position - 1], items[position]
            position -= 1
    return items


def selection_sort(values: Iterable[T]) -> list[T]:
    """Sort by swapping the smallest remaining element into place."""
    items = list(values)
    for start in range(len(items) - 1):
        smallest = min(range(start, len(items)), key=items.__getitem__)
        items[start], items[smallest] = items[smallest], items[start]
    return items
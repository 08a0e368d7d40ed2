"""Symmetric patterns: pyramids, hourglasses, butterflies and diamonds.

Each function returns the pattern as text. Every cell is followed by a
space and every row ends with a newline. A size below 1 gives empty text.
"""

from __future__ import annotations

from collections.abc import Iterable


def _cells(items: Iterable[object]) -> str:
    return "".join(f"{item} " for item in items)


def _render(rows: Iterable[str]) -> str:
    return "".join(f"{row}\n" for row in rows)


def _wings(n: int, row: int) -> str:
    stars = _cells(["*"] * row)
    return f"{stars}{'  ' * (2 * (n - row))}{stars}"


def _leaning(n: int, row: int) -> str:
    return f"{' ' * (n - row)}{_cells(['*'] * row)}"


def pyramid(n: int) -> str:
    """A centred pyramid whose k-th row holds 2k - 1 stars."""
    return _render(
        f"{'  ' * (n - row)}{_cells(['*'] * (2 * row - 1))}"
        for row in range(1, n + 1)
    )


def number_pyramid(n: int) -> str:
    """A centred pyramid whose k-th row counts up to k and back down to 1."""
    return _render(
        f"{'  ' * (n - row)}{_cells(range(1, row + 1))}{_cells(range(row - 1, 0, -1))}"
        for row in range(1, n + 1)
    )


def inverted_pyramid(n: int) -> str:
    """A centred pyramid standing on its point."""
    return _render(
        f"{'  ' * (row - 1)}{_cells(['*'] * (2 * (n - row) + 1))}"
        for row in range(1, n + 1)
    )


def hourglass(n: int) -> str:
    """Two star wings narrowing from n to 1 and widening back to n."""
    rows = [*range(n, 0, -1), *range(1, n + 1)]
    return _render(_wings(n, row) for row in rows)


def butterfly(n: int) -> str:
    """Two star wings widening from 1 to n and narrowing back to 1."""
    rows = [*range(1, n + 1), *range(n - 1, 0, -1)]
    return _render(_wings(n, row) for row in rows)


def diamond(n: int) -> str:
    """A diamond of stars, widening from 1 to n and narrowing back to 1."""
    rows = [*range(1, n + 1), *range(n, 0, -1)]
    return _render(_leaning(n, row) for row in rows)
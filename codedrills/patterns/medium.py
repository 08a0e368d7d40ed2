"""Left-aligned triangle patterns.

Each function returns the pattern as text. Every cell is followed by a
space and every row ends with a newline. A size below 1 gives empty text.
"""

from __future__ import annotations

from collections.abc import Iterable


def _cells(items: Iterable[object]) -> str:
    return "".join(f"{item} " for item in items)


def _render(rows: Iterable[str]) -> str:
    return "".join(f"{row}\n" for row in rows)


def triangle(n: int) -> str:
    """Rows of 1 to n stars."""
    return _render(_cells(["*"] * row) for row in range(1, n + 1))


def counting_triangle(n: int) -> str:
    """Row k counts from 1 up to k."""
    return _render(_cells(range(1, row + 1)) for row in range(1, n + 1))


def row_triangle(n: int) -> str:
    """Row k repeats the number k, k times."""
    return _render(_cells([row] * row) for row in range(1, n + 1))


def descending_triangle(n: int) -> str:
    """Row k counts from k down to 1."""
    return _render(_cells(range(row, 0, -1)) for row in range(1, n + 1))


def letter_triangle(n: int) -> str:
    """Row k repeats the k-th letter from 'a', k times."""
    return _render(
        _cells([chr(ord("a") + row - 1)] * row) for row in range(1, n + 1)
    )


def inverted_triangle(n: int) -> str:
    """Rows of n down to 1 stars."""
    return _render(_cells(["*"] * row) for row in range(n, 0, -1))


def inverted_counting_triangle(n: int) -> str:
    """Rows counting from 1, first up to n, then one fewer each row."""
    return _render(_cells(range(1, row + 1)) for row in range(n, 0, -1))


def suffix_triangle(n: int) -> str:
    """Rows counting down from n, each one number longer than the last."""
    return _render(_cells(range(n, row - 1, -1)) for row in range(n, 0, -1))
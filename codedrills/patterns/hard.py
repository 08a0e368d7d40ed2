"""Right-aligned triangle patterns.

Row k of n is indented by two spaces for each of the n - k missing cells.
Every cell is followed by a space and every row ends with a newline. A size
below 1 gives empty text.
"""

from __future__ import annotations

from collections.abc import Iterable


def _cells(items: Iterable[object]) -> str:
    return "".join(f"{item} " for item in items)


def _render(n: int, rows: Iterable[tuple[int, Iterable[object]]]) -> str:
    return "".join(f"{'  ' * (n - row)}{_cells(items)}\n" for row, items in rows)


def right_triangle(n: int) -> str:
    """Right-aligned rows of 1 to n stars."""
    return _render(n, ((row, ["*"] * row) for row in range(1, n + 1)))


def right_row_triangle(n: int) -> str:
    """Right-aligned rows where row k repeats the number k, k times."""
    return _render(n, ((row, [row] * row) for row in range(1, n + 1)))


def right_counting_triangle(n: int) -> str:
    """Right-aligned rows where row k counts from 1 up to k."""
    return _render(n, ((row, range(1, row + 1)) for row in range(1, n + 1)))


def right_letter_triangle(n: int) -> str:
    """Right-aligned rows where row k lists the first k letters from 'A'."""
    return _render(
        n,
        (
            (row, (chr(ord("A") + offset) for offset in range(row)))
            for row in range(1, n + 1)
        ),
    )


def right_descending_triangle(n: int) -> str:
    """Right-aligned rows where row k counts from k down to 1."""
    return _render(n, ((row, range(row, 0, -1)) for row in range(1, n + 1)))
"""Square text patterns: every row holds n cells.

Each function returns the pattern as text. Every cell is followed by a
space and every row ends with a newline. A size below 1 gives empty text.
"""

from __future__ import annotations

import itertools
from collections.abc import Iterable


def _cells(items: Iterable[object]) -> str:
    return "".join(f"{item} " for item in items)


def _render(rows: Iterable[str]) -> str:
    return "".join(f"{row}\n" for row in rows)


def square(n: int) -> str:
    """An n by n block of stars."""
    return _render(_cells(["*"] * n) for _ in range(n))


def row_numbers(n: int) -> str:
    """Each row repeats its own 1-based number n times."""
    return _render(_cells([row] * n) for row in range(1, n + 1))


def column_numbers(n: int) -> str:
    """Each row counts from 1 up to n."""
    return _render(_cells(range(1, n + 1)) for _ in range(n))


def reversed_columns(n: int) -> str:
    """Each row counts from n down to 1."""
    return _render(_cells(range(n, 0, -1)) for _ in range(n))


def squares(n: int) -> str:
    """Each row lists the squares of 1 to n."""
    return _render(_cells(col * col for col in range(1, n + 1)) for _ in range(n))


def row_letters(n: int) -> str:
    """Each row repeats one letter n times, starting from 'a' on the first row."""
    return _render(_cells([chr(ord("a") + row)] * n) for row in range(n))


def column_letters(n: int) -> str:
    """Each row lists the first n letters from 'a'."""
    return _render(
        _cells(chr(ord("a") + col) for col in range(n)) for _ in range(n)
    )


def counting(n: int) -> str:
    """Numbers from 1 to n*n, n to a row."""
    numbers = itertools.count(1)
    return _render(_cells(itertools.islice(numbers, n)) for _ in range(n))
"""Assorted number puzzles: digits, Armstrong numbers, chess and factorials."""

from __future__ import annotations

_BOARD_SIZE = 8
_WORD_MASK = 0xFFFFFFFF


def _digits(number: int) -> list[int]:
    """Decimal digits of abs(number), least significant first; none for 0."""
    remaining = abs(number)
    digits = []
    while remaining:
        remaining, digit = divmod(remaining, 10)
        digits.append(digit)
    return digits


def digit_count(number: int) -> int:
    """Return how many decimal digits number has; 0 has none."""
    return len(_digits(number))


def is_armstrong(number: int) -> bool:
    """Tell whether number equals the sum of its digits each raised to the digit count."""
    digits = _digits(number)
    power = len(digits)
    sign = -1 if number < 0 else 1
    return number == sum((sign * digit) ** power for digit in digits)


def bishop_moves(row: int, col: int) -> int:
    """Return how many squares a bishop at (row, col) on an 8x8 board can reach."""
    last = _BOARD_SIZE
    return (
        min(last - row, last - col)
        + min(last - row, col - 1)
        + min(row - 1, last - col)
        + min(row - 1, col - 1)
    )


def to_capital(letter: str) -> str:
    """Shift a lower-case letter to the matching capital."""
    if len(letter) != 1:
        raise ValueError(f"expected a single character, got {letter!r}")
    return chr(ord("A") + ord(letter) - ord("a"))


def trailing_zeros(number: int) -> int:
    """Return how many trailing zeros number! has."""
    count = 0
    while number >= 5:
        number //= 5
        count += number
    return count


def is_power_of_two(number: int) -> bool:
    """Tell whether at most one bit is set in the 32-bit form of number.

    As in the bit count this rests on, 0 counts as a power of two.
    """
    return bin(number & _WORD_MASK).count("1") <= 1


def reverse_integer(number: int) -> int:
    """Return number with its decimal digits reversed, keeping the sign."""
    reversed_value = 0
    for digit in _digits(number):
        reversed_value = reversed_value * 10 + digit
    return -reversed_value if number < 0 else reversed_value


def digital_root(number: int) -> int:
    """Sum the digits repeatedly until a single digit remains.

    Numbers below 10, negative ones included, are returned unchanged.
    """
    while number > 9:
        number = sum(_digits(number))
    return number
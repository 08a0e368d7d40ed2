"""Conversions between decimal numbers and their binary or octal digit forms.

Binary and octal forms are carried as integers whose decimal digits are the
digits of the representation, so 5 in binary is the integer 101.
"""

from __future__ import annotations


def binary_to_integer(number: int) -> int:
    """Read the decimal digits of number as binary digits and return the value.

    Digits are weighted by powers of two without validation, so a digit
    above 1 simply contributes its own value times its weight.
    """
    remaining = abs(number)
    weight = 1
    total = 0
    while remaining:
        remaining, digit = divmod(remaining, 10)
        total += digit * weight
        weight *= 2
    return -total if number < 0 else total


def decimal_to_octal(number: int) -> int:
    """Return the octal representation of number as a decimal-digit integer."""
    magnitude = int(format(abs(number), "o"))
    return -magnitude if number < 0 else magnitude


def integer_to_binary(number: int) -> int:
    """Return the binary representation of number as a decimal-digit integer.

    Numbers that are not positive give 0.
    """
    if number <= 0:
        return 0
    return int(format(number, "b"))
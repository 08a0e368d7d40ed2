import pytest
from hypothesis import given
from hypothesis import strategies as st

from codedrills.conversion import (
    binary_to_integer,
    decimal_to_octal,
    integer_to_binary,
)


@given(st.integers(min_value=1, max_value=10**6))
def test_integer_to_binary_digits_read_back_in_base_two(n):
    assert int(str(integer_to_binary(n)), 2) == n


@given(st.integers(min_value=1, max_value=10**6))
def test_integer_to_binary_uses_only_binary_digits(n):
    assert set(str(integer_to_binary(n))) <= {"0", "1"}


@given(st.integers(max_value=0))
def test_integer_to_binary_non_positive_gives_zero(n):
    assert integer_to_binary(n) == 0


@given(st.integers(min_value=0, max_value=10**6))
def test_binary_round_trip(n):
    assert binary_to_integer(integer_to_binary(n)) == n


@given(st.integers(min_value=1, max_value=10**6))
def test_binary_to_integer_negative_mirrors_positive(n):
    binary = integer_to_binary(n)
    assert binary_to_integer(-binary) == -n


def test_binary_to_integer_zero():
    assert binary_to_integer(0) == 0


@given(st.integers(min_value=0, max_value=10**6))
def test_decimal_to_octal_digits_read_back_in_base_eight(n):
    assert int(str(decimal_to_octal(n)), 8) == n


@given(st.integers(min_value=1, max_value=10**6))
def test_decimal_to_octal_negative_mirrors_positive(n):
    assert decimal_to_octal(-n) == -decimal_to_octal(n)


@pytest.mark.parametrize("n", range(8))
def test_decimal_to_octal_single_digits_unchanged(n):
    assert decimal_to_octal(n) == n


def test_decimal_to_octal_eight_is_ten():
    assert decimal_to_octal(8) == 10
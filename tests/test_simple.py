import pytest
from hypothesis import given
from hypothesis import strategies as st

from codedrills.patterns import simple

sizes = st.integers(min_value=1, max_value=25)


def _tokens(text):
    return [line.split() for line in text.splitlines()]


def test_square_small():
    assert simple.square(3) == "* * * \n* * * \n* * * \n"


def test_counting_small():
    assert simple.counting(3) == "1 2 3 \n4 5 6 \n7 8 9 \n"


@pytest.mark.parametrize("n", [0, -4])
def test_nonpositive_size_is_empty(n):
    assert simple.square(n) == ""
    assert simple.row_numbers(n) == ""
    assert simple.column_numbers(n) == ""
    assert simple.reversed_columns(n) == ""
    assert simple.squares(n) == ""
    assert simple.row_letters(n) == ""
    assert simple.column_letters(n) == ""
    assert simple.counting(n) == ""


@given(n=sizes)
def test_shape_is_square(n):
    texts = (
        simple.square(n),
        simple.row_numbers(n),
        simple.column_numbers(n),
        simple.reversed_columns(n),
        simple.squares(n),
        simple.row_letters(n),
        simple.column_letters(n),
        simple.counting(n),
    )
    for text in texts:
        assert text.endswith("\n")
        rows = text.splitlines()
        assert len(rows) == n
        assert all(row.endswith(" ") for row in rows)
        assert all(len(row.split()) == n for row in rows)


@given(n=sizes)
def test_row_numbers_repeat_row_index(n):
    for index, tokens in enumerate(_tokens(simple.row_numbers(n)), start=1):
        assert set(tokens) == {str(index)}


@given(n=sizes)
def test_column_numbers_and_reversed_are_mirrors(n):
    forward = _tokens(simple.column_numbers(n))
    backward = _tokens(simple.reversed_columns(n))
    assert [row[::-1] for row in forward] == backward
    assert forward[0][0] == "1"
    assert forward[0][-1] == str(n)


@given(n=sizes)
def test_squares_square_the_columns(n):
    plain = _tokens(simple.column_numbers(n))
    squared = _tokens(simple.squares(n))
    for plain_row, squared_row in zip(plain, squared):
        assert [int(value) ** 2 for value in plain_row] == [
            int(value) for value in squared_row
        ]


@given(n=sizes)
def test_letter_patterns_are_transposes(n):
    by_row = _tokens(simple.row_letters(n))
    by_col = _tokens(simple.column_letters(n))
    assert [list(column) for column in zip(*by_row)] == by_col
    assert by_row[0][0] == "a"


@given(n=sizes)
def test_counting_runs_consecutively(n):
    values = [int(value) for row in _tokens(simple.counting(n)) for value in row]
    assert values == sorted(values)
    assert values[0] == 1
    assert values[-1] == n * n
    assert len(set(values)) == n * n
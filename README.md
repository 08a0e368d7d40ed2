# codedrills

A small collection of classic programming drills written as plain Python
functions: array manipulation, number-base conversions, a handful of number
puzzles, three elementary sorts and a set of text patterns.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `codedrills.arrays`

- `fibonacci(n)` – the n-th term of 0, 1, 1, 2, 3, 5, …, counting from
  `fibonacci(1) == 0`. Raises `ValueError` when `n` is below 1.
- `reverse(values)` – a new list of the values in reverse order.
- `rotate_by_one(values)` – a new list with the last value moved to the front.
- `search(values, target)` – index of the first value equal to `target`,
  or `-1`.

### `codedrills.conversion`

Binary and octal forms are carried as integers whose decimal digits are the
digits of the representation, so 5 in binary is the integer `101`.

- `binary_to_integer(number)` – reads the decimal digits of `number` as binary
  digits (`binary_to_integer(101) == 5`). Digits are not checked.
- `decimal_to_octal(number)` – the octal digits of `number`, keeping its sign.
- `integer_to_binary(number)` – the binary digits of `number`; numbers that
  are not positive give `0`.

### `codedrills.problems`

- `digit_count(number)` – number of decimal digits; `0` has none.
- `is_armstrong(number)` – whether `number` equals the sum of its digits each
  raised to the digit count.
- `bishop_moves(row, col)` – squares a bishop at the 1-based position can reach
  on an 8×8 board.
- `to_capital(letter)` – shifts a lower-case letter to its capital; raises
  `ValueError` unless given exactly one character.
- `trailing_zeros(number)` – trailing zeros of `number!`.
- `is_power_of_two(number)` – whether at most one bit is set in the 32-bit form
  of `number` (so `0` counts as a power of two).
- `reverse_integer(number)` – decimal digits reversed, sign kept.
- `digital_root(number)` – digits summed repeatedly until one digit remains;
  numbers below 10 are returned unchanged.

### `codedrills.sorting`

- `bubble_sort(values)`, `insertion_sort(values)`, `selection_sort(values)` –
  each takes any iterable and returns a new sorted list.

### `codedrills.patterns`

Each pattern function takes a size `n` and returns the pattern as text: every
cell is followed by a space and every row ends with a newline. A size below 1
gives an empty string.

- `codedrills.patterns.simple` (n×n squares): `square`, `row_numbers`,
  `column_numbers`, `reversed_columns`, `squares`, `row_letters`,
  `column_letters`, `counting`
- `codedrills.patterns.medium` (left-aligned triangles): `triangle`,
  `counting_triangle`, `row_triangle`, `descending_triangle`,
  `letter_triangle`, `inverted_triangle`, `inverted_counting_triangle`,
  `suffix_triangle`
- `codedrills.patterns.hard` (right-aligned triangles): `right_triangle`,
  `right_row_triangle`, `right_counting_triangle`, `right_letter_triangle`,
  `right_descending_triangle`
- `codedrills.patterns.advanced` (symmetric shapes): `pyramid`,
  `number_pyramid`, `inverted_pyramid`, `hourglass`, `butterfly`, `diamond`

## Example

```python
from codedrills.sorting import bubble_sort
from codedrills.patterns.advanced import pyramid

print(bubble_sort([10, 8, 2, 3, 1, 4]))   # [1, 2, 3, 4, 8, 10]
print(pyramid(3), end="")
```

## What it does not do

The package is a library only. It has no command-line program and does not
prompt for input; call the functions from your own code and print their
results as you need.
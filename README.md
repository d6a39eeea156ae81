# dsadrills

A small collection of classic data-structure and algorithm exercises. Each
one is a plain Python function that takes ordinary values and returns a
result. None of them print anything.

## Modules

### `dsadrills.matrix`

- `max_row_sum(matrix)` returns the largest row sum. It raises `ValueError` if the matrix has no rows.
- `diagonal_sum(matrix)` returns the sum of both diagonals of a square matrix.
  The centre cell of an odd-sized matrix is counted once. It raises
  `ValueError` if the matrix is not square.

### `dsadrills.sorting`

Each function returns a new list and leaves its input unchanged.

- `bubble_sort(values)` sorts in **descending** order.
- `insertion_sort(values)` sorts in ascending order.
- `merge_sort(values)` is a stable sort in ascending order.

### `dsadrills.numbers`

- `is_prime(n)` checks for divisors from 2 up to the square root of `n`.
  Values that have no divisors to test, which includes 0, 1 and negative
  numbers, are reported as prime.
- `primes_between(low, high)` returns the values in `low..high` inclusive for which `is_prime` holds.
- `reverse_digits(n)` returns the decimal digits of `n` reversed, for example
  `1230` gives `321`. It returns `0` when `n <= 0`.
- `min_max(values)` returns `(smallest, largest)` found in a single pass. It
  raises `ValueError` on empty input.
- `doubled(values)` returns a new list with every value multiplied by two.

### `dsadrills.strings`

- `is_alphanumeric(ch)` reports whether `ch` is an ASCII letter or digit.
- `is_palindrome(text)` compares only ASCII letters and digits, and ignores
  case when comparing letters.

### `dsadrills.searching`

- `linear_search(values, target)` returns the index of the first match, or `None`.
- `pair_sum(values, target)` takes ascending `values` and closes two pointers
  in from the ends. It returns `(i, j)` or `None`.
- `allocate_books(pages, students)` returns the smallest page limit under
  which the books, kept in order, can be split greedily. A limit is accepted
  when no book exceeds it and there are at most `students` breaks between
  groups. It raises `ValueError` when there are more students than books, or
  when a page count is negative.
- `aggressive_cows(stalls, cows)` returns the largest minimum gap at which
  `cows` can be placed in the stalls. It raises `ValueError` when there are
  fewer than one cow, more cows than stalls, or when no gap of at least 1 works.

### `dsadrills.maze`

- `find_paths(grid)` lists every simple path from the top-left cell to the
  bottom-right cell of a square grid. Falsy cells are walls. Each path is a
  string of the moves `D`, `U`, `L` and `R`. Moves are tried in that order,
  and that order fixes the order of the results.

### `dsadrills.patterns`

Each function returns the pattern as a list of lines.

- `butterfly(n)` draws a star butterfly of `2n - 1` lines.
- `hollow_rectangle(rows, cols)` draws a star border around a blank inside.
- `palindrome_pyramid(n)` draws a right-aligned pyramid whose row `i` reads
  `i .. 1 .. i`. Each number is followed by one space, and each level of
  indent is two spaces wide.

### `dsadrills.records`

- `Student(name, roll_no)` is a frozen record. The name must be a single word
  of at most 14 characters. `describe()` returns `"name<name>\nroll_no<roll_no>"`.
- `read_students(lines, count=5)` reads `count` students from whitespace-separated
  name and roll-number words. It raises `ValueError` if the input runs out or
  a roll number is not an integer.

## Example

```python
from dsadrills.matrix import max_row_sum
from dsadrills.sorting import merge_sort
from dsadrills.strings import is_palindrome
from dsadrills.patterns import butterfly

max_row_sum([[1, 2, 3], [4, 5, 6], [7, 8, 9]])   # 24
merge_sort([12, 31, 35, 8, 32, 17])              # [8, 12, 17, 31, 32, 35]
is_palindrome("A man, a plan, a canal: Panama")  # True
print("\n".join(butterfly(3)))
```

## What it does not do

The package has no command-line program and never prompts for input. To
read values from a terminal or print results, you need to write your own
wrapper around these functions. The student records exist only in memory
and are never saved to disk.

## Installation

```
pip install .
```

## Running the tests

```
pip install ".[test]"
pytest
```
# drills

Small programming exercises as plain, importable Python functions. They
cover lists of integers, strings, binary search, arithmetic on digit lists,
and a few number helpers. Only the standard library is used.

## Installation

```
pip install .
```

The test suite uses pytest and hypothesis, available through the `test`
extra: `pip install ".[test]"`.

## Modules

### `drills.arrays`

- `find_duplicates(values)`: a value occurring `c` times appears
  `c * (c - 1)` times in the result, once per ordered pair of positions.
- `find_unique(values)`: the first value that occurs exactly once, or `None`.
- `intersection(first, second)`: common elements; each element of `first`
  claims every still unclaimed equal element of `second`.
- `linear_search(values, element)`: every index holding `element`
  (empty list when absent).
- `pair_sums(values, target)` / `triplet_sums(values, target)`: tuples of
  values at distinct positions, in order, that add up to `target`.
- `reverse_array(values)`, `array_sum(values)`.
- `sort_012(values)` and `sort_012_steps(values)`: a two-pointer pass over a
  list of 0s, 1s and 2s; the generator yields a snapshot after every step,
  and `sort_012` returns the list after the last step.
- `swap_alternate(values)`: swaps each even-index element with its right
  neighbour; a trailing unpaired element stays put.
- `remove_value(values, element)`: moves the values other than `element` to
  the front in order; the list keeps its length and the tail keeps the
  original values at those positions.
- `rotate(values, distance)`: the element at index `i` moves to
  `(i + distance) % len(values)`.

### `drills.strings`

- `is_palindrome(word)`: case-insensitive mirrored comparison.
- `reverse_sentence(sentence)`: the characters in reverse order.
- `string_length(text)`.
- `reverse_steps(text)`: yields the string before each swap of an
  end-to-end in-place reversal.

### `drills.numbers`

- `is_even(num)`.
- `factorial(num)`: 1 for zero or less.
- `combination(n, r)`: `n! / (r! * (n - r)!)`; raises `ValueError` when
  `r > n`.

### `drills.sorting`

- `selection_sort(values)`: ascending copy by exchange-based selection sort.

### `drills.searching`

- `binary_search(values, target)`: an index of `target` in an ascending
  list, or `None`.
- `leftmost(values, target)` / `rightmost(values, target)`: first and last
  index of `target`, or `None`.
- `find_peak(values)`: the largest value of a mountain list (rising, then
  falling); `ValueError` on an empty list.
- `pivot_index(values)`: the index where a rotated ascending list drops to
  its smallest value (the last index for an unrotated list); `ValueError`
  on an empty list.
- `is_allocation_possible(pages, limit, students)`: whether the books, kept
  in order and handed out greedily, fit with at most `limit` pages each.
- `allocate_books(pages, students)`: the smallest such limit, or `None`.

### `drills.digits`

- `plus_one(digits)`: the digits of the number one greater.
- `add_digit_arrays(first, second)`: digit-wise addition with carry.

Digit lists are most significant digit first.

## Examples

```python
from drills.arrays import pair_sums, rotate
from drills.searching import allocate_books, leftmost, rightmost
from drills.digits import add_digit_arrays, plus_one
from drills.numbers import combination

pair_sums([1, 2, 3, 4], 5)           # [(1, 4), (2, 3)]
rotate([1, 2, 3, 4, 5], 2)           # [4, 5, 1, 2, 3]
leftmost([1, 2, 2, 2, 3], 2)         # 1
rightmost([1, 2, 2, 2, 3], 2)        # 3
allocate_books([10, 20, 30, 40], 2)  # 60
add_digit_arrays([9, 9], [1])        # [1, 0, 0]
plus_one([1, 9, 9])                  # [2, 0, 0]
combination(5, 2)                    # 10
```

Functions take ordinary sequences and return new lists or values; the
arguments passed in are not changed.

## What it does not do

The package is a library only. It has no command-line program and does not
read input from a terminal: values are passed to the functions directly and
results are returned rather than printed.
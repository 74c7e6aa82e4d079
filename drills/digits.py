"""Arithmetic on numbers stored as lists of decimal digits."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import takewhile, zip_longest


def plus_one(digits: Sequence[int]) -> list[int]:
    """Return the digits of the number one greater, most significant digit first."""
    nines = sum(1 for _ in takewhile(lambda digit: digit == 9, reversed(digits)))
    head = list(digits[: len(digits) - nines])
    if head:
        head[-1] += 1
    else:
        head = [1]
    return head + [0] * nines


def add_digit_arrays(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Add two numbers given as digit lists and return the digits of the sum."""
    result: list[int] = []
    carry = 0
    for a, b in zip_longest(reversed(first), reversed(second), fillvalue=0):
        carry, digit = divmod(a + b + carry, 10)
        result.append(digit)
    if carry > 0:
        result.append(carry)
    result.reverse()
    return result
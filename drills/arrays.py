"""Small exercises on lists of integers."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator, Sequence
from itertools import combinations


def find_duplicates(values: Sequence[int]) -> list[int]:
    """Return the value once for every ordered pair of distinct positions holding it.

    A value that occurs ``c`` times appears ``c * (c - 1)`` times in the result,
    in the order the pairs are met when scanning left to right.
    """
    counts = Counter(values)
    return [value for value in values for _ in range(counts[value] - 1)]


def find_unique(values: Sequence[int]) -> int | None:
    """Return the first value that occurs exactly once, or None if there is none."""
    counts = Counter(values)
    return next((value for value in values if counts[value] == 1), None)


def intersection(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Return the common elements of two lists.

    Each element of ``first`` claims every still unclaimed equal element of
    ``second``; every claim contributes one entry to the result.
    """
    remaining: list[int | None] = list(second)
    result: list[int] = []
    for value in first:
        for position, candidate in enumerate(remaining):
            if candidate is not None and candidate == value:
                result.append(value)
                remaining[position] = None
    return result


def linear_search(values: Sequence[int], element: int) -> list[int]:
    """Return every index at which ``element`` occurs; empty when it is absent."""
    return [index for index, value in enumerate(values) if value == element]


def pair_sums(values: Sequence[int], target: int) -> list[tuple[int, int]]:
    """Return all pairs of distinct positions, in order, whose values add up to ``target``."""
    return [pair for pair in combinations(values, 2) if sum(pair) == target]


def triplet_sums(values: Sequence[int], target: int) -> list[tuple[int, int, int]]:
    """Return all triples of distinct positions, in order, whose values add up to ``target``."""
    return [triple for triple in combinations(values, 3) if sum(triple) == target]


def reverse_array(values: Sequence[int]) -> list[int]:
    """Return the values in reverse order."""
    return list(reversed(values))


def _at(values: list[int], index: int) -> int | None:
    return values[index] if 0 <= index < len(values) else None


def sort_012_steps(values: Sequence[int]) -> Iterator[list[int]]:
    """Run the two-pointer pass over a list of 0s, 1s and 2s, yielding a snapshot per step.

    Zeros are skipped from the left and twos from the right; the elements at the
    two pointers are then exchanged when the left one is 1 or 2 and the right one
    is 0, or when the left one is 2 and the right one is 1.
    """
    items = list(values)
    start, end = 0, len(items) - 1
    while start < end:
        while start < len(items) and items[start] == 0:
            start += 1
        while end >= 0 and items[end] == 2:
            end -= 1

        if _at(items, start) in (1, 2) and _at(items, end) == 0:
            items[start], items[end] = items[end], items[start]
        if _at(items, start) == 2 and _at(items, end) == 1:
            items[start], items[end] = items[end], items[start]

        yield list(items)
        start += 1
        end -= 1


def sort_012(values: Sequence[int]) -> list[int]:
    """Return the list as it stands after the last step of :func:`sort_012_steps`."""
    result = list(values)
    for result in sort_012_steps(values):
        pass
    return result


def array_sum(values: Sequence[int]) -> int:
    """Return the sum of the values."""
    return sum(values)


def swap_alternate(values: Sequence[int]) -> list[int]:
    """Swap each element at an even index with its right neighbour.

    A trailing element without a neighbour stays in place.
    """
    result = list(values)
    result[0:len(result) - len(result) % 2:2], result[1::2] = (
        result[1::2],
        result[0:len(result) - len(result) % 2:2],
    )
    return result


def remove_value(values: Sequence[int], element: int) -> list[int]:
    """Move every value other than ``element`` to the front, keeping their order.

    The list keeps its length: positions after the kept values still hold
    what was there before.
    """
    kept = [value for value in values if value != element]
    return kept + list(values[len(kept):])


def rotate(values: Sequence[int], distance: int) -> list[int]:
    """Return a copy in which the element at index ``i`` moves to ``(i + distance) % len``."""
    items = list(values)
    if not items:
        return items
    shift = distance % len(items)
    return items[len(items) - shift:] + items[:len(items) - shift]
"""Binary-search exercises on lists of integers."""

from __future__ import annotations

from collections.abc import Sequence


def binary_search(values: Sequence[int], target: int) -> int | None:
    """Return an index of ``target`` in an ascending list, or None when it is absent."""
    start, end = 0, len(values) - 1
    while start <= end:
        mid = (start + end) // 2
        if values[mid] == target:
            return mid
        if values[mid] < target:
            start = mid + 1
        else:
            end = mid - 1
    return None


def is_allocation_possible(pages: Sequence[int], limit: int, students: int) -> bool:
    """Tell whether the books, kept in order, can be shared out with at most ``limit`` pages each.

    Books are handed out greedily: a student takes books until the next one
    would exceed ``limit``, then the next student starts.
    """
    student_count = 1
    load = 0
    for book in pages:
        if load + book <= limit:
            load += book
            continue
        student_count += 1
        if student_count > students or book > limit:
            return False
        load = book
    return True


def allocate_books(pages: Sequence[int], students: int) -> int | None:
    """Return the smallest page limit at which the books can be shared out, or None."""
    start, end = 0, sum(pages)
    answer: int | None = None
    while start <= end:
        mid = start + (end - start) // 2
        if is_allocation_possible(pages, mid, students):
            answer = mid
            end = mid - 1
        else:
            start = mid + 1
    return answer


def leftmost(values: Sequence[int], target: int) -> int | None:
    """Return the first index of ``target`` in an ascending list, or None."""
    start, end = 0, len(values) - 1
    answer: int | None = None
    while start <= end:
        mid = (start + end) // 2
        if values[mid] == target:
            answer = mid
            end = mid - 1
        elif values[mid] > target:
            end = mid - 1
        else:
            start = mid + 1
    return answer


def rightmost(values: Sequence[int], target: int) -> int | None:
    """Return the last index of ``target`` in an ascending list, or None."""
    start, end = 0, len(values) - 1
    answer: int | None = None
    while start <= end:
        mid = (start + end) // 2
        if values[mid] == target:
            answer = mid
            start = mid + 1
        elif values[mid] > target:
            end = mid - 1
        else:
            start = mid + 1
    return answer


def find_peak(values: Sequence[int]) -> int:
    """Return the largest value of a mountain list (rising, then falling).

    Raises ValueError for an empty list.
    """
    if not values:
        raise ValueError("find_peak() of an empty sequence")
    start, end = 0, len(values) - 1
    highest = values[0]
    while start <= end:
        mid = (start + end) // 2
        highest = max(highest, values[mid])
        if mid + 1 < len(values) and values[mid] < values[mid + 1]:
            start = mid + 1
        else:
            end = mid - 1
    return highest


def pivot_index(values: Sequence[int]) -> int:
    """Return the index where a rotated ascending list drops back to its smallest value.

    For a list that is not rotated this is the last index.
    Raises ValueError for an empty list.
    """
    if not values:
        raise ValueError("pivot_index() of an empty sequence")
    first = values[0]
    start, end = 0, len(values) - 1
    while start < end:
        mid = (start + end) // 2
        if values[mid] >= first:
            start = mid + 1
        else:
            end = mid
    return end
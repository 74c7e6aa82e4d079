"""Exchange-based selection sort."""

from collections.abc import Sequence


def selection_sort(values: Sequence[int]) -> list[int]:
    """Return an ascending copy, swapping each slot with any smaller later element."""
    items = list(values)
    for i in range(len(items)):
        for j in range(i + 1, len(items)):
            if items[i] > items[j]:
                items[i], items[j] = items[j], items[i]
    return items
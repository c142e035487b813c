"""Quicksort with Lomuto partitioning."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def partition(items: list[Any], low: int, high: int) -> int:
    """Partition ``items[low:high + 1]`` in place around ``items[high]``.

    Returns the final index of the pivot: everything before it is smaller,
    everything after it is not.
    """
    pivot = items[high]
    boundary = low
    for j in range(low, high):
        if items[j] < pivot:
            items[boundary], items[j] = items[j], items[boundary]
            boundary += 1
    items[boundary], items[high] = items[high], items[boundary]
    return boundary


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list with the elements of ``items`` in ascending order."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = partition(result, low, high)
            pending.append((low, pivot - 1))
            pending.append((pivot + 1, high))
    return result
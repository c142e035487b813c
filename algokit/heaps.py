"""Draining values through min- and max-heaps."""

from __future__ import annotations

import heapq
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class _Reversed:
    value: Any

    def __lt__(self, other: "_Reversed") -> bool:
        return other.value < self.value


def drain_ascending(values: Iterable[Any]) -> list[Any]:
    """Push every value onto a min-heap and pop them all, smallest first."""
    heap = list(values)
    heapq.heapify(heap)
    return [heapq.heappop(heap) for _ in range(len(heap))]


def drain_descending(values: Iterable[Any]) -> list[Any]:
    """Push every value onto a max-heap and pop them all, largest first."""
    heap = [_Reversed(v) for v in values]
    heapq.heapify(heap)
    return [heapq.heappop(heap).value for _ in range(len(heap))]
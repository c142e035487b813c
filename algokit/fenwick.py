"""Fenwick (binary indexed) tree for prefix sums."""

from __future__ import annotations


class FenwickTree:
    """Prefix sums over positions 1 to ``size`` with point updates."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        self._n = size
        self._bit = [0] * (size + 1)

    def update(self, index: int, delta: int) -> None:
        """Add ``delta`` to the value at 1-based ``index``."""
        if not 1 <= index <= self._n:
            raise IndexError(f"index {index} outside 1..{self._n}")
        while index <= self._n:
            self._bit[index] += delta
            index += index & -index

    def query(self, index: int) -> int:
        """Return the sum of the values at positions 1 to ``index``."""
        if not 0 <= index <= self._n:
            raise IndexError(f"index {index} outside 0..{self._n}")
        total = 0
        while index > 0:
            total += self._bit[index]
            index -= index & -index
        return total

    def __len__(self) -> int:
        return self._n
"""Segment tree answering range-sum queries."""

from __future__ import annotations

from collections.abc import Sequence


class SegmentTree:
    """Range sums over a fixed sequence of numbers."""

    def __init__(self, values: Sequence[int]) -> None:
        self._n = len(values)
        self._tree = [0] * (4 * self._n)
        if self._n:
            self._build(values, 1, 0, self._n - 1)

    def _build(self, values: Sequence[int], idx: int, lo: int, hi: int) -> None:
        if lo == hi:
            self._tree[idx] = values[lo]
            return
        mid = (lo + hi) // 2
        self._build(values, idx * 2, lo, mid)
        self._build(values, idx * 2 + 1, mid + 1, hi)
        self._tree[idx] = self._tree[idx * 2] + self._tree[idx * 2 + 1]

    def query(self, left: int, right: int) -> int:
        """Return the sum of the values at indices ``left`` to ``right`` inclusive.

        Indices outside the sequence contribute nothing.
        """
        if not self._n:
            return 0
        return self._query(1, 0, self._n - 1, left, right)

    def _query(self, idx: int, lo: int, hi: int, left: int, right: int) -> int:
        if right < lo or hi < left:
            return 0
        if left <= lo and hi <= right:
            return self._tree[idx]
        mid = (lo + hi) // 2
        return self._query(idx * 2, lo, mid, left, right) + self._query(
            idx * 2 + 1, mid + 1, hi, left, right
        )

    def __len__(self) -> int:
        return self._n
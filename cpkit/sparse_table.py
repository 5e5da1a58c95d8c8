"""Sparse table for idempotent range queries in O(1)."""

from __future__ import annotations

from typing import Callable, Generic, Sequence, TypeVar

T = TypeVar("T")


class SparseTable(Generic[T]):
    """Answers ``operation`` over inclusive ranges of a static sequence.

    ``operation`` must be associative and idempotent (min, max, gcd, ...).
    """

    def __init__(self, values: Sequence[T], operation: Callable[[T, T], T]) -> None:
        n = len(values)
        if n == 0:
            raise ValueError("values must not be empty")
        self._n = n
        self._operation = operation
        logs = [0] * (n + 1)
        for i in range(2, n + 1):
            logs[i] = logs[i // 2] + 1
        self._logs = logs
        table = [list(values)]
        for j in range(1, logs[n] + 1):
            previous = table[-1]
            half = 1 << (j - 1)
            table.append(
                [operation(previous[i], previous[i + half]) for i in range(n - (1 << j) + 1)]
            )
        self._table = table

    def __len__(self) -> int:
        return self._n

    def query(self, l: int, r: int) -> T:
        """Combined value over positions ``l .. r`` inclusive."""
        if l > r:
            raise ValueError("l must not exceed r")
        if l < 0 or r >= self._n:
            raise IndexError(f"range [{l}, {r}] outside [0, {self._n})")
        j = self._logs[r - l + 1]
        row = self._table[j]
        return self._operation(row[l], row[r - (1 << j) + 1])
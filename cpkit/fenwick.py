"""Fenwick (binary indexed) trees with zero-based and one-based positions."""

from __future__ import annotations

from itertools import pairwise


class FenwickTree:
    """Point updates and prefix sums over positions ``0 .. size - 1``."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self._n = size
        self._data = [0] * size

    def __len__(self) -> int:
        return self._n

    def reset(self) -> None:
        """Set every position back to zero."""
        self._data = [0] * self._n

    def add(self, pos: int, value: int) -> None:
        """Add ``value`` to position ``pos``."""
        if not 0 <= pos < self._n:
            raise IndexError(f"position {pos} outside [0, {self._n})")
        pos += 1
        while pos <= self._n:
            self._data[pos - 1] += value
            pos += pos & -pos

    def prefix_sum(self, k: int) -> int:
        """Sum of positions ``0 .. k - 1``."""
        if not 0 <= k <= self._n:
            raise IndexError(f"prefix length {k} outside [0, {self._n}]")
        total = 0
        while k > 0:
            total += self._data[k - 1]
            k -= k & -k
        return total

    def range_sum(self, l: int, r: int) -> int:
        """Sum of positions ``l .. r - 1``."""
        if l > r:
            raise ValueError("l must not exceed r")
        return self.prefix_sum(r) - self.prefix_sum(l)

    def values(self) -> list[int]:
        """Current value at every position."""
        prefixes = [self.prefix_sum(k) for k in range(self._n + 1)]
        return [b - a for a, b in pairwise(prefixes)]


class OneBasedFenwick:
    """Fenwick tree over positions ``1 .. size`` with range updates as a difference array."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self._n = size
        self._data = [0] * (size + 1)

    def __len__(self) -> int:
        return self._n

    def prefix(self, idx: int) -> int:
        """Sum of positions ``1 .. idx``."""
        if not 0 <= idx <= self._n:
            raise IndexError(f"index {idx} outside [0, {self._n}]")
        total = 0
        while idx > 0:
            total += self._data[idx]
            idx -= idx & -idx
        return total

    def range_sum(self, l: int, r: int) -> int:
        """Sum of positions ``l .. r`` inclusive."""
        if l < 1:
            raise IndexError("l must be at least 1")
        if l > r + 1:
            raise ValueError("l must not exceed r")
        return self.prefix(r) - self.prefix(l - 1)

    def add(self, idx: int, value: int) -> None:
        """Add ``value`` at position ``idx``."""
        if not 1 <= idx <= self._n:
            raise IndexError(f"index {idx} outside [1, {self._n}]")
        while idx <= self._n:
            self._data[idx] += value
            idx += idx & -idx

    def range_add(self, l: int, r: int, value: int) -> None:
        """Add ``value`` to the difference array over ``l .. r``; ``prefix(i)`` then reads point ``i``."""
        if not 1 <= l <= r <= self._n:
            raise IndexError(f"range [{l}, {r}] outside [1, {self._n}]")
        self.add(l, value)
        if r + 1 <= self._n:
            self.add(r + 1, -value)

    def values(self) -> list[int]:
        """Stored value at every position ``1 .. size``."""
        prefixes = [self.prefix(i) for i in range(self._n + 1)]
        return [b - a for a, b in pairwise(prefixes)]
"""Disjoint set union with path compression and union by size."""

from __future__ import annotations


class DSU:
    """Partition of ``0 .. n - 1`` into disjoint sets."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self._parent = list(range(n))
        self._size = [1] * n

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} outside [0, {len(self._parent)})")

    def find(self, x: int) -> int:
        """Representative of the set holding ``x``."""
        self._check(x)
        parent = self._parent
        root = x
        while parent[root] != root:
            root = parent[root]
        while parent[x] != root:
            parent[x], x = root, parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets of ``x`` and ``y``; return whether they were separate."""
        x = self.find(x)
        y = self.find(y)
        if x == y:
            return False
        if self._size[x] > self._size[y]:
            x, y = y, x
        self._parent[x] = y
        self._size[y] += self._size[x]
        return True

    def size(self, x: int) -> int:
        """Number of elements in the set holding ``x``."""
        return self._size[self.find(x)]
"""Segment tree over chains of Euler's totient: apply phi to ranges, query meeting points."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from cpkit.primes import totient_table


@dataclass(frozen=True)
class PhiNode:
    """Summary of a range.

    ``lca`` is the deepest value every element reaches by repeated totients,
    ``steps`` the total number of totient applications needed to get there.
    An empty range has ``lca == -1``.
    """

    steps: int = 0
    maximum: int = -1
    lca: int = -1
    size: int = 0


_IDENTITY = PhiNode()


class PhiSegmentTree:
    """Supports replacing each value in a range by its totient and range summaries."""

    def __init__(self, values: Iterable[int], phi: Optional[Sequence[int]] = None) -> None:
        items = list(values)
        if any(v < 1 for v in items):
            raise ValueError("values must be positive")
        largest = max(items, default=1)
        if phi is None:
            phi = totient_table(largest)
        if len(phi) <= largest:
            raise ValueError("totient table does not cover every value")
        self._phi = phi
        self._n = len(items)
        size = 1
        while size < self._n:
            size *= 2
        self._size = size
        self._tree = [_IDENTITY] * (2 * size - 1)
        self._build(0, 0, size, items)

    def __len__(self) -> int:
        return self._n

    def _merge(self, a: PhiNode, b: PhiNode) -> PhiNode:
        if a.lca < 1:
            return b
        if b.lca < 1:
            return a
        phi = self._phi
        steps = a.steps + b.steps
        x, y = a.lca, b.lca
        while x != y:
            if x > y:
                steps += a.size
                x = phi[x]
            else:
                steps += b.size
                y = phi[y]
        return PhiNode(steps, max(a.maximum, b.maximum), x, a.size + b.size)

    def _build(self, node: int, left: int, right: int, items: list[int]) -> None:
        if right - left == 1:
            if left < len(items):
                value = items[left]
                self._tree[node] = PhiNode(0, value, value, 1)
            return
        mid = (left + right) // 2
        self._build(2 * node + 1, left, mid, items)
        self._build(2 * node + 2, mid, right, items)
        self._tree[node] = self._merge(self._tree[2 * node + 1], self._tree[2 * node + 2])

    def _check(self, l: int, r: int) -> None:
        if not 0 <= l <= r <= self._n:
            raise IndexError(f"range [{l}, {r}) outside [0, {self._n}]")

    def _query(self, lq: int, rq: int, node: int, left: int, right: int) -> PhiNode:
        if lq >= right or rq <= left:
            return _IDENTITY
        if lq <= left and right <= rq:
            return self._tree[node]
        mid = (left + right) // 2
        return self._merge(
            self._query(lq, rq, 2 * node + 1, left, mid),
            self._query(lq, rq, 2 * node + 2, mid, right),
        )

    def query(self, l: int, r: int) -> PhiNode:
        """Summary of positions ``l .. r - 1``."""
        self._check(l, r)
        return self._query(l, r, 0, 0, self._size)

    def _operate(self, lq: int, rq: int, node: int, left: int, right: int) -> None:
        if lq >= right or rq <= left:
            return
        if right - left == 1:
            value = self._phi[self._tree[node].lca]
            self._tree[node] = PhiNode(0, value, value, 1)
            return
        if self._tree[node].maximum <= 1:
            return
        mid = (left + right) // 2
        self._operate(lq, rq, 2 * node + 1, left, mid)
        self._operate(lq, rq, 2 * node + 2, mid, right)
        self._tree[node] = self._merge(self._tree[2 * node + 1], self._tree[2 * node + 2])

    def operate(self, l: int, r: int) -> None:
        """Replace every value at positions ``l .. r - 1`` by its totient."""
        self._check(l, r)
        self._operate(l, r, 0, 0, self._size)
"""Segment trees: iterative generic, recursive point-update, and range-add/range-min."""

from __future__ import annotations

from typing import Callable, Generic, Iterable, Sequence, TypeVar

T = TypeVar("T")

EMPTY_ANSWER = -(10**18)
INF = 10**18


class SegmentTree(Generic[T]):
    """Bottom-up segment tree over an associative ``merge`` with identity ``default``."""

    def __init__(self, values: Iterable[T], default: T, merge: Callable[[T, T], T]) -> None:
        items = list(values)
        n = len(items)
        self._n = n
        self._default = default
        self._merge = merge
        tree = [default] * n + items
        for i in range(n - 1, 0, -1):
            tree[i] = merge(tree[2 * i], tree[2 * i + 1])
        self._tree = tree

    def __len__(self) -> int:
        return self._n

    def update(self, i: int, value: T) -> None:
        """Set position ``i`` to ``value``."""
        if not 0 <= i < self._n:
            raise IndexError(f"position {i} outside [0, {self._n})")
        tree, merge = self._tree, self._merge
        i += self._n
        tree[i] = value
        while i > 1:
            i //= 2
            tree[i] = merge(tree[2 * i], tree[2 * i + 1])

    def query(self, l: int, r: int) -> T:
        """Merge of positions ``l .. r`` inclusive, in order; empty when ``l > r``."""
        if l <= r and (l < 0 or r >= self._n):
            raise IndexError(f"range [{l}, {r}] outside [0, {self._n})")
        tree, merge = self._tree, self._merge
        left = right = self._default
        l += self._n
        r += self._n + 1
        while l < r:
            if l % 2:
                left = merge(left, tree[l])
                l += 1
            if r % 2:
                r -= 1
                right = merge(tree[r], right)
            l //= 2
            r //= 2
        return merge(left, right)


class RecursiveSegmentTree:
    """Top-down segment tree with point assignment and range queries."""

    def __init__(
        self,
        values: Sequence[int],
        op: Callable[[int, int], int] = max,
        empty: int = EMPTY_ANSWER,
    ) -> None:
        items = list(values)
        if not items:
            raise ValueError("values must not be empty")
        self._n = len(items)
        self._op = op
        self._empty = empty
        self._tree = [empty] * (4 * self._n)
        self._construct(0, 0, self._n - 1, items)

    def __len__(self) -> int:
        return self._n

    def _construct(self, v: int, l: int, r: int, items: list[int]) -> int:
        if l == r:
            self._tree[v] = items[l]
        else:
            mid = (l + r) // 2
            self._tree[v] = self._op(
                self._construct(2 * v + 1, l, mid, items),
                self._construct(2 * v + 2, mid + 1, r, items),
            )
        return self._tree[v]

    def _query(self, v: int, curl: int, curr: int, l: int, r: int) -> int:
        if curl >= l and curr <= r:
            return self._tree[v]
        if curr < l or curl > r:
            return self._empty
        mid = (curl + curr) // 2
        return self._op(
            self._query(2 * v + 1, curl, mid, l, r),
            self._query(2 * v + 2, mid + 1, curr, l, r),
        )

    def query(self, l: int, r: int) -> int:
        """Combined value over positions ``l .. r`` inclusive; ``empty`` if none overlap."""
        return self._query(0, 0, self._n - 1, l, r)

    def _update(self, v: int, i: int, x: int, l: int, r: int) -> int:
        if r < i or l > i:
            return self._tree[v]
        if l == r:
            self._tree[v] = x
        else:
            mid = (l + r) // 2
            self._tree[v] = self._op(
                self._update(2 * v + 1, i, x, l, mid),
                self._update(2 * v + 2, i, x, mid + 1, r),
            )
        return self._tree[v]

    def update(self, i: int, x: int) -> None:
        """Set position ``i`` to ``x``."""
        if not 0 <= i < self._n:
            raise IndexError(f"position {i} outside [0, {self._n})")
        self._update(0, i, x, 0, self._n - 1)


class RangeAddMinTree:
    """Lazy segment tree: add to a half-open range, query the minimum of a half-open range."""

    def __init__(self, values: Sequence[int]) -> None:
        items = list(values)
        self._n = len(items)
        size = 1
        while size < self._n:
            size *= 2
        self._size = size
        self._val = [0] * (2 * size - 1)
        self._lazy = [0] * (2 * size - 1)
        self._build(items, 0, 0, size)

    def __len__(self) -> int:
        return self._n

    def _pull(self, x: int) -> None:
        self._val[x] = min(self._val[2 * x + 1], self._val[2 * x + 2])

    def _push(self, x: int) -> None:
        pending = self._lazy[x]
        if pending:
            for child in (2 * x + 1, 2 * x + 2):
                self._val[child] += pending
                self._lazy[child] += pending
            self._lazy[x] = 0

    def _build(self, items: list[int], x: int, lx: int, rx: int) -> None:
        if rx - lx == 1:
            self._val[x] = items[lx] if lx < len(items) else INF
            return
        m = (lx + rx) // 2
        self._build(items, 2 * x + 1, lx, m)
        self._build(items, 2 * x + 2, m, rx)
        self._pull(x)

    def _add(self, l: int, r: int, x: int, lx: int, rx: int, value: int) -> None:
        if rx - lx == 1:
            self._val[x] += value
            return
        if l <= lx and rx <= r:
            self._val[x] += value
            self._lazy[x] += value
            return
        m = (lx + rx) // 2
        self._push(x)
        if m > l:
            self._add(l, r, 2 * x + 1, lx, m, value)
        if m < r:
            self._add(l, r, 2 * x + 2, m, rx, value)
        self._pull(x)

    def range_add(self, l: int, r: int, value: int) -> None:
        """Add ``value`` to positions ``l .. r - 1``; an empty range does nothing."""
        if l < 0 or r > self._n:
            raise IndexError(f"range [{l}, {r}) outside [0, {self._n})")
        if r <= l:
            return
        self._add(l, r, 0, 0, self._size, value)

    def _min(self, l: int, r: int, x: int, lx: int, rx: int) -> int:
        if rx - lx == 1 or (l <= lx and rx <= r):
            return self._val[x]
        m = (lx + rx) // 2
        self._push(x)
        left = right = INF
        if m > l:
            left = self._min(l, r, 2 * x + 1, lx, m)
        if m < r:
            right = self._min(l, r, 2 * x + 2, m, rx)
        return min(left, right)

    def range_min(self, l: int, r: int) -> int:
        """Minimum of positions ``l .. r - 1``."""
        if l < 0 or r > self._n:
            raise IndexError(f"range [{l}, {r}) outside [0, {self._n})")
        if r <= l:
            raise ValueError("range must not be empty")
        return self._min(l, r, 0, 0, self._size)
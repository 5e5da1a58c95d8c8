"""Generic lazy segment tree with pluggable combine, apply and compose functions."""

from __future__ import annotations

import operator
from typing import Any, Callable, Generic, Optional, Sequence, TypeVar

T = TypeVar("T")
U = TypeVar("U")


def _assign(current: Any, update: Any, tl: int, tr: int) -> Any:
    """Result of assigning ``update`` to every position in ``[tl, tr]`` under a sum."""
    return (tr - tl + 1) * update


class LazySegmentTree(Generic[T, U]):
    """Range updates and range queries over positions ``0 .. n - 1``.

    ``combine(left, right)`` merges two node values, ``apply(value, update, tl, tr)``
    applies a pending update to a node covering ``[tl, tr]`` and
    ``compose(old, new, tl, tr)`` folds a new update into a pending one. Without a
    ``compose`` a newer update replaces the pending one. The defaults give range
    assignment with range sums.
    """

    def __init__(
        self,
        n: int,
        identity_element: T,
        identity_update: U,
        combine: Callable[[T, T], T] = operator.add,
        apply: Callable[[T, U, int, int], T] = _assign,
        compose: Optional[Callable[[U, U, int, int], U]] = None,
    ) -> None:
        if n <= 0:
            raise ValueError("n must be positive")
        self._n = n
        self._identity_element = identity_element
        self._identity_update = identity_update
        self._combine = combine
        self._apply = apply
        self._compose = compose
        self._st: list = [identity_element] * (4 * n)
        self._lazy: list = [identity_update] * (4 * n)

    def __len__(self) -> int:
        return self._n

    def _fold(self, old: U, new: U, tl: int, tr: int) -> U:
        if self._compose is None:
            return new
        return self._compose(old, new, tl, tr)

    def _push_down(self, v: int, tl: int, tr: int) -> None:
        pending = self._lazy[v]
        if pending == self._identity_update:
            return
        self._st[v] = self._apply(self._st[v], pending, tl, tr)
        if tl < tr:
            tm = (tl + tr) >> 1
            left, right = 2 * v + 1, 2 * v + 2
            self._lazy[left] = self._fold(self._lazy[left], pending, tl, tm)
            self._lazy[right] = self._fold(self._lazy[right], pending, tm + 1, tr)
        self._lazy[v] = self._identity_update

    def _build(self, v: int, tl: int, tr: int, values: list) -> None:
        if tl == tr:
            self._st[v] = values[tl]
            return
        tm = (tl + tr) >> 1
        self._build(2 * v + 1, tl, tm, values)
        self._build(2 * v + 2, tm + 1, tr, values)
        self._st[v] = self._combine(self._st[2 * v + 1], self._st[2 * v + 2])

    def build(self, values: Sequence[T]) -> None:
        """Load ``values``, which must hold exactly ``n`` elements."""
        items = list(values)
        if len(items) != self._n:
            raise ValueError(f"expected {self._n} values, got {len(items)}")
        self._lazy = [self._identity_update] * (4 * self._n)
        self._build(0, 0, self._n - 1, items)

    def _query(self, v: int, tl: int, tr: int, l: int, r: int) -> T:
        self._push_down(v, tl, tr)
        if tr < l or tl > r:
            return self._identity_element
        if l <= tl and tr <= r:
            return self._st[v]
        tm = (tl + tr) >> 1
        return self._combine(
            self._query(2 * v + 1, tl, tm, l, r),
            self._query(2 * v + 2, tm + 1, tr, l, r),
        )

    def query(self, l: int, r: int) -> T:
        """Combined value over ``l .. r`` inclusive; the identity element when ``l > r``."""
        if l > r:
            return self._identity_element
        self._check(l, r)
        return self._query(0, 0, self._n - 1, l, r)

    def _update(self, v: int, tl: int, tr: int, l: int, r: int, upd: U) -> None:
        self._push_down(v, tl, tr)
        if tr < l or tl > r:
            return
        if l <= tl and tr <= r:
            self._lazy[v] = self._fold(self._lazy[v], upd, tl, tr)
            self._push_down(v, tl, tr)
            return
        tm = (tl + tr) >> 1
        self._update(2 * v + 1, tl, tm, l, r, upd)
        self._update(2 * v + 2, tm + 1, tr, l, r, upd)
        self._st[v] = self._combine(self._st[2 * v + 1], self._st[2 * v + 2])

    def update(self, l: int, r: int, upd: U) -> None:
        """Apply ``upd`` to positions ``l .. r`` inclusive; nothing happens when ``l > r``."""
        if l > r:
            return
        self._check(l, r)
        self._update(0, 0, self._n - 1, l, r, upd)

    def _check(self, l: int, r: int) -> None:
        if l < 0 or r >= self._n:
            raise IndexError(f"range [{l}, {r}] outside [0, {self._n})")
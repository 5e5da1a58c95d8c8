"""Array helpers: prefix sums, Kadane, frequency tables, binary search and tokenising."""

from __future__ import annotations

import random
from collections import Counter
from itertools import accumulate
from typing import Callable, Hashable, Iterable, Optional, Sequence


class PrefixSum2D:
    """Inclusive rectangle sums over a 2D grid in O(1) per query."""

    def __init__(self, grid: Sequence[Sequence[int]]) -> None:
        if any(len(row) != len(grid[0]) for row in grid):
            raise ValueError("all rows must have the same length")
        self.rows = len(grid)
        self.cols = len(grid[0]) if grid else 0
        pref: list[list[int]] = []
        above = [0] * self.cols
        for row in grid:
            current = [a + b for a, b in zip(above, accumulate(row))]
            pref.append(current)
            above = current
        self._pref = pref

    def query(self, x1: int, y1: int, x2: int, y2: int) -> int:
        """Sum of cells with rows ``x1..x2`` and columns ``y1..y2``, inclusive."""
        if not (0 <= x1 <= x2 < self.rows and 0 <= y1 <= y2 < self.cols):
            raise IndexError("rectangle outside the grid")
        pref = self._pref
        result = pref[x2][y2]
        if x1:
            result -= pref[x1 - 1][y2]
        if y1:
            result -= pref[x2][y1 - 1]
        if x1 and y1:
            result += pref[x1 - 1][y1 - 1]
        return result


def prefix_sums(values: Iterable[int]) -> list[int]:
    """Running totals: element ``i`` is the sum of the first ``i + 1`` values."""
    return list(accumulate(values))


def max_subarray_sum(values: Iterable[int]) -> int:
    """Largest sum of a non-empty contiguous run (Kadane's algorithm)."""
    best: Optional[int] = None
    running = 0
    for value in values:
        running += value
        if best is None or running > best:
            best = running
        if running < 0:
            running = 0
    if best is None:
        raise ValueError("values must not be empty")
    return best


def frequencies(values: Iterable[Hashable]) -> dict:
    """Occurrence counts keyed by value, in increasing key order."""
    return dict(sorted(Counter(values).items()))


def last_true(lo: int, hi: int, check: Callable[[int], bool]) -> int:
    """Binary search keeping ``check(lo)`` true and ``check(hi)`` false; returns ``lo``.

    ``check`` must be true then false over ``[lo, hi]``.
    """
    while hi - lo > 1:
        mid = lo + ((hi - lo) >> 1)
        if check(mid):
            lo = mid
        else:
            hi = mid
    return lo


def first_true(lo: int, hi: int, check: Callable[[int], bool]) -> int:
    """Smallest ``x`` in ``[lo, hi]`` with ``check(x)`` true, or ``hi + 1`` if none.

    ``check`` must be false then true over the range.
    """
    answer = hi + 1
    while lo <= hi:
        mid = (lo + hi) // 2
        if check(mid):
            answer = mid
            hi = mid - 1
        else:
            lo = mid + 1
    return answer


def tokenize(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``; a trailing empty piece is dropped."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    parts = text.split(sep)
    if parts[-1] == "":
        parts.pop()
    return parts


def random_in_range(a: int, b: int, rng: Optional[random.Random] = None) -> int:
    """Uniform random integer in ``[a, b]``."""
    if a > b:
        raise ValueError("empty range: a is greater than b")
    source = rng if rng is not None else random
    return source.randint(a, b)
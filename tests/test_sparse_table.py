import math
import random

import pytest

from cpkit.sparse_table import SparseTable


def _values(seed, n):
    rng = random.Random(seed)
    return [rng.randint(1, 1000) for _ in range(n)]


@pytest.mark.parametrize("n", [1, 2, 3, 7, 16, 33])
def test_min_queries_match_slices(n):
    values = _values(n, n)
    table = SparseTable(values, min)
    for l in range(n):
        for r in range(l, n):
            assert table.query(l, r) == min(values[l : r + 1])


def test_max_queries_match_slices():
    values = _values(99, 25)
    table = SparseTable(values, max)
    for l in range(25):
        for r in range(l, 25):
            assert table.query(l, r) == max(values[l : r + 1])


def test_gcd_queries_match_slices():
    values = _values(7, 20)
    table = SparseTable(values, math.gcd)
    for l in range(20):
        for r in range(l, 20):
            assert table.query(l, r) == math.gcd(*values[l : r + 1])


def test_single_element_query_returns_element():
    values = _values(5, 10)
    table = SparseTable(values, min)
    assert [table.query(i, i) for i in range(10)] == values
    assert len(table) == 10


def test_invalid_queries_raise():
    table = SparseTable([3, 1, 2], min)
    with pytest.raises(ValueError):
        table.query(2, 1)
    with pytest.raises(IndexError):
        table.query(0, 3)
    with pytest.raises(IndexError):
        table.query(-1, 1)


def test_empty_values_rejected():
    with pytest.raises(ValueError):
        SparseTable([], min)
import random

import pytest

from cpkit.dsu import DSU


def test_initially_singletons():
    dsu = DSU(6)
    assert len(dsu) == 6
    for x in range(6):
        assert dsu.find(x) == x
        assert dsu.size(x) == 1


def test_union_joins_and_reports():
    dsu = DSU(5)
    assert dsu.union(0, 1) is True
    assert dsu.union(1, 0) is False
    assert dsu.find(0) == dsu.find(1)
    assert dsu.size(0) == 2
    assert dsu.find(2) != dsu.find(0)


def test_chain_of_unions_gives_one_set():
    n = 26
    dsu = DSU(n)
    for x in range(n - 1):
        dsu.union(x, x + 1)
    roots = {dsu.find(x) for x in range(n)}
    assert len(roots) == 1
    assert all(dsu.size(x) == n for x in range(n))


def test_sizes_match_reference_partition():
    rng = random.Random(11)
    n = 40
    dsu = DSU(n)
    groups = {x: {x} for x in range(n)}
    for _ in range(30):
        a, b = rng.randrange(n), rng.randrange(n)
        merged = dsu.union(a, b)
        if groups[a] is groups[b]:
            assert merged is False
        else:
            assert merged is True
            joined = groups[a] | groups[b]
            for member in joined:
                groups[member] = joined
    for x in range(n):
        assert dsu.size(x) == len(groups[x])
        for y in groups[x]:
            assert dsu.find(y) == dsu.find(x)
    roots = {dsu.find(x) for x in range(n)}
    assert sum(dsu.size(r) for r in roots) == n


def test_out_of_range_raises():
    dsu = DSU(3)
    with pytest.raises(IndexError):
        dsu.find(3)
    with pytest.raises(IndexError):
        dsu.union(-1, 0)
import pytest

from cpkit.phi_segtree import PhiNode, PhiSegmentTree
from cpkit.primes import totient_table

PHI = totient_table(100)


def test_single_element_queries():
    values = [6, 10, 7, 1, 97]
    tree = PhiSegmentTree(values, PHI)
    for i, v in enumerate(values):
        assert tree.query(i, i + 1) == PhiNode(0, v, v, 1)


def test_empty_query_is_identity():
    tree = PhiSegmentTree([6, 10, 7], PHI)
    assert tree.query(1, 1) == PhiNode()


def test_value_and_its_totient():
    v = 10
    tree = PhiSegmentTree([v, PHI[v]], PHI)
    assert tree.query(0, 2) == PhiNode(1, v, PHI[v], 2)


def test_equal_values_need_no_steps():
    tree = PhiSegmentTree([5, 5, 5], PHI)
    assert tree.query(0, 3) == PhiNode(0, 5, 5, 3)


def test_worked_example():
    tree = PhiSegmentTree([2, 3, 4], PHI)
    node = tree.query(0, 3)
    assert node.steps == 2
    assert node.lca == 2
    assert node.maximum == 4
    assert node.size == 3


def test_maximum_and_size_of_whole_range():
    values = [12, 35, 8, 99, 64, 27]
    tree = PhiSegmentTree(values, PHI)
    node = tree.query(0, len(values))
    assert node.maximum == max(values)
    assert node.size == len(values)


def test_operate_matches_rebuilt_tree():
    values = [12, 35, 8, 99, 64, 27, 50]
    tree = PhiSegmentTree(values, PHI)
    tree.operate(1, 5)
    changed = [PHI[v] if 1 <= i < 5 else v for i, v in enumerate(values)]
    rebuilt = PhiSegmentTree(changed, PHI)
    n = len(values)
    for l in range(n + 1):
        for r in range(l, n + 1):
            assert tree.query(l, r) == rebuilt.query(l, r)


def test_repeated_operate_reaches_one():
    values = [12, 35, 8, 99, 64]
    tree = PhiSegmentTree(values, PHI)
    for _ in range(20):
        tree.operate(0, len(values))
    assert tree.query(0, len(values)) == PhiNode(0, 1, 1, len(values))


def test_default_table_is_computed():
    values = [30, 18]
    assert PhiSegmentTree(values).query(0, 2) == PhiSegmentTree(values, PHI).query(0, 2)


def test_non_positive_value_rejected():
    with pytest.raises(ValueError):
        PhiSegmentTree([3, 0], PHI)


def test_short_table_rejected():
    with pytest.raises(ValueError):
        PhiSegmentTree([50], totient_table(10))


def test_out_of_range_raises():
    tree = PhiSegmentTree([3, 4], PHI)
    with pytest.raises(IndexError):
        tree.query(0, 3)
    with pytest.raises(IndexError):
        tree.operate(2, 1)
import pytest

from cpkit.graphs import (
    bfs_distances,
    connected_components,
    has_directed_cycle,
    kruskal,
    read_edges,
    strongly_connected_components,
    topological_order,
)


def test_read_edges_unweighted():
    adj = read_edges("1 2 2 3".split(), 3, 2)
    assert adj == [[], [2], [1, 3], [2]]


def test_read_edges_weighted():
    adj = read_edges([1, 2, 7], 2, 1, weighted=True)
    assert adj == [[], [(2, 7)], [(1, 7)]]


def test_read_edges_errors():
    with pytest.raises(ValueError):
        read_edges([1, 2], 2, 2)
    with pytest.raises(ValueError):
        read_edges([1, 5], 2, 1)


def test_bfs_path_and_unreachable():
    adj = [[1], [0, 2], [1], []]
    dist = bfs_distances(adj, 0)
    assert dist[:3] == [0, 1, 2]
    assert dist[3] == -1


def test_bfs_edge_invariant():
    adj = read_edges("1 2 1 3 2 4 3 4 4 5 5 6".split(), 6, 6)
    dist = bfs_distances(adj, 1)
    for u, nbrs in enumerate(adj):
        for v in nbrs:
            assert abs(dist[u] - dist[v]) <= 1
    assert dist[1] == 0


def test_bfs_bad_source():
    with pytest.raises(IndexError):
        bfs_distances([[]], 3)


def test_connected_components_partition():
    adj = [[1], [0], [3], [2], []]
    comps = connected_components(adj)
    assert sorted(sorted(c) for c in comps) == [[0, 1], [2, 3], [4]]
    assert sum(len(c) for c in comps) == len(adj)


def test_cycle_detection():
    assert has_directed_cycle([[1], [2], [0]])
    assert has_directed_cycle([[0]])
    assert not has_directed_cycle([[1, 2], [2], []])


def test_topological_order_respects_edges():
    adj = [[2], [2, 3], [4], [4], []]
    order = topological_order(adj)
    pos = {v: i for i, v in enumerate(order)}
    assert sorted(order) == list(range(len(adj)))
    for u, nbrs in enumerate(adj):
        for v in nbrs:
            assert pos[u] < pos[v]


def test_topological_order_rejects_cycle():
    with pytest.raises(ValueError):
        topological_order([[1], [0]])


def test_scc():
    adj = [[1], [2], [0, 3], []]
    comps = strongly_connected_components(adj)
    assert sorted(sorted(c) for c in comps) == [[0, 1, 2], [3]]


def test_scc_on_dag_is_singletons():
    adj = [[1], [2], []]
    comps = strongly_connected_components(adj)
    assert sorted(comps) == [[0], [1], [2]]


def test_kruskal_spanning_tree():
    edges = [(0, 1, 4), (1, 2, 1), (0, 2, 3), (2, 3, 2), (1, 3, 5)]
    tree, cost = kruskal(4, edges)
    assert len(tree) == 3
    assert cost == sum(w for _, _, w in tree)
    assert cost == 6
    adj = [[] for _ in range(4)]
    for u, v, _ in tree:
        adj[u].append(v)
        adj[v].append(u)
    assert len(connected_components(adj)) == 1


def test_kruskal_forest():
    tree, cost = kruskal(4, [(0, 1, 2), (2, 3, 5)])
    assert sorted(tree) == [(0, 1, 2), (2, 3, 5)]
    assert cost == 7
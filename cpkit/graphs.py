"""Graph helpers: edge-list reading, BFS, components, ordering, SCCs and minimum spanning trees."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Sequence, Union

from cpkit.dsu import DSU

Neighbour = Union[int, tuple]


def _neighbour(entry: Neighbour) -> int:
    return entry[0] if isinstance(entry, tuple) else entry


def read_edges(
    tokens: Iterable[Union[int, str]], n: int, m: int, weighted: bool = False
) -> list[list]:
    """Read ``m`` undirected edges ``u v`` (or ``u v w``) into a 1-based adjacency list.

    Weighted lists hold ``(vertex, weight)`` pairs.
    """
    it = iter(tokens)

    def take() -> int:
        try:
            return int(next(it))
        except StopIteration:
            raise ValueError("not enough tokens for the edge list") from None

    adj: list[list] = [[] for _ in range(n + 1)]
    for _ in range(m):
        u, v = take(), take()
        for x in (u, v):
            if not 1 <= x <= n:
                raise ValueError(f"vertex {x} outside [1, {n}]")
        if weighted:
            w = take()
            adj[u].append((v, w))
            adj[v].append((u, w))
        else:
            adj[u].append(v)
            adj[v].append(u)
    return adj


def bfs_distances(adj: Sequence[Sequence[Neighbour]], source: int) -> list[int]:
    """Edge count from ``source`` to every vertex; -1 where unreachable."""
    if not 0 <= source < len(adj):
        raise IndexError(f"source {source} outside [0, {len(adj)})")
    dist = [-1] * len(adj)
    dist[source] = 0
    queue = deque([source])
    while queue:
        cur = queue.popleft()
        for entry in adj[cur]:
            nxt = _neighbour(entry)
            if dist[nxt] < 0:
                dist[nxt] = dist[cur] + 1
                queue.append(nxt)
    return dist


def _preorder(adj: Sequence[Sequence[Neighbour]], start: int, visited: list[bool]) -> list[int]:
    visited[start] = True
    order = [start]
    stack = [iter(adj[start])]
    while stack:
        for entry in stack[-1]:
            nxt = _neighbour(entry)
            if not visited[nxt]:
                visited[nxt] = True
                order.append(nxt)
                stack.append(iter(adj[nxt]))
                break
        else:
            stack.pop()
    return order


def _postorder(adj: Sequence[Sequence[Neighbour]], start: int, visited: list[bool]) -> list[int]:
    visited[start] = True
    order: list[int] = []
    stack = [(start, iter(adj[start]))]
    while stack:
        node, children = stack[-1]
        for entry in children:
            nxt = _neighbour(entry)
            if not visited[nxt]:
                visited[nxt] = True
                stack.append((nxt, iter(adj[nxt])))
                break
        else:
            order.append(node)
            stack.pop()
    return order


def connected_components(adj: Sequence[Sequence[Neighbour]]) -> list[list[int]]:
    """Components of an undirected graph, each in depth-first visiting order."""
    visited = [False] * len(adj)
    return [_preorder(adj, v, visited) for v in range(len(adj)) if not visited[v]]


def has_directed_cycle(adj: Sequence[Sequence[Neighbour]]) -> bool:
    """Whether the directed graph contains a cycle (self-loops count)."""
    state = [0] * len(adj)  # 0 unseen, 1 on the current path, 2 finished
    for start in range(len(adj)):
        if state[start]:
            continue
        state[start] = 1
        stack = [(start, iter(adj[start]))]
        while stack:
            node, children = stack[-1]
            for entry in children:
                nxt = _neighbour(entry)
                if state[nxt] == 1:
                    return True
                if state[nxt] == 0:
                    state[nxt] = 1
                    stack.append((nxt, iter(adj[nxt])))
                    break
            else:
                state[node] = 2
                stack.pop()
    return False


def topological_order(adj: Sequence[Sequence[Neighbour]]) -> list[int]:
    """Vertices ordered so every edge points forward; raises ValueError on a cycle."""
    if has_directed_cycle(adj):
        raise ValueError("graph has a directed cycle")
    visited = [False] * len(adj)
    finished: list[int] = []
    for v in range(len(adj)):
        if not visited[v]:
            finished.extend(_postorder(adj, v, visited))
    finished.reverse()
    return finished


def strongly_connected_components(adj: Sequence[Sequence[Neighbour]]) -> list[list[int]]:
    """Strongly connected components by Kosaraju's algorithm."""
    n = len(adj)
    visited = [False] * n
    finished: list[int] = []
    for v in range(n):
        if not visited[v]:
            finished.extend(_postorder(adj, v, visited))
    transpose: list[list[int]] = [[] for _ in range(n)]
    for u, nbrs in enumerate(adj):
        for entry in nbrs:
            transpose[_neighbour(entry)].append(u)
    visited = [False] * n
    return [_preorder(transpose, v, visited) for v in reversed(finished) if not visited[v]]


def kruskal(
    n: int, edges: Iterable[tuple[int, int, int]]
) -> tuple[list[tuple[int, int, int]], int]:
    """Minimum spanning forest of vertices ``0 .. n - 1``; returns ``(edges, total weight)``."""
    dsu = DSU(n)
    tree: list[tuple[int, int, int]] = []
    cost = 0
    for u, v, w in sorted(edges, key=lambda e: e[2]):
        if dsu.union(u, v):
            tree.append((u, v, w))
            cost += w
    return tree, cost
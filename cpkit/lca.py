"""Lowest common ancestors: Euler tour with a range-minimum table, and binary lifting."""

from __future__ import annotations

from typing import Sequence, Union

Neighbour = Union[int, tuple]


def _neighbour(entry: Neighbour) -> int:
    """Target vertex of an adjacency entry, which is a vertex or a ``(vertex, weight)`` pair."""
    return entry[0] if isinstance(entry, tuple) else entry


class MinIndexRMQ:
    """Sparse table answering range-minimum value and position queries in O(1)."""

    def __init__(self, values: Sequence[int]) -> None:
        a = list(values)
        n = len(a)
        if n == 0:
            raise ValueError("values must not be empty")
        self._a = a
        table = [list(range(n))]
        for i in range(1, n.bit_length()):
            prev = table[-1]
            half = 1 << (i - 1)
            row = []
            for j, best in enumerate(prev):
                if j + half < n and a[prev[j + half]] < a[best]:
                    best = prev[j + half]
                row.append(best)
            table.append(row)
        self._table = table

    def __len__(self) -> int:
        return len(self._a)

    def _candidates(self, x: int, y: int) -> tuple[int, int]:
        if x > y:
            raise ValueError("x must not exceed y")
        if x < 0 or y >= len(self._a):
            raise IndexError(f"range [{x}, {y}] outside [0, {len(self._a)})")
        k = (y - x + 1).bit_length() - 1
        row = self._table[k]
        return row[x], row[y - (1 << k) + 1]

    def range_min(self, x: int, y: int) -> int:
        """Smallest value among positions ``x .. y`` inclusive."""
        i, j = self._candidates(x, y)
        return min(self._a[i], self._a[j])

    def min_index(self, x: int, y: int) -> int:
        """A position in ``x .. y`` holding the smallest value."""
        i, j = self._candidates(x, y)
        return i if self._a[i] < self._a[j] else j


def _check_root(adj: Sequence[Sequence[Neighbour]], root: int) -> None:
    if not 0 <= root < len(adj):
        raise IndexError(f"root {root} outside [0, {len(adj)})")


class EulerTourLCA:
    """LCA by range minimum over depths along an Euler tour of the tree."""

    def __init__(self, adj: Sequence[Sequence[Neighbour]], root: int = 0) -> None:
        _check_root(adj, root)
        n = len(adj)
        visited = [False] * n
        depth = [0] * n
        tour = [root]
        visited[root] = True
        stack = [(root, iter(adj[root]))]
        while stack:
            node, children = stack[-1]
            for entry in children:
                child = _neighbour(entry)
                if not visited[child]:
                    visited[child] = True
                    depth[child] = depth[node] + 1
                    tour.append(child)
                    stack.append((child, iter(adj[child])))
                    break
            else:
                stack.pop()
                if stack:
                    tour.append(stack[-1][0])
        first = [-1] * n
        for i in reversed(range(len(tour))):
            first[tour[i]] = i
        self._tour = tour
        self._first = first
        self._depth = [depth[v] for v in tour]
        self._rmq = MinIndexRMQ(self._depth)

    def _positions(self, x: int, y: int) -> tuple[int, int]:
        n = len(self._first)
        for v in (x, y):
            if not 0 <= v < n:
                raise IndexError(f"vertex {v} outside [0, {n})")
            if self._first[v] < 0:
                raise ValueError(f"vertex {v} is not reachable from the root")
        x, y = self._first[x], self._first[y]
        return (x, y) if x <= y else (y, x)

    def lca(self, x: int, y: int) -> int:
        """Lowest common ancestor of ``x`` and ``y``."""
        i, j = self._positions(x, y)
        return self._tour[self._rmq.min_index(i, j)]

    def dist(self, x: int, y: int) -> int:
        """Number of edges on the path between ``x`` and ``y``."""
        i, j = self._positions(x, y)
        return self._depth[i] + self._depth[j] - 2 * self._rmq.range_min(i, j)


class BinaryLiftingLCA:
    """LCA by jump pointers and entry/exit times."""

    def __init__(self, adj: Sequence[Sequence[Neighbour]], root: int = 0) -> None:
        _check_root(adj, root)
        n = len(adj)
        tin = [-1] * n
        tout = [-1] * n
        depth = [0] * n
        parent = list(range(n))
        timer = 0
        tin[root] = timer
        timer += 1
        stack = [(root, iter(adj[root]))]
        while stack:
            node, children = stack[-1]
            for entry in children:
                child = _neighbour(entry)
                if tin[child] < 0:
                    parent[child] = node
                    depth[child] = depth[node] + 1
                    tin[child] = timer
                    timer += 1
                    stack.append((child, iter(adj[child])))
                    break
            else:
                tout[node] = timer
                timer += 1
                stack.pop()
        up = [parent]
        for _ in range(1, max(1, n.bit_length())):
            prev = up[-1]
            up.append([prev[prev[v]] for v in range(n)])
        self._tin = tin
        self._tout = tout
        self._depth = depth
        self._up = up

    def _check(self, v: int) -> None:
        n = len(self._tin)
        if not 0 <= v < n:
            raise IndexError(f"vertex {v} outside [0, {n})")
        if self._tin[v] < 0:
            raise ValueError(f"vertex {v} is not reachable from the root")

    def is_ancestor(self, u: int, v: int) -> bool:
        """Whether ``u`` lies on the path from the root to ``v`` (a vertex is its own ancestor)."""
        self._check(u)
        self._check(v)
        return self._tin[u] <= self._tin[v] and self._tout[u] >= self._tout[v]

    def lca(self, u: int, v: int) -> int:
        """Lowest common ancestor of ``u`` and ``v``."""
        if self.is_ancestor(u, v):
            return u
        if self.is_ancestor(v, u):
            return v
        for level in reversed(self._up):
            if not self.is_ancestor(level[u], v):
                u = level[u]
        return self._up[0][u]

    def dist(self, u: int, v: int) -> int:
        """Number of edges on the path between ``u`` and ``v``."""
        w = self.lca(u, v)
        return self._depth[u] + self._depth[v] - 2 * self._depth[w]
"""Implicit-key splay tree: a sequence with range reverse, range add and range minimum."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Sequence


class _Node:
    __slots__ = ("value", "minimum", "pending", "flipped", "size", "parent", "child")

    def __init__(self, value: int = 0) -> None:
        self.value = value
        self.minimum = value
        self.pending = 0
        self.flipped = False
        self.size = 1
        self.parent: Optional[_Node] = None
        self.child: list[Optional[_Node]] = [None, None]

    def add(self, delta: int) -> None:
        self.value += delta
        self.minimum += delta
        self.pending += delta

    def reverse(self) -> None:
        self.child.reverse()
        self.flipped = not self.flipped

    def push_down(self) -> None:
        if self.flipped:
            for c in self.child:
                if c is not None:
                    c.reverse()
            self.flipped = False
        if self.pending:
            for c in self.child:
                if c is not None:
                    c.add(self.pending)
            self.pending = 0

    def update(self) -> None:
        self.size = 1
        self.minimum = self.value
        for c in self.child:
            if c is not None:
                self.size += c.size
                self.minimum = min(self.minimum, c.minimum)


def _size(node: Optional[_Node]) -> int:
    return node.size if node is not None else 0


class ImplicitSplayTree:
    """A sequence of integers indexed by position."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head = _Node()
        self._tail = _Node()
        self._head.child[1] = self._tail
        self._tail.parent = self._head
        self._head.size = 2
        self._root = self._head
        items = list(values)
        if items:
            self.insert_range(0, items)

    def __len__(self) -> int:
        return self._root.size - 2

    def __iter__(self) -> Iterator[int]:
        stack: list[_Node] = []
        node: Optional[_Node] = self._root
        while stack or node is not None:
            while node is not None:
                node.push_down()
                stack.append(node)
                node = node.child[0]
            node = stack.pop()
            if node is not self._head and node is not self._tail:
                yield node.value
            node = node.child[1]

    def _rotate(self, n: _Node) -> None:
        p = n.parent
        assert p is not None
        v = 1 if p.child[0] is n else 0
        m = n.child[v]
        g = p.parent
        if g is not None:
            g.child[1 if g.child[1] is p else 0] = n
        n.parent = g
        n.child[v] = p
        p.parent = n
        p.child[v ^ 1] = m
        if m is not None:
            m.parent = p
        p.update()
        n.update()

    def _splay(self, n: _Node, s: Optional[_Node] = None) -> None:
        while n.parent is not s:
            m = n.parent
            g = m.parent
            if g is s:
                self._rotate(n)
            elif (g.child[0] is m) == (m.child[0] is n):
                self._rotate(m)
                self._rotate(n)
            else:
                self._rotate(n)
                self._rotate(n)
        if s is None:
            self._root = n

    def _find(self, idx: int, splay: bool = True) -> _Node:
        """Node at ``idx`` counting the leading sentinel as index 0."""
        node = self._root
        while True:
            node.push_down()
            left = _size(node.child[0])
            if idx < left:
                node = node.child[0]
            elif idx == left:
                break
            else:
                idx -= left + 1
                node = node.child[1]
        if splay:
            self._splay(node)
        return node

    def _between(self, l: int, r: int) -> tuple[_Node, _Node]:
        """Bring the neighbours of ``[l, r)`` together so the range is ``left.child[1]``."""
        right = self._find(r + 1)
        left = self._find(l, splay=False)
        self._splay(left, right)
        sub = left.child[1]
        if sub is not None:
            sub.push_down()
        return left, right

    def _check_range(self, l: int, r: int) -> None:
        if not 0 <= l <= r <= len(self):
            raise IndexError(f"range [{l}, {r}) outside [0, {len(self)}]")

    def _build(self, values: Sequence[int], lo: int, hi: int) -> Optional[_Node]:
        if lo >= hi:
            return None
        mid = (lo + hi) // 2
        node = _Node(values[mid])
        for side, sub in enumerate((self._build(values, lo, mid), self._build(values, mid + 1, hi))):
            node.child[side] = sub
            if sub is not None:
                sub.parent = node
        node.update()
        return node

    def __getitem__(self, pos: int) -> int:
        if not isinstance(pos, int):
            raise TypeError("position must be an integer")
        n = len(self)
        if pos < 0:
            pos += n
        if not 0 <= pos < n:
            raise IndexError(f"position {pos} outside [0, {n})")
        return self._find(pos + 1).value

    def insert(self, pos: int, value: int) -> None:
        """Insert ``value`` so that it ends up at position ``pos``."""
        self.insert_range(pos, [value])

    def insert_range(self, pos: int, values: Iterable[int]) -> None:
        """Insert ``values`` in order starting at position ``pos``."""
        if not 0 <= pos <= len(self):
            raise IndexError(f"position {pos} outside [0, {len(self)}]")
        items = list(values)
        if not items:
            return
        left, right = self._between(pos, pos)
        sub = self._build(items, 0, len(items))
        left.child[1] = sub
        sub.parent = left
        left.update()
        right.update()

    def erase(self, l: int, r: int) -> None:
        """Remove positions ``l .. r - 1``."""
        self._check_range(l, r)
        if l == r:
            return
        left, right = self._between(l, r)
        sub = left.child[1]
        sub.parent = None
        left.child[1] = None
        left.update()
        right.update()

    def reverse(self, l: int, r: int) -> None:
        """Reverse positions ``l .. r - 1``."""
        self._check_range(l, r)
        if r - l < 2:
            return
        left, right = self._between(l, r)
        left.child[1].reverse()
        left.update()
        right.update()

    def add(self, l: int, r: int, value: int) -> None:
        """Add ``value`` to positions ``l .. r - 1``."""
        self._check_range(l, r)
        if l == r:
            return
        left, right = self._between(l, r)
        left.child[1].add(value)
        left.update()
        right.update()

    def range_min(self, l: int, r: int) -> int:
        """Minimum of positions ``l .. r - 1``."""
        self._check_range(l, r)
        if l == r:
            raise ValueError("range must not be empty")
        left, _ = self._between(l, r)
        return left.child[1].minimum
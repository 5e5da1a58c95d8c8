"""Trie over decimal digit sequences."""

from __future__ import annotations

from typing import Iterable


def _digit(d: int) -> int:
    if not isinstance(d, int) or not 0 <= d <= 9:
        raise ValueError(f"{d!r} is not a decimal digit")
    return d


class DigitTrie:
    """Stores digit sequences and reports the longest stored prefix of a query."""

    def __init__(self) -> None:
        self._root: dict[int, dict] = {}

    def add(self, digits: Iterable[int]) -> None:
        """Insert a sequence of digits 0 to 9."""
        node = self._root
        for d in digits:
            node = node.setdefault(_digit(d), {})

    def longest_prefix(self, digits: Iterable[int]) -> int:
        """Length of the longest prefix of ``digits`` that is a prefix of a stored sequence."""
        node = self._root
        length = 0
        for d in digits:
            child = node.get(_digit(d))
            if child is None:
                break
            length += 1
            node = child
        return length
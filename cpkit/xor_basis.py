"""Linear basis over GF(2) for integers of a bounded bit width."""

from __future__ import annotations

from typing import Iterator


class XorBasis:
    """Keeps a basis of the xor span of the numbers added so far."""

    def __init__(self, bits: int) -> None:
        if bits < 0:
            raise ValueError("bits must be non-negative")
        self.bits = bits
        self._basis = [0] * bits
        self._size = 0

    def add(self, x: int) -> None:
        """Add ``x`` to the span; numbers of ``bits`` or more bits are ignored."""
        if x < 0:
            raise ValueError("value must be non-negative")
        if x >= 1 << self.bits:
            return
        for i in range(self.bits):
            if not x >> i & 1:
                continue
            if not self._basis[i]:
                self._basis[i] = x
                self._size += 1
            x ^= self._basis[i]

    def __contains__(self, x: object) -> bool:
        if not isinstance(x, int) or x < 0:
            return False
        for i in range(self.bits):
            if not x >> i & 1:
                continue
            if not self._basis[i]:
                return False
            x ^= self._basis[i]
        return x == 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        """Basis slots by lowest bit, zero where a slot is empty."""
        return iter(self._basis)
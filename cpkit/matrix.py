"""Small dense matrices with entries reduced modulo a fixed number."""

from __future__ import annotations

from typing import Sequence

DEFAULT_MOD = 10000


class Matrix:
    """A rectangular matrix whose arithmetic is performed modulo ``mod``."""

    __slots__ = ("rows", "mod")

    def __init__(self, data: Sequence[Sequence[int]], mod: int = DEFAULT_MOD) -> None:
        if mod <= 0:
            raise ValueError("modulus must be positive")
        rows = [[value % mod for value in row] for row in data]
        if any(len(row) != len(rows[0]) for row in rows):
            raise ValueError("all rows must have the same length")
        self.rows = rows
        self.mod = mod

    @property
    def shape(self) -> tuple[int, int]:
        return len(self.rows), len(self.rows[0]) if self.rows else 0

    @staticmethod
    def identity(size: int, mod: int = DEFAULT_MOD) -> "Matrix":
        """The ``size`` by ``size`` identity matrix."""
        if size < 0:
            raise ValueError("size must be non-negative")
        return Matrix(
            [[1 if i == j else 0 for j in range(size)] for i in range(size)], mod
        )

    def __mul__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        if other.mod != self.mod:
            raise ValueError("matrices have different moduli")
        rows, inner = self.shape
        other_rows, cols = other.shape
        if inner != other_rows:
            raise ValueError("inner dimensions do not match")
        columns = list(zip(*other.rows))
        mod = self.mod
        return Matrix(
            [
                [sum(a * b for a, b in zip(row, column)) % mod for column in columns]
                if columns
                else []
                for row in self.rows
            ],
            mod,
        )

    def __pow__(self, exponent: int) -> "Matrix":
        rows, cols = self.shape
        if rows != cols:
            raise ValueError("only square matrices can be raised to a power")
        if exponent < 0:
            raise ValueError("exponent must be non-negative")
        result = Matrix.identity(rows, self.mod)
        base = self
        while exponent:
            if exponent & 1:
                result = result * base
            exponent >>= 1
            if exponent:
                base = base * base
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.rows == other.rows and self.mod == other.mod

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "\n".join(" ".join(str(v) for v in row) for row in self.rows)

    def __repr__(self) -> str:
        return f"Matrix({self.rows!r}, mod={self.mod})"
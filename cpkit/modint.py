"""Modular integers and binomial coefficients."""

from __future__ import annotations

from functools import total_ordering
from typing import Union

MOD = 10**9 + 7


@total_ordering
class ModInt:
    """An integer modulo ``mod``, kept in ``[0, mod)``."""

    __slots__ = ("value", "mod")

    def __init__(self, value: int = 0, mod: int = MOD) -> None:
        if mod <= 0:
            raise ValueError("modulus must be positive")
        self.mod = mod
        self.value = int(value) % mod

    def _coerce(self, other: Union["ModInt", int]) -> "ModInt":
        if isinstance(other, ModInt):
            if other.mod != self.mod:
                raise ValueError("operands have different moduli")
            return other
        if isinstance(other, int):
            return ModInt(other, self.mod)
        return NotImplemented

    def __add__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return ModInt(self.value + other.value, self.mod)

    __radd__ = __add__

    def __sub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return ModInt(self.value - other.value, self.mod)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return ModInt(other.value - self.value, self.mod)

    def __mul__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return ModInt(self.value * other.value, self.mod)

    __rmul__ = __mul__

    def __truediv__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return self * other.inverse()

    def __rtruediv__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return other * self.inverse()

    def __neg__(self) -> "ModInt":
        return ModInt(-self.value, self.mod)

    def __pow__(self, exponent: int) -> "ModInt":
        if exponent < 0:
            raise ValueError("exponent must be non-negative")
        return ModInt(pow(self.value, exponent, self.mod), self.mod)

    def inverse(self) -> "ModInt":
        """Multiplicative inverse by Fermat's little theorem (prime modulus)."""
        if self.value == 0:
            raise ZeroDivisionError("zero has no inverse")
        return self ** (self.mod - 2)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ModInt):
            return NotImplemented
        return self.value == other.value and self.mod == other.mod

    def __lt__(self, other: "ModInt") -> bool:
        if not isinstance(other, ModInt):
            return NotImplemented
        return self.value < other.value

    def __hash__(self) -> int:
        return hash((self.value, self.mod))

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"ModInt({self.value}, mod={self.mod})"


class Combinatorics:
    """Factorials and binomials modulo a prime, grown on demand."""

    def __init__(self, limit: int = 0, mod: int = MOD) -> None:
        self.mod = mod
        self._n = 0
        self._fac = [1]
        self._invfac = [1]
        self._inv = [0]
        self._grow(limit)

    def _grow(self, m: int) -> None:
        n = self._n
        if m <= n:
            return
        mod = self.mod
        fac, invfac, inv = self._fac, self._invfac, self._inv
        for i in range(n + 1, m + 1):
            fac.append(fac[-1] * i % mod)
        invfac.extend([0] * (m - n))
        inv.extend([0] * (m - n))
        invfac[m] = pow(fac[m], mod - 2, mod)
        for i in range(m, n, -1):
            invfac[i - 1] = invfac[i] * i % mod
            inv[i] = invfac[i] * fac[i - 1] % mod
        self._n = m

    def _ensure(self, n: int) -> None:
        if n < 0:
            raise ValueError("argument must be non-negative")
        if n > self._n:
            self._grow(2 * n)

    def factorial(self, n: int) -> int:
        """``n!`` modulo the prime."""
        self._ensure(n)
        return self._fac[n]

    def inverse_factorial(self, n: int) -> int:
        """Inverse of ``n!`` modulo the prime."""
        self._ensure(n)
        return self._invfac[n]

    def inverse(self, n: int) -> int:
        """Inverse of ``n`` modulo the prime."""
        if n == 0:
            raise ZeroDivisionError("zero has no inverse")
        self._ensure(n)
        return self._inv[n]

    def binom(self, n: int, r: int) -> int:
        """``C(n, r)`` modulo the prime; 0 outside ``0 <= r <= n``."""
        if n < r or r < 0:
            return 0
        return self.factorial(n) * self.inverse_factorial(r) % self.mod * self.inverse_factorial(n - r) % self.mod


def binomial_table(n: int, k: int) -> list[list[int]]:
    """Pascal's triangle: ``table[i][j] == C(i, j)`` for ``i <= n``, ``j <= k``."""
    if n < 0 or k < 0:
        raise ValueError("n and k must be non-negative")
    table: list[list[int]] = []
    previous = [0] * (k + 1)
    for i in range(n + 1):
        row = [
            1 if j == 0 or j == i else (previous[j - 1] + previous[j] if j < i else 0)
            for j in range(k + 1)
        ]
        table.append(row)
        previous = row
    return table


def small_binomial(n: int, r: int) -> int:
    """Exact ``C(n, r)`` by the multiplicative formula."""
    if r < 0 or r > n:
        return 0
    r = min(r, n - r)
    result = 1
    for i in range(1, r + 1):
        result = result * (n - i + 1) // i
    return result
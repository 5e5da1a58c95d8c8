"""Integer arithmetic helpers: powers, gcd, bit tricks and small counting functions."""

from __future__ import annotations

import math

_U64 = (1 << 64) - 1


def _tdiv(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _tmod(a: int, b: int) -> int:
    """Remainder that takes the sign of the dividend."""
    return a - b * _tdiv(a, b)


def binpow(x: int, y: int) -> int:
    """Return ``x`` raised to ``y``; non-positive exponents give 1."""
    if y <= 0:
        return 1
    return x**y


def modpow(a: int, b: int, mod: int) -> int:
    """Return ``a**b % mod`` for a non-negative exponent."""
    if b < 0:
        raise ValueError("exponent must be non-negative")
    if mod <= 0:
        raise ValueError("modulus must be positive")
    return pow(a % mod, b, mod)


def xor_upto(n: int) -> int:
    """Return ``1 ^ 2 ^ ... ^ n``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    remainder = n % 4
    if remainder == 0:
        return n
    if remainder == 1:
        return 1
    if remainder == 2:
        return n + 1
    return 0


def highest_exponent(p: int, n: int) -> int:
    """Return the exponent of ``p`` in ``n!`` (Legendre's formula)."""
    if p < 2:
        raise ValueError("p must be at least 2")
    total = 0
    power = p
    while power <= n:
        total += n // power
        power *= p
    return total


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while b:
        a, b = b, _tmod(a, b)
    return a


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, x, y)`` with ``a*x + b*y == g == gcd(a, b)``."""
    if a == 0:
        return b, 0, 1
    g, x1, y1 = extended_gcd(_tmod(b, a), a)
    return g, y1 - _tdiv(b, a) * x1, x1


def lcm3(a: int, b: int, c: int) -> int:
    """Least common multiple of three numbers, computed as abc / gcd(ab, bc, ca)."""
    if a == 0 or b == 0 or c == 0:
        return 0
    return abs(a * b * c) // math.gcd(a * b, b * c, c * a)


def ceil_div(a: int, b: int) -> int:
    """Return ``a / b`` rounded up for positive operands."""
    quotient = _tdiv(a, b)
    return quotient if _tmod(a, b) == 0 else quotient + 1


def mod_inverse(i: int, mod: int) -> int:
    """Inverse of ``i`` modulo the prime ``mod``."""
    i %= mod
    chain = []
    while i != 1:
        if i == 0:
            raise ZeroDivisionError(f"value has no inverse modulo {mod}")
        chain.append(i)
        i = mod % i
    result = 1
    for value in reversed(chain):
        result = (mod - (mod // value) * result % mod) % mod
    return result


def mod_mul(a: int, b: int, mod: int) -> int:
    """Product of ``a`` and ``b`` reduced into ``[0, mod)``."""
    return (a % mod) * (b % mod) % mod


def mod_add(a: int, b: int, mod: int) -> int:
    """Sum of ``a`` and ``b`` reduced into ``[0, mod)``."""
    return (a % mod + b % mod) % mod


def derangements(n: int) -> int:
    """Number of permutations of ``n`` items with no fixed point."""
    if n < 0:
        raise ValueError("n must be non-negative")
    previous, current = 1, 0  # D(0), D(1)
    if n == 0:
        return previous
    for i in range(2, n + 1):
        previous, current = current, (i - 1) * (current + previous)
    return current


def popcount(n: int) -> int:
    """Number of set bits in the 64-bit representation of ``n``."""
    return bin(n & _U64).count("1")


def has_single_bit(n: int) -> bool:
    """Whether ``n`` (as 64-bit unsigned) is a power of two."""
    return popcount(n) == 1


def bit_floor(n: int) -> int:
    """Largest power of two not above ``n`` (as 64-bit unsigned); 0 for 0."""
    n &= _U64
    return 0 if n == 0 else 1 << (n.bit_length() - 1)


def count_trailing_zeros(n: int) -> int:
    """Trailing zero bits of ``n`` as 64-bit unsigned; 0 for 0."""
    n &= _U64
    return 0 if n == 0 else (n & -n).bit_length() - 1


def count_leading_zeros(n: int) -> int:
    """Leading zero bits of ``n`` as 64-bit unsigned; 64 for 0."""
    return 64 - (n & _U64).bit_length()


def lowest_set_bit(n: int) -> int:
    """Value of the lowest set bit of ``n``."""
    return n & -n
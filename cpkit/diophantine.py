"""Linear Diophantine equations, Chinese remainders and discrete logarithms."""

from __future__ import annotations

import math
from typing import Optional, Sequence


def _tdiv(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _ext_gcd(a: int, b: int) -> tuple[int, int, int]:
    if a == 0:
        return b, 0, 1
    g, x1, y1 = _ext_gcd(b % a, a)
    return g, y1 - (b // a) * x1, x1


def find_any_solution(a: int, b: int, c: int) -> Optional[tuple[int, int, int]]:
    """Return ``(x, y, g)`` with ``a*x + b*y == c`` and ``g = gcd(|a|, |b|)``, or None."""
    if a == 0 and b == 0:
        raise ValueError("a and b cannot both be zero")
    g, x0, y0 = _ext_gcd(abs(a), abs(b))
    if c % g:
        return None
    factor = c // g
    x0 *= factor
    y0 *= factor
    if a < 0:
        x0 = -x0
    if b < 0:
        y0 = -y0
    return x0, y0, g


def shift_solution(x: int, y: int, a: int, b: int, count: int) -> tuple[int, int]:
    """Move ``count`` steps along the solution line of ``a*x + b*y = c``."""
    return x + count * b, y - count * a


def count_solutions(
    a: int, b: int, c: int, minx: int, maxx: int, miny: int, maxy: int
) -> int:
    """Count integer solutions of ``a*x + b*y == c`` inside the given box."""
    found = find_any_solution(a, b, c)
    if found is None:
        return 0
    x, y, g = found
    if a == 0 or b == 0:
        raise ValueError("a and b must both be non-zero")
    a //= g
    b //= g

    sign_a = 1 if a > 0 else -1
    sign_b = 1 if b > 0 else -1

    x, y = shift_solution(x, y, a, b, _tdiv(minx - x, b))
    if x < minx:
        x, y = shift_solution(x, y, a, b, sign_b)
    if x > maxx:
        return 0
    lx1 = x

    x, y = shift_solution(x, y, a, b, _tdiv(maxx - x, b))
    if x > maxx:
        x, y = shift_solution(x, y, a, b, -sign_b)
    rx1 = x

    x, y = shift_solution(x, y, a, b, -_tdiv(miny - y, a))
    if y < miny:
        x, y = shift_solution(x, y, a, b, -sign_a)
    if y > maxy:
        return 0
    lx2 = x

    x, y = shift_solution(x, y, a, b, -_tdiv(maxy - y, a))
    if y > maxy:
        x, y = shift_solution(x, y, a, b, sign_a)
    rx2 = x

    if lx2 > rx2:
        lx2, rx2 = rx2, lx2
    lx = max(lx1, lx2)
    rx = min(rx1, rx2)
    if lx > rx:
        return 0
    return (rx - lx) // abs(b) + 1


def crt(remainders: Sequence[int], moduli: Sequence[int]) -> int:
    """Smallest non-negative ``z`` with ``z % moduli[i] == remainders[i]`` (coprime moduli)."""
    if len(remainders) != len(moduli):
        raise ValueError("remainders and moduli must have the same length")
    n = math.prod(moduli)
    z = 0
    for remainder, modulus in zip(remainders, moduli):
        part = n // modulus
        term = remainder * part % n
        term = term * pow(part, -1, modulus) % n
        z = (z + term) % n
    return z % n


def discrete_log(a: int, b: int, n: int) -> Optional[int]:
    """Return ``x`` with ``a**x % n == b % n`` for prime ``n`` (baby-step giant-step), or None."""
    if n < 2:
        raise ValueError("modulus must be at least 2")
    m = math.isqrt(n)
    if m * m < n:
        m += 1
    baby: dict[int, int] = {}
    power = 1
    for i in range(m):
        baby.setdefault(power, i)
        power = power * a % n
    step = pow(pow(a, n - 2, n), m, n)
    gamma = b % n
    for i in range(m):
        if gamma in baby:
            return i * m + baby[gamma]
        gamma = gamma * step % n
    return None
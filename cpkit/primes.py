"""Prime sieves, factorisation, divisors and Euler's totient."""

from __future__ import annotations

from typing import Sequence


class Sieve:
    """Sieve of Eratosthenes that records the smallest prime factor of each number."""

    def __init__(self, maximum: int) -> None:
        maximum = max(maximum, 1)
        self.maximum = maximum
        smallest = [0] * (maximum + 1)
        flags = [True] * (maximum + 1)
        flags[0] = flags[1] = False
        primes: list[int] = []
        for p in range(2, maximum + 1):
            if not flags[p]:
                continue
            smallest[p] = p
            primes.append(p)
            for i in range(p * p, maximum + 1, p):
                if flags[i]:
                    flags[i] = False
                    smallest[i] = p
        self.smallest_factor = smallest
        self.prime_flags = flags
        self.primes = primes

    def _check(self, n: int) -> None:
        if not 1 <= n <= self.maximum * self.maximum:
            raise ValueError(
                f"n must lie in [1, {self.maximum * self.maximum}] for this sieve"
            )

    def is_prime(self, n: int) -> bool:
        """Whether ``n`` is prime; ``n`` may be up to the square of the sieve limit."""
        self._check(n)
        if n <= self.maximum:
            return self.prime_flags[n]
        for p in self.primes:
            if p * p > n:
                break
            if n % p == 0:
                return False
        return True

    def factorize(self, n: int) -> list[tuple[int, int]]:
        """Prime factorisation of ``n`` as ``(prime, exponent)`` pairs in increasing order."""
        self._check(n)
        result: list[tuple[int, int]] = []
        if n <= self.maximum:
            while n != 1:
                p = self.smallest_factor[n]
                exponent = 0
                while n % p == 0:
                    n //= p
                    exponent += 1
                result.append((p, exponent))
            return result
        for p in self.primes:
            if p * p > n:
                break
            if n % p == 0:
                exponent = 0
                while n % p == 0:
                    n //= p
                    exponent += 1
                result.append((p, exponent))
        if n > 1:
            result.append((n, 1))
        return result


def generate_factors(
    prime_factors: Sequence[tuple[int, int]], ordered: bool = False
) -> list[int]:
    """All divisors built from a prime factorisation, sorted when ``ordered`` is true."""
    factors = [1]
    for p, exponent in prime_factors:
        block = len(factors)
        for _ in range(exponent):
            factors.extend(f * p for f in factors[-block:])
    if ordered:
        factors.sort()
    return factors


def simple_sieve(n: int) -> list[int]:
    """All primes up to and including ``n``."""
    if n < 2:
        return []
    flags = [True] * (n + 1)
    flags[0] = flags[1] = False
    p = 2
    while p * p <= n:
        if flags[p]:
            flags[p * p :: p] = [False] * len(range(p * p, n + 1, p))
        p += 1
    return [p for p, is_p in enumerate(flags) if is_p]


def smallest_prime_factors(limit: int) -> list[int]:
    """Smallest prime factor of every number up to ``limit``; entries 0 and 1 are 0."""
    if limit < 0:
        raise ValueError("limit must be non-negative")
    spf = [limit + 1] * (limit + 1)
    is_p = [True] * (limit + 1)
    for i in range(2, limit + 1):
        if not is_p[i]:
            continue
        spf[i] = min(spf[i], i)
        j = i
        while j * i <= limit:
            is_p[j * i] = False
            spf[j * i] = min(i, spf[j * i])
            j += 1
    for k in range(min(2, limit + 1)):
        spf[k] = 0
    return spf


def divisors(n: int) -> list[int]:
    """Divisors of ``n`` in pairs ``i, n // i`` for increasing ``i``, each listed once."""
    if n < 1:
        raise ValueError("n must be positive")
    result: list[int] = []
    i = 1
    while i * i <= n:
        if n % i == 0:
            result.append(i)
            if n // i != i:
                result.append(n // i)
        i += 1
    return result


def distinct_prime_factors(n: int) -> list[int]:
    """Distinct prime factors of ``n`` in increasing order."""
    if n < 1:
        raise ValueError("n must be positive")
    found: list[int] = []
    i = 2
    while i * i <= n:
        if n % i == 0:
            found.append(i)
            while n % i == 0:
                n //= i
        i += 1
    if n > 1:
        found.append(n)
    return found


def totient(n: int) -> int:
    """Euler's totient of ``n``; returns 0 for ``n == 1``."""
    if n < 1:
        raise ValueError("n must be positive")
    if n == 1:
        return 0
    result = n
    for p in distinct_prime_factors(n):
        result -= result // p
    return result


def totient_table(limit: int) -> list[int]:
    """``phi[i]`` for every ``i`` up to ``limit`` (``phi[0] == 0``, ``phi[1] == 1``)."""
    if limit < 0:
        raise ValueError("limit must be non-negative")
    phi = list(range(limit + 1))
    for i in range(2, limit + 1):
        if phi[i] == i:
            for j in range(i, limit + 1, i):
                phi[j] -= phi[j] // i
    return phi
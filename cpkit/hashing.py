"""Double polynomial rolling hash with O(1) substring queries."""

from __future__ import annotations

from typing import Sequence, Union

SEED = 500002961
SEED2 = 500003263
MOD = 10**9 + 7
MOD2 = 998244353


class PolyHash:
    """Prefix hashes of a sequence under two moduli.

    Positions are 1-based; element values should lie in ``[0, 5e8]``. A substring
    ``a_l .. a_r`` hashes to ``a_l*p^(r-l) + ... + a_r``.
    """

    def __init__(self, values: Union[str, Sequence[int]]) -> None:
        arr = [0] + ([ord(c) for c in values] if isinstance(values, str) else list(values))
        self.n = len(arr) - 1
        self._powers = [1]
        self._powers2 = [1]
        self._hashes = [arr[0]]
        self._hashes2 = [arr[0]]
        for value in arr[1:]:
            self._powers.append(self._powers[-1] * SEED % MOD)
            self._powers2.append(self._powers2[-1] * SEED2 % MOD2)
            self._hashes.append((self._hashes[-1] * SEED + value) % MOD)
            self._hashes2.append((self._hashes2[-1] * SEED2 + value) % MOD2)

    def __len__(self) -> int:
        return self.n

    def subhash(self, l: int, r: int) -> tuple[int, int]:
        """Pair of hashes of positions ``l`` through ``r`` inclusive."""
        if not 1 <= l <= r <= self.n:
            raise IndexError(f"range [{l}, {r}] outside [1, {self.n}]")
        length = r - l + 1
        first = (self._hashes[r] - self._hashes[l - 1] * self._powers[length]) % MOD
        second = (self._hashes2[r] - self._hashes2[l - 1] * self._powers2[length]) % MOD2
        return first, second
# cpkit

A collection of algorithms and data structures for competitive programming,
written as plain Python with no third-party dependencies. Requires Python 3.10
or later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `cpkit.arith` | `binpow`, `modpow`, `gcd`, `extended_gcd`, `lcm3`, `ceil_div`, `mod_inverse`, `mod_mul`, `mod_add`, `xor_upto`, `highest_exponent`, `derangements`, and 64-bit helpers (`popcount`, `has_single_bit`, `bit_floor`, `count_trailing_zeros`, `count_leading_zeros`, `lowest_set_bit`) |
| `cpkit.diophantine` | `find_any_solution`, `shift_solution`, `count_solutions` (solutions of `a*x + b*y == c` in a box), `crt`, `discrete_log` (baby-step giant-step, prime modulus) |
| `cpkit.modint` | `ModInt` (integer modulo a number, default 10**9 + 7), `Combinatorics` (factorials and binomials modulo a prime, grown on demand), `binomial_table` (Pascal's triangle), `small_binomial` (exact) |
| `cpkit.primes` | `Sieve` (smallest prime factors, `is_prime` and `factorize` up to the square of its limit), `generate_factors`, `simple_sieve`, `smallest_prime_factors`, `divisors`, `distinct_prime_factors`, `totient`, `totient_table` |
| `cpkit.matrix` | `Matrix` with multiplication and fast exponentiation modulo a number (default 10000) |
| `cpkit.xor_basis` | `XorBasis`, a linear basis over GF(2) supporting `add`, `in`, `len` and iteration |
| `cpkit.hashing` | `PolyHash`, a double polynomial hash with 1-based inclusive `subhash(l, r)` |
| `cpkit.arrays` | `PrefixSum2D`, `prefix_sums`, `max_subarray_sum`, `frequencies`, `last_true`, `first_true`, `tokenize`, `random_in_range` |
| `cpkit.fenwick` | `FenwickTree` (0-based, half-open ranges) and `OneBasedFenwick` (1-based, inclusive ranges, with `range_add`) |
| `cpkit.dsu` | `DSU`, disjoint set union with path compression and union by size |
| `cpkit.sparse_table` | `SparseTable` for idempotent range queries on a static sequence |
| `cpkit.segtree` | `SegmentTree` (generic, inclusive ranges), `RecursiveSegmentTree` (point assignment, default operation `max`), `RangeAddMinTree` (range add and range minimum over half-open ranges) |
| `cpkit.lazy_segtree` | `LazySegmentTree` with pluggable combine, apply and compose functions; the defaults give range assignment with range sums |
| `cpkit.phi_segtree` | `PhiSegmentTree` (replace a range by its totients, summarise a range) and its summary record `PhiNode` |
| `cpkit.splay` | `ImplicitSplayTree`, a sequence with insert, erase, reverse, range add and range minimum |
| `cpkit.trie` | `DigitTrie` over decimal digit sequences with `longest_prefix` |
| `cpkit.lca` | `MinIndexRMQ`, `EulerTourLCA`, `BinaryLiftingLCA` |
| `cpkit.graphs` | `read_edges`, `bfs_distances`, `connected_components`, `topological_order`, `has_directed_cycle`, `strongly_connected_components` (Kosaraju), `kruskal` |
| `cpkit.debug` | `format_value`, `dbg` for readable debug output (stderr by default) |

Errors are raised as exceptions: out-of-range positions give `IndexError`,
invalid arguments give `ValueError`, and inverting zero gives
`ZeroDivisionError`.

## Examples

Modular arithmetic and binomials:

```python
from cpkit.modint import ModInt, Combinatorics

MOD = 10**9 + 7
x = ModInt(3, MOD)
print(int(x ** 5))                 # 243
comb = Combinatorics(100, MOD)
print(comb.binom(10, 3))           # 120
```

Range queries with a segment tree:

```python
from cpkit.segtree import SegmentTree

tree = SegmentTree([5, 2, 8, 1], default=float("inf"), merge=min)
print(tree.query(0, 2))            # 2 (inclusive bounds)
tree.update(3, 10)
print(tree.query(1, 3))            # 2
```

Prefix sums with a Fenwick tree:

```python
from cpkit.fenwick import FenwickTree

fw = FenwickTree(5)
fw.add(2, 7)
print(fw.range_sum(0, 3))          # 7 (half-open range)
```

Lowest common ancestor:

```python
from cpkit.lca import EulerTourLCA

adj = [[1, 2], [0, 3], [0], [1]]
lca = EulerTourLCA(adj, 0)
print(lca.lca(3, 2), lca.dist(3, 2))   # 0 3
```

Prime factorisation:

```python
from cpkit.primes import Sieve, generate_factors

sieve = Sieve(1000)
factors = sieve.factorize(360)     # [(2, 3), (3, 2), (5, 1)]
print(generate_factors(factors, ordered=True))
```

Debug printing:

```python
import sys
from cpkit.debug import dbg

dbg("a, b", [1, 2], (3, "x"), file=sys.stdout)   # [a, b] = [{1,2}, {3,"x"}]
```

`dbg` writes the line to the given file, or to stderr when none is given, and
also returns it.

## What it does not do

cpkit is a library only. It installs no command-line program, and it has no
solution template that reads test cases from standard input; reading input and
printing answers is left to the code that uses it.
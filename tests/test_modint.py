import math

import pytest

from cpkit.modint import Combinatorics, ModInt, binomial_table, small_binomial

MOD = 10**9 + 7
MOD2 = 998244353


def test_construction_reduces_into_range():
    assert int(ModInt(-1)) == MOD - 1
    assert int(ModInt(MOD + 5)) == 5
    assert ModInt(MOD) == ModInt(0)


def test_bad_modulus():
    with pytest.raises(ValueError):
        ModInt(3, 0)


@pytest.mark.parametrize("a,b", [(3, 5), (MOD - 1, 2), (123456789, 987654321), (0, 7)])
def test_add_sub_round_trip(a, b):
    x, y = ModInt(a), ModInt(b)
    assert (x + y) - y == x
    assert int(x + y) == (a + b) % MOD
    assert -x + x == ModInt(0)


@pytest.mark.parametrize("a,b", [(3, 5), (MOD - 1, 2), (123456789, 987654321)])
def test_mul_div_round_trip(a, b):
    x, y = ModInt(a, MOD2), ModInt(b, MOD2)
    assert (x * y) / y == x
    assert int(x * y) == a * b % MOD2


def test_mixed_with_ints():
    x = ModInt(5, 7)
    assert x + 3 == ModInt(1, 7)
    assert 3 - x == ModInt(5, 7)
    assert 2 * x == ModInt(3, 7)
    assert (1 / x) * x == ModInt(1, 7)


@pytest.mark.parametrize("a", [1, 2, 12345, MOD - 1])
def test_inverse(a):
    x = ModInt(a)
    assert x * x.inverse() == ModInt(1)


def test_inverse_of_zero():
    with pytest.raises(ZeroDivisionError):
        ModInt(0).inverse()
    with pytest.raises(ZeroDivisionError):
        ModInt(4) / ModInt(0)


@pytest.mark.parametrize("a,e", [(2, 0), (2, 100), (7, 12345), (MOD - 2, 99)])
def test_pow_matches_builtin(a, e):
    assert int(ModInt(a) ** e) == pow(a, e, MOD)


def test_negative_exponent():
    with pytest.raises(ValueError):
        ModInt(3) ** -1


def test_mixed_moduli():
    with pytest.raises(ValueError):
        ModInt(1, 7) + ModInt(1, 11)


def test_ordering_and_str():
    assert ModInt(2) < ModInt(3)
    assert ModInt(3) >= ModInt(3)
    assert str(ModInt(-1, 10)) == str(9 % 10)


@pytest.mark.parametrize("n,r", [(10, 3), (50, 25), (100, 0), (100, 100), (1000, 500)])
def test_binom_matches_comb(n, r):
    comb = Combinatorics(10)
    assert comb.binom(n, r) == math.comb(n, r) % MOD


def test_binom_out_of_range():
    comb = Combinatorics(10)
    assert comb.binom(3, 5) == 0
    assert comb.binom(5, -1) == 0


@pytest.mark.parametrize("n", [0, 1, 5, 37, 200])
def test_factorial_and_inverse_factorial(n):
    comb = Combinatorics(mod=MOD2)
    assert comb.factorial(n) == math.factorial(n) % MOD2
    assert comb.factorial(n) * comb.inverse_factorial(n) % MOD2 == 1


@pytest.mark.parametrize("n", [1, 2, 3, 99, 500])
def test_inverse_table(n):
    comb = Combinatorics(4)
    assert comb.inverse(n) * n % MOD == 1


def test_inverse_zero_and_negative():
    comb = Combinatorics(4)
    with pytest.raises(ZeroDivisionError):
        comb.inverse(0)
    with pytest.raises(ValueError):
        comb.factorial(-1)


def test_binomial_table_matches_comb():
    table = binomial_table(12, 12)
    for i, row in enumerate(table):
        for j, value in enumerate(row):
            assert value == math.comb(i, j)


def test_binomial_table_shape_and_row_sums():
    table = binomial_table(10, 4)
    assert len(table) == 11
    assert all(len(row) == 5 for row in table)
    assert sum(binomial_table(8, 8)[8]) == 2**8


@pytest.mark.parametrize("n,r", [(10, 3), (20, 17), (60, 30), (5, 0), (5, 5), (3, 5), (4, -1)])
def test_small_binomial(n, r):
    assert small_binomial(n, r) == (math.comb(n, r) if r >= 0 else 0)
import pytest

from cpkit.matrix import Matrix


def test_fibonacci_power():
    fib = Matrix([[1, 1], [1, 0]])
    assert (fib**10).rows == [[89, 55], [55, 34]]


def test_entries_reduced_by_default_modulus():
    assert Matrix([[12345]]).rows == [[2345]]


def test_power_zero_is_identity():
    m = Matrix([[3, 4], [5, 6]])
    assert m**0 == Matrix.identity(2)


def test_identity_is_neutral():
    m = Matrix([[1, 2, 3], [4, 5, 6], [7, 8, 9]], mod=97)
    ident = Matrix.identity(3, 97)
    assert ident * m == m
    assert m * ident == m


def test_power_matches_repeated_multiplication():
    m = Matrix([[2, 7], [9, 3]], mod=101)
    expected = Matrix.identity(2, 101)
    for k in range(1, 13):
        expected = expected * m
        assert m**k == expected


def test_rectangular_product_shape():
    a = Matrix([[1, 2, 3]])
    b = Matrix([[1], [2], [3]])
    assert (a * b).shape == (1, 1)
    assert (b * a).shape == (3, 3)


def test_mismatched_product_raises():
    with pytest.raises(ValueError):
        Matrix([[1, 2]]) * Matrix([[1, 2]])


def test_non_square_power_raises():
    with pytest.raises(ValueError):
        Matrix([[1, 2]]) ** 2


def test_negative_power_raises():
    with pytest.raises(ValueError):
        Matrix([[1]]) ** -1


def test_ragged_rows_raise():
    with pytest.raises(ValueError):
        Matrix([[1, 2], [3]])


def test_str_layout():
    assert str(Matrix([[1, 2], [3, 4]])) == "1 2\n3 4"
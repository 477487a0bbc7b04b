import math

import pytest

from contestkit.numtheory import exponents_divisible_by_count, factorize


def _is_prime(n):
    return n >= 2 and all(n % d for d in range(2, math.isqrt(n) + 1))


@pytest.mark.parametrize("value", [2, 12, 97, 360, 1024, 999983, 123456])
def test_factorize_product_round_trip(value):
    factors = factorize(value)
    assert math.prod(p**e for p, e in factors.items()) == value
    assert all(_is_prime(p) for p in factors)
    assert list(factors) == sorted(factors)


def test_factorize_one_is_empty():
    assert factorize(1) == {}


def test_factorize_prime_is_itself():
    assert factorize(97) == {97: 1}


def test_factorize_power_of_two():
    assert factorize(1024) == {2: 10}


def test_factorize_rejects_non_positive():
    with pytest.raises(ValueError):
        factorize(0)
    with pytest.raises(ValueError):
        factorize(-6)


def test_divisible_when_exponents_spread_evenly():
    assert exponents_divisible_by_count([100, 2, 50, 10, 1]) is True
    assert exponents_divisible_by_count([8, 2, 4]) is True


def test_not_divisible_when_a_prime_is_left_over():
    assert exponents_divisible_by_count([30, 5]) is False


def test_equal_values_always_divisible():
    assert exponents_divisible_by_count([360] * 7) is True


def test_single_value_always_divisible():
    assert exponents_divisible_by_count([999983]) is True


def test_empty_input_is_divisible():
    assert exponents_divisible_by_count([]) is True
"""Prime factorisation and checks built on prime exponents."""

from collections import Counter
from collections.abc import Iterable


def factorize(value: int) -> dict[int, int]:
    """Return the prime factorisation of ``value`` as ``{prime: exponent}``.

    Primes appear in increasing order. ``1`` has an empty factorisation.
    """
    if value < 1:
        raise ValueError(f"cannot factorize non-positive value {value}")
    factors: dict[int, int] = {}
    divisor = 2
    while divisor * divisor <= value:
        while value % divisor == 0:
            factors[divisor] = factors.get(divisor, 0) + 1
            value //= divisor
        divisor += 1
    if value != 1:
        factors[value] = factors.get(value, 0) + 1
    return factors


def exponents_divisible_by_count(values: Iterable[int]) -> bool:
    """Tell whether every prime's total exponent over ``values`` is a multiple of their count.

    This holds exactly when the prime factors can be redistributed so that
    all values become equal.
    """
    items = list(values)
    totals: Counter[int] = Counter()
    for value in items:
        totals.update(factorize(value))
    return all(count % len(items) == 0 for count in totals.values())
"""Counting arrangements and digit strings."""

from collections import Counter
from collections.abc import Iterable
from functools import lru_cache
from itertools import pairwise

JURY_MODULUS = 998_244_353


def jury_meeting_orders(nerves: Iterable[int]) -> int:
    """Count the speaking orders of the jury members in which nobody speaks twice in a row.

    Each member ``i`` has ``nerves[i]`` tasks. The answer is taken modulo
    998244353. It is ``0`` whenever the distinct task counts leave a gap
    greater than one. Otherwise it is ``n! - n!/d``, where ``d`` is the
    number of distinct task counts.
    """
    items = list(nerves)
    if not items:
        raise ValueError("at least one jury member is required")
    if any(value < 1 for value in items):
        raise ValueError("task counts must be positive")

    counts = Counter(items)
    if len(counts) == 1:
        (value, times), = counts.items()
        if value > 1 and times == 1:
            return 0

    if any(b - a > 1 for a, b in pairwise(sorted(counts))):
        return 0

    total = 1
    for factor in range(1, len(items) + 1):
        total = total * factor % JURY_MODULUS
    share = total * pow(len(counts), JURY_MODULUS - 2, JURY_MODULUS) % JURY_MODULUS
    return (total - share) % JURY_MODULUS


def digit_sum_multiples(n: int, x: int) -> int:
    """Count digit strings as long as ``n`` whose digit sum is a multiple of ``x``.

    The first digit ranges over ``0`` to the first digit of ``n``. Every later
    digit is capped by the matching digit of ``n`` when the digit chosen just
    before it equals the digit of ``n`` just before it, and ranges over
    ``0`` to ``9`` otherwise. For numbers below 100 this counts exactly the
    values ``0..n`` whose digit sum divides by ``x``.
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if x < 1:
        raise ValueError(f"x must be positive, got {x}")
    digits = [int(c) for c in str(n)]
    length = len(digits)

    @lru_cache(maxsize=None)
    def count(index: int, previous: int, residue: int) -> int:
        if index == length:
            return 1 if residue == 0 else 0
        top = digits[index] if previous == digits[index - 1] else 9
        return sum(count(index + 1, d, (residue + d) % x) for d in range(top + 1))

    return sum(count(1, d, d % x) for d in range(digits[0] + 1))
"""Checks and maxima over integer sequences."""

from collections.abc import Iterable, Sequence
from itertools import pairwise
from math import gcd


def _adjacent_gcds(values: Sequence[int]) -> list[int]:
    return [gcd(a, b) for a, b in pairwise(values)]


def _non_decreasing(values: Sequence[int]) -> bool:
    return all(a <= b for a, b in pairwise(values))


def gcd_sequence_fixable(values: Iterable[int]) -> bool:
    """Tell whether removing exactly one element makes the adjacent-GCD sequence non-decreasing."""
    items = list(values)
    if len(items) <= 3:
        return True
    gcds = _adjacent_gcds(items)
    drop = next(
        (i for i in range(1, len(gcds)) if gcds[i] < gcds[i - 1]),
        None,
    )
    if drop is None:
        return True
    return any(
        _non_decreasing(_adjacent_gcds(items[:index] + items[index + 1:]))
        for index in (drop - 1, drop, drop + 1)
    )


def max_alternating_parity_sum(values: Iterable[int]) -> int:
    """Return the largest sum of a non-empty subarray whose neighbours alternate in parity."""
    items = list(values)
    if not items:
        raise ValueError("sequence must not be empty")
    best = items[0]
    running = 0
    previous = None
    for value in items:
        running += value
        if previous is not None and (value & 1) == (previous & 1):
            running = value
        best = max(best, running)
        if running < 0:
            running = 0
        previous = value
    return best
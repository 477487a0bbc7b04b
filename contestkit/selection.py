"""Choosing elements to keep or buy from a list of values."""

from bisect import bisect_left
from collections.abc import Iterable


def narrowest_spread(values: Iterable[int], k: int) -> int:
    """Return the smallest max-minus-min left after removing exactly ``k`` values."""
    items = sorted(values)
    if not 0 <= k < len(items):
        raise ValueError(f"k must be in 0..{len(items) - 1}, got {k}")
    width = len(items) - k
    return min(items[start + width - 1] - items[start] for start in range(k + 1))


def souvenir_cost(prices: Iterable[int], needs: Iterable[int]) -> int | None:
    """Return the total paid when each need, in order, buys the cheapest box at least that large.

    ``None`` is returned when some need cannot be met or nothing is paid.
    """
    available = sorted(prices)
    total = 0
    for need in needs:
        position = bisect_left(available, need)
        if position == len(available):
            return None
        total += available.pop(position)
    if total == 0:
        return None
    return total
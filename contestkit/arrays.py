"""Budget and grouping problems over plain integer arrays."""

from collections import defaultdict
from collections.abc import Iterable, Sequence


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def dolce_vita_packs(prices: Iterable[int], budget: int) -> int:
    """Return the number of sugar packs bought over the days for the given budget.

    Each day every price rises by one. The count covers the whole days on
    which the full set stays affordable, then two further passes over the
    sorted prices at the next two day offsets, each pass stopping at the
    first pack that overdraws the running budget.
    """
    items = sorted(prices)
    if not items:
        raise ValueError("at least one price is required")
    count = len(items)
    spare = budget - sum(items)
    days = _trunc_div(spare, count)

    total = count * days * (days + 1) // 2 if spare >= 0 else 0
    for increase in (days + 1, days + 2):
        for price in items:
            budget -= increase + price
            if budget < 0:
                break
            total += 1
    return total


def move_it_cost(boxes: Sequence[int], weights: Sequence[int]) -> int:
    """Return the least total weight moved so that every box holds at most one item.

    Item ``i`` sits in box ``boxes[i]`` and weighs ``weights[i]``; in each box
    the heaviest item stays and the rest are moved.
    """
    if len(boxes) != len(weights):
        raise ValueError("boxes and weights must have the same length")
    grouped: defaultdict[int, list[int]] = defaultdict(list)
    for box, weight in zip(boxes, weights):
        grouped[box].append(weight)
    return sum(sum(group) - max(group) for group in grouped.values())
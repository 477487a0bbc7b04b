"""Counting prefixes that hold an element equal to the sum of the others."""

from collections.abc import Iterable


def good_prefix_count(values: Iterable[int]) -> int:
    """Count prefixes whose sum is twice their largest element.

    Such a prefix has an element equal to the sum of all the others; the
    one-element prefix ``[0]`` counts as good.
    """
    count = 0
    total = 0
    largest: int | None = None
    for value in values:
        total += value
        largest = value if largest is None else max(largest, value)
        if total == 2 * largest:
            count += 1
    return count
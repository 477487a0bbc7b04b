"""Rating assignment and array-restoration checks."""

from collections import Counter
from collections.abc import Iterable, Sequence


def two_movies_rating(first: Sequence[int], second: Sequence[int]) -> int:
    """Return the best achievable minimum of the two movies' ratings.

    ``first[i]`` and ``second[i]`` are viewer ``i``'s attitudes (-1, 0 or 1)
    to each movie; each viewer reviews exactly one of them.
    """
    if len(first) != len(second):
        raise ValueError("both attitude lists must have the same length")
    x = y = 0
    negative = positive = 0
    for a, b in zip(first, second):
        if a == b:
            if a == -1:
                negative += 1
            elif a == 1:
                positive += 1
        elif a > b:
            x += a
        else:
            y += b

    for _ in range(negative):
        if x > y:
            x -= 1
        else:
            y -= 1
    for _ in range(positive):
        if y > x:
            x += 1
        else:
            y += 1
    return min(x, y)


def sofia_restorable(
    original: Sequence[int],
    found: Sequence[int],
    modifications: Iterable[int],
) -> bool:
    """Tell whether assignments of the given values, in order, can turn ``original`` into ``found``."""
    values = list(modifications)
    if not values:
        raise ValueError("at least one modification value is required")
    if len(original) != len(found):
        raise ValueError("original and found arrays must have the same length")
    if values[-1] not in set(found):
        return False
    available = Counter(values)
    for before, after in zip(original, found):
        if before == after:
            continue
        if available[after] == 0:
            return False
        available[after] -= 1
    return True
"""Searching for the fewest turns or stands that reach a goal."""

from collections.abc import Iterable, Sequence
from itertools import combinations

_TURN_LIMIT = 10**12


def _boss_defeated(turns: int, damage: Sequence[int], cooldown: Sequence[int], health: int) -> bool:
    dealt = 0
    for hit, wait in zip(damage, cooldown):
        if dealt >= health:
            break
        uses = (turns - 1) // wait + 1
        if uses >= health:
            return True
        dealt += uses * hit
    return dealt >= health


def final_boss_turns(health: int, damage: Sequence[int], cooldown: Sequence[int]) -> int | None:
    """Return the number of turns found to beat a boss with ``health`` hit points.

    Attack ``i`` deals ``damage[i]`` and can be used again ``cooldown[i]``
    turns after its last use; every attack is ready on the first turn. The
    turn count is searched by bisection over ``1`` to ``10**12``; ``None``
    is returned when no tested turn count is enough.
    """
    if len(damage) != len(cooldown):
        raise ValueError("damage and cooldown lists must have the same length")
    if not damage:
        raise ValueError("at least one attack is required")
    if any(wait < 1 for wait in cooldown):
        raise ValueError("cooldowns must be positive")

    low, high = 1, _TURN_LIMIT
    found: int | None = None
    while low < high:
        middle = low + (high - low) // 2
        if _boss_defeated(middle, damage, cooldown, health):
            found = middle
            high = middle - 1
        else:
            low = middle + 1
    return found


def min_popcorn_stands(stands: Iterable[str], flavours: int) -> int | None:
    """Return the fewest stands to visit so that every flavour is on sale at one of them.

    Each stand is a string of ``flavours`` characters, ``'o'`` where the
    flavour is sold and ``'x'`` where it is not. ``None`` means the stands
    together do not sell every flavour.
    """
    if flavours < 1:
        raise ValueError(f"flavour count must be positive, got {flavours}")
    masks: list[int] = []
    for stand in stands:
        if len(stand) != flavours:
            raise ValueError(f"stand {stand!r} does not list {flavours} flavours")
        if not set(stand) <= {"o", "x"}:
            raise ValueError(f"stand {stand!r} may hold only 'o' and 'x'")
        masks.append(sum(1 << i for i, mark in enumerate(stand) if mark == "o"))

    full = (1 << flavours) - 1
    for size in range(len(masks) + 1):
        for chosen in combinations(masks, size):
            covered = 0
            for mask in chosen:
                covered |= mask
            if covered == full:
                return size
    return None
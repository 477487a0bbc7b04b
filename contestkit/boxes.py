"""Placing a secret box inside a larger box."""


def secret_box_max(x: int, y: int, z: int, k: int) -> int:
    """Return the most positions a box of volume ``k`` can take inside an ``x`` by ``y`` by ``z`` box.

    The secret box has positive integer sides and sits at integer
    coordinates, parallel to the axes. ``0`` means it never fits.
    """
    if min(x, y, z) < 1:
        raise ValueError("box sides must be positive")
    if k < 1:
        raise ValueError(f"volume must be positive, got {k}")
    best = 0
    for i in range(1, x + 1):
        for j in range(1, y + 1):
            base = i * j
            if k % base:
                continue
            depth = k // base
            if depth <= z:
                best = max(best, (x - i + 1) * (y - j + 1) * (z - depth + 1))
    return best
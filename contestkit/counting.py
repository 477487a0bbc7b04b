"""Counting problems answered modulo 1e9+7."""

MODULUS = 1_000_000_007


def d_function_count(low: int, high: int, k: int) -> int:
    """Count ``n`` with ``10**low <= n < 10**high`` and ``D(k*n) == k*D(n)``, modulo 1e9+7.

    ``D`` is the decimal digit sum. The property holds exactly when every
    digit ``d`` of ``n`` has ``d * k < 10``.
    """
    if k < 1:
        raise ValueError(f"k must be positive, got {k}")
    if low < 0 or high < low:
        raise ValueError(f"need 0 <= low <= high, got {low} and {high}")
    if k >= 10:
        return 0
    choices = 9 // k + 1
    return (pow(choices, high, MODULUS) - pow(choices, low, MODULUS)) % MODULUS


def two_sets_ways(n: int) -> int:
    """Count subsets of ``1..n-1`` with no two consecutive numbers that, with ``n``, make half the total of ``1..n``.

    The count is taken modulo 1e9+7; an odd total gives ``0``.
    """
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    total = n * (n + 1) // 2
    if total % 2:
        return 0
    target = total // 2 - n
    base = [0] * (target + 1)
    base[0] = 1
    before_previous, previous = base, base
    for value in range(1, n):
        current = [
            (previous[s] + (before_previous[s - value] if s >= value else 0)) % MODULUS
            for s in range(target + 1)
        ]
        before_previous, previous = previous, current
    return previous[target] % MODULUS
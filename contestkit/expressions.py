"""Smallest value of a digit string with arithmetic operators inserted."""

_DIGITS = frozenset("0123456789")


def _total_with_pair(digits: str, value: int, start: int) -> int:
    return value + sum(
        int(digit)
        for index, digit in enumerate(digits)
        if index not in (start, start + 1) and digit != "1"
    )


def min_expression_value(digits: str) -> int:
    """Return the minimum value reachable by placing ``len(digits) - 2`` operators.

    Each operator is ``+`` or ``*`` and goes between two adjacent digits, so
    exactly one pair of neighbouring digits stays joined as a two-digit number.
    """
    if not digits or not set(digits) <= _DIGITS:
        raise ValueError(f"expected a non-empty string of digits, got {digits!r}")
    length = len(digits)
    if length <= 2:
        return int(digits)

    if "0" in digits:
        if length == 3 and digits[1] == "0":
            head, tail = int(digits[:2]), int(digits[2])
            first, rest = int(digits[0]), int(digits[1:])
            return min(head * tail, head + tail, first * rest, first + rest)
        return 0

    if digits.count("1") == length:
        return 11

    pairs = [
        (int(digits[i:i + 2]), i)
        for i in range(length - 1)
        if digits[i + 1] != "1"
    ]
    elevens = [i for i in range(length - 1) if digits[i:i + 2] == "11"]
    if elevens:
        pairs.append((11, elevens[-1]))
    pairs.sort()
    return min(_total_with_pair(digits, value, start) for value, start in pairs[:2])
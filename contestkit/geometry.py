"""Locating the centre of a Manhattan circle drawn on a grid."""

from collections.abc import Iterable


def manhattan_circle_centre(grid: Iterable[str]) -> tuple[int, int] | None:
    """Return the 1-based ``(row, column)`` centre of the '#' circle in ``grid``.

    The centre lies in the first row holding the most '#' cells, at the
    middle '#' of that row. ``None`` is returned when the grid holds no '#'.
    """
    rows = [str(row) for row in grid]
    if not rows:
        raise ValueError("grid must have at least one row")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("grid rows must all have the same length")

    best_row, best_count = 0, 0
    for index, row in enumerate(rows):
        count = row.count("#")
        if count > best_count:
            best_row, best_count = index, count
    if best_count == 0:
        return None

    wanted = best_count // 2 + 1
    seen = 0
    for column, cell in enumerate(rows[best_row]):
        if cell == "#":
            seen += 1
            if seen == wanted:
                return best_row + 1, column + 1
    return None
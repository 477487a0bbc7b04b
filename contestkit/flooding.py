"""Year-by-year land area as the sea level rises over a height grid."""

import heapq
from collections.abc import Iterable, Sequence

_STEPS = ((-1, 0), (0, 1), (1, 0), (0, -1))


def _parse_grid(grid: Iterable[Sequence[int]]) -> list[list[int]]:
    rows = [list(row) for row in grid]
    if not rows or not rows[0]:
        raise ValueError("grid must have at least one row and one column")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("grid rows must all have the same length")
    return rows


def _flood(start: tuple[int, int], visited: list[list[bool]]) -> int:
    """Mark cells reached from ``start`` through unvisited cells and count the marks."""
    height, width = len(visited), len(visited[0])
    row, col = start
    visited[row][col] = True
    marked = 1
    stack = [start]
    while stack:
        r, c = stack.pop()
        for dr, dc in _STEPS:
            nr, nc = r + dr, c + dc
            if 0 <= nr < height and 0 <= nc < width and not visited[nr][nc]:
                visited[nr][nc] = True
                marked += 1
                stack.append((nr, nc))
    return marked


def sinking_land(grid: Iterable[Sequence[int]], years: int) -> list[int]:
    """Return the land area recorded for each year while cells sink.

    Only cells no higher than ``years`` ever sink. Whenever the lowest
    remaining such cell reaches zero, every cell reaching zero that year
    starts a flood over not yet flooded cells, and the flooded count is
    subtracted from the area. Recording stops early once nothing is left to
    sink or the years run out.
    """
    if years < 0:
        raise ValueError(f"years must be non-negative, got {years}")
    heights = _parse_grid(grid)
    height, width = len(heights), len(heights[0])
    visited = [[False] * width for _ in range(height)]
    area = height * width

    queue = [
        (value, (r, c))
        for r, row in enumerate(heights)
        for c, value in enumerate(row)
        if value <= years
    ]
    heapq.heapify(queue)

    periods: list[tuple[int, int]] = []
    remaining = years
    while remaining > 0 and queue:
        drop = queue[0][0]
        if remaining < drop:
            periods.append((remaining, area))
            break
        remaining -= drop
        survivors: list[tuple[int, tuple[int, int]]] = []
        sunk: list[tuple[int, int]] = []
        while queue:
            _, (r, c) = heapq.heappop(queue)
            heights[r][c] -= drop
            if heights[r][c] == 0:
                sunk.append((r, c))
            else:
                heapq.heappush(survivors, (heights[r][c], (r, c)))
        area -= sum(_flood(cell, visited) for cell in sunk)
        periods.append((drop, area))
        queue = survivors

    return [value for length, value in periods for _ in range(length)]
"""Disjoint sets and the largest '#' component after filling one grid line."""

from collections.abc import Iterable


class DisjointSet:
    """Union-find over the nodes ``0`` to ``n`` inclusive."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"node count must be non-negative, got {n}")
        self._parent = list(range(n + 1))
        self._rank = [0] * (n + 1)
        self._size = [1] * (n + 1)

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, node: int) -> None:
        if not 0 <= node < len(self._parent):
            raise IndexError(f"node {node} is out of range")

    def find(self, node: int) -> int:
        """Return the representative of the set holding ``node``."""
        self._check(node)
        root = node
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[node] != root:
            following = self._parent[node]
            self._parent[node] = root
            node = following
        return root

    def union_by_rank(self, u: int, v: int) -> bool:
        """Merge the sets of ``u`` and ``v`` by rank; return whether they were apart."""
        root_u, root_v = self.find(u), self.find(v)
        if root_u == root_v:
            return False
        if self._rank[root_u] < self._rank[root_v]:
            root_u, root_v = root_v, root_u
        elif self._rank[root_u] == self._rank[root_v]:
            self._rank[root_u] += 1
        self._parent[root_v] = root_u
        self._size[root_u] += self._size[root_v]
        return True

    def union_by_size(self, u: int, v: int) -> bool:
        """Merge the sets of ``u`` and ``v`` by size; return whether they were apart."""
        root_u, root_v = self.find(u), self.find(v)
        if root_u == root_v:
            return False
        if self._size[root_u] < self._size[root_v]:
            root_u, root_v = root_v, root_u
        self._parent[root_v] = root_u
        self._size[root_u] += self._size[root_v]
        return True

    def size_of(self, node: int) -> int:
        """Return the number of nodes in the set holding ``node``."""
        return self._size[self.find(node)]


def _parse_grid(grid: Iterable[str]) -> list[str]:
    rows = [str(row) for row in grid]
    if not rows or not rows[0]:
        raise ValueError("grid must have at least one row and one column")
    width = len(rows[0])
    for row in rows:
        if len(row) != width:
            raise ValueError("grid rows must all have the same length")
        if not set(row) <= {"#", "."}:
            raise ValueError(f"grid rows may hold only '#' and '.', got {row!r}")
    return rows


def largest_component_after_fill(grid: Iterable[str]) -> int:
    """Return the largest '#' component reachable by turning one whole row or column into '#'."""
    rows = _parse_grid(grid)
    height, width = len(rows), len(rows[0])

    def index(r: int, c: int) -> int:
        return r * width + c

    sets = DisjointSet(height * width)
    for r, row in enumerate(rows):
        for c, cell in enumerate(row):
            if cell != "#":
                continue
            if r + 1 < height and rows[r + 1][c] == "#":
                sets.union_by_size(index(r, c), index(r + 1, c))
            if c + 1 < width and row[c + 1] == "#":
                sets.union_by_size(index(r, c), index(r, c + 1))

    def total(cells: Iterable[tuple[int, int]]) -> int:
        roots = {sets.find(index(r, c)) for r, c in cells if rows[r][c] == "#"}
        return sum(sets.size_of(root) for root in roots)

    best = 0
    for r in range(height):
        touched = (
            (rr, c)
            for rr in (r - 1, r, r + 1)
            if 0 <= rr < height
            for c in range(width)
        )
        filled = rows[r].count("#")
        best = max(best, total(touched) - filled + width)
    for c in range(width):
        touched = (
            (r, cc)
            for cc in (c - 1, c, c + 1)
            if 0 <= cc < width
            for r in range(height)
        )
        filled = sum(row[c] == "#" for row in rows)
        best = max(best, total(touched) - filled + height)
    return best
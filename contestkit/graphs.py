"""Shortest paths where both vertices and edges carry weights."""

import heapq
from collections.abc import Iterable, Sequence


def shortest_paths_with_weights(
    weights: Sequence[int],
    edges: Iterable[tuple[int, int, int]],
) -> list[int | None]:
    """Return the cheapest path cost from vertex 1 to each of vertices 2..n.

    Vertices are numbered from 1 and vertex ``i`` weighs ``weights[i - 1]``.
    Each edge ``(a, b, cost)`` is undirected. A path costs the sum of the
    weights of every vertex and edge on it. Unreachable vertices give ``None``.
    """
    count = len(weights)
    if count == 0:
        raise ValueError("graph must have at least one vertex")
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(count + 1)]
    for a, b, cost in edges:
        for vertex in (a, b):
            if not 1 <= vertex <= count:
                raise ValueError(f"edge endpoint {vertex} is not a vertex")
        adjacency[a].append((b, cost))
        adjacency[b].append((a, cost))

    dist: list[int | None] = [None] * (count + 1)
    dist[1] = weights[0]
    queue = [(weights[0], 1)]
    while queue:
        current, vertex = heapq.heappop(queue)
        if dist[vertex] is not None and dist[vertex] < current:
            continue
        for child, cost in adjacency[vertex]:
            candidate = current + cost + weights[child - 1]
            known = dist[child]
            if known is None or candidate < known:
                dist[child] = candidate
                heapq.heappush(queue, (candidate, child))
    return dist[2:]
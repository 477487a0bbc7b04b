"""Minimum spanning tree weight by Prim's algorithm."""

import heapq
from collections.abc import Iterable


def spanning_tree_weight(vertex_count: int, edges: Iterable[tuple[int, int, int]]) -> int:
    """Return the weight of the minimum spanning tree of the part reachable from vertex 0.

    Vertices are numbered ``0`` to ``vertex_count - 1`` and each edge
    ``(u, v, weight)`` is undirected.
    """
    if vertex_count < 1:
        raise ValueError(f"graph must have at least one vertex, got {vertex_count}")
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(vertex_count)]
    for u, v, weight in edges:
        for vertex in (u, v):
            if not 0 <= vertex < vertex_count:
                raise ValueError(f"edge endpoint {vertex} is not a vertex")
        adjacency[u].append((v, weight))
        adjacency[v].append((u, weight))

    visited = [False] * vertex_count
    total = 0
    queue = [(0, 0)]
    while queue:
        weight, vertex = heapq.heappop(queue)
        if visited[vertex]:
            continue
        total += weight
        visited[vertex] = True
        for neighbour, cost in adjacency[vertex]:
            if not visited[neighbour]:
                heapq.heappush(queue, (cost, neighbour))
    return total
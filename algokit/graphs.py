"""Graph traversal, shortest paths and cycle detection."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Sequence


def build_adjacency(size: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Build undirected adjacency lists for vertices ``0`` to ``size``.

    Each edge is recorded in both directions, in the order given.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    adjacency: list[list[int]] = [[] for _ in range(size + 1)]
    for x, y in edges:
        for vertex in (x, y):
            if not 0 <= vertex <= size:
                raise ValueError(f"vertex {vertex} out of range 0..{size}")
        adjacency[x].append(y)
        adjacency[y].append(x)
    return adjacency


def bfs(size: int, adjacency: Sequence[Sequence[int]]) -> list[int]:
    """Breadth-first order of vertices ``0`` to ``size - 1``, covering every component."""
    visited = [False] * len(adjacency)
    order: list[int] = []
    for start in range(size):
        if visited[start]:
            continue
        visited[start] = True
        queue = deque([start])
        while queue:
            vertex = queue.popleft()
            order.append(vertex)
            for neighbour in adjacency[vertex]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    queue.append(neighbour)
    return order


def dijkstra(graph: Sequence[Sequence[float]], source: int) -> list[float]:
    """Shortest distances from ``source`` in an adjacency-matrix graph.

    A zero entry means no edge. Unreachable vertices get ``math.inf``.
    """
    count = len(graph)
    if any(len(row) != count for row in graph):
        raise ValueError("graph must be a square matrix")
    if not 0 <= source < count:
        raise ValueError(f"source {source} out of range")
    dist = [math.inf] * count
    done = [False] * count
    dist[source] = 0
    for _ in range(count - 1):
        u = -1
        best = math.inf
        for v, d in enumerate(dist):
            if not done[v] and d <= best:
                best, u = d, v
        done[u] = True
        if dist[u] == math.inf:
            continue
        for v, weight in enumerate(graph[u]):
            if not done[v] and weight and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
    return dist


def has_cycle(vertex_count: int, adjacency: Sequence[Sequence[int]]) -> bool:
    """Whether the undirected graph on vertices ``0`` to ``vertex_count - 1`` has a cycle."""
    visited = [False] * max(len(adjacency), vertex_count + 1)
    for start in range(vertex_count):
        if visited[start]:
            continue
        visited[start] = True
        stack = [(start, -1, iter(adjacency[start]))]
        while stack:
            node, parent, neighbours = stack[-1]
            for neighbour in neighbours:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append((neighbour, node, iter(adjacency[neighbour])))
                    break
                if neighbour != parent:
                    return True
            else:
                stack.pop()
    return False
"""Single-source and all-pairs shortest paths on weighted graphs."""

from __future__ import annotations

import heapq
import math
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

WeightedEdge = Tuple[int, int, int]


class NegativeCycleError(ValueError):
    """Raised when a graph holds a cycle of negative total weight."""


@dataclass(frozen=True)
class ShortestPath:
    """The route to one vertex and its length; ``distance`` is None if unreachable.

    An unreachable vertex's path holds only the vertex itself.
    """

    vertex: int
    path: Tuple[int, ...]
    distance: Optional[int]

    def __str__(self) -> str:
        route = " ".join(str(step) for step in self.path)
        length = "INF" if self.distance is None else str(self.distance)
        return f"{self.vertex} : {route} : {length}"


def _check_vertex(vertex: int, vertex_count: int) -> None:
    if not 0 <= vertex < vertex_count:
        raise ValueError(f"vertex {vertex} is outside 0..{vertex_count - 1}")


def _weighted_adjacency(
    vertex_count: int, edges: Iterable[WeightedEdge], directed: bool
) -> List[List[Tuple[int, int]]]:
    if vertex_count < 0:
        raise ValueError("vertex count must be non-negative")
    adjacency: List[List[Tuple[int, int]]] = [[] for _ in range(vertex_count)]
    for u, v, weight in edges:
        _check_vertex(u, vertex_count)
        _check_vertex(v, vertex_count)
        adjacency[u].append((v, weight))
        if not directed:
            adjacency[v].append((u, weight))
    return adjacency


def _square(matrix: Sequence[Sequence]) -> List[list]:
    rows = [list(row) for row in matrix]
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("matrix must be square")
    return rows


def _paths(
    source: int, distances: List[Optional[int]], parents: List[Optional[int]]
) -> List[ShortestPath]:
    results = []
    for vertex, distance in enumerate(distances):
        if vertex == source:
            continue
        route = []
        step: Optional[int] = vertex
        while step is not None:
            route.append(step)
            step = parents[step]
        results.append(ShortestPath(vertex, tuple(reversed(route)), distance))
    return results


def bellman_ford(
    vertex_count: int, edges: Iterable[WeightedEdge], source: int
) -> List[ShortestPath]:
    """Shortest paths from ``source`` over directed edges ``(u, v, weight)``.

    Returns one entry per vertex other than ``source``, in vertex order.
    Raises NegativeCycleError when a reachable negative cycle exists.
    """
    adjacency = _weighted_adjacency(vertex_count, edges, directed=True)
    _check_vertex(source, vertex_count)
    distances: List[Optional[int]] = [None] * vertex_count
    parents: List[Optional[int]] = [None] * vertex_count
    distances[source] = 0

    for _ in range(vertex_count - 1):
        for u, outgoing in enumerate(adjacency):
            if distances[u] is None:
                continue
            for v, weight in outgoing:
                candidate = distances[u] + weight
                if distances[v] is None or candidate < distances[v]:
                    distances[v] = candidate
                    parents[v] = u

    for u, outgoing in enumerate(adjacency):
        if distances[u] is None:
            continue
        for v, weight in outgoing:
            if distances[v] is None or distances[u] + weight < distances[v]:
                raise NegativeCycleError("graph contains negative weight cycle")

    return _paths(source, distances, parents)


def dijkstra(
    vertex_count: int, edges: Iterable[WeightedEdge], source: int
) -> List[ShortestPath]:
    """Shortest paths from ``source`` over undirected edges ``(u, v, weight)``.

    Weights must be non-negative. Returns one entry per vertex other than
    ``source``, in vertex order.
    """
    edge_list = list(edges)
    if any(weight < 0 for _, _, weight in edge_list):
        raise ValueError("dijkstra requires non-negative weights")
    adjacency = _weighted_adjacency(vertex_count, edge_list, directed=False)
    _check_vertex(source, vertex_count)
    distances: List[Optional[int]] = [None] * vertex_count
    parents: List[Optional[int]] = [None] * vertex_count
    distances[source] = 0
    heap = [(0, source)]
    while heap:
        distance, u = heapq.heappop(heap)
        if distance > distances[u]:
            continue
        for v, weight in adjacency[u]:
            candidate = distance + weight
            if distances[v] is None or candidate < distances[v]:
                distances[v] = candidate
                parents[v] = u
                heapq.heappush(heap, (candidate, v))
    return _paths(source, distances, parents)


def shortest_path_k_edges(
    matrix: Sequence[Sequence[int]], source: int, destination: int, k: int
) -> Optional[int]:
    """Weight of the lightest walk from ``source`` to ``destination`` using exactly ``k`` edges.

    ``matrix[i][j]`` is the weight of edge i->j, with 0 meaning no edge.
    Returns None when no such walk exists.
    """
    rows = _square(matrix)
    _check_vertex(source, len(rows))
    _check_vertex(destination, len(rows))
    if k < 0:
        raise ValueError("edge count must be non-negative")

    best: List[Optional[int]] = [
        0 if vertex == destination else None for vertex in range(len(rows))
    ]
    for _ in range(k):
        best = [
            min(
                (
                    weight + rest
                    for weight, rest in zip(row, best)
                    if weight and rest is not None
                ),
                default=None,
            )
            for row in rows
        ]
    return best[source]


def floyd_warshall(matrix: Sequence[Sequence]) -> List[List[Optional[int]]]:
    """All-pairs shortest distances; None marks an unreachable pair.

    ``matrix[i][j]`` is the weight of edge i->j; None or ``math.inf`` means no
    edge. A vertex's distance to itself starts at 0 unless the matrix gives
    a weight for it.
    """
    rows = _square(matrix)
    size = len(rows)
    dist: List[List[Optional[int]]] = [
        [0 if i == j else None for j in range(size)] for i in range(size)
    ]
    for i, row in enumerate(rows):
        for j, weight in enumerate(row):
            if weight is not None and weight != math.inf:
                dist[i][j] = weight

    for k in range(size):
        through = dist[k]
        for row in dist:
            to_k = row[k]
            if to_k is None:
                continue
            for j, from_k in enumerate(through):
                if from_k is None:
                    continue
                candidate = to_k + from_k
                if row[j] is None or candidate < row[j]:
                    row[j] = candidate
    return dist
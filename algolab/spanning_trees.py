"""Minimum and maximum spanning tree weights from adjacency matrices."""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple


def _square(matrix: Sequence[Sequence[int]]) -> List[List[int]]:
    rows = [list(row) for row in matrix]
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("matrix must be square")
    return rows


def _edges(rows: List[List[int]]) -> List[Tuple[int, int, int]]:
    return [
        (weight, i, j)
        for i, row in enumerate(rows)
        for j, weight in enumerate(row)
        if weight
    ]


def _kruskal(vertex_count: int, edges: List[Tuple[int, int, int]]) -> int:
    parent = list(range(vertex_count))

    def find(vertex: int) -> int:
        while parent[vertex] != vertex:
            parent[vertex] = parent[parent[vertex]]
            vertex = parent[vertex]
        return vertex

    total = 0
    used = 0
    for weight, u, v in edges:
        if used == vertex_count - 1:
            break
        root_u, root_v = find(u), find(v)
        if root_u != root_v:
            parent[root_u] = root_v
            total += weight
            used += 1
    return total


def kruskal_mst(matrix: Sequence[Sequence[int]]) -> int:
    """Weight of a minimum spanning forest by Kruskal's algorithm.

    Every non-zero ``matrix[i][j]`` is an undirected edge between i and j.
    """
    rows = _square(matrix)
    return _kruskal(len(rows), sorted(_edges(rows), key=lambda edge: edge[0]))


def max_spanning_tree(matrix: Sequence[Sequence[int]]) -> int:
    """Weight of a maximum spanning forest, taking the heaviest edges first."""
    rows = _square(matrix)
    return _kruskal(
        len(rows), sorted(_edges(rows), key=lambda edge: edge[0], reverse=True)
    )


def prim_mst(matrix: Sequence[Sequence[int]]) -> int:
    """Weight of a minimum spanning tree by Prim's algorithm from vertex 0.

    Each non-zero entry sets the weight in both directions, later entries
    overriding earlier ones. Raises ValueError if the graph is disconnected.
    """
    rows = _square(matrix)
    size = len(rows)
    adjacency = [[0] * size for _ in range(size)]
    for i, row in enumerate(rows):
        for j, weight in enumerate(row):
            if weight:
                adjacency[i][j] = adjacency[j][i] = weight
    if size == 0:
        return 0

    key = [math.inf] * size
    key[0] = 0
    in_tree = [False] * size
    parent: List = [None] * size
    for _ in range(size - 1):
        u = min((v for v in range(size) if not in_tree[v]), key=key.__getitem__)
        in_tree[u] = True
        for v, weight in enumerate(adjacency[u]):
            if weight and not in_tree[v] and weight < key[v]:
                parent[v] = u
                key[v] = weight

    total = 0
    for vertex in range(1, size):
        if parent[vertex] is None:
            raise ValueError("graph is not connected")
        total += adjacency[vertex][parent[vertex]]
    return total
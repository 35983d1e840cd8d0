"""Reachability questions on graphs: two-colouring, cycles and paths."""

from __future__ import annotations

from collections import deque
from typing import Iterable, List, Optional, Tuple

Edge = Tuple[int, int]


def _check_vertex(vertex: int, vertex_count: int) -> None:
    if not 0 <= vertex < vertex_count:
        raise ValueError(f"vertex {vertex} is outside 0..{vertex_count - 1}")


def _adjacency(
    vertex_count: int, edges: Iterable[Edge], directed: bool
) -> List[List[int]]:
    if vertex_count < 0:
        raise ValueError("vertex count must be non-negative")
    adjacency: List[List[int]] = [[] for _ in range(vertex_count)]
    for u, v in edges:
        _check_vertex(u, vertex_count)
        _check_vertex(v, vertex_count)
        adjacency[u].append(v)
        if not directed:
            adjacency[v].append(u)
    return adjacency


def is_bipartite(vertex_count: int, edges: Iterable[Edge]) -> bool:
    """Two-colour the undirected graph by breadth-first search from vertex 0.

    Only the component holding vertex 0 is examined.
    """
    adjacency = _adjacency(vertex_count, edges, directed=False)
    if not adjacency:
        return True
    colour: List[Optional[int]] = [None] * vertex_count
    colour[0] = 0
    queue = deque([0])
    while queue:
        u = queue.popleft()
        for v in adjacency[u]:
            if colour[v] is None:
                colour[v] = 1 - colour[u]
                queue.append(v)
            elif colour[v] == colour[u]:
                return False
    return True


def has_cycle(vertex_count: int, edges: Iterable[Edge]) -> bool:
    """True when the directed graph contains a cycle (self-loops included)."""
    adjacency = _adjacency(vertex_count, edges, directed=True)
    unvisited, on_stack, finished = 0, 1, 2
    state = [unvisited] * vertex_count
    for root in range(vertex_count):
        if state[root] != unvisited:
            continue
        state[root] = on_stack
        stack = [(root, iter(adjacency[root]))]
        while stack:
            vertex, neighbours = stack[-1]
            for nxt in neighbours:
                if state[nxt] == on_stack:
                    return True
                if state[nxt] == unvisited:
                    state[nxt] = on_stack
                    stack.append((nxt, iter(adjacency[nxt])))
                    break
            else:
                state[vertex] = finished
                stack.pop()
    return False


def path_exists(
    vertex_count: int, edges: Iterable[Edge], source: int, destination: int
) -> bool:
    """True when ``destination`` can be reached from ``source`` in the undirected graph."""
    adjacency = _adjacency(vertex_count, edges, directed=False)
    _check_vertex(source, vertex_count)
    _check_vertex(destination, vertex_count)
    visited = {source}
    stack = [source]
    while stack:
        vertex = stack.pop()
        if vertex == destination:
            return True
        for nxt in adjacency[vertex]:
            if nxt not in visited:
                visited.add(nxt)
                stack.append(nxt)
    return False
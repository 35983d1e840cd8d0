"""Searching, sorting, graph, greedy and dynamic-programming algorithms."""

__version__ = "0.1.0"

__all__ = [
    "counting",
    "dynamic",
    "greedy",
    "pairs",
    "searching",
    "shortest_paths",
    "sorting",
    "spanning_trees",
    "traversal",
]
# algolab

Classic algorithms in plain Python, with no dependencies outside the standard library.
Several functions also report how much work they did (comparisons, swaps, shifts or
inversions), so approaches can be compared side by side.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algolab.searching` | `linear_search`, `binary_search`, `jump_search` (each returns a `SearchResult` with `found` and `comparisons`), `first_occurrence`, `last_occurrence`, `count_occurrences` |
| `algolab.pairs` | `count_pairs_with_difference`, `find_three_indices`, `pairs_with_sum`, `common_elements` |
| `algolab.sorting` | `insertion_sort`, `selection_sort`, `merge_sort`, `quick_sort`, `kth_smallest`, and the result records `InsertionSortResult`, `SelectionSortResult`, `MergeSortResult`, `QuickSortResult` |
| `algolab.counting` | `has_duplicates`, `most_frequent_letter`, `majority_element`, `median` |
| `algolab.traversal` | `is_bipartite`, `has_cycle`, `path_exists` |
| `algolab.shortest_paths` | `bellman_ford`, `dijkstra` (both return lists of `ShortestPath`), `shortest_path_k_edges`, `floyd_warshall`, `NegativeCycleError` |
| `algolab.spanning_trees` | `kruskal_mst`, `max_spanning_tree`, `prim_mst` |
| `algolab.greedy` | `select_activities`, `schedule_tasks`, `min_merge_cost`, `fractional_knapsack` (returns a `KnapsackResult`) |
| `algolab.dynamic` | `count_coin_change`, `can_partition`, `matrix_chain_cost` |

## Examples

```python
from algolab.searching import binary_search, count_occurrences

result = binary_search([1, 3, 5, 7, 9, 11], 7)
print(result.found, result.comparisons)  # True 3
print(result)                            # Present 3
print(count_occurrences([1, 2, 2, 2, 5], 2))  # 3
```

The sorting functions return a record with the sorted `values` and the counts;
`str()` of a record gives the values on one line followed by lines such as
`comparisons = 7`.

```python
import random
from algolab.sorting import merge_sort, quick_sort, kth_smallest

result = merge_sort([5, 2, 4, 1, 3])
print(result.values, result.comparisons, result.inversions)
print(quick_sort([5, 2, 4, 1, 3], random.Random(0)))
print(kth_smallest([7, 10, 4, 3, 20, 15], 3, random.Random(0)))  # 7
```

Pass a `random.Random` to `quick_sort` and `kth_smallest` to make the random pivot
choice reproducible; without one a fresh generator is used. `kth_smallest` raises
`ValueError` when `k` is outside `1..len(values)`.

```python
from algolab.shortest_paths import dijkstra, bellman_ford, NegativeCycleError

for path in dijkstra(3, [(0, 1, 4), (1, 2, 1), (0, 2, 7)], 0):
    print(path)  # e.g. "2 : 0 1 2 : 5"

try:
    bellman_ford(2, [(0, 1, 1), (1, 0, -3)], 0)
except NegativeCycleError:
    print("negative weight cycle")
```

`bellman_ford` takes directed edges and `dijkstra` undirected ones, each as
`(u, v, weight)`. Both return one `ShortestPath` per vertex other than the source;
an unreachable vertex has `distance` of `None`.

```python
from algolab.spanning_trees import prim_mst
from algolab.dynamic import count_coin_change, matrix_chain_cost

matrix = [
    [0, 2, 0, 6, 0],
    [2, 0, 3, 8, 5],
    [0, 3, 0, 0, 7],
    [6, 8, 0, 0, 9],
    [0, 5, 7, 9, 0],
]
print(prim_mst(matrix))                                  # 16
print(count_coin_change([1, 2, 3], 4))                   # 4
print(matrix_chain_cost([(10, 30), (30, 5), (5, 60)]))   # 4500
```

## Graph input

- `algolab.traversal`, `bellman_ford` and `dijkstra` take a vertex count and an edge list.
- `shortest_path_k_edges`, `kruskal_mst`, `max_spanning_tree` and `prim_mst` take an
  adjacency matrix in which `0` means there is no edge.
- `floyd_warshall` takes an adjacency matrix in which `None` or `math.inf` means there is
  no edge; in its result `None` marks an unreachable pair.

Some behaviour worth knowing:

- `is_bipartite` only examines the component that holds vertex 0.
- `kruskal_mst` and `max_spanning_tree` return the weight of a spanning forest when the
  graph is disconnected; `prim_mst` raises `ValueError` instead.
- `shortest_path_k_edges` returns `None` when no walk of exactly `k` edges exists.
- Out-of-range vertices, non-square matrices and other invalid input raise `ValueError`.

## What it does not do

The package is a library only. It has no command-line program and does not read
problem input from standard input; call the functions with Python values and use
`str()` on the result records where a printed form is wanted.
"""Dynamic programming: coin change, equal-sum partition, matrix chain order."""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple


def count_coin_change(coins: Iterable[int], total: int) -> int:
    """Number of ways to make ``total`` from unlimited coins, ignoring order."""
    denominations = list(coins)
    if any(coin <= 0 for coin in denominations):
        raise ValueError("coin values must be positive")
    if total < 0:
        raise ValueError("total must be non-negative")
    ways = [1] + [0] * total
    for coin in denominations:
        for amount in range(coin, total + 1):
            ways[amount] += ways[amount - coin]
    return ways[total]


def can_partition(values: Iterable[int]) -> bool:
    """True when ``values`` split into two groups with equal sums."""
    numbers = list(values)
    if any(number < 0 for number in numbers):
        raise ValueError("values must be non-negative")
    total = sum(numbers)
    if total % 2:
        return False
    target = total // 2
    reachable = [True] + [False] * target
    for number in numbers:
        for amount in range(target, number - 1, -1):
            if reachable[amount - number]:
                reachable[amount] = True
    return reachable[target]


def matrix_chain_cost(dimensions: Sequence[Tuple[int, int]]) -> int:
    """Fewest scalar multiplications to multiply matrices given as (rows, cols)."""
    dims = [tuple(pair) for pair in dimensions]
    size = len(dims)
    if size == 0:
        raise ValueError("at least one matrix is required")
    cost: List[List[int]] = [[0] * size for _ in range(size)]
    for length in range(2, size + 1):
        for i in range(size - length + 1):
            j = i + length - 1
            cost[i][j] = min(
                cost[i][k] + cost[k + 1][j] + dims[i][0] * dims[k][1] * dims[j][1]
                for k in range(i, j)
            )
    return cost[0][size - 1]
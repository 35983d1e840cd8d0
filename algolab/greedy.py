"""Greedy choices: activities, deadline scheduling, file merging, knapsack."""

from __future__ import annotations

import heapq
from dataclasses import dataclass, field
from typing import Iterable, List, Sequence, Tuple


def _check_lengths(first: Sequence, second: Sequence, what: str) -> None:
    if len(first) != len(second):
        raise ValueError(f"{what} must have the same length")


def select_activities(starts: Sequence[int], finishes: Sequence[int]) -> List[int]:
    """1-based numbers of non-conflicting activities chosen by earliest finish.

    Activities are taken in order of finish time; one is chosen when it
    starts no earlier than the previously chosen one finished (the first
    must start at or after time 0).
    """
    _check_lengths(starts, finishes, "starts and finishes")
    activities = sorted(
        zip(starts, finishes, range(1, len(starts) + 1)), key=lambda item: item[1]
    )
    selected: List[int] = []
    last_finish = 0
    for start, finish, number in activities:
        if start >= last_finish:
            selected.append(number)
            last_finish = finish
    return selected


def schedule_tasks(times: Sequence[int], deadlines: Sequence[int]) -> List[int]:
    """1-based numbers of tasks that can be completed by their deadlines.

    Tasks are considered in order of deadline and taken whenever they can
    still finish in time after the tasks already taken.
    """
    _check_lengths(times, deadlines, "times and deadlines")
    tasks = sorted(
        zip(times, deadlines, range(1, len(times) + 1)), key=lambda item: item[1]
    )
    selected: List[int] = []
    current = 0
    for duration, deadline, number in tasks:
        if current + duration <= deadline:
            selected.append(number)
            current += duration
    return selected


def min_merge_cost(sizes: Iterable[int]) -> int:
    """Least total cost of merging files pairwise, a merge costing the sum of both sizes."""
    heap = list(sizes)
    heapq.heapify(heap)
    total = 0
    while len(heap) > 1:
        merged = heapq.heappop(heap) + heapq.heappop(heap)
        total += merged
        heapq.heappush(heap, merged)
    return total


@dataclass(frozen=True)
class KnapsackResult:
    """Best value reached and the (1-based item, fraction taken) pairs chosen."""

    total_value: float
    selections: List[Tuple[int, float]] = field(default_factory=list)

    def __str__(self) -> str:
        lines = [f"Maximum value : {self.total_value:g}", "item-weight"]
        lines.extend(f"{number}-{fraction:g}" for number, fraction in self.selections)
        return "\n".join(lines)


def fractional_knapsack(
    weights: Sequence[int], values: Sequence[int], capacity: int
) -> KnapsackResult:
    """Fill a knapsack greedily by value per unit of weight, splitting the last item.

    Items are taken whole while they fit; the first item that does not fit
    is taken in the fraction the remaining capacity allows and filling stops.
    """
    _check_lengths(weights, values, "weights and values")
    if any(weight <= 0 for weight in weights):
        raise ValueError("item weights must be positive")
    items = sorted(
        zip(weights, values, range(1, len(weights) + 1)),
        key=lambda item: item[1] / item[0],
        reverse=True,
    )
    total = 0.0
    remaining = capacity
    selections: List[Tuple[int, float]] = []
    for weight, value, number in items:
        if remaining >= weight:
            total += value
            remaining -= weight
            selections.append((number, 1.0))
        else:
            fraction = remaining / weight
            total += value * fraction
            selections.append((number, fraction))
            break
    return KnapsackResult(total, selections)
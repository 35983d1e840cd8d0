"""Comparison sorts and selection that report the work they did."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple


def _format(values: Sequence[int], *stats: Tuple[str, int]) -> str:
    lines = [" ".join(str(value) for value in values)]
    lines.extend(f"{name} = {count}" for name, count in stats)
    return "\n".join(lines)


@dataclass(frozen=True)
class InsertionSortResult:
    """Sorted values with the comparisons and shifts insertion sort made."""

    values: List[int]
    comparisons: int
    shifts: int

    def __str__(self) -> str:
        return _format(
            self.values, ("comparisons", self.comparisons), ("shifts", self.shifts)
        )


@dataclass(frozen=True)
class SelectionSortResult:
    """Sorted values with the comparisons and swaps selection sort made."""

    values: List[int]
    comparisons: int
    swaps: int

    def __str__(self) -> str:
        return _format(
            self.values, ("comparisons", self.comparisons), ("swaps", self.swaps)
        )


@dataclass(frozen=True)
class MergeSortResult:
    """Sorted values with the comparisons made and inversions counted."""

    values: List[int]
    comparisons: int
    inversions: int

    def __str__(self) -> str:
        return _format(
            self.values,
            ("comparisons", self.comparisons),
            ("inversions", self.inversions),
        )


@dataclass(frozen=True)
class QuickSortResult:
    """Sorted values with the comparisons and swaps quick sort made."""

    values: List[int]
    comparisons: int
    swaps: int

    def __str__(self) -> str:
        return _format(
            self.values, ("comparisons", self.comparisons), ("swaps", self.swaps)
        )


def insertion_sort(values: Iterable[int]) -> InsertionSortResult:
    """Sort by insertion, counting element comparisons and one-place shifts."""
    items = list(values)
    comparisons = shifts = 0
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0:
            comparisons += 1
            if items[j] <= key:
                break
            items[j + 1] = items[j]
            shifts += 1
            j -= 1
        items[j + 1] = key
    return InsertionSortResult(items, comparisons, shifts)


def selection_sort(values: Iterable[int]) -> SelectionSortResult:
    """Sort by selection, counting comparisons and the swaps actually done."""
    items = list(values)
    comparisons = swaps = 0
    size = len(items)
    for i in range(size - 1):
        smallest = i
        for j in range(i + 1, size):
            comparisons += 1
            if items[j] < items[smallest]:
                smallest = j
        if smallest != i:
            items[i], items[smallest] = items[smallest], items[i]
            swaps += 1
    return SelectionSortResult(items, comparisons, swaps)


def _merge_sort(items: List[int]) -> Tuple[List[int], int, int]:
    if len(items) <= 1:
        return list(items), 0, 0
    split = (len(items) + 1) // 2
    left, left_comparisons, left_inversions = _merge_sort(items[:split])
    right, right_comparisons, right_inversions = _merge_sort(items[split:])

    comparisons = left_comparisons + right_comparisons
    inversions = left_inversions + right_inversions
    merged: List[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        comparisons += 1
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
            inversions += len(left) - i
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, comparisons, inversions


def merge_sort(values: Iterable[int]) -> MergeSortResult:
    """Sort by merging, counting merge comparisons and inversions."""
    items, comparisons, inversions = _merge_sort(list(values))
    return MergeSortResult(items, comparisons, inversions)


def _partition(
    items: List[int], left: int, right: int, rng: random.Random
) -> Tuple[int, int, int]:
    """Lomuto partition around a random pivot; returns (index, comparisons, swaps)."""
    pivot_index = rng.randrange(left, right + 1)
    pivot = items[pivot_index]
    items[pivot_index], items[right] = items[right], items[pivot_index]
    swaps = 1
    boundary = left - 1
    for j in range(left, right):
        if items[j] <= pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
            swaps += 1
    items[boundary + 1], items[right] = items[right], items[boundary + 1]
    swaps += 1
    return boundary + 1, right - left, swaps


def quick_sort(
    values: Iterable[int], rng: Optional[random.Random] = None
) -> QuickSortResult:
    """Sort with random-pivot quick sort, counting comparisons and every swap.

    Every exchange performed counts as a swap, including an element swapped
    with itself.
    """
    rng = rng if rng is not None else random.Random()
    items = list(values)
    comparisons = swaps = 0
    pending = [(0, len(items) - 1)]
    while pending:
        left, right = pending.pop()
        if left >= right:
            continue
        pivot, made, swapped = _partition(items, left, right, rng)
        comparisons += made
        swaps += swapped
        pending.append((pivot + 1, right))
        pending.append((left, pivot - 1))
    return QuickSortResult(items, comparisons, swaps)


def kth_smallest(
    values: Iterable[int], k: int, rng: Optional[random.Random] = None
) -> int:
    """The ``k``-th smallest value (1-based), found by quickselect."""
    rng = rng if rng is not None else random.Random()
    items = list(values)
    if not 1 <= k <= len(items):
        raise ValueError(f"k must be between 1 and {len(items)}, got {k}")
    target = k - 1
    left, right = 0, len(items) - 1
    while True:
        if left == right:
            return items[left]
        pivot, _, _ = _partition(items, left, right, rng)
        if pivot == target:
            return items[pivot]
        if pivot > target:
            right = pivot - 1
        else:
            left = pivot + 1
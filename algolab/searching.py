"""Searching sequences for a key while counting the comparisons made."""

from __future__ import annotations

import math
from bisect import bisect_left, bisect_right
from dataclasses import dataclass
from typing import Optional, Sequence


@dataclass(frozen=True)
class SearchResult:
    """Whether a key was found and how many comparisons the search took."""

    found: bool
    comparisons: int

    def __str__(self) -> str:
        label = "Present" if self.found else "Not Present"
        return f"{label} {self.comparisons}"


def linear_search(values: Sequence[int], key: int) -> SearchResult:
    """Scan ``values`` from the front, one comparison per element visited."""
    for position, value in enumerate(values, start=1):
        if value == key:
            return SearchResult(True, position)
    return SearchResult(False, len(values))


def binary_search(values: Sequence[int], key: int) -> SearchResult:
    """Search the sorted ``values`` by halving, counting probes of the middle."""
    left, right = 0, len(values) - 1
    comparisons = 0
    while left <= right:
        mid = left + (right - left) // 2
        comparisons += 1
        if values[mid] == key:
            return SearchResult(True, comparisons)
        if values[mid] < key:
            left = mid + 1
        else:
            right = mid - 1
    return SearchResult(False, comparisons)


def jump_search(values: Sequence[int], key: int) -> SearchResult:
    """Jump through the sorted ``values`` in blocks of about sqrt(n), then scan.

    Each block jump counts as one comparison, as does each element inspected
    during the final linear scan.
    """
    size = len(values)
    if size == 0:
        return SearchResult(False, 0)

    root = math.sqrt(size)
    step = int(root)
    previous = 0
    comparisons = 0

    while values[min(step, size) - 1] < key:
        comparisons += 1
        previous = step
        step = int(step + root)
        if previous >= size:
            break

    end = min(step, size)
    for offset, value in enumerate(values[previous:end], start=1):
        if value == key:
            return SearchResult(True, comparisons + offset)
    return SearchResult(False, comparisons + max(end - previous, 0))


def first_occurrence(values: Sequence[int], key: int) -> Optional[int]:
    """Index of the first copy of ``key`` in the sorted ``values``, or None."""
    index = bisect_left(values, key)
    if index < len(values) and values[index] == key:
        return index
    return None


def last_occurrence(values: Sequence[int], key: int) -> Optional[int]:
    """Index of the last copy of ``key`` in the sorted ``values``, or None."""
    index = bisect_right(values, key) - 1
    if index >= 0 and values[index] == key:
        return index
    return None


def count_occurrences(values: Sequence[int], key: int) -> int:
    """Number of copies of ``key`` in the sorted ``values`` (0 if absent)."""
    first = first_occurrence(values, key)
    if first is None:
        return 0
    last = last_occurrence(values, key)
    return last - first + 1
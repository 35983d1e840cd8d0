"""Pair and triple finding on integer sequences using two pointers."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple


def count_pairs_with_difference(values: Sequence[int], k: int) -> int:
    """Count pairs whose difference is ``k`` with a two-pointer sweep.

    The values are sorted first; after each match both pointers advance.
    """
    if k < 0:
        raise ValueError("difference must be non-negative")
    ordered = sorted(values)
    count = 0
    left, right = 0, 1
    while right < len(ordered):
        diff = ordered[right] - ordered[left]
        if diff == k:
            count += 1
            left += 1
            right += 1
        elif diff < k:
            right += 1
        else:
            left += 1
    return count


def find_three_indices(values: Sequence[int]) -> Optional[Tuple[int, int, int]]:
    """Find indices ``i < j < k`` with ``values[i] + values[j] == values[k]``.

    ``values`` must be sorted. The first triple found (smallest ``k``) is
    returned, or None when no such triple exists.
    """
    for k, target in enumerate(values[2:], start=2):
        i, j = 0, k - 1
        while i < j:
            total = values[i] + values[j]
            if total == target:
                return i, j, k
            if total < target:
                i += 1
            else:
                j -= 1
    return None


def pairs_with_sum(values: Sequence[int], target: int) -> List[Tuple[int, int]]:
    """All pairs met by a two-pointer sweep over sorted ``values`` that sum to ``target``.

    Returns an empty list when no two elements add up to ``target``.
    """
    ordered = sorted(values)
    found: List[Tuple[int, int]] = []
    left, right = 0, len(ordered) - 1
    while left < right:
        total = ordered[left] + ordered[right]
        if total == target:
            found.append((ordered[left], ordered[right]))
            left += 1
            right -= 1
        elif total < target:
            left += 1
        else:
            right -= 1
    return found


def common_elements(first: Sequence[int], second: Sequence[int]) -> List[int]:
    """Elements common to two sorted sequences, matching copies one to one."""
    common: List[int] = []
    i, j = 0, 0
    while i < len(first) and j < len(second):
        if first[i] == second[j]:
            common.append(first[i])
            i += 1
            j += 1
        elif first[i] < second[j]:
            i += 1
        else:
            j += 1
    return common
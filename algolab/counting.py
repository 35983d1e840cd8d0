"""Frequency questions about sequences: duplicates, majorities, medians."""

from __future__ import annotations

from collections import Counter
from string import ascii_lowercase
from typing import Hashable, Iterable, Optional, Sequence, Tuple


def has_duplicates(values: Iterable[Hashable]) -> bool:
    """True when some value appears more than once."""
    seen = set()
    for value in values:
        if value in seen:
            return True
        seen.add(value)
    return False


def most_frequent_letter(letters: Iterable[str]) -> Optional[Tuple[str, int]]:
    """The lowercase letter occurring most often, with its count.

    Only ``a``-``z`` are counted; ties go to the letter earliest in the
    alphabet. Returns None when no letter occurs more than once.
    """
    counts = Counter(letter for letter in letters if letter in ascii_lowercase)
    best: Optional[Tuple[str, int]] = None
    for letter in ascii_lowercase:
        count = counts[letter]
        if count > 1 and (best is None or count > best[1]):
            best = (letter, count)
    return best


def majority_element(values: Sequence[int]) -> Optional[int]:
    """The value filling more than half of ``values``, or None if there is none."""
    if not values:
        raise ValueError("majority of an empty sequence")
    candidate = values[0]
    count = 1
    for value in values[1:]:
        if count == 0:
            candidate = value
            count = 1
        elif value == candidate:
            count += 1
        else:
            count -= 1
    occurrences = sum(1 for value in values if value == candidate)
    return candidate if occurrences > len(values) // 2 else None


def median(values: Iterable[int]) -> float:
    """Median of ``values``; the mean of the middle two for an even count."""
    ordered = sorted(values)
    size = len(ordered)
    if size == 0:
        raise ValueError("median of an empty sequence")
    middle = size // 2
    if size % 2 == 0:
        return (ordered[middle - 1] + ordered[middle]) / 2.0
    return float(ordered[middle])
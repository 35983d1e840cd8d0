import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algolab.sorting import (
    insertion_sort,
    kth_smallest,
    merge_sort,
    quick_sort,
    selection_sort,
)

int_lists = st.lists(st.integers(min_value=-100, max_value=100), max_size=40)


@given(int_lists)
def test_all_sorts_return_sorted_values(values):
    expected = sorted(values)
    assert insertion_sort(values).values == expected
    assert selection_sort(values).values == expected
    assert merge_sort(values).values == expected
    assert quick_sort(values, random.Random(7)).values == expected


@given(int_lists)
def test_input_is_not_modified(values):
    original = list(values)
    insertion_sort(values)
    quick_sort(values, random.Random(1))
    assert values == original


@given(int_lists)
def test_insertion_shifts_equal_merge_inversions(values):
    assert insertion_sort(values).shifts == merge_sort(values).inversions


def test_insertion_sort_reverse_three():
    result = insertion_sort([3, 2, 1])
    assert result.comparisons == 3
    assert result.shifts == 3


def test_insertion_sort_str_format():
    assert str(insertion_sort([3, 2, 1])) == "1 2 3\ncomparisons = 3\nshifts = 3"


@given(st.integers(min_value=1, max_value=30))
def test_insertion_sort_on_sorted_input(n):
    result = insertion_sort(range(n))
    assert result.shifts == 0
    assert result.comparisons == n - 1


@given(int_lists)
def test_selection_sort_comparisons_are_quadratic(values):
    n = len(values)
    result = selection_sort(values)
    assert result.comparisons == max(n * (n - 1) // 2, 0)
    assert result.swaps <= max(n - 1, 0)


@given(st.integers(min_value=0, max_value=30))
def test_selection_sort_sorted_input_needs_no_swaps(n):
    assert selection_sort(range(n)).swaps == 0


@given(st.integers(min_value=0, max_value=30))
def test_merge_sort_sorted_input_has_no_inversions(n):
    assert merge_sort(range(n)).inversions == 0


@given(st.integers(min_value=1, max_value=30))
def test_merge_sort_reversed_input_inversions(n):
    assert merge_sort(range(n, 0, -1)).inversions == n * (n - 1) // 2


@given(int_lists)
def test_merge_sort_comparisons_bounded(values):
    n = len(values)
    result = merge_sort(values)
    assert result.comparisons <= max(n * (n - 1) // 2, 0)


@given(int_lists, st.integers(min_value=0, max_value=1000))
def test_quick_sort_is_deterministic_for_seed(values, seed):
    first = quick_sort(values, random.Random(seed))
    second = quick_sort(values, random.Random(seed))
    assert first == second


@given(int_lists)
def test_quick_sort_counts_are_bounded(values):
    n = len(values)
    result = quick_sort(values, random.Random(3))
    assert result.comparisons <= max(n * (n - 1) // 2, 0)
    if n >= 2:
        assert result.comparisons >= n - 1
        assert result.swaps >= 2
    else:
        assert result.swaps == 0


@given(
    st.lists(st.integers(min_value=-50, max_value=50), min_size=1, max_size=40),
    st.data(),
)
def test_kth_smallest_matches_sorted_position(values, data):
    k = data.draw(st.integers(min_value=1, max_value=len(values)))
    assert kth_smallest(values, k, random.Random(5)) == sorted(values)[k - 1]


@pytest.mark.parametrize("k", [0, 4, -1])
def test_kth_smallest_rejects_out_of_range(k):
    with pytest.raises(ValueError):
        kth_smallest([5, 1, 3], k, random.Random(0))


def test_kth_smallest_rejects_empty():
    with pytest.raises(ValueError):
        kth_smallest([], 1)
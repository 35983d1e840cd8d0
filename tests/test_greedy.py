import pytest
from hypothesis import given
from hypothesis import strategies as st

from algolab.greedy import (
    KnapsackResult,
    fractional_knapsack,
    min_merge_cost,
    schedule_tasks,
    select_activities,
)

intervals = st.lists(
    st.tuples(st.integers(0, 50), st.integers(1, 20)), max_size=12
)


@given(intervals)
def test_selected_activities_do_not_overlap(pairs):
    starts = [start for start, _ in pairs]
    finishes = [start + length for start, length in pairs]
    chosen = select_activities(starts, finishes)
    assert len(set(chosen)) == len(chosen)
    last = 0
    for number in chosen:
        assert starts[number - 1] >= last
        last = finishes[number - 1]


def test_disjoint_activities_are_all_selected():
    starts = [0, 2, 4]
    finishes = [1, 3, 5]
    assert select_activities(starts, finishes) == [1, 2, 3]


def test_activities_empty():
    assert select_activities([], []) == []


def test_activities_length_mismatch():
    with pytest.raises(ValueError):
        select_activities([1, 2], [3])


@given(st.lists(st.tuples(st.integers(1, 10), st.integers(1, 40)), max_size=12))
def test_scheduled_tasks_meet_deadlines(pairs):
    times = [time for time, _ in pairs]
    deadlines = [deadline for _, deadline in pairs]
    chosen = schedule_tasks(times, deadlines)
    assert len(set(chosen)) == len(chosen)
    elapsed = 0
    for number in chosen:
        elapsed += times[number - 1]
        assert elapsed <= deadlines[number - 1]


def test_task_longer_than_deadline_never_chosen():
    chosen = schedule_tasks([5, 1], [3, 10])
    assert 1 not in chosen
    assert chosen == [2]


def test_tasks_length_mismatch():
    with pytest.raises(ValueError):
        schedule_tasks([1], [1, 2])


def test_merge_single_file_costs_nothing():
    assert min_merge_cost([42]) == 0
    assert min_merge_cost([]) == 0


def test_merge_two_files_costs_their_sum():
    assert min_merge_cost([7, 9]) == 7 + 9


def test_merge_three_files():
    assert min_merge_cost([2, 3, 4]) == 14


@given(st.lists(st.integers(1, 100), min_size=2, max_size=10))
def test_merge_cost_ignores_order_and_covers_total(sizes):
    cost = min_merge_cost(sizes)
    assert cost == min_merge_cost(list(reversed(sizes)))
    assert cost == min_merge_cost(sorted(sizes))
    assert cost >= sum(sizes)


@given(
    st.lists(st.tuples(st.integers(1, 20), st.integers(0, 100)), min_size=1, max_size=8)
)
def test_knapsack_takes_everything_when_it_fits(items):
    weights = [weight for weight, _ in items]
    values = [value for _, value in items]
    result = fractional_knapsack(weights, values, sum(weights))
    assert result.total_value == pytest.approx(sum(values))
    assert sorted(number for number, _ in result.selections) == list(
        range(1, len(items) + 1)
    )
    assert all(fraction == 1.0 for _, fraction in result.selections)


@given(
    st.lists(st.tuples(st.integers(1, 20), st.integers(0, 100)), min_size=1, max_size=8),
    st.integers(0, 60),
)
def test_knapsack_respects_capacity(items, capacity):
    weights = [weight for weight, _ in items]
    values = [value for _, value in items]
    result = fractional_knapsack(weights, values, capacity)
    used = sum(weights[number - 1] * fraction for number, fraction in result.selections)
    assert used <= capacity + 1e-9
    gained = sum(values[number - 1] * fraction for number, fraction in result.selections)
    assert result.total_value == pytest.approx(gained)


def test_knapsack_output_format():
    result = fractional_knapsack([10], [60], 10)
    assert str(result) == "Maximum value : 60\nitem-weight\n1-1"


def test_knapsack_result_fields():
    result = KnapsackResult(5.0, [(2, 0.5)])
    assert str(result) == "Maximum value : 5\nitem-weight\n2-0.5"


def test_knapsack_rejects_zero_weight():
    with pytest.raises(ValueError):
        fractional_knapsack([0, 1], [5, 5], 3)


def test_knapsack_length_mismatch():
    with pytest.raises(ValueError):
        fractional_knapsack([1, 2], [5], 3)
import pytest

from solvebook.searching import (
    combination_sum,
    judge_square_sum,
    last_remaining,
    max_distance,
    min_days,
    minimized_maximum,
)


def test_min_days_impossible():
    assert min_days([1, 10, 3, 10, 2], 3, 2) == -1


def test_min_days_example():
    assert min_days([1, 10, 3, 10, 2], 3, 1) == 3


def test_min_days_needs_every_flower():
    bloom = [4, 9, 2, 7]
    assert min_days(bloom, 2, 2) == max(bloom)


@pytest.mark.parametrize("m, k", [(1, 1), (2, 2), (1, 3), (3, 1)])
def test_min_days_result_is_a_bloom_day(m, k):
    bloom = [7, 7, 7, 7, 12, 7, 7, 3, 9]
    assert min_days(bloom, m, k) in bloom


def test_max_distance_example():
    assert max_distance([1, 2, 3, 4, 7], 3) == 3


def test_max_distance_two_balls_spans_range():
    position = [5, 1, 9, 30, 14]
    assert max_distance(position, 2) == max(position) - min(position)


def test_max_distance_all_balls_uses_smallest_gap():
    position = [10, 1, 4, 22]
    ordered = sorted(position)
    gaps = [b - a for a, b in zip(ordered, ordered[1:])]
    assert max_distance(position, len(position)) == min(gaps)


def test_max_distance_does_not_reorder_input():
    position = [7, 1, 4]
    max_distance(position, 2)
    assert position == [7, 1, 4]


def test_max_distance_empty_raises():
    with pytest.raises(ValueError):
        max_distance([], 2)


def test_minimized_maximum_example():
    assert minimized_maximum(6, [11, 6]) == 3


def test_minimized_maximum_one_store_each():
    quantities = [15, 10, 10]
    assert minimized_maximum(len(quantities), quantities) == max(quantities)


def test_minimized_maximum_enough_stores_for_single_items():
    quantities = [4, 2, 3]
    assert minimized_maximum(sum(quantities), quantities) == 1


def test_judge_square_sum_example():
    assert judge_square_sum(5) is True


@pytest.mark.parametrize("a, b", [(0, 0), (0, 4), (3, 4), (6, 10), (12, 1)])
def test_judge_square_sum_accepts_sums_of_squares(a, b):
    assert judge_square_sum(a * a + b * b) is True


@pytest.mark.parametrize("c", [3, 7, 11, 15, 19, 23])
def test_judge_square_sum_rejects_three_mod_four(c):
    assert judge_square_sum(c) is False


def test_judge_square_sum_negative_raises():
    with pytest.raises(ValueError):
        judge_square_sum(-1)


def test_last_remaining_single():
    assert last_remaining(1) == 1


@pytest.mark.parametrize("n", [2, 3, 9, 24, 100, 1000])
def test_last_remaining_is_even_and_in_range(n):
    result = last_remaining(n)
    assert 1 <= result <= n
    assert result % 2 == 0


def test_last_remaining_zero_raises():
    with pytest.raises(ValueError):
        last_remaining(0)


def test_combination_sum_example():
    assert combination_sum([2, 3, 6, 7], 7) == [[2, 2, 3], [7]]


def test_combination_sum_invariants():
    target = 12
    combos = combination_sum([5, 2, 3, 4], target)
    assert combos
    for combo in combos:
        assert sum(combo) == target
        assert combo == sorted(combo)
    assert len({tuple(c) for c in combos}) == len(combos)


def test_combination_sum_ignores_duplicate_candidates():
    assert combination_sum([3, 2, 2, 3], 8) == combination_sum([2, 3], 8)


def test_combination_sum_zero_target():
    assert combination_sum([2, 3], 0) == [[]]


def test_combination_sum_unreachable_target():
    assert combination_sum([4, 6], 3) == []


def test_combination_sum_rejects_non_positive():
    with pytest.raises(ValueError):
        combination_sum([0, 2], 4)
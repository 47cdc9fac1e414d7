from collections import Counter

import pytest

from recursekit.combinations import (
    MOD,
    combination_sum,
    combination_sum2,
    combination_sum3,
    is_subset_present,
    perfect_sum,
)


def test_combination_sum_worked_example():
    assert combination_sum([2, 3, 6, 7], 7) == [[2, 2, 3], [7]]


@pytest.mark.parametrize(
    "candidates, target",
    [([2, 3, 5], 8), ([2, 3, 6, 7], 7), ([7, 3, 2], 18), ([1], 4), ([2], 1)],
)
def test_combination_sum_invariants(candidates, target):
    result = combination_sum(candidates, target)
    assert all(sum(combo) == target for combo in result)
    assert all(set(combo) <= set(candidates) for combo in result)
    order = {value: pos for pos, value in enumerate(candidates)}
    for combo in result:
        positions = [order[value] for value in combo]
        assert positions == sorted(positions)
    assert len({tuple(combo) for combo in result}) == len(result)


def test_combination_sum_unreachable_is_empty():
    assert combination_sum([2], 1) == []


def test_combination_sum_zero_target():
    assert combination_sum([3, 4], 0) == [[]]


def test_combination_sum_rejects_non_positive():
    with pytest.raises(ValueError):
        combination_sum([0, 2], 4)


def test_combination_sum2_worked_example():
    assert combination_sum2([10, 1, 2, 7, 6, 1, 5], 8) == [
        [1, 1, 6],
        [1, 2, 5],
        [1, 7],
        [2, 6],
    ]


@pytest.mark.parametrize(
    "candidates, target",
    [([10, 1, 2, 7, 6, 1, 5], 8), ([2, 5, 2, 1, 2], 5), ([1, 1, 1, 1], 2), ([4, 4], 3)],
)
def test_combination_sum2_invariants(candidates, target):
    original = list(candidates)
    result = combination_sum2(candidates, target)
    assert candidates == original
    available = Counter(candidates)
    for combo in result:
        assert sum(combo) == target
        assert combo == sorted(combo)
        assert not Counter(combo) - available
    assert result == sorted(result)
    assert len({tuple(combo) for combo in result}) == len(result)


def test_combination_sum3_single_answer():
    assert combination_sum3(3, 7) == [[1, 2, 4]]


@pytest.mark.parametrize("k, n", [(3, 9), (2, 10), (4, 20), (4, 1), (9, 45)])
def test_combination_sum3_invariants(k, n):
    result = combination_sum3(k, n)
    for combo in result:
        assert len(combo) == k
        assert sum(combo) == n
        assert combo == sorted(set(combo))
        assert all(1 <= digit <= 9 for digit in combo)
    assert result == sorted(result)


def test_combination_sum3_all_digits():
    assert combination_sum3(9, 45) == [list(range(1, 10))]


def test_combination_sum3_impossible():
    assert combination_sum3(4, 1) == []


def test_perfect_sum_worked_example():
    assert perfect_sum([2, 3, 5, 6, 8, 10], 10) == 3


@pytest.mark.parametrize("arr", [[1, 2, 3], [2, 3, 5, 6, 8, 10], [1, 1, 1, 4]])
def test_perfect_sum_totals_cover_all_subsets(arr):
    counts = [perfect_sum(arr, total) for total in range(sum(arr) + 1)]
    assert sum(counts) == 2 ** len(arr)
    assert counts[0] == 1
    assert counts[-1] == 1


def test_perfect_sum_wraps_modulo():
    assert perfect_sum([0] * 40, 0) == 2**40 % MOD


def test_perfect_sum_unreachable():
    assert perfect_sum([2, 4, 6], 5) == 0


@pytest.mark.parametrize("arr", [[1, 2, 3], [3, 34, 4, 12, 5, 2], [6, 1, 2, 1]])
def test_is_subset_present_agrees_with_count(arr):
    for k in range(sum(arr) + 3):
        assert is_subset_present(k, arr) == (perfect_sum(arr, k) > 0)


def test_is_subset_present_empty_subset():
    assert is_subset_present(0, [5, 7]) is True


def test_is_subset_present_negative_target():
    assert is_subset_present(-1, [1, 2]) is False
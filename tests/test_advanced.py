import pytest

from puzzlekit.advanced import (
    find_duplicate,
    max_subarray,
    subarray_sum,
    trap,
    two_sum_sorted,
)

ELEVATION = [0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1]


def test_trap_example():
    assert trap(ELEVATION) == 6


def test_trap_mirror_holds_same_water():
    assert trap(ELEVATION[::-1]) == trap(ELEVATION)


def test_trap_raised_floor_holds_same_water():
    assert trap([h + 5 for h in ELEVATION]) == trap(ELEVATION)


@pytest.mark.parametrize("height", [[], [4], [1, 2, 3, 4], [4, 3, 2, 1]])
def test_trap_nothing_to_hold(height):
    assert trap(height) == 0


def test_max_subarray_example():
    assert max_subarray([-2, 1, -3, 4, -1, 2, 1, -5, 4]) == 6


def test_max_subarray_all_negative_is_largest_element():
    nums = [-8, -3, -6, -2, -5]
    assert max_subarray(nums) == max(nums)


def test_max_subarray_all_positive_is_total():
    nums = [3, 1, 4, 1, 5]
    assert max_subarray(nums) == sum(nums)


def test_max_subarray_empty():
    with pytest.raises(ValueError):
        max_subarray([])


@pytest.mark.parametrize(
    "numbers, target",
    [([2, 7, 11, 15], 9), ([2, 3, 4], 6), ([-1, 0], -1), ([1, 2, 5, 8, 13], 21)],
)
def test_two_sum_sorted_indices_hit_target(numbers, target):
    first, second = two_sum_sorted(numbers, target)
    assert 1 <= first < second <= len(numbers)
    assert numbers[first - 1] + numbers[second - 1] == target


def test_two_sum_sorted_no_pair():
    assert two_sum_sorted([1, 2, 3], 100) == []


@pytest.mark.parametrize("nums", [[1, 3, 4, 2, 2], [3, 1, 3, 4, 2], [1, 1], [2, 2, 2, 2]])
def test_find_duplicate_returns_repeated_value(nums):
    original = list(nums)
    result = find_duplicate(nums)
    assert nums.count(result) >= 2
    assert nums == original


def test_find_duplicate_empty():
    with pytest.raises(ValueError):
        find_duplicate([])


def test_subarray_sum_example():
    assert subarray_sum([1, 1, 1], 2) == 2


def test_subarray_sum_whole_positive_array_once():
    nums = [2, 4, 6, 8]
    assert subarray_sum(nums, sum(nums)) == subarray_sum(nums, nums[0] + nums[1] + nums[2] + nums[3])
    assert subarray_sum(nums, sum(nums)) == subarray_sum([sum(nums)], sum(nums))


def test_subarray_sum_no_match():
    assert subarray_sum([1, 2, 3], 100) == subarray_sum([], 100)
"""Lists and totals built from integer arrays and grids."""

from __future__ import annotations

from collections.abc import Sequence

from puzzlekit.aggregates import pivot_index


def maximum_wealth(accounts: Sequence[Sequence[int]]) -> int:
    """Return the largest row total of ``accounts``, never less than zero."""
    return max([0, *(sum(row) for row in accounts)])


def _check_permutation(nums: Sequence[int]) -> None:
    size = len(nums)
    if any(value < 0 or value >= size for value in nums):
        raise ValueError("every value must lie between 0 and len(nums) - 1")


def build_array(nums: Sequence[int]) -> list[int]:
    """Return ``[nums[nums[i]] for each i]`` as a new list.

    Raises ValueError if a value cannot be used as an index into ``nums``.
    """
    _check_permutation(nums)
    return [nums[value] for value in nums]


def build_array_in_place(nums: list[int]) -> list[int]:
    """Overwrite ``nums`` with ``nums[nums[i]]`` at each i and return it.

    Each slot briefly holds both its old and its new value, encoded as
    ``old + new * len(nums)``, so no second list is needed. Raises
    ValueError if a value cannot be used as an index into ``nums``.
    """
    _check_permutation(nums)
    size = len(nums)
    for index, value in enumerate(nums):
        nums[index] = value + (nums[value] % size) * size
    for index, value in enumerate(nums):
        nums[index] = value // size
    return nums


def get_concatenation(nums: Sequence[int]) -> list[int]:
    """Return ``nums`` followed by itself."""
    return [*nums, *nums]


def find_middle_index(nums: Sequence[int]) -> int:
    """Return the leftmost index whose left and right sums match, or -1."""
    return pivot_index(nums)


def left_right_difference(nums: Sequence[int]) -> list[int]:
    """For each index, return |sum to the left - sum to the right|."""
    left = 0
    right = sum(nums)
    result: list[int] = []
    for value in nums:
        right -= value
        result.append(abs(left - right))
        left += value
    return result
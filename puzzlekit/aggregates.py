"""Single values and flags computed from integer sequences."""

from __future__ import annotations

import heapq
from collections.abc import Sequence
from itertools import accumulate, groupby


def third_max(nums: Sequence[int]) -> int:
    """Return the third largest distinct value.

    If there are fewer than three distinct values, return the largest.
    Raises ValueError for an empty sequence.
    """
    if not nums:
        raise ValueError("nums must not be empty")
    top: list[int] = []
    for value in nums:
        if value in top:
            continue
        top.append(value)
        top.sort(reverse=True)
        del top[3:]
    return top[2] if len(top) == 3 else top[0]


def max_consecutive_ones(nums: Sequence[int]) -> int:
    """Return the length of the longest run of ones."""
    return max(
        (sum(1 for _ in run) for value, run in groupby(nums) if value == 1),
        default=0,
    )


def pivot_index(nums: Sequence[int]) -> int:
    """Return the leftmost index whose left and right sums are equal, or -1."""
    left = 0
    right = sum(nums)
    for index, value in enumerate(nums):
        right -= value
        if left == right:
            return index
        left += value
    return -1


def min_start_value(nums: Sequence[int]) -> int:
    """Return the smallest positive start that keeps every running sum >= 1."""
    return 1 - min(accumulate(nums, initial=0))


def kids_with_candies(candies: Sequence[int], extra_candies: int) -> list[bool]:
    """Tell, for each kid, whether the extra candies make them the richest.

    Raises ValueError when there are no kids.
    """
    if not candies:
        raise ValueError("candies must not be empty")
    greatest = max(candies)
    return [count + extra_candies >= greatest for count in candies]


def max_product(nums: Sequence[int]) -> int:
    """Return the largest ``(a - 1) * (b - 1)`` over two distinct elements.

    The values are expected to be positive; anything below one is treated
    as zero.
    """
    first, second = heapq.nlargest(2, [*nums, 0, 0])
    return (first - 1) * (second - 1)


def count_even_digit_numbers(nums: Sequence[int]) -> int:
    """Count the numbers whose decimal text has an even length."""
    return sum(1 for value in nums if len(str(value)) % 2 == 0)
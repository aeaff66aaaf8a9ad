"""Harder scans over integer arrays: water, subarrays, pairs and cycles."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence


def trap(height: Sequence[int]) -> int:
    """Return how much rain water the elevation map ``height`` holds."""
    left, right = 0, len(height) - 1
    left_max = right_max = 0
    water = 0
    while left < right:
        if height[left] < height[right]:
            if height[left] >= left_max:
                left_max = height[left]
            else:
                water += left_max - height[left]
            left += 1
        else:
            if height[right] >= right_max:
                right_max = height[right]
            else:
                water += right_max - height[right]
            right -= 1
    return water


def max_subarray(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run (Kadane).

    Raises ValueError for an empty sequence.
    """
    if not nums:
        raise ValueError("nums must not be empty")
    best = nums[0]
    current = 0
    for value in nums:
        current += value
        best = max(best, current)
        if current < 0:
            current = 0
    return best


def two_sum_sorted(numbers: Sequence[int], target: int) -> list[int]:
    """Return the 1-based indices of two values in a sorted sequence that sum to ``target``.

    Returns an empty list if there is no such pair.
    """
    start, end = 0, len(numbers) - 1
    while start < end:
        total = numbers[start] + numbers[end]
        if total == target:
            return [start + 1, end + 1]
        if total > target:
            end -= 1
        else:
            start += 1
    return []


def find_duplicate(nums: Sequence[int]) -> int:
    """Return the repeated value among ``n + 1`` values drawn from ``1..n``.

    Follows values as indices and finds the cycle entry with Floyd's
    method; the input is left untouched. Raises ValueError for an empty
    sequence.
    """
    if not nums:
        raise ValueError("nums must not be empty")
    slow = fast = nums[0]
    while True:
        slow = nums[slow]
        fast = nums[nums[fast]]
        if slow == fast:
            break
    slow = nums[0]
    while slow != fast:
        slow = nums[slow]
        fast = nums[fast]
    return slow


def subarray_sum(nums: Sequence[int], k: int) -> int:
    """Count the contiguous runs of ``nums`` that sum to ``k``."""
    seen: Counter[int] = Counter({0: 1})
    prefix = 0
    count = 0
    for value in nums:
        prefix += value
        count += seen[prefix - k]
        seen[prefix] += 1
    return count
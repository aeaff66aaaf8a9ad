"""Single-pass and binary-search scans over integer sequences."""

from __future__ import annotations

from collections.abc import Sequence


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in a sorted sequence.

    If it is absent, return the index at which it would be inserted to
    keep the sequence sorted.
    """
    start, end = 0, len(nums) - 1
    while start <= end:
        mid = (start + end) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] > target:
            end = mid - 1
        else:
            start = mid + 1
    return end + 1


def max_profit(prices: Sequence[int]) -> int:
    """Return the best gain from one buy followed by a later sale.

    Raises ValueError for an empty price list.
    """
    if not prices:
        raise ValueError("prices must not be empty")
    lowest = prices[0]
    best = 0
    for price in prices[1:]:
        lowest = min(lowest, price)
        best = max(best, price - lowest)
    return best


def majority_element(nums: Sequence[int]) -> int:
    """Return the value that occurs more than half the time.

    Uses Boyer-Moore voting; the result is only meaningful when such a
    value exists. Raises ValueError for an empty sequence.
    """
    if not nums:
        raise ValueError("nums must not be empty")
    candidate = nums[0]
    count = 1
    for value in nums[1:]:
        if count == 0:
            candidate = value
            count = 1
        elif value == candidate:
            count += 1
        else:
            count -= 1
    return candidate
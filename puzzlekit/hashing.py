"""Lookups on integer sequences backed by hash tables."""

from __future__ import annotations

from collections.abc import Sequence


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return the indices of two distinct elements that add up to ``target``.

    The earlier index comes first. If no such pair exists, an empty list
    is returned.
    """
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        complement = target - value
        if complement in seen:
            return [seen[complement], index]
        seen[value] = index
    return []


def contains_duplicate(nums: Sequence[int]) -> bool:
    """Return True if any value occurs at least twice."""
    seen: set[int] = set()
    for value in nums:
        if value in seen:
            return True
        seen.add(value)
    return False


def contains_nearby_duplicate(nums: Sequence[int], k: int) -> bool:
    """Return True if two equal values sit at most ``k`` positions apart.

    Tracks the last index at which each value was seen.
    """
    last_seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        if value in last_seen and index - last_seen[value] <= k:
            return True
        last_seen[value] = index
    return False


def contains_nearby_duplicate_window(nums: Sequence[int], k: int) -> bool:
    """Return True if two equal values sit at most ``k`` positions apart.

    Keeps a sliding window of the last ``k`` values. A negative ``k``
    never shrinks the window, so any duplicate at all is reported.
    """
    window: set[int] = set()
    for index, value in enumerate(nums):
        if value in window:
            return True
        window.add(value)
        if k >= 0 and len(window) > k:
            window.discard(nums[index - k])
    return False
"""Integer sequences built from other integer sequences."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from itertools import accumulate, combinations


def find_disappeared_numbers(nums: Sequence[int]) -> list[int]:
    """Return, in ascending order, the values of ``1..len(nums)`` not present.

    Raises ValueError if a value lies outside that range.
    """
    size = len(nums)
    present = set(nums)
    if any(value < 1 or value > size for value in present):
        raise ValueError("every value must lie between 1 and len(nums)")
    return [value for value in range(1, size + 1) if value not in present]


def sorted_squares(nums: Sequence[int]) -> list[int]:
    """Return the squares of a sorted sequence, in non-decreasing order."""
    left, right = 0, len(nums) - 1
    descending: list[int] = []
    while left <= right:
        if abs(nums[left]) > abs(nums[right]):
            descending.append(nums[left] * nums[left])
            left += 1
        else:
            descending.append(nums[right] * nums[right])
            right -= 1
    descending.reverse()
    return descending


def replace_elements(arr: Sequence[int]) -> list[int]:
    """Replace each element with the greatest one to its right; the last gets -1."""
    result: list[int] = []
    greatest = -1
    for value in reversed(arr):
        result.append(greatest)
        greatest = max(greatest, value)
    result.reverse()
    return result


def shuffle(nums: Sequence[int], n: int) -> list[int]:
    """Interleave ``[x1..xn, y1..yn]`` into ``[x1, y1, ..., xn, yn]``.

    Raises ValueError if ``nums`` holds fewer than ``2 * n`` values.
    """
    if n < 0 or len(nums) < 2 * n:
        raise ValueError("nums must hold at least 2 * n values")
    return [value for pair in zip(nums[:n], nums[n:2 * n]) for value in pair]


def running_sum(nums: Sequence[int]) -> list[int]:
    """Return the running totals of ``nums``."""
    return list(accumulate(nums))


def count_good_pairs(nums: Sequence[int]) -> int:
    """Count index pairs ``i < j`` with equal values, from value frequencies."""
    return sum(count * (count - 1) // 2 for count in Counter(nums).values())


def count_good_pairs_bruteforce(nums: Sequence[int]) -> int:
    """Count index pairs ``i < j`` with equal values by checking every pair."""
    return sum(1 for a, b in combinations(nums, 2) if a == b)
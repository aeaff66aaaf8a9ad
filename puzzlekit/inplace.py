"""In-place rearrangements of integer lists."""

from __future__ import annotations

from collections.abc import Sequence


def remove_duplicates(nums: list[int]) -> int:
    """Compact a sorted list so its unique values lead; return their count.

    Unique values are swapped to the front, so the tail keeps the
    displaced duplicates.
    """
    if not nums:
        return 0
    last = 0
    for index in range(1, len(nums)):
        if nums[index] != nums[last]:
            last += 1
            nums[index], nums[last] = nums[last], nums[index]
    return last + 1


def remove_duplicates_two_pointers(nums: list[int]) -> int:
    """Compact a sorted list so its unique values lead; return their count.

    Unique values are copied forward over the duplicates.
    """
    if not nums:
        return 0
    last = 0
    for index in range(1, len(nums)):
        if nums[index] != nums[last]:
            last += 1
            nums[last] = nums[index]
    return last + 1


def remove_element(nums: list[int], val: int) -> int:
    """Move every value other than ``val`` to the front, keeping order.

    Returns how many such values there are.
    """
    write = 0
    for index in range(len(nums)):
        value = nums[index]
        if value != val:
            nums[write] = value
            write += 1
    return write


def move_zeroes(nums: list[int]) -> None:
    """Move all zeroes to the end, keeping the order of the other values."""
    write = 0
    for index in range(len(nums)):
        if nums[index] != 0:
            if index != write:
                nums[write], nums[index] = nums[index], nums[write]
            write += 1


def merge_sorted(nums1: list[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge the first ``n`` values of ``nums2`` into ``nums1``.

    ``nums1`` holds ``m`` sorted values followed by room for ``n`` more.
    The merge fills it from the back so no extra storage is needed.
    """
    i, j, k = m - 1, n - 1, m + n - 1
    while j >= 0:
        if i >= 0 and nums1[i] > nums2[j]:
            nums1[k] = nums1[i]
            i -= 1
        else:
            nums1[k] = nums2[j]
            j -= 1
        k -= 1


def plus_one(digits: Sequence[int]) -> list[int]:
    """Add one to a number written as a list of decimal digits."""
    result: list[int] = []
    carry = 1
    for digit in reversed(digits):
        carry, digit = divmod(digit + carry, 10)
        result.append(digit)
    if carry > 0:
        result.append(carry)
    result.reverse()
    return result
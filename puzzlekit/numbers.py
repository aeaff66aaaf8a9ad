"""Integer puzzles: primes and decimal digits."""

from __future__ import annotations

from collections.abc import Iterable
from math import isqrt, prod


def count_primes(n: int) -> int:
    """Return how many primes are strictly less than ``n`` (sieve of Eratosthenes)."""
    if n <= 2:
        return 0
    sieve = bytearray([1]) * n
    sieve[0] = sieve[1] = 0
    for candidate in range(2, isqrt(n - 1) + 1):
        if sieve[candidate]:
            sieve[candidate * candidate::candidate] = bytes(
                len(range(candidate * candidate, n, candidate))
            )
    return sum(sieve)


def _digits(n: int) -> list[int]:
    """Return the decimal digits of a positive ``n``; none for ``n <= 0``."""
    return [int(ch) for ch in str(n)] if n > 0 else []


def subtract_product_and_sum(n: int) -> int:
    """Return the product of the digits of ``n`` minus their sum.

    A value of zero or below has no digits, giving ``1 - 0``.
    """
    digits = _digits(n)
    return prod(digits) - sum(digits)


def count_even_digit_numbers_math(nums: Iterable[int]) -> int:
    """Count the numbers with an even number of digits.

    Digits are counted by repeated division, so zero and negative values
    have no digits and count as even.
    """
    total = 0
    for value in nums:
        digits = 0
        while value > 0:
            value //= 10
            digits += 1
        if digits % 2 == 0:
            total += 1
    return total
import pytest

from puzzlekit.aggregates import count_even_digit_numbers
from puzzlekit.numbers import (
    count_even_digit_numbers_math,
    count_primes,
    subtract_product_and_sum,
)


def test_count_primes_example():
    assert count_primes(10) == 4


def test_count_primes_below_hundred():
    assert count_primes(100) == 25


@pytest.mark.parametrize("n", [-5, 0, 1, 2])
def test_count_primes_small(n):
    assert count_primes(n) == 0


def test_count_primes_steps_by_at_most_one():
    counts = [count_primes(n) for n in range(0, 200)]
    steps = [b - a for a, b in zip(counts, counts[1:])]
    assert set(steps) <= {0, 1}


def test_count_primes_steps_only_past_primes():
    # count_primes(p + 1) exceeds count_primes(p) exactly when p is prime.
    assert count_primes(97) == 24
    assert count_primes(98) == count_primes(97) + 1
    assert count_primes(100) == count_primes(98)


def test_subtract_product_and_sum_example():
    assert subtract_product_and_sum(234) == 15


@pytest.mark.parametrize("digit", range(1, 10))
def test_subtract_product_and_sum_single_digit(digit):
    assert subtract_product_and_sum(digit) == 0


def test_subtract_product_and_sum_digit_order_irrelevant():
    assert subtract_product_and_sum(4421) == subtract_product_and_sum(1244)


def test_subtract_product_and_sum_with_zero_digit_is_negative_sum():
    assert subtract_product_and_sum(405) == -(4 + 0 + 5)


def test_count_even_digit_numbers_math_example_matches_text_count():
    nums = [12, 345, 2, 6, 7896]
    assert count_even_digit_numbers_math(nums) == count_even_digit_numbers(nums)


def test_count_even_digit_numbers_math_positive_agrees_with_text():
    nums = [1, 10, 99, 100, 1000, 55555, 123456, 7]
    assert count_even_digit_numbers_math(nums) == count_even_digit_numbers(nums)


def test_count_even_digit_numbers_math_zero_has_no_digits():
    assert count_even_digit_numbers_math([0]) == 1


def test_count_even_digit_numbers_math_accepts_iterators():
    nums = [12, 345, 2, 6, 7896]
    assert count_even_digit_numbers_math(iter(nums)) == count_even_digit_numbers_math(nums)
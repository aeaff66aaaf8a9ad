# puzzlekit

Compact solutions to classic interview-style puzzles over integer lists,
numbers and strings. Most run in a single pass; a few use binary search, a
sieve, or (where named so) check every pair. Pure Python, no runtime
dependencies.

## Installation

```
pip install puzzlekit
```

## Modules

| Module | Functions |
| --- | --- |
| `puzzlekit.hashing` | `two_sum`, `contains_duplicate`, `contains_nearby_duplicate`, `contains_nearby_duplicate_window` |
| `puzzlekit.inplace` | `remove_duplicates`, `remove_duplicates_two_pointers`, `remove_element`, `move_zeroes`, `merge_sorted`, `plus_one` |
| `puzzlekit.scanning` | `search_insert`, `max_profit`, `majority_element` |
| `puzzlekit.aggregates` | `third_max`, `max_consecutive_ones`, `pivot_index`, `min_start_value`, `kids_with_candies`, `max_product`, `count_even_digit_numbers` |
| `puzzlekit.transforms` | `find_disappeared_numbers`, `sorted_squares`, `replace_elements`, `shuffle`, `running_sum`, `count_good_pairs`, `count_good_pairs_bruteforce` |
| `puzzlekit.construction` | `maximum_wealth`, `build_array`, `build_array_in_place`, `get_concatenation`, `find_middle_index`, `left_right_difference` |
| `puzzlekit.advanced` | `trap`, `max_subarray`, `two_sum_sorted`, `find_duplicate`, `subarray_sum` |
| `puzzlekit.numbers` | `count_primes`, `subtract_product_and_sum`, `count_even_digit_numbers_math` |
| `puzzlekit.text` | `longest_common_prefix`, `is_palindrome`, `reverse_string`, `defang_ip_address`, `interpret`, `final_value_after_operations`, `most_words_found`, `largest_good_integer`, `find_words_containing` |

## Which functions change their input

These modify the list you pass in:

- `remove_duplicates`, `remove_duplicates_two_pointers` and `remove_element`
  move the kept values to the front and return how many there are.
- `move_zeroes` and `merge_sorted` rearrange the list and return `None`.
- `build_array_in_place` overwrites the list and returns it.
- `reverse_string` reverses a list of characters and returns `None`.

Everything else, including `plus_one`, leaves its arguments alone and returns
a new value.

## Errors

Functions that need at least one element raise `ValueError` on empty input:
`max_profit`, `majority_element`, `third_max`, `kids_with_candies`,
`max_subarray` and `find_duplicate`. `find_disappeared_numbers`,
`build_array` and `build_array_in_place` raise `ValueError` when a value is
out of range, and `shuffle` does when the list holds fewer than `2 * n`
values. `two_sum` and `two_sum_sorted` return an empty list when no pair adds
up to the target.

## Examples

```python
from puzzlekit.hashing import two_sum
from puzzlekit.advanced import trap
from puzzlekit.numbers import count_primes
from puzzlekit.text import interpret, longest_common_prefix

two_sum([2, 7, 11, 15], 9)                       # [0, 1]
trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])       # 6
count_primes(10)                                 # 4
interpret("G()(al)")                             # "Goal"
longest_common_prefix(["flower", "flow", "flight"])  # "fl"
```

```python
from puzzlekit.inplace import remove_duplicates

nums = [0, 0, 1, 1, 1, 2, 2, 3, 3, 4]
k = remove_duplicates(nums)
nums[:k]                                         # [0, 1, 2, 3, 4]
```

## What it does not do

puzzlekit is a library of functions only. It has no command-line tool; call
the functions from your own code.

## Running the tests

```
pip install "puzzlekit[test]"
pytest
```
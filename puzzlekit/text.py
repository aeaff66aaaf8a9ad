"""Small puzzles on strings and lists of strings."""

from __future__ import annotations

import string
from collections.abc import Iterable, Sequence

_ALNUM = frozenset(string.ascii_letters + string.digits)


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Return the longest prefix shared by every string, or "" if there is none."""
    if not strs:
        return ""
    prefix = strs[0]
    for text in strs[1:]:
        length = 0
        for a, b in zip(prefix, text):
            if a != b:
                break
            length += 1
        prefix = prefix[:length]
    return prefix


def is_palindrome(s: str) -> bool:
    """Tell whether ``s`` reads the same both ways.

    Only ASCII letters and digits count, and case is ignored.
    """
    cleaned = [ch.lower() for ch in s if ch in _ALNUM]
    return cleaned == cleaned[::-1]


def reverse_string(s: list[str]) -> None:
    """Reverse a list of characters in place."""
    left, right = 0, len(s) - 1
    while left < right:
        s[left], s[right] = s[right], s[left]
        left += 1
        right -= 1


def defang_ip_address(address: str) -> str:
    """Replace every "." in ``address`` with "[.]"."""
    return address.replace(".", "[.]")


def interpret(command: str) -> str:
    """Read a Goal Parser command: "G" is G, "()" is o and "(al)" is al.

    Characters that start none of these tokens are skipped.
    """
    parts: list[str] = []
    index = 0
    while index < len(command):
        if command[index] == "G":
            parts.append("G")
            index += 1
        elif command.startswith("()", index):
            parts.append("o")
            index += 2
        elif command.startswith("(al)", index):
            parts.append("al")
            index += 4
        else:
            index += 1
    return "".join(parts)


def final_value_after_operations(operations: Iterable[str]) -> int:
    """Apply "++X", "X++", "--X" and "X--" to a value that starts at zero.

    The second character decides: "+" adds one, anything else subtracts one.
    """
    return sum(1 if op[1:2] == "+" else -1 for op in operations)


def most_words_found(sentences: Iterable[str]) -> int:
    """Return the most words in any sentence, words being split by single spaces."""
    return max((sentence.count(" ") + 1 for sentence in sentences), default=0)


def largest_good_integer(num: str) -> str:
    """Return the largest three-character run of one repeated digit, or ""."""
    return max(
        (
            num[index:index + 3]
            for index in range(len(num) - 2)
            if num[index] == num[index + 1] == num[index + 2]
        ),
        default="",
    )


def find_words_containing(words: Sequence[str], x: str) -> list[int]:
    """Return the indices of the words that contain the character ``x``."""
    return [index for index, word in enumerate(words) if x in word]
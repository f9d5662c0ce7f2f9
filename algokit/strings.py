"""Algorithms over single strings and digit strings."""

from __future__ import annotations

import heapq
from collections import Counter
from functools import cmp_to_key
from itertools import groupby, islice
from typing import Iterable, Sequence

__all__ = [
    "add_spaces",
    "is_circular_sentence",
    "count_consistent_strings",
    "make_fancy_string",
    "min_changes",
    "min_length",
    "check_inclusion",
    "rotate_string",
    "minimum_steps",
    "shortest_palindrome",
    "take_characters",
    "largest_number",
    "longest_diverse_string",
    "maximum_swap",
]

_REMOVABLE_PAIRS = {"B": "A", "D": "C"}


def add_spaces(s: str, spaces: Sequence[int]) -> str:
    """Insert a space before each character whose index is listed in ``spaces``.

    ``spaces`` is expected in increasing order; indices past the end are ignored.
    """
    pending = iter(spaces)
    target = next(pending, None)
    pieces: list[str] = []
    for index, ch in enumerate(s):
        if target is not None and index == target:
            pieces.append(" ")
            target = next(pending, None)
        pieces.append(ch)
    return "".join(pieces)


def is_circular_sentence(sentence: str) -> bool:
    """Tell whether each word ends with the letter the next one starts with, cyclically."""
    if not sentence:
        raise ValueError("sentence must not be empty")
    if sentence[0] != sentence[-1]:
        return False
    return all(
        before == after
        for before, middle, after in zip(sentence, sentence[1:], sentence[2:])
        if middle == " "
    )


def count_consistent_strings(allowed: str, words: Iterable[str]) -> int:
    """Count the words made only of characters from ``allowed``."""
    allowed_set = set(allowed)
    return sum(1 for word in words if set(word) <= allowed_set)


def make_fancy_string(s: str) -> str:
    """Drop characters so that no three consecutive characters are equal."""
    return "".join(ch * min(len(list(run)), 2) for ch, run in groupby(s))


def min_changes(s: str) -> int:
    """Count the flips needed so that every aligned pair of characters is equal."""
    return sum(1 for first, second in zip(s[::2], s[1::2]) if first != second)


def min_length(s: str) -> int:
    """Length left after repeatedly removing the substrings "AB" and "CD"."""
    stack: list[str] = []
    for ch in s:
        opener = _REMOVABLE_PAIRS.get(ch)
        if opener is not None and stack and stack[-1] == opener:
            stack.pop()
        else:
            stack.append(ch)
    return len(stack)


def check_inclusion(s1: str, s2: str) -> bool:
    """Tell whether some permutation of ``s1`` is a substring of ``s2``."""
    width = len(s1)
    if width > len(s2):
        return False
    wanted = Counter(s1)
    window = Counter(s2[:width])
    if window == wanted:
        return True
    for outgoing, incoming in zip(s2, islice(s2, width, None)):
        window[outgoing] -= 1
        if not window[outgoing]:
            del window[outgoing]
        window[incoming] += 1
        if window == wanted:
            return True
    return False


def rotate_string(s: str, goal: str) -> bool:
    """Tell whether ``goal`` is a rotation of ``s``."""
    return len(s) == len(goal) and goal in s + s


def minimum_steps(s: str) -> int:
    """Adjacent swaps needed to move all '0' characters before all '1' characters."""
    steps = 0
    ones_seen = 0
    for ch in s:
        if ch == "1":
            ones_seen += 1
        elif ch == "0":
            steps += ones_seen
    return steps


def shortest_palindrome(s: str) -> str:
    """Shortest palindrome made by adding characters in front of ``s``."""
    reversed_s = s[::-1]
    for cut in range(len(s)):
        if s.startswith(reversed_s[cut:]):
            return reversed_s[:cut] + s
    return reversed_s + s


def take_characters(s: str, k: int) -> int:
    """Fewest characters taken from both ends to hold at least ``k`` of each of a, b, c.

    Returns -1 when the whole string does not hold enough of some letter.
    """
    counts = Counter(s)
    letters = "abc"
    if any(counts[letter] < k for letter in letters):
        return -1

    def short() -> bool:
        return any(counts[letter] < k for letter in letters)

    left = 0
    kept = 0
    for right, ch in enumerate(s):
        counts[ch] -= 1
        while left <= right and short():
            counts[s[left]] += 1
            left += 1
        kept = max(kept, right - left + 1)
    return len(s) - kept


def _concat_order(a: str, b: str) -> int:
    if a + b > b + a:
        return -1
    if a + b < b + a:
        return 1
    return 0


def largest_number(nums: Iterable[int]) -> str:
    """Largest number, as a string, formed by concatenating all of ``nums``."""
    pieces = sorted((str(num) for num in nums), key=cmp_to_key(_concat_order))
    result = "".join(pieces)
    if result.startswith("0"):
        return "0"
    return result


def longest_diverse_string(a: int, b: int, c: int) -> str:
    """Longest string of at most a 'a', b 'b', c 'c' with no letter three times in a row."""
    heap = [(-count, -ord(ch), ch) for count, ch in ((a, "a"), (b, "b"), (c, "c")) if count > 0]
    heapq.heapify(heap)
    result: list[str] = []
    while heap:
        count, rank, ch = heapq.heappop(heap)
        if len(result) >= 2 and result[-1] == ch and result[-2] == ch:
            if not heap:
                break
            other_count, other_rank, other_ch = heapq.heappop(heap)
            result.append(other_ch)
            if other_count + 1 < 0:
                heapq.heappush(heap, (other_count + 1, other_rank, other_ch))
            heapq.heappush(heap, (count, rank, ch))
        else:
            result.append(ch)
            if count + 1 < 0:
                heapq.heappush(heap, (count + 1, rank, ch))
    return "".join(result)


def maximum_swap(num: int) -> int:
    """Largest number reachable by swapping at most two digits of ``num``."""
    digits = list(str(num))
    max_right = [0] * len(digits)
    best = len(digits) - 1
    for index in reversed(range(len(digits))):
        if digits[index] > digits[best]:
            best = index
        max_right[index] = best
    for index, (digit, target) in enumerate(zip(digits, max_right)):
        if digits[target] > digit:
            digits[index], digits[target] = digits[target], digits[index]
            break
    return int("".join(digits))
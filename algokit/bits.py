"""Bitwise algorithms over integers and integer arrays."""

from __future__ import annotations

from itertools import accumulate
from operator import xor
from typing import Iterable, Sequence

__all__ = [
    "longest_subarray",
    "get_maximum_xor",
    "min_end",
    "min_bit_flips",
    "minimum_subarray_length",
    "xor_queries",
]

_WORD_BITS = 32
_WORD_MASK = (1 << _WORD_BITS) - 1


def longest_subarray(nums: Iterable[int]) -> int:
    """Length of the longest run of the maximum value (the largest bitwise AND)."""
    max_value = 0
    streak = 0
    best = 0
    for num in nums:
        if num > max_value:
            max_value = num
            best = 0
            streak = 0
        streak = streak + 1 if num == max_value else 0
        best = max(best, streak)
    return best


def get_maximum_xor(nums: Sequence[int], maximum_bit: int) -> list[int]:
    """For each prefix, longest first, the k below 2**maximum_bit maximising prefix XOR k."""
    total = 0
    for num in nums:
        total ^= num
    mask = (1 << maximum_bit) - 1
    answers: list[int] = []
    for num in reversed(nums):
        answers.append(total ^ mask)
        total ^= num
    return answers


def min_end(n: int, x: int) -> int:
    """Smallest last element of a strictly increasing n-array whose AND equals x."""
    num = x
    for _ in range(n - 1):
        num = (num + 1) | x
    return num


def min_bit_flips(start: int, goal: int) -> int:
    """Bits to flip to turn ``start`` into ``goal`` as 32-bit words."""
    return ((start ^ goal) & _WORD_MASK).bit_count()


class _BitCounter:
    """Per-bit counts of the numbers in a sliding window."""

    def __init__(self) -> None:
        self._counts = [0] * _WORD_BITS

    def add(self, number: int, delta: int) -> None:
        for bit in range(_WORD_BITS):
            if number >> bit & 1:
                self._counts[bit] += delta

    @property
    def value(self) -> int:
        return sum(1 << bit for bit, count in enumerate(self._counts) if count > 0)


def minimum_subarray_length(nums: Sequence[int], k: int) -> int:
    """Length of the shortest subarray whose OR is at least ``k``, or -1."""
    window = _BitCounter()
    best: int | None = None
    left = 0
    for right, num in enumerate(nums):
        window.add(num, 1)
        while left <= right and window.value >= k:
            length = right - left + 1
            best = length if best is None else min(best, length)
            window.add(nums[left], -1)
            left += 1
    return -1 if best is None else best


def xor_queries(arr: Sequence[int], queries: Iterable[Sequence[int]]) -> list[int]:
    """XOR of ``arr[left..right]`` for each ``(left, right)`` query."""
    prefix = list(accumulate(arr, xor, initial=0))
    return [prefix[right + 1] ^ prefix[left] for left, right in queries]
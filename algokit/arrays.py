"""Algorithms over integer arrays."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Iterator, Sequence

__all__ = [
    "min_patches",
    "divide_players",
    "longest_square_streak",
    "min_subarray",
    "maximum_beauty",
    "maximum_subarray_sum",
    "minimized_maximum",
    "minimum_mountain_removals",
    "array_rank_transform",
    "find_length_of_shortest_subarray",
    "lexical_order",
]

_INT_MAX = 2**31 - 1


def min_patches(nums: Iterable[int], n: int) -> int:
    """Fewest numbers to add to sorted ``nums`` so that every value in 1..n is a subset sum."""
    reach = 0
    patches = 0
    values = iter(nums)
    pending = next(values, None)
    while reach < n:
        if pending is not None and pending <= reach + 1:
            reach += pending
            pending = next(values, None)
        else:
            reach += reach + 1
            patches += 1
    return patches


def divide_players(skill: Iterable[int]) -> int:
    """Sum of team products when players pair into teams of equal total skill, or -1."""
    ordered = sorted(skill)
    if not ordered:
        raise ValueError("skill must not be empty")
    target = ordered[0] + ordered[-1]
    half = len(ordered) // 2
    chemistry = 0
    for low, high in zip(ordered[:half], reversed(ordered[half:])):
        if low + high != target:
            return -1
        chemistry += low * high
    return chemistry


def longest_square_streak(nums: Sequence[int]) -> int:
    """Length of the longest chain where each value is the square of the previous, or -1.

    Squares above the 32-bit signed limit are not followed.
    """
    if any(num <= 0 for num in nums):
        raise ValueError("values must be positive")
    present = set(nums)
    best = 0
    for num in nums:
        length = 0
        while num <= _INT_MAX // num and num * num in present:
            num *= num
            length += 1
        best = max(best, length)
    return best + 1 if best else -1


def min_subarray(nums: Sequence[int], p: int) -> int:
    """Shortest subarray to remove so the remaining sum is divisible by ``p``, or -1.

    Removing the whole array is not allowed.
    """
    target = sum(nums) % p
    if target == 0:
        return 0
    size = len(nums)
    last_seen = {0: -1}
    best = size
    current = 0
    for index, num in enumerate(nums):
        current = (current + num) % p
        needed = (current - target) % p
        if needed in last_seen:
            best = min(best, index - last_seen[needed])
        last_seen[current] = index
    return -1 if best == size else best


def maximum_beauty(nums: Iterable[int], k: int) -> int:
    """Most equal values reachable when each value may move by at most ``k``."""
    intervals = sorted((num - k, num + k) for num in nums)
    ends: deque[int] = deque()
    best = 0
    for start, end in intervals:
        while ends and ends[0] < start:
            ends.popleft()
        ends.append(end)
        best = max(best, len(ends))
    return best


def maximum_subarray_sum(nums: Sequence[int], k: int) -> int:
    """Largest sum of a length-``k`` subarray with distinct values, or 0."""
    window: set[int] = set()
    total = 0
    left = 0
    best = 0
    for right, num in enumerate(nums):
        while num in window:
            total -= nums[left]
            window.discard(nums[left])
            left += 1
        total += num
        window.add(num)
        if right - left + 1 == k:
            best = max(best, total)
            total -= nums[left]
            window.discard(nums[left])
            left += 1
    return best


def minimized_maximum(n: int, quantities: Sequence[int]) -> int:
    """Smallest per-store maximum when distributing ``quantities`` over ``n`` stores."""
    if not quantities:
        raise ValueError("quantities must not be empty")

    def fits(limit: int) -> bool:
        return sum(-(-quantity // limit) for quantity in quantities) <= n

    low, high = 1, max(quantities)
    answer = 0
    while low <= high:
        mid = (low + high) // 2
        if fits(mid):
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    return answer


def _increasing_lengths(values: Sequence[int]) -> list[int]:
    lengths: list[int] = []
    for index, value in enumerate(values):
        longest = max(
            (length for length, earlier in zip(lengths, values[:index]) if earlier < value),
            default=0,
        )
        lengths.append(longest + 1)
    return lengths


def minimum_mountain_removals(nums: Sequence[int]) -> int:
    """Fewest removals leaving a strictly rising then strictly falling sequence."""
    size = len(nums)
    rising = _increasing_lengths(nums)
    falling = _increasing_lengths(nums[::-1])[::-1]
    return min(
        (size - up - down + 1 for up, down in zip(rising, falling) if up > 1 and down > 1),
        default=size,
    )


def array_rank_transform(arr: Iterable[int]) -> list[int]:
    """Replace each value by its 1-based rank among the distinct values."""
    values = list(arr)
    ranks = {value: rank for rank, value in enumerate(sorted(set(values)), start=1)}
    return [ranks[value] for value in values]


def find_length_of_shortest_subarray(arr: Sequence[int]) -> int:
    """Length of the shortest subarray whose removal leaves ``arr`` non-decreasing."""
    size = len(arr)
    if size <= 1:
        return 0
    right = size - 1
    while right > 0 and arr[right] >= arr[right - 1]:
        right -= 1
    if right == 0:
        return 0
    best = right
    left = 0
    while left < right and (left == 0 or arr[left] >= arr[left - 1]):
        while right < size and arr[left] > arr[right]:
            right += 1
        best = min(best, right - left - 1)
        left += 1
    return best


def _walk(current: int, limit: int) -> Iterator[int]:
    yield current
    for digit in range(10):
        following = current * 10 + digit
        if following > limit:
            return
        yield from _walk(following, limit)


def lexical_order(n: int) -> list[int]:
    """The numbers 1..n in lexicographic order of their decimal form."""
    return [num for start in range(1, 10) if start <= n for num in _walk(start, n)]
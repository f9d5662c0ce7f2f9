"""Greedy algorithms driven by priority queues."""

from __future__ import annotations

import heapq
from collections import deque
from typing import Iterable, Sequence

__all__ = ["find_maximized_capital", "min_groups", "max_k_elements", "smallest_range"]

_INT_MAX = 2**31 - 1


def find_maximized_capital(
    k: int, w: int, profits: Sequence[int], capital: Sequence[int]
) -> int:
    """Final capital after finishing at most ``k`` affordable projects, best profit first."""
    projects = deque(sorted(zip(capital, profits)))
    available: list[int] = []
    for _ in range(k):
        while projects and projects[0][0] <= w:
            heapq.heappush(available, -projects.popleft()[1])
        if not available:
            break
        w -= heapq.heappop(available)
    return w
    

def min_groups(intervals: Iterable[Sequence[int]]) -> int:
    """Fewest groups so that no two inclusive intervals in a group intersect."""
    ends: list[int] = []
    for start, end in sorted(intervals):
        if ends and ends[0] < start:
            heapq.heapreplace(ends, end)
        else:
            heapq.heappush(ends, end)
    return len(ends)


def max_k_elements(nums: Iterable[int], k: int) -> int:
    """Score of ``k`` rounds of taking the largest value and replacing it by its third, rounded up."""
    heap = [-num for num in nums]
    if k > 0 and not heap:
        raise ValueError("nums must not be empty")
    heapq.heapify(heap)
    score = 0
    for _ in range(k):
        largest = -heap[0]
        score += largest
        reduced = -(-largest // 3)
        heapq.heapreplace(heap, -reduced)
    return score


def smallest_range(nums: Sequence[Sequence[int]]) -> list[int]:
    """Smallest ``[low, high]`` holding at least one value from each sorted list."""
    if not nums or any(not row for row in nums):
        raise ValueError("every list must be non-empty")
    heap = [(row[0], index, 0) for index, row in enumerate(nums)]
    heapq.heapify(heap)
    high = max(row[0] for row in nums)
    start, end = 0, _INT_MAX
    while len(heap) == len(nums):
        low, row, col = heapq.heappop(heap)
        if high - low < end - start:
            start, end = low, high
        if col + 1 < len(nums[row]):
            following = nums[row][col + 1]
            heapq.heappush(heap, (following, row, col + 1))
            high = max(high, following)
    return [start, end]
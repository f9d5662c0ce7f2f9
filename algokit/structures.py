"""Small data structures: a bounded stack, a booking calendar and a linked list."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator

__all__ = ["CustomStack", "MyCalendar", "ListNode", "insert_greatest_common_divisors"]


class CustomStack:
    """Stack that ignores pushes beyond ``max_size`` items."""

    def __init__(self, max_size: int) -> None:
        self.max_size = max_size
        self._items: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, x: int) -> None:
        """Push ``x`` unless the stack is full."""
        if len(self._items) < self.max_size:
            self._items.append(x)

    def pop(self) -> int:
        """Pop the top item, or return -1 when the stack is empty."""
        return self._items.pop() if self._items else -1


class MyCalendar:
    """Calendar of half-open ``[start, end)`` bookings that never overlap."""

    def __init__(self) -> None:
        self._bookings: list[tuple[int, int]] = []

    def book(self, start: int, end: int) -> bool:
        """Add the booking if it overlaps no existing one; tell whether it was added."""
        if any(begin < end and start < finish for begin, finish in self._bookings):
            return False
        self._bookings.append((start, end))
        return True


@dataclass
class ListNode:
    """Node of a singly linked list."""

    val: int = 0
    next: ListNode | None = None

    @classmethod
    def from_values(cls, values: Iterable[int]) -> ListNode | None:
        """Build a list from ``values``; None when there are none."""
        head: ListNode | None = None
        for value in reversed(list(values)):
            head = cls(value, head)
        return head

    def __iter__(self) -> Iterator[int]:
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next

    def to_list(self) -> list[int]:
        """Values from this node to the end of the list."""
        return list(self)


def insert_greatest_common_divisors(head: ListNode | None) -> ListNode | None:
    """Insert between each pair of adjacent nodes a node holding their GCD."""
    node = head
    while node is not None and node.next is not None:
        following = node.next
        node.next = ListNode(math.gcd(node.val, following.val), following)
        node = following
    return head
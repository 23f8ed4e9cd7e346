"""Singly linked list of digits and digit-wise addition."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import zip_longest


@dataclass
class ListNode:
    """A node of a singly linked list."""

    val: int
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


def add_two_numbers(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Add two numbers stored as lists of digits, least significant first."""
    digits: list[int] = []
    carry = 0
    for a, b in zip_longest(l1 or (), l2 or (), fillvalue=0):
        carry, digit = divmod(a + b + carry, 10)
        digits.append(digit)
    if carry:
        digits.append(carry)
    return ListNode.from_values(digits)
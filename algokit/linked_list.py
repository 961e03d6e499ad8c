"""Singly linked lists of decimal digits and their arithmetic."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass
class Node:
    """A node of a singly linked list."""

    data: int
    next: Node | None = None

    def __iter__(self) -> Iterator[int]:
        node: Node | None = self
        while node is not None:
            yield node.data
            node = node.next


def from_values(values: Iterable[int]) -> Node | None:
    """Build a linked list holding ``values`` in order; empty input gives None."""
    head: Node | None = None
    tail: Node | None = None
    for value in values:
        node = Node(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def to_values(head: Node | None) -> list[int]:
    """Return the data of every node from ``head`` onwards."""
    return [] if head is None else list(head)


def reverse_list(head: Node | None) -> Node | None:
    """Reverse the list in place and return its new head."""
    previous: Node | None = None
    node = head
    while node is not None:
        node.next, previous, node = previous, node, node.next
    return previous


def add_two_lists(first: Node | None, second: Node | None) -> Node | None:
    """Add two numbers stored least significant digit first.

    The result is a new list, also least significant digit first.
    """
    digits: list[int] = []
    carry = 0
    while first is not None or second is not None:
        total = carry
        if first is not None:
            total += first.data
            first = first.next
        if second is not None:
            total += second.data
            second = second.next
        carry = 1 if total >= 10 else 0
        digits.append(total % 10)
    if carry and digits:
        digits.append(carry)
    return from_values(digits)
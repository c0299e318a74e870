"""Singly linked lists and detection of the node where two lists join."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class Node:
    """A singly linked list node; nodes compare by identity."""

    value: int
    next: Node | None = None

    def __iter__(self) -> Iterator[int]:
        node: Node | None = self
        while node is not None:
            yield node.value
            node = node.next


def new_linked_list(values: Iterable[int]) -> Node | None:
    """Build a linked list from ``values`` and return its head, or None if empty."""
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


def _length(node: Node | None) -> int:
    count = 0
    while node is not None:
        count += 1
        node = node.next
    return count


def _advance(node: Node | None, steps: int) -> Node | None:
    while node is not None and steps > 0:
        node = node.next
        steps -= 1
    return node


def find_cross_node(list1: Node | None, list2: Node | None) -> Node | None:
    """Return the first node shared by both lists, or None if they never meet."""
    diff = _length(list1) - _length(list2)
    if diff > 0:
        list1 = _advance(list1, diff)
    else:
        list2 = _advance(list2, -diff)

    while list1 is not None and list2 is not None:
        if list1 is list2:
            return list1
        list1 = list1.next
        list2 = list2.next
    return None
"""Singly linked lists: cycle detection, intersection and reversal."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list; nodes compare by identity."""

    val: int
    next: Optional[ListNode] = None


def detect_cycle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the node where a cycle begins, or None, by remembering visited nodes."""
    if head is None or head.next is None:
        return None
    seen: set[ListNode] = set()
    node = head
    while node is not None:
        if node in seen:
            return node
        seen.add(node)
        node = node.next
    return None


def detect_cycle_two_pointers(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the node where a cycle begins, or None, using slow and fast pointers."""
    if head is None or head.next is None:
        return None
    slow: Optional[ListNode] = head
    fast: Optional[ListNode] = head
    while slow is not None and fast is not None:
        slow = slow.next
        fast = fast.next
        if fast is None:
            return None
        fast = fast.next
        if slow is fast:
            start = head
            while fast is not start:
                fast = fast.next
                start = start.next
            return fast
    return None


def get_intersection_node(
    head_a: Optional[ListNode], head_b: Optional[ListNode]
) -> Optional[ListNode]:
    """Return the first node shared by both lists, or None, by remembering list A's nodes."""
    in_a: set[ListNode] = set()
    node = head_a
    while node is not None:
        in_a.add(node)
        node = node.next
    node = head_b
    while node is not None:
        if node in in_a:
            return node
        node = node.next
    return None


def get_intersection_node_two_pointers(
    head_a: Optional[ListNode], head_b: Optional[ListNode]
) -> Optional[ListNode]:
    """Return the first shared node, walking each list and then the other."""
    if head_a is None or head_b is None:
        return None
    first: Optional[ListNode] = head_a
    second: Optional[ListNode] = head_b
    while first is not second:
        first = head_b if first is None else first.next
        second = head_a if second is None else second.next
    return first


def get_intersection_node_by_negation(
    head_a: Optional[ListNode], head_b: Optional[ListNode]
) -> Optional[ListNode]:
    """Return the first shared node by negating list A's values and looking for a negative in B.

    Values are restored before returning. This assumes every value in list B
    that is not shared with A is non-negative.
    """
    if head_a is None or head_b is None:
        return None
    _negate(head_a)
    try:
        node = head_b
        while node is not None:
            if node.val < 0:
                return node
            node = node.next
        return None
    finally:
        _negate(head_a)


def _negate(head: Optional[ListNode]) -> None:
    while head is not None:
        head.val = -head.val
        head = head.next


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return its new head."""
    previous: Optional[ListNode] = None
    node = head
    while node is not None:
        node.next, previous, node = previous, node, node.next
    return previous
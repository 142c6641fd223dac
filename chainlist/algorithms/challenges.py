"""Classic linked list exercises built on top of ``LinkedList``."""

from collections.abc import Callable
from typing import Any, TypeVar

from ..core.linked_list import LinkedList
from ..core.node import Node

T = TypeVar("T")


def reversed_values(lst: LinkedList[T]) -> list[T]:
    """Return the values of ``lst`` from tail to head."""
    values = list(lst)
    values.reverse()
    return values


def middle_node(lst: LinkedList[T]) -> Node[T] | None:
    """Return the middle node using the runner technique.

    The slow pointer moves one node per step and the fast pointer two, so the
    slow one stops at index ``len(lst) // 2``.
    """
    slow = lst.head
    fast = lst.head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        assert slow is not None
        slow = slow.next
    return slow


def reversed_copy(lst: LinkedList[T]) -> LinkedList[T]:
    """Return a new list holding the values of ``lst`` in reverse order."""
    result: LinkedList[T] = LinkedList()
    for value in lst:
        result.push(value)
    return result


def reverse(lst: LinkedList[T]) -> None:
    """Reverse ``lst`` in place by flipping its links."""
    lst.ensure_exclusive()
    previous: Node[T] | None = None
    current = lst.head
    lst.tail = current
    while current is not None:
        following = current.next
        current.next = previous
        previous = current
        current = following
    lst.head = previous


def merge_sorted(
    first: LinkedList[T], second: LinkedList[T], key: Callable[[T], Any] | None = None
) -> LinkedList[T]:
    """Merge two ascending lists into a new ascending list.

    Ties keep values of ``first`` ahead of values of ``second``. Neither input
    is modified.
    """
    if key is None:
        key = _identity

    merged: LinkedList[T] = LinkedList()
    left = first.head
    right = second.head
    while left is not None and right is not None:
        if key(right.value) < key(left.value):
            merged.append(right.value)
            right = right.next
        else:
            merged.append(left.value)
            left = left.next

    rest = left if left is not None else right
    if rest is not None:
        for node in rest.walk():
            merged.append(node.value)
    return merged


def remove_all(lst: LinkedList[T], value: T) -> int:
    """Remove every occurrence of ``value`` from ``lst``; return how many were removed."""
    if lst.is_empty:
        return 0

    lst.ensure_exclusive()
    removed = 0
    while lst.head is not None and lst.head.value == value:
        lst.pop()
        removed += 1
    if lst.head is None:
        return removed

    prev = lst.head
    current = prev.next
    while current is not None:
        if current.value == value:
            prev.next = current.next
            removed += 1
        else:
            prev = current
        current = current.next
    lst.tail = prev
    return removed


def _identity(value: Any) -> Any:
    return value

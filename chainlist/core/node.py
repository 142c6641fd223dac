"""Linked list node."""

from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class Node(Generic[T]):
    """Single link of a chain: a value and an optional successor."""

    __slots__ = ("value", "next")

    def __init__(self, value: T, next: "Node[T] | None" = None):
        """Create a node holding ``value`` that links to ``next``."""
        self.value = value
        self.next = next

    def walk(self) -> Iterator["Node[T]"]:
        """Yield this node and every node reachable from it."""
        node: Node[T] | None = self
        while node is not None:
            yield node
            node = node.next

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    def __str__(self) -> str:
        return " -> ".join(str(node.value) for node in self.walk())

"""Opaque forward-only positions into a linked list."""

from functools import total_ordering
from typing import Any, Generic, TypeVar

from .node import Node

T = TypeVar("T")


@total_ordering
class Index(Generic[T]):
    """Position in a chain, or ``end`` when ``node`` is ``None``.

    Two positions are equal when they name the same link point, i.e. their
    nodes share a successor. A position precedes another when the other's
    node can be reached by following ``next`` links, so comparing positions
    walks the chain and costs O(n).
    """

    __slots__ = ("node",)

    def __init__(self, node: Node[T] | None = None):
        """Create a position on ``node``; ``None`` denotes the end."""
        self.node = node

    @property
    def is_end(self) -> bool:
        """Whether this position is past the last node."""
        return self.node is None

    def advance(self) -> "Index[T]":
        """Return the position right after this one."""
        if self.node is None:
            return self
        return Index(self.node.next)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Index):
            return NotImplemented
        if self.node is None or other.node is None:
            return self.node is None and other.node is None
        return self.node.next is other.node.next

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Index):
            return NotImplemented
        if self == other or self.node is None:
            return False
        if other.node is None:
            return True
        return any(node is other.node for node in self.node.walk())

    def __hash__(self) -> int:
        if self.node is None:
            return hash((Index, None))
        return hash((Index, id(self.node.next)))

    def __repr__(self) -> str:
        if self.node is None:
            return "Index(end)"
        return f"Index({self.node.value!r})"

"""Singly linked list with value semantics through copy-on-write.

Copying a ``LinkedList`` is O(1): both handles keep pointing at the same
nodes and share a ``ChainStorage`` record. The first operation that would
modify an existing node checks the record; if another live handle can still
reach the chain, the list clones its nodes before touching them. ``push`` and
``pop`` only move the head and never modify a node, so they never clone.

Nodes returned by ``node_at`` and ``insert`` belong to the chain that was
current when they were handed out. After a clone they name nodes of the old
chain. ``insert`` and ``remove`` re-locate such a node while cloning; a node
that is not part of the chain at all (for example one taken from an
unrelated list) turns the call into a logged no-op when the chain is shared,
and is undefined behavior when the list already owns its chain exclusively.
"""

import copy
import logging
from collections.abc import Iterable, Iterator
from typing import Any, Generic, TypeVar

from more_itertools import ilen, nth

from .index import Index
from .node import Node
from .storage import ChainStorage

logger = logging.getLogger(__name__)

T = TypeVar("T")


class LinkedList(Generic[T]):
    """Forward-only linked list that behaves like a value."""

    head: Node[T] | None
    tail: Node[T] | None

    def __init__(self, values: Iterable[T] | None = None):
        """Create a list, optionally appending ``values`` in order."""
        self.head = None
        self.tail = None
        self._storage = ChainStorage()
        self._storage.attach(self)
        if values is not None:
            for value in values:
                self.append(value)

    # -- ownership ---------------------------------------------------------

    @property
    def is_exclusive(self) -> bool:
        """Whether no other live handle shares this list's nodes."""
        return self._storage.is_exclusive(self)

    def copy(self) -> "LinkedList[T]":
        """Return a new handle sharing this list's nodes until one of them mutates."""
        other = type(self).__new__(type(self))
        other.head = self.head
        other.tail = self.tail
        other._storage = self._storage
        self._storage.attach(other)
        return other

    __copy__ = copy

    def __deepcopy__(self, memo: dict[int, Any]) -> "LinkedList[T]":
        result = type(self)()
        memo[id(self)] = result
        for value in self:
            result.append(copy.deepcopy(value, memo))
        return result

    def _move_to(self, storage: ChainStorage) -> None:
        self._storage.detach(self)
        self._storage = storage
        storage.attach(self)

    def ensure_exclusive(self, returning_copy_of: Node[T] | None = None) -> Node[T] | None:
        """Clone the chain if it is shared so that it can be modified in place.

        When ``returning_copy_of`` is given, return the node of the current
        chain that corresponds to it: the node itself when no clone was
        needed, its copy when the chain was cloned, or ``None`` when the node
        was not found while cloning.
        """
        if self.is_exclusive:
            return returning_copy_of

        self._move_to(ChainStorage())
        if self.head is None:
            return None

        new_head: Node[T] | None = None
        new_tail: Node[T] | None = None
        node_copy: Node[T] | None = None
        copied = 0
        for old in self.head.walk():
            node = Node(old.value)
            if new_tail is None:
                new_head = node
            else:
                new_tail.next = node
            new_tail = node
            if old is returning_copy_of:
                node_copy = node
            copied += 1

        self.head = new_head
        self.tail = new_tail
        logger.debug("Cloned %d shared nodes into storage %d", copied, self._storage.storage_id)
        return node_copy

    # -- queries -----------------------------------------------------------

    @property
    def is_empty(self) -> bool:
        """Whether the list holds no values."""
        return self.head is None

    def nodes(self) -> Iterator[Node[T]]:
        """Yield the nodes of the list from head to tail."""
        if self.head is not None:
            yield from self.head.walk()

    def node_at(self, index: int) -> Node[T] | None:
        """Return the node at ``index``, or ``None`` when out of range."""
        if index < 0:
            return None
        return nth(self.nodes(), index)

    # -- insertion ---------------------------------------------------------

    def push(self, value: T) -> None:
        """Add ``value`` at the front of the list."""
        self.head = Node(value, self.head)
        if self.tail is None:
            self.tail = self.head

    def append(self, value: T) -> None:
        """Add ``value`` at the end of the list."""
        if self.is_empty:
            self.push(value)
            return

        self.ensure_exclusive()
        assert self.tail is not None
        self.tail.next = Node(value)
        self.tail = self.tail.next

    def insert(self, value: T, after: Node[T]) -> Node[T] | None:
        """Insert ``value`` right after ``after`` and return the new node.

        Returns ``None`` when ``after`` is not part of a shared chain.
        """
        if after is self.tail:
            self.append(value)
            return self.tail

        node = self.ensure_exclusive(returning_copy_of=after)
        if node is None:
            logger.warning("insert(after=%r) ignored: node is not part of this list", after)
            return None

        node.next = Node(value, node.next)
        if node is self.tail:
            self.tail = node.next
        return node.next

    # -- removal -----------------------------------------------------------

    def pop(self) -> T | None:
        """Remove and return the first value, or ``None`` when empty."""
        if self.head is None:
            return None

        value = self.head.value
        self.head = self.head.next
        if self.head is None:
            self.tail = None
            # An empty handle reaches no node, so it no longer shares anything.
            self._move_to(ChainStorage())
        return value

    def remove_last(self) -> T | None:
        """Remove and return the last value, or ``None`` when empty."""
        if self.head is None:
            return None
        if self.head.next is None:
            return self.pop()

        self.ensure_exclusive()
        assert self.head is not None
        prev = self.head
        current = self.head
        while current.next is not None:
            prev = current
            current = current.next

        prev.next = None
        self.tail = prev
        return current.value

    def remove(self, after: Node[T]) -> T | None:
        """Remove the value following ``after`` and return it.

        Returns ``None`` when ``after`` is the last node, or when it is not
        part of a shared chain.
        """
        if self.head is None:
            return None

        node = self.ensure_exclusive(returning_copy_of=after)
        if node is None:
            logger.warning("remove(after=%r) ignored: node is not part of this list", after)
            return None

        removed = node.next
        if removed is None:
            return None
        if removed is self.tail:
            self.tail = node
        node.next = removed.next
        return removed.value

    # -- traversal ---------------------------------------------------------

    @property
    def start_index(self) -> Index[T]:
        """Position of the first value; equals ``end_index`` when empty."""
        return Index(self.head)

    @property
    def end_index(self) -> Index[T]:
        """Position one past the last value."""
        return Index(self.tail.next if self.tail is not None else None)

    def index_after(self, index: Index[T]) -> Index[T]:
        """Return the position that follows ``index``."""
        return index.advance()

    def __getitem__(self, index: Index[T]) -> T:
        if not isinstance(index, Index):
            raise TypeError(f"LinkedList positions must be Index, not {type(index).__name__}")
        if index.node is None:
            raise IndexError("cannot read the end position")
        return index.node.value

    def __iter__(self) -> Iterator[T]:
        return (node.value for node in self.nodes())

    def __len__(self) -> int:
        return ilen(self.nodes())

    def __bool__(self) -> bool:
        return not self.is_empty

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return list(self) == list(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def __str__(self) -> str:
        if self.head is None:
            return "Empty list"
        return str(self.head)

"""Test utilities shared by the linked list tests."""

from chainlist.core.linked_list import LinkedList
from chainlist.core.node import Node


def assert_well_formed(lst: LinkedList) -> None:
    """Check the head/tail invariant of ``lst``."""
    if lst.head is None:
        assert lst.tail is None
        return

    last: Node | None = None
    for node in lst.head.walk():
        last = node
    assert last is lst.tail
    assert lst.tail is not None
    assert lst.tail.next is None


def node_ids(lst: LinkedList) -> list[int]:
    """Return the identities of the nodes of ``lst`` in order."""
    return [id(node) for node in lst.nodes()]

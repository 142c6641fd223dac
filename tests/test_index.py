"""Tests for positions and index based traversal."""

import pytest

from chainlist.core.index import Index
from chainlist.core.linked_list import LinkedList
from chainlist.core.node import Node


def walk_by_index(lst: LinkedList) -> list:
    """Collect values by advancing from the start to the end position."""
    values = []
    index = lst.start_index
    while index != lst.end_index:
        values.append(lst[index])
        index = lst.index_after(index)
    return values


class TestTraversal:
    """Traversal through start, advance and subscript."""

    def test_walk(self, four_values: LinkedList[int]):
        """Advancing from start reaches every value once."""
        assert walk_by_index(four_values) == [1, 2, 3, 4]

    def test_restartable(self, four_values: LinkedList[int]):
        """Walking twice gives the same values."""
        assert walk_by_index(four_values) == walk_by_index(four_values)
        assert list(four_values) == list(four_values)

    def test_empty_list(self, empty_list: LinkedList[int]):
        """An empty list starts at its end."""
        assert empty_list.start_index == empty_list.end_index
        assert walk_by_index(empty_list) == []

    def test_first_element(self, four_values: LinkedList[int]):
        """The start position reads the head value."""
        assert four_values[four_values.start_index] == 1

    def test_end_cannot_be_read(self, four_values: LinkedList[int]):
        """Reading at the end raises ``IndexError``."""
        with pytest.raises(IndexError):
            four_values[four_values.end_index]

    def test_integer_key_rejected(self, four_values: LinkedList[int]):
        """Positions must be ``Index`` objects."""
        with pytest.raises(TypeError):
            four_values[0]  # type: ignore[index]

    def test_advance_past_end(self):
        """Advancing the end stays at the end."""
        end = Index()
        assert end.advance().is_end


class TestEquality:
    """Positions compare by link point."""

    def test_end_equals_end(self):
        """Two end positions are equal."""
        assert Index() == Index(None)

    def test_end_differs_from_node(self):
        """The end never equals a real position."""
        assert Index(Node(1)) != Index()
        assert Index() != Index(Node(1))

    def test_same_node(self, four_values: LinkedList[int]):
        """Positions on the same node are equal and hash alike."""
        a = Index(four_values.node_at(1))
        b = Index(four_values.node_at(1))
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_different_nodes(self, four_values: LinkedList[int]):
        """Positions on different nodes differ."""
        assert Index(four_values.node_at(0)) != Index(four_values.node_at(1))

    def test_shared_successor(self):
        """Nodes linking to the same successor denote the same link point."""
        shared = Node(3)
        assert Index(Node(1, shared)) == Index(Node(2, shared))

    def test_not_comparable_to_other_types(self, four_values: LinkedList[int]):
        """Positions never equal non-position objects."""
        assert four_values.start_index != four_values.head


class TestOrdering:
    """Positions are ordered by reachability."""

    def test_earlier_precedes_later(self, four_values: LinkedList[int]):
        """A position precedes every position reachable from it."""
        first = Index(four_values.node_at(0))
        third = Index(four_values.node_at(2))
        assert first < third
        assert not third < first
        assert third > first
        assert first <= third

    def test_not_less_than_itself(self, four_values: LinkedList[int]):
        """Ordering is strict."""
        index = four_values.start_index
        assert not index < index
        assert index <= index

    def test_end_is_last(self, four_values: LinkedList[int]):
        """Every position precedes the end."""
        assert four_values.start_index < four_values.end_index
        assert not four_values.end_index < four_values.start_index

    def test_unrelated_chains(self):
        """Positions on unrelated chains do not precede one another."""
        a = Index(Node(1, Node(2)))
        b = Index(Node(1, Node(2)))
        assert not a < b
        assert not b < a

    def test_sorting_positions(self, four_values: LinkedList[int]):
        """Positions of one list sort into traversal order."""
        positions = [Index(four_values.node_at(i)) for i in (3, 0, 2, 1)]
        assert [four_values[p] for p in sorted(positions)] == [1, 2, 3, 4]

"""Demonstration scenarios for the linked list.

Each scenario builds a few lists, exercises one group of operations and
returns the lines it would print, so the CLI and the tests share one source.
"""

from collections.abc import Callable
from itertools import islice

from ..algorithms.challenges import merge_sorted, middle_node, remove_all, reverse, reversed_copy, reversed_values
from ..core.linked_list import LinkedList
from ..core.node import Node
from .demo_config import DemoConfig

Scenario = Callable[[DemoConfig], list[str]]


def _pushed(*values: int) -> LinkedList[int]:
    lst: LinkedList[int] = LinkedList()
    for value in reversed(values):
        lst.push(value)
    return lst


def nodes_demo(config: DemoConfig) -> list[str]:
    """Link three nodes by hand."""
    node3 = Node(3)
    node2 = Node(2, node3)
    node1 = Node(1, node2)
    return [str(node1)]


def push_demo(config: DemoConfig) -> list[str]:
    """Build a list by pushing at the front."""
    lst: LinkedList[int] = LinkedList()
    lst.push(3)
    lst.push(2)
    lst.push(1)
    return [str(lst)]


def append_demo(config: DemoConfig) -> list[str]:
    """Build a list by appending at the back."""
    lst: LinkedList[int] = LinkedList()
    lst.append(1)
    lst.append(2)
    lst.append(3)
    return [str(lst)]


def insert_demo(config: DemoConfig) -> list[str]:
    """Insert several values after the middle node."""
    lst = _pushed(1, 2, 3)
    lines = [f"Before inserting: {lst}"]
    middle = lst.node_at(1)
    for _ in range(4):
        assert middle is not None
        middle = lst.insert(-1, after=middle)
    lines.append(f"After inserting: {lst}")
    return lines


def pop_demo(config: DemoConfig) -> list[str]:
    """Remove the first value."""
    lst = _pushed(1, 2, 3)
    lines = [f"Before popping list: {lst}"]
    popped = lst.pop()
    lines.append(f"After popping list: {lst}")
    lines.append(f"Popped value: {popped}")
    return lines


def remove_last_demo(config: DemoConfig) -> list[str]:
    """Remove the last value."""
    lst = _pushed(1, 2, 3)
    lines = [f"Before removing last node: {lst}"]
    removed = lst.remove_last()
    lines.append(f"After removing last node: {lst}")
    lines.append(f"Removed value: {removed}")
    return lines


def remove_after_demo(config: DemoConfig) -> list[str]:
    """Remove the value at index 1 through its predecessor."""
    lst = _pushed(1, 2, 3)
    lines = [f"Before removing at particular index: {lst}"]
    index = 1
    node = lst.node_at(index - 1)
    assert node is not None
    removed = lst.remove(after=node)
    lines.append(f"After removing at index {index}: {lst}")
    lines.append(f"Removed value: {removed}")
    return lines


def collection_demo(config: DemoConfig) -> list[str]:
    """Use the list through Python's iteration protocols."""
    lst: LinkedList[int] = LinkedList(range(config.collection_size))
    return [
        f"List: {lst}",
        f"First element: {lst[lst.start_index]}",
        f"Array containing first 3 elements: {list(islice(lst, 3))}",
        f"Array containing last 3 elements: {list(lst)[-3:]}",
        f"Sum of all values: {sum(lst)}",
    ]


def copy_on_write_demo(config: DemoConfig) -> list[str]:
    """Show that copies share nodes until one of them changes."""
    list1: LinkedList[int] = LinkedList()
    list1.append(1)
    list1.append(2)
    lines = [f"List1 uniquely referenced: {list1.is_exclusive}"]
    list2 = list1.copy()
    lines.append(f"List1 uniquely referenced: {list1.is_exclusive}")
    lines.append(f"List1: {list1}")
    lines.append(f"List2: {list2}")

    lines.append("After appending 3 to list2")
    list2.append(3)
    lines.append(f"List1: {list1}")
    lines.append(f"List2: {list2}")

    lines.append("Removing middle node on list2")
    node = list2.node_at(0)
    if node is not None:
        list2.remove(after=node)
    lines.append(f"List1: {list1}")
    lines.append(f"List2: {list2}")

    list3 = list1.copy()
    list3.push(0)
    lines.append("After pushing 0 to a copy of list1")
    lines.append(f"List1: {list1}")
    lines.append(f"List3: {list3}")
    return lines


def challenges_demo(config: DemoConfig) -> list[str]:
    """Run the classic exercises."""
    lst = _pushed(1, 2, 3, 4, 5)
    middle = middle_node(lst)
    lines = [
        f"List: {lst}",
        f"In reverse: {reversed_values(lst)}",
        f"Middle node: {middle.value if middle is not None else None}",
        f"Reversed copy: {reversed_copy(lst)}",
    ]
    reverse(lst)
    lines.append(f"Reversed in place: {lst}")

    merged = merge_sorted(_pushed(1, 4, 10, 11), _pushed(-1, 2, 3, 6))
    lines.append(f"Merged: {merged}")

    duplicates = _pushed(1, 3, 3, 3, 4)
    lines.append(f"Before removing all 3s: {duplicates}")
    remove_all(duplicates, 3)
    lines.append(f"After removing all 3s: {duplicates}")
    return lines


SCENARIOS: dict[str, Scenario] = {
    "nodes": nodes_demo,
    "push": push_demo,
    "append": append_demo,
    "insert": insert_demo,
    "pop": pop_demo,
    "remove_last": remove_last_demo,
    "remove_after": remove_after_demo,
    "collection": collection_demo,
    "copy_on_write": copy_on_write_demo,
    "challenges": challenges_demo,
}


def run_scenarios(config: DemoConfig) -> list[tuple[str, list[str]]]:
    """Run the configured scenarios, or all of them when none are selected."""
    names = config.scenarios or list(SCENARIOS)
    return [(name, SCENARIOS[name](config)) for name in names]

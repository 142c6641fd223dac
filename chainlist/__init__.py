"""Singly linked list with copy-on-write value semantics."""

from .core.index import Index
from .core.linked_list import LinkedList
from .core.node import Node
from .core.storage import ChainStorage

__all__ = ["ChainStorage", "Index", "LinkedList", "Node"]

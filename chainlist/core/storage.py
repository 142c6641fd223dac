"""Ownership tracking for node chains shared between list handles.

Every ``LinkedList`` handle points at a ``ChainStorage`` record. Copying a
handle shares the record, so the record knows how many live handles may reach
the same nodes. Owners are held through weak references keyed by identity,
since list handles compare by value and are unhashable. A handle that gets
garbage collected no longer counts, which lets the survivor mutate in place
again without paying for a clone.
"""

import itertools
import weakref
from typing import Any

_storage_ids = itertools.count(1)


class ChainStorage:
    """Set of list handles that share one chain of nodes."""

    def __init__(self) -> None:
        """Create an ownership record with no owners."""
        self.storage_id = next(_storage_ids)
        self._owners: weakref.WeakValueDictionary[int, Any] = weakref.WeakValueDictionary()

    @property
    def owner_count(self) -> int:
        """Number of live handles attached to this record."""
        return len(self._owners)

    def attach(self, owner: Any) -> None:
        """Register ``owner`` as a handle that can reach the chain."""
        self._owners[id(owner)] = owner

    def detach(self, owner: Any) -> None:
        """Forget ``owner``; used when it moves to a freshly cloned chain."""
        if self._owners.get(id(owner)) is owner:
            del self._owners[id(owner)]

    def is_exclusive(self, owner: Any) -> bool:
        """Return whether ``owner`` is the only live handle on the chain."""
        return self._owners.get(id(owner)) is owner and len(self._owners) == 1

    def __repr__(self) -> str:
        return f"ChainStorage(id={self.storage_id}, owners={self.owner_count})"

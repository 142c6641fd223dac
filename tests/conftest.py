"""Pytest configuration and fixtures for the test suite."""

import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

from chainlist.core.linked_list import LinkedList


@pytest.fixture
def temp_workspace() -> Generator[Path, None, None]:
    """Create a temporary workspace for file operations."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def empty_list() -> LinkedList[int]:
    """Provide a fresh empty list."""
    return LinkedList()


@pytest.fixture
def four_values() -> LinkedList[int]:
    """Provide the list ``1 -> 2 -> 3 -> 4``."""
    return LinkedList([1, 2, 3, 4])

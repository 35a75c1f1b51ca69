"""pytest fixture plugin.

Usage::

    # conftest.py
    pytest_plugins = ["pathio._pytest_plugin"]

This makes the ``path_root`` and ``memory_root`` fixtures available::

    def test_something(path_root):
        sub = path_root.create_child("sub")
        assert sub.dir_exists()
"""

import pytest

from ._backend import MemoryBackend
from ._node import PathNode

MEMORY_ROOT = "/root"


@pytest.fixture
def path_root(tmp_path) -> PathNode:
    """A :class:`PathNode` over an empty temporary directory on disk.

    Provides an independent directory per test (function scope).
    """
    return PathNode.new_root(str(tmp_path))


@pytest.fixture
def memory_backend() -> MemoryBackend:
    """A fresh :class:`MemoryBackend` holding only ``/root``."""
    return MemoryBackend([MEMORY_ROOT])


@pytest.fixture
def memory_root(memory_backend) -> PathNode:
    """A :class:`PathNode` over ``/root`` of :func:`memory_backend`."""
    return PathNode.new_root(MEMORY_ROOT, backend=memory_backend)

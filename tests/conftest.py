import pytest

from pathio import PathNode
from pathio._pytest_plugin import memory_backend, memory_root, path_root  # noqa: F401


@pytest.fixture
def disk_root(tmp_path) -> PathNode:
    """A root over ``tmp_path/root`` so tests can also touch its surroundings."""
    root_dir = tmp_path / "root"
    root_dir.mkdir()
    return PathNode.new_root(str(root_dir))

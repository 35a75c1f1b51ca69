from ._backend import FileSystemBackend, MemoryBackend, OSBackend
from ._exceptions import (
    ChildChainError,
    DirCreateError,
    DirIsEmptyError,
    DirReadError,
    FileNameIsEmptyError,
    FilesNotFoundError,
    InvalidChildNameError,
    PathIOError,
    PathNotFoundError,
)
from ._node import DEFAULT_DIR_MODE, PathNode
from ._typing import DirEntry, FileListing, PathNodeStats

new_root = PathNode.new_root

__all__ = [
    "PathNode",
    "new_root",
    "DEFAULT_DIR_MODE",
    "FileSystemBackend",
    "OSBackend",
    "MemoryBackend",
    "DirEntry",
    "FileListing",
    "PathNodeStats",
    "PathIOError",
    "PathNotFoundError",
    "DirIsEmptyError",
    "FilesNotFoundError",
    "FileNameIsEmptyError",
    "InvalidChildNameError",
    "DirReadError",
    "DirCreateError",
    "ChildChainError",
]
__version__ = "0.1.0"

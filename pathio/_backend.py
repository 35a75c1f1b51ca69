from __future__ import annotations

import io
import os
import posixpath
from typing import BinaryIO, Protocol, runtime_checkable

from ._typing import DirEntry

# ---------------------------------------------------------------------------
#  Capability interface
# ---------------------------------------------------------------------------


@runtime_checkable
class FileSystemBackend(Protocol):
    """The filesystem capabilities a :class:`PathNode` consumes.

    Failures are reported as plain ``OSError`` subclasses; ``PathNode``
    wraps them into pathio errors.
    """

    def exists(self, path: str) -> bool: ...

    def read_dir(self, path: str) -> list[DirEntry]: ...

    def mkdir(self, path: str, mode: int = 0o777) -> None: ...

    def open_or_create(self, path: str) -> BinaryIO: ...


# ---------------------------------------------------------------------------
#  Host filesystem
# ---------------------------------------------------------------------------


class OSBackend:
    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def read_dir(self, path: str) -> list[DirEntry]:
        # Symlinked directories are reported as plain entries, never followed.
        with os.scandir(path) as it:
            return [DirEntry(e.name, e.is_dir(follow_symlinks=False)) for e in it]

    def mkdir(self, path: str, mode: int = 0o777) -> None:
        os.mkdir(path, mode)

    def open_or_create(self, path: str) -> BinaryIO:
        return open(path, "ab")

    def __repr__(self) -> str:
        return "OSBackend()"


# ---------------------------------------------------------------------------
#  In-memory filesystem
# ---------------------------------------------------------------------------


class _MemDir:
    __slots__ = ("children", "mode")

    def __init__(self, mode: int = 0o777) -> None:
        self.children: dict[str, _MemDir | _MemFile] = {}
        self.mode: int = mode


class _MemFile:
    __slots__ = ("data",)

    def __init__(self) -> None:
        self.data: bytes = b""


class _MemoryFileHandle(io.BytesIO):
    """Append-mode handle; the buffer is committed to the file on close."""

    def __init__(self, fnode: _MemFile) -> None:
        super().__init__(fnode.data)
        self.seek(0, io.SEEK_END)
        self._fnode = fnode

    def close(self) -> None:
        if not self.closed:
            self._fnode.data = self.getvalue()
        super().close()


class MemoryBackend:
    """A POSIX-style directory tree held in memory.

    Paths must be absolute (``/a/b``); backslashes are accepted as
    separators. Besides the backend capabilities it offers ``makedirs``,
    ``remove`` and ``rmtree`` so callers can change the tree behind a
    node's back.
    """

    def __init__(self, dirs: list[str] | None = None) -> None:
        self._root = _MemDir()
        for d in dirs or ():
            self.makedirs(d)

    # -- path helpers --

    def _np(self, path: str) -> str | None:
        converted = path.replace("\\", "/")
        if not converted.startswith("/"):
            return None
        return posixpath.normpath(converted)

    def _resolve_path(self, path: str) -> _MemDir | _MemFile | None:
        npath = self._np(path)
        if npath is None:
            return None
        current: _MemDir | _MemFile = self._root
        for part in [p for p in npath.split("/") if p]:
            if not isinstance(current, _MemDir):
                return None
            child = current.children.get(part)
            if child is None:
                return None
            current = child
        return current

    def _resolve_parent_and_name(self, path: str) -> tuple[_MemDir, str]:
        npath = self._np(path)
        if npath is None:
            raise FileNotFoundError(f"Not an absolute path: '{path}'")
        if npath == "/":
            raise FileExistsError(f"Directory exists: '{path}'")
        parent_path = posixpath.dirname(npath)
        parent = self._resolve_path(parent_path)
        if parent is None:
            raise FileNotFoundError(f"Parent directory does not exist: '{parent_path}'")
        if not isinstance(parent, _MemDir):
            raise NotADirectoryError(f"Not a directory: '{parent_path}'")
        return parent, posixpath.basename(npath)

    # -- backend capabilities --

    def exists(self, path: str) -> bool:
        return self._resolve_path(path) is not None

    def read_dir(self, path: str) -> list[DirEntry]:
        node = self._resolve_path(path)
        if node is None:
            raise FileNotFoundError(f"No such directory: '{path}'")
        if not isinstance(node, _MemDir):
            raise NotADirectoryError(f"Not a directory: '{path}'")
        return [
            DirEntry(name, isinstance(child, _MemDir))
            for name, child in node.children.items()
        ]

    def mkdir(self, path: str, mode: int = 0o777) -> None:
        parent, name = self._resolve_parent_and_name(path)
        if name in parent.children:
            raise FileExistsError(f"File exists: '{path}'")
        parent.children[name] = _MemDir(mode)

    def open_or_create(self, path: str) -> BinaryIO:
        parent, name = self._resolve_parent_and_name(path)
        node = parent.children.get(name)
        if isinstance(node, _MemDir):
            raise IsADirectoryError(f"Is a directory: '{path}'")
        if node is None:
            node = _MemFile()
            parent.children[name] = node
        return _MemoryFileHandle(node)  # type: ignore[return-value]

    # -- helpers for callers mutating the tree --

    def makedirs(self, path: str, mode: int = 0o777) -> None:
        npath = self._np(path)
        if npath is None:
            raise FileNotFoundError(f"Not an absolute path: '{path}'")
        current = self._root
        for part in [p for p in npath.split("/") if p]:
            child = current.children.get(part)
            if child is None:
                child = _MemDir(mode)
                current.children[part] = child
            elif not isinstance(child, _MemDir):
                raise FileExistsError(f"A file exists at path component: '{part}'")
            current = child

    def is_dir(self, path: str) -> bool:
        return isinstance(self._resolve_path(path), _MemDir)

    def mode(self, path: str) -> int:
        node = self._resolve_path(path)
        if not isinstance(node, _MemDir):
            raise NotADirectoryError(f"Not a directory: '{path}'")
        return node.mode

    def remove(self, path: str) -> None:
        parent, name = self._resolve_parent_and_name(path)
        node = parent.children.get(name)
        if node is None:
            raise FileNotFoundError(f"No such file: '{path}'")
        if isinstance(node, _MemDir):
            raise IsADirectoryError(f"Is a directory: '{path}'")
        del parent.children[name]

    def rmtree(self, path: str) -> None:
        if self._np(path) == "/":
            raise ValueError("Cannot remove the root directory.")
        parent, name = self._resolve_parent_and_name(path)
        node = parent.children.get(name)
        if node is None:
            raise FileNotFoundError(f"No such directory: '{path}'")
        if not isinstance(node, _MemDir):
            raise NotADirectoryError(f"Not a directory: '{path}'")
        del parent.children[name]

    def __repr__(self) -> str:
        return f"MemoryBackend(entries={self._count(self._root) - 1})"

    def _count(self, node: _MemDir | _MemFile) -> int:
        if isinstance(node, _MemFile):
            return 1
        return 1 + sum(self._count(c) for c in node.children.values())

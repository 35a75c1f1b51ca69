from __future__ import annotations

import logging
import os
import weakref
from collections.abc import Iterator

from ._backend import FileSystemBackend, OSBackend
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
from ._path import base_name, extension, is_single_component, join_path
from ._typing import DirEntry, FileListing, PathNodeStats

logger = logging.getLogger(__name__)

DEFAULT_DIR_MODE = 0o755


class PathNode(os.PathLike):
    """In-memory mirror of one directory and its known subdirectories.

    Build a tree with :meth:`new_root`; every existing subdirectory is
    discovered eagerly. Further children are attached on demand with
    :meth:`attach_child` (cache only) or :meth:`create_child` (also
    creates the directory).

    Children are owned by their parent through ``_children``; the parent
    is only referenced weakly, so dropping the root releases the tree.
    """

    def __init__(
        self,
        path: str,
        *,
        backend: FileSystemBackend | None = None,
        dir_mode: int = DEFAULT_DIR_MODE,
        _parent: PathNode | None = None,
    ) -> None:
        if backend is None:
            backend = OSBackend()
        elif not isinstance(backend, FileSystemBackend):
            raise TypeError(
                f"Invalid backend: {backend!r}. Expected an object providing "
                "exists(), read_dir(), mkdir() and open_or_create()."
            )
        if isinstance(dir_mode, bool) or not isinstance(dir_mode, int) or not (
            0 <= dir_mode <= 0o7777
        ):
            raise ValueError(
                f"Invalid dir_mode value: {dir_mode!r}. "
                "Expected permission bits between 0 and 0o7777."
            )
        self._backend: FileSystemBackend = backend
        self._dir_mode: int = dir_mode
        self._children: dict[str, PathNode] = {}
        if _parent is None:
            self._here: str = path
            self._parent_ref: weakref.ref[PathNode] | None = None
        else:
            self._here = join_path(_parent._here, path)
            self._parent_ref = weakref.ref(_parent)

    # -- construction --

    @classmethod
    def new_root(
        cls,
        path: str,
        *,
        backend: FileSystemBackend | None = None,
        dir_mode: int = DEFAULT_DIR_MODE,
    ) -> PathNode:
        """Create a parentless node for *path* and discover its subtree.

        Raises :class:`PathNotFoundError` when *path* does not exist.
        """
        root = cls(path, backend=backend, dir_mode=dir_mode)
        if not root.dir_exists():
            raise PathNotFoundError(path)
        root._children = root._scan_dirs()
        logger.debug("Built path tree at '%s'", path)
        return root

    def _new_child(self, name: str) -> PathNode:
        child = type(self)(
            name, backend=self._backend, dir_mode=self._dir_mode, _parent=self
        )
        if child.dir_exists():
            child._children = child._scan_dirs()
        logger.debug("Attached '%s'", child._here)
        return child

    def _read_dir(self) -> list[DirEntry]:
        try:
            return self._backend.read_dir(self._here)
        except OSError as exc:
            raise DirReadError(self._here, exc) from exc

    def _scan_dirs(self) -> dict[str, PathNode]:
        # Built aside and swapped in by the caller, so a failed scan leaves
        # the cached map untouched.
        return {
            entry.name: self._new_child(entry.name)
            for entry in self._read_dir()
            if entry.is_dir
        }

    # -- child management --

    def attach_child(self, name: str) -> PathNode:
        """Return the cached child *name*, building and registering it if needed.

        The directory does not have to exist; a missing one yields a node
        with no children.
        """
        child = self._children.get(name)
        if child is not None:
            return child
        if not is_single_component(name):
            raise InvalidChildNameError(name, self._here)
        child = self._new_child(name)
        self._children[name] = child
        return child

    def create_child(self, name: str) -> PathNode:
        child = self.attach_child(name)
        if not child.dir_exists():
            try:
                self._backend.mkdir(child._here, self._dir_mode)
            except OSError as exc:
                raise DirCreateError(child._here, exc) from exc
            logger.debug("Created directory '%s'", child._here)
        return child

    def create_children(self, *names: str) -> PathNode:
        """Create the chain ``self/names[0]/names[1]/...`` and return its last node.

        On failure raises :class:`ChildChainError`; its ``node`` attribute is
        the last node created successfully.
        """
        current = self
        for name in names:
            try:
                current = current.create_child(name)
            except PathIOError as exc:
                raise ChildChainError(
                    current, name, join_path(current._here, name)
                ) from exc
        return current

    # -- navigation --

    @property
    def here(self) -> str:
        return self._here

    @property
    def relative(self) -> str:
        return base_name(self._here)

    @property
    def parent(self) -> PathNode | None:
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def backend(self) -> FileSystemBackend:
        return self._backend

    def children(self) -> list[PathNode]:
        return list(self._children.values())

    def has_children(self) -> bool:
        return len(self._children) > 0

    def find_child(self, name: str) -> PathNode | None:
        return self._children.get(name)

    def find(self, relative_path: str) -> PathNode | None:
        """Look up a cached descendant by a ``/``-separated relative path."""
        node: PathNode | None = self
        for part in [p for p in relative_path.replace("\\", "/").split("/") if p]:
            if node is None:
                return None
            node = node._children.get(part)
        return node

    def walk(self) -> Iterator[tuple[PathNode, list[str]]]:
        """Depth-first walk over the cached subtree, parents before children."""
        names = list(self._children)
        yield self, names
        for name in names:
            child = self._children.get(name)
            if child is not None:
                yield from child.walk()

    def stats(self) -> PathNodeStats:
        count = 0
        max_depth = 0
        stack: list[tuple[PathNode, int]] = [(self, 0)]
        while stack:
            node, depth = stack.pop()
            count += 1
            max_depth = max(max_depth, depth)
            stack.extend((c, depth + 1) for c in node._children.values())
        return {"node_count": count, "max_depth": max_depth}

    # -- files --

    def file_name(self, name: str) -> str:
        if not name.strip():
            raise FileNameIsEmptyError(self._here)
        return join_path(self._here, name)

    def scan_files(self, ext: str | None = None) -> FileListing:
        """List the non-directory entries of this directory.

        With *ext*, only names whose extension equals *ext* (leading dot
        included) are kept. An empty result is reported in
        ``FileListing.error``; read failures raise :class:`DirReadError`.
        """
        names = [e.name for e in self._read_dir() if not e.is_dir]
        if ext is None:
            if not names:
                return FileListing(names, DirIsEmptyError(self._here, names))
            return FileListing(names)
        matched = [n for n in names if extension(n) == ext]
        if not matched:
            return FileListing(matched, FilesNotFoundError(self._here, ext, matched))
        return FileListing(matched)

    def files(self) -> list[str]:
        return self.scan_files().unwrap()

    def files_by_ext(self, ext: str) -> list[str]:
        return self.scan_files(ext).unwrap()

    def dir_exists(self) -> bool:
        return self._backend.exists(self._here)

    # -- cache maintenance --

    def reset(self) -> None:
        """Drop the cached subtree and rescan this directory.

        Every cached descendant has its children cleared; those node objects
        are discarded and stay empty. The direct children of this node are
        then rebuilt from the current directory contents. If the rescan
        raises, the cached subtree is left as it was.
        """
        rebuilt = self._scan_dirs() if self.dir_exists() else {}
        for child in self._children.values():
            child._clear()
        self._children = rebuilt
        logger.debug("Reset '%s' (%d children)", self._here, len(self._children))

    def _clear(self) -> None:
        for child in self._children.values():
            child._clear()
        self._children.clear()

    # -- dunder --

    def __fspath__(self) -> str:
        return self._here

    def __repr__(self) -> str:
        return f"PathNode(here={self._here!r}, children={len(self._children)})"

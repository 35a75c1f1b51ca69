from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ._node import PathNode


class PathIOError(OSError):
    """Base class for every error raised by pathio. Subclass of OSError."""
    def __init__(self, message: str, path: str | None = None) -> None:
        self.path = path
        super().__init__(message)


class PathNotFoundError(PathIOError, FileNotFoundError):
    """Raised when a root path does not exist."""
    def __init__(self, path: str) -> None:
        super().__init__(f"Valid path is required, not found: '{path}'", path)


class DirIsEmptyError(PathIOError):
    """Raised when a directory listing yields no files.

    ``names`` is always the (empty) list the listing produced.
    """
    def __init__(self, path: str, names: list[str] | None = None) -> None:
        self.names: list[str] = names if names is not None else []
        super().__init__(f"Directory has no files: '{path}'", path)


class FilesNotFoundError(PathIOError, FileNotFoundError):
    """Raised when no file matches an extension filter."""
    def __init__(
        self, path: str, extension: str, names: list[str] | None = None
    ) -> None:
        self.extension = extension
        self.names: list[str] = names if names is not None else []
        super().__init__(
            f"No files found in '{path}' with extension \"{extension}\"", path
        )


class FileNameIsEmptyError(PathIOError, ValueError):
    def __init__(self, path: str | None = None) -> None:
        super().__init__("File name is empty.", path)


class InvalidChildNameError(PathIOError, ValueError):
    def __init__(self, name: str, path: str | None = None) -> None:
        self.name = name
        super().__init__(
            f"Invalid child directory name {name!r}: "
            "expected a single path component.",
            path,
        )


class _WrappedOSError(PathIOError):
    def __init__(self, message: str, path: str, cause: OSError) -> None:
        super().__init__(f"{message}: {cause}", path)
        self.errno = cause.errno


class DirReadError(_WrappedOSError):
    """Raised (from the OS error) when a directory cannot be read."""
    def __init__(self, path: str, cause: OSError) -> None:
        super().__init__(f"Failed to read directory '{path}'", path, cause)


class DirCreateError(_WrappedOSError):
    """Raised (from the OS error) when a directory cannot be created."""
    def __init__(self, path: str, cause: OSError) -> None:
        super().__init__(f"Failed to create directory '{path}'", path, cause)


class ChildChainError(PathIOError):
    """Raised by ``create_children`` when one step of the chain fails.

    ``node`` is the last node that was created successfully.
    """
    def __init__(self, node: PathNode, name: str, path: str) -> None:
        self.node = node
        self.name = name
        super().__init__(f"Failed to create subdirectory '{path}'", path)

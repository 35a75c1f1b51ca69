from __future__ import annotations

from typing import NamedTuple, TypedDict

from ._exceptions import DirIsEmptyError, FilesNotFoundError


class DirEntry(NamedTuple):
    name: str
    is_dir: bool


class FileListing(NamedTuple):
    """File names found in a directory plus the status of the search.

    ``error`` is ``None`` on success. An empty result is reported through
    ``error`` and never through ``names`` alone, so both must be checked.
    """

    names: list[str]
    error: DirIsEmptyError | FilesNotFoundError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> list[str]:
        if self.error is not None:
            raise self.error
        return self.names


class PathNodeStats(TypedDict):
    node_count: int
    max_depth: int

"""Lazy, re-walkable views over a folder's files or subfolders."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Generic, TypeVar

from files import paths
from files.interfaces.filesystem import EntryKind
from files.location import Location

if TYPE_CHECKING:
    from files.folder import Folder

T = TypeVar("T", bound=Location)


class LocationSequence(Generic[T]):
    """Files or subfolders of a folder, optionally hidden-inclusive and recursive.

    A sequence is only a description of what to walk. Each iteration lists
    the backend again, so it always reflects the current tree and can be
    consumed any number of times.

    Recursive walks are depth first: a folder's own matching children come
    first, then the subtree of each of its subfolders in listing order. The
    walk descends through the folder handles it listed, so renaming a
    yielded folder mid-walk neither skips nor repeats entries. A listed subfolder
    deleted before the walk reaches it is treated as empty.
    """

    def __init__(self, folder: Folder, kind: type[T], *, recursive: bool = False, including_hidden: bool = False):
        self._folder = folder
        self._kind = kind
        self._recursive = recursive
        self._including_hidden = including_hidden

    @property
    def recursive(self) -> LocationSequence[T]:
        return LocationSequence(self._folder, self._kind, recursive=True, including_hidden=self._including_hidden)

    @property
    def including_hidden(self) -> LocationSequence[T]:
        return LocationSequence(self._folder, self._kind, recursive=self._recursive, including_hidden=True)

    @property
    def is_recursive(self) -> bool:
        return self._recursive

    @property
    def includes_hidden(self) -> bool:
        return self._including_hidden

    def __iter__(self) -> Iterator[T]:
        return self._walk(self._folder)

    def _walk(self, folder: Folder) -> Iterator[T]:
        folder_type = type(folder)
        backend = folder.backend
        entries = folder._entries(self._including_hidden)

        subfolders = []
        for entry in entries:
            if entry.is_dir:
                child = folder_type._unchecked(paths.join(folder.path, entry.name), backend)
                subfolders.append(child)
                if self._kind.kind is entry.kind:
                    yield child
            elif self._kind.kind is entry.kind:
                yield self._kind._unchecked(paths.join(folder.path, entry.name), backend)

        if self._recursive:
            for subfolder in subfolders:
                if backend.exists(subfolder.path) is not EntryKind.DIRECTORY:
                    continue
                yield from self._walk(subfolder)

    @property
    def first(self) -> T | None:
        return next(iter(self), None)

    def last(self) -> T | None:
        location = None
        for location in self:
            pass
        return location

    def count(self) -> int:
        return sum(1 for _ in self)

    def names(self) -> list[str]:
        return [location.name for location in self]

    def move(self, to: Folder) -> None:
        """Move every element into ``to``, one at a time.

        Stops at the first failure; elements already moved stay moved.
        """
        for location in self:
            location.move(to)

    def __str__(self) -> str:
        return "\n".join(str(location) for location in self)

    def __repr__(self) -> str:
        return (
            f"LocationSequence(folder={self._folder.path!r}, kind={self._kind.__name__}, "
            f"recursive={self._recursive}, including_hidden={self._including_hidden})"
        )

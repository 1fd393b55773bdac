"""Folder handles: child lookup, creation, containment and bulk operations."""

from __future__ import annotations

import logging

from files import paths
from files.errors import (
    LocationError,
    LocationErrorReason,
    LocationWriteError,
    ReadError,
    ReadErrorReason,
)
from files.file import File, encode
from files.interfaces.filesystem import DirEntry, EntryKind, FileSystemBackend, SpecialDirectory
from files.location import Location, _backend_or_default
from files.sequence import LocationSequence

logger = logging.getLogger(__name__)


class Folder(Location):
    """Handle to a directory.

    Children are never cached: every lookup, probe and enumeration asks
    the backend again.
    """

    kind = EntryKind.DIRECTORY
    _canonical = staticmethod(paths.as_directory)

    # ── Well-known folders ──

    @classmethod
    def root(cls, backend: FileSystemBackend | None = None) -> Folder:
        return cls(paths.ROOT, backend)

    @classmethod
    def matching(cls, kind: SpecialDirectory, backend: FileSystemBackend | None = None) -> Folder | None:
        """The backend's folder for ``kind``, or None if it has none."""
        backend = _backend_or_default(backend)
        path = backend.special_directory(kind)
        if path is None:
            return None
        return cls(path, backend)

    @classmethod
    def _required(cls, kind: SpecialDirectory, backend: FileSystemBackend | None) -> Folder:
        folder = cls.matching(kind, backend)
        if folder is None:
            raise LocationError(kind.value, LocationErrorReason.MISSING)
        return folder

    @classmethod
    def home(cls, backend: FileSystemBackend | None = None) -> Folder:
        return cls._required(SpecialDirectory.HOME, backend)

    @classmethod
    def current(cls, backend: FileSystemBackend | None = None) -> Folder:
        return cls._required(SpecialDirectory.CURRENT, backend)

    @classmethod
    def temporary(cls, backend: FileSystemBackend | None = None) -> Folder:
        return cls._required(SpecialDirectory.TEMPORARY, backend)

    @classmethod
    def documents(cls, backend: FileSystemBackend | None = None) -> Folder | None:
        return cls.matching(SpecialDirectory.DOCUMENTS, backend)

    @classmethod
    def library(cls, backend: FileSystemBackend | None = None) -> Folder | None:
        return cls.matching(SpecialDirectory.LIBRARY, backend)

    # ── Enumeration ──

    @property
    def files(self) -> LocationSequence[File]:
        """Files directly inside this folder (visible only, not recursive)."""
        return LocationSequence(self, File)

    @property
    def subfolders(self) -> LocationSequence[Folder]:
        """Folders directly inside this folder (visible only, not recursive)."""
        return LocationSequence(self, Folder)

    def _entries(self, including_hidden: bool) -> list[DirEntry]:
        result = self._backend.list_children(self._path)
        if result.error is not None:
            if self._backend.exists(self._path) is not EntryKind.DIRECTORY:
                raise LocationError(self._path, LocationErrorReason.MISSING)
            raise ReadError(self._path, ReadErrorReason.READ_FAILED, detail=result.error)
        return [e for e in result.entries if including_hidden or not paths.is_hidden(e.name)]

    # ── Lookup ──

    def file(self, name: str) -> File:
        return File._existing(paths.join(self._path, name), self._backend)

    def file_at(self, path: str) -> File:
        return File._existing(paths.join(self._path, path), self._backend)

    def subfolder(self, name: str) -> Folder:
        return Folder._existing(paths.join(self._path, name), self._backend)

    def subfolder_at(self, path: str) -> Folder:
        return Folder._existing(paths.join(self._path, path), self._backend)

    def contains_file(self, name: str) -> bool:
        return self._backend.exists(paths.join(self._path, name)) is EntryKind.FILE

    def contains_file_at(self, path: str) -> bool:
        return self._backend.exists(paths.join(self._path, path)) is EntryKind.FILE

    def contains_subfolder(self, name: str) -> bool:
        return self._backend.exists(paths.join(self._path, name)) is EntryKind.DIRECTORY

    def contains_subfolder_at(self, path: str) -> bool:
        return self._backend.exists(paths.join(self._path, path)) is EntryKind.DIRECTORY

    def contains(self, location: Location) -> bool:
        """Whether ``location`` is a direct child of this folder."""
        return location.backend is self._backend and paths.parent_path(location.path) == self._path

    # ── Creation ──

    def create_file(self, name: str, contents: bytes | str = b"") -> File:
        """Create a new file; fails if anything already exists under that name."""
        return self._create_file(paths.join(self._path, name), contents)

    def create_file_at(self, path: str, contents: bytes | str = b"") -> File:
        """Create a new file, creating any missing intermediate folders."""
        return self._create_file(paths.join(self._path, path), contents)

    def create_file_if_needed(self, name: str, contents: bytes | str = b"") -> File:
        """Return the existing file unchanged, or create it with ``contents``."""
        return self._create_file_if_needed(paths.join(self._path, name), contents)

    def create_file_if_needed_at(self, path: str, contents: bytes | str = b"") -> File:
        return self._create_file_if_needed(paths.join(self._path, path), contents)

    def create_subfolder(self, name: str) -> Folder:
        return self._create_subfolder(paths.join(self._path, name, directory=True))

    def create_subfolder_at(self, path: str) -> Folder:
        return self._create_subfolder(paths.join(self._path, path, directory=True))

    def create_subfolder_if_needed(self, name: str) -> Folder:
        return self._create_subfolder_if_needed(paths.join(self._path, name, directory=True))

    def create_subfolder_if_needed_at(self, path: str) -> Folder:
        return self._create_subfolder_if_needed(paths.join(self._path, path, directory=True))

    def _create_file_if_needed(self, path: str, contents: bytes | str) -> File:
        if self._backend.exists(path) is EntryKind.FILE:
            return File._unchecked(path, self._backend)
        return self._create_file(path, contents)

    def _create_file(self, path: str, contents: bytes | str) -> File:
        data = encode(contents, self._backend.encoding, path)
        self._require_exists()
        if self._backend.exists(path) is not EntryKind.ABSENT:
            raise LocationWriteError(path, LocationErrorReason.ALREADY_EXISTS)

        parent = paths.parent_path(path)
        if parent is not None and self._backend.exists(parent) is EntryKind.ABSENT:
            self._create(parent, EntryKind.DIRECTORY)
        self._create(path, EntryKind.FILE, data)
        return File._unchecked(path, self._backend)

    def _create_subfolder_if_needed(self, path: str) -> Folder:
        if self._backend.exists(path) is EntryKind.DIRECTORY:
            return Folder._unchecked(path, self._backend)
        return self._create_subfolder(path)

    def _create_subfolder(self, path: str) -> Folder:
        self._require_exists()
        if self._backend.exists(path) is not EntryKind.ABSENT:
            raise LocationWriteError(path, LocationErrorReason.ALREADY_EXISTS)
        self._create(path, EntryKind.DIRECTORY)
        return Folder._unchecked(path, self._backend)

    def _create(self, path: str, kind: EntryKind, contents: bytes | None = None) -> None:
        result = self._backend.create(path, kind, contents)
        if not result.success:
            logger.warning("Failed to create %s %s: %s", kind.value, path, result.error)
            raise LocationWriteError(path, LocationErrorReason.FAILED_TO_CREATE, detail=result.error)
        logger.debug("Created %s %s", kind.value, path)

    # ── Bulk operations ──

    def empty(self, including_hidden: bool = False) -> None:
        """Delete every direct child. Hidden entries survive unless included.

        Stops at the first failure; children already deleted stay deleted.
        """
        for entry in self._entries(including_hidden):
            child_type = Folder if entry.is_dir else File
            child_type._unchecked(paths.join(self._path, entry.name), self._backend).delete()
        logger.debug("Emptied %s (including_hidden=%s)", self._path, including_hidden)

    def is_empty(self, including_hidden: bool = False) -> bool:
        return not self._entries(including_hidden)

    def move_contents(self, to: Folder, include_hidden: bool = False) -> None:
        """Move every direct child into ``to``, keeping names.

        Same-named entries in ``to`` are not merged; the move fails there.
        """
        files, subfolders = self.files, self.subfolders
        if include_hidden:
            files, subfolders = files.including_hidden, subfolders.including_hidden
        files.move(to)
        subfolders.move(to)

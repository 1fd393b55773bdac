"""Location handles: the behaviour shared by File and Folder.

A handle stores a canonical path and the backend used to reach it. It is
validated when constructed; afterwards every operation asks the backend
again, so entries removed behind a handle's back surface as errors.
"""

from __future__ import annotations

import logging
import os
from datetime import datetime
from typing import TYPE_CHECKING, ClassVar

from files import paths
from files.errors import LocationError, LocationErrorReason, LocationWriteError
from files.interfaces.filesystem import EntryKind, FileSystemBackend

if TYPE_CHECKING:
    from typing import Self

    from files.folder import Folder

logger = logging.getLogger(__name__)


def _backend_or_default(backend: FileSystemBackend | None) -> FileSystemBackend:
    if backend is not None:
        return backend
    from files.backends import get_default_backend

    return get_default_backend()


class Location:
    """Base class for File and Folder handles.

    Args:
        path: Absolute, relative (to the current directory) or ``~`` path
        backend: Backend to resolve against; the default backend when omitted

    Raises:
        LocationError: ``missing`` if nothing exists at the path, or
            ``kind_mismatch`` if the entry is of the other kind
    """

    kind: ClassVar[EntryKind]

    def __init__(self, path: str | os.PathLike[str], backend: FileSystemBackend | None = None) -> None:
        backend = _backend_or_default(backend)
        self._bind(paths.resolve(os.fspath(path), backend=backend), backend)

    @staticmethod
    def _canonical(path: str) -> str:
        return paths.as_file(path)

    def _bind(self, path: str, backend: FileSystemBackend) -> None:
        found = backend.exists(path)
        if found is EntryKind.ABSENT:
            raise LocationError(self._canonical(path), LocationErrorReason.MISSING)
        if found is not self.kind:
            raise LocationError(self._canonical(path), LocationErrorReason.KIND_MISMATCH, detail=found.value)
        self._path = self._canonical(path)
        self._backend = backend

    @classmethod
    def _existing(cls, path: str, backend: FileSystemBackend) -> Self:
        """Validated handle for an already canonical path."""
        location = cls.__new__(cls)
        location._bind(path, backend)
        return location

    @classmethod
    def _unchecked(cls, path: str, backend: FileSystemBackend) -> Self:
        """Handle for a path the backend just reported or created."""
        location = cls.__new__(cls)
        location._path = cls._canonical(path)
        location._backend = backend
        return location

    # ── Identity ──

    @property
    def path(self) -> str:
        return self._path

    @property
    def backend(self) -> FileSystemBackend:
        return self._backend

    @property
    def name(self) -> str:
        return paths.name(self._path)

    @property
    def extension(self) -> str | None:
        return paths.extension(self.name)

    @property
    def name_excluding_extension(self) -> str:
        return paths.name_excluding_extension(self.name)

    @property
    def parent(self) -> Folder | None:
        """The folder containing this location, or None for the root."""
        from files.folder import Folder

        parent = paths.parent_path(self._path)
        if parent is None:
            return None
        return Folder._unchecked(parent, self._backend)

    @property
    def modification_date(self) -> datetime | None:
        timestamp = self._backend.modification_time(self._path)
        if timestamp is None:
            return None
        return datetime.fromtimestamp(timestamp)

    def path_relative_to(self, folder: Folder) -> str:
        """Path below ``folder``, or the absolute path if not under it."""
        return paths.relative_path(self._path, folder.path)

    def managed_by(self, backend: FileSystemBackend) -> Self:
        """Equivalent handle resolved through another backend."""
        return self._existing(self._path, backend)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Location):
            return NotImplemented
        return self._path == other._path and self._backend is other._backend

    def __hash__(self) -> int:
        return hash((self._path, id(self._backend)))

    def __str__(self) -> str:
        return f"{type(self).__name__}(name: {self.name}, path: {self._path})"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._path!r})"

    # ── Mutation ──

    def _require_exists(self) -> None:
        if self._backend.exists(self._path) is not self.kind:
            raise LocationError(self._path, LocationErrorReason.MISSING)

    def rename(self, new_name: str, keep_extension: bool = True) -> None:
        """Rename within the same parent folder.

        With ``keep_extension`` the current extension is appended to
        ``new_name`` unless it already ends with it.
        """
        parent = paths.parent_path(self._path)
        if parent is None or not new_name or paths.SEPARATOR in new_name:
            raise LocationWriteError(self._path, LocationErrorReason.FAILED_TO_RENAME, detail=new_name)

        if keep_extension:
            ext = self.extension
            if ext is not None and not new_name.endswith(f".{ext}"):
                new_name = f"{new_name}.{ext}"

        new_path = self._canonical(paths.join(parent, new_name))
        if new_path != self._path:
            self._relocate(new_path, LocationErrorReason.FAILED_TO_RENAME)

    def move(self, to: Folder) -> None:
        """Move into ``to``, keeping the name. The handle follows the entry."""
        new_path = self._canonical(paths.join(to.path, self.name))
        self._relocate(new_path, LocationErrorReason.FAILED_TO_MOVE)

    def _relocate(self, new_path: str, reason: LocationErrorReason) -> None:
        self._require_exists()
        if self._backend.exists(new_path) is not EntryKind.ABSENT:
            raise LocationWriteError(new_path, LocationErrorReason.ALREADY_EXISTS)

        result = self._backend.move(self._path, new_path)
        if not result.success:
            logger.warning("Failed to move %s -> %s: %s", self._path, new_path, result.error)
            raise LocationWriteError(self._path, reason, detail=result.error)

        logger.debug("Moved %s -> %s", self._path, new_path)
        self._path = new_path

    def copy(self, to: Folder) -> Self:
        """Copy into ``to`` and return a handle to the copy."""
        self._require_exists()
        new_path = self._canonical(paths.join(to.path, self.name))
        if self._backend.exists(new_path) is not EntryKind.ABSENT:
            raise LocationWriteError(new_path, LocationErrorReason.ALREADY_EXISTS)

        result = self._backend.copy(self._path, new_path)
        if not result.success:
            logger.warning("Failed to copy %s -> %s: %s", self._path, new_path, result.error)
            raise LocationWriteError(self._path, LocationErrorReason.FAILED_TO_COPY, detail=result.error)

        logger.debug("Copied %s -> %s", self._path, new_path)
        return self._unchecked(new_path, self._backend)

    def delete(self) -> None:
        """Remove the entry (recursively for folders)."""
        self._require_exists()
        result = self._backend.remove(self._path)
        if not result.success:
            logger.warning("Failed to delete %s: %s", self._path, result.error)
            raise LocationError(self._path, LocationErrorReason.FAILED_TO_DELETE, detail=result.error)
        logger.debug("Deleted %s", self._path)

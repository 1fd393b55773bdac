"""Local filesystem backend - direct local I/O."""

from __future__ import annotations

import os
import shutil
import sys
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

from files.interfaces.filesystem import (
    DirEntry,
    DirListResult,
    EntryKind,
    FileSystemBackend,
    OperationResult,
    SpecialDirectory,
)

if TYPE_CHECKING:
    from config.schema import FilesSettings


def _native(path: str) -> str:
    return path.rstrip("/") or "/"


class LocalBackend(FileSystemBackend):
    """Backend that operates directly on the local filesystem.

    Args:
        encoding: Default text encoding used by handles bound to this backend
        sort_entries: Return directory listings sorted by name
        special_directories: Overrides keyed by SpecialDirectory value
    """

    def __init__(
        self,
        encoding: str = "utf-8",
        sort_entries: bool = True,
        special_directories: dict[str, str] | None = None,
    ) -> None:
        self.encoding = encoding
        self.sort_entries = sort_entries
        self._special_overrides = dict(special_directories or {})

    @classmethod
    def from_settings(cls, settings: FilesSettings) -> LocalBackend:
        return cls(
            encoding=settings.encoding,
            sort_entries=settings.listing.sort_entries,
            special_directories=settings.special_directories.as_dict(),
        )

    def exists(self, path: str) -> EntryKind:
        p = _native(path)
        if os.path.isdir(p):
            return EntryKind.DIRECTORY
        if os.path.lexists(p):
            return EntryKind.FILE
        return EntryKind.ABSENT

    def create(self, path: str, kind: EntryKind, contents: bytes | None = None) -> OperationResult:
        p = Path(_native(path))
        try:
            if kind is EntryKind.DIRECTORY:
                p.mkdir(parents=True, exist_ok=True)
            else:
                with open(p, "xb") as f:
                    f.write(contents or b"")
            return OperationResult(success=True)
        except OSError as e:
            return OperationResult(success=False, error=str(e))

    def remove(self, path: str) -> OperationResult:
        p = _native(path)
        try:
            if os.path.isdir(p) and not os.path.islink(p):
                shutil.rmtree(p)
            else:
                os.remove(p)
            return OperationResult(success=True)
        except OSError as e:
            return OperationResult(success=False, error=str(e))

    def move(self, source: str, destination: str) -> OperationResult:
        try:
            shutil.move(_native(source), _native(destination))
            return OperationResult(success=True)
        except (OSError, shutil.Error) as e:
            return OperationResult(success=False, error=str(e))

    def copy(self, source: str, destination: str) -> OperationResult:
        src, dst = _native(source), _native(destination)
        try:
            if os.path.isdir(src):
                shutil.copytree(src, dst)
            else:
                shutil.copy2(src, dst)
            return OperationResult(success=True)
        except (OSError, shutil.Error) as e:
            return OperationResult(success=False, error=str(e))

    def read_bytes(self, path: str) -> bytes:
        return Path(_native(path)).read_bytes()

    def write_bytes(self, path: str, data: bytes) -> OperationResult:
        try:
            Path(_native(path)).write_bytes(data)
            return OperationResult(success=True)
        except OSError as e:
            return OperationResult(success=False, error=str(e))

    def append_bytes(self, path: str, data: bytes) -> OperationResult:
        try:
            with open(_native(path), "ab") as f:
                f.write(data)
            return OperationResult(success=True)
        except OSError as e:
            return OperationResult(success=False, error=str(e))

    def list_children(self, path: str) -> DirListResult:
        try:
            entries = []
            with os.scandir(_native(path)) as it:
                for item in it:
                    kind = EntryKind.DIRECTORY if item.is_dir() else EntryKind.FILE
                    entries.append(DirEntry(name=item.name, kind=kind))
        except OSError as e:
            return DirListResult(error=str(e))
        if self.sort_entries:
            entries.sort(key=lambda entry: entry.name)
        return DirListResult(entries=entries)

    def special_directory(self, kind: SpecialDirectory) -> str | None:
        override = self._special_overrides.get(kind.value)
        if override:
            return override
        if kind is SpecialDirectory.CURRENT:
            return os.getcwd()
        if kind is SpecialDirectory.TEMPORARY:
            return tempfile.gettempdir()

        home = os.path.expanduser("~")
        if kind is SpecialDirectory.HOME:
            return home
        if kind is SpecialDirectory.DOCUMENTS:
            candidate = os.path.join(home, "Documents")
        elif sys.platform == "darwin":
            candidate = os.path.join(home, "Library")
            if kind is SpecialDirectory.CACHES:
                candidate = os.path.join(candidate, "Caches")
        elif kind is SpecialDirectory.CACHES:
            candidate = os.environ.get("XDG_CACHE_HOME") or os.path.join(home, ".cache")
        else:
            candidate = os.environ.get("XDG_DATA_HOME") or os.path.join(home, ".local", "share")
        return candidate if os.path.isdir(candidate) else None

    def modification_time(self, path: str) -> float | None:
        try:
            return os.stat(_native(path)).st_mtime
        except OSError:
            return None

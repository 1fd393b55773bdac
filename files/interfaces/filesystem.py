"""FileSystem backend abstraction.

Separates I/O mechanism (local disk vs in-memory tree) from the handle layer
(path resolution, validation, enumeration) in files.location / files.folder.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum


class EntryKind(str, Enum):
    """What a backend found at a path."""

    ABSENT = "absent"
    FILE = "file"
    DIRECTORY = "directory"


class SpecialDirectory(str, Enum):
    """Well-known directories a backend may be able to locate."""

    HOME = "home"
    CURRENT = "current"
    TEMPORARY = "temporary"
    DOCUMENTS = "documents"
    LIBRARY = "library"
    CACHES = "caches"


@dataclass
class OperationResult:
    """Result of a mutating backend operation."""

    success: bool
    error: str | None = None


@dataclass
class DirEntry:
    """Single directory entry."""

    name: str
    kind: EntryKind

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


@dataclass
class DirListResult:
    """Result of listing a directory."""

    entries: list[DirEntry] = field(default_factory=list)
    error: str | None = None


class FileSystemBackend(ABC):
    """Abstract backend for filesystem I/O.

    Implementations:
    - LocalBackend: direct local filesystem access
    - MemoryBackend: in-process tree, for tests and alternate roots

    Paths handed to a backend are always absolute. Directory paths may carry a
    trailing separator; implementations must accept both forms.
    """

    encoding: str = "utf-8"

    @abstractmethod
    def exists(self, path: str) -> EntryKind:
        """Report whether ``path`` is absent, a file, or a directory."""
        ...

    @abstractmethod
    def create(self, path: str, kind: EntryKind, contents: bytes | None = None) -> OperationResult:
        """Create a file (with optional contents) or a directory.

        Directories are created with any missing intermediate directories.
        Creating a file requires its parent directory to exist.
        """
        ...

    @abstractmethod
    def remove(self, path: str) -> OperationResult:
        """Remove a file, or a directory with everything below it."""
        ...

    @abstractmethod
    def move(self, source: str, destination: str) -> OperationResult:
        """Move ``source`` to the exact path ``destination``."""
        ...

    @abstractmethod
    def copy(self, source: str, destination: str) -> OperationResult:
        """Copy ``source`` to the exact path ``destination`` (recursive for directories)."""
        ...

    @abstractmethod
    def read_bytes(self, path: str) -> bytes:
        """Read raw file content.

        Raises:
            OSError: If the file cannot be read
        """
        ...

    @abstractmethod
    def write_bytes(self, path: str, data: bytes) -> OperationResult:
        """Replace the full contents of a file."""
        ...

    @abstractmethod
    def append_bytes(self, path: str, data: bytes) -> OperationResult:
        """Append to the end of a file."""
        ...

    @abstractmethod
    def list_children(self, path: str) -> DirListResult:
        """List directory contents.

        Args:
            path: Absolute directory path

        Returns:
            DirListResult with entries in backend order, or an error
        """
        ...

    @abstractmethod
    def special_directory(self, kind: SpecialDirectory) -> str | None:
        """Absolute path of a well-known directory, or None if unavailable."""
        ...

    @abstractmethod
    def modification_time(self, path: str) -> float | None:
        """Get modification time as a POSIX timestamp.

        Returns:
            mtime as float, or None if not available
        """
        ...

"""Backend interfaces: ABC and data classes for filesystem access."""

from files.interfaces.filesystem import (
    DirEntry,
    DirListResult,
    EntryKind,
    FileSystemBackend,
    OperationResult,
    SpecialDirectory,
)

__all__ = [
    "FileSystemBackend",
    "EntryKind",
    "SpecialDirectory",
    "OperationResult",
    "DirEntry",
    "DirListResult",
]

"""Object-oriented file and folder handles over a pluggable filesystem backend."""

from files.backends import LocalBackend, MemoryBackend, get_default_backend, set_default_backend
from files.errors import (
    FilesError,
    LocationError,
    LocationErrorReason,
    LocationWriteError,
    ReadError,
    ReadErrorReason,
    WriteError,
    WriteErrorReason,
)
from files.file import File
from files.folder import Folder
from files.interfaces.filesystem import EntryKind, FileSystemBackend, SpecialDirectory
from files.location import Location
from files.paths import resolve
from files.sequence import LocationSequence

__all__ = [
    # Handles
    "Location",
    "File",
    "Folder",
    "LocationSequence",
    "resolve",
    # Backends
    "FileSystemBackend",
    "LocalBackend",
    "MemoryBackend",
    "EntryKind",
    "SpecialDirectory",
    "get_default_backend",
    "set_default_backend",
    # Errors
    "FilesError",
    "LocationError",
    "LocationErrorReason",
    "LocationWriteError",
    "ReadError",
    "ReadErrorReason",
    "WriteError",
    "WriteErrorReason",
]

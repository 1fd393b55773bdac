"""Filesystem backends and the process-wide default backend."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from files.backends.local import LocalBackend
from files.backends.memory import MemoryBackend
from files.interfaces.filesystem import FileSystemBackend

if TYPE_CHECKING:
    from config.schema import FilesSettings

logger = logging.getLogger(__name__)

_default_backend: FileSystemBackend | None = None


def create_backend(settings: FilesSettings | None = None) -> FileSystemBackend:
    """Build a backend from settings (loaded from config files when omitted)."""
    if settings is None:
        from config.loader import load_config

        settings = load_config()
    if settings.backend == "memory":
        return MemoryBackend(
            special_directories=settings.special_directories.as_dict(),
            encoding=settings.encoding,
        )
    return LocalBackend.from_settings(settings)


def get_default_backend() -> FileSystemBackend:
    """Backend used by handles and functions called with ``backend=None``."""
    global _default_backend
    if _default_backend is None:
        _default_backend = create_backend()
        logger.debug("Default backend: %s", type(_default_backend).__name__)
    return _default_backend


def set_default_backend(backend: FileSystemBackend | None) -> None:
    """Replace the default backend; ``None`` rebuilds it from config on next use."""
    global _default_backend
    _default_backend = backend


__all__ = [
    "FileSystemBackend",
    "LocalBackend",
    "MemoryBackend",
    "create_backend",
    "get_default_backend",
    "set_default_backend",
]

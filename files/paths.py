"""Path resolution.

Turns raw path strings (relative, absolute, ``~``-prefixed) into canonical
absolute paths, and derives names, extensions and parents from them.

Canonical paths are POSIX style: absolute, no ``.``/``..`` segments, no
doubled separators; directories end with exactly one separator, files
never do.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from files.errors import LocationError, LocationErrorReason
from files.interfaces.filesystem import SpecialDirectory

if TYPE_CHECKING:
    from files.interfaces.filesystem import FileSystemBackend

SEPARATOR = "/"
ROOT = SEPARATOR
HOME_SEGMENT = "~"


def normalize(path: str) -> str:
    """Collapse ``.``, ``..`` and repeated separators of an absolute path.

    The result has no trailing separator unless it is the root.
    ``..`` at the root stays at the root.
    """
    segments: list[str] = []
    for segment in path.split(SEPARATOR):
        if segment in ("", "."):
            continue
        if segment == "..":
            if segments:
                segments.pop()
            continue
        segments.append(segment)
    return ROOT + SEPARATOR.join(segments)


def as_directory(path: str) -> str:
    """Give a normalized path the directory form (one trailing separator)."""
    return path if path.endswith(SEPARATOR) else path + SEPARATOR


def as_file(path: str) -> str:
    return path.rstrip(SEPARATOR) or ROOT


def resolve(
    raw: str,
    relative_to: str | None = None,
    *,
    backend: FileSystemBackend | None = None,
    directory: bool = False,
) -> str:
    """Resolve ``raw`` into a canonical absolute path.

    - ``""`` resolves to the current working directory.
    - A leading ``~`` segment expands to the home directory.
    - Relative paths are joined under ``relative_to`` (or the current
      working directory when it is not given).

    Args:
        raw: Path as typed by a user
        relative_to: Canonical folder path to resolve relative paths against
        backend: Backend providing the home and current directories
        directory: Return the directory form (trailing separator)
    """
    path = raw
    if path == HOME_SEGMENT or path.startswith(HOME_SEGMENT + SEPARATOR):
        path = _special(SpecialDirectory.HOME, backend) + SEPARATOR + path[len(HOME_SEGMENT):]
    elif not path.startswith(SEPARATOR):
        base = relative_to if relative_to is not None else _special(SpecialDirectory.CURRENT, backend)
        path = base + SEPARATOR + path

    resolved = normalize(path)
    return as_directory(resolved) if directory else resolved


def join(folder_path: str, sub_path: str, *, directory: bool = False) -> str:
    """Resolve a folder-relative path under ``folder_path``.

    One leading separator is dropped first, so ``"a/b"`` and ``"/a/b"`` name
    the same location under a given folder. No ``~`` expansion is done.
    """
    if sub_path.startswith(SEPARATOR):
        sub_path = sub_path[1:]
    resolved = normalize(folder_path + SEPARATOR + sub_path)
    return as_directory(resolved) if directory else resolved


def name(path: str) -> str:
    """Final segment of a path; empty for the root."""
    return as_file(path).rsplit(SEPARATOR, 1)[-1]


def extension(file_name: str) -> str | None:
    """Text after the last ``.``; None for dotfiles and names without a dot."""
    index = file_name.rfind(".")
    if index <= 0:
        return None
    return file_name[index + 1:]


def name_excluding_extension(file_name: str) -> str:
    ext = extension(file_name)
    if ext is None:
        return file_name
    return file_name[: -(len(ext) + 1)]


def parent_path(path: str) -> str | None:
    """Directory form of the containing folder; None for the root."""
    stripped = as_file(path)
    if stripped == ROOT:
        return None
    head = stripped.rsplit(SEPARATOR, 1)[0]
    return as_directory(head or ROOT)


def relative_path(path: str, root: str) -> str:
    """Strip ``root`` from ``path`` when it is a strict prefix.

    Returns ``path`` unchanged when it does not live under ``root``.
    The result never carries a trailing separator.
    """
    root = as_directory(root)
    if path == root or not path.startswith(root):
        return path
    return as_file(path[len(root):])


def is_hidden(entry_name: str) -> bool:
    return entry_name.startswith(".")


def _special(kind: SpecialDirectory, backend: FileSystemBackend | None) -> str:
    if backend is None:
        from files.backends import get_default_backend

        backend = get_default_backend()
    path = backend.special_directory(kind)
    if path is None:
        raise LocationError(kind.value, LocationErrorReason.MISSING)
    return as_file(path)

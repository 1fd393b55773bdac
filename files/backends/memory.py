"""In-memory filesystem backend.

Keeps a whole tree in process. Directory listings come back in insertion
order, which makes enumeration order deterministic in tests.
"""

from __future__ import annotations

import copy
import errno
import os
import time
from dataclasses import dataclass, field

from files.interfaces.filesystem import (
    DirEntry,
    DirListResult,
    EntryKind,
    FileSystemBackend,
    OperationResult,
    SpecialDirectory,
)

DEFAULT_HOME = "/home/user"
DEFAULT_TEMPORARY = "/tmp"


@dataclass
class _Node:
    kind: EntryKind
    data: bytearray = field(default_factory=bytearray)
    children: dict[str, _Node] = field(default_factory=dict)
    mtime: float = field(default_factory=time.time)


def _segments(path: str) -> list[str]:
    return [s for s in path.split("/") if s]


def _error(code: int, path: str) -> OSError:
    return OSError(code, os.strerror(code), path)


class MemoryBackend(FileSystemBackend):
    """Backend holding an in-process tree rooted at ``/``.

    Args:
        special_directories: Paths keyed by SpecialDirectory value. ``home``,
            ``current`` and ``temporary`` default to /home/user, /home/user
            and /tmp; every listed directory is created up front.
        encoding: Default text encoding used by handles bound to this backend
    """

    def __init__(self, special_directories: dict[str, str] | None = None, encoding: str = "utf-8") -> None:
        self.encoding = encoding
        self._root = _Node(EntryKind.DIRECTORY)
        self._special = {
            SpecialDirectory.HOME.value: DEFAULT_HOME,
            SpecialDirectory.CURRENT.value: DEFAULT_HOME,
            SpecialDirectory.TEMPORARY.value: DEFAULT_TEMPORARY,
        }
        self._special.update(special_directories or {})
        for path in self._special.values():
            self._make_dirs(_segments(path))

    def chdir(self, path: str) -> None:
        """Change the directory reported as ``current``."""
        if self.exists(path) is not EntryKind.DIRECTORY:
            raise _error(errno.ENOTDIR, path)
        self._special[SpecialDirectory.CURRENT.value] = "/" + "/".join(_segments(path))

    # ── Tree helpers ──

    def _lookup(self, path: str) -> _Node | None:
        node = self._root
        for segment in _segments(path):
            if node.kind is not EntryKind.DIRECTORY or segment not in node.children:
                return None
            node = node.children[segment]
        return node

    def _parent(self, path: str) -> tuple[_Node, str]:
        segments = _segments(path)
        if not segments:
            raise _error(errno.EBUSY, path)
        parent = self._lookup("/" + "/".join(segments[:-1]))
        if parent is None:
            raise _error(errno.ENOENT, path)
        if parent.kind is not EntryKind.DIRECTORY:
            raise _error(errno.ENOTDIR, path)
        return parent, segments[-1]

    def _make_dirs(self, segments: list[str]) -> _Node:
        node = self._root
        for segment in segments:
            child = node.children.get(segment)
            if child is None:
                child = node.children[segment] = _Node(EntryKind.DIRECTORY)
                node.mtime = time.time()
            elif child.kind is not EntryKind.DIRECTORY:
                raise _error(errno.ENOTDIR, segment)
            node = child
        return node

    def _file(self, path: str) -> _Node:
        node = self._lookup(path)
        if node is None:
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path)
        if node.kind is EntryKind.DIRECTORY:
            raise IsADirectoryError(errno.EISDIR, os.strerror(errno.EISDIR), path)
        return node

    # ── FileSystemBackend ──

    def exists(self, path: str) -> EntryKind:
        node = self._lookup(path)
        return EntryKind.ABSENT if node is None else node.kind

    def create(self, path: str, kind: EntryKind, contents: bytes | None = None) -> OperationResult:
        try:
            if kind is EntryKind.DIRECTORY:
                self._make_dirs(_segments(path))
                return OperationResult(success=True)
            parent, name = self._parent(path)
            if name in parent.children:
                raise _error(errno.EEXIST, path)
            parent.children[name] = _Node(EntryKind.FILE, data=bytearray(contents or b""))
            parent.mtime = time.time()
            return OperationResult(success=True)
        except OSError as e:
            return OperationResult(success=False, error=str(e))

    def remove(self, path: str) -> OperationResult:
        try:
            parent, name = self._parent(path)
            if name not in parent.children:
                raise _error(errno.ENOENT, path)
            del parent.children[name]
            parent.mtime = time.time()
            return OperationResult(success=True)
        except OSError as e:
            return OperationResult(success=False, error=str(e))

    def move(self, source: str, destination: str) -> OperationResult:
        src, dst = _segments(source), _segments(destination)
        try:
            if dst[: len(src)] == src:
                raise _error(errno.EINVAL, destination)
            src_parent, src_name = self._parent(source)
            if src_name not in src_parent.children:
                raise _error(errno.ENOENT, source)
            dst_parent, dst_name = self._parent(destination)
            if dst_name in dst_parent.children:
                raise _error(errno.EEXIST, destination)
            dst_parent.children[dst_name] = src_parent.children.pop(src_name)
            src_parent.mtime = dst_parent.mtime = time.time()
            return OperationResult(success=True)
        except OSError as e:
            return OperationResult(success=False, error=str(e))

    def copy(self, source: str, destination: str) -> OperationResult:
        try:
            node = self._lookup(source)
            if node is None:
                raise _error(errno.ENOENT, source)
            dst_parent, dst_name = self._parent(destination)
            if dst_name in dst_parent.children:
                raise _error(errno.EEXIST, destination)
            dst_parent.children[dst_name] = copy.deepcopy(node)
            dst_parent.mtime = time.time()
            return OperationResult(success=True)
        except OSError as e:
            return OperationResult(success=False, error=str(e))

    def read_bytes(self, path: str) -> bytes:
        return bytes(self._file(path).data)

    def write_bytes(self, path: str, data: bytes) -> OperationResult:
        try:
            node = self._lookup(path)
            if node is None:
                parent, name = self._parent(path)
                node = parent.children[name] = _Node(EntryKind.FILE)
            elif node.kind is EntryKind.DIRECTORY:
                raise _error(errno.EISDIR, path)
            node.data = bytearray(data)
            node.mtime = time.time()
            return OperationResult(success=True)
        except OSError as e:
            return OperationResult(success=False, error=str(e))

    def append_bytes(self, path: str, data: bytes) -> OperationResult:
        try:
            node = self._file(path)
            node.data.extend(data)
            node.mtime = time.time()
            return OperationResult(success=True)
        except OSError as e:
            return OperationResult(success=False, error=str(e))

    def list_children(self, path: str) -> DirListResult:
        node = self._lookup(path)
        if node is None:
            return DirListResult(error=str(_error(errno.ENOENT, path)))
        if node.kind is not EntryKind.DIRECTORY:
            return DirListResult(error=str(_error(errno.ENOTDIR, path)))
        return DirListResult(entries=[DirEntry(name=name, kind=child.kind) for name, child in node.children.items()])

    def special_directory(self, kind: SpecialDirectory) -> str | None:
        path = self._special.get(kind.value)
        if path is None or self.exists(path) is not EntryKind.DIRECTORY:
            return None
        return path

    def modification_time(self, path: str) -> float | None:
        node = self._lookup(path)
        return None if node is None else node.mtime

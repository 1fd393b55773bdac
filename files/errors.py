"""Errors raised by file and folder handles.

Every error carries the canonical path that triggered it and a reason.
Backend faults are chained (``raise ... from exc``) and kept on ``cause``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class LocationErrorReason(str, Enum):
    MISSING = "missing"
    KIND_MISMATCH = "kind_mismatch"
    ALREADY_EXISTS = "already_exists"
    FAILED_TO_CREATE = "failed_to_create"
    FAILED_TO_RENAME = "failed_to_rename"
    FAILED_TO_MOVE = "failed_to_move"
    FAILED_TO_COPY = "failed_to_copy"
    FAILED_TO_DELETE = "failed_to_delete"


class ReadErrorReason(str, Enum):
    READ_FAILED = "read_failed"
    STRING_DECODING_FAILED = "string_decoding_failed"
    NOT_CONVERTIBLE = "not_convertible"


class WriteErrorReason(str, Enum):
    WRITE_FAILED = "write_failed"
    STRING_ENCODING_FAILED = "string_encoding_failed"


class FilesError(Exception):
    """Base error: a path plus the reason an operation on it failed.

    Args:
        path: Canonical path of the location involved
        reason: One of the *ErrorReason enums
        detail: Optional value attached to the reason (e.g. the string that
            could not be encoded, or the backend's error message)
        cause: Underlying exception, if any
    """

    def __init__(self, path: str, reason: Enum, detail: Any = None, cause: BaseException | None = None):
        self.path = path
        self.reason = reason
        self.detail = detail
        self.cause = cause
        super().__init__(self.description)

    @property
    def description(self) -> str:
        reason = self.reason.value
        if self.detail is not None:
            reason = f"{reason}({self.detail!r})"
        return f"Files encountered an error at '{self.path}'.\nReason: {reason}"

    def __str__(self) -> str:
        return self.description

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={self.path!r}, reason={self.reason.value!r})"


class LocationError(FilesError):
    """A location could not be found, created or relocated."""


class ReadError(FilesError):
    """A file's contents could not be read or interpreted."""


class WriteError(FilesError):
    """A file's contents, or the tree, could not be written."""


class LocationWriteError(LocationError, WriteError):
    """Strict creation, rename, move or copy failed.

    Both a location error and a write error, so either may be caught.
    """

"""File handles: byte and text I/O on a single regular file."""

from __future__ import annotations

import logging

from files.errors import (
    LocationErrorReason,
    ReadError,
    ReadErrorReason,
    WriteError,
    WriteErrorReason,
)
from files.interfaces.filesystem import EntryKind
from files.location import Location

logger = logging.getLogger(__name__)


def encode(data: bytes | str, encoding: str, path: str) -> bytes:
    """Bytes pass through; text is encoded or raises WriteError."""
    if not isinstance(data, str):
        return bytes(data)
    try:
        return data.encode(encoding)
    except (UnicodeEncodeError, LookupError) as e:
        raise WriteError(path, WriteErrorReason.STRING_ENCODING_FAILED, detail=data, cause=e) from e


class File(Location):
    """Handle to a regular file."""

    kind = EntryKind.FILE

    def read(self) -> bytes:
        try:
            return self._backend.read_bytes(self._path)
        except OSError as e:
            raise ReadError(self._path, ReadErrorReason.READ_FAILED, detail=str(e), cause=e) from e

    def read_as_string(self, encoding: str | None = None) -> str:
        encoding = encoding or self._backend.encoding
        data = self.read()
        try:
            return data.decode(encoding)
        except (UnicodeDecodeError, LookupError) as e:
            raise ReadError(self._path, ReadErrorReason.STRING_DECODING_FAILED, detail=encoding, cause=e) from e

    def read_as_int(self) -> int:
        text = self.read_as_string().strip()
        try:
            return int(text)
        except ValueError as e:
            raise ReadError(self._path, ReadErrorReason.NOT_CONVERTIBLE, detail=text, cause=e) from e

    def read_as_float(self) -> float:
        text = self.read_as_string().strip()
        try:
            return float(text)
        except ValueError as e:
            raise ReadError(self._path, ReadErrorReason.NOT_CONVERTIBLE, detail=text, cause=e) from e

    def write(self, data: bytes | str, encoding: str | None = None) -> None:
        """Replace the file's contents."""
        payload = encode(data, encoding or self._backend.encoding, self._path)
        self._require_writable()
        result = self._backend.write_bytes(self._path, payload)
        if not result.success:
            logger.warning("Failed to write %s: %s", self._path, result.error)
            raise WriteError(self._path, WriteErrorReason.WRITE_FAILED, detail=result.error)

    def append(self, data: bytes | str, encoding: str | None = None) -> None:
        """Add to the end of the file's contents."""
        payload = encode(data, encoding or self._backend.encoding, self._path)
        self._require_writable()
        result = self._backend.append_bytes(self._path, payload)
        if not result.success:
            logger.warning("Failed to append to %s: %s", self._path, result.error)
            raise WriteError(self._path, WriteErrorReason.WRITE_FAILED, detail=result.error)

    def _require_writable(self) -> None:
        # Writes must not resurrect a file deleted behind this handle.
        if self._backend.exists(self._path) is not EntryKind.FILE:
            raise WriteError(self._path, WriteErrorReason.WRITE_FAILED, detail=LocationErrorReason.MISSING.value)

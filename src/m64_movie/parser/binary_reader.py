"""Low-level binary reader with typed read methods and a moving cursor."""

import struct

from m64_movie.models.constants import FieldName
from m64_movie.parser.errors import NotEnoughBytes


class BinaryReader:
    """Wraps a bytes buffer with typed little-endian reads and a moving cursor.

    Every read names the header field it belongs to, so running off the
    end of the buffer raises NotEnoughBytes attributed to that field.
    """

    __slots__ = ("_data", "_pos", "_end")

    def __init__(self, data: bytes, offset: int = 0, end: int | None = None) -> None:
        self._data = data
        self._pos = offset
        self._end = end if end is not None else len(data)

    @property
    def position(self) -> int:
        return self._pos

    @property
    def remaining(self) -> int:
        return self._end - self._pos

    def _read(self, size: int, field: FieldName) -> bytes:
        if self._pos + size > self._end:
            raise NotEnoughBytes(field, size - self.remaining, self._pos)
        chunk = self._data[self._pos : self._pos + size]
        self._pos += size
        return chunk

    def uint8(self, field: FieldName) -> int:
        return self._read(1, field)[0]

    def uint16(self, field: FieldName) -> int:
        return struct.unpack_from("<H", self._read(2, field))[0]

    def uint32(self, field: FieldName) -> int:
        return struct.unpack_from("<I", self._read(4, field))[0]

    def peek(self, size: int) -> bytes:
        """Return up to *size* bytes at the cursor without advancing."""
        return self._data[self._pos : min(self._pos + size, self._end)]

    # Defined last so the `bytes` annotations above refer to the builtin.
    def bytes(self, size: int, field: FieldName) -> bytes:
        return self._read(size, field)

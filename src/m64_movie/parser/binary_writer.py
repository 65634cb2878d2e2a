"""Append-only binary writer, the mirror image of BinaryReader."""

import struct


class BinaryWriter:
    """Accumulates little-endian fields into a fresh bytearray."""

    __slots__ = ("_buf",)

    def __init__(self) -> None:
        self._buf = bytearray()

    @property
    def position(self) -> int:
        return len(self._buf)

    def uint8(self, value: int) -> None:
        self._buf += struct.pack("<B", value)

    def uint16(self, value: int) -> None:
        self._buf += struct.pack("<H", value)

    def uint32(self, value: int) -> None:
        self._buf += struct.pack("<I", value)

    def zeros(self, size: int) -> None:
        self._buf += bytes(size)

    def getvalue(self) -> bytes:
        return bytes(self._buf)

    # Defined last so the `bytes` annotations above refer to the builtin.
    def bytes(self, data: bytes) -> None:
        self._buf += data

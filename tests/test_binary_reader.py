"""Tests for BinaryReader and BinaryWriter: all synthetic bytes."""

import struct

import pytest

from m64_movie.models.constants import FieldName
from m64_movie.parser.binary_reader import BinaryReader
from m64_movie.parser.binary_writer import BinaryWriter
from m64_movie.parser.errors import NotEnoughBytes, ParseErrorKind


def test_uint8():
    r = BinaryReader(bytes([0x00, 0x7F, 0xFF]))
    assert r.uint8(FieldName.FPS) == 0
    assert r.uint8(FieldName.FPS) == 127
    assert r.uint8(FieldName.FPS) == 255


def test_uint16():
    data = struct.pack("<HH", 0, 0xFFFF)
    r = BinaryReader(data)
    assert r.uint16(FieldName.ROM_COUNTRY_CODE) == 0
    assert r.uint16(FieldName.ROM_COUNTRY_CODE) == 65535


def test_uint32():
    data = struct.pack("<II", 42, 0xDEADBEEF)
    r = BinaryReader(data)
    assert r.uint32(FieldName.UID) == 42
    assert r.uint32(FieldName.UID) == 0xDEADBEEF


def test_bytes():
    data = b"\x01\x02\x03\x04"
    r = BinaryReader(data)
    assert r.bytes(2, FieldName.AUTHOR) == b"\x01\x02"
    assert r.bytes(2, FieldName.AUTHOR) == b"\x03\x04"


def test_peek_does_not_advance():
    r = BinaryReader(b"M64\x1a\x03")
    assert r.peek(4) == b"M64\x1a"
    assert r.position == 0


def test_peek_is_clamped_to_end():
    r = BinaryReader(b"M6")
    assert r.peek(4) == b"M6"


def test_remaining_and_position():
    r = BinaryReader(b"abcdef")
    assert r.position == 0
    assert r.remaining == 6
    r.bytes(2, FieldName.AUTHOR)
    assert r.position == 2
    assert r.remaining == 4


def test_read_past_end_names_field_and_shortfall():
    r = BinaryReader(b"\x01\x02")
    with pytest.raises(NotEnoughBytes) as excinfo:
        r.uint32(FieldName.VERSION)

    err = excinfo.value
    assert err.kind is ParseErrorKind.NOT_ENOUGH_BYTES
    assert err.field is FieldName.VERSION
    assert err.requires == 2
    assert err.offset == 0
    assert str(err) == (
        "Not enough bytes to read to make up for the Version field, requires 2 more bytes"
    )


def test_read_past_end_is_a_value_error():
    r = BinaryReader(b"")
    with pytest.raises(ValueError):
        r.uint8(FieldName.FPS)


def test_offset_and_end_bound_the_reader():
    data = struct.pack("<III", 100, 200, 300)
    r = BinaryReader(data, offset=4, end=8)
    assert r.uint32(FieldName.UID) == 200
    assert r.remaining == 0


def test_writer_packs_little_endian():
    w = BinaryWriter()
    w.uint8(0xAB)
    w.uint16(0x1234)
    w.uint32(0xDEADBEEF)
    w.zeros(3)
    w.bytes(b"xy")

    assert w.position == 1 + 2 + 4 + 3 + 2
    assert w.getvalue() == b"\xab\x34\x12\xef\xbe\xad\xde\x00\x00\x00xy"


def test_writer_rejects_out_of_range_values():
    w = BinaryWriter()
    with pytest.raises(struct.error):
        w.uint16(0x1_0000)


def test_bytes_annotations_name_the_builtin():
    assert BinaryReader.peek.__annotations__["return"] is bytes
    assert BinaryReader.bytes.__annotations__["return"] is bytes
    assert BinaryWriter.getvalue.__annotations__["return"] is bytes
    assert BinaryWriter.bytes.__annotations__["data"] is bytes

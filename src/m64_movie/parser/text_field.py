"""Decode/encode fixed-capacity UTF-8 text slots.

A slot is stored verbatim, padding included; see FixedText.
"""

from m64_movie.models.constants import TEXT_FIELD_SIZES, FieldName
from m64_movie.models.movie import FixedText
from m64_movie.parser.binary_reader import BinaryReader
from m64_movie.parser.errors import InvalidText


def decode_text(raw: bytes, field: FieldName, offset: int) -> FixedText:
    """Wrap an N-byte slot, failing with InvalidText if it is not UTF-8."""
    try:
        return FixedText(raw)
    except UnicodeDecodeError:
        raise InvalidText(field, offset) from None


def read_text(reader: BinaryReader, field: FieldName) -> FixedText:
    offset = reader.position
    raw = reader.bytes(TEXT_FIELD_SIZES[field], field)
    return decode_text(raw, field, offset)


def encode_text(value: FixedText | str, field: FieldName) -> bytes:
    """Return exactly TEXT_FIELD_SIZES[field] bytes for *value*."""
    capacity = TEXT_FIELD_SIZES[field]
    if isinstance(value, str):
        value = FixedText.from_text(value, capacity)
    return value.fit(capacity).raw

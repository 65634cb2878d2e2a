"""Errors raised while decoding or encoding .m64 movies.

Every decode failure is an M64ParseError carrying a ParseErrorKind tag and
the absolute byte offset where decoding stopped. The set of kinds is
closed; callers can exhaustively match on ``err.kind``.
"""

from enum import Enum

from m64_movie.models.constants import (
    FIELD_OFFSETS,
    SIGNATURE,
    SUPPORTED_VERSION,
    FieldName,
)


class ParseErrorKind(Enum):
    INVALID_SIGNATURE = "invalid-signature"
    INVALID_VERSION = "invalid-version"
    RESERVED_NOT_ZERO = "reserved-not-zero"
    NOT_ENOUGH_BYTES = "not-enough-bytes"
    MISALIGNED_INPUT_DATA = "misaligned-input-data"
    INVALID_MOVIE_START_TYPE = "invalid-movie-start-type"
    INVALID_TEXT = "invalid-text"


def _hex_list(data: bytes) -> str:
    return "[" + ", ".join(f"{b:02X}" for b in data) + "]"


class M64ParseError(ValueError):
    """Base class for all decode failures."""
    kind: ParseErrorKind

    def __init__(self, message: str, offset: int) -> None:
        super().__init__(message)
        self.offset = offset


class InvalidSignature(M64ParseError):
    kind = ParseErrorKind.INVALID_SIGNATURE

    def __init__(self, found: bytes) -> None:
        expected = " ".join(f"{b:02X}" for b in SIGNATURE)
        super().__init__(
            f"Invalid file signature, expected [{expected}], got {_hex_list(found)}",
            FIELD_OFFSETS[FieldName.SIGNATURE],
        )
        self.found = found


class InvalidVersion(M64ParseError):
    kind = ParseErrorKind.INVALID_VERSION

    def __init__(self, version: int) -> None:
        super().__init__(
            f"Invalid version, expected {SUPPORTED_VERSION}, got {version}",
            FIELD_OFFSETS[FieldName.VERSION],
        )
        self.version = version


class ReservedNotZero(M64ParseError):
    kind = ParseErrorKind.RESERVED_NOT_ZERO

    def __init__(self, offset: int) -> None:
        super().__init__(f"Reserved data is not all zero at offset 0x{offset:X}", offset)


class NotEnoughBytes(M64ParseError):
    """The buffer ended inside *field*; *requires* more bytes were needed."""
    kind = ParseErrorKind.NOT_ENOUGH_BYTES

    def __init__(self, field: FieldName, requires: int, offset: int) -> None:
        super().__init__(
            f"Not enough bytes to read to make up for the {field} field, "
            f"requires {requires} more bytes",
            offset,
        )
        self.field = field
        self.requires = requires


class MisalignedInputData(M64ParseError):
    kind = ParseErrorKind.MISALIGNED_INPUT_DATA

    def __init__(self, remainder: int, offset: int) -> None:
        super().__init__(
            f"Input data is not 4 bytes aligned, final input data size is {remainder} bytes",
            offset,
        )
        self.remainder = remainder


class InvalidMovieStartType(M64ParseError):
    kind = ParseErrorKind.INVALID_MOVIE_START_TYPE

    def __init__(self, value: int) -> None:
        super().__init__("Invalid movie start type", FIELD_OFFSETS[FieldName.MOVIE_START_TYPE])
        self.value = value


class InvalidText(M64ParseError):
    kind = ParseErrorKind.INVALID_TEXT

    def __init__(self, field: FieldName, offset: int) -> None:
        super().__init__(f"Invalid UTF-8 string for field {field}", offset)
        self.field = field


class TextCapacityError(ValueError):
    """Text does not fit in its fixed-size slot (encode side only)."""

    def __init__(self, size: int, capacity: int) -> None:
        super().__init__(f"Text of {size} bytes exceeds field capacity of {capacity} bytes")
        self.size = size
        self.capacity = capacity

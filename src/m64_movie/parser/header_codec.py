"""Decode and encode the fixed 1024-byte .m64 header.

Header layout (all integers little-endian):
  0x000  4    signature "M64\\x1A"
  0x004  4    version (must be 3)
  0x008  4    uid / recording time
  0x00C  4    VI frame count
  0x010  4    rerecord count
  0x014  1    fps
  0x015  1    controller count
  0x016  2    reserved
  0x018  4    input sample count
  0x01C  2    movie start type (1, 2 or 4)
  0x01E  2    reserved
  0x020  4    controller flags
  0x024  160  reserved
  0x0C4  32   ROM internal name
  0x0E4  4    ROM CRC32
  0x0E8  2    ROM country code
  0x0EA  56   reserved
  0x122  64   video plugin
  0x162  64   sound plugin
  0x1A2  64   input plugin
  0x1E2  64   RSP plugin
  0x222  222  author
  0x300  256  description

Decoding walks the fields strictly in this order and stops at the first
invalid one. Encoding writes the same order and always zero-fills the
reserved regions.
"""

from m64_movie.models.constants import (
    HEADER_SIZE,
    RESERVED_REGIONS,
    SIGNATURE,
    SUPPORTED_VERSION,
    FieldName,
)
from m64_movie.models.movie import MovieStartType, RecordingHeader
from m64_movie.parser.binary_reader import BinaryReader
from m64_movie.parser.binary_writer import BinaryWriter
from m64_movie.parser.bitfields import decode_controller_flags, encode_controller_flags
from m64_movie.parser.errors import (
    InvalidMovieStartType,
    InvalidSignature,
    InvalidVersion,
    ReservedNotZero,
)
from m64_movie.parser.text_field import encode_text, read_text


def _expect_signature(reader: BinaryReader) -> None:
    found = reader.peek(len(SIGNATURE))
    if found != SIGNATURE:
        raise InvalidSignature(found)
    reader.bytes(len(SIGNATURE), FieldName.SIGNATURE)


def _expect_version(reader: BinaryReader) -> None:
    version = reader.uint32(FieldName.VERSION)
    if version != SUPPORTED_VERSION:
        raise InvalidVersion(version)


def _expect_reserved(reader: BinaryReader) -> None:
    """Consume one reserved region and check it is all zero."""
    offset = reader.position
    size = RESERVED_REGIONS[offset]
    region = reader.bytes(size, FieldName.RESERVED)
    if any(region):
        raise ReservedNotZero(offset)


def _read_movie_start_type(reader: BinaryReader) -> MovieStartType:
    value = reader.uint16(FieldName.MOVIE_START_TYPE)
    try:
        return MovieStartType(value)
    except ValueError:
        raise InvalidMovieStartType(value) from None


def decode_header(reader: BinaryReader) -> RecordingHeader:
    """Read the header at the reader's cursor (which must be offset 0).

    Raises:
        M64ParseError: At the first field that is truncated or invalid.
    """
    _expect_signature(reader)
    _expect_version(reader)
    uid = reader.uint32(FieldName.UID)
    vi_frames = reader.uint32(FieldName.VI_FRAMES)
    rerecords = reader.uint32(FieldName.RERECORDS)
    fps = reader.uint8(FieldName.FPS)
    controller_count = reader.uint8(FieldName.CONTROLLER_COUNT)
    _expect_reserved(reader)
    input_frames = reader.uint32(FieldName.INPUT_FRAMES)
    movie_start_type = _read_movie_start_type(reader)
    _expect_reserved(reader)
    controller_flags = decode_controller_flags(reader.uint32(FieldName.CONTROLLER_FLAGS))
    _expect_reserved(reader)
    rom_internal_name = read_text(reader, FieldName.ROM_INTERNAL_NAME)
    rom_crc32 = reader.uint32(FieldName.ROM_CRC32)
    rom_country_code = reader.uint16(FieldName.ROM_COUNTRY_CODE)
    _expect_reserved(reader)
    video_plugin = read_text(reader, FieldName.VIDEO_PLUGIN)
    sound_plugin = read_text(reader, FieldName.SOUND_PLUGIN)
    input_plugin = read_text(reader, FieldName.INPUT_PLUGIN)
    rsp_plugin = read_text(reader, FieldName.RSP_PLUGIN)
    author = read_text(reader, FieldName.AUTHOR)
    description = read_text(reader, FieldName.DESCRIPTION)

    return RecordingHeader(
        uid=uid,
        vi_frames=vi_frames,
        input_frames=input_frames,
        rerecords=rerecords,
        fps=fps,
        controller_count=controller_count,
        movie_start_type=movie_start_type,
        controller_flags=controller_flags,
        rom_internal_name=rom_internal_name,
        rom_crc32=rom_crc32,
        rom_country_code=rom_country_code,
        video_plugin=video_plugin,
        sound_plugin=sound_plugin,
        input_plugin=input_plugin,
        rsp_plugin=rsp_plugin,
        author=author,
        description=description,
    )


def decode_header_bytes(data: bytes) -> RecordingHeader:
    """Decode a header from the start of *data*; trailing bytes are ignored."""
    return decode_header(BinaryReader(data, end=min(len(data), HEADER_SIZE)))


def _check_uint(value: int, bits: int, field: FieldName) -> int:
    if not 0 <= value < 1 << bits:
        raise ValueError(f"{field} value {value} does not fit in an unsigned {bits}-bit field")
    return value


def encode_header(header: RecordingHeader) -> bytes:
    """Serialize *header* into exactly HEADER_SIZE bytes.

    Raises:
        ValueError: A numeric field is out of range for its width, or the
            movie start type is not one of 1, 2 or 4.
    """
    movie_start_type = MovieStartType(header.movie_start_type)

    out = BinaryWriter()
    out.bytes(SIGNATURE)
    out.uint32(SUPPORTED_VERSION)
    out.uint32(_check_uint(header.uid, 32, FieldName.UID))
    out.uint32(_check_uint(header.vi_frames, 32, FieldName.VI_FRAMES))
    out.uint32(_check_uint(header.rerecords, 32, FieldName.RERECORDS))
    out.uint8(_check_uint(header.fps, 8, FieldName.FPS))
    out.uint8(_check_uint(header.controller_count, 8, FieldName.CONTROLLER_COUNT))
    out.zeros(RESERVED_REGIONS[0x016])
    out.uint32(_check_uint(header.input_frames, 32, FieldName.INPUT_FRAMES))
    out.uint16(int(movie_start_type))
    out.zeros(RESERVED_REGIONS[0x01E])
    out.uint32(encode_controller_flags(header.controller_flags))
    out.zeros(RESERVED_REGIONS[0x024])
    out.bytes(encode_text(header.rom_internal_name, FieldName.ROM_INTERNAL_NAME))
    out.uint32(_check_uint(header.rom_crc32, 32, FieldName.ROM_CRC32))
    out.uint16(_check_uint(header.rom_country_code, 16, FieldName.ROM_COUNTRY_CODE))
    out.zeros(RESERVED_REGIONS[0x0EA])
    out.bytes(encode_text(header.video_plugin, FieldName.VIDEO_PLUGIN))
    out.bytes(encode_text(header.sound_plugin, FieldName.SOUND_PLUGIN))
    out.bytes(encode_text(header.input_plugin, FieldName.INPUT_PLUGIN))
    out.bytes(encode_text(header.rsp_plugin, FieldName.RSP_PLUGIN))
    out.bytes(encode_text(header.author, FieldName.AUTHOR))
    out.bytes(encode_text(header.description, FieldName.DESCRIPTION))

    return out.getvalue()

"""Whole-file .m64 reader/writer.

File structure:
  1024-byte header → N × 4-byte input samples (one per frame)

decode_movie() validates the header first, then requires the trailing
input region to be a whole number of 4-byte records. Input samples are
produced by a generator so callers can stream them without building a
Recording; decode_movie() simply collects that generator.
"""

import logging
import os
import struct
from collections.abc import Iterator
from pathlib import Path
from typing import BinaryIO

from m64_movie.models.codec_config import MovieCodecConfig
from m64_movie.models.constants import HEADER_SIZE, INPUT_RECORD_SIZE, FieldName
from m64_movie.models.controller import DEFAULT_BIT_ORDER, InputBitOrder, InputSample
from m64_movie.models.movie import Recording
from m64_movie.parser.binary_reader import BinaryReader
from m64_movie.parser.binary_writer import BinaryWriter
from m64_movie.parser.bitfields import decode_input_sample, encode_input_sample
from m64_movie.parser.errors import MisalignedInputData
from m64_movie.parser.header_codec import decode_header, encode_header


logger = logging.getLogger(__name__)


def _check_alignment(data: bytes) -> None:
    remainder = (len(data) - HEADER_SIZE) % INPUT_RECORD_SIZE
    if remainder:
        raise MisalignedInputData(remainder, len(data) - remainder)


def iter_input_samples(
    data: bytes,
    *,
    offset: int = HEADER_SIZE,
    bit_order: InputBitOrder = DEFAULT_BIT_ORDER,
) -> Iterator[InputSample]:
    """Yield one InputSample per 4-byte record from *offset* to the end of *data*.

    Trailing bytes that do not fill a whole record raise MisalignedInputData
    once the complete records before them have been yielded.
    """
    reader = BinaryReader(data, offset)
    while reader.remaining >= INPUT_RECORD_SIZE:
        yield decode_input_sample(reader.uint32(FieldName.INPUT_DATA), bit_order)
    if reader.remaining:
        raise MisalignedInputData(reader.remaining, reader.position)


class InputSampleStream:
    """Restartable view over the input records of an encoded movie.

    Each iteration decodes from the first record again; nothing is cached.
    """

    __slots__ = ("_data", "_bit_order")

    def __init__(self, data: bytes, bit_order: InputBitOrder = DEFAULT_BIT_ORDER) -> None:
        if len(data) < HEADER_SIZE:
            raise ValueError(
                f"Movie data is {len(data)} bytes, shorter than the {HEADER_SIZE}-byte header"
            )
        _check_alignment(data)
        self._data = data
        self._bit_order = bit_order

    def __len__(self) -> int:
        return (len(self._data) - HEADER_SIZE) // INPUT_RECORD_SIZE

    def __iter__(self) -> Iterator[InputSample]:
        return iter_input_samples(self._data, bit_order=self._bit_order)

    def __getitem__(self, index: int) -> InputSample:
        if index < 0:
            index += len(self)
        if not 0 <= index < len(self):
            raise IndexError(f"Input sample {index} out of range")
        word = struct.unpack_from("<I", self._data, HEADER_SIZE + index * INPUT_RECORD_SIZE)[0]
        return decode_input_sample(word, self._bit_order)


def decode_movie(data: bytes, config: MovieCodecConfig | None = None) -> Recording:
    """Decode a complete .m64 file held in memory.

    Raises:
        M64ParseError: The first problem found, header fields first.
    """
    config = config or MovieCodecConfig()
    header = decode_header(BinaryReader(data))
    _check_alignment(data)
    inputs = list(InputSampleStream(data, config.bit_order))

    logger.debug(
        "Decoded movie: %d input samples, header input_frames=%d",
        len(inputs), header.input_frames,
    )
    return Recording(header=header, inputs=inputs)


def encode_movie(recording: Recording, config: MovieCodecConfig | None = None) -> bytes:
    """Serialize *recording*; the result is HEADER_SIZE + 4 × len(inputs) bytes."""
    config = config or MovieCodecConfig()
    writer = BinaryWriter()
    writer.bytes(encode_header(recording.header))
    for sample in recording.inputs:
        writer.uint32(encode_input_sample(sample, config.bit_order))

    logger.debug("Encoded movie: %d bytes", writer.position)
    return writer.getvalue()


def read_movie(
    source: str | os.PathLike | BinaryIO,
    config: MovieCodecConfig | None = None,
) -> Recording:
    """Read a whole .m64 file from a path or binary file object."""
    if isinstance(source, (str, os.PathLike)):
        data = Path(source).read_bytes()
    else:
        data = source.read()
    return decode_movie(data, config)


def write_movie(
    recording: Recording,
    sink: str | os.PathLike | BinaryIO,
    config: MovieCodecConfig | None = None,
) -> None:
    """Write *recording* to a path or binary file object."""
    data = encode_movie(recording, config)
    if isinstance(sink, (str, os.PathLike)):
        Path(sink).write_bytes(data)
    else:
        sink.write(data)

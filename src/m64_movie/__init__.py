"""Read and write Mupen64 .m64 movie files."""

from m64_movie.models.codec_config import MovieCodecConfig
from m64_movie.models.controller import ControllerStatus, InputBitOrder, InputSample
from m64_movie.models.movie import FixedText, MovieStartType, Recording, RecordingHeader
from m64_movie.parser.errors import (
    InvalidMovieStartType,
    InvalidSignature,
    InvalidText,
    InvalidVersion,
    M64ParseError,
    MisalignedInputData,
    NotEnoughBytes,
    ParseErrorKind,
    ReservedNotZero,
    TextCapacityError,
)
from m64_movie.parser.movie_codec import (
    InputSampleStream,
    decode_movie,
    encode_movie,
    iter_input_samples,
    read_movie,
    write_movie,
)

__all__ = [
    "ControllerStatus",
    "FixedText",
    "InputBitOrder",
    "InputSample",
    "InputSampleStream",
    "InvalidMovieStartType",
    "InvalidSignature",
    "InvalidText",
    "InvalidVersion",
    "M64ParseError",
    "MisalignedInputData",
    "MovieCodecConfig",
    "MovieStartType",
    "NotEnoughBytes",
    "ParseErrorKind",
    "Recording",
    "RecordingHeader",
    "ReservedNotZero",
    "TextCapacityError",
    "decode_movie",
    "encode_movie",
    "iter_input_samples",
    "read_movie",
    "write_movie",
]

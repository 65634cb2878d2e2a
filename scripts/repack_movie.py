"""Decode a .m64 movie and write it back out, optionally editing text fields.

Without edits the output must be byte-identical to the input; the script
reports whether it is.

Usage:
    python -m scripts.repack_movie IN.m64 OUT.m64 [--author TEXT] [--description TEXT]
"""

import argparse
import logging
from pathlib import Path

from m64_movie.parser.errors import M64ParseError, TextCapacityError
from m64_movie.parser.movie_codec import decode_movie, encode_movie


logger = logging.getLogger(__name__)


def repack(data: bytes, author: str | None = None, description: str | None = None) -> bytes:
    """Round-trip *data* through the codec, applying any text edits."""
    recording = decode_movie(data)
    if author is not None:
        recording.header.set_text("author", author)
    if description is not None:
        recording.header.set_text("description", description)
    return encode_movie(recording)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Re-encode a Mupen64 .m64 movie")
    parser.add_argument("source", type=Path)
    parser.add_argument("dest", type=Path)
    parser.add_argument("--author", help="Replace the author field (max 222 bytes UTF-8)")
    parser.add_argument("--description",
                        help="Replace the description field (max 256 bytes UTF-8)")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    data = args.source.read_bytes()
    try:
        out = repack(data, args.author, args.description)
    except M64ParseError as exc:
        print(f"Error: {args.source}: {exc}")
        return 1
    except TextCapacityError as exc:
        print(f"Error: {exc}")
        return 1

    args.dest.write_bytes(out)
    logger.info("Wrote %d bytes to %s", len(out), args.dest)

    if out == data:
        print(f"{args.dest}: identical to {args.source} ({len(out)} bytes)")
    else:
        print(f"{args.dest}: differs from {args.source} ({len(data)} -> {len(out)} bytes)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

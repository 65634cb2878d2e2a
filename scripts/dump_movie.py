"""Dump the header (and optionally the inputs) of a .m64 movie.

Usage:
    python -m scripts.dump_movie MOVIE.m64 [--inputs] [--limit N] [--skip-neutral]
"""

import argparse
import logging
from pathlib import Path

from m64_movie.models.codec_config import MovieCodecConfig
from m64_movie.models.controller import InputBitOrder, InputSample
from m64_movie.models.movie import Recording
from m64_movie.parser.errors import M64ParseError
from m64_movie.parser.movie_codec import read_movie


def format_controllers(recording: Recording) -> list[str]:
    lines: list[str] = []
    for slot, status in enumerate(recording.header.controller_flags, start=1):
        if not status.present:
            lines.append(f"  P{slot}: not connected")
            continue
        paks = []
        if status.has_mempak:
            paks.append("memory pak")
        if status.has_rumblepak:
            paks.append("rumble pak")
        suffix = f" ({', '.join(paks)})" if paks else ""
        lines.append(f"  P{slot}: connected{suffix}")
    return lines


def format_header(recording: Recording) -> list[str]:
    h = recording.header
    return [
        f"Author:        {h.author}",
        f"Description:   {h.description}",
        f"Recorded:      {recording.recording_time:%Y-%m-%d %H:%M:%S} UTC (uid {h.uid})",
        f"ROM:           {h.rom_internal_name.text.strip()} "
        f"CRC32 {h.rom_crc32:08X}, {h.rom_country_name} ({h.rom_country_code:#06x})",
        f"Start:         {h.movie_start_type.name}",
        f"VI frames:     {h.vi_frames} @ {h.fps} fps",
        f"Input frames:  {h.input_frames} (file holds {len(recording.inputs)})",
        f"Rerecords:     {h.rerecords}",
        f"Controllers:   {h.controller_count}",
        *format_controllers(recording),
        f"Video plugin:  {h.video_plugin}",
        f"Sound plugin:  {h.sound_plugin}",
        f"Input plugin:  {h.input_plugin}",
        f"RSP plugin:    {h.rsp_plugin}",
    ]


def format_input(index: int, sample: InputSample) -> str:
    buttons = " ".join(sample.pressed_buttons()) or "-"
    return f"{index:>7} | X {sample.x_axis:>4} Y {sample.y_axis:>4} | {buttons}"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Dump a Mupen64 .m64 movie")
    parser.add_argument("movie", type=Path, help="Path to the .m64 file")
    parser.add_argument("--inputs", action="store_true",
                        help="Also print one line per input sample")
    parser.add_argument("--limit", type=int, default=None,
                        help="Print at most N input samples")
    parser.add_argument("--skip-neutral", action="store_true",
                        help="Omit samples with no buttons and a centered stick")
    parser.add_argument("--bit-order", choices=[o.value for o in InputBitOrder],
                        default=InputBitOrder.LSB_FIRST.value,
                        help="Button bit layout of the input words")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    config = MovieCodecConfig(bit_order=InputBitOrder(args.bit_order))
    try:
        recording = read_movie(args.movie, config)
    except FileNotFoundError as exc:
        print(f"Error: {exc}")
        return 1
    except M64ParseError as exc:
        print(f"Error: {args.movie}: {exc} (offset {exc.offset:#x})")
        return 1

    for line in format_header(recording):
        print(line)

    if args.inputs:
        print()
        shown = 0
        for i, sample in enumerate(recording.inputs):
            if args.limit is not None and shown >= args.limit:
                break
            if args.skip_neutral and sample.is_neutral:
                continue
            print(format_input(i, sample))
            shown += 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())

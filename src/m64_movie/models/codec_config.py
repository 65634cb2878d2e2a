"""Configuration knobs for the movie codec.

Defaults match files written by Mupen64-rerecording and its descendants.
"""

from dataclasses import dataclass

from m64_movie.models.controller import DEFAULT_BIT_ORDER, InputBitOrder


@dataclass(slots=True)
class MovieCodecConfig:
    """Tuneable parameters that aren't stored in the file itself."""

    bit_order: InputBitOrder = DEFAULT_BIT_ORDER   # button bit layout of input words

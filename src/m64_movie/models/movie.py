"""Movie data classes: fixed text slots, the 1024-byte header, and the recording."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import IntEnum

from m64_movie.models.constants import (
    AUTHOR_SIZE,
    CONTROLLER_SLOTS,
    COUNTRY_CODE_NAMES,
    DESCRIPTION_SIZE,
    PLUGIN_NAME_SIZE,
    ROM_NAME_SIZE,
)
from m64_movie.models.controller import ControllerStatus, InputSample
from m64_movie.parser.errors import TextCapacityError


class MovieStartType(IntEnum):
    """Where playback starts from (header offset 0x1C)."""
    SNAPSHOT = 1     # companion .st savestate
    POWER_ON = 2
    EEPROM = 4


@dataclass(frozen=True, slots=True)
class FixedText:
    """Exact contents of a fixed-capacity text slot.

    The raw bytes are kept verbatim, padding included, so a decoded slot
    re-encodes to the identical bytes. Must be valid UTF-8.
    """
    raw: bytes

    def __post_init__(self) -> None:
        self.raw.decode("utf-8")

    @classmethod
    def from_text(cls, text: str, capacity: int) -> "FixedText":
        """Encode *text* as UTF-8 and zero-pad it to *capacity* bytes."""
        encoded = text.encode("utf-8")
        if len(encoded) > capacity:
            raise TextCapacityError(len(encoded), capacity)
        return cls(encoded.ljust(capacity, b"\x00"))

    def fit(self, capacity: int) -> "FixedText":
        """Return this slot zero-padded to *capacity* bytes."""
        if self.capacity > capacity:
            raise TextCapacityError(self.capacity, capacity)
        if self.capacity == capacity:
            return self
        return FixedText(self.raw.ljust(capacity, b"\x00"))

    @classmethod
    def empty(cls, capacity: int) -> "FixedText":
        return cls(bytes(capacity))

    @property
    def capacity(self) -> int:
        return len(self.raw)

    @property
    def text(self) -> str:
        """Decoded text up to the first NUL; anything after it is padding."""
        return self.raw.split(b"\x00", 1)[0].decode("utf-8")

    def __str__(self) -> str:
        return self.text


def _text_slot(capacity: int):
    return field(default_factory=lambda: FixedText.empty(capacity))


def _default_controllers() -> list[ControllerStatus]:
    return [ControllerStatus() for _ in range(CONTROLLER_SLOTS)]


# Attribute name -> capacity, in file order.
_TEXT_SLOTS: dict[str, int] = {
    "rom_internal_name": ROM_NAME_SIZE,
    "video_plugin": PLUGIN_NAME_SIZE,
    "sound_plugin": PLUGIN_NAME_SIZE,
    "input_plugin": PLUGIN_NAME_SIZE,
    "rsp_plugin": PLUGIN_NAME_SIZE,
    "author": AUTHOR_SIZE,
    "description": DESCRIPTION_SIZE,
}


@dataclass(slots=True)
class RecordingHeader:
    """The 1024-byte .m64 header, minus signature, version and reserved bytes.

    Text slots accept either a FixedText or a plain str; a str is encoded
    and zero-padded to the slot's capacity, raising TextCapacityError when
    it does not fit.
    """
    uid: int = 0                 # also the recording time, unix seconds
    vi_frames: int = 0
    input_frames: int = 0
    rerecords: int = 0
    fps: int = 0
    controller_count: int = 0
    movie_start_type: MovieStartType = MovieStartType.POWER_ON
    controller_flags: list[ControllerStatus] = field(default_factory=_default_controllers)
    rom_internal_name: FixedText = _text_slot(ROM_NAME_SIZE)
    rom_crc32: int = 0
    rom_country_code: int = 0
    video_plugin: FixedText = _text_slot(PLUGIN_NAME_SIZE)
    sound_plugin: FixedText = _text_slot(PLUGIN_NAME_SIZE)
    input_plugin: FixedText = _text_slot(PLUGIN_NAME_SIZE)
    rsp_plugin: FixedText = _text_slot(PLUGIN_NAME_SIZE)
    author: FixedText = _text_slot(AUTHOR_SIZE)
    description: FixedText = _text_slot(DESCRIPTION_SIZE)

    def __post_init__(self) -> None:
        for name, capacity in _TEXT_SLOTS.items():
            value = getattr(self, name)
            if isinstance(value, str):
                setattr(self, name, FixedText.from_text(value, capacity))
            else:
                setattr(self, name, value.fit(capacity))
        if len(self.controller_flags) != CONTROLLER_SLOTS:
            raise ValueError(
                f"Expected {CONTROLLER_SLOTS} controller slots, "
                f"got {len(self.controller_flags)}"
            )
        self.movie_start_type = MovieStartType(self.movie_start_type)

    def set_text(self, name: str, text: str) -> None:
        """Replace a text slot, e.g. set_text("author", "...")."""
        if name not in _TEXT_SLOTS:
            raise KeyError(f"{name!r} is not a text field")
        setattr(self, name, FixedText.from_text(text, _TEXT_SLOTS[name]))

    @property
    def rom_country_name(self) -> str:
        return COUNTRY_CODE_NAMES.get(self.rom_country_code & 0xFF, "Unknown")


@dataclass(slots=True)
class Recording:
    """A whole .m64 movie: header plus input samples in frame order."""
    header: RecordingHeader = field(default_factory=RecordingHeader)
    inputs: list[InputSample] = field(default_factory=list)

    @property
    def recording_time(self) -> datetime:
        """The header uid read as seconds since the Unix epoch, in UTC."""
        return datetime.fromtimestamp(self.header.uid, tz=timezone.utc)

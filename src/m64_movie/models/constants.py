"""Fixed layout of the Mupen64 .m64 movie format.

Offsets and sizes come from the TASVideos M64 reference. The header is
always 1024 bytes; input records follow, 4 bytes per sample.
"""

from enum import Enum


SIGNATURE = b"M64\x1a"          # 4D 36 34 1A
SUPPORTED_VERSION = 3

HEADER_SIZE = 0x400
INPUT_RECORD_SIZE = 4
CONTROLLER_SLOTS = 4

# Fixed-capacity text fields
ROM_NAME_SIZE = 32
PLUGIN_NAME_SIZE = 64
AUTHOR_SIZE = 222
DESCRIPTION_SIZE = 256

# Reserved (must-be-zero) regions: offset -> length
RESERVED_REGIONS: dict[int, int] = {
    0x016: 2,
    0x01E: 2,
    0x024: 160,
    0x0EA: 56,
}


class FieldName(Enum):
    """Header fields, in the order they appear in the file.

    Used to attribute parse errors to a field.
    """
    SIGNATURE = "Signature"
    VERSION = "Version"
    UID = "Uid"
    VI_FRAMES = "ViFrames"
    RERECORDS = "Rerecords"
    FPS = "Fps"
    CONTROLLER_COUNT = "ControllerCount"
    RESERVED = "Reserved"
    INPUT_FRAMES = "InputFrames"
    MOVIE_START_TYPE = "MovieStartType"
    CONTROLLER_FLAGS = "ControllerFlags"
    ROM_INTERNAL_NAME = "RomInternalName"
    ROM_CRC32 = "RomCrc32"
    ROM_COUNTRY_CODE = "RomCountryCode"
    VIDEO_PLUGIN = "VideoPlugin"
    SOUND_PLUGIN = "SoundPlugin"
    INPUT_PLUGIN = "InputPlugin"
    RSP_PLUGIN = "RspPlugin"
    AUTHOR = "Author"
    DESCRIPTION = "Description"
    INPUT_DATA = "InputData"

    def __str__(self) -> str:
        return self.value


# Absolute byte offset of every header field.
FIELD_OFFSETS: dict[FieldName, int] = {
    FieldName.SIGNATURE: 0x000,
    FieldName.VERSION: 0x004,
    FieldName.UID: 0x008,
    FieldName.VI_FRAMES: 0x00C,
    FieldName.RERECORDS: 0x010,
    FieldName.FPS: 0x014,
    FieldName.CONTROLLER_COUNT: 0x015,
    FieldName.INPUT_FRAMES: 0x018,
    FieldName.MOVIE_START_TYPE: 0x01C,
    FieldName.CONTROLLER_FLAGS: 0x020,
    FieldName.ROM_INTERNAL_NAME: 0x0C4,
    FieldName.ROM_CRC32: 0x0E4,
    FieldName.ROM_COUNTRY_CODE: 0x0E8,
    FieldName.VIDEO_PLUGIN: 0x122,
    FieldName.SOUND_PLUGIN: 0x162,
    FieldName.INPUT_PLUGIN: 0x1A2,
    FieldName.RSP_PLUGIN: 0x1E2,
    FieldName.AUTHOR: 0x222,
    FieldName.DESCRIPTION: 0x300,
    FieldName.INPUT_DATA: HEADER_SIZE,
}

# Capacity of each fixed text field, in bytes.
TEXT_FIELD_SIZES: dict[FieldName, int] = {
    FieldName.ROM_INTERNAL_NAME: ROM_NAME_SIZE,
    FieldName.VIDEO_PLUGIN: PLUGIN_NAME_SIZE,
    FieldName.SOUND_PLUGIN: PLUGIN_NAME_SIZE,
    FieldName.INPUT_PLUGIN: PLUGIN_NAME_SIZE,
    FieldName.RSP_PLUGIN: PLUGIN_NAME_SIZE,
    FieldName.AUTHOR: AUTHOR_SIZE,
    FieldName.DESCRIPTION: DESCRIPTION_SIZE,
}


# Controller flags word: slot i uses bit i (present), bit i+4 (mempak)
# and bit i+8 (rumble pak). Bits 12-31 are unused.
CONTROLLER_PRESENT_SHIFT = 0
CONTROLLER_MEMPAK_SHIFT = 4
CONTROLLER_RUMBLEPAK_SHIFT = 8
CONTROLLER_FLAGS_MASK = 0x0FFF


# Button fields of an input sample, lowest bit first in the canonical layout.
# 0x0001 = D-Right ... 0x0080 = A ... 0x2000 = L, 0x4000/0x8000 reserved.
BUTTON_FIELDS: tuple[str, ...] = (
    "right_dpad",
    "left_dpad",
    "down_dpad",
    "up_dpad",
    "start",
    "z_button",
    "b_button",
    "a_button",
    "right_cbutton",
    "left_cbutton",
    "down_cbutton",
    "up_cbutton",
    "right_shoulder",
    "left_shoulder",
    "reserved_1",
    "reserved_2",
)

BUTTON_LABELS: dict[str, str] = {
    "right_dpad": "D-Right",
    "left_dpad": "D-Left",
    "down_dpad": "D-Down",
    "up_dpad": "D-Up",
    "start": "Start",
    "z_button": "Z",
    "b_button": "B",
    "a_button": "A",
    "right_cbutton": "C-Right",
    "left_cbutton": "C-Left",
    "down_cbutton": "C-Down",
    "up_cbutton": "C-Up",
    "right_shoulder": "R",
    "left_shoulder": "L",
    "reserved_1": "Reserved1",
    "reserved_2": "Reserved2",
}

X_AXIS_SHIFT = 16
Y_AXIS_SHIFT = 24

# ROM country codes seen in the header (low byte of the cartridge header).
COUNTRY_CODE_NAMES: dict[int, str] = {
    0x37: "Beta",
    0x41: "Asian (NTSC)",
    0x42: "Brazilian",
    0x43: "Chinese",
    0x44: "German",
    0x45: "North America",
    0x46: "French",
    0x47: "Gateway 64 (NTSC)",
    0x48: "Dutch",
    0x49: "Italian",
    0x4A: "Japanese",
    0x4B: "Korean",
    0x4C: "Gateway 64 (PAL)",
    0x4E: "Canadian",
    0x50: "European",
    0x53: "Spanish",
    0x55: "Australian",
    0x57: "Scandinavian",
    0x58: "European",
    0x59: "European",
}

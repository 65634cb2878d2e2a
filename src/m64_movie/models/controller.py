"""Controller data classes: per-slot status flags and per-frame input samples."""

from dataclasses import dataclass
from enum import Enum

from m64_movie.models.constants import BUTTON_FIELDS, BUTTON_LABELS


class InputBitOrder(Enum):
    """How the 16 button fields map onto the low 16 bits of an input word.

    LSB_FIRST puts BUTTON_FIELDS[0] (D-Right) at bit 0; this is the layout
    of real-world .m64 files, where A is 0x0080. MSB_FIRST puts the same
    sequence at bit 15 downward.
    """
    LSB_FIRST = "lsb-first"
    MSB_FIRST = "msb-first"

    def bit_for(self, index: int) -> int:
        """Bit position of the button at *index* in BUTTON_FIELDS."""
        if self is InputBitOrder.LSB_FIRST:
            return index
        return 15 - index


DEFAULT_BIT_ORDER = InputBitOrder.LSB_FIRST


@dataclass(slots=True)
class ControllerStatus:
    """Presence and accessory flags for one controller slot."""
    present: bool = False
    has_mempak: bool = False       # secondary (memory) pak inserted
    has_rumblepak: bool = False


@dataclass(slots=True)
class InputSample:
    """One recorded frame of controller input.

    reserved_1/reserved_2 are carried through untouched; some tools use
    them as a reset signal.
    """
    right_dpad: bool = False
    left_dpad: bool = False
    down_dpad: bool = False
    up_dpad: bool = False
    start: bool = False
    z_button: bool = False
    b_button: bool = False
    a_button: bool = False
    right_cbutton: bool = False
    left_cbutton: bool = False
    down_cbutton: bool = False
    up_cbutton: bool = False
    right_shoulder: bool = False
    left_shoulder: bool = False
    reserved_1: bool = False
    reserved_2: bool = False

    x_axis: int = 0      # signed 8-bit
    y_axis: int = 0      # signed 8-bit

    def pressed_buttons(self) -> list[str]:
        """Display labels of every button held in this sample."""
        return [BUTTON_LABELS[name] for name in BUTTON_FIELDS if getattr(self, name)]

    @property
    def is_neutral(self) -> bool:
        return not any(getattr(self, name) for name in BUTTON_FIELDS) and (
            self.x_axis == 0 and self.y_axis == 0
        )

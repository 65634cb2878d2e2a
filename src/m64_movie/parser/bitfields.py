"""Pack and unpack the two 32-bit bitfield words of the .m64 format.

Controller flags word (header offset 0x20):
  bits 0-3:   controller 1-4 present
  bits 4-7:   controller 1-4 has memory pak
  bits 8-11:  controller 1-4 has rumble pak
  bits 12-31: unused (always written as 0)

Input sample word (one per frame, after the header):
  bits 0-15:  buttons, see BUTTON_FIELDS and InputBitOrder
  bits 16-23: analog X, signed 8-bit
  bits 24-31: analog Y, signed 8-bit

Both directions are total: every 32-bit input word decodes, and every
decoded sample re-encodes to the same word.
"""

from m64_movie.models.constants import (
    BUTTON_FIELDS,
    CONTROLLER_MEMPAK_SHIFT,
    CONTROLLER_PRESENT_SHIFT,
    CONTROLLER_RUMBLEPAK_SHIFT,
    CONTROLLER_SLOTS,
    X_AXIS_SHIFT,
    Y_AXIS_SHIFT,
)
from m64_movie.models.controller import DEFAULT_BIT_ORDER, ControllerStatus, InputBitOrder, InputSample


def _bit(word: int, position: int) -> bool:
    return bool((word >> position) & 1)


def _to_int8(byte: int) -> int:
    return byte - 0x100 if byte & 0x80 else byte


def decode_controller_flags(word: int) -> list[ControllerStatus]:
    """Split the controller flags word into one ControllerStatus per slot."""
    return [
        ControllerStatus(
            present=_bit(word, slot + CONTROLLER_PRESENT_SHIFT),
            has_mempak=_bit(word, slot + CONTROLLER_MEMPAK_SHIFT),
            has_rumblepak=_bit(word, slot + CONTROLLER_RUMBLEPAK_SHIFT),
        )
        for slot in range(CONTROLLER_SLOTS)
    ]


def encode_controller_flags(statuses: list[ControllerStatus]) -> int:
    """Inverse of decode_controller_flags. Bits 12-31 are always 0."""
    if len(statuses) != CONTROLLER_SLOTS:
        raise ValueError(f"Expected {CONTROLLER_SLOTS} controller slots, got {len(statuses)}")
    word = 0
    for slot, status in enumerate(statuses):
        word |= bool(status.present) << (slot + CONTROLLER_PRESENT_SHIFT)
        word |= bool(status.has_mempak) << (slot + CONTROLLER_MEMPAK_SHIFT)
        word |= bool(status.has_rumblepak) << (slot + CONTROLLER_RUMBLEPAK_SHIFT)
    return word


def decode_input_sample(word: int, bit_order: InputBitOrder = DEFAULT_BIT_ORDER) -> InputSample:
    """Unpack one 32-bit input word."""
    buttons = {
        name: _bit(word, bit_order.bit_for(index))
        for index, name in enumerate(BUTTON_FIELDS)
    }
    return InputSample(
        **buttons,
        x_axis=_to_int8((word >> X_AXIS_SHIFT) & 0xFF),
        y_axis=_to_int8((word >> Y_AXIS_SHIFT) & 0xFF),
    )


def encode_input_sample(sample: InputSample, bit_order: InputBitOrder = DEFAULT_BIT_ORDER) -> int:
    """Pack one InputSample back into its 32-bit word."""
    for axis in (sample.x_axis, sample.y_axis):
        if not -128 <= axis <= 127:
            raise ValueError(f"Analog axis value {axis} is outside the signed 8-bit range")

    word = 0
    for index, name in enumerate(BUTTON_FIELDS):
        if getattr(sample, name):
            word |= 1 << bit_order.bit_for(index)
    word |= (sample.x_axis & 0xFF) << X_AXIS_SHIFT
    word |= (sample.y_axis & 0xFF) << Y_AXIS_SHIFT
    return word

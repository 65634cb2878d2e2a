"""Tests for the controller-flags and input-sample bitfield codecs."""

import random

import pytest

from m64_movie.models.constants import BUTTON_FIELDS, BUTTON_LABELS
from m64_movie.models.controller import (
    DEFAULT_BIT_ORDER,
    ControllerStatus,
    InputBitOrder,
    InputSample,
)
from m64_movie.parser.bitfields import (
    decode_controller_flags,
    decode_input_sample,
    encode_controller_flags,
    encode_input_sample,
)


def _sample_words(count: int = 2000) -> list[int]:
    rng = random.Random(0x4D36341A)
    edges = [0, 1, 0x7FFF_FFFF, 0x8000_0000, 0xFFFF_FFFF, 0x0000_FFFF, 0xFFFF_0000]
    return edges + [rng.getrandbits(32) for _ in range(count)]


# --- Controller flags ---

def test_controller_flags_slot_bits():
    statuses = decode_controller_flags(0x0000_0111)
    assert statuses[0] == ControllerStatus(present=True, has_mempak=True, has_rumblepak=True)
    assert statuses[1:] == [ControllerStatus()] * 3


def test_controller_flags_all_present():
    statuses = decode_controller_flags(0x0F)
    assert [s.present for s in statuses] == [True] * 4
    assert not any(s.has_mempak or s.has_rumblepak for s in statuses)


@pytest.mark.parametrize("slot", range(4))
def test_controller_flags_per_slot_positions(slot):
    statuses = [ControllerStatus() for _ in range(4)]
    statuses[slot] = ControllerStatus(present=True, has_rumblepak=True)
    assert encode_controller_flags(statuses) == (1 << slot) | (1 << (slot + 8))


def test_controller_flags_ignore_unused_bits():
    statuses = decode_controller_flags(0xFFFF_F000)
    assert statuses == [ControllerStatus()] * 4
    assert encode_controller_flags(statuses) == 0


def test_controller_flags_round_trip_meaningful_bits():
    for word in _sample_words(500):
        assert encode_controller_flags(decode_controller_flags(word)) == word & 0x0FFF


def test_controller_flags_require_four_slots():
    with pytest.raises(ValueError, match="4 controller slots"):
        encode_controller_flags([ControllerStatus()])


def test_controller_flags_truthy_values_stay_in_their_bit():
    statuses = [ControllerStatus() for _ in range(3)] + [ControllerStatus(has_rumblepak=2)]
    word = encode_controller_flags(statuses)
    assert word == 1 << (3 + 8)
    assert word & ~0x0FFF == 0


# --- Input samples ---

def test_default_bit_order_is_lsb_first():
    assert DEFAULT_BIT_ORDER is InputBitOrder.LSB_FIRST


def test_a_button_with_analog_stick():
    word = 0b00110111_11110110_00000000_10000000  # 0x37F60080
    sample = decode_input_sample(word)
    assert sample == InputSample(a_button=True, x_axis=-10, y_axis=55)
    assert encode_input_sample(sample) == word


def test_c_buttons_with_extreme_stick():
    word = 0b10000011_01111101_00000011_00000000  # 0x837D0300
    sample = decode_input_sample(word)
    assert sample == InputSample(left_cbutton=True, right_cbutton=True, x_axis=125, y_axis=-125)
    assert encode_input_sample(sample) == word


@pytest.mark.parametrize("index, name", list(enumerate(BUTTON_FIELDS)))
def test_lsb_first_button_positions(index, name):
    sample = decode_input_sample(1 << index, InputBitOrder.LSB_FIRST)
    assert sample.pressed_buttons() == [BUTTON_LABELS[name]]
    assert getattr(sample, name) is True


@pytest.mark.parametrize("index, name", list(enumerate(BUTTON_FIELDS)))
def test_msb_first_button_positions(index, name):
    sample = decode_input_sample(1 << (15 - index), InputBitOrder.MSB_FIRST)
    assert getattr(sample, name) is True
    assert sum(getattr(sample, n) for n in BUTTON_FIELDS) == 1


def test_bit_orders_disagree_on_the_same_word():
    lsb = decode_input_sample(0x0080, InputBitOrder.LSB_FIRST)
    msb = decode_input_sample(0x0080, InputBitOrder.MSB_FIRST)
    assert lsb.a_button and not msb.a_button
    assert msb.right_cbutton   # index 8 -> bit 7


def test_reserved_bits_are_preserved():
    word = 0xC000  # both reserved bits, nothing else
    sample = decode_input_sample(word)
    assert sample.reserved_1 and sample.reserved_2
    assert encode_input_sample(sample) == word


def test_axis_bytes_are_signed():
    assert decode_input_sample(0x0080_0000).x_axis == -128
    assert decode_input_sample(0x7F00_0000).y_axis == 127
    assert decode_input_sample(0xFFFF_0000).x_axis == -1


@pytest.mark.parametrize("bit_order", list(InputBitOrder))
def test_input_word_round_trip(bit_order):
    for word in _sample_words():
        sample = decode_input_sample(word, bit_order)
        assert encode_input_sample(sample, bit_order) == word


@pytest.mark.parametrize("bit_order", list(InputBitOrder))
def test_input_sample_round_trip(bit_order):
    rng = random.Random(64)
    for _ in range(500):
        sample = InputSample(
            **{name: rng.random() < 0.5 for name in BUTTON_FIELDS},
            x_axis=rng.randint(-128, 127),
            y_axis=rng.randint(-128, 127),
        )
        assert decode_input_sample(encode_input_sample(sample, bit_order), bit_order) == sample


@pytest.mark.parametrize("x, y", [(128, 0), (0, -129)])
def test_encode_rejects_out_of_range_axis(x, y):
    with pytest.raises(ValueError, match="signed 8-bit"):
        encode_input_sample(InputSample(x_axis=x, y_axis=y))

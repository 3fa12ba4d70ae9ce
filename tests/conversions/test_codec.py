import os
import warnings
import numpy as np
import pytest

from hexchroma.conversions.codec import (
    pack_rgb,
    unpack_rgb,
    np_unpack_rgb,
    parse_hex,
    format_hex,
    format_channel_hex,
    round_half_away,
    np_round_half_away,
    to_int_lenient,
)
from hexchroma.exceptions import HexParseWarning


def test_pack_unpack_round_trip():
    for r in range(0, 256, 15):
        for g in range(0, 256, 17):
            for b in (0, 1, 127, 128, 254, 255):
                assert unpack_rgb(pack_rgb(r, g, b)) == (r, g, b)


def test_pack_does_not_clamp():
    assert pack_rgb(256, 0, 0) == 0x1000000
    assert pack_rgb(0, 256, 0) == 0x010000
    assert pack_rgb(0, 0, 256) == 0x000100
    assert pack_rgb(-1, 0, 0) == -0x10000


def test_pack_truncates_floats():
    assert pack_rgb(255.9, 1.2, 0.7) == 0xFF0100


def test_unpack_masks_overflow():
    assert unpack_rgb(0x1000000) == (0, 0, 0)
    assert unpack_rgb(0x7FFFFFFF) == (255, 255, 255)
    assert unpack_rgb(-1) == (255, 255, 255)


def test_unpack_named_fields():
    rgb = unpack_rgb(0x123456)
    assert (rgb.red, rgb.green, rgb.blue) == (0x12, 0x34, 0x56)


def test_np_unpack_matches_scalar():
    values = np.array([0x000000, 0xFFFFFF, 0x123456, 0x7FFFFFFF, 0xFFA500])
    result = np_unpack_rgb(values)
    assert result.shape == (5, 3)
    for value, row in zip(values, result):
        assert tuple(row) == unpack_rgb(int(value))


def test_parse_hex_variable_length():
    assert parse_hex("ffa500") == 0xFFA500
    assert parse_hex("FFA500") == 0xFFA500
    assert parse_hex("FF") == 0xFF
    assert parse_hex("0") == 0
    assert parse_hex("7fffffff") == 0x7FFFFFFF


def test_parse_hex_leading_hash_is_silent():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert parse_hex("#ffa500") == 0xFFA500


def test_parse_hex_discards_stray_characters():
    with pytest.warns(HexParseWarning):
        assert parse_hex("ff-a5-00") == 0xFFA500
    with pytest.warns(HexParseWarning):
        assert parse_hex("0xff") == 0xFF


def test_parse_hex_without_digits_is_zero():
    with pytest.warns(HexParseWarning):
        assert parse_hex("zz") == 0
    assert parse_hex("") == 0


def test_format_hex_pads_to_six():
    assert format_hex(0) == "000000"
    assert format_hex(0xFF) == "0000ff"
    assert format_hex(0xFFA500) == "ffa500"


def test_format_hex_never_truncates():
    assert format_hex(0x7FFFFFFF) == "7fffffff"
    assert format_hex(0x1000000) == "1000000"


def test_format_hex_negative_two_complement():
    assert format_hex(-1) == "ffffffffffffffff"


def test_format_channel_hex_has_no_padding():
    assert format_channel_hex(5) == "5"
    assert format_channel_hex(0) == "0"
    assert format_channel_hex(255) == "ff"


def test_hex_round_trip():
    for text in ("000000", "ffffff", "123abc", "ABCDEF", "00ff00", "0a0b0c"):
        assert format_hex(parse_hex(text)) == text.lower()


def test_round_half_away():
    assert round_half_away(2.5) == 3
    assert round_half_away(3.5) == 4
    assert round_half_away(-2.5) == -3
    assert round_half_away(42.5) == 43
    assert round_half_away(-42.5) == -43
    assert round_half_away(2.4999) == 2
    assert round_half_away(0.0) == 0


def test_np_round_half_away():
    values = np.array([2.5, 3.5, -2.5, 42.5, -42.5, 2.4999, 0.0])
    expected = [round_half_away(v) for v in values]
    assert np_round_half_away(values).tolist() == expected


def test_to_int_lenient():
    assert to_int_lenient(12.9) == 12
    assert to_int_lenient(-12.9) == -12
    assert to_int_lenient(None) == 0
    assert to_int_lenient("") == 0
    assert to_int_lenient("12px") == 12
    assert to_int_lenient("px") == 0
    assert to_int_lenient("1e3") == 1000
    assert to_int_lenient(" -2.9e1") == -29
    assert to_int_lenient(".5") == 0
    assert to_int_lenient("1e999") == 0
    assert to_int_lenient(float("nan")) == 0
    assert to_int_lenient(np.int64(0xFF)) == 0xFF
    assert to_int_lenient(True) == 1


def test_parse_hex_stacklevel():
    with pytest.warns(HexParseWarning) as record:
        parse_hex("ff ff")
    assert os.path.basename(record[0].filename) == os.path.basename(__file__)


def test_np_unpack_rejects_values_beyond_int64():
    with pytest.raises(OverflowError):
        np_unpack_rgb([2 ** 64])

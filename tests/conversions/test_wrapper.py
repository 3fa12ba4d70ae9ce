import numpy as np
import pytest

from hexchroma.conversions import convert, np_convert, FormatType
from hexchroma.conversions.to_hsv import rgb_to_hsv_float
from hexchroma.types.color_types import RGB, HSV, XYZ, Lab
from ..samples import samples_hsv_float, samples_hsv_int, sample_palette


def test_convert_returns_named_tuples():
    assert isinstance(convert(0xFFA500, "rgb"), RGB)
    assert isinstance(convert(0xFFA500, "hsv"), HSV)
    assert isinstance(convert(0xFFA500, "xyz"), XYZ)
    assert isinstance(convert(0xFFA500, "lab"), Lab)


def test_convert_int_and_hex():
    assert convert(0xFFA500, "int") == 0xFFA500
    assert convert(0xFFA500, "hex") == "ffa500"
    assert convert(0xFF, "hex") == "0000ff"


def test_convert_space_is_case_insensitive():
    assert convert(0xFFA500, "RGB") == (255, 165, 0)


def test_convert_hsv_formats():
    for value, expected in samples_hsv_int.items():
        assert convert(value, "hsv", FormatType.INT) == expected
    for value, (h_exp, s_exp, v_exp) in samples_hsv_float.items():
        h, s, v = convert(value, "hsv", FormatType.FLOAT)
        assert abs(h - h_exp) < 1e-9
        assert abs(s - s_exp) < 1e-9
        assert v == v_exp


def test_convert_accepts_format_strings():
    assert convert(0xFF00FF, "hsv", "int") == (212, 255, 255)


def test_convert_unknown_space():
    with pytest.raises(ValueError):
        convert(0xFFA500, "cmyk")  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        convert(0xFFA500, None)  # type: ignore[arg-type]


def test_np_convert_int_and_hex():
    values = np.array([0x000000, 0xFFA500, 0xFF])
    assert np.array_equal(np_convert(values, "int"), values)
    assert np_convert(values, "hex").tolist() == ["000000", "ffa500", "0000ff"]


def test_np_convert_shapes():
    values = np.array(sample_palette[:12]).reshape(3, 4)
    for space in ("rgb", "hsv", "xyz", "lab"):
        assert np_convert(values, space).shape == (3, 4, 3)


def test_np_convert_hsv_dtypes():
    values = np.array(sample_palette)
    assert np_convert(values, "hsv", FormatType.INT).dtype == np.int64
    assert np_convert(values, "hsv", FormatType.FLOAT).dtype == np.float64


def test_np_convert_matches_convert():
    values = np.array(sample_palette)
    for space in ("rgb", "xyz", "lab"):
        expected = np.array([convert(int(v), space) for v in values])
        assert np.allclose(np_convert(values, space), expected, atol=1e-9)

    hsv = np_convert(values, "hsv", FormatType.FLOAT)
    expected = np.array([rgb_to_hsv_float(*convert(int(v), "rgb")) for v in values])
    assert np.allclose(hsv, expected, atol=1e-12)


def test_np_convert_unknown_space():
    with pytest.raises(ValueError):
        np_convert(np.array([0]), "hsl")  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        np_convert(np.array([0]), None)  # type: ignore[arg-type]


def test_np_convert_overflow_beyond_int64():
    assert convert(2 ** 64 + 0xFFA500, "rgb") == (255, 165, 0)
    with pytest.raises(OverflowError):
        np_convert([2 ** 64], "rgb")

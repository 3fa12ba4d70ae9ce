"""
Hexchroma Color Conversions
===========================

Conversion functions from a packed ``0xRRGGBB`` integer (or its 8-bit RGB
channels) to hex, HSV, CIE XYZ and CIE L*a*b*, with scalar and vectorized
(numpy) implementations.

Conversion Functions
-------------------

Codec:
    pack_rgb(r, g, b) / unpack_rgb(value) / np_unpack_rgb(values)
        Bit packing, no clamping on the way in, masking on the way out
    parse_hex(text) / format_hex(value) / format_channel_hex(channel)
        Lenient base-16 parsing, 6-digit minimum formatting

RGB → HSV:
    rgb_to_hsv_float(r, g, b) / np_rgb_to_hsv_float(rgb)
        Hue [0, 360), saturation [0, 1], value [0, 255]
    rgb_to_hsv_int(r, g, b) / np_rgb_to_hsv_int(rgb)
        Every channel on a 0-255 scale, approximate

RGB → XYZ → Lab:
    srgb_to_linear(c) / np_srgb_to_linear(c)
        Inverse sRGB transfer function
    rgb_to_xyz(r, g, b) / np_rgb_to_xyz(rgb)
        D65 / 2° tristimulus values, ×100
    xyz_to_lab(x, y, z) / np_xyz_to_lab(xyz)
        CIE L*a*b* relative to the D65 white
    rgb_to_lab(r, g, b) / np_rgb_to_lab(rgb)

High-Level API
-------------
    convert(value, to_space, format_type=FormatType.INT)
    np_convert(values, to_space, format_type=FormatType.INT)

Examples
--------
>>> from hexchroma.conversions import convert, FormatType
>>> convert(0xFF8000, "hsv", FormatType.FLOAT)
HSV(hue=30.11764705882353, sat=1.0, val=255)
>>> convert(0xFF8000, "rgb")
RGB(red=255, green=128, blue=0)
"""

from .codec import (
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

# RGB → HSV conversions
from .to_hsv import (
    rgb_to_hsv_float,
    rgb_to_hsv_int,
    np_rgb_to_hsv_float,
    np_rgb_to_hsv_int,
)

# RGB → XYZ → Lab conversions
from .to_lab import (
    SRGB_TO_XYZ,
    D65_WHITE,
    srgb_to_linear,
    np_srgb_to_linear,
    rgb_to_xyz,
    np_rgb_to_xyz,
    xyz_to_lab,
    np_xyz_to_lab,
    rgb_to_lab,
    np_rgb_to_lab,
)

# High-level API
from .wrapper import convert, np_convert

# Types and enums
from ..types.format_type import FormatType

__all__ = [
    # Codec
    'pack_rgb',
    'unpack_rgb',
    'np_unpack_rgb',
    'parse_hex',
    'format_hex',
    'format_channel_hex',
    'round_half_away',
    'np_round_half_away',
    'to_int_lenient',

    # RGB → HSV
    'rgb_to_hsv_float',
    'rgb_to_hsv_int',
    'np_rgb_to_hsv_float',
    'np_rgb_to_hsv_int',

    # RGB → XYZ → Lab
    'SRGB_TO_XYZ',
    'D65_WHITE',
    'srgb_to_linear',
    'np_srgb_to_linear',
    'rgb_to_xyz',
    'np_rgb_to_xyz',
    'xyz_to_lab',
    'np_xyz_to_lab',
    'rgb_to_lab',
    'np_rgb_to_lab',

    # High-level API
    'convert',
    'np_convert',

    # Types
    'FormatType',
]

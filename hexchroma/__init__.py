"""Hexchroma: a packed-integer color value with HSV, XYZ and Lab conversions."""

from .colors.color import Color
from .colors.matching import (
    distance_rgb,
    distance_lab,
    is_gray_scale,
    closest_match,
    np_distance_lab,
    np_closest_match,
)
from .colors.named import NamedColor, named_palette
from .conversions import (
    convert,
    np_convert,
    rgb_to_hsv_float,
    rgb_to_hsv_int,
    rgb_to_xyz,
    xyz_to_lab,
    rgb_to_lab,
    np_rgb_to_hsv_float,
    np_rgb_to_hsv_int,
    np_rgb_to_xyz,
    np_xyz_to_lab,
    np_rgb_to_lab,
)
from .exceptions import HexchromaError, InvalidInputError, HexParseWarning
from .types import RGB, HSV, XYZ, Lab, ColorSpace, FormatType

__version__ = "1.0.0"

__all__ = [
    # core color type
    "Color",
    "NamedColor",
    "named_palette",
    # distances and matching
    "distance_rgb",
    "distance_lab",
    "is_gray_scale",
    "closest_match",
    "np_distance_lab",
    "np_closest_match",
    # conversions
    "convert",
    "np_convert",
    "rgb_to_hsv_float",
    "rgb_to_hsv_int",
    "rgb_to_xyz",
    "xyz_to_lab",
    "rgb_to_lab",
    "np_rgb_to_hsv_float",
    "np_rgb_to_hsv_int",
    "np_rgb_to_xyz",
    "np_xyz_to_lab",
    "np_rgb_to_lab",
    # types
    "RGB",
    "HSV",
    "XYZ",
    "Lab",
    "ColorSpace",
    "FormatType",
    # errors
    "HexchromaError",
    "InvalidInputError",
    "HexParseWarning",
    "__version__",
]

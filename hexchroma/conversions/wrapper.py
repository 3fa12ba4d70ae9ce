import numpy as np
from typing import Callable, Dict, Union

from ..types.format_type import FormatType, format_classes
from ..types.color_types import ColorSpace, RGB, HSV, XYZ, Lab, is_color_space
from .codec import unpack_rgb, np_unpack_rgb, format_hex, to_int_lenient
from .to_hsv import rgb_to_hsv_float, rgb_to_hsv_int, np_rgb_to_hsv_float, np_rgb_to_hsv_int
from .to_lab import rgb_to_xyz, rgb_to_lab, np_rgb_to_xyz, np_rgb_to_lab

ConvertResult = Union[int, str, RGB, HSV, XYZ, Lab]

# Conversions that do not depend on the format type
CONVERT_SCALAR: Dict[str, Callable[[int], ConvertResult]] = {
    "int": lambda value: value,
    "hex": format_hex,
    "rgb": unpack_rgb,
    "xyz": lambda value: rgb_to_xyz(*unpack_rgb(value)),
    "lab": lambda value: rgb_to_lab(*unpack_rgb(value)),
}

CONVERT_SCALAR_HSV: Dict[FormatType, Callable[[int, int, int], HSV]] = {
    FormatType.INT: rgb_to_hsv_int,
    FormatType.FLOAT: rgb_to_hsv_float,
}

CONVERT_NUMPY: Dict[str, Callable[[np.ndarray], np.ndarray]] = {
    "rgb": lambda rgb: rgb,
    "xyz": np_rgb_to_xyz,
    "lab": np_rgb_to_lab,
}

CONVERT_NUMPY_HSV: Dict[FormatType, Callable[[np.ndarray], np.ndarray]] = {
    FormatType.INT: np_rgb_to_hsv_int,
    FormatType.FLOAT: np_rgb_to_hsv_float,
}


def _check_space(to_space: str) -> str:
    if not is_color_space(to_space):
        raise ValueError(f"Unknown space: {to_space}")
    return to_space.lower()


def convert(
    value: int,
    to_space: ColorSpace,
    format_type: FormatType = FormatType.INT,
) -> ConvertResult:
    """
    Convert a packed integer color into another representation.

    Args:
        value: Packed ``0xRRGGBB`` integer
        to_space: One of "int", "hex", "rgb", "hsv", "xyz", "lab"
        format_type: HSV variant; INT gives the 0-255 approximation, FLOAT the
            accurate 0-360 hue. Ignored by the other spaces.

    Returns:
        int for "int", str for "hex", otherwise the named triple of the space
    """
    space = _check_space(to_space)
    value = to_int_lenient(value)
    if space == "hsv":
        return CONVERT_SCALAR_HSV[FormatType(format_type)](*unpack_rgb(value))
    return CONVERT_SCALAR[space](value)


def np_convert(
    values: np.ndarray,
    to_space: ColorSpace,
    format_type: FormatType = FormatType.INT,
) -> np.ndarray:
    """
    Vectorized ``convert`` over an array of packed integers.

    "int" returns the values as an int64 array and "hex" an object array of
    strings; every other space returns an array of shape ``values.shape + (3,)``.
    HSV with FormatType.INT is int64, FormatType.FLOAT is float64.

    Values must fit in a signed 64-bit integer; larger ones raise
    ``OverflowError`` where the scalar ``convert`` would mask them. Use
    ``convert`` for arbitrary-precision input.
    """
    space = _check_space(to_space)
    values = np.asarray(values, dtype=np.int64)
    if space == "int":
        return values
    if space == "hex":
        return np.vectorize(lambda v: format_hex(int(v)), otypes=[object])(values)

    rgb = np_unpack_rgb(values)
    if space == "hsv":
        fmt = FormatType(format_type)
        out = CONVERT_NUMPY_HSV[fmt](rgb)
        return out.astype(np.int64) if format_classes[fmt] is int else out
    return CONVERT_NUMPY[space](rgb)


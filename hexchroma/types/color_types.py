from __future__ import annotations
from typing import Literal, NamedTuple, Union, TYPE_CHECKING
import numpy as np

if TYPE_CHECKING:
    from ..colors.color import Color

Scalar = int | float
ColorSpace = Literal["int", "hex", "rgb", "hsv", "xyz", "lab"]
COLOR_SPACES = ("int", "hex", "rgb", "hsv", "xyz", "lab")

# Anything closest_match() can turn into a Color
ColorLike = Union["Color", int, np.integer]


class RGB(NamedTuple):
    red: int
    green: int
    blue: int


class HSV(NamedTuple):
    hue: Scalar
    sat: Scalar
    val: Scalar


class XYZ(NamedTuple):
    x: float
    y: float
    z: float


class Lab(NamedTuple):
    l: float
    a: float
    b: float


def is_color_space(name: str) -> bool:
    """
    Check if the given name is a conversion target understood by ``convert``.

    Args:
        name: Color space string, case-insensitive
    Returns:
        True if supported, False otherwise (including for non-strings)
    """
    return isinstance(name, str) and name.lower() in COLOR_SPACES

"""
Hexchroma Color Classes
=======================

The ``Color`` value object, the named color table and palette matching.

Usage
-----
>>> from hexchroma.colors import Color, NamedColor
>>>
>>> orange = Color(NamedColor.ORANGE)
>>> orange.to_rgb_int()
RGB(red=255, green=165, blue=0)
>>> orange.to_hsv_int()
HSV(hue=28, sat=255, val=255)
>>>
>>> # Nearest named color
>>> from hexchroma.colors import named_palette
>>> Color.from_hex("fe0100").closest_match(named_palette())
'RED'
"""

from .color import Color
from .matching import (
    DEFAULT_GRAY_THRESHOLD,
    MATCH_SENTINEL,
    as_color,
    distance_rgb,
    distance_lab,
    is_gray_scale,
    closest_match,
    np_distance_lab,
    np_closest_match,
)
from .named import NamedColor, named_palette

__all__ = [
    "Color",
    "NamedColor",
    "named_palette",
    "DEFAULT_GRAY_THRESHOLD",
    "MATCH_SENTINEL",
    "as_color",
    "distance_rgb",
    "distance_lab",
    "is_gray_scale",
    "closest_match",
    "np_distance_lab",
    "np_closest_match",
]

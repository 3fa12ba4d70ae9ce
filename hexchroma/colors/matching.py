"""
Color distances and palette matching.

Two distances are provided:

- ``distance_rgb``: Manhattan distance in the RGB cube, an int in [0, 765].
- ``distance_lab``: a cheap Delta E, ``sqrt(|ΔL| + |Δa| + |Δb|)``. This is not
  the Euclidean CIE76 formula; switching to it changes which palette entry
  ``closest_match`` picks.

The scalar functions are also bound onto ``Color`` as ``distance_rgb_from``,
``distance_lab_from``, ``is_gray_scale`` and ``closest_match``.
"""
from __future__ import annotations
import math
from typing import Any, Iterable, Mapping, Optional, Sequence, Tuple, Union
import numpy as np
from numpy import ndarray as NDArray

from ..conversions.codec import np_unpack_rgb
from ..conversions.to_lab import np_rgb_to_lab
from ..types.color_types import ColorLike
from .color import Color

DEFAULT_GRAY_THRESHOLD = 16

# Larger than any reachable distance_lab value
MATCH_SENTINEL = 10000

Palette = Union[Sequence[ColorLike], Mapping[Any, ColorLike]]


def as_color(entry: ColorLike) -> Color:
    """Return ``entry`` itself if it is a Color, else ``Color.from_int(entry)``."""
    if isinstance(entry, Color):
        return entry
    return Color.from_int(entry)


def distance_rgb(color: Color, other: Color) -> int:
    """Sum of absolute per-channel differences."""
    r1, g1, b1 = color.to_rgb_int()
    r2, g2, b2 = other.to_rgb_int()
    return abs(r1 - r2) + abs(g1 - g2) + abs(b1 - b2)


def distance_lab(color: Color, other: Color) -> float:
    """Simplified Delta E: square root of the summed absolute Lab differences."""
    l1, a1, b1 = color.to_lab_cie()
    l2, a2, b2 = other.to_lab_cie()
    return math.sqrt(abs(l2 - l1) + abs(a2 - a1) + abs(b2 - b1))


def is_gray_scale(color: Color, threshold: int = DEFAULT_GRAY_THRESHOLD) -> bool:
    """True when the channel spread ``max - min`` is below ``threshold``."""
    rgb = color.to_rgb_int()
    return max(rgb) - min(rgb) < threshold


def _palette_items(palette: Palette) -> Iterable[Tuple[Any, ColorLike]]:
    if isinstance(palette, Mapping):
        return palette.items()
    return enumerate(palette)


def closest_match(color: Color, palette: Palette) -> Optional[Any]:
    """
    Key of the palette entry nearest to ``color`` by ``distance_lab``.

    Args:
        color: Color to match
        palette: Sequence or mapping of Colors / packed integers. Entries are
            converted one at a time while scanning.

    Returns:
        The index (sequence) or key (mapping) of the first entry with the
        smallest distance, or None for an empty palette. A later entry only
        wins if it is strictly closer.
    """
    match_dist: float = MATCH_SENTINEL
    match_key = None
    for key, entry in _palette_items(palette):
        dist = distance_lab(color, as_color(entry))
        if dist < match_dist:
            match_dist = dist
            match_key = key
    return match_key


def np_distance_lab(color: Color, palette: NDArray) -> NDArray:
    """
    Vectorized ``distance_lab`` from one color to many.

    Args:
        color: Reference color
        palette: array-like of packed integers, any shape

    Returns:
        float array with the shape of ``palette``
    """
    ref = np.array(color.to_lab_cie(), dtype=float)
    lab = np_rgb_to_lab(np_unpack_rgb(palette))
    return np.sqrt(np.abs(lab - ref).sum(axis=-1))


def np_closest_match(color: Color, palette: NDArray) -> Optional[int]:
    """
    Vectorized ``closest_match`` over a 1-D array of packed integers.

    Returns:
        Index of the first nearest entry, or None if ``palette`` is empty.
    """
    palette = np.asarray(palette, dtype=np.int64).ravel()
    if palette.size == 0:
        return None
    distances = np_distance_lab(color, palette)
    # argmin returns the first of several equal minima
    return int(np.argmin(distances))


Color.distance_rgb_from = distance_rgb
Color.distance_lab_from = distance_lab
Color.is_gray_scale = is_gray_scale
Color.closest_match = closest_match

import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import HSV
from ..types.format_type import HUE_360, HUE_255
from .codec import round_half_away, np_round_half_away


def rgb_to_hsv_float(r: int, g: int, b: int) -> HSV:
    """
    HSV from 8-bit RGB (slow but accurate).

    Input:
        r, g, b ∈ [0, 255]

    Output:
        hue ∈ [0, 360)
        sat ∈ [0, 1]
        val ∈ [0, 255]   (the raw maximum channel)
    """
    val = max(r, g, b)
    # Black
    if val == 0:
        return HSV(0, 0, 0)

    # Normalize to the brightest channel
    rn, gn, bn = r / val, g / val, b / val
    c_min = min(rn, gn, bn)
    c_max = max(rn, gn, bn)

    sat = c_max - c_min
    if sat == 0:
        return HSV(0, sat, val)

    # Stretch so the channels span [0, 1]
    span = c_max - c_min
    rn = (rn - c_min) / span
    gn = (gn - c_min) / span
    bn = (bn - c_min) / span
    c_max = max(rn, gn, bn)

    if c_max == rn:
        hue = 0.0 + 60 * (gn - bn)
        if hue < 0:
            hue += HUE_360
    elif c_max == gn:
        hue = 120 + 60 * (bn - rn)
    else:
        hue = 240 + 60 * (rn - gn)

    return HSV(hue, sat, val)


def rgb_to_hsv_int(r: int, g: int, b: int) -> HSV:
    """
    HSV from 8-bit RGB on a 0-255 scale for every channel (fast, approximate).

    The hue circle is squeezed into 255 steps with sectors starting at 0, 85
    and 171; results are not comparable with ``rgb_to_hsv_float``.
    """
    c_max = max(r, g, b)
    c_min = min(r, g, b)
    if c_max == 0:
        return HSV(0, 0, 0)

    delta = c_max - c_min
    sat = round_half_away(255 * delta / c_max)
    if sat == 0:
        return HSV(0, 0, c_max)

    if c_max == r:
        hue = round_half_away(0 + 43 * (g - b) / delta)
    elif c_max == g:
        hue = round_half_away(85 + 43 * (b - r) / delta)
    else:
        hue = round_half_away(171 + 43 * (r - g) / delta)
    if hue < 0:
        hue += HUE_255

    return HSV(hue, sat, c_max)


def _split_channels(rgb: NDArray) -> tuple[NDArray, NDArray, NDArray]:
    rgb = np.asarray(rgb, dtype=float)
    if rgb.shape[-1] != 3:
        raise ValueError(f"Expected last dimension to be 3, got shape {rgb.shape}")
    return rgb[..., 0], rgb[..., 1], rgb[..., 2]


def np_rgb_to_hsv_float(rgb: NDArray) -> NDArray:
    """
    Vectorized ``rgb_to_hsv_float``.

    Args:
        rgb: array of shape (..., 3), 8-bit channel values

    Returns:
        float array of shape (..., 3): (hue [0,360), sat [0,1], val [0,255])
    """
    r, g, b = _split_channels(rgb)
    val = np.maximum.reduce([r, g, b])
    safe_val = np.where(val == 0, 1.0, val)

    rn, gn, bn = r / safe_val, g / safe_val, b / safe_val
    c_min = np.minimum.reduce([rn, gn, bn])
    c_max = np.maximum.reduce([rn, gn, bn])
    sat = c_max - c_min
    chromatic = sat != 0

    span = np.where(chromatic, sat, 1.0)
    rn = (rn - c_min) / span
    gn = (gn - c_min) / span
    bn = (bn - c_min) / span
    c_max = np.maximum.reduce([rn, gn, bn])

    hue_r = 0.0 + 60 * (gn - bn)
    hue_r = np.where(hue_r < 0, hue_r + HUE_360, hue_r)
    hue_g = 120 + 60 * (bn - rn)
    hue_b = 240 + 60 * (rn - gn)
    hue = np.where(c_max == rn, hue_r, np.where(c_max == gn, hue_g, hue_b))
    hue = np.where(chromatic, hue, 0.0)

    return np.stack([hue, sat, val], axis=-1)


def np_rgb_to_hsv_int(rgb: NDArray) -> NDArray:
    """
    Vectorized ``rgb_to_hsv_int``.

    Args:
        rgb: array of shape (..., 3), 8-bit channel values

    Returns:
        int64 array of shape (..., 3) with every channel in [0, 255]
    """
    r, g, b = _split_channels(rgb)
    c_max = np.maximum.reduce([r, g, b])
    c_min = np.minimum.reduce([r, g, b])
    delta = c_max - c_min

    sat = np_round_half_away(255 * delta / np.where(c_max == 0, 1.0, c_max))
    safe_delta = np.where(delta == 0, 1.0, delta)

    hue_r = np_round_half_away(0 + 43 * (g - b) / safe_delta)
    hue_g = np_round_half_away(85 + 43 * (b - r) / safe_delta)
    hue_b = np_round_half_away(171 + 43 * (r - g) / safe_delta)
    hue = np.where(c_max == r, hue_r, np.where(c_max == g, hue_g, hue_b))
    hue = np.where(hue < 0, hue + HUE_255, hue)
    hue = np.where(sat == 0, 0, hue)

    return np.stack([hue, sat, c_max.astype(np.int64)], axis=-1)

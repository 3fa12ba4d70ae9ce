import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import XYZ, Lab
from ..types.format_type import CHANNEL_MAX

# sRGB → XYZ, D65 illuminant, 2° observer. Rows are X, Y, Z; columns R, G, B.
SRGB_TO_XYZ = (
    (0.4124564, 0.3575761, 0.1804375),
    (0.2126729, 0.7151522, 0.0721750),
    (0.0193339, 0.1191920, 0.9503041),
)
SRGB_TO_XYZ_NP = np.array(SRGB_TO_XYZ, dtype=np.float64)

# Reference white, D65 / 2°
D65_WHITE = (95.047, 100.0, 108.883)

LAB_EPSILON = 0.008856
LAB_KAPPA = 7.787
LAB_OFFSET = 16 / 116


def srgb_to_linear(c: float) -> float:
    """Convert nonlinear sRGB (0..1) to linear-light RGB (0..1)."""
    if c > 0.04045:
        return ((c + 0.055) / 1.055) ** 2.4
    return c / 12.92


def np_srgb_to_linear(c: NDArray) -> NDArray:
    """Vectorized: Convert nonlinear sRGB (0..1) to linear-light RGB."""
    c = np.asarray(c, dtype=float)
    return np.where(
        c > 0.04045,
        ((c + 0.055) / 1.055) ** 2.4,
        c / 12.92,
    )


def rgb_to_xyz(r: int, g: int, b: int) -> XYZ:
    """
    CIE XYZ from 8-bit sRGB.

    Input:
        r, g, b ∈ [0, 255]

    Output:
        x, y, z scaled ×100 (white is roughly (95.05, 100, 108.9))
    """
    rl = srgb_to_linear(r / CHANNEL_MAX) * 100
    gl = srgb_to_linear(g / CHANNEL_MAX) * 100
    bl = srgb_to_linear(b / CHANNEL_MAX) * 100

    x_row, y_row, z_row = SRGB_TO_XYZ
    return XYZ(
        (rl * x_row[0]) + (gl * x_row[1]) + (bl * x_row[2]),
        (rl * y_row[0]) + (gl * y_row[1]) + (bl * y_row[2]),
        (rl * z_row[0]) + (gl * z_row[1]) + (bl * z_row[2]),
    )


def _lab_f(t: float) -> float:
    if t > LAB_EPSILON:
        return t ** (1 / 3)
    return (LAB_KAPPA * t) + LAB_OFFSET


def xyz_to_lab(x: float, y: float, z: float) -> Lab:
    """
    CIE L*a*b* from XYZ (×100 scale), relative to the D65 white.

    No special case for black: (0, 0, 0) goes through the linear branch and
    lands on L = 0.
    """
    fx = _lab_f(x / D65_WHITE[0])
    fy = _lab_f(y / D65_WHITE[1])
    fz = _lab_f(z / D65_WHITE[2])

    return Lab(
        (116 * fy) - 16,
        500 * (fx - fy),
        200 * (fy - fz),
    )


def rgb_to_lab(r: int, g: int, b: int) -> Lab:
    """CIE L*a*b* straight from 8-bit sRGB."""
    return xyz_to_lab(*rgb_to_xyz(r, g, b))


def np_rgb_to_xyz(rgb: NDArray) -> NDArray:
    """
    Vectorized ``rgb_to_xyz``.

    Args:
        rgb: array of shape (..., 3), 8-bit channel values

    Returns:
        float array of shape (..., 3) holding X, Y, Z
    """
    rgb = np.asarray(rgb, dtype=float)
    if rgb.shape[-1] != 3:
        raise ValueError(f"Expected last dimension to be 3, got shape {rgb.shape}")
    linear = np_srgb_to_linear(rgb / CHANNEL_MAX) * 100
    r, g, b = linear[..., 0], linear[..., 1], linear[..., 2]
    m = SRGB_TO_XYZ_NP
    # Summed term by term in R, G, B order to stay identical to rgb_to_xyz
    return np.stack([
        (r * m[0, 0]) + (g * m[0, 1]) + (b * m[0, 2]),
        (r * m[1, 0]) + (g * m[1, 1]) + (b * m[1, 2]),
        (r * m[2, 0]) + (g * m[2, 1]) + (b * m[2, 2]),
    ], axis=-1)


def np_xyz_to_lab(xyz: NDArray) -> NDArray:
    """
    Vectorized ``xyz_to_lab``.

    Args:
        xyz: array of shape (..., 3)

    Returns:
        float array of shape (..., 3) holding L, a, b
    """
    xyz = np.asarray(xyz, dtype=float)
    t = xyz / np.array(D65_WHITE)
    f = np.where(t > LAB_EPSILON, np.maximum(t, 0.0) ** (1 / 3), (LAB_KAPPA * t) + LAB_OFFSET)
    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]
    return np.stack([
        (116 * fy) - 16,
        500 * (fx - fy),
        200 * (fy - fz),
    ], axis=-1)


def np_rgb_to_lab(rgb: NDArray) -> NDArray:
    """Vectorized ``rgb_to_lab`` over an array of shape (..., 3)."""
    return np_xyz_to_lab(np_rgb_to_xyz(rgb))

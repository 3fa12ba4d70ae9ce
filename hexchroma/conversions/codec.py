import math
import re
import string
import warnings
import numpy as np
from numpy import ndarray as NDArray

from ..exceptions import HexParseWarning
from ..types.color_types import RGB

_HEX_DIGITS = frozenset(string.hexdigits)
_INT64_MASK = 0xFFFFFFFFFFFFFFFF


def round_half_away(x: float) -> int:
    """Round to the nearest integer, ties away from zero (``round(2.5) == 3``, ``round(-2.5) == -3``)."""
    if x < 0:
        return -math.floor(-x + 0.5)
    return math.floor(x + 0.5)


def np_round_half_away(x: NDArray) -> NDArray:
    """Vectorized: round half away from zero, returned as int64."""
    x = np.asarray(x, dtype=float)
    return (np.sign(x) * np.floor(np.abs(x) + 0.5)).astype(np.int64)


def pack_rgb(red, green, blue) -> int:
    """
    Pack three channels into one integer as ``(r << 16) + (g << 8) + b``.

    Channels are truncated to ``int`` but never clamped, so out-of-range
    values bleed into the neighbouring channel.
    """
    return (int(red) << 16) + (int(green) << 8) + int(blue)


def unpack_rgb(value: int) -> RGB:
    """Extract the 8-bit red, green and blue channels of a packed integer."""
    return RGB(
        (value >> 16) & 0xFF,
        (value >> 8) & 0xFF,
        value & 0xFF,
    )


def np_unpack_rgb(values: NDArray) -> NDArray:
    """
    Vectorized: unpack an array of packed integers.

    Args:
        values: array-like of integers, any shape, within the int64 range

    Returns:
        int64 array of shape (..., 3) holding red, green, blue

    Raises:
        OverflowError: if a value does not fit in int64
    """
    values = np.asarray(values, dtype=np.int64)
    return np.stack([
        (values >> 16) & 0xFF,
        (values >> 8) & 0xFF,
        values & 0xFF,
    ], axis=-1)


def parse_hex(text: str, stacklevel: int = 2) -> int:
    """
    Parse a base-16 string leniently.

    Characters that are not hex digits are discarded and the rest is read as
    one unsigned number; an empty remainder reads as 0. There is no fixed
    length, so ``"FF"`` is 255. Dropping a leading ``#`` is silent, any other
    discarded character raises a ``HexParseWarning``.

    Args:
        text: String to parse
        stacklevel: Passed to ``warnings.warn``; callers that wrap this function
            add one per wrapping frame so the warning points at user code.
    """
    text = str(text)
    body = text[1:] if text.startswith("#") else text
    digits = "".join(ch for ch in body if ch in _HEX_DIGITS)
    if len(digits) != len(body):
        warnings.warn(
            f"Discarded non-hex characters while parsing {text!r}",
            HexParseWarning,
            stacklevel=stacklevel,
        )
    if not digits:
        return 0
    return int(digits, 16)


def format_hex(value: int) -> str:
    """
    Render an integer as lowercase hex, zero-padded to at least 6 digits.

    Longer values are never truncated. Negative values render as their 64-bit
    two's-complement pattern.
    """
    if value < 0:
        value &= _INT64_MASK
    return format(value, "x").rjust(6, "0")


def format_channel_hex(channel: int) -> str:
    """Lowercase hex of a single channel, without padding (5 renders as ``"5"``)."""
    return format(channel, "x")


# Leading numeric prefix of a string: integer, decimal or exponent form
_LEADING_NUMBER = re.compile(r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+))([eE][+-]?\d+)?")


def to_int_lenient(value) -> int:
    """
    Coerce a packed-integer argument without raising.

    Numbers are truncated toward zero (non-finite floats read as 0) and falsy
    values are 0. Strings are read from their leading numeric prefix, which
    may carry a fraction or an exponent: ``"12px"`` is 12, ``"1e3"`` is 1000,
    ``"2.9"`` is 2 and ``"px"`` is 0.
    """
    if not value:
        return 0
    if isinstance(value, str):
        match = _LEADING_NUMBER.match(value)
        if not match:
            return 0
        mantissa, exponent = match.groups()
        if exponent is None and "." not in mantissa:
            return int(mantissa)
        return to_int_lenient(float(mantissa + (exponent or "")))
    if isinstance(value, (float, np.floating)) and not math.isfinite(value):
        return 0
    return int(value)

from __future__ import annotations
from typing import Any, Callable, Mapping, Optional, Sequence, Union
import numpy as np

from ..conversions.codec import (
    pack_rgb,
    unpack_rgb,
    parse_hex,
    format_hex,
    format_channel_hex,
    to_int_lenient,
)
from ..conversions.to_hsv import rgb_to_hsv_float, rgb_to_hsv_int
from ..conversions.to_lab import rgb_to_xyz, xyz_to_lab
from ..exceptions import InvalidInputError
from ..types.color_types import RGB, HSV, XYZ, Lab, ColorLike
from ..types.format_type import FormatType


def _is_integer(value: Any) -> bool:
    # bool is an int subclass but not an integer color
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


class Color:
    """
    A single color stored as one packed integer (``0xRRGGBB``).

    Instances are immutable; every constructor returns a new ``Color`` and
    every conversion is computed from the stored integer on demand.

    >>> Color.from_rgb_int(255, 165, 0).to_hex()
    'ffa500'
    >>> str(Color.from_hex("00ff00"))
    '#00FF00'
    """
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    # Attached by hexchroma.colors.matching
    distance_rgb_from: Callable[[Color, Color], int]
    distance_lab_from: Callable[[Color, Color], float]
    is_gray_scale: Callable[..., bool]
    closest_match: Callable[[Color, Union[Sequence[ColorLike], Mapping[Any, ColorLike]]], Optional[Any]]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: Any = 0) -> None:
        if isinstance(value, Color):
            value = value.to_int()
        self._value = to_int_lenient(value)
        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_int(cls, value: Any) -> Color:
        """Color from a packed integer; floats are truncated, nothing is clamped."""
        return cls(value)

    @classmethod
    def from_hex(cls, hex_value: str) -> Color:
        """
        Color from a hex string such as ``"ffa500"`` or ``"#FFA500"``.

        Parsing is lenient: stray characters are dropped and short strings are
        read as-is, so ``"FF"`` is 0x0000FF.
        """
        return cls(parse_hex(hex_value, stacklevel=3))

    @classmethod
    def from_rgb_int(cls, red, green, blue) -> Color:
        """Color from integer channels. Out-of-range channels are not clamped."""
        return cls(pack_rgb(red, green, blue))

    @classmethod
    def from_rgb_hex(cls, red: str, green: str, blue: str) -> Color:
        """Color from one hex string per channel, e.g. ``("ff", "a5", "0")``."""
        return cls._from_rgb_hex(red, green, blue, stacklevel=4)

    @classmethod
    def _from_rgb_hex(cls, red, green, blue, stacklevel: int) -> Color:
        return cls.from_rgb_int(
            parse_hex(red, stacklevel=stacklevel),
            parse_hex(green, stacklevel=stacklevel),
            parse_hex(blue, stacklevel=stacklevel),
        )

    @classmethod
    def new_from_int(cls, value: Any) -> Color:
        """
        Validated ``from_int``.

        Raises:
            InvalidInputError: if ``value`` is not an integer.
        """
        if not _is_integer(value):
            type_name = type(value).__name__
            raise InvalidInputError(
                f"Expected an integer value, received type: [`{type_name}`]",
                received={"value": type_name},
                offending=("value",),
            )
        return cls(value)

    @classmethod
    def new_from_hex(cls, hex_value: str) -> Color:
        return cls(parse_hex(hex_value, stacklevel=3))

    @classmethod
    def new_from_rgb(cls, red: Any, green: Any, blue: Any) -> Color:
        """
        Validated ``from_rgb_int``.

        Raises:
            InvalidInputError: if any channel is not an integer. The message
                lists the received type of every channel.
        """
        channels = {"red": red, "green": green, "blue": blue}
        offending = tuple(name for name, v in channels.items() if not _is_integer(v))
        if offending:
            received = {name: type(v).__name__ for name, v in channels.items()}
            raise InvalidInputError(
                "Expected RGB values to be integers. Types received: "
                f"red [`{received['red']}`], green [`{received['green']}`], blue [`{received['blue']}`].",
                received=received,
                offending=offending,
            )
        return cls.from_rgb_int(red, green, blue)

    @classmethod
    def new_from_rgb_hex(cls, red: str, green: str, blue: str) -> Color:
        return cls._from_rgb_hex(red, green, blue, stacklevel=4)

    # ------------------ CONVERSIONS ------------------
    def to_int(self) -> int:
        return self._value

    def to_hex(self) -> str:
        """Lowercase hex, zero-padded to 6 digits, never truncated."""
        return format_hex(self._value)

    def to_string(self) -> str:
        """Upper-case hex with a leading ``#``, e.g. ``"#FFA500"``."""
        return f"#{self.to_hex().rjust(6, '0')}".upper()

    def to_rgb_int(self) -> RGB:
        return unpack_rgb(self._value)

    def to_rgb_hex(self) -> tuple[str, str, str]:
        """Per-channel hex without padding: 0x05FF00 gives ``("5", "ff", "0")``."""
        return tuple(format_channel_hex(c) for c in self.to_rgb_int())  # type: ignore[return-value]

    def to_hsv_float(self) -> HSV:
        """Hue in [0, 360), saturation in [0, 1], value in [0, 255]."""
        return rgb_to_hsv_float(*self.to_rgb_int())

    def to_hsv_int(self) -> HSV:
        """Hue, saturation and value all on a 0-255 scale (approximate)."""
        return rgb_to_hsv_int(*self.to_rgb_int())

    def to_hsv(self, format_type: FormatType = FormatType.FLOAT) -> HSV:
        """
        HSV in the requested format.

        Args:
            format_type: FormatType.FLOAT for ``to_hsv_float``, FormatType.INT for ``to_hsv_int``
        """
        if FormatType(format_type) == FormatType.INT:
            return self.to_hsv_int()
        return self.to_hsv_float()

    def to_xyz(self) -> XYZ:
        return rgb_to_xyz(*self.to_rgb_int())

    def to_lab_cie(self) -> Lab:
        return xyz_to_lab(*self.to_xyz())

    # ------------------ DUNDERS ------------------
    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(0x{self.to_hex()})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Color):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

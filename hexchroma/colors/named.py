from enum import IntEnum
from .color import Color


class NamedColor(IntEnum):
    AQUA = 0x00FFFF
    BLACK = 0x000000
    BLUE = 0x0000FF
    FUCHSIA = 0xFF00FF
    GRAY = 0x808080
    GREEN = 0x008000
    LIME = 0x00FF00
    MAROON = 0x800000
    NAVY = 0x000080
    OLIVE = 0x808000
    ORANGE = 0xFFA500
    PURPLE = 0x800080
    RED = 0xFF0000
    SILVER = 0xC0C0C0
    TEAL = 0x008080
    WHITE = 0xFFFFFF
    YELLOW = 0xFFFF00
    # Sentinel above the 24-bit range
    TRANSPARENT = 0x7FFFFFFF


AQUA = Color(NamedColor.AQUA)
BLACK = Color(NamedColor.BLACK)
BLUE = Color(NamedColor.BLUE)
FUCHSIA = Color(NamedColor.FUCHSIA)
GRAY = Color(NamedColor.GRAY)
GREEN = Color(NamedColor.GREEN)
LIME = Color(NamedColor.LIME)
MAROON = Color(NamedColor.MAROON)
NAVY = Color(NamedColor.NAVY)
OLIVE = Color(NamedColor.OLIVE)
ORANGE = Color(NamedColor.ORANGE)
PURPLE = Color(NamedColor.PURPLE)
RED = Color(NamedColor.RED)
SILVER = Color(NamedColor.SILVER)
TEAL = Color(NamedColor.TEAL)
WHITE = Color(NamedColor.WHITE)
YELLOW = Color(NamedColor.YELLOW)
TRANSPARENT = Color(NamedColor.TRANSPARENT)


def named_palette(include_transparent: bool = False) -> dict[str, Color]:
    """Every named color keyed by its upper-case name, ready for ``closest_match``."""
    return {
        member.name: Color(member)
        for member in NamedColor
        if include_transparent or member is not NamedColor.TRANSPARENT
    }


__all__ = [
    "NamedColor",
    "named_palette",
    "AQUA",
    "BLACK",
    "BLUE",
    "FUCHSIA",
    "GRAY",
    "GREEN",
    "LIME",
    "MAROON",
    "NAVY",
    "OLIVE",
    "ORANGE",
    "PURPLE",
    "RED",
    "SILVER",
    "TEAL",
    "WHITE",
    "YELLOW",
    "TRANSPARENT",
]

"""Basic hexchroma usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import numpy as np

from hexchroma import (
    Color,
    NamedColor,
    FormatType,
    named_palette,
    np_convert,
    np_closest_match,
)


def demonstrate_conversions() -> None:
    # Build a color three ways and look at it in every space.
    accent = Color.from_rgb_int(255, 128, 64)
    print("Hex:", accent.to_hex(), "/", accent)
    print("Same color from hex:", Color.from_hex("#ff8040") == accent)

    print("HSV (float):", accent.to_hsv_float())
    print("HSV (int):", accent.to_hsv(FormatType.INT))
    print("XYZ:", accent.to_xyz())
    print("Lab:", accent.to_lab_cie())


def demonstrate_matching() -> None:
    # Nearest named color and distances.
    probe = Color.from_hex("fe0100")
    print("Closest named color:", probe.closest_match(named_palette()))
    print("RGB distance to red:", probe.distance_rgb_from(Color(NamedColor.RED)))
    print("Lab distance to red:", probe.distance_lab_from(Color(NamedColor.RED)))
    print("Gray?", Color(NamedColor.SILVER).is_gray_scale())


def demonstrate_arrays() -> None:
    # Vectorized conversion of a whole palette.
    palette = np.array([int(member) for member in NamedColor if member is not NamedColor.TRANSPARENT])
    print("Palette Lab shape:", np_convert(palette, "lab").shape)
    print("Closest index to orange-ish:", np_closest_match(Color(0xFFA010), palette))


if __name__ == "__main__":
    demonstrate_conversions()
    demonstrate_matching()
    demonstrate_arrays()

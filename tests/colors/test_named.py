from hexchroma import Color, NamedColor, named_palette
from hexchroma.colors import named


def test_named_values():
    expected = {
        "AQUA": 0x00FFFF,
        "BLACK": 0x000000,
        "BLUE": 0x0000FF,
        "FUCHSIA": 0xFF00FF,
        "GRAY": 0x808080,
        "GREEN": 0x008000,
        "LIME": 0x00FF00,
        "MAROON": 0x800000,
        "NAVY": 0x000080,
        "OLIVE": 0x808000,
        "ORANGE": 0xFFA500,
        "PURPLE": 0x800080,
        "RED": 0xFF0000,
        "SILVER": 0xC0C0C0,
        "TEAL": 0x008080,
        "WHITE": 0xFFFFFF,
        "YELLOW": 0xFFFF00,
        "TRANSPARENT": 0x7FFFFFFF,
    }
    assert {member.name: int(member) for member in NamedColor} == expected


def test_module_constants_match_enum():
    for member in NamedColor:
        constant = getattr(named, member.name)
        assert isinstance(constant, Color)
        assert constant.to_int() == member.value


def test_transparent_renders_long_hex():
    assert named.TRANSPARENT.to_hex() == "7fffffff"


def test_named_palette():
    palette = named_palette()
    assert "TRANSPARENT" not in palette
    assert len(palette) == len(NamedColor) - 1
    assert palette["ORANGE"] == Color(0xFFA500)
    assert "TRANSPARENT" in named_palette(include_transparent=True)

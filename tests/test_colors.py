import pytest

from bgshell.colors import (
    BASE_COLOR_TABLE,
    BASE_COLORS,
    TABLE_COLORS,
    Character,
    CharacterColor,
    Color,
    ColorScheme,
    ColorSpace,
    color256,
    color_table,
)


def test_default_character_color_is_undefined():
    c = CharacterColor()
    assert not c.is_valid()
    assert c.color(BASE_COLOR_TABLE) is None


def test_unknown_color_space_becomes_undefined():
    c = CharacterColor(9, 5)
    assert c.color_space is ColorSpace.UNDEFINED
    assert c == CharacterColor()


def test_default_space_masks_to_one_bit():
    c = CharacterColor(ColorSpace.DEFAULT, 3)
    assert c.is_valid()
    assert c.color(BASE_COLOR_TABLE) == BASE_COLOR_TABLE[1].color


def test_system_space_uses_intensity_bit():
    c = CharacterColor(ColorSpace.SYSTEM, 9)
    assert c.color(BASE_COLOR_TABLE) == BASE_COLOR_TABLE[1 + 2 + BASE_COLORS].color


def test_toggle_intensive_round_trip():
    c = CharacterColor(ColorSpace.SYSTEM, 3)
    original = CharacterColor(ColorSpace.SYSTEM, 3)
    c.toggle_intensive()
    assert c.color(BASE_COLOR_TABLE) == BASE_COLOR_TABLE[3 + 2 + BASE_COLORS].color
    assert c != original
    c.toggle_intensive()
    assert c == original


def test_toggle_intensive_ignores_rgb():
    c = CharacterColor(ColorSpace.RGB, 0x123456)
    c.toggle_intensive()
    assert c == CharacterColor(ColorSpace.RGB, 0x123456)


def test_rgb_color():
    c = CharacterColor(ColorSpace.RGB, 0x123456)
    assert c.color(BASE_COLOR_TABLE) == Color(0x12, 0x34, 0x56)


def test_index256_masks_value():
    assert CharacterColor(ColorSpace.INDEX256, 300) == CharacterColor(ColorSpace.INDEX256, 300 & 255)


@pytest.mark.parametrize("index", range(8))
def test_color256_system_colors(index):
    assert color256(index, BASE_COLOR_TABLE) == BASE_COLOR_TABLE[index + 2].color
    assert color256(index + 8, BASE_COLOR_TABLE) == BASE_COLOR_TABLE[index + 2 + BASE_COLORS].color


def test_color256_cube_corners():
    assert color256(16, BASE_COLOR_TABLE) == Color(0, 0, 0)
    assert color256(231, BASE_COLOR_TABLE) == Color(255, 255, 255)


def test_color256_grays_increase():
    grays = [color256(i, BASE_COLOR_TABLE) for i in range(232, 256)]
    assert all(g.red == g.green == g.blue for g in grays)
    reds = [g.red for g in grays]
    assert reds == sorted(set(reds))
    assert 0 < reds[0] and reds[-1] < 255


def test_index256_color_delegates():
    c = CharacterColor(ColorSpace.INDEX256, 200)
    assert c.color(BASE_COLOR_TABLE) == color256(200, BASE_COLOR_TABLE)


def test_character_defaults_and_equality():
    a = Character()
    b = Character()
    assert a == b
    assert a.character == ord(" ")
    b.rendition = 1
    assert a != b


def test_default_background_is_transparent():
    ch = Character()
    assert ch.is_transparent(BASE_COLOR_TABLE)
    assert not ch.is_bold(BASE_COLOR_TABLE)


def test_system_background_not_transparent():
    ch = Character(background=CharacterColor(ColorSpace.SYSTEM, 1))
    assert not ch.is_transparent(BASE_COLOR_TABLE)


def test_rgb_background_neither_transparent_nor_bold():
    ch = Character(background=CharacterColor(ColorSpace.RGB, 0))
    assert not ch.is_transparent(BASE_COLOR_TABLE)
    assert not ch.is_bold(BASE_COLOR_TABLE)


def test_intensive_default_entry_is_bold():
    bg = CharacterColor(ColorSpace.DEFAULT, 0)
    bg.toggle_intensive()
    ch = Character(background=bg)
    assert ch.is_bold(BASE_COLOR_TABLE) == BASE_COLOR_TABLE[BASE_COLORS].bold
    assert ch.is_bold(BASE_COLOR_TABLE)


@pytest.mark.parametrize("scheme", list(ColorScheme))
def test_color_tables_have_full_size(scheme):
    table = color_table(scheme)
    assert len(table) == TABLE_COLORS
    assert table[1].transparent


def test_white_on_black_foreground():
    table = color_table(ColorScheme.WHITE_ON_BLACK)
    assert table[0].color == Color(0xFF, 0xFF, 0xFF)
    assert table[1].color == Color(0, 0, 0)


def test_scheme_by_integer():
    assert color_table(2) == color_table(ColorScheme.GREEN_ON_BLACK)


def test_unknown_scheme_raises():
    with pytest.raises(ValueError):
        color_table(7)
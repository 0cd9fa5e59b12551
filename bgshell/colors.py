"""Terminal colour spaces, palettes and attributed characters."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional, Sequence

BASE_COLORS = 2 + 8
INTENSITIES = 2
TABLE_COLORS = INTENSITIES * BASE_COLORS

DEFAULT_FORE_COLOR = 0
DEFAULT_BACK_COLOR = 1

LINE_DEFAULT = 0
LINE_WRAPPED = 1 << 0
LINE_DOUBLEWIDTH = 1 << 1
LINE_DOUBLEHEIGHT = 1 << 2

DEFAULT_RENDITION = 0
RE_BOLD = 1 << 0
RE_BLINK = 1 << 1
RE_UNDERLINE = 1 << 2
RE_REVERSE = 1 << 3
RE_INTENSIVE = 1 << 3
RE_CURSOR = 1 << 4
RE_EXTENDED_CHAR = 1 << 5


class ColorSpace(IntEnum):
    """The colour spaces a character colour can be expressed in."""

    UNDEFINED = 0
    DEFAULT = 1
    SYSTEM = 2
    INDEX256 = 3
    RGB = 4


@dataclass(frozen=True)
class Color:
    """An opaque RGB colour."""

    red: int
    green: int
    blue: int


@dataclass(frozen=True)
class ColorEntry:
    """A palette entry: a colour plus transparency and boldness flags."""

    color: Optional[Color] = None
    transparent: bool = False
    bold: bool = False


Palette = Sequence[ColorEntry]


class CharacterColor:
    """The colour of a single character, in one of the colour spaces."""

    __slots__ = ("color_space", "u", "v", "w")

    def __init__(self, color_space: int = ColorSpace.UNDEFINED, value: int = 0) -> None:
        try:
            space = ColorSpace(color_space)
        except ValueError:
            space = ColorSpace.UNDEFINED
        self.color_space = space
        self.u = 0
        self.v = 0
        self.w = 0
        if space is ColorSpace.DEFAULT:
            self.u = value & 1
        elif space is ColorSpace.SYSTEM:
            self.u = value & 7
            self.v = (value >> 3) & 1
        elif space is ColorSpace.INDEX256:
            self.u = value & 255
        elif space is ColorSpace.RGB:
            self.u = (value >> 16) & 255
            self.v = (value >> 8) & 255
            self.w = value & 255

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CharacterColor):
            return NotImplemented
        return (self.color_space, self.u, self.v, self.w) == (
            other.color_space,
            other.u,
            other.v,
            other.w,
        )

    def __hash__(self) -> int:
        return hash((self.color_space, self.u, self.v, self.w))

    def __repr__(self) -> str:
        return (
            f"CharacterColor(space={self.color_space.name}, "
            f"u={self.u}, v={self.v}, w={self.w})"
        )

    def is_valid(self) -> bool:
        """Return True unless the colour space is undefined."""
        return self.color_space is not ColorSpace.UNDEFINED

    def toggle_intensive(self) -> None:
        """Switch between the normal and intensive variant of a default or system colour."""
        if self.color_space in (ColorSpace.SYSTEM, ColorSpace.DEFAULT):
            self.v = 0 if self.v else 1

    def _palette_index(self) -> Optional[int]:
        offset = BASE_COLORS if self.v else 0
        if self.color_space is ColorSpace.DEFAULT:
            return self.u + offset
        if self.color_space is ColorSpace.SYSTEM:
            return self.u + 2 + offset
        return None

    def color(self, palette: Palette) -> Optional[Color]:
        """Resolve this colour against ``palette``; None when undefined."""
        index = self._palette_index()
        if index is not None:
            return palette[index].color
        if self.color_space is ColorSpace.INDEX256:
            return color256(self.u, palette)
        if self.color_space is ColorSpace.RGB:
            return Color(self.u, self.v, self.w)
        return None


def color256(index: int, palette: Palette) -> Color:
    """Resolve an xterm 256-colour index against ``palette``."""
    u = index & 255
    if u < 8:
        return palette[u + 2].color
    u -= 8
    if u < 8:
        return palette[u + 2 + BASE_COLORS].color
    u -= 8
    if u < 216:
        return Color(
            255 * ((u // 36) % 6) // 5,
            255 * ((u // 6) % 6) // 5,
            255 * (u % 6) // 5,
        )
    u -= 216
    gray = u * 10 + 8
    return Color(gray, gray, gray)


@dataclass
class Character:
    """A terminal cell: a character code, colours and rendition flags."""

    character: int = ord(" ")
    foreground: CharacterColor = field(
        default_factory=lambda: CharacterColor(ColorSpace.DEFAULT, DEFAULT_FORE_COLOR)
    )
    background: CharacterColor = field(
        default_factory=lambda: CharacterColor(ColorSpace.DEFAULT, DEFAULT_BACK_COLOR)
    )
    rendition: int = DEFAULT_RENDITION

    def _background_entry(self, palette: Palette) -> Optional[ColorEntry]:
        index = self.background._palette_index()
        return None if index is None else palette[index]

    def is_transparent(self, palette: Palette) -> bool:
        """Return True if the background is drawn transparent with ``palette``."""
        entry = self._background_entry(palette)
        return bool(entry and entry.transparent)

    def is_bold(self, palette: Palette) -> bool:
        """Return True if ``palette`` forces this character to bold."""
        entry = self._background_entry(palette)
        return bool(entry and entry.bold)


def _table(*rows: tuple[int, int, int, int, int]) -> tuple[ColorEntry, ...]:
    return tuple(
        ColorEntry(Color(r, g, b), bool(transparent), bool(bold))
        for r, g, b, transparent, bold in rows
    )


BASE_COLOR_TABLE = _table(
    (0x00, 0x00, 0x00, 0, 0), (0xB2, 0xB2, 0xB2, 1, 0),
    (0x00, 0x00, 0x00, 0, 0), (0xB2, 0x18, 0x18, 0, 0),
    (0x18, 0xB2, 0x18, 0, 0), (0xB2, 0x68, 0x18, 0, 0),
    (0x18, 0x18, 0xB2, 0, 0), (0xB2, 0x18, 0xB2, 0, 0),
    (0x18, 0xB2, 0xB2, 0, 0), (0xB2, 0xB2, 0xB2, 0, 0),
    (0x00, 0x00, 0x00, 0, 1), (0xFF, 0xFF, 0xFF, 1, 0),
    (0x68, 0x68, 0x68, 0, 0), (0xFF, 0x54, 0x54, 0, 0),
    (0x54, 0xFF, 0x54, 0, 0), (0xFF, 0xFF, 0x54, 0, 0),
    (0x54, 0x54, 0xFF, 0, 0), (0xFF, 0x54, 0xFF, 0, 0),
    (0x54, 0xFF, 0xFF, 0, 0), (0xFF, 0xFF, 0xFF, 0, 0),
)

WHITE_ON_BLACK_TABLE = _table(
    (0xFF, 0xFF, 0xFF, 0, 0), (0x00, 0x00, 0x00, 1, 0),
    (0x00, 0x00, 0x00, 0, 0), (0xB2, 0x18, 0x18, 0, 0),
    (0x18, 0xB2, 0x18, 0, 0), (0xB2, 0x68, 0x18, 0, 0),
    (0x18, 0x18, 0xB2, 0, 0), (0xB2, 0x18, 0xB2, 0, 0),
    (0x18, 0xB2, 0xB2, 0, 0), (0xB2, 0xB2, 0xB2, 0, 0),
    (0x00, 0x00, 0x00, 0, 1), (0xFF, 0xFF, 0xFF, 1, 0),
    (0x68, 0x68, 0x68, 0, 0), (0xFF, 0x54, 0x54, 0, 0),
    (0x54, 0xFF, 0x54, 0, 0), (0xFF, 0xFF, 0x54, 0, 0),
    (0x54, 0x54, 0xFF, 0, 0), (0xFF, 0x54, 0xFF, 0, 0),
    (0x54, 0xFF, 0xFF, 0, 0), (0xFF, 0xFF, 0xFF, 0, 0),
)

GREEN_ON_BLACK_TABLE = _table(
    (24, 240, 24, 0, 0), (0, 0, 0, 1, 0),
    (0, 0, 0, 0, 0), (178, 24, 24, 0, 0),
    (24, 178, 24, 0, 0), (178, 104, 24, 0, 0),
    (24, 24, 178, 0, 0), (178, 24, 178, 0, 0),
    (24, 178, 178, 0, 0), (178, 178, 178, 0, 0),
    (24, 240, 24, 0, 1), (0, 0, 0, 1, 0),
    (104, 104, 104, 0, 0), (255, 84, 84, 0, 0),
    (84, 255, 84, 0, 0), (255, 255, 84, 0, 0),
    (84, 84, 255, 0, 0), (255, 84, 255, 0, 0),
    (84, 255, 255, 0, 0), (255, 255, 255, 0, 0),
)

BLACK_ON_LIGHT_YELLOW_TABLE = _table(
    (0, 0, 0, 0, 0), (255, 255, 221, 1, 0),
    (0, 0, 0, 0, 0), (178, 24, 24, 0, 0),
    (24, 178, 24, 0, 0), (178, 104, 24, 0, 0),
    (24, 24, 178, 0, 0), (178, 24, 178, 0, 0),
    (24, 178, 178, 0, 0), (178, 178, 178, 0, 0),
    (0, 0, 0, 0, 1), (255, 255, 221, 1, 0),
    (104, 104, 104, 0, 0), (255, 84, 84, 0, 0),
    (84, 255, 84, 0, 0), (255, 255, 84, 0, 0),
    (84, 84, 255, 0, 0), (255, 84, 255, 0, 0),
    (84, 255, 255, 0, 0), (255, 255, 255, 0, 0),
)


class ColorScheme(IntEnum):
    """The selectable terminal colour schemes."""

    WHITE_ON_BLACK = 1
    GREEN_ON_BLACK = 2
    BLACK_ON_LIGHT_YELLOW = 3


_SCHEME_TABLES = {
    ColorScheme.WHITE_ON_BLACK: WHITE_ON_BLACK_TABLE,
    ColorScheme.GREEN_ON_BLACK: GREEN_ON_BLACK_TABLE,
    ColorScheme.BLACK_ON_LIGHT_YELLOW: BLACK_ON_LIGHT_YELLOW_TABLE,
}


def color_table(scheme: int) -> tuple[ColorEntry, ...]:
    """Return the palette for ``scheme``; raise ValueError for an unknown scheme."""
    try:
        return _SCHEME_TABLES[ColorScheme(scheme)]
    except ValueError:
        raise ValueError(f"unknown colour scheme: {scheme!r}") from None
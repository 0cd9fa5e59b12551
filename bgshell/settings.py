"""Persistent user settings: terminal font size and HTTP proxy switch."""

from __future__ import annotations

import configparser
import os
from dataclasses import dataclass
from typing import List, Optional, Union

DEFAULT_FONT_SIZE = 22
_SECTION = "General"
_FONT_SIZE_KEY = "FontSize"
_PROXY_KEY = "HttpProxyOn"

PathLike = Union[str, "os.PathLike[str]"]


def _to_int(value: Optional[str]) -> int:
    if value is None:
        return 0
    try:
        return int(value.strip())
    except ValueError:
        return 0


def font_size_choices() -> List[int]:
    """Return the font pixel sizes offered to the user."""
    return list(range(18, 52, 4))


@dataclass
class Settings:
    """User settings stored in an INI file."""

    font_size: int = DEFAULT_FONT_SIZE
    http_proxy_on: bool = False

    @classmethod
    def load(cls, path: PathLike) -> "Settings":
        """Read settings from ``path``; missing or zero values fall back to defaults."""
        parser = configparser.ConfigParser(interpolation=None)
        parser.optionxform = str  # type: ignore[assignment]
        parser.read(path, encoding="utf-8")
        section = parser[_SECTION] if parser.has_section(_SECTION) else {}
        font_size = _to_int(section.get(_FONT_SIZE_KEY))
        proxy_on = _to_int(section.get(_PROXY_KEY))
        return cls(
            font_size=font_size or DEFAULT_FONT_SIZE,
            http_proxy_on=bool(proxy_on),
        )

    def save(self, path: PathLike) -> None:
        """Write the settings to ``path``."""
        parser = configparser.ConfigParser(interpolation=None)
        parser.optionxform = str  # type: ignore[assignment]
        parser[_SECTION] = {
            _FONT_SIZE_KEY: str(self.font_size),
            _PROXY_KEY: "1" if self.http_proxy_on else "0",
        }
        with open(path, "w", encoding="utf-8") as handle:
            parser.write(handle)
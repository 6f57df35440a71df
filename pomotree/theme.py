"""Color themes.

A theme maps the nine display roles to colors understood by Rich
(named ANSI colors or ``#rrggbb``). Only the theme name is persisted.
"""

import logging
from enum import Enum

from pydantic import BaseModel

logger = logging.getLogger(__name__)


class ThemeName(str, Enum):
    DEFAULT = "Default"
    DARK = "Dark"
    LIGHT = "Light"
    MONOCHROME = "Monochrome"
    OCEAN = "Ocean"
    BLUE_RIDGE = "BlueRidge"
    DOTRB = "Dotrb"
    EVERFOREST = "Everforest"
    MARS = "Mars"
    TOKYO_NIGHT = "TokyoNight"
    VESPER = "Vesper"


class Theme(BaseModel):
    """Colors for each display role."""

    clock: str
    work: str
    short_break: str
    long_break: str
    selected: str
    normal: str
    completed: str
    prompt: str
    secondary: str

    model_config = {"frozen": True}


THEMES: dict[ThemeName, Theme] = {
    ThemeName.DEFAULT: Theme(
        clock="cyan", work="green", short_break="blue", long_break="magenta",
        selected="yellow", normal="white", completed="bright_black",
        prompt="cyan", secondary="bright_yellow",
    ),
    ThemeName.DARK: Theme(
        clock="bright_cyan", work="bright_green", short_break="bright_blue",
        long_break="bright_magenta", selected="yellow", normal="white",
        completed="bright_black", prompt="bright_cyan", secondary="yellow",
    ),
    ThemeName.LIGHT: Theme(
        clock="blue", work="green", short_break="cyan", long_break="magenta",
        selected="red", normal="black", completed="bright_black",
        prompt="blue", secondary="bright_black",
    ),
    ThemeName.MONOCHROME: Theme(
        clock="white", work="white", short_break="bright_black", long_break="white",
        selected="white", normal="white", completed="bright_black",
        prompt="white", secondary="bright_black",
    ),
    ThemeName.OCEAN: Theme(
        clock="cyan", work="green", short_break="blue", long_break="bright_blue",
        selected="bright_cyan", normal="cyan", completed="bright_black",
        prompt="bright_blue", secondary="bright_cyan",
    ),
    ThemeName.BLUE_RIDGE: Theme(
        clock="#7ec8c8", work="#7ea67c", short_break="#6b8cae", long_break="#9b8aa0",
        selected="#d4af37", normal="#c4b5a0", completed="#4a5568",
        prompt="#7ec8c8", secondary="#f4e4bc",
    ),
    ThemeName.DOTRB: Theme(
        clock="#b58bad", work="#8f9668", short_break="#8b7b9b", long_break="#cc6b8d",
        selected="#d4a373", normal="#ddcccc", completed="#5a4a4a",
        prompt="#b58bad", secondary="#f4c393",
    ),
    ThemeName.EVERFOREST: Theme(
        clock="#83c092", work="#a7c080", short_break="#7fbbb3", long_break="#d699b6",
        selected="#dbbc7f", normal="#d3c6aa", completed="#4b565c",
        prompt="#83c092", secondary="#dbbc7f",
    ),
    ThemeName.MARS: Theme(
        clock="#b5a5a5", work="#8b9064", short_break="#8b7b7b", long_break="#c99590",
        selected="#d4a373", normal="#ddc5b5", completed="#4d2e2e",
        prompt="#b5a5a5", secondary="#f4c393",
    ),
    ThemeName.TOKYO_NIGHT: Theme(
        clock="#7dcfff", work="#9ece6a", short_break="#7aa2f7", long_break="#bb9af7",
        selected="#e0af68", normal="#a9b1d6", completed="#565f89",
        prompt="#7dcfff", secondary="#e0af68",
    ),
    ThemeName.VESPER: Theme(
        clock="#8cffff", work="#a0f9a0", short_break="#8cafff", long_break="#ff88ff",
        selected="#ffff8a", normal="#c5c5c5", completed="#565656",
        prompt="#8cffff", secondary="#ffff8a",
    ),
}

THEME_ORDER: tuple[ThemeName, ...] = tuple(ThemeName)


def next_theme(name: ThemeName) -> ThemeName:
    """Return the theme after ``name``, wrapping at the end."""
    position = THEME_ORDER.index(name)
    return THEME_ORDER[(position + 1) % len(THEME_ORDER)]


def get_theme(name: ThemeName) -> Theme:
    return THEMES[name]


def parse_theme_name(raw: str | None) -> ThemeName:
    """Parse a persisted theme identifier, falling back to Default."""
    if raw is None:
        return ThemeName.DEFAULT
    try:
        return ThemeName(raw)
    except ValueError:
        logger.warning(f"Invalid theme '{raw}', defaulting to {ThemeName.DEFAULT.value}")
        return ThemeName.DEFAULT

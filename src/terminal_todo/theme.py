"""Color helpers for the two curses attribute pairs.

Decisions:
- Pair 1 is the regular pair (white on black), pair 2 the highlight
  (black on white). curses reserves pair 0, so it is never redefined.
- Colors are curses color names, overridable via environment or .env.
- Honors NO_COLOR: no pairs are initialised and the highlight falls back
  to reverse video.
"""
from __future__ import annotations
import curses
import logging
import os
from dataclasses import dataclass
from typing import Dict, Mapping, Optional

from .config import setting

log = logging.getLogger(__name__)

REGULAR_PAIR = 1
HIGHLIGHT_PAIR = 2

COLOR_NAMES: Dict[str, int] = {
    'black': curses.COLOR_BLACK,
    'red': curses.COLOR_RED,
    'green': curses.COLOR_GREEN,
    'yellow': curses.COLOR_YELLOW,
    'blue': curses.COLOR_BLUE,
    'magenta': curses.COLOR_MAGENTA,
    'cyan': curses.COLOR_CYAN,
    'white': curses.COLOR_WHITE,
}

# Default palette
REGULAR_FG_DEFAULT = 'white'
REGULAR_BG_DEFAULT = 'black'
HIGHLIGHT_FG_DEFAULT = 'black'
HIGHLIGHT_BG_DEFAULT = 'white'


@dataclass(frozen=True)
class Palette:
    """Resolved curses color numbers for both pairs."""
    regular_fg: int = curses.COLOR_WHITE
    regular_bg: int = curses.COLOR_BLACK
    highlight_fg: int = curses.COLOR_BLACK
    highlight_bg: int = curses.COLOR_WHITE
    enabled: bool = True

    def pairs(self) -> Dict[int, tuple[int, int]]:
        return {
            REGULAR_PAIR: (self.regular_fg, self.regular_bg),
            HIGHLIGHT_PAIR: (self.highlight_fg, self.highlight_bg),
        }


def color_number(name: Optional[str], default: str) -> int:
    """Map a color name to its curses number; unknown names use the default."""
    key = (name or default).strip().lower()
    if key not in COLOR_NAMES:
        log.warning("unknown color %r, using %s", name, default)
        key = default
    return COLOR_NAMES[key]


def resolve_palette(environ: Optional[Mapping[str, str]] = None,
                    overrides: Optional[Mapping[str, str]] = None) -> Palette:
    env = os.environ if environ is None else environ

    def pick(name: str, default: str) -> int:
        return color_number(setting(name, default, env, overrides), default)

    return Palette(
        regular_fg=pick('TODO_REGULAR_FG', REGULAR_FG_DEFAULT),
        regular_bg=pick('TODO_REGULAR_BG', REGULAR_BG_DEFAULT),
        highlight_fg=pick('TODO_HIGHLIGHT_FG', HIGHLIGHT_FG_DEFAULT),
        highlight_bg=pick('TODO_HIGHLIGHT_BG', HIGHLIGHT_BG_DEFAULT),
        enabled=env.get('NO_COLOR') is None,
    )


__all__ = [
    'REGULAR_PAIR', 'HIGHLIGHT_PAIR', 'COLOR_NAMES', 'Palette', 'color_number', 'resolve_palette',
]

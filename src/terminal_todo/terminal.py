"""curses-backed drawing surface.

The session is a context manager: the terminal is put into cbreak/noecho
mode on enter and always restored on exit, exceptions included.
"""
from __future__ import annotations
import curses
import logging
from typing import Any, Optional

from .theme import HIGHLIGHT_PAIR, Palette

log = logging.getLogger(__name__)


class Terminal:
    def __init__(self, palette: Optional[Palette] = None):
        self.palette: Palette = palette or Palette()
        self.screen: Any = None
        self.colors: bool = False

    def __enter__(self) -> "Terminal":
        self.screen = curses.initscr()
        try:
            curses.noecho()
            curses.cbreak()
            self.screen.keypad(True)
            try:
                curses.curs_set(0)
            except curses.error:
                pass  # terminal cannot hide the cursor
            self._init_colors()
        except BaseException:
            self._restore()
            raise
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._restore()

    def _init_colors(self) -> None:
        if not (self.palette.enabled and curses.has_colors()):
            log.debug("color disabled")
            return
        curses.start_color()
        for pair, (fg, bg) in self.palette.pairs().items():
            curses.init_pair(pair, fg, bg)
        self.colors = True

    def _restore(self) -> None:
        if self.screen is None:
            return
        self.screen.keypad(False)
        curses.nocbreak()
        curses.echo()
        curses.endwin()
        self.screen = None

    # -------------------- drawing surface --------------------
    def attr(self, pair: int) -> int:
        if self.colors:
            return curses.color_pair(pair)
        return curses.A_REVERSE if pair == HIGHLIGHT_PAIR else curses.A_NORMAL

    def erase(self) -> None:
        self.screen.erase()

    def draw(self, row: int, col: int, text: str, pair: int) -> None:
        """Write a text run at (row, col); text past the screen edge is clipped."""
        height, width = self.screen.getmaxyx()
        if row >= height or col >= width:
            return
        try:
            self.screen.addnstr(row, col, text, width - col, self.attr(pair))
        except curses.error:
            pass  # writing the bottom-right cell moves the cursor off-screen

    def refresh(self) -> None:
        self.screen.refresh()

    def get_key(self) -> int:
        """Block until one key is pressed and return its code."""
        return self.screen.getch()

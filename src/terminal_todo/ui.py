"""Immediate-mode UI layer.

No widget tree is kept: every frame calls begin(), draws labels and list
elements top to bottom, then end(). The only state is the drawing cursor
and the open list (if any), both rebuilt each frame.
"""
from __future__ import annotations
from typing import Optional, Protocol

from .theme import HIGHLIGHT_PAIR, REGULAR_PAIR


class Surface(Protocol):
    def draw(self, row: int, col: int, text: str, pair: int) -> None: ...


class Ui:
    def __init__(self, surface: Surface):
        self.surface = surface
        self.list_current: Optional[int] = None
        self.row: int = 0
        self.col: int = 0

    def begin(self, row: int, col: int) -> None:
        self.row = row
        self.col = col
        self.list_current = None

    def label(self, text: str, pair: int) -> None:
        """Draw text at the cursor and move one row down. No wrapping."""
        self.surface.draw(self.row, self.col, text, pair)
        self.row += 1

    def begin_list(self, selected: int) -> None:
        """Open a list whose element `selected` gets the highlight pair.

        Lists cannot nest; opening one while another is open is a caller bug.
        """
        if self.list_current is not None:
            raise AssertionError("nested lists are not allowed")
        self.list_current = selected

    def list_element(self, text: str, index: int) -> None:
        if self.list_current is None:
            raise AssertionError("list elements are not allowed outside of a list")
        self.label(text, HIGHLIGHT_PAIR if index == self.list_current else REGULAR_PAIR)

    def end_list(self) -> None:
        self.list_current = None

    def end(self) -> None:
        pass

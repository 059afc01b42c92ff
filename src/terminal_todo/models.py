"""Data models for the terminal todo tracker.

Exposes the Tab enum (which list is shown) and the TaskList dataclass
(ordered items plus a selection index). Items are plain single-line
strings; their identity is their position in the owning list.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class Tab(Enum):
    TODO = "todo"
    DONE = "done"

    def toggle(self) -> "Tab":
        return Tab.DONE if self is Tab.TODO else Tab.TODO

    @property
    def marker(self) -> str:
        return "[ ]" if self is Tab.TODO else "[x]"


@dataclass
class TaskList:
    """An ordered list of items with one selected position.

    Fields:
        items: Display order; new items are appended at the end.
        current: Selected index. Valid whenever items is non-empty; may be
            stale while the list is empty and is clamped before use.
    """
    items: List[str] = field(default_factory=list)
    current: int = 0

    def __len__(self) -> int:
        return len(self.items)

    def clamp(self) -> None:
        if self.items:
            self.current = min(max(self.current, 0), len(self.items) - 1)

    def selected(self) -> Optional[str]:
        if not self.items:
            return None
        self.clamp()
        return self.items[self.current]

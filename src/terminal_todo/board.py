"""Board logic: holds both lists and the active tab, applies navigation and
transfer, and renders the active tab through the immediate-mode UI.

The list operations are plain functions over TaskList so they can be used
(and tested) without a Board.
"""
from __future__ import annotations
import logging
from typing import Iterable, List, Optional, Tuple

from .models import Tab, TaskList
from .theme import REGULAR_PAIR
from .ui import Ui

log = logging.getLogger(__name__)

SEPARATOR = "-" * 24
EMPTY_TODO_MESSAGE = "Everything done, enjoy the day"


# -------------------- list operations --------------------
def list_up(task_list: TaskList) -> None:
    if not task_list.items:
        return
    task_list.clamp()
    if task_list.current > 0:
        task_list.current -= 1


def list_down(task_list: TaskList) -> None:
    if not task_list.items:
        return
    task_list.clamp()
    if task_list.current + 1 < len(task_list.items):
        task_list.current += 1


def list_transfer(src: TaskList, dst: TaskList) -> Optional[str]:
    """Move src's selected item to the end of dst.

    Returns the moved item, or None when src has nothing selected. If the
    removal leaves src's index past its end, it is pulled back to the last
    item; an emptied src keeps its index untouched.
    """
    if not 0 <= src.current < len(src.items):
        return None
    item = src.items.pop(src.current)
    dst.items.append(item)
    dst.clamp()
    if src.items and src.current >= len(src.items):
        src.current = len(src.items) - 1
    return item


class Board:
    def __init__(self, todos: Optional[Iterable[str]] = None, dones: Optional[Iterable[str]] = None):
        self.todo: TaskList = TaskList(list(todos or []))
        self.done: TaskList = TaskList(list(dones or []))
        self.tab: Tab = Tab.TODO

    # -------------------- queries --------------------
    def active(self) -> TaskList:
        return self.todo if self.tab is Tab.TODO else self.done

    def other(self) -> TaskList:
        return self.done if self.tab is Tab.TODO else self.todo

    def get_lists(self) -> Tuple[List[str], List[str]]:
        return list(self.todo.items), list(self.done.items)

    # -------------------- key effects --------------------
    def up(self) -> None:
        list_up(self.active())

    def down(self) -> None:
        list_down(self.active())

    def transfer(self) -> Optional[str]:
        item = list_transfer(self.active(), self.other())
        if item is not None:
            log.info('moved "%s" from %s to %s', item, self.tab.value, self.tab.toggle().value)
        return item

    def copy_done_to_todo(self) -> Optional[str]:
        """Append a copy of the selected done item to todo; done is left as is."""
        item = self.done.selected()
        if item is None:
            return None
        self.todo.items.append(item)
        self.todo.clamp()
        log.info('copied "%s" back to todo', item)
        return item

    def toggle_tab(self) -> Tab:
        self.tab = self.tab.toggle()
        log.debug("tab -> %s", self.tab.value)
        return self.tab

    # -------------------- display --------------------
    def header(self, date_text: str) -> str:
        if self.tab is Tab.TODO:
            return f"[TODO] DONE  {date_text}:"
        return f" TODO [DONE] {date_text}:"

    def render(self, ui: Ui, date_text: str) -> None:
        """Draw one frame of the active tab starting at the top-left corner."""
        task_list = self.active()
        task_list.clamp()
        ui.begin(0, 0)
        ui.label(self.header(date_text), REGULAR_PAIR)
        ui.label(SEPARATOR, REGULAR_PAIR)
        ui.begin_list(task_list.current)
        for index, item in enumerate(task_list.items):
            ui.list_element(f"{self.tab.marker} {item}", index)
        ui.end_list()
        if self.tab is Tab.TODO and not task_list.items:
            ui.label(EMPTY_TODO_MESSAGE, REGULAR_PAIR)
        ui.end()

    def __str__(self) -> str:
        return f'Todo: {len(self.todo)} tasks, Done: {len(self.done)} tasks'

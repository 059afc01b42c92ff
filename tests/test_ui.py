"""Immediate-mode UI layer"""
import pytest

from terminal_todo.theme import HIGHLIGHT_PAIR, REGULAR_PAIR
from terminal_todo.ui import Ui


def test_label_advances_one_row(fake_terminal):
    surface = fake_terminal()
    ui = Ui(surface)
    ui.begin(2, 4)
    ui.label("first", REGULAR_PAIR)
    ui.label("second", HIGHLIGHT_PAIR)
    ui.end()
    assert surface.frames[-1] == [(2, 4, "first", REGULAR_PAIR), (3, 4, "second", HIGHLIGHT_PAIR)]


def test_begin_resets_cursor(fake_terminal):
    surface = fake_terminal()
    ui = Ui(surface)
    ui.begin(0, 0)
    ui.label("a", REGULAR_PAIR)
    ui.label("b", REGULAR_PAIR)
    ui.begin(0, 0)
    assert (ui.row, ui.col) == (0, 0)


def test_list_element_highlights_selected(fake_terminal):
    surface = fake_terminal()
    ui = Ui(surface)
    ui.begin(0, 0)
    ui.begin_list(1)
    for index, text in enumerate(["a", "b", "c"]):
        ui.list_element(text, index)
    ui.end_list()
    pairs = [pair for _, _, _, pair in surface.frames[-1]]
    assert pairs == [REGULAR_PAIR, HIGHLIGHT_PAIR, REGULAR_PAIR]


def test_nested_list_is_rejected(fake_terminal):
    ui = Ui(fake_terminal())
    ui.begin(0, 0)
    ui.begin_list(0)
    with pytest.raises(AssertionError, match="nested"):
        ui.begin_list(0)


def test_list_element_outside_list_is_rejected(fake_terminal):
    ui = Ui(fake_terminal())
    ui.begin(0, 0)
    with pytest.raises(AssertionError):
        ui.list_element("orphan", 0)


def test_list_can_reopen_after_end(fake_terminal):
    ui = Ui(fake_terminal())
    ui.begin(0, 0)
    ui.begin_list(0)
    ui.end_list()
    ui.begin_list(0)
    ui.list_element("ok", 0)
    assert ui.row == 1

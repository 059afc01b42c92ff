"""Palette and settings resolution"""
import curses

from terminal_todo.config import read_env_file, setting
from terminal_todo.theme import HIGHLIGHT_PAIR, REGULAR_PAIR, resolve_palette


def test_default_palette():
    palette = resolve_palette(environ={}, overrides={})
    assert palette.enabled
    assert palette.pairs() == {
        REGULAR_PAIR: (curses.COLOR_WHITE, curses.COLOR_BLACK),
        HIGHLIGHT_PAIR: (curses.COLOR_BLACK, curses.COLOR_WHITE),
    }


def test_environment_beats_env_file():
    palette = resolve_palette(
        environ={'TODO_HIGHLIGHT_BG': 'Cyan'},
        overrides={'TODO_HIGHLIGHT_BG': 'red', 'TODO_REGULAR_FG': 'green'},
    )
    assert palette.highlight_bg == curses.COLOR_CYAN
    assert palette.regular_fg == curses.COLOR_GREEN


def test_unknown_color_falls_back_to_default():
    palette = resolve_palette(environ={'TODO_REGULAR_FG': 'mauve'}, overrides={})
    assert palette.regular_fg == curses.COLOR_WHITE


def test_no_color_disables_pairs():
    assert not resolve_palette(environ={'NO_COLOR': '1'}, overrides={}).enabled


def test_read_env_file_keeps_todo_keys(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "# palette\nTODO_REGULAR_FG=\"yellow\"\nOTHER=1\nnot a pair\n\nTODO_LOG_LEVEL = debug\n",
        encoding="utf-8",
    )
    assert read_env_file(env_file) == {'TODO_REGULAR_FG': 'yellow', 'TODO_LOG_LEVEL': 'debug'}
    assert read_env_file(tmp_path / "absent") == {}


def test_setting_priority():
    assert setting('TODO_X', 'd', environ={'TODO_X': 'env'}, overrides={'TODO_X': 'file'}) == 'env'
    assert setting('TODO_X', 'd', environ={}, overrides={'TODO_X': 'file'}) == 'file'
    assert setting('TODO_X', 'd', environ={}, overrides={}) == 'd'

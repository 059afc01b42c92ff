"""Shared fixtures: an in-memory drawing surface and a scripted terminal."""
from typing import Iterable, List, Tuple

import pytest

Draw = Tuple[int, int, str, int]


class FakeTerminal:
    """Stands in for terminal.Terminal: records frames, replays keys."""

    def __init__(self, keys: Iterable[int] = ()):
        self.keys: List[int] = list(keys)
        self.frames: List[List[Draw]] = []
        self.entered = False
        self.released = False

    def __enter__(self):
        self.entered = True
        return self

    def __exit__(self, exc_type, exc, tb):
        self.released = True

    def erase(self):
        self.frames.append([])

    def draw(self, row, col, text, pair):
        if not self.frames:
            self.frames.append([])
        self.frames[-1].append((row, col, text, pair))

    def refresh(self):
        pass

    def get_key(self):
        if not self.keys:
            raise AssertionError("key script exhausted")
        key = self.keys.pop(0)
        if isinstance(key, type) and issubclass(key, BaseException):
            raise key()
        return key

    def texts(self, frame: int = -1) -> List[str]:
        return [text for _, _, text, _ in self.frames[frame]]


@pytest.fixture
def fake_terminal():
    def factory(keys=()):
        return FakeTerminal(keys)
    return factory


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ('TODO_DATE_FORMAT', 'TODO_LOG_FILE', 'TODO_LOG_LEVEL', 'NO_COLOR',
                 'TODO_REGULAR_FG', 'TODO_REGULAR_BG', 'TODO_HIGHLIGHT_FG', 'TODO_HIGHLIGHT_BG'):
        monkeypatch.delenv(name, raising=False)

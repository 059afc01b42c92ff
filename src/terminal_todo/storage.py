"""Persistence helpers (load/save/export) for the todo tracker.

File format, one item per line:

    TODO: <item text>
    DONE: <item text>

On save all todo lines come first, then all done lines.
"""
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

log = logging.getLogger(__name__)

TODO_PREFIX = "TODO: "
DONE_PREFIX = "DONE: "
EXPORT_FILE = Path("TODO")

PathLike = Union[str, Path]
Lists = Tuple[List[str], List[str]]


class FormatError(ValueError):
    """A persisted line is not valid UTF-8 or has neither known prefix."""

    def __init__(self, path: PathLike, lineno: int, line: str,
                 reason: str = "item line format incorrectly"):
        self.path = str(path)
        self.lineno = lineno
        self.line = line
        super().__init__(f"{self.path}:{lineno}: ERROR: {reason}")


class Storage:
    @staticmethod
    def parse_line(line: str) -> Optional[Tuple[str, str]]:
        """Split a line into ("todo" | "done", text); None if unrecognised."""
        if line.startswith(TODO_PREFIX):
            return "todo", line[len(TODO_PREFIX):]
        if line.startswith(DONE_PREFIX):
            return "done", line[len(DONE_PREFIX):]
        return None

    @staticmethod
    def format_lines(todos: Iterable[str], dones: Iterable[str]) -> List[str]:
        lines = [f"{TODO_PREFIX}{todo}" for todo in todos]
        lines.extend(f"{DONE_PREFIX}{done}" for done in dones)
        return lines

    @staticmethod
    def load_state(path: PathLike) -> Lists:
        """Read both lists from disk.

        Lines split on LF only; one trailing CR is dropped. Raises FormatError
        on the first bad line (unknown prefix or invalid UTF-8); nothing is
        returned in that case, so callers never see a partial load.
        """
        todos: List[str] = []
        dones: List[str] = []
        with open(path, 'rb') as f:
            for index, raw in enumerate(f, start=1):
                raw = raw[:-1] if raw.endswith(b"\n") else raw
                raw = raw[:-1] if raw.endswith(b"\r") else raw
                try:
                    line = raw.decode('utf-8')
                except UnicodeDecodeError:
                    raise FormatError(path, index, raw.decode('utf-8', 'replace'),
                                      "item line is not valid UTF-8") from None
                parsed = Storage.parse_line(line)
                if parsed is None:
                    raise FormatError(path, index, line)
                status, text = parsed
                (todos if status == "todo" else dones).append(text)
        log.info("loaded %d todo / %d done from %s", len(todos), len(dones), path)
        return todos, dones

    @staticmethod
    def save_state(todos: Iterable[str], dones: Iterable[str], path: PathLike) -> None:
        lines = Storage.format_lines(todos, dones)
        with open(path, 'w', encoding='utf-8', newline='\n') as f:
            for line in lines:
                f.write(line + "\n")
        log.info("saved %d lines to %s", len(lines), path)

    @staticmethod
    def export_state(todos: Iterable[str], dones: Iterable[str], path: PathLike = EXPORT_FILE) -> None:
        """Write the current state to the fixed export file (./TODO by default)."""
        Storage.save_state(todos, dones, path)

"""Key-driven loop for the todo tracker.

Each cycle erases the screen, renders the active tab, blocks for one key
and applies it to the board. After 'q' one more key is read (a "press any
key" pause), then the lists are saved and the terminal is released.
"""
import curses
import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional, Union

from .board import Board
from .config import setting
from .storage import EXPORT_FILE, Storage
from .ui import Ui

log = logging.getLogger(__name__)

DATE_FORMAT_DEFAULT = "%d/%m/%Y"

KEY_QUIT = ord('q')
KEY_UP = ord('k')
KEY_DOWN = ord('j')
KEY_COPY_DONE = ord('s')
KEY_EXPORT = ord('e')
KEY_TAB = ord('\t')
ENTER_KEYS = (ord('\n'), ord('\r'), curses.KEY_ENTER)


class CLI:
    def __init__(self, board: Board, terminal, file_path: Union[str, Path],
                 export_path: Union[str, Path] = EXPORT_FILE,
                 clock: Callable[[], datetime] = datetime.now):
        self.board: Board = board
        self.terminal = terminal
        self.file_path = file_path
        self.export_path = export_path
        self.clock = clock
        self.date_format: str = setting('TODO_DATE_FORMAT', DATE_FORMAT_DEFAULT) or DATE_FORMAT_DEFAULT
        self.quit: bool = False

    def run(self) -> None:
        """Main loop; the board is fully redrawn every cycle.

        The terminal is held in a with-block, so it is restored on every
        exit path, including errors raised while rendering or saving.
        """
        exit_message: Optional[str] = None
        with self.terminal as surface:
            ui = Ui(surface)
            try:
                while not self.quit:
                    surface.erase()
                    self.board.render(ui, self.clock().strftime(self.date_format))
                    surface.refresh()
                    self.handle_key(surface.get_key())
                surface.get_key()
                self._save()
                exit_message = "Goodbye."
            except KeyboardInterrupt:
                self._save()
                exit_message = "Interrupted. Goodbye."
        if exit_message:
            print(exit_message)

    # -------------------- key dispatch --------------------
    def handle_key(self, key: int) -> None:
        if key == KEY_QUIT:
            self.quit = True
        elif key == KEY_UP:
            self.board.up()
        elif key == KEY_DOWN:
            self.board.down()
        elif key in ENTER_KEYS:
            self.board.transfer()
        elif key == KEY_COPY_DONE:
            self.board.copy_done_to_todo()
        elif key == KEY_EXPORT:
            self._export()
        elif key == KEY_TAB:
            self.board.toggle_tab()
        # any other key is ignored

    def _save(self) -> None:
        todos, dones = self.board.get_lists()
        Storage.save_state(todos, dones, self.file_path)

    def _export(self) -> None:
        todos, dones = self.board.get_lists()
        Storage.export_state(todos, dones, self.export_path)
        log.info("exported state to %s", self.export_path)

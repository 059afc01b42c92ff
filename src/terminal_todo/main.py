"""Main entry point for the terminal todo tracker.

Usage: todo <file-path> [ignored...]. The file is loaded before the terminal is taken
over, so a usage or format error never shows any UI.
"""
import logging
import sys
from typing import Tuple

import click

from .board import Board
from .cli import CLI
from .logger import setup_logger
from .storage import FormatError, Storage
from .terminal import Terminal
from .theme import resolve_palette

log = logging.getLogger(__name__)


@click.command()
@click.argument('paths', nargs=-1, metavar='FILE_PATH')
def main(paths: Tuple[str, ...]) -> None:
    """Track todo and done items stored in FILE_PATH.

    Only the first argument is used; any further ones are ignored.
    """
    setup_logger()
    file_path = paths[0] if paths else None
    if not file_path:
        click.echo("Usage: todo <file-path>", err=True)
        click.echo("ERROR: no filepath provided", err=True)
        sys.exit(1)
    try:
        todos, dones = Storage.load_state(file_path)
    except FormatError as exc:
        log.error("%s", exc)
        click.echo(str(exc), err=True)
        sys.exit(1)
    except OSError as exc:
        log.error("could not read %s: %s", file_path, exc)
        click.echo(f"{file_path}: ERROR: could not read file: {exc.strerror or exc}", err=True)
        sys.exit(1)
    board = Board(todos, dones)
    log.info("starting: %s", board)
    CLI(board, Terminal(resolve_palette()), file_path).run()


if __name__ == "__main__":
    main()

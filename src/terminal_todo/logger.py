"""Logging setup.

The curses screen owns stdout/stderr while the board is shown, so records
only ever go to a file. With no file configured a NullHandler is used.
"""
from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional

from .config import setting

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(log_level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """Configure root logging from arguments or TODO_LOG_LEVEL / TODO_LOG_FILE.

    Args:
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL.
        log_file: Path of the log file; None disables file logging.
    """
    level_name = (log_level or setting('TODO_LOG_LEVEL', 'INFO') or 'INFO').upper()
    path = log_file or setting('TODO_LOG_FILE')

    if path:
        log_path = Path(path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_path, encoding='utf-8')
    else:
        handler = logging.NullHandler()

    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
        handlers=[handler],
    )

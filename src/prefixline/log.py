from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from prefixline import NAME


def setup_logging(debug: bool, path: Path | None = None) -> logging.Handler | None:
    """Configure the package logger.

    The terminal is in raw mode while the prompt runs, so records never go to the
    screen. When debugging, they are appended to a log file instead.

    Args:
        debug: Enable the debug log.
        path: Path of the log file, or `None` for the default in the state directory.

    Returns:
        The handler that was installed, or `None` if logging is disabled.

    Raises:
        OSError: If the log file could not be created.
    """
    logger = logging.getLogger(NAME)
    if not debug:
        logger.addHandler(logging.NullHandler())
        return None

    if path is None:
        from prefixline.paths import get_log_path

        path = get_log_path()

    log_file = path.open("a", encoding="utf-8")
    console = Console(file=log_file, force_terminal=False, width=120)
    handler = RichHandler(console=console, show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    return handler


def close_logging(handler: logging.Handler) -> None:
    """Remove a handler installed by `setup_logging`, and close its log file.

    Args:
        handler: Handler returned from `setup_logging`.
    """
    logging.getLogger(NAME).removeHandler(handler)
    handler.close()
    if isinstance(handler, RichHandler):
        handler.console.file.close()

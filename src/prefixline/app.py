from __future__ import annotations

from logging import getLogger

from prefixline import constants
from prefixline.editor import LineEditor
from prefixline.terminal import Terminal
from prefixline.trie import PrefixTree

log = getLogger(__name__)


def is_exit_command(line: str) -> bool:
    """Check if a committed line should end the session.

    Args:
        line: Line as entered.

    Returns:
        `True` if the line is an exit command (case insensitive).
    """
    return line.strip().lower() in constants.EXIT_COMMANDS


def run(terminal: Terminal, history: PrefixTree | None = None) -> PrefixTree:
    """Run the prompt until an exit command is entered.

    Raw mode is enabled for the duration, and restored on any exit.

    Args:
        terminal: Terminal to run on.
        history: Initial history, or `None` to start empty.

    Raises:
        InputCancelled: If the user pressed the interrupt key.
        TerminalError: If the terminal failed.

    Returns:
        The history of the session.
    """
    editor = LineEditor(terminal, history)
    with terminal.raw_mode():
        while True:
            line = editor.read_line()
            if is_exit_command(line):
                log.debug("exit command %r", line)
                return editor.history
            if entry := line.strip():
                editor.history.insert(entry)
                log.debug("added %r to history", entry)

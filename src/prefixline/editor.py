from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from rich.cells import cell_len

from prefixline import constants
from prefixline.keys import Key, KeyEvent
from prefixline.trie import PrefixTree

if TYPE_CHECKING:
    from prefixline.terminal import Terminal

log = getLogger(__name__)


class InputCancelled(Exception):
    """The user pressed the interrupt key."""


class LineEditor:
    """Edits a single line of input, with completion from history.

    The cursor is always at the end of the buffer; there is no movement within the line.

    Args:
        terminal: Terminal to read keys from and echo to.
        history: History of committed lines, or `None` for an empty history.
        prompt: Text displayed before the input.
    """

    def __init__(
        self,
        terminal: Terminal,
        history: PrefixTree | None = None,
        prompt: str = constants.PROMPT,
    ) -> None:
        self.terminal = terminal
        self.history = PrefixTree() if history is None else history
        self.prompt = prompt
        self._buffer: list[str] = []

    @property
    def buffer(self) -> str:
        """The text entered so far."""
        return "".join(self._buffer)

    def render_prompt(self) -> None:
        self.terminal.write_styled(self.prompt, constants.PROMPT_STYLE)
        self.terminal.flush()

    def insert(self, character: str) -> None:
        """Append a character and echo it.

        Args:
            character: Character to insert.
        """
        self._buffer.append(character)
        self.terminal.write(character)
        self.terminal.flush()

    def backspace(self) -> None:
        """Delete the last character, if there is one."""
        if not self._buffer:
            return
        character = self._buffer.pop()
        terminal = self.terminal
        terminal.move_left(cell_len(character))
        terminal.clear_to_end()
        terminal.flush()

    def delete_word(self) -> None:
        """Delete the last word, and the space before it.

        If the buffer holds a single word, the whole line is cleared.
        """
        terminal = self.terminal
        head, space, last_word = self.buffer.rpartition(" ")
        if space:
            self._buffer = list(head)
            terminal.move_left(cell_len(last_word) + 1)
            terminal.clear_to_end()
            terminal.flush()
        else:
            self._buffer.clear()
            terminal.move_to_column(0)
            terminal.clear_line()
            self.render_prompt()

    def complete(self) -> list[str]:
        """List the history entries starting with the buffer.

        The buffer is left unchanged, and redrawn after the list.

        Returns:
            The candidates that were listed.
        """
        buffer = self.buffer
        candidates = sorted(self.history.words_with_prefix(buffer))
        log.debug("%d completion(s) for %r", len(candidates), buffer)
        terminal = self.terminal
        terminal.newline()
        for candidate in candidates:
            terminal.write_styled(f"  {candidate}", constants.COMPLETION_STYLE)
            terminal.newline()
        self.render_prompt()
        terminal.write(buffer)
        terminal.flush()
        return candidates

    def handle(self, event: KeyEvent) -> bool:
        """Apply a single key event.

        Args:
            event: Key event.

        Raises:
            InputCancelled: On the interrupt key.

        Returns:
            `True` if the line was committed, otherwise `False`.
        """
        match event.key:
            case Key.CHARACTER:
                self.insert(event.character)
            case Key.BACKSPACE:
                self.backspace()
            case Key.WORD_BACKSPACE:
                self.delete_word()
            case Key.TAB:
                self.complete()
            case Key.ENTER:
                return True
            case Key.INTERRUPT:
                raise InputCancelled()
        return False

    def read_line(self) -> str:
        """Read a line of input from the terminal.

        Raises:
            InputCancelled: If the user pressed the interrupt key.
            TerminalError: If the terminal failed.

        Returns:
            The committed line, not stripped.
        """
        self._buffer.clear()
        self.render_prompt()
        while not self.handle(self.terminal.read_key()):
            pass
        self.terminal.newline()
        self.terminal.flush()
        line = self.buffer
        self._buffer.clear()
        log.debug("line committed %r", line)
        return line

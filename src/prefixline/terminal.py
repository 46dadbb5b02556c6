from __future__ import annotations

import codecs
import os
import sys
import termios
import tty
from contextlib import contextmanager, suppress
from logging import getLogger
from typing import Iterator, TextIO

from rich.console import Console
from rich.text import Text

from prefixline.keys import KeyDecoder, KeyEvent

log = getLogger(__name__)

CSI = "\x1b["


class TerminalError(Exception):
    """Problem with reading from, writing to, or configuring the terminal."""


class Terminal:
    """Raw mode input and unbuffered output for the line editor.

    Args:
        input_fd: File descriptor to read keys from (defaults to stdin).
        output: File to write to (defaults to stdout).
    """

    def __init__(self, input_fd: int | None = None, output: TextIO | None = None) -> None:
        self.input_fd = sys.stdin.fileno() if input_fd is None else input_fd
        self.output = sys.stdout if output is None else output
        self.console = Console(file=self.output, highlight=False, soft_wrap=True)
        self._utf8_decoder = codecs.getincrementaldecoder("utf-8")("replace")
        self._decode_key = KeyDecoder(self._read_character)
        self._saved_attributes: list | None = None

    @property
    def is_raw(self) -> bool:
        """Is the terminal currently in raw mode?"""
        return self._saved_attributes is not None

    def enable_raw_mode(self) -> None:
        """Put the input in to raw mode, saving the previous settings.

        Raises:
            TerminalError: If the terminal could not be configured.
        """
        if self._saved_attributes is not None:
            return
        try:
            self._saved_attributes = termios.tcgetattr(self.input_fd)
            tty.setraw(self.input_fd)
        except (OSError, termios.error) as error:
            self._saved_attributes = None
            raise TerminalError(f"Unable to enable raw mode; {error}")
        log.debug("raw mode enabled on fd %d", self.input_fd)

    def disable_raw_mode(self) -> None:
        """Restore the settings saved by `enable_raw_mode`."""
        if self._saved_attributes is None:
            return
        saved_attributes, self._saved_attributes = self._saved_attributes, None
        with suppress(OSError, termios.error):
            termios.tcsetattr(self.input_fd, termios.TCSADRAIN, saved_attributes)
        log.debug("raw mode disabled on fd %d", self.input_fd)

    @contextmanager
    def raw_mode(self) -> Iterator[Terminal]:
        """Context manager to keep the terminal in raw mode.

        Settings are restored however the block exits.
        """
        self.enable_raw_mode()
        try:
            yield self
        finally:
            self.disable_raw_mode()

    def _read_character(self) -> str:
        """Block until a complete character is available.

        Returns:
            A single character, or empty string if the input was closed.
        """
        while True:
            data = os.read(self.input_fd, 1)
            if not data:
                return ""
            if text := self._utf8_decoder.decode(data):
                return text

    def read_key(self) -> KeyEvent:
        """Block until a key is pressed.

        Returns:
            The decoded key.

        Raises:
            TerminalError: If reading failed.
        """
        try:
            return self._decode_key()
        except OSError as error:
            raise TerminalError(f"Unable to read from terminal; {error}")

    def write(self, text: str) -> None:
        """Write text without a newline.

        Raises:
            TerminalError: If writing failed.
        """
        try:
            self.output.write(text)
        except (OSError, UnicodeError) as error:
            raise TerminalError(f"Unable to write to terminal; {error}")

    def write_styled(self, text: str, style: str) -> None:
        """Write text rendered with a Rich style.

        Args:
            text: Text to write.
            style: A Rich style, e.g. "bold yellow".

        Raises:
            TerminalError: If writing failed.
        """
        try:
            self.console.print(Text(text, style=style), end="")
        except (OSError, UnicodeError) as error:
            raise TerminalError(f"Unable to write to terminal; {error}")

    def newline(self) -> None:
        # Raw mode turns off output processing, so carriage return is explicit
        self.write("\r\n")

    def move_left(self, columns: int) -> None:
        if columns > 0:
            self.write(f"{CSI}{columns}D")

    def move_to_column(self, column: int) -> None:
        self.write(f"{CSI}{column + 1}G")

    def clear_to_end(self) -> None:
        self.write(f"{CSI}K")

    def clear_line(self) -> None:
        self.write(f"{CSI}2K")

    def flush(self) -> None:
        """Flush pending output.

        Raises:
            TerminalError: If writing failed.
        """
        try:
            self.output.flush()
        except (OSError, UnicodeError) as error:
            raise TerminalError(f"Unable to write to terminal; {error}")

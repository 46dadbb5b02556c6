from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable


class Key(Enum):
    """Logical keys understood by the line editor."""

    CHARACTER = auto()
    ENTER = auto()
    BACKSPACE = auto()
    WORD_BACKSPACE = auto()
    TAB = auto()
    INTERRUPT = auto()
    IGNORED = auto()


@dataclass(frozen=True)
class KeyEvent:
    """A decoded key press."""

    key: Key
    character: str = ""


ESCAPE = "\x1b"

KEY_MAP: dict[str, Key] = {
    "\r": Key.ENTER,
    "\n": Key.ENTER,
    "\x7f": Key.BACKSPACE,
    # Most terminals send ctrl+h for ctrl+backspace
    "\x08": Key.WORD_BACKSPACE,
    "\x17": Key.WORD_BACKSPACE,
    "\t": Key.TAB,
    "\x03": Key.INTERRUPT,
}


class KeyDecoder:
    """Decodes characters read from a raw terminal in to key events.

    Args:
        read: Callable which blocks until a character is available, and returns it.
            An empty string means the input has been closed.
    """

    def __init__(self, read: Callable[[], str]) -> None:
        self._read = read

    def __call__(self) -> KeyEvent:
        """Read one key event.

        Returns:
            A key event.
        """
        character = self._read()
        if not character:
            return KeyEvent(Key.INTERRUPT)
        if character == ESCAPE:
            return self._read_escape()
        if (key := KEY_MAP.get(character)) is not None:
            return KeyEvent(key)
        if not character.isprintable():
            return KeyEvent(Key.IGNORED)
        return KeyEvent(Key.CHARACTER, character)

    def _read_escape(self) -> KeyEvent:
        """Consume an escape sequence.

        Returns:
            A word backspace for alt+backspace, the key for escape followed by a
                control key, otherwise an ignored key.
        """
        character = self._read()
        # rxvt and macOS send alt+arrow as a second escape before the sequence
        while character == ESCAPE:
            character = self._read()
        if character == "\x7f":
            return KeyEvent(Key.WORD_BACKSPACE)
        if character in ("[", "O"):
            # CSI / SS3: parameters until a final byte in the range @ to ~
            while (character := self._read()) and not ("@" <= character <= "~"):
                pass
            return KeyEvent(Key.IGNORED)
        if (key := KEY_MAP.get(character)) is not None:
            return KeyEvent(key)
        return KeyEvent(Key.IGNORED)

import io
import os

import pytest

from prefixline.terminal import Terminal


class PipeTerminal(Terminal):
    """A terminal which reads keys from a pipe, and writes to a string."""

    def __init__(self, keys: str) -> None:
        read_fd, write_fd = os.pipe()
        os.write(write_fd, keys.encode("utf-8"))
        os.close(write_fd)
        super().__init__(input_fd=read_fd, output=io.StringIO())
        self.raw_mode_count = 0

    def enable_raw_mode(self) -> None:
        self._saved_attributes = []
        self.raw_mode_count += 1

    def disable_raw_mode(self) -> None:
        self._saved_attributes = None

    @property
    def text(self) -> str:
        return self.output.getvalue()

    def close(self) -> None:
        os.close(self.input_fd)


@pytest.fixture
def make_terminal():
    terminals: list[PipeTerminal] = []

    def make(keys: str = "") -> PipeTerminal:
        terminal = PipeTerminal(keys)
        terminals.append(terminal)
        return terminal

    yield make
    for terminal in terminals:
        terminal.close()


@pytest.fixture(autouse=True)
def plain_console(monkeypatch):
    """Stop Rich from forcing color on test output."""
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("TTY_COMPATIBLE", raising=False)

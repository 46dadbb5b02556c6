import sys
from logging import getLogger

import click
from rich.console import Console

from prefixline import constants
from prefixline.app import run
from prefixline.editor import InputCancelled
from prefixline.log import close_logging, setup_logging
from prefixline.terminal import Terminal, TerminalError

log = getLogger(__name__)


def is_interactive() -> bool:
    """Is stdin connected to a terminal?"""
    return sys.stdin.isatty()


@click.command()
def main() -> None:
    """A prompt which completes from what you typed before."""
    error_console = Console(stderr=True, highlight=False)

    if not is_interactive():
        error_console.print("[red]prefixline requires an interactive terminal")
        sys.exit(1)

    try:
        handler = setup_logging(constants.DEBUG)
    except OSError as error:
        error_console.print(
            f"Unable to open debug log; {error}", markup=False, style="red"
        )
        sys.exit(1)

    try:
        run(Terminal())
    except InputCancelled:
        sys.exit(0)
    except TerminalError as error:
        log.error("terminal failure; %s", error)
        error_console.print(str(error), markup=False, style="red")
        sys.exit(1)
    finally:
        if handler is not None:
            close_logging(handler)


if __name__ == "__main__":
    main()

"""
This module contains constants, which may be set in environment variables.
"""

from __future__ import annotations

import os
from typing import Final

get_environ = os.environ.get


def _get_environ_bool(name: str, default: bool = False) -> bool:
    """Check an environment variable switch.

    Args:
        name: Name of environment variable.

    Returns:
        `True` if the env var is "1", otherwise `False`.
    """
    has_environ = get_environ(name, "1" if default else "0") == "1"
    return has_environ


def _get_environ_str(name: str, default: str) -> str:
    """Retrieves a string environment variable.

    Args:
        name: Name of environment variable.
        default: The value to use if the variable is unset or empty.

    Returns:
        The value of the environment variable, or the default.
    """
    return get_environ(name) or default


PROMPT: Final[str] = _get_environ_str("PREFIXLINE_PROMPT", "> ")
"""Text displayed before the input buffer."""

PROMPT_STYLE: Final[str] = _get_environ_str("PREFIXLINE_PROMPT_STYLE", "yellow")
"""Rich style of the prompt."""

COMPLETION_STYLE: Final[str] = _get_environ_str(
    "PREFIXLINE_COMPLETION_STYLE", "grey50"
)
"""Rich style of listed completions."""

DEBUG: Final[bool] = _get_environ_bool("PREFIXLINE_DEBUG") or _get_environ_bool(
    "DEBUG"
)
"""Debug flag."""

EXIT_COMMANDS: Final[frozenset[str]] = frozenset({"q", "quit", "exit"})
"""Lines (compared lower case) which end the session."""

from pathlib import Path
from typing import Final

from xdg_base_dirs import xdg_state_home


APP_NAME: Final[str] = "prefixline"


def get_state() -> Path:
    """Return (possibly creating) the application state directory."""
    path = xdg_state_home() / APP_NAME
    path.mkdir(0o700, exist_ok=True, parents=True)
    return path


def get_log_path() -> Path:
    """Get the path of the debug log."""
    return get_state() / f"{APP_NAME}.log"

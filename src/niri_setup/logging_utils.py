"""File logging setup for niri-setup."""

from __future__ import annotations

import logging
from pathlib import Path

_HANDLER_FLAG = "_niri_setup_configured"
_PATH_FLAG = "_niri_setup_log_path"


def configure_logging(log_path: Path, level: int = logging.INFO) -> Path:
    """Send diagnostic logging to a file.

    Only a file handler is installed: the terminal is owned by the Rich live
    display, so console logging would corrupt the screen. Calling this more
    than once only adjusts the level.

    Returns the path of the log file in use.
    """
    root = logging.getLogger()
    root.setLevel(level)

    if getattr(root, _HANDLER_FLAG, False):
        return getattr(root, _PATH_FLAG, log_path)

    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_path)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )
    )
    root.addHandler(handler)

    setattr(root, _HANDLER_FLAG, True)
    setattr(root, _PATH_FLAG, log_path)

    logging.getLogger(__name__).debug("Logging initialized at %s", log_path)
    return log_path

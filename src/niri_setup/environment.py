"""Process environment bootstrap.

The compositor tools expect XDG_RUNTIME_DIR to point at a private, per-user
directory. setup_environment() creates or verifies that directory and exports
the variable exactly once, before the UI starts. Nothing else in the package
reads or writes the process environment.
"""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path
from typing import MutableMapping

from .errors import RuntimeDirError

logger = logging.getLogger(__name__)

RUNTIME_DIR_VAR = "XDG_RUNTIME_DIR"
RUNTIME_DIR_MODE = 0o700

_runtime_dir: Path | None = None


def runtime_dir_path(base: Path, euid: int) -> Path:
    """Runtime directory for a user: ``<base>/<euid>-runtime-dir``."""
    return base / f"{euid}-runtime-dir"


def _check_existing(path: Path, euid: int) -> None:
    try:
        st = os.lstat(path)
    except OSError as e:
        raise RuntimeDirError(f"Cannot inspect runtime directory {path}: {e}") from e

    if not stat.S_ISDIR(st.st_mode):
        raise RuntimeDirError(f"Runtime directory {path} exists but is not a directory")
    if st.st_uid != euid:
        raise RuntimeDirError(
            f"Runtime directory {path} is owned by uid {st.st_uid}, expected {euid}"
        )

    mode = stat.S_IMODE(st.st_mode)
    if mode & 0o077:
        logger.warning("Runtime directory %s has mode %o, expected %o", path, mode, RUNTIME_DIR_MODE)


def ensure_runtime_dir(base: Path, euid: int | None = None) -> Path:
    """Create the runtime directory, or verify an existing one is ours.

    Raises:
        RuntimeDirError: If it cannot be created, is not a directory, or is
            owned by another user.
    """
    euid = os.geteuid() if euid is None else euid
    path = runtime_dir_path(base, euid)

    try:
        path.mkdir(mode=RUNTIME_DIR_MODE)
    except FileExistsError:
        _check_existing(path, euid)
        logger.info("Using existing runtime directory %s", path)
        return path
    except OSError as e:
        raise RuntimeDirError(f"Failed to create runtime directory {path}: {e}") from e

    try:
        # mkdir's mode is filtered through the umask
        os.chmod(path, RUNTIME_DIR_MODE)
    except OSError as e:
        raise RuntimeDirError(f"Failed to set permissions on {path}: {e}") from e

    logger.info("Created runtime directory %s", path)
    return path


def setup_environment(
    base: Path = Path("/tmp"),
    environ: MutableMapping[str, str] | None = None,
) -> Path:
    """Prepare the runtime directory and export XDG_RUNTIME_DIR.

    Runs once per process; later calls return the directory chosen by the
    first successful call without touching the filesystem or environment.

    Raises:
        RuntimeDirError: Startup must abort.
    """
    global _runtime_dir
    if _runtime_dir is not None:
        return _runtime_dir

    path = ensure_runtime_dir(base)
    target = os.environ if environ is None else environ
    target[RUNTIME_DIR_VAR] = str(path)
    _runtime_dir = path
    return path


def reset_environment() -> None:
    """Forget the cached runtime directory (for testing)."""
    global _runtime_dir
    _runtime_dir = None

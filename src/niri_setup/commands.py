"""External command execution.

Wraps subprocess for the package manager and config validator so callers
always get a CommandOutcome back, never an exception.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
from typing import Callable, Sequence

from .types import CommandOutcome

logger = logging.getLogger(__name__)

# Signature shared by run_command and the fakes used in tests
CommandRunner = Callable[[Sequence[str]], CommandOutcome]


def format_argv(argv: Sequence[str]) -> str:
    return " ".join(shlex.quote(a) for a in argv)


def run_command(argv: Sequence[str]) -> CommandOutcome:
    """Run a command to completion with stdout and stderr combined.

    Args:
        argv: Command and arguments.

    Returns:
        CommandOutcome. A missing executable is reported as exit code 127,
        any other OS error as exit code 1, with the error text as output.
        Output that is not valid UTF-8 is decoded with replacement characters.
    """
    argv_tuple = tuple(argv)
    logger.info("CMD %s", format_argv(argv_tuple))

    try:
        result = subprocess.run(
            list(argv_tuple),
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            stdin=subprocess.DEVNULL,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
    except FileNotFoundError:
        logger.warning("Command not found: %s", argv_tuple[0])
        return CommandOutcome(argv_tuple, 127, f"Command not found: {argv_tuple[0]}")
    except OSError as e:
        logger.warning("Cannot run %s: %s", argv_tuple[0], e)
        return CommandOutcome(argv_tuple, 1, str(e))

    output = result.stdout or ""
    if result.returncode != 0:
        logger.warning("Exit %d from %s", result.returncode, format_argv(argv_tuple))
        if output:
            logger.debug("OUTPUT %s", output.strip())
    return CommandOutcome(argv_tuple, result.returncode, output)

"""Action runners.

One function per menu action. Each receives everything it needs as
arguments and returns a single ActionResult; failures of external commands
and of the filesystem are turned into failed results here and never raised.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Callable, Sequence

from .commands import CommandRunner, format_argv, run_command
from .config import Settings
from .types import Action, ActionResult

logger = logging.getLogger(__name__)

# A runner bound to its inputs, ready to execute on a worker thread
BoundRunner = Callable[[], ActionResult]


def _detail(output: str) -> str:
    return output.strip() or "no output"


def install(settings: Settings, run: CommandRunner = run_command) -> ActionResult:
    """Install every configured package in order, then copy the config file.

    Stops at the first package that fails; later packages are not attempted
    and the config file is not copied.
    """
    for package in settings.packages:
        outcome = run([*settings.package_command, package])
        if not outcome.succeeded:
            logger.warning("Install of %s failed with exit %d", package, outcome.returncode)
            return ActionResult.failed(f"Failed to install {package}: {_detail(outcome.output)}")
        logger.info("Successfully installed %s", package)

    return copy_config(settings.source_config, settings.destination_dir, settings.config_filename)


def copy_config(source: Path, destination_dir: Path, filename: str) -> ActionResult:
    """Copy the compositor config into its per-user directory."""
    try:
        destination_dir.mkdir(mode=0o755, parents=True, exist_ok=True)
    except OSError as e:
        logger.warning("Cannot create %s: %s", destination_dir, e)
        return ActionResult.failed(f"Failed to create configuration directory {destination_dir}: {e}")

    destination = destination_dir / filename
    try:
        shutil.copyfile(source, destination)
    except OSError as e:
        logger.warning("Cannot copy %s to %s: %s", source, destination, e)
        return ActionResult.failed(f"Failed to copy {source.name}: {e}")

    logger.info("Copied %s to %s", source, destination)
    return ActionResult.ok("Niri installation and configuration completed successfully.")


def configure(settings: Settings, run: CommandRunner = run_command) -> ActionResult:
    """Run the optional configure commands; succeeds when there are none."""
    for argv in settings.configure_commands:
        outcome = run(argv)
        if not outcome.succeeded:
            return ActionResult.failed(
                f"Configuration step failed ({format_argv(argv)}): {_detail(outcome.output)}"
            )
    return ActionResult.ok("Configuration completed.")


def validate(settings: Settings, run: CommandRunner = run_command) -> ActionResult:
    """Run the config validator; success is exactly a zero exit status."""
    outcome = run(settings.validate_command)
    if outcome.succeeded:
        return ActionResult.ok("Niri configuration is valid.")
    return ActionResult.failed(f"Configuration validation failed: {_detail(outcome.output)}")


def save_logs(lines: Sequence[str], log_file: Path) -> ActionResult:
    """Append log lines to ``log_file``, one per line.

    Lines written before a failing write stay in the file.
    """
    try:
        f = open(log_file, "a", encoding="utf-8")
    except OSError as e:
        logger.warning("Cannot open %s: %s", log_file, e)
        return ActionResult.failed(f"Failed to open log file {log_file} for writing: {e}")

    with f:
        for line in lines:
            try:
                f.write(line + "\n")
                f.flush()
            except OSError as e:
                logger.warning("Write to %s failed: %s", log_file, e)
                return ActionResult.failed(f"Failed to write to log file {log_file}: {e}")

    logger.info("Saved %d log line(s) to %s", len(lines), log_file)
    return ActionResult.ok(f"Logs saved to {log_file}")


def bind_runner(
    action: Action,
    settings: Settings,
    log_lines: Sequence[str],
    run: CommandRunner = run_command,
) -> BoundRunner:
    """Return a zero-argument callable that performs ``action``.

    ``log_lines`` is the session log snapshot taken at dispatch time.

    Raises:
        ValueError: For Action.EXIT, which is never run as a task.
    """
    if action == Action.INSTALL:
        return lambda: install(settings, run)
    if action == Action.CONFIGURE:
        return lambda: configure(settings, run)
    if action == Action.VALIDATE:
        return lambda: validate(settings, run)
    if action == Action.SAVE_LOGS:
        snapshot = tuple(log_lines)
        return lambda: save_logs(snapshot, settings.log_file)
    raise ValueError(f"No runner for action: {action}")

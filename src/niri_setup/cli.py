"""Command-line entry point for niri-setup.

Bootstraps logging, config and the runtime directory, then hands the
terminal to the interactive menu.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import NoReturn

from rich.console import Console

from . import __version__
from .errors import ConfigError, RuntimeDirError

logger = logging.getLogger(__name__)

_console = Console(highlight=False, stderr=True)


def _fail(msg: str) -> NoReturn:
    _console.print(f"[red]✗[/red] {msg}", soft_wrap=True)
    sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="niri-setup",
        description="Install and configure the Niri compositor on FreeBSD",
    )
    parser.add_argument("--version", action="version", version=f"niri-setup {__version__}")
    parser.add_argument("--config", type=Path, help="Config file (default: ~/.config/niri-setup/config.yaml)")
    parser.add_argument("--debug", action="store_true", help="Write debug output to the log file")
    parser.add_argument(
        "--write-config",
        action="store_true",
        help="Write the effective config to the config path and exit",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    from . import config
    from .logging_utils import configure_logging

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        cfg = config.load_config(args.config)
    except ConfigError as e:
        _fail(str(e))

    if args.write_config:
        written = config.save_config(cfg, args.config)
        print(f"Wrote {written}")
        return

    debug = args.debug or bool(cfg.get("debug", False))
    try:
        log_path = configure_logging(
            config.get_debug_log_path(), logging.DEBUG if debug else logging.INFO
        )
    except OSError as e:
        _fail(f"Cannot open log file: {e}")
    logger.info("Initializing NiriSetup %s (log: %s)", __version__, log_path)

    try:
        settings = config.Settings.from_config(cfg)
    except ConfigError as e:
        _fail(str(e))

    from .environment import setup_environment

    try:
        runtime_dir = setup_environment(settings.runtime_dir_base)
    except RuntimeDirError as e:
        logger.error("Startup aborted: %s", e)
        _fail(str(e))
    logger.info("XDG_RUNTIME_DIR=%s", runtime_dir)

    from .app import App

    try:
        App(settings).run()
    except KeyboardInterrupt:
        print()
        sys.exit(130)

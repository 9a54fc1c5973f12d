"""YAML-based configuration for niri-setup.

The config file lives at ~/.config/niri-setup/config.yaml (honouring
XDG_CONFIG_HOME). Every key is optional; values are deep-merged over
DEFAULT_CONFIG and turned into an immutable Settings object that the
action runners receive.
"""

from __future__ import annotations

import copy
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigError

DEFAULT_CONFIG: dict[str, Any] = {
    "app_name": "niri",
    "packages": [
        "niri",
        "wlroots",
        "xwayland-satellite",
        "seatd",
        "waybar",
        "grim",
        "jq",
        "wofi",
        "alacritty",
        "pam_xdg",
        "fuzzel",
        "swaylock",
        "foot",
        "wlsunset",
        "swaybg",
        "mako",
        "swayidle",
    ],
    "package_command": ["sudo", "pkg", "install", "-y"],
    "validate_command": ["niri", "validate"],
    "configure_commands": [],
    "source_config": "config.kdl",
    "config_filename": "config.kdl",
    "log_filename": "nirisetup.log",
    "runtime_dir_base": "/tmp",
    "debug": False,
}


def get_config_dir() -> Path:
    """Get the niri-setup config directory."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return Path(xdg_config) / "niri-setup"


def get_config_path() -> Path:
    """Get the path to the main config file."""
    return get_config_dir() / "config.yaml"


def get_debug_log_path() -> Path:
    """Get the path to the diagnostic log file."""
    return get_config_dir() / "debug.log"


def _deep_merge(base: dict, override: dict) -> dict:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Load config, falling back to defaults.

    With no path the default location is used and a missing or corrupt file
    yields the defaults. An explicit path must exist and parse, otherwise
    ConfigError is raised.
    """
    explicit = path is not None
    config_path = path if path is not None else get_config_path()
    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        if explicit:
            raise ConfigError(f"Config file not found: {config_path}")
        return copy.deepcopy(DEFAULT_CONFIG)
    except (yaml.YAMLError, OSError) as e:
        if explicit:
            raise ConfigError(f"Cannot read config {config_path}: {e}") from e
        return copy.deepcopy(DEFAULT_CONFIG)

    if data is None:
        return copy.deepcopy(DEFAULT_CONFIG)
    if not isinstance(data, dict):
        if explicit:
            raise ConfigError(f"Config {config_path} must be a mapping")
        return copy.deepcopy(DEFAULT_CONFIG)
    return _deep_merge(copy.deepcopy(DEFAULT_CONFIG), data)


def save_config(cfg: dict[str, Any], path: Path | None = None) -> Path:
    """Save config as YAML and return the path written."""
    config_path = path if path is not None else get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w") as f:
        yaml.dump(cfg, f, default_flow_style=False, sort_keys=False)
    return config_path


def _argv(value: Any, key: str) -> tuple[str, ...]:
    if isinstance(value, str):
        value = value.split()
    if not isinstance(value, list) or not value:
        raise ConfigError(f"'{key}' must be a non-empty list of arguments")
    return tuple(str(part) for part in value)


@dataclass(frozen=True)
class Settings:
    """Resolved settings consumed by the action runners."""

    app_name: str
    packages: tuple[str, ...]
    package_command: tuple[str, ...]
    validate_command: tuple[str, ...]
    configure_commands: tuple[tuple[str, ...], ...]
    source_config: Path
    destination_dir: Path
    config_filename: str
    log_file: Path
    runtime_dir_base: Path
    debug: bool = False

    @property
    def destination_config(self) -> Path:
        return self.destination_dir / self.config_filename

    @classmethod
    def from_config(
        cls,
        cfg: dict[str, Any],
        cwd: Path | None = None,
        home: Path | None = None,
    ) -> "Settings":
        """Build Settings from a config dict.

        Relative source paths are resolved against ``cwd`` (the working
        directory by default); the destination is ``<home>/.config/<app_name>``.
        """
        cwd = cwd or Path.cwd()
        home = home or Path.home()

        packages = cfg.get("packages") or []
        if not isinstance(packages, list):
            raise ConfigError("'packages' must be a list of package names")

        configure_commands = cfg.get("configure_commands") or []
        if not isinstance(configure_commands, list):
            raise ConfigError("'configure_commands' must be a list of commands")

        source = Path(os.path.expanduser(str(cfg["source_config"])))
        if not source.is_absolute():
            source = cwd / source

        app_name = str(cfg["app_name"])
        return cls(
            app_name=app_name,
            packages=tuple(str(p) for p in packages),
            package_command=_argv(cfg["package_command"], "package_command"),
            validate_command=_argv(cfg["validate_command"], "validate_command"),
            configure_commands=tuple(
                _argv(cmd, "configure_commands") for cmd in configure_commands
            ),
            source_config=source,
            destination_dir=home / ".config" / app_name,
            config_filename=str(cfg["config_filename"]),
            log_file=Path(tempfile.gettempdir()) / str(cfg["log_filename"]),
            runtime_dir_base=Path(os.path.expanduser(str(cfg["runtime_dir_base"]))),
            debug=bool(cfg.get("debug", False)),
        )

"""Exceptions raised by niri-setup.

Failures inside menu actions are reported as ActionResult values instead;
these exceptions cover start-up problems that must stop the program.
"""

from __future__ import annotations


class NiriSetupError(Exception):
    """Base class for niri-setup errors."""


class ConfigError(NiriSetupError):
    """An explicitly requested config file could not be read or parsed."""


class RuntimeDirError(NiriSetupError):
    """The per-user runtime directory is missing, unusable or not ours."""

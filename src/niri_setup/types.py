"""Type definitions for niri-setup.

Shared enums and dataclasses used across the codebase: the menu actions,
the screens of the controller state machine, and the values that flow back
from action runners and external commands.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Action(str, Enum):
    """Selectable menu actions."""

    INSTALL = "install"
    CONFIGURE = "configure"
    VALIDATE = "validate"
    SAVE_LOGS = "save-logs"
    EXIT = "exit"

    def __str__(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        """Human-readable menu label."""
        return _ACTION_LABELS[self]

    @property
    def shows_result(self) -> bool:
        """Whether completion goes through the one-shot Result screen."""
        return self == Action.INSTALL


_ACTION_LABELS: dict[Action, str] = {
    Action.INSTALL: "Install Niri",
    Action.CONFIGURE: "Configure Niri",
    Action.VALIDATE: "Validate Config",
    Action.SAVE_LOGS: "Save Logs",
    Action.EXIT: "Exit",
}

# Menu display order
MENU_ACTIONS: tuple[Action, ...] = (
    Action.INSTALL,
    Action.CONFIGURE,
    Action.VALIDATE,
    Action.SAVE_LOGS,
    Action.EXIT,
)


class Screen(str, Enum):
    """Screens of the menu state machine."""

    MENU = "menu"
    RUNNING = "running"
    RESULT = "result"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ActionResult:
    """Outcome of one action run; the only thing a runner hands back."""

    message: str
    succeeded: bool

    @classmethod
    def ok(cls, message: str) -> "ActionResult":
        return cls(message=message, succeeded=True)

    @classmethod
    def failed(cls, message: str) -> "ActionResult":
        return cls(message=message, succeeded=False)


@dataclass(frozen=True)
class CommandOutcome:
    """Result of running one external command.

    ``output`` holds stdout and stderr interleaved as the command wrote them.
    """

    argv: tuple[str, ...]
    returncode: int
    output: str

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0

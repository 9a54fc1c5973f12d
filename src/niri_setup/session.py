"""In-memory session state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from .types import Action, Screen


class SessionLog:
    """Ordered, append-only list of status lines for one run."""

    def __init__(self, lines: list[str] | None = None):
        self._lines: list[str] = list(lines or [])

    def append(self, line: str) -> None:
        self._lines.append(line)

    def clear(self) -> None:
        self._lines.clear()

    def lines(self) -> tuple[str, ...]:
        """Snapshot of the current lines."""
        return tuple(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[str]:
        return iter(self.lines())

    def __repr__(self) -> str:
        return f"SessionLog({self._lines!r})"


@dataclass
class Session:
    """Mutable state of the menu; only MenuController writes to it."""

    screen: Screen = Screen.MENU
    cursor_index: int = 0
    selected_action: Action | None = None
    log: SessionLog = field(default_factory=SessionLog)
    is_processing: bool = False
    last_result_message: str | None = None
    last_result_succeeded: bool = True
    # Clock reading of the first frame that showed last_result_message
    result_shown_at: float | None = None

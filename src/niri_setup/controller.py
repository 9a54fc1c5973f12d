"""Menu state machine.

MenuController owns the Session and is the only code that changes it. It is
driven by two kinds of input, both delivered on the UI thread:

- key presses, via handle_key()
- runner completions, via handle_result()

Screens:
    MENU     cursor moves, Enter dispatches the highlighted action
    RUNNING  an action is executing; keys other than quit are dropped
    RESULT   one-shot screen after an install; folds back into MENU once it
             has been on screen for result_hold seconds

view() is a pure projection used for drawing. frame_rendered() is called by
the event loop after every drawn frame and performs the one-shot transitions.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Sequence

from rich_menu.keys import is_down, is_enter, is_exit, is_up

from .session import Session
from .types import MENU_ACTIONS, Action, ActionResult, Screen

logger = logging.getLogger(__name__)

# Called with the chosen action and the log snapshot; must not block
Dispatcher = Callable[[Action, tuple[str, ...]], None]

# Seconds a result message (and the RESULT screen) stays up once drawn
RESULT_HOLD = 1.5


@dataclass(frozen=True)
class MenuView:
    """Immutable snapshot of everything the presentation layer draws."""

    actions: tuple[Action, ...]
    cursor_index: int
    screen: Screen
    selected_action: Action | None
    log_lines: tuple[str, ...]
    is_processing: bool
    result_message: str | None
    result_succeeded: bool
    quitting: bool


class MenuController:
    """Drives the Session in response to keys and completion events.

    Args:
        dispatch: Starts the runner for an action out of band.
        actions: Menu entries in display order.
        session: Existing session (a fresh one by default).
        result_hold: Seconds a drawn result stays on screen.
        clock: Monotonic time source.
    """

    def __init__(
        self,
        dispatch: Dispatcher,
        actions: Sequence[Action] = MENU_ACTIONS,
        session: Session | None = None,
        result_hold: float = RESULT_HOLD,
        clock: Callable[[], float] = time.monotonic,
    ):
        if not actions:
            raise ValueError("Menu must have at least one action")
        self.actions: tuple[Action, ...] = tuple(actions)
        self.session = session or Session()
        self.should_exit = False
        self.result_hold = result_hold
        self._dispatch = dispatch
        self._clock = clock

    # -- input -----------------------------------------------------------------

    def handle_key(self, key: str) -> None:
        """Apply one key press."""
        if is_exit(key):
            self.should_exit = True
            return

        if self.session.screen != Screen.MENU:
            # Dropped, not queued
            return

        if is_up(key):
            self._move_cursor(-1)
        elif is_down(key):
            self._move_cursor(+1)
        elif is_enter(key):
            self._confirm()

    def _move_cursor(self, delta: int) -> None:
        """Move the cursor, clamped to the list (no wraparound)."""
        last = len(self.actions) - 1
        self.session.cursor_index = max(0, min(last, self.session.cursor_index + delta))

    def _confirm(self) -> None:
        s = self.session
        if s.is_processing:
            return

        action = self.actions[s.cursor_index]
        s.selected_action = action
        if action == Action.EXIT:
            self.should_exit = True
            return

        s.is_processing = True
        s.screen = Screen.RUNNING
        if s.result_shown_at is not None:
            # Already drawn; the new run replaces it
            self._drop_result()
        logger.info("Dispatching %s", action)
        self._dispatch(action, s.log.lines())

    # -- completion ------------------------------------------------------------

    def handle_result(self, action: Action, result: ActionResult) -> None:
        """Apply the completion of the running action."""
        s = self.session
        if not s.is_processing or action != s.selected_action:
            logger.warning("Ignoring unexpected completion of %s", action)
            return

        s.log.append(result.message)
        s.is_processing = False
        s.last_result_message = result.message
        s.last_result_succeeded = result.succeeded
        s.result_shown_at = None
        s.screen = Screen.RESULT if action.shows_result else Screen.MENU

        if result.succeeded:
            logger.info("%s finished: %s", action, result.message)
        else:
            logger.warning("%s failed: %s", action, result.message)

    # -- rendering -------------------------------------------------------------

    def view(self) -> MenuView:
        s = self.session
        return MenuView(
            actions=self.actions,
            cursor_index=s.cursor_index,
            screen=s.screen,
            selected_action=s.selected_action,
            log_lines=s.log.lines(),
            is_processing=s.is_processing,
            result_message=s.last_result_message,
            result_succeeded=s.last_result_succeeded,
            quitting=self.should_exit,
        )

    def frame_rendered(self) -> None:
        """Advance one-shot state once a frame has been drawn.

        A result message stays up for ``result_hold`` seconds counted from the
        first frame that showed it. After that RESULT folds back into MENU and
        clears the log, and the message is dropped so it is shown only once.
        """
        s = self.session
        if s.last_result_message is None and s.screen != Screen.RESULT:
            return

        now = self._clock()
        if s.result_shown_at is None:
            s.result_shown_at = now
        if now - s.result_shown_at < self.result_hold:
            return

        if s.screen == Screen.RESULT:
            s.screen = Screen.MENU
            s.log.clear()
        self._drop_result()

    def _drop_result(self) -> None:
        self.session.last_result_message = None
        self.session.result_shown_at = None

"""Event loop for the interactive assistant.

All state changes happen on the thread that calls App.run(). Two producers
feed it through a single queue:

- a daemon input thread posting KeyEvent for every key read by readchar
- one daemon worker thread per dispatched action, posting exactly one
  CompletionEvent when the runner returns

The loop drains the queue, hands events to the controller, redraws through
Rich.Live and then tells the controller the frame is on screen.
"""

from __future__ import annotations

import logging
import queue
import sys
import termios
import threading
from dataclasses import dataclass
from typing import Callable, Union

import readchar
from rich.console import Console
from rich.live import Live

from rich_menu import Theme

from .commands import CommandRunner, run_command
from .config import Settings
from .controller import MenuController
from .runners import bind_runner
from .types import Action, ActionResult
from .ui import build_panel, render

logger = logging.getLogger(__name__)

POLL_INTERVAL = 0.1


@dataclass(frozen=True)
class KeyEvent:
    key: str


@dataclass(frozen=True)
class CompletionEvent:
    action: Action
    result: ActionResult


Event = Union[KeyEvent, CompletionEvent]


class ActionDispatcher:
    """Runs each dispatched action on its own worker thread.

    The worker always posts one CompletionEvent, even if the runner raises.
    """

    def __init__(
        self,
        settings: Settings,
        events: "queue.Queue[Event]",
        run: CommandRunner = run_command,
    ):
        self.settings = settings
        self.events = events
        self._run = run

    def __call__(self, action: Action, log_lines: tuple[str, ...]) -> threading.Thread:
        runner = bind_runner(action, self.settings, log_lines, self._run)
        thread = threading.Thread(
            target=self._work,
            args=(action, runner),
            name=f"runner-{action}",
            daemon=True,
        )
        thread.start()
        return thread

    def _work(self, action: Action, runner: Callable[[], ActionResult]) -> None:
        try:
            result = runner()
        except Exception as e:
            logger.exception("Runner for %s crashed", action)
            result = ActionResult.failed(f"{action.label} failed unexpectedly: {e}")
        self.events.put(CompletionEvent(action, result))


def read_keys(events: "queue.Queue[Event]", readkey: Callable[[], str] = readchar.readkey) -> None:
    """Post every key press to ``events`` until input ends."""
    while True:
        try:
            key = readkey()
        except KeyboardInterrupt:
            key = readchar.key.CTRL_C
        except EOFError:
            events.put(KeyEvent(readchar.key.CTRL_C))
            return
        events.put(KeyEvent(key))


class App:
    """Wires controller, dispatcher, input thread and Rich.Live together.

    Args:
        settings: Resolved settings for the runners.
        console: Rich Console to draw on (a new one by default).
        theme: Optional rich_menu Theme.
        readkey: Key source, readchar.readkey by default.
        run: Command runner handed to the action runners.
    """

    def __init__(
        self,
        settings: Settings,
        console: Console | None = None,
        theme: Theme | None = None,
        readkey: Callable[[], str] = readchar.readkey,
        run: CommandRunner = run_command,
    ):
        self.console = console or Console()
        self.events: "queue.Queue[Event]" = queue.Queue()
        self.dispatcher = ActionDispatcher(settings, self.events, run)
        self.controller = MenuController(self.dispatcher)
        self.panel = build_panel(self.console, theme)
        self._readkey = readkey

    def process_event(self, event: Event) -> None:
        if isinstance(event, KeyEvent):
            self.controller.handle_key(event.key)
        elif isinstance(event, CompletionEvent):
            self.controller.handle_result(event.action, event.result)

    def drain(self, timeout: float = POLL_INTERVAL) -> int:
        """Process queued events, waiting up to ``timeout`` for the first.

        Returns the number of events processed.
        """
        try:
            event = self.events.get(timeout=timeout)
        except queue.Empty:
            return 0

        count = 0
        while True:
            self.process_event(event)
            count += 1
            if self.controller.should_exit:
                return count
            try:
                event = self.events.get_nowait()
            except queue.Empty:
                return count

    def frame(self):
        return render(self.controller.view(), self.panel)

    def run(self) -> None:
        """Run until the user quits."""
        input_thread = threading.Thread(
            target=read_keys, args=(self.events, self._readkey), name="input", daemon=True
        )
        saved_tty = _save_tty()
        try:
            input_thread.start()
            with Live(self.frame(), console=self.console, refresh_per_second=12, auto_refresh=True) as live:
                self.controller.frame_rendered()
                while not self.controller.should_exit:
                    self.drain()
                    live.update(self.frame(), refresh=True)
                    self.controller.frame_rendered()
        finally:
            _restore_tty(saved_tty)
        logger.info("Exiting")


def _save_tty():
    """Terminal attributes of stdin, if it is a terminal."""
    if not sys.stdin.isatty():
        return None
    try:
        return termios.tcgetattr(sys.stdin)
    except termios.error:
        return None


def _restore_tty(saved) -> None:
    # The input thread may still be inside readkey() with the tty in raw mode
    if saved is None:
        return
    try:
        termios.tcsetattr(sys.stdin, termios.TCSADRAIN, saved)
    except termios.error as e:
        logger.warning("Could not restore terminal settings: %s", e)

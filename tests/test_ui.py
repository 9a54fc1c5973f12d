"""Tests for rendering the menu view."""

import io

import readchar
from rich.console import Console

from niri_setup import ui
from niri_setup.controller import MenuController
from niri_setup.types import Action, ActionResult


def _render(controller) -> str:
    output = io.StringIO()
    console = Console(file=output, width=100, height=40, color_system=None)
    console.print(ui.render(controller.view(), ui.build_panel(console)))
    return output.getvalue()


def test_menu_lists_actions_with_cursor(dispatched):
    controller = MenuController(dispatched)
    controller.handle_key(readchar.key.DOWN)
    text = _render(controller)

    assert ui.TITLE in text
    for action in controller.actions:
        assert action.label in text
    assert "> Configure Niri" in text
    assert "Selected:" not in text


def test_running_shows_selection_and_progress(dispatched):
    controller = MenuController(dispatched)
    controller.handle_key(readchar.key.ENTER)
    text = _render(controller)

    assert "Selected: Install Niri" in text
    assert "Processing..." in text


def test_result_and_log_lines(dispatched):
    controller = MenuController(dispatched)
    controller.handle_key("j")
    controller.handle_key("j")
    controller.handle_key(readchar.key.ENTER)
    controller.handle_result(Action.VALIDATE, ActionResult.failed("Configuration validation failed: [bad] node"))
    text = _render(controller)

    # brackets in command output are shown verbatim
    assert "Configuration validation failed: [bad] node" in text
    assert "✗" in text
    assert "Processing..." not in text


def test_render_is_side_effect_free(dispatched):
    controller = MenuController(dispatched)
    controller.handle_key(readchar.key.ENTER)
    controller.handle_result(Action.INSTALL, ActionResult.ok("done"))
    before = controller.view()
    _render(controller)
    _render(controller)
    assert controller.view() == before


def test_quitting_shows_exit_line(dispatched):
    controller = MenuController(dispatched)
    controller.handle_key("q")
    assert "Exiting..." in _render(controller)

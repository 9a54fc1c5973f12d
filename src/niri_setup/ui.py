"""Presentation: turns a MenuView into a Rich renderable."""

from __future__ import annotations

from rich.console import Console, RenderableType
from rich.panel import Panel
from rich.spinner import Spinner
from rich.text import Text

from rich_menu import Item, MenuPanel, Theme

from .controller import MenuView
from .types import Screen

TITLE = "NiriSetup Assistant for FreeBSD"


def build_panel(console: Console | None = None, theme: Theme | None = None) -> MenuPanel:
    return MenuPanel(title=TITLE, console=console, theme=theme)


def _footer(view: MenuView, panel: MenuPanel) -> str:
    if view.screen == Screen.RUNNING:
        return "Working... • q quit"
    return panel.default_footer()


def render(view: MenuView, panel: MenuPanel) -> Panel:
    """Render the current state. Reads the view only; never changes state."""
    theme = panel.theme
    items = [Item.action(action.label, value=action) for action in view.actions]

    sections: list[RenderableType] = []
    if view.selected_action is not None:
        sections.append(Text(f"Selected: {view.selected_action.label}"))

    if view.is_processing:
        sections.append(Spinner(theme.spinner, text="Processing..."))

    if view.log_lines:
        lines = view.log_lines[-theme.max_log_lines:]
        markup = "\n".join(Item.status(line, style=theme.log_color).render() for line in lines)
        sections.append(Text.from_markup(markup))

    if view.result_message is not None:
        if view.result_succeeded:
            style, icon = theme.success_color, theme.success_icon
        else:
            style, icon = theme.error_color, theme.error_icon
        sections.append(Text.from_markup(Item.status(f"{icon} {view.result_message}", style=style).render()))

    if view.quitting:
        sections.append(Text("Exiting..."))

    return panel.render(items, view.cursor_index, sections=sections, footer=_footer(view, panel))

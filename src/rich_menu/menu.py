"""Menu panel rendering using Rich.

This module provides the Item factory and the MenuPanel class, which turns
a list of items plus a cursor position into a Rich Panel. MenuPanel holds no
navigation state: the caller owns the cursor and decides when to redraw,
which lets the same panel be driven from an event loop with Rich.Live.

Example:
    from rich_menu import Item, MenuPanel

    panel = MenuPanel(title="Setup")
    items = [Item.action("Install", value="install"), Item.action("Exit", value="exit")]
    live.update(panel.render(items, cursor_pos=0))
"""

from __future__ import annotations

from typing import Any, Sequence

from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.text import Text

from .components import ActionItem, MenuItem, StatusLine
from .themes import DEFAULT_THEME, Theme


class Item:
    """Factory for creating menu items.

    - action(): Selectable entry
    - status(): Plain status/log line
    """

    @staticmethod
    def action(label: str, value: Any = None, enabled: bool = True) -> ActionItem:
        """Create an action item.

        Args:
            label: Display text.
            value: Identifier returned to the caller when chosen.
            enabled: Dimmed and unselectable when False.

        Returns:
            ActionItem that can be added to a menu.
        """
        return ActionItem(key=None, label=label, enabled=enabled, value=value)

    @staticmethod
    def status(label: str, style: str = "") -> StatusLine:
        """Create a non-interactive status line."""
        return StatusLine(label=label, style=style)


class MenuPanel:
    """Renders a list of items with a cursor inside a bordered panel.

    Args:
        title: Menu title displayed in the panel header.
        console: Optional Rich Console used to size the visible window.
        theme: Optional Theme for customizing appearance.
    """

    def __init__(
        self,
        title: str,
        console: Console | None = None,
        theme: Theme | None = None,
    ):
        self.title = title
        self.console = console or Console()
        self.theme = theme or DEFAULT_THEME

    def _max_visible(self) -> int:
        calculated = self.console.height - self.theme.panel_padding
        return max(self.theme.min_visible_items, min(self.theme.max_visible_items, calculated))

    @staticmethod
    def window_offset(cursor_pos: int, item_count: int, max_visible: int) -> int:
        """Smallest window offset that keeps the cursor visible."""
        if item_count <= max_visible:
            return 0
        return max(0, min(cursor_pos - max_visible + 1, item_count - max_visible))

    def render_items(self, items: Sequence[MenuItem], cursor_pos: int) -> list[str]:
        """Render the visible slice of items as markup lines."""
        theme = self.theme
        max_visible = self._max_visible()
        offset = self.window_offset(cursor_pos, len(items), max_visible)
        window_end = min(offset + max_visible, len(items))

        lines = []
        if offset > 0:
            lines.append(
                f"[{theme.dim_color}]  {theme.scroll_up_icon} {offset} more above[/{theme.dim_color}]"
            )

        for index in range(offset, window_end):
            item = items[index]
            is_selected = index == cursor_pos
            prefix = (
                f"[{theme.selected_color}]{theme.cursor_icon}[/{theme.selected_color}]"
                if is_selected
                else " "
            )
            lines.append(f"{prefix} {item.render(is_selected, theme)}")

        items_below = len(items) - window_end
        if items_below > 0:
            lines.append(
                f"[{theme.dim_color}]  {theme.scroll_down_icon} {items_below} more below[/{theme.dim_color}]"
            )
        return lines

    def default_footer(self) -> str:
        theme = self.theme
        return (
            f"{theme.scroll_up_icon}{theme.scroll_down_icon}/jk navigate "
            "• Enter select • q quit"
        )

    def render(
        self,
        items: Sequence[MenuItem],
        cursor_pos: int,
        sections: Sequence[RenderableType] = (),
        footer: str | None = None,
    ) -> Panel:
        """Render the menu as a Rich Panel.

        Args:
            items: Items to list, in display order.
            cursor_pos: Index of the highlighted item.
            sections: Extra renderables shown below the list (status, logs).
            footer: Footer hint text (defaults to navigation hints).

        Returns:
            Panel ready to hand to Console.print or Live.update.
        """
        theme = self.theme
        parts: list[RenderableType] = [Text.from_markup("\n".join(self.render_items(items, cursor_pos)))]
        for section in sections:
            parts.append(Text(""))
            parts.append(section)

        hint = footer if footer is not None else self.default_footer()
        parts.append(Text(""))
        parts.append(Text.from_markup(f"[{theme.dim_color}]{hint}[/{theme.dim_color}]"))

        return Panel(
            Group(*parts),
            title=f"[bold]{self.title}[/bold]",
            border_style=theme.border_color,
            width=theme.panel_width,
            padding=(1, 2),
        )

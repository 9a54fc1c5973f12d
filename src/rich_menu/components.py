"""Menu item components for rich_menu.

This module provides the building blocks for menus:
- MenuItem: Base class for all items
- ActionItem: Selectable entry that triggers an action
- StatusLine: Non-interactive line of status text (log output, results)
"""

from dataclasses import dataclass
from typing import Any

from rich.markup import escape

from .themes import DEFAULT_THEME, Theme


@dataclass
class MenuItem:
    """Base class for menu items.

    Attributes:
        key: Optional identifier for the item (None for non-interactive items).
        label: Display text for this item.
        enabled: Whether this item can be interacted with.
    """

    key: str | None
    label: str
    enabled: bool = True

    def render(self, is_selected: bool, theme: Theme = DEFAULT_THEME) -> str:
        """Render this item as a Rich markup string.

        Args:
            is_selected: Whether the cursor is on this item.
            theme: Visual theme for styling.

        Returns:
            Rich markup string to display in the menu.
        """
        raise NotImplementedError


@dataclass
class ActionItem(MenuItem):
    """Selectable action entry.

    Attributes:
        value: Identifier handed back to the caller when the item is chosen.
    """

    value: Any = None

    def render(self, is_selected: bool, theme: Theme = DEFAULT_THEME) -> str:
        label = escape(self.label)
        if not self.enabled:
            return f"[{theme.dim_color}]{label}[/{theme.dim_color}]"
        if is_selected:
            return f"[bold {theme.selected_color}]{label}[/bold {theme.selected_color}]"
        return label


@dataclass
class StatusLine(MenuItem):
    """Non-interactive line of text, escaped so command output is shown verbatim.

    Attributes:
        style: Rich style applied to the whole line (empty for none).
    """

    style: str = ""

    def __init__(self, label: str, style: str = ""):
        super().__init__(key=None, label=label, enabled=False)
        self.style = style

    def render(self, is_selected: bool = False, theme: Theme = DEFAULT_THEME) -> str:
        text = escape(self.label)
        if not self.style:
            return text
        return f"[{self.style}]{text}[/{self.style}]"

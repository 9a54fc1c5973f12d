"""Rich-based menu presentation kit.

A small library for drawing flicker-free CLI menus from an event loop.

Example:
    from rich.live import Live
    from rich_menu import Item, MenuPanel

    panel = MenuPanel(title="Setup")
    items = [Item.action("Install", value="install"), Item.action("Exit", value="exit")]
    with Live(panel.render(items, cursor_pos=0)) as live:
        ...
"""

from .components import ActionItem, MenuItem, StatusLine
from .keys import is_down, is_enter, is_exit, is_interrupt, is_up
from .menu import Item, MenuPanel
from .themes import DEFAULT_THEME, Theme

__all__ = [
    # Main classes
    "MenuPanel",
    "Item",
    # Components
    "MenuItem",
    "ActionItem",
    "StatusLine",
    # Theming
    "Theme",
    "DEFAULT_THEME",
    # Key helpers
    "is_enter",
    "is_exit",
    "is_interrupt",
    "is_up",
    "is_down",
]

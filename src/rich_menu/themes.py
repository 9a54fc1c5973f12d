"""Configurable themes for rich_menu components.

This module provides theming support for menu styling. The Theme dataclass
holds all configurable visual elements (colors, icons, layout).
"""

from dataclasses import dataclass


@dataclass
class Theme:
    """Visual theme for menu components.

    All colors use Rich markup format (e.g., "green", "bold cyan", "dim").

    Attributes:
        selected_color: Color for cursor indicator and highlighted label.
        success_color: Color for successful result messages.
        error_color: Color for failed result messages.
        dim_color: Color for dimmed/secondary text.
        log_color: Color for session log lines.
        border_color: Color for panel border.

        cursor_icon: Character shown next to selected item.
        success_icon: Character prefixed to successful results.
        error_icon: Character prefixed to failed results.
        scroll_up_icon: Character indicating more items above.
        scroll_down_icon: Character indicating more items below.
        spinner: Name of the Rich spinner shown while an action runs.

        panel_width: Fixed width of the menu panel.
        min_visible_items: Minimum items to show before scrolling.
        max_visible_items: Maximum items to show (caps tall terminals).
        panel_padding: Lines reserved for borders/title/footer.
        max_log_lines: Newest log lines kept on screen.
    """

    # Colors
    selected_color: str = "cyan"
    success_color: str = "green"
    error_color: str = "red"
    dim_color: str = "dim"
    log_color: str = "#FFA07A"
    border_color: str = "cyan"

    # Icons
    cursor_icon: str = ">"
    success_icon: str = "✓"
    error_icon: str = "✗"
    scroll_up_icon: str = "↑"
    scroll_down_icon: str = "↓"
    spinner: str = "dots"

    # Layout
    panel_width: int = 100
    min_visible_items: int = 5
    max_visible_items: int = 20
    panel_padding: int = 8
    max_log_lines: int = 12


# Default theme used when none is specified
DEFAULT_THEME = Theme()

"""Keyboard input helpers for rich_menu.

This module provides helper functions for detecting key presses,
replacing repeated inline conditionals with readable function calls.
"""

from __future__ import annotations

import readchar


def is_enter(key: str) -> bool:
    """Check if key is Enter/Return."""
    return key in (readchar.key.ENTER, "\r", "\n")


def is_interrupt(key: str) -> bool:
    """Check if key is Ctrl+C as delivered by a raw-mode terminal."""
    return key in (readchar.key.CTRL_C, "\x03")


def is_exit(key: str) -> bool:
    """Check if key is a quit key (q or Ctrl+C).

    Both bindings are synonyms and are honoured on every screen.
    """
    return key.lower() == "q" or is_interrupt(key)


def is_up(key: str) -> bool:
    """Check if key is up arrow or vim 'k'."""
    return key.lower() == "k" or key == readchar.key.UP


def is_down(key: str) -> bool:
    """Check if key is down arrow or vim 'j'."""
    return key.lower() == "j" or key == readchar.key.DOWN

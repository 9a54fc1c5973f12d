"""niri-setup: interactive Niri installer for FreeBSD."""

__version__ = "0.1.0"

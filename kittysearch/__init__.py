"""Incremental scrollback search overlay for the Kitty terminal."""

__version__ = "0.1.0"
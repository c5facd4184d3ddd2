"""Scaffold Chatterino Lua plugins."""

__version__ = "1.0.0"

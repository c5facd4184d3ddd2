"""Errors raised while gathering input or generating a plugin."""

from __future__ import annotations


class PluginCreatorError(Exception):
    """Base class for everything this tool raises on purpose."""


class UnsupportedPlatformError(PluginCreatorError):
    def __init__(self, platform: str):
        super().__init__(f"Unsupported platform: {platform}")
        self.platform = platform


class InvalidPluginNameError(PluginCreatorError, ValueError):
    pass


class EmptyNameError(InvalidPluginNameError):
    def __init__(self) -> None:
        super().__init__("Plugin name cannot be empty")


class UnknownPermissionError(PluginCreatorError, ValueError):
    def __init__(self, values: list[str]):
        super().__init__(f"Unknown permission(s): {', '.join(values)}")
        self.values = values


class AbortedByUser(PluginCreatorError):
    """Raised when the user interrupts a prompt. Not reported as an error."""

    def __init__(self, message: str = "Aborted by user. Exiting..."):
        super().__init__(message)

"""Locate the Chatterino data directory for the running platform."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from pathlib import Path

from create_chatterino_plugin.errors import UnsupportedPlatformError

WINDOWS_APP_DIR = "Chatterino2"
LINUX_APP_DIR = "chatterino"
MACOS_APP_DIR = "chatterino"

WINDOWS_PLATFORMS = ("win32", "cygwin", "msys")

PLUGINS_DIR_NAME = "Plugins"


def resolve_base_directory(
    platform: str | None = None,
    env: Mapping[str, str] | None = None,
    home: Path | None = None,
) -> Path:
    """Return Chatterino's base data directory.

    Defaults to the current interpreter's platform, environment and home dir.
    On Windows an unset APPDATA yields the relative path ``Chatterino2``.
    """
    platform = sys.platform if platform is None else platform
    env = os.environ if env is None else env

    if platform in WINDOWS_PLATFORMS:
        return Path(env.get("APPDATA", "")) / WINDOWS_APP_DIR

    home = Path.home() if home is None else home
    if platform.startswith("linux"):
        return home / ".local" / "share" / LINUX_APP_DIR
    if platform == "darwin":
        return home / "Library" / "Application Support" / MACOS_APP_DIR

    raise UnsupportedPlatformError(platform)


def plugin_directory(base_dir: Path, name: str) -> Path:
    return base_dir / PLUGINS_DIR_NAME / name

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from create_chatterino_plugin.errors import (
    EmptyNameError,
    InvalidPluginNameError,
    UnknownPermissionError,
)


class Permission(str, Enum):
    FILESYSTEM_READ = "FilesystemRead"
    FILESYSTEM_WRITE = "FilesystemWrite"
    HTTP = "HTTP"


FILESYSTEM_PERMISSIONS = frozenset({Permission.FILESYSTEM_READ, Permission.FILESYSTEM_WRITE})


def validate_plugin_name(name: str) -> str:
    """Return `name` unchanged or raise if it can't be used as a directory name.

    Empty names raise EmptyNameError so the interactive prompt can re-ask.
    """
    if name == "":
        raise EmptyNameError()
    if name in {".", ".."} or "/" in name or "\\" in name or not name.isprintable():
        raise InvalidPluginNameError(f"Invalid plugin name: {name!r}")
    return name


def parse_permissions(raw: str) -> tuple[Permission, ...]:
    """Parse a comma-separated `--permissions` value, keeping order and duplicates."""
    items = [part.strip() for part in raw.split(",")]
    items = [part for part in items if part]

    known = {p.value: p for p in Permission}
    unknown = [item for item in items if item not in known]
    if unknown:
        raise UnknownPermissionError(unknown)
    return tuple(known[item] for item in items)


@dataclass(frozen=True)
class PluginRequest:
    name: str
    permissions: tuple[Permission, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        validate_plugin_name(self.name)
        # Accept any iterable (list from a prompt, tuple from the CLI).
        object.__setattr__(self, "permissions", tuple(Permission(p) for p in self.permissions))

    def has_filesystem(self) -> bool:
        return any(p in FILESYSTEM_PERMISSIONS for p in self.permissions)

    def has_http(self) -> bool:
        return Permission.HTTP in self.permissions

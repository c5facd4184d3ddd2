"""Render the starter ``init.lua`` script."""

from __future__ import annotations

from collections.abc import Iterable

from create_chatterino_plugin.models import FILESYSTEM_PERMISSIONS, Permission

SCRIPT_FILENAME = "init.lua"

FILESYSTEM_COMMAND = "/test-fs"
HTTP_COMMAND = "/test-http"

_FILESYSTEM_BLOCK = f"""\
function cmd_filesystem(ctx)
    -- Add your filesystem operations here
end

c2.register_command("{FILESYSTEM_COMMAND}", cmd_filesystem)
"""

_HTTP_BLOCK = f"""\
function cmd_http(ctx)
    -- Add your HTTP operations here
end

c2.register_command("{HTTP_COMMAND}", cmd_http)
"""


def _lua_string(value: str) -> str:
    return (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )


def _render_init_line(name: str) -> str:
    return f'print("{_lua_string(name)} plugin initialized!")\n\n'


def build_init_lua(name: str, permissions: Iterable[Permission]) -> str:
    """Return init.lua for a plugin.

    One filesystem stub covers both FilesystemRead and FilesystemWrite. The
    filesystem stub always comes before the HTTP stub.
    """
    granted = {Permission(p) for p in permissions}

    content = _render_init_line(name)
    if granted & FILESYSTEM_PERMISSIONS:
        content += _FILESYSTEM_BLOCK
    if Permission.HTTP in granted:
        content += _HTTP_BLOCK
    return content

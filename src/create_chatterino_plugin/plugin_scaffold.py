"""Write a new Chatterino plugin (info.json + init.lua) into the Plugins directory.

The two files are written one after the other with no rollback: if the
second write fails the directory is left half-written for the user to inspect.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from create_chatterino_plugin.cancel import CancelToken
from create_chatterino_plugin.conflict import resolve_conflict
from create_chatterino_plugin.manifest import (
    DEFAULT_MANIFEST,
    MANIFEST_FILENAME,
    ManifestDefaults,
    render_manifest,
)
from create_chatterino_plugin.models import PluginRequest
from create_chatterino_plugin.paths import plugin_directory
from create_chatterino_plugin.script_template import SCRIPT_FILENAME, build_init_lua

logger = logging.getLogger(__name__)

ScaffoldStatus = Literal["created", "overwritten", "aborted"]


@dataclass
class ScaffoldResult:
    plugin_name: str
    plugin_dir: Path
    status: ScaffoldStatus
    files: list[Path] = field(default_factory=list)

    @property
    def aborted(self) -> bool:
        return self.status == "aborted"


class PluginScaffolder:
    def __init__(
        self,
        base_dir: Path,
        confirm_overwrite: Callable[[str], bool],
        *,
        cancel_token: CancelToken | None = None,
        manifest_defaults: ManifestDefaults = DEFAULT_MANIFEST,
    ):
        self.base_dir = base_dir
        self.confirm_overwrite = confirm_overwrite
        self.cancel_token = cancel_token or CancelToken()
        self.manifest_defaults = manifest_defaults

    def scaffold(self, request: PluginRequest) -> ScaffoldResult:
        """Create or overwrite `<base_dir>/Plugins/<name>` for `request`.

        Asks before touching an existing directory. On a decline nothing is
        written and the result's status is "aborted".
        """
        plugin_dir = plugin_directory(self.base_dir, request.name)
        logger.debug("Plugin directory: %s", plugin_dir)

        decision = resolve_conflict(
            plugin_dir.exists(), lambda: self.confirm_overwrite(request.name)
        )
        if not decision.proceed:
            logger.info("Not overwriting existing plugin directory %s", plugin_dir)
            return ScaffoldResult(
                plugin_name=request.name, plugin_dir=plugin_dir, status="aborted"
            )
        if decision.overwrite:
            logger.info("Overwriting plugin files in %s", plugin_dir)

        self.cancel_token.raise_if_cancelled()
        plugin_dir.mkdir(parents=True, exist_ok=True)

        manifest_path = plugin_dir / MANIFEST_FILENAME
        script_path = plugin_dir / SCRIPT_FILENAME
        outputs = [
            (
                manifest_path,
                render_manifest(request.name, request.permissions, self.manifest_defaults),
            ),
            (script_path, build_init_lua(request.name, request.permissions)),
        ]
        for path, content in outputs:
            self.cancel_token.raise_if_cancelled()
            path.write_text(content, encoding="utf-8", newline="")
            logger.debug("Wrote %s (%d bytes)", path, len(content.encode("utf-8")))

        return ScaffoldResult(
            plugin_name=request.name,
            plugin_dir=plugin_dir,
            status="overwritten" if decision.overwrite else "created",
            files=[manifest_path, script_path],
        )

"""Command-line entry point: ``create-chatterino-plugin [pluginName] [-p PERMS]``."""

from __future__ import annotations

import argparse
import logging
import sys

from rich.console import Console

from create_chatterino_plugin import __version__
from create_chatterino_plugin.cancel import CancelToken
from create_chatterino_plugin.config import Settings, get_settings
from create_chatterino_plugin.errors import AbortedByUser
from create_chatterino_plugin.models import PluginRequest, parse_permissions
from create_chatterino_plugin.paths import resolve_base_directory
from create_chatterino_plugin.plugin_scaffold import PluginScaffolder
from create_chatterino_plugin.prompts import Prompter

logger = logging.getLogger(__name__)

console = Console()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-chatterino-plugin",
        description="A CLI tool to create Chatterino plugins",
    )
    parser.add_argument("plugin_name", nargs="?", default=None, help="Name of the plugin")
    parser.add_argument(
        "-p",
        "--permissions",
        default=None,
        help="Plugin permissions (comma-separated): FilesystemRead, FilesystemWrite, HTTP",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        stream=sys.stderr,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def main(
    argv: list[str] | None = None,
    *,
    prompter: Prompter | None = None,
    settings: Settings | None = None,
) -> int:
    args = _build_parser().parse_args(argv)
    prompter = prompter or Prompter(CancelToken(), console)

    try:
        settings = settings or get_settings()
        _configure_logging("DEBUG" if args.verbose else settings.log_level)

        # A blank positional name is treated like a missing one.
        name = (args.plugin_name or "").strip() or prompter.ask_plugin_name()
        if args.permissions:
            permissions = parse_permissions(args.permissions)
        else:
            permissions = prompter.ask_permissions()
        request = PluginRequest(name=name, permissions=tuple(permissions))

        base_dir = settings.base_dir or resolve_base_directory()
        scaffolder = PluginScaffolder(
            base_dir,
            prompter.confirm_overwrite,
            cancel_token=prompter.token,
            manifest_defaults=settings.manifest_defaults(),
        )
        result = scaffolder.scaffold(request)
    except AbortedByUser as exc:
        console.print(f"\n{exc}", style="yellow", markup=False)
        return 1
    except KeyboardInterrupt:
        console.print("\nCtrl + C was pressed. Exiting...", style="yellow")
        return 1
    except Exception as exc:  # noqa: BLE001
        logger.debug("Plugin creation failed", exc_info=True)
        console.print(f"Failed to create plugin: {exc}", style="red", markup=False, soft_wrap=True)
        return 1

    if result.aborted:
        console.print("Plugin creation aborted.", style="yellow")
        return 0

    console.print(
        f'Plugin "{result.plugin_name}" created successfully!', style="green", markup=False
    )
    console.print(f"  {result.plugin_dir}", style="dim", soft_wrap=True, markup=False)
    return 0


def run() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    run()

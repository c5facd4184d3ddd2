"""Interactive prompts."""

from __future__ import annotations

import logging
from collections.abc import Callable

import questionary
from rich.console import Console

from create_chatterino_plugin.cancel import CancelToken
from create_chatterino_plugin.errors import AbortedByUser, InvalidPluginNameError
from create_chatterino_plugin.models import Permission, validate_plugin_name

logger = logging.getLogger(__name__)


class Prompter:
    """questionary-backed prompts.

    A Ctrl+C (or EOF) at any prompt cancels the token and raises AbortedByUser.
    """

    def __init__(self, token: CancelToken | None = None, console: Console | None = None):
        self.token = token or CancelToken()
        self.console = console or Console()

    def _ask(self, build: Callable[[], questionary.Question]):
        # The question is only built once the token has been checked.
        self.token.raise_if_cancelled()
        try:
            return build().unsafe_ask()
        except (KeyboardInterrupt, EOFError):
            self.token.cancel()
            raise AbortedByUser() from None

    def ask_plugin_name(self) -> str:
        while True:
            answer = self._ask(lambda: questionary.text("What is the name of your plugin?"))
            try:
                return validate_plugin_name((answer or "").strip())
            except InvalidPluginNameError as exc:
                logger.debug("Rejected plugin name %r: %s", answer, exc)
                self.console.print(str(exc), style="yellow", markup=False)

    def ask_permissions(self) -> list[Permission]:
        choices = [questionary.Choice(title=p.value, value=p) for p in Permission]
        answer = self._ask(
            lambda: questionary.checkbox(
                "Select the permissions your plugin needs:", choices=choices
            )
        )
        return list(answer or [])

    def confirm_overwrite(self, name: str) -> bool:
        answer = self._ask(
            lambda: questionary.confirm(
                f'A directory named "{name}" already exists. Do you want to overwrite it?',
                default=False,
            )
        )
        return bool(answer)

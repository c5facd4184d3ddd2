from __future__ import annotations

from create_chatterino_plugin.errors import AbortedByUser


class CancelToken:
    """Set once the user interrupts; checked before every prompt and write."""

    def __init__(self) -> None:
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True

    def raise_if_cancelled(self) -> None:
        if self._cancelled:
            raise AbortedByUser()

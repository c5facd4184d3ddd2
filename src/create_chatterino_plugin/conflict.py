from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class ConflictDecision:
    proceed: bool
    overwrite: bool


def resolve_conflict(exists: bool, confirm: Callable[[], bool]) -> ConflictDecision:
    """Decide what to do about an existing plugin directory.

    `confirm` is only called when the directory exists. Anything falsy
    (including None from a dismissed prompt) counts as a decline.
    """
    if not exists:
        return ConflictDecision(proceed=True, overwrite=False)
    if confirm():
        return ConflictDecision(proceed=True, overwrite=True)
    return ConflictDecision(proceed=False, overwrite=False)

"""Exception types raised by the board core.

WHY: Callers (CLI, UI) need to tell a missed tap apart from a programming
error. Lookups that miss raise KeyNotFound; operations that need an open
category raise InvalidState.

RULES:
- KeyNotFound is also a KeyError so plain ``except KeyError`` still works
- InvalidState is also a RuntimeError
- Write paths never raise these for bad input (see AddResult.IGNORED)
"""

from __future__ import annotations

from typing import Any


class AACBoardError(Exception):
    """Base class for all aac_board errors."""


class KeyNotFound(AACBoardError, KeyError):
    """A key was looked up in a map, category, or board and is not there."""

    def __init__(self, key: Any) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return "Key not found: {!r}".format(self.key)


class InvalidState(AACBoardError, RuntimeError):
    """The board is not in a navigation state that allows the operation."""

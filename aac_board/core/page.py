"""The page interface shared by SymbolCategory and SymbolBoard.

WHY: The host UI shows "whatever page is current" — the top level of the
board or one open category — and handles taps the same way in both
cases. An abstract base class lets the UI call select(), list_entries(),
label() and contains_key() without checking which kind of page it holds.

HOW: Page is an ABC with the five page operations. AddResult is the
explicit outcome of add_entry(), so lenient ingest is a visible return
value instead of a swallowed exception. is_valid_key() and
is_valid_text() define what "malformed input" means for every write path.

RULES:
- Subclasses MUST implement every abstract method
- add_entry() never raises for bad input; it returns AddResult.IGNORED
- select() raises KeyNotFound on a miss
- A valid key is a non-empty str with no whitespace that does not start with ">"
- Valid text is a str without line breaks (may be empty)
"""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import Any, List

# Marks a child line in the board file; a key starting with it would be
# read back as a child entry.
CHILD_MARKER = ">"


class AddResult(str, enum.Enum):
    """Outcome of an add_entry() call.

    HOW: Inherits from str so values print and compare cleanly.

    RULES:
    - added: the key was new and is now last in display order
    - replaced: the key already existed; its value changed in place
    - ignored: the input was malformed and nothing changed
    """

    ADDED = "added"
    REPLACED = "replaced"
    IGNORED = "ignored"

    @property
    def accepted(self) -> bool:
        return self is not AddResult.IGNORED


def is_valid_key(key: Any) -> bool:
    """Return True if key can be stored and written back to a board file."""
    if not isinstance(key, str) or not key:
        return False
    if key.startswith(CHILD_MARKER):
        return False
    return not any(ch.isspace() for ch in key)


def is_valid_text(text: Any) -> bool:
    """Return True if text can be stored on one board-file line."""
    return isinstance(text, str) and "\n" not in text and "\r" not in text


class Page(ABC):
    """Abstract page of selectable symbols.

    To add a new kind of page:
    1. Subclass Page
    2. Implement add_entry, select, list_entries, label and contains_key
    """

    @abstractmethod
    def add_entry(self, key: str, text: str) -> AddResult:
        """Add or update an entry on this page.

        Args:
            key: Image location of the symbol.
            text: Spoken text (in a category) or category name (at the top).

        Returns:
            What happened; AddResult.IGNORED for malformed input.
        """

    @abstractmethod
    def select(self, key: str) -> str:
        """Handle a tap on the symbol at key and return text to speak.

        Raises:
            KeyNotFound: If key is not on this page.
        """

    @abstractmethod
    def list_entries(self) -> List[str]:
        """Image locations on this page in display order."""

    @abstractmethod
    def label(self) -> str:
        """Name shown for this page."""

    @abstractmethod
    def contains_key(self, key: str) -> bool:
        """True if key is on this page."""

    def __len__(self) -> int:
        return len(self.list_entries())

    def __contains__(self, key: object) -> bool:
        return self.contains_key(key)  # type: ignore[arg-type]

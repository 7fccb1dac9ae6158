"""A single named category of symbols.

WHY: Inside a category, each symbol's image location maps to the phrase
the device speaks when it is tapped. The category also remembers the
order symbols were added in, which is the order they are displayed.

HOW: One OrderedMap[image_key, spoken_text] plus a display name. All page
operations are thin wrappers over the map.

RULES:
- add_entry() on an existing image key replaces its text, order unchanged
- add_entry() with a malformed key or text returns AddResult.IGNORED
- select() and remove_entry() raise KeyNotFound on a miss
- list_entries() is in insertion order and empty for an empty category
"""

from __future__ import annotations

import logging
from typing import List, Tuple

from aac_board.core.ordered_map import OrderedMap
from aac_board.core.page import AddResult, Page, is_valid_key, is_valid_text

logger = logging.getLogger(__name__)


class SymbolCategory(Page):
    """Named group of image → spoken text pairs."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._entries: OrderedMap[str, str] = OrderedMap()

    def add_entry(self, key: str, text: str) -> AddResult:
        if not is_valid_key(key) or not is_valid_text(text):
            logger.warning("Ignoring malformed entry %r -> %r in category %r", key, text, self.name)
            return AddResult.IGNORED
        existed = self._entries.has_key(key)
        self._entries.set(key, text)
        return AddResult.REPLACED if existed else AddResult.ADDED

    def select(self, key: str) -> str:
        return self._entries.get(key)

    def remove_entry(self, key: str) -> str:
        """Remove an image from the category and return its spoken text."""
        return self._entries.remove(key)

    def list_entries(self) -> List[str]:
        return list(self._entries.keys_in_order())

    def entries(self) -> List[Tuple[str, str]]:
        """(image_key, spoken_text) pairs in display order."""
        return self._entries.items()

    def label(self) -> str:
        return self.name

    def contains_key(self, key: str) -> bool:
        return self._entries.has_key(key)

    def __len__(self) -> int:
        return self._entries.size()

    def __repr__(self) -> str:
        return "SymbolCategory({!r}, {} entries)".format(self.name, len(self))

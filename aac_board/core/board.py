"""Two-level symbol board with navigation state.

WHY: The device starts on a page of category symbols. Tapping one opens
that category; tapping a symbol inside it speaks a phrase. The board is
the object the UI talks to, and it behaves like whichever page is
currently shown.

HOW: An OrderedMap[top_key, SymbolCategory] holds the categories. A
NavigationDepth flag and an optional current category form a two-state
machine:

  TOP ──select(top_key)──▶ IN_CATEGORY ──select(image_key)──▶ IN_CATEGORY
   ▲                            │
   └────────── reset() ─────────┘

Every page operation either acts on the top-level map (TOP) or delegates
to the current category (IN_CATEGORY).

RULES:
- Initial state is TOP with no current category
- depth == IN_CATEGORY implies current category is set and came from the map
- A failed select() raises KeyNotFound and leaves the state unchanged
- select() at TOP returns "" (nothing to speak)
- add_entry() at TOP creates a new empty category named by the text;
  this is the only way categories are created
- reset() is valid from either state
- label() at TOP is ""
"""

from __future__ import annotations

import enum
import logging
from typing import List, Optional, Tuple

from aac_board.core.category import SymbolCategory
from aac_board.core.ordered_map import OrderedMap
from aac_board.core.page import AddResult, Page, is_valid_key, is_valid_text
from aac_board.errors import InvalidState

logger = logging.getLogger(__name__)


class NavigationDepth(str, enum.Enum):
    """Which page the board is currently showing."""

    TOP = "top"
    IN_CATEGORY = "in_category"


class SymbolBoard(Page):
    """Top-level map of categories plus the current navigation state."""

    def __init__(self) -> None:
        self._categories: OrderedMap[str, SymbolCategory] = OrderedMap()
        self._depth = NavigationDepth.TOP
        self._current: Optional[SymbolCategory] = None

    # -- navigation state ----------------------------------------------------

    @property
    def depth(self) -> NavigationDepth:
        return self._depth

    @property
    def current_category(self) -> SymbolCategory:
        """The open category.

        Raises:
            InvalidState: If no category is open.
        """
        if self._depth is not NavigationDepth.IN_CATEGORY or self._current is None:
            raise InvalidState("No category is open; select a top-level symbol first")
        return self._current

    def reset(self) -> None:
        """Return to the top level and forget the open category."""
        self._depth = NavigationDepth.TOP
        self._current = None
        logger.debug("Board reset to top level")

    # -- category access -----------------------------------------------------

    def category(self, key: str) -> SymbolCategory:
        """Return the category bound to a top-level key, regardless of state."""
        return self._categories.get(key)

    def categories(self) -> List[Tuple[str, SymbolCategory]]:
        """(top_key, category) pairs in display order, regardless of state."""
        return self._categories.items()

    # -- page operations -----------------------------------------------------

    def select(self, key: str) -> str:
        if self._depth is NavigationDepth.TOP:
            found = self._categories.get(key)
            self._current = found
            self._depth = NavigationDepth.IN_CATEGORY
            logger.debug("Opened category %r via %r", found.name, key)
            return ""
        return self.current_category.select(key)

    def add_entry(self, key: str, text: str) -> AddResult:
        if self._depth is NavigationDepth.IN_CATEGORY:
            return self.current_category.add_entry(key, text)
        if not is_valid_key(key) or not is_valid_text(text):
            logger.warning("Ignoring malformed category %r -> %r", key, text)
            return AddResult.IGNORED
        existed = self._categories.has_key(key)
        if existed:
            logger.info("Replacing category under %r with new empty category %r", key, text)
        self._categories.set(key, SymbolCategory(text))
        return AddResult.REPLACED if existed else AddResult.ADDED

    def remove_entry(self, key: str) -> str:
        """Remove a symbol from the current page.

        At the top level this removes a whole category and returns its
        name; inside a category it removes one image and returns its text.

        Raises:
            KeyNotFound: If key is not on the current page.
        """
        if self._depth is NavigationDepth.IN_CATEGORY:
            return self.current_category.remove_entry(key)
        return self._categories.remove(key).name

    def list_entries(self) -> List[str]:
        if self._depth is NavigationDepth.IN_CATEGORY:
            return self.current_category.list_entries()
        return list(self._categories.keys_in_order())

    def label(self) -> str:
        if self._depth is NavigationDepth.IN_CATEGORY:
            return self.current_category.label()
        return ""

    def contains_key(self, key: str) -> bool:
        if self._depth is NavigationDepth.IN_CATEGORY:
            return self.current_category.contains_key(key)
        return self._categories.has_key(key)

    def __repr__(self) -> str:
        return "SymbolBoard({} categories, depth={})".format(
            self._categories.size(), self._depth.value,
        )

"""AAC Board — two-level picture-symbol catalog for augmentative communication.

WHY: An AAC device shows a grid of picture symbols. Tapping a top-level
symbol opens its category; tapping a symbol inside a category speaks a
phrase. The data behind that grid is small but must keep a stable display
order and never crash on an imperfect board file.

HOW: Three layers, leaf-first:
  OrderedMap     — insertion-ordered key/value container (core/ordered_map.py)
  SymbolCategory — one named group of image → spoken text pairs
  SymbolBoard    — top-level map of categories plus navigation state
Board files are read and written by core/board_file.py; exports go through
the pluggable formatters in formatters/.

RULES:
- SymbolCategory and SymbolBoard share the Page interface (core/page.py)
- Reads (select, get) raise KeyNotFound; writes (add_entry) never raise
- Insertion order is the display order everywhere
"""

from aac_board.core.board import NavigationDepth, SymbolBoard
from aac_board.core.board_file import load_board, read_board_file, save_board, write_board_file
from aac_board.core.category import SymbolCategory
from aac_board.core.ordered_map import OrderedMap
from aac_board.core.page import AddResult, Page
from aac_board.errors import AACBoardError, InvalidState, KeyNotFound

__version__ = "0.1.0"

__all__ = [
    "AACBoardError",
    "AddResult",
    "InvalidState",
    "KeyNotFound",
    "NavigationDepth",
    "OrderedMap",
    "Page",
    "SymbolBoard",
    "SymbolCategory",
    "load_board",
    "read_board_file",
    "save_board",
    "write_board_file",
]

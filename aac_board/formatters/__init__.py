"""Export formatter registry.

WHY: The CLI needs a single lookup to find the right formatter by name.
A central dict makes it trivial to add new formats: create the formatter
class, import it here, add one line.

HOW: FORMATTERS maps string keys to formatter *classes* (not instances).
Callers instantiate as needed: ``formatter = FORMATTERS["json"]()``.

RULES:
- Keys are snake_case identifiers (used in the --formats CLI flag)
- Values are BaseFormatter subclasses (not instances)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from aac_board.formatters.board_text import BoardTextFormatter
from aac_board.formatters.json_export import JsonBoardFormatter
from aac_board.formatters.outline import OutlineFormatter

if TYPE_CHECKING:
    from aac_board.formatters.base import BaseFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "board_text": BoardTextFormatter,
    "json": JsonBoardFormatter,
    "outline": OutlineFormatter,
}

"""Native board file formatter.

WHY: Exporting to the same line format the board was loaded from gives a
clean copy of the board (for backup or for another device) next to the
other export formats.

HOW: Delegates to core.board_file.save_board() and joins the lines with
newlines, adding a trailing newline when the board is not empty.

RULES:
- Output is byte-for-byte what write_board_file() would write
- Output suffix: "-board.txt"
- Media type: "text/plain"
"""

from __future__ import annotations

from typing import List

from aac_board.core.board import SymbolBoard
from aac_board.core.board_file import save_board
from aac_board.formatters.base import BaseFormatter, FormatterOutput


class BoardTextFormatter(BaseFormatter):
    """Formatter that writes the native board file format."""

    @property
    def name(self) -> str:
        return "Board Text"

    def format(self, board: SymbolBoard) -> List[FormatterOutput]:
        lines = save_board(board)
        content = "\n".join(lines)
        if content:
            content += "\n"
        return [
            FormatterOutput(
                suffix="-board.txt",
                content=content,
                media_type="text/plain",
            )
        ]

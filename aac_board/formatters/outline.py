"""Readable outline formatter for caregivers and therapists.

WHY: The board file is dense and keyed by image paths. People reviewing
a board want to see category names and the phrases under them.

HOW: One block per category: a "Label:" header line, then one
"  image -> text" line per entry. A blank line separates blocks.
Empty categories show "  (empty)".

RULES:
- Categories and entries in display order
- Output suffix: "-outline.txt"
- Media type: "text/plain"
"""

from __future__ import annotations

from typing import List

from aac_board.core.board import SymbolBoard
from aac_board.formatters.base import BaseFormatter, FormatterOutput


class OutlineFormatter(BaseFormatter):
    """Formatter that produces a label-grouped plain text outline."""

    @property
    def name(self) -> str:
        return "Outline"

    def format(self, board: SymbolBoard) -> List[FormatterOutput]:
        blocks: List[str] = []
        for key, category in board.categories():
            lines = ["{} ({}):".format(category.name, key)]
            entries = category.entries()
            if not entries:
                lines.append("  (empty)")
            for image_key, text in entries:
                lines.append("  {} -> {}".format(image_key, text))
            blocks.append("\n".join(lines))

        content = "\n\n".join(blocks)
        if content:
            content += "\n"

        return [
            FormatterOutput(
                suffix="-outline.txt",
                content=content,
                media_type="text/plain",
            )
        ]

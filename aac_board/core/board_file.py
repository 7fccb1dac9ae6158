"""Reading and writing the line-oriented board file format.

WHY: Boards are edited by hand and shared as plain text files. Loading
must never abort on an imperfect file, and saving an unchanged board must
reproduce the file line for line so diffs stay clean.

HOW: Each category is a header line followed by its child lines:

  img/food/plate.png food
  >img/food/fries.png french fries
  >img/food/watermelon.png watermelon
  img/clothing/hanger.png clothing
  >img/clothing/shirt.png collared shirt

load_board() splits each line on its FIRST space, so labels and spoken
text keep their internal spacing exactly. Children are added to the
category declared by the most recent valid header. save_board() walks the
categories in insertion order and emits the same shape back.

RULES:
- Header line: "<top_key> <label>"; child line: "><image_key> <text>"
- Blank lines are skipped
- Malformed lines are skipped with a warning; the load always completes
- A child line with no valid header before it is skipped
- save_board() output does not depend on the board's navigation state
- Files are read and written with BOARD_FILE_ENCODING unless overridden
- A missing file loads as an empty board
- Lines that do not decode are skipped like other malformed lines
- A failed encode never truncates the existing file
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

from aac_board.config import BOARD_FILE_ENCODING
from aac_board.core.board import SymbolBoard
from aac_board.core.page import CHILD_MARKER

logger = logging.getLogger(__name__)

_SEPARATOR = " "


def load_board(lines: Iterable[str]) -> SymbolBoard:
    """Build a board from board-file lines.

    Args:
        lines: Any iterable of lines, with or without line terminators
               (an open text file works).

    Returns:
        A board at the top level containing every well-formed category
        and entry, in file order.
    """
    board = SymbolBoard()
    current_key: Optional[str] = None
    categories = 0
    entries = 0

    for line_no, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue

        if line.startswith(CHILD_MARKER):
            if current_key is None:
                logger.warning("Line %d: entry outside any category, skipped: %r", line_no, line)
                continue
            key, sep, text = line[len(CHILD_MARKER):].partition(_SEPARATOR)
            if not sep:
                logger.warning("Line %d: entry has no spoken text, skipped: %r", line_no, line)
                continue
            if board.category(current_key).add_entry(key, text).accepted:
                entries += 1
            continue

        key, sep, label = line.partition(_SEPARATOR)
        if not sep:
            logger.warning("Line %d: category has no label, skipped: %r", line_no, line)
            current_key = None
            continue
        if board.add_entry(key, label).accepted:
            current_key = key
            categories += 1
        else:
            current_key = None

    logger.info("Loaded board: %d categories, %d entries", categories, entries)
    return board


def save_board(board: SymbolBoard) -> List[str]:
    """Serialize a board to board-file lines (without line terminators)."""
    lines: List[str] = []
    for key, category in board.categories():
        lines.append("{}{}{}".format(key, _SEPARATOR, category.name))
        for image_key, text in category.entries():
            lines.append("{}{}{}{}".format(CHILD_MARKER, image_key, _SEPARATOR, text))
    return lines


def _decode_lines(raw_lines: Iterable[bytes], encoding: str) -> Iterator[str]:
    """Decode file lines one at a time.

    A line that does not decode is logged and replaced by a blank line,
    which load_board() skips, so line numbers in later warnings stay right.
    """
    for line_no, raw in enumerate(raw_lines, start=1):
        try:
            yield raw.decode(encoding)
        except UnicodeDecodeError:
            logger.warning("Line %d: not valid %s, skipped: %r", line_no, encoding, raw)
            yield ""


def read_board_file(path: str | Path, encoding: str = BOARD_FILE_ENCODING) -> SymbolBoard:
    """Load a board from a file on disk.

    A missing file yields an empty board so a new device can start from
    nothing and save later. Lines that are not valid in the encoding are
    skipped like any other malformed line.
    """
    path = Path(path)
    if not path.is_file():
        logger.warning("Board file not found, starting with an empty board: %s", path)
        return SymbolBoard()
    with open(path, "rb") as f:
        return load_board(_decode_lines(f, encoding))


def write_board_file(
    path: str | Path,
    board: SymbolBoard,
    encoding: str = BOARD_FILE_ENCODING,
) -> Path:
    """Write a board to disk, one line per header or entry.

    The content is encoded before the file is opened, so a board that
    cannot be encoded leaves the existing file untouched.

    Returns:
        The path written to.

    Raises:
        UnicodeEncodeError: If the board has text the encoding cannot hold.
        OSError: If the file cannot be written.
    """
    path = Path(path)
    lines = save_board(board)
    content = "\n".join(lines) + "\n" if lines else ""
    data = content.encode(encoding)
    path.write_bytes(data)
    logger.info("Saved board to %s (%d lines)", path, len(lines))
    return path

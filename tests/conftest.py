"""Shared test fixtures for the aac_board test suite.

WHY: Most test modules need the same small board: two categories, three
entries, in a fixed order. Centralizing it here keeps every test working
from the same authoritative sample.

HOW: SAMPLE_LINES is the board file from the format documentation.
Fixtures provide the raw lines, a loaded board, and a board file on disk.

RULES:
- SAMPLE_LINES order is the expected insertion order everywhere
- File fixtures live under tmp_path for isolation
"""

from typing import List

import pytest

from aac_board.core.board import SymbolBoard
from aac_board.core.board_file import load_board

SAMPLE_LINES: List[str] = [
    "img/food/plate.png food",
    ">img/food/fries.png french fries",
    ">img/food/watermelon.png watermelon",
    "img/clothing/hanger.png clothing",
    ">img/clothing/shirt.png collared shirt",
]

FOOD_KEY = "img/food/plate.png"
CLOTHING_KEY = "img/clothing/hanger.png"


@pytest.fixture
def sample_lines() -> List[str]:
    """The sample board file as a list of lines without terminators."""
    return list(SAMPLE_LINES)


@pytest.fixture
def sample_board() -> SymbolBoard:
    """A freshly loaded board at the top level."""
    return load_board(SAMPLE_LINES)


@pytest.fixture
def sample_board_file(tmp_path):
    """The sample board written to disk with a trailing newline."""
    path = tmp_path / "AACMappings.txt"
    path.write_text("\n".join(SAMPLE_LINES) + "\n", encoding="utf-8")
    return path

"""Abstract base formatter and output container.

WHY: A board can be exported in several forms (the native board file,
JSON for other AAC tools, a readable outline for caregivers). This base
class gives them one interface so the CLI can run any of them generically.

HOW: BaseFormatter is an ABC with two requirements — a ``name`` property
and a ``format()`` method. FormatterOutput is a plain dataclass that
bundles a file suffix with its content and MIME type.

RULES:
- Subclasses MUST implement ``name`` (human-readable) and ``format()``
- ``format()`` returns a list of outputs, usually one
- ``suffix`` starts with a hyphen, e.g. ``"-board.json"``
- The caller is responsible for prepending the board filename stem
- Formatters read the board through categories() and never change its
  navigation state
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from aac_board.core.board import SymbolBoard


@dataclass
class FormatterOutput:
    """One output file produced by a formatter.

    Attributes:
        suffix: File suffix appended to the board stem,
                e.g. ``"-board.json"`` → ``"AACMappings-board.json"``.
        content: The file content.
        media_type: MIME type for the content, e.g. ``"application/json"``.
    """

    suffix: str
    content: str
    media_type: str


class BaseFormatter(ABC):
    """Abstract base for all board export formatters.

    To add a new export format:
    1. Create a new file in formatters/
    2. Subclass BaseFormatter
    3. Implement format() and name
    4. Register in FORMATTERS dict in formatters/__init__.py
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'Board JSON'."""

    @abstractmethod
    def format(self, board: SymbolBoard) -> list[FormatterOutput]:
        """Convert the board into one or more output files.

        Args:
            board: The board to export. Its navigation state is ignored.

        Returns:
            List of FormatterOutput objects.
        """

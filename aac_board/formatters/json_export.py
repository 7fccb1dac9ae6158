"""Board JSON export formatter.

WHY: Other AAC tools and web front ends consume boards as JSON. A schema
keeps the export shape stable, and validating before returning catches
a broken export before it reaches another device.

HOW: Walks the categories in display order and builds:

  {"version": "1.0",
   "categories": [{"key": ..., "label": ...,
                   "entries": [{"key": ..., "text": ...}, ...]}, ...]}

The dict is validated with jsonschema against BOARD_SCHEMA, then dumped
with two-space indentation and non-ASCII characters kept as-is.

RULES:
- Category and entry order follow the board's insertion order
- Validate against BOARD_SCHEMA before returning; raise on failure
- Output suffix: "-board.json"
- Media type: "application/json"
"""

from __future__ import annotations

import json
from typing import Any, List

import jsonschema

from aac_board.core.board import SymbolBoard
from aac_board.formatters.base import BaseFormatter, FormatterOutput

SCHEMA_VERSION = "1.0"

_ENTRY_SCHEMA: dict[str, Any] = {
    "type": "object",
    "required": ["key", "text"],
    "additionalProperties": False,
    "properties": {
        "key": {"type": "string", "minLength": 1, "pattern": "^[^>\\s]\\S*$"},
        "text": {"type": "string"},
    },
}

BOARD_SCHEMA: dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "AAC board",
    "type": "object",
    "required": ["version", "categories"],
    "additionalProperties": False,
    "properties": {
        "version": {"const": SCHEMA_VERSION},
        "categories": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["key", "label", "entries"],
                "additionalProperties": False,
                "properties": {
                    "key": {"type": "string", "minLength": 1, "pattern": "^[^>\\s]\\S*$"},
                    "label": {"type": "string"},
                    "entries": {"type": "array", "items": _ENTRY_SCHEMA},
                },
            },
        },
    },
}


def board_to_dict(board: SymbolBoard) -> dict[str, Any]:
    """Build the JSON-ready dict for a board (not validated)."""
    return {
        "version": SCHEMA_VERSION,
        "categories": [
            {
                "key": key,
                "label": category.name,
                "entries": [
                    {"key": image_key, "text": text}
                    for image_key, text in category.entries()
                ],
            }
            for key, category in board.categories()
        ],
    }


class JsonBoardFormatter(BaseFormatter):
    """Formatter that produces schema-validated board JSON."""

    @property
    def name(self) -> str:
        return "Board JSON"

    def format(self, board: SymbolBoard) -> List[FormatterOutput]:
        """Convert the board into a JSON document.

        Raises:
            jsonschema.ValidationError: If the generated JSON does not
                match BOARD_SCHEMA.
        """
        output = board_to_dict(board)
        jsonschema.validate(instance=output, schema=BOARD_SCHEMA)
        return [
            FormatterOutput(
                suffix="-board.json",
                content=json.dumps(output, indent=2, ensure_ascii=False) + "\n",
                media_type="application/json",
            )
        ]

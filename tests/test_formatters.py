"""Unit tests for the export formatters.

WHY: Exports are read by other tools and by people. A malformed JSON
export or a reordered outline would confuse both.

HOW: Each formatter is run against the sample board:
  - Board text: identical to save_board() output
  - JSON: schema validation, order, content
  - Outline: label headers and entry lines
  - Registry: every key maps to a working formatter
"""

import json

import jsonschema
import pytest

from aac_board.core.board import SymbolBoard
from aac_board.formatters import FORMATTERS
from aac_board.formatters.base import BaseFormatter
from aac_board.formatters.board_text import BoardTextFormatter
from aac_board.formatters.json_export import BOARD_SCHEMA, JsonBoardFormatter, board_to_dict
from aac_board.formatters.outline import OutlineFormatter


class TestBoardText:

    def test_matches_sample_file(self, sample_board, sample_lines):
        [output] = BoardTextFormatter().format(sample_board)
        assert output.content == "\n".join(sample_lines) + "\n"
        assert output.suffix == "-board.txt"
        assert output.media_type == "text/plain"

    def test_empty_board(self):
        [output] = BoardTextFormatter().format(SymbolBoard())
        assert output.content == ""


class TestJson:

    def test_output_validates(self, sample_board):
        [output] = JsonBoardFormatter().format(sample_board)
        data = json.loads(output.content)
        jsonschema.validate(instance=data, schema=BOARD_SCHEMA)
        assert output.suffix == "-board.json"
        assert output.media_type == "application/json"

    def test_structure_and_order(self, sample_board):
        data = json.loads(JsonBoardFormatter().format(sample_board)[0].content)
        assert data["version"] == "1.0"
        assert [c["label"] for c in data["categories"]] == ["food", "clothing"]
        assert data["categories"][0]["entries"] == [
            {"key": "img/food/fries.png", "text": "french fries"},
            {"key": "img/food/watermelon.png", "text": "watermelon"},
        ]

    def test_non_ascii_kept(self):
        board = SymbolBoard()
        board.add_entry("img/mat.png", "mat")
        board.select("img/mat.png")
        board.add_entry("img/kaka.png", "kaka på fatet")
        content = JsonBoardFormatter().format(board)[0].content
        assert "kaka på fatet" in content

    def test_schema_rejects_bad_key(self, sample_board):
        data = board_to_dict(sample_board)
        data["categories"][0]["key"] = "has space"
        with pytest.raises(jsonschema.ValidationError):
            jsonschema.validate(instance=data, schema=BOARD_SCHEMA)

    def test_does_not_change_navigation(self, sample_board):
        sample_board.select("img/food/plate.png")
        JsonBoardFormatter().format(sample_board)
        assert sample_board.label() == "food"


class TestOutline:

    def test_outline_content(self, sample_board):
        [output] = OutlineFormatter().format(sample_board)
        assert output.content == (
            "food (img/food/plate.png):\n"
            "  img/food/fries.png -> french fries\n"
            "  img/food/watermelon.png -> watermelon\n"
            "\n"
            "clothing (img/clothing/hanger.png):\n"
            "  img/clothing/shirt.png -> collared shirt\n"
        )

    def test_empty_category_marked(self):
        board = SymbolBoard()
        board.add_entry("img/toys/ball.png", "toys")
        content = OutlineFormatter().format(board)[0].content
        assert content == "toys (img/toys/ball.png):\n  (empty)\n"


class TestRegistry:

    def test_keys(self):
        assert set(FORMATTERS) == {"board_text", "json", "outline"}

    @pytest.mark.parametrize("key", sorted(FORMATTERS))
    def test_every_formatter_runs(self, key, sample_board):
        formatter = FORMATTERS[key]()
        assert isinstance(formatter, BaseFormatter)
        assert formatter.name
        outputs = formatter.format(sample_board)
        assert outputs and all(o.suffix.startswith("-") for o in outputs)

"""Tests for the command-line interface.

WHY: The CLI is how boards are tried out and exported outside the device.
Spoken text must reach stdout and nothing else, misses must not end the
session, and exports must land where the user asked.

HOW: run_session() is driven with io.StringIO streams. main() is called
with explicit argv, stdin is monkeypatched, and tmp_path holds all files.

RULES:
- Spoken text is checked on the stdout stream only
- Status output goes to stderr (checked via capsys where relevant)
"""

import io
import json

import pytest

from aac_board.cli import _resolve_output_path, build_parser, export_board, main, run_session
from aac_board.core.board import NavigationDepth
from aac_board.core.board_file import read_board_file


def _run(board, script, **kwargs):
    out = io.StringIO()
    run_session(board, io.StringIO(script), out, **kwargs)
    return out.getvalue()


class TestSession:

    def test_tap_category_then_entry_speaks(self, sample_board):
        spoken = _run(sample_board, "img/food/plate.png\nimg/food/fries.png\n")
        assert spoken == "french fries\n"
        assert sample_board.depth is NavigationDepth.IN_CATEGORY

    def test_unknown_tap_is_ignored(self, sample_board, capsys):
        spoken = _run(sample_board, "img/food/plate.png\nimg/food/nope.png\nimg/food/watermelon.png\n")
        assert spoken == "watermelon\n"
        assert "No symbol 'img/food/nope.png'" in capsys.readouterr().err

    def test_reset_command(self, sample_board):
        spoken = _run(sample_board, "img/food/plate.png\n:reset\nimg/clothing/hanger.png\nimg/clothing/shirt.png\n")
        assert spoken == "collared shirt\n"

    def test_quit_stops_reading(self, sample_board):
        spoken = _run(sample_board, "img/food/plate.png\n:quit\nimg/food/fries.png\n")
        assert spoken == ""

    def test_add_command_creates_category_and_entry(self, sample_board):
        script = ":add img/toys/ball.png toys\nimg/toys/ball.png\n:add img/toys/car.png toy car\nimg/toys/car.png\n"
        assert _run(sample_board, script) == "toy car\n"

    def test_add_malformed_is_reported(self, sample_board, capsys):
        _run(sample_board, ":add\n")
        assert "ignored" in capsys.readouterr().err
        assert len(sample_board.categories()) == 2

    def test_remove_command(self, sample_board, capsys):
        _run(sample_board, ":remove img/food/plate.png\n:remove img/none.png\n")
        assert sample_board.list_entries() == ["img/clothing/hanger.png"]
        assert "No symbol 'img/none.png'" in capsys.readouterr().err

    def test_label_and_list(self, sample_board, capsys):
        _run(sample_board, "img/food/plate.png\n:label\n:list\n")
        err = capsys.readouterr().err
        assert "[food] 2 symbol(s)" in err
        assert "  img/food/watermelon.png" in err

    def test_unknown_command(self, sample_board, capsys):
        _run(sample_board, ":dance\n")
        assert "Unknown command :dance" in capsys.readouterr().err

    def test_save_command(self, sample_board, tmp_path):
        target = tmp_path / "saved.txt"
        _run(sample_board, ":save {}\n".format(target))
        assert read_board_file(target).list_entries() == sample_board.list_entries()

    def test_save_without_path(self, sample_board, capsys):
        _run(sample_board, ":save\n")
        assert "No file to save to" in capsys.readouterr().err

    def test_autosave(self, sample_board, tmp_path):
        target = tmp_path / "auto.txt"
        _run(sample_board, ":add img/toys/ball.png toys\n", save_path=target, autosave=True)
        assert "img/toys/ball.png toys" in target.read_text(encoding="utf-8")

    def test_failed_save_keeps_session_running(self, sample_board, tmp_path, capsys):
        target = tmp_path / "nope" / "x.txt"
        spoken = _run(sample_board, ":save {}\nimg/food/plate.png\nimg/food/fries.png\n".format(target))
        assert spoken == "french fries\n"
        assert "Could not save to {}".format(target) in capsys.readouterr().err
        assert not target.exists()

    def test_failed_autosave_is_reported(self, sample_board, tmp_path, capsys):
        target = tmp_path / "nope" / "auto.txt"
        _run(sample_board, ":add img/toys/ball.png toys\n", save_path=target, autosave=True)
        assert "Could not save to {}".format(target) in capsys.readouterr().err
        assert sample_board.contains_key("img/toys/ball.png")


class TestExport:

    def test_resolve_output_path_conflict(self, tmp_path):
        (tmp_path / "b-board.json").write_text("{}", encoding="utf-8")
        assert _resolve_output_path("b", "-board.json", tmp_path).name == "b-board-2.json"

    def test_export_board_writes_files(self, sample_board, tmp_path):
        paths = export_board(sample_board, ["json", "outline"], "AACMappings", tmp_path)
        assert [p.name for p in paths] == ["AACMappings-board.json", "AACMappings-outline.txt"]
        data = json.loads(paths[0].read_text(encoding="utf-8"))
        assert len(data["categories"]) == 2


class TestMain:

    def test_parser_defaults(self):
        args = build_parser().parse_args(["board.txt"])
        assert args.board_file == "board.txt"
        assert args.formats is None

    def test_export_mode(self, sample_board_file, tmp_path):
        out_dir = tmp_path / "out"
        out_dir.mkdir()
        main([str(sample_board_file), "--formats", "board_text", "--output-dir", str(out_dir)])
        exported = out_dir / "AACMappings-board.txt"
        assert exported.read_bytes() == sample_board_file.read_bytes()

    def test_unknown_format_exits(self, sample_board_file):
        with pytest.raises(SystemExit) as exc_info:
            main([str(sample_board_file), "--formats", "pdf"])
        assert exc_info.value.code == 1

    def test_missing_output_dir_exits(self, sample_board_file, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            main([str(sample_board_file), "--formats", "json", "--output-dir", str(tmp_path / "nope")])
        assert exc_info.value.code == 1

    def test_export_missing_board_exits(self, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            main([str(tmp_path / "nope.txt"), "--formats", "json"])
        assert exc_info.value.code == 1

    def test_bad_log_level_exits(self, sample_board_file):
        with pytest.raises(SystemExit) as exc_info:
            main([str(sample_board_file), "--log-level", "chatty"])
        assert exc_info.value.code == 1

    def test_session_mode_reads_stdin(self, sample_board_file, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("img/food/plate.png\nimg/food/fries.png\n"))
        main([str(sample_board_file), "--no-autosave"])
        assert capsys.readouterr().out == "french fries\n"

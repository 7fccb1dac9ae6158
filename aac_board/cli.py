"""Command-line interface for AAC boards.

WHY: Caregivers need a way to try a board, fix it, and export it without
the full device UI. The CLI loads a board file and either exports it in
the requested formats or runs a text session that behaves like tapping
symbols on the device.

HOW: argparse accepts the board file, an optional --formats list and
--output-dir for export mode, and --autosave/--log-level for session
mode. The session reads one command per line from stdin. Plain input is
a tap on that image key; commands start with ":". Spoken text goes to
stdout, everything else (page listings, notices) goes to stderr so the
spoken stream can be piped into a speech synthesizer.

RULES:
- Positional argument: board file path (default from AAC_BOARD_FILE)
- --formats: comma-separated formatter keys; export and exit
- Output naming: {stem}{suffix}, numeric suffix on conflict (-board-2.json)
- Session commands: <key>, :reset, :list, :label, :add <key> <text>,
  :remove <key>, :save [path], :quit
- A tap on an unknown key prints a notice and leaves the state unchanged
- A failed save prints a notice; the session and its edits carry on
- Exit codes: 0 = success, 1 = error
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from aac_board.config import AUTOSAVE, DEFAULT_BOARD_FILE, LOG_LEVEL, resolve_log_level
from aac_board.core.board import NavigationDepth, SymbolBoard
from aac_board.core.board_file import read_board_file, write_board_file
from aac_board.errors import KeyNotFound
from aac_board.formatters import FORMATTERS
from aac_board.formatters.base import FormatterOutput

_COMMAND_PREFIX = ":"


def _status(msg: str) -> None:
    """Print a status message to stderr.

    WHY: Status output must not pollute stdout, which carries only the
    text to be spoken.
    """
    print(msg, file=sys.stderr, flush=True)


def _show_page(board: SymbolBoard) -> None:
    """List the symbols on the board's current page."""
    title = board.label() if board.depth is NavigationDepth.IN_CATEGORY else "Home"
    entries = board.list_entries()
    _status("[{}] {} symbol(s)".format(title, len(entries)))
    for key in entries:
        _status("  {}".format(key))


def _resolve_output_path(
    stem: str,
    suffix: str,
    output_dir: Path,
) -> Path:
    """Resolve the output file path, adding a numeric suffix on conflict.

    RULES:
    - First attempt: {stem}{suffix} (e.g. AACMappings-board.json)
    - Conflict: insert counter before the extension (AACMappings-board-2.json)
    - Counter starts at 2 and increments
    """
    base_path = output_dir / "{}{}".format(stem, suffix)
    if not base_path.exists():
        return base_path

    dot_idx = suffix.rfind(".")
    if dot_idx > 0:
        suffix_name = suffix[:dot_idx]
        suffix_ext = suffix[dot_idx:]
    else:
        suffix_name = suffix
        suffix_ext = ""

    counter = 2
    while True:
        candidate = output_dir / "{}{}-{}{}".format(stem, suffix_name, counter, suffix_ext)
        if not candidate.exists():
            return candidate
        counter += 1


def _save_output(output: FormatterOutput, stem: str, output_dir: Path) -> Path:
    path = _resolve_output_path(stem, output.suffix, output_dir)
    path.write_text(output.content, encoding="utf-8")
    return path


def export_board(
    board: SymbolBoard,
    format_keys: List[str],
    stem: str,
    output_dir: Path,
) -> List[Path]:
    """Run each named formatter over the board and save its outputs.

    Args:
        board: The board to export.
        format_keys: Keys into FORMATTERS, already validated.
        stem: Filename stem for every output file.
        output_dir: Existing directory to save into.

    Returns:
        Paths of all files written, in formatter order.
    """
    saved: List[Path] = []
    for key in format_keys:
        formatter = FORMATTERS[key]()
        _status("  Running {} formatter...".format(formatter.name))
        for output in formatter.format(board):
            path = _save_output(output, stem, output_dir)
            saved.append(path)
            _status("  Saved: {}".format(path.name))
    return saved


def _write_board(target: Path, board: SymbolBoard) -> None:
    """Save the board, reporting failures instead of ending the session."""
    try:
        write_board_file(target, board)
    except (OSError, UnicodeError) as e:
        _status("Could not save to {}: {}".format(target, e))
        return
    _status("Saved board to {}".format(target))


def _handle_command(
    board: SymbolBoard,
    command: str,
    argument: str,
    save_path: Optional[Path],
) -> bool:
    """Run one ":" command. Returns False when the session should end."""
    if command == "quit":
        return False
    if command == "reset":
        board.reset()
        _show_page(board)
    elif command == "list":
        _show_page(board)
    elif command == "label":
        _status(board.label() or "(top level)")
    elif command == "add":
        key, _, text = argument.partition(" ")
        result = board.add_entry(key, text)
        _status("{}: {}".format(result.value, key or "(no key)"))
    elif command == "remove":
        try:
            removed = board.remove_entry(argument)
        except KeyNotFound:
            _status("No symbol {!r} on this page".format(argument))
        else:
            _status("Removed {} ({})".format(argument, removed))
    elif command == "save":
        target = Path(argument) if argument else save_path
        if target is None:
            _status("No file to save to; use :save <path>")
        else:
            _write_board(target, board)
    else:
        _status("Unknown command :{}".format(command))
    return True


def run_session(
    board: SymbolBoard,
    stdin: TextIO,
    stdout: TextIO,
    save_path: Optional[Path] = None,
    autosave: bool = False,
) -> None:
    """Drive the board from a stream of taps and commands.

    WHY: Mirrors the device loop (tap, maybe speak, maybe change page) so
    a board can be tried out from a terminal or a script.

    HOW: Each non-blank line is either a ":" command or a tap. Taps call
    board.select(); non-empty results are written to stdout, one per
    line. End of input behaves like :quit.

    Args:
        board: The board to drive.
        stdin: Source of input lines.
        stdout: Destination for spoken text.
        save_path: Default path for :save and autosave.
        autosave: Save to save_path when the session ends.
    """
    _show_page(board)
    for raw in stdin:
        line = raw.strip()
        if not line:
            continue

        if line.startswith(_COMMAND_PREFIX):
            command, _, argument = line[len(_COMMAND_PREFIX):].partition(" ")
            if not _handle_command(board, command.lower(), argument.strip(), save_path):
                break
            continue

        depth_before = board.depth
        try:
            spoken = board.select(line)
        except KeyNotFound:
            _status("No symbol {!r} on this page".format(line))
            continue
        if spoken:
            print(spoken, file=stdout, flush=True)
        if board.depth is not depth_before:
            _show_page(board)

    if autosave and save_path is not None:
        _write_board(save_path, board)


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    RULES:
    - Positional: board_file (optional, defaults to AAC_BOARD_FILE)
    - Optional: --formats (comma-separated), --output-dir
    - Optional: --autosave/--no-autosave, --log-level
    """
    parser = argparse.ArgumentParser(
        prog="aac_board",
        description="Try out, edit, and export two-level AAC symbol boards.",
    )

    parser.add_argument(
        "board_file",
        nargs="?",
        default=DEFAULT_BOARD_FILE,
        help="Path to the board file (default: %(default)s).",
    )

    parser.add_argument(
        "--formats",
        default=None,
        help="Comma-separated list of export formats; exports and exits. "
             "Available: {}.".format(", ".join(sorted(FORMATTERS.keys()))),
    )

    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory to save exported files (default: same as board file).",
    )

    parser.add_argument(
        "--autosave",
        action=argparse.BooleanOptionalAction,
        default=AUTOSAVE,
        help="Save the board back to its file when the session ends (default: %(default)s).",
    )

    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        help="Logging level name (default: %(default)s).",
    )

    return parser


def _parse_format_keys(formats: str) -> List[str]:
    keys = [f.strip() for f in formats.split(",") if f.strip()]
    for key in keys:
        if key not in FORMATTERS:
            available = ", ".join(sorted(FORMATTERS.keys()))
            print(
                "Error: Unknown format '{}'. Available formats: {}".format(key, available),
                file=sys.stderr,
            )
            sys.exit(1)
    return keys


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        level = resolve_log_level(args.log_level)
    except ValueError as e:
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    board_path = Path(args.board_file)

    if args.formats:
        format_keys = _parse_format_keys(args.formats)
        if not board_path.is_file():
            print("Error: File not found: {}".format(board_path), file=sys.stderr)
            sys.exit(1)
        output_dir = Path(args.output_dir) if args.output_dir else board_path.parent
        if not output_dir.is_dir():
            print("Error: Output directory does not exist: {}".format(output_dir), file=sys.stderr)
            sys.exit(1)

        board = read_board_file(board_path)
        _status("Exporting {}...".format(board_path.name))
        saved = export_board(board, format_keys, board_path.stem, output_dir)
        _status("Done! Saved {} file(s) to {}".format(len(saved), output_dir))
        return

    board = read_board_file(board_path)
    try:
        run_session(board, sys.stdin, sys.stdout, save_path=board_path, autosave=args.autosave)
    except KeyboardInterrupt:
        _status("\nCancelled by user.")
        sys.exit(130)


if __name__ == "__main__":
    main()

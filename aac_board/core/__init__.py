"""Core board data structures and the board file codec.

WHY: The core package is the stable heart of the board — the ordered map,
the category and board pages, and the file format they load from and
save to. The CLI and formatters consume it; it depends on neither.

HOW: ordered_map.py is the container, page.py the shared page interface,
category.py and board.py the two pages, board_file.py the text format.

RULES:
- No I/O outside board_file.py
- Navigation state lives only in SymbolBoard
"""

"""Configuration constants and .env loading.

WHY: The board file location, its encoding, the log level, and autosave
behaviour differ between devices. Keeping them in one module makes them
easy to find and override without touching logic.

HOW: python-dotenv loads the .env file on import. Each setting is a
module-level constant read from the environment with a default.

RULES:
- AAC_BOARD_FILE: default board file path
- AAC_BOARD_ENCODING: text encoding for reading and writing board files
- AAC_LOG_LEVEL: logging level name for the CLI
- AAC_AUTOSAVE: "true" saves the board back to its file after a session
"""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()

DEFAULT_BOARD_FILE = os.getenv("AAC_BOARD_FILE", "AACMappings.txt")
BOARD_FILE_ENCODING = os.getenv("AAC_BOARD_ENCODING", "utf-8")
LOG_LEVEL = os.getenv("AAC_LOG_LEVEL", "WARNING")
AUTOSAVE = os.getenv("AAC_AUTOSAVE", "false").lower() == "true"

_LOG_LEVELS: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def resolve_log_level(name: str) -> int:
    """Map a log level name (case-insensitive) to a logging constant.

    Raises:
        ValueError: If the name is not a known level.
    """
    level = _LOG_LEVELS.get(name.strip().upper())
    if level is None:
        raise ValueError(
            "Unknown log level '{}'. Available: {}".format(
                name, ", ".join(_LOG_LEVELS.keys())
            )
        )
    return level

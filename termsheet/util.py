"""Shared constants and helpers for cell references, paths and the screen."""

from __future__ import annotations

import os
import sys
from pathlib import Path

APP_VERSION = "2.8.4"
FILE_VERSION = "2.0"

DEFAULT_SHEET_NAME = "Sheet1"
DEFAULT_FILE_NAME = "Workbook1"

MAX_ROWS = 1073741824  # 2**30
MAX_COLS = 1048576  # 2**20, column BGQCV

DEFAULT_CELL_MIN_WIDTH = 10
DEFAULT_CELL_MAX_WIDTH = 40

DEFAULT_CELL_DECIMAL_POINTS = 2
DEFAULT_CELL_THOUSANDS_SEPARATOR = ","
DEFAULT_CELL_DECIMAL_SEPARATOR = "."
DEFAULT_CELL_FINANCIAL_SIGN = "$"

DEFAULT_VIEWPORT_COLS = 10
DEFAULT_VIEWPORT_ROWS = 40

DEFAULT_RECENT_FILES_NUMBER = 10

TYPE_OPTIONS = ("String", "Number", "Financial", "DateTime")
ALIGN_OPTIONS = ("Left", "Center", "Right")
DATETIME_FORMATS = ("auto", "date", "time", "datetime")

_FALLBACK_SIZE = (80, 24)


def terminal_size() -> tuple[int, int]:
    """Return the terminal's (width, height), or (80, 24) if it is unknown."""
    try:
        width, height = os.get_terminal_size(sys.stdout.fileno())
    except (OSError, ValueError, AttributeError):
        return _FALLBACK_SIZE
    return width, height


def viewport_size() -> tuple[int, int]:
    """Return how many (columns, rows) of cells fit on the terminal."""
    width, height = terminal_size()
    usable = width - 2
    cells = abs(usable) // DEFAULT_CELL_MIN_WIDTH
    if usable < 0:
        cells = -cells
    return cells - 1, height - 3


def column_name(col: int) -> str:
    """Turn a 1-based column number into its letters (1 -> A, 27 -> AA)."""
    letters = []
    while col > 0:
        col, remainder = divmod(col - 1, 26)
        letters.append(chr(ord("A") + remainder))
    return "".join(reversed(letters))


def column_number(name: str) -> int:
    """Turn upper-case column letters into a 1-based number; 0 if invalid."""
    number = 0
    for letter in name:
        if not "A" <= letter <= "Z":
            return 0
        number = number * 26 + ord(letter) - ord("A") + 1
    return number


def parse_cell_ref(ref: str) -> tuple[int, int]:
    """Turn a reference such as ``A1`` into ``(row, col)``."""
    ref = ref.upper().strip()
    letters = "".join(ch for ch in ref if "A" <= ch <= "Z")
    digits = "".join(ch for ch in ref if "0" <= ch <= "9")
    return (int(digits) if digits else 0), column_number(letters)


def format_cell_ref(row: int, col: int) -> str:
    """Turn ``(row, col)`` into a reference such as ``A1``."""
    return f"{column_name(col)}{row}"


def min_max(a: int, b: int) -> tuple[int, int]:
    """Return the two values ordered smallest first."""
    return (b, a) if a > b else (a, b)


def _home() -> str:
    try:
        return str(Path.home())
    except RuntimeError:
        return ""


def pretty_path(full: str, mode: str) -> str:
    """Show a path relative to the home directory with ``>`` between parts.

    In ``"recentfiles"`` mode the file name itself is left off.
    """
    full = full.replace(os.sep, "/")
    home = _home().replace(os.sep, "/")

    relative = full.removeprefix(home + "/") if full.startswith(home) else full
    parts = relative.split("/")
    if mode == "recentfiles" and len(parts) > 1:
        parts = parts[:-1]
    return " > ".join(parts)
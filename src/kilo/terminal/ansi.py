"""VT100 control sequences emitted by the editor."""

from __future__ import annotations

ESC = "\x1b"

CLEAR_SCREEN = "\x1b[2J"
CURSOR_HOME = "\x1b[H"
HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
ERASE_LINE = "\x1b[K"
REVERSE_VIDEO = "\x1b[7m"
RESET_ATTRIBUTES = "\x1b[m"
DIGIT_COLOR = "\x1b[31m"
DEFAULT_COLOR = "\x1b[39m"

# Moves the cursor as far right/down as the terminal allows.
CURSOR_TO_CORNER = "\x1b[999C\x1b[999B"
CURSOR_POSITION_QUERY = "\x1b[6n"
CURSOR_REPORT_PREFIX = b"\x1b["
CURSOR_REPORT_TERMINATOR = b"R"


def cursor_position(row: int, col: int) -> str:
    """Absolute positioning, 1-indexed."""

    return f"\x1b[{row};{col}H"


__all__ = [
    "ESC",
    "CLEAR_SCREEN",
    "CURSOR_HOME",
    "HIDE_CURSOR",
    "SHOW_CURSOR",
    "ERASE_LINE",
    "REVERSE_VIDEO",
    "RESET_ATTRIBUTES",
    "DIGIT_COLOR",
    "DEFAULT_COLOR",
    "CURSOR_TO_CORNER",
    "CURSOR_POSITION_QUERY",
    "CURSOR_REPORT_PREFIX",
    "CURSOR_REPORT_TERMINATOR",
    "cursor_position",
]

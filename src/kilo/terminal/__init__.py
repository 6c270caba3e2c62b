"""Terminal control: raw mode, dimensions, and byte-level I/O."""

from . import ansi
from .session import (
    ManagedTerminal,
    PosixTerminal,
    Terminal,
    TerminalError,
    parse_cursor_report,
    probe_dimensions,
)

__all__ = [
    "ansi",
    "Terminal",
    "ManagedTerminal",
    "TerminalError",
    "PosixTerminal",
    "parse_cursor_report",
    "probe_dimensions",
]

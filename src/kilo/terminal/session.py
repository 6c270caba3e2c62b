"""Raw-mode terminal sessions.

Provides the ``Terminal`` protocol the rest of the editor talks to and a
``PosixTerminal`` implementation backed by :mod:`termios`. Decoding,
rendering, and the controller only ever see the protocol, so tests can drive
them with a scripted terminal instead of a real TTY.
"""

from __future__ import annotations

import atexit
import os
import re
import select
import sys
import termios
from contextlib import contextmanager
from typing import (
    ContextManager,
    Iterator,
    Optional,
    Protocol,
    Tuple,
    runtime_checkable,
)

from kilo.runtime import telemetry

from . import ansi

_CURSOR_REPORT_RE = re.compile(rb"^\x1b\[(\d+);(\d+)R$")
_MAX_REPORT_LENGTH = 32
LOGGER_NAME = "kilo.terminal"


class TerminalError(RuntimeError):
    """Raised when the terminal cannot be put under editor control."""

    def __init__(self, operation: str, reason: str) -> None:
        super().__init__(f"{operation}: {reason}")
        self.operation = operation
        self.reason = reason


class Terminal(Protocol):
    """Capabilities the editor needs from a terminal device."""

    def enter(self) -> None: ...

    def leave(self) -> None: ...

    def query_dimensions(self) -> Tuple[int, int]: ...

    def read_byte(self, timeout: float) -> Optional[int]: ...

    def write(self, data: bytes) -> None: ...


@runtime_checkable
class ManagedTerminal(Terminal, Protocol):
    """A terminal that can also hold raw mode for a block."""

    def raw_mode(self) -> ContextManager[object]: ...


class PosixTerminal:
    """Terminal session on a pair of POSIX file descriptors.

    ``enter`` switches the input descriptor into raw mode: no line buffering,
    no echo, no signal keys, no CR/LF translation, no flow control, and reads
    that return after at most a tenth of a second. ``leave`` puts the saved
    attributes back and is registered with :mod:`atexit` so it also runs on
    abnormal exits.
    """

    def __init__(
        self,
        *,
        fd_in: Optional[int] = None,
        fd_out: Optional[int] = None,
    ) -> None:
        self._fd_in = sys.stdin.fileno() if fd_in is None else fd_in
        self._fd_out = sys.stdout.fileno() if fd_out is None else fd_out
        self._original_termios: list | None = None
        self._atexit_registered = False

    @property
    def is_raw(self) -> bool:
        return self._original_termios is not None

    # -- enter / leave ------------------------------------------------------

    def enter(self) -> None:
        if self._original_termios is not None:
            return
        try:
            self._original_termios = termios.tcgetattr(self._fd_in)
            raw = termios.tcgetattr(self._fd_in)
        except termios.error as exc:
            raise TerminalError("tcgetattr", _describe(exc)) from exc

        if not self._atexit_registered:
            atexit.register(self.leave)
            self._atexit_registered = True

        raw[0] &= ~(
            termios.BRKINT
            | termios.ICRNL
            | termios.INPCK
            | termios.ISTRIP
            | termios.IXON
        )
        raw[1] &= ~termios.OPOST
        raw[2] |= termios.CS8
        raw[3] &= ~(termios.ECHO | termios.ICANON | termios.IEXTEN | termios.ISIG)
        raw[6][termios.VMIN] = 0
        raw[6][termios.VTIME] = 1

        try:
            termios.tcsetattr(self._fd_in, termios.TCSAFLUSH, raw)
        except termios.error as exc:
            self._original_termios = None
            raise TerminalError("tcsetattr", _describe(exc)) from exc
        telemetry.record_event("terminal.enter", level="debug", logger_name=LOGGER_NAME)

    def leave(self) -> None:
        original = self._original_termios
        if original is None:
            return
        self._original_termios = None
        try:
            termios.tcsetattr(self._fd_in, termios.TCSAFLUSH, original)
        except termios.error as exc:
            raise TerminalError("tcsetattr", _describe(exc)) from exc
        telemetry.record_event("terminal.leave", level="debug", logger_name=LOGGER_NAME)

    @contextmanager
    def raw_mode(self) -> Iterator["PosixTerminal"]:
        """Hold raw mode for the duration of the block."""

        self.enter()
        try:
            yield self
        finally:
            self.leave()

    # -- I/O ----------------------------------------------------------------

    def read_byte(self, timeout: float) -> Optional[int]:
        """Return the next input byte, or ``None`` if nothing arrived in time."""

        try:
            ready, _, _ = select.select([self._fd_in], [], [], timeout)
        except OSError as exc:
            raise TerminalError("select", exc.strerror or str(exc)) from exc
        if not ready:
            return None
        try:
            data = os.read(self._fd_in, 1)
        except BlockingIOError:
            return None
        except OSError as exc:
            raise TerminalError("read", exc.strerror or str(exc)) from exc
        if not data:
            return None
        return data[0]

    def write(self, data: bytes) -> None:
        view = memoryview(data)
        while view:
            try:
                written = os.write(self._fd_out, view)
            except OSError as exc:
                raise TerminalError("write", exc.strerror or str(exc)) from exc
            view = view[written:]

    # -- dimensions ---------------------------------------------------------

    def query_dimensions(self) -> Tuple[int, int]:
        try:
            size = os.get_terminal_size(self._fd_out)
        except OSError:
            size = None
        if size is not None and size.columns > 0 and size.lines > 0:
            return size.lines, size.columns
        return probe_dimensions(self)


def probe_dimensions(terminal: Terminal, *, timeout: float = 0.1) -> Tuple[int, int]:
    """Find the screen size by parking the cursor in the far corner.

    The cursor is pushed to the bottom-right cell, then the terminal is asked
    to report where it ended up.
    """

    terminal.write((ansi.CURSOR_TO_CORNER + ansi.CURSOR_POSITION_QUERY).encode("ascii"))
    reply = bytearray()
    while len(reply) < _MAX_REPORT_LENGTH:
        byte = terminal.read_byte(timeout)
        if byte is None:
            break
        reply.append(byte)
        if bytes([byte]) == ansi.CURSOR_REPORT_TERMINATOR:
            break
    rows, cols = parse_cursor_report(bytes(reply))
    telemetry.record_event(
        "terminal.size_probe",
        level="debug",
        data={"rows": rows, "cols": cols},
        logger_name=LOGGER_NAME,
    )
    return rows, cols


def parse_cursor_report(reply: bytes) -> Tuple[int, int]:
    """Parse an ``ESC [ rows ; cols R`` cursor position report."""

    if not reply.startswith(ansi.CURSOR_REPORT_PREFIX):
        raise TerminalError("cursor position report", f"unrecognized reply {reply!r}")
    match = _CURSOR_REPORT_RE.match(reply)
    if match is None:
        raise TerminalError("cursor position report", f"malformed reply {reply!r}")
    rows, cols = int(match.group(1)), int(match.group(2))
    if rows <= 0 or cols <= 0:
        raise TerminalError("cursor position report", f"empty window {rows}x{cols}")
    return rows, cols


def _describe(exc: termios.error) -> str:
    if len(exc.args) > 1:
        return str(exc.args[1])
    return str(exc)


__all__ = [
    "Terminal",
    "ManagedTerminal",
    "TerminalError",
    "PosixTerminal",
    "probe_dimensions",
    "parse_cursor_report",
]

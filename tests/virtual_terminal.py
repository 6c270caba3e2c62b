"""Scripted terminal for tests -- implements the Terminal protocol in-memory.

Input is a queue of bytes handed out one at a time by ``read_byte``; an
empty queue behaves like a read timeout. All writes are captured for
assertions.
"""

from __future__ import annotations

from collections import deque
from contextlib import contextmanager
from typing import Iterator, Optional, Tuple


class InputExhausted(RuntimeError):
    """Raised when a test keeps reading long after the script ran out."""


class VirtualTerminal:
    def __init__(
        self,
        rows: int = 24,
        columns: int = 80,
        *,
        script: bytes | str = b"",
        max_idle_reads: int = 25,
    ) -> None:
        self.rows = rows
        self.columns = columns
        self.writes: list[bytes] = []
        self.raw = False
        self.enter_count = 0
        self.leave_count = 0
        self.idle_reads = 0
        self._max_idle_reads = max_idle_reads
        self._input: deque[int] = deque()
        self.feed(script)

    # -- scripting ----------------------------------------------------------

    def feed(self, data: bytes | str) -> None:
        if isinstance(data, str):
            data = data.encode("latin-1")
        self._input.extend(data)

    @property
    def pending_input(self) -> int:
        return len(self._input)

    # -- Terminal protocol --------------------------------------------------

    def enter(self) -> None:
        self.raw = True
        self.enter_count += 1

    def leave(self) -> None:
        if self.raw:
            self.leave_count += 1
        self.raw = False

    @contextmanager
    def raw_mode(self) -> Iterator["VirtualTerminal"]:
        self.enter()
        try:
            yield self
        finally:
            self.leave()

    def query_dimensions(self) -> Tuple[int, int]:
        return self.rows, self.columns

    def read_byte(self, timeout: float) -> Optional[int]:
        del timeout
        if self._input:
            self.idle_reads = 0
            return self._input.popleft()
        self.idle_reads += 1
        if self.idle_reads > self._max_idle_reads:
            raise InputExhausted("input script exhausted")
        return None

    def write(self, data: bytes) -> None:
        self.writes.append(bytes(data))

    # -- inspection ---------------------------------------------------------

    @property
    def output(self) -> str:
        return b"".join(self.writes).decode("utf-8", "surrogateescape")

    @property
    def last_write(self) -> str:
        if not self.writes:
            return ""
        return self.writes[-1].decode("utf-8", "surrogateescape")

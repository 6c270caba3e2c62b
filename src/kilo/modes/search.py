"""Incremental search driven by prompt keystrokes."""

from __future__ import annotations

from kilo.buffer import Document, EditState
from kilo.input import Key
from kilo.runtime import telemetry

FORWARD = 1
BACKWARD = -1
NO_MATCH = -1


class IncrementalSearch:
    """Prompt callback that moves the cursor to matches as the query changes.

    Keeps the row of the last match and the scan direction between calls.
    Arrow keys pick the direction and continue from the last match, any edit
    to the query restarts from the top, and Enter/Escape reset everything.
    """

    def __init__(self, document: Document, state: EditState) -> None:
        self.document = document
        self.state = state
        self.last_match = NO_MATCH
        self.direction = FORWARD

    def reset(self) -> None:
        self.last_match = NO_MATCH
        self.direction = FORWARD

    def __call__(self, query: str, key: int) -> None:
        if key in (Key.ENTER, Key.ESCAPE):
            self.reset()
            return
        if key in (Key.ARROW_RIGHT, Key.ARROW_DOWN):
            self.direction = FORWARD
        elif key in (Key.ARROW_LEFT, Key.ARROW_UP):
            self.direction = BACKWARD
        else:
            self.reset()

        if self.last_match == NO_MATCH:
            self.direction = FORWARD
        if query:
            self._search(query)

    def _search(self, query: str) -> bool:
        num_rows = self.document.num_rows
        current = self.last_match
        for _ in range(num_rows):
            current += self.direction
            if current < 0:
                current = num_rows - 1
            elif current >= num_rows:
                current = 0

            row = self.document.row(current)
            index = row.render.find(query)
            if index == -1:
                continue

            self.last_match = current
            self.state.cy = current
            self.state.cx = row.rx_to_cx(index)
            # Scrolls the match to the top of the screen on the next frame.
            self.state.row_offset = num_rows
            telemetry.record_event(
                "search.match",
                level="debug",
                data={"row": current, "column": self.state.cx},
            )
            return True
        return False


__all__ = ["IncrementalSearch", "FORWARD", "BACKWARD"]

"""Cursor and viewport state for the single editing window."""

from __future__ import annotations

from dataclasses import dataclass

from .document import Document

# Status bar + message bar.
RESERVED_ROWS = 2


@dataclass(slots=True)
class EditState:
    """Logical cursor, derived render column, and viewport offsets.

    ``rx`` is recomputed from ``cx`` on every frame; it is stored only so the
    renderer and the search callback can read the last computed value.
    """

    cx: int = 0
    cy: int = 0
    rx: int = 0
    row_offset: int = 0
    col_offset: int = 0
    screen_rows: int = 0
    screen_cols: int = 0

    @classmethod
    def for_terminal(cls, rows: int, cols: int) -> "EditState":
        state = cls()
        state.resize(rows, cols)
        return state

    def resize(self, rows: int, cols: int) -> None:
        self.screen_rows = max(rows - RESERVED_ROWS, 0)
        self.screen_cols = max(cols, 0)

    def clamp_cx(self, document: Document) -> None:
        self.cx = min(max(self.cx, 0), document.row_length(self.cy))

    def snapshot(self) -> tuple[int, int, int, int]:
        return (self.cx, self.cy, self.col_offset, self.row_offset)

    def restore(self, snapshot: tuple[int, int, int, int]) -> None:
        self.cx, self.cy, self.col_offset, self.row_offset = snapshot


__all__ = ["EditState", "RESERVED_ROWS"]

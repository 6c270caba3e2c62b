"""Line-oriented document model owned by the editor."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Sequence

from .row import DEFAULT_TAB_STOP, Row


class Document:
    """Ordered rows plus the dirty counter and optional filename.

    Every content mutation bumps ``dirty``; ``mark_clean`` resets it after a
    successful load or save. Out-of-range positions are ignored rather than
    raised, and the mutators report whether they changed anything.
    """

    def __init__(
        self,
        lines: Iterable[str] = (),
        *,
        filename: Optional[str] = None,
        tab_stop: int = DEFAULT_TAB_STOP,
    ) -> None:
        self.tab_stop = tab_stop
        self.filename = filename
        self._rows: list[Row] = [Row(line, tab_stop=tab_stop) for line in lines]
        self.dirty = 0

    @classmethod
    def from_text(
        cls,
        text: str,
        *,
        filename: Optional[str] = None,
        tab_stop: int = DEFAULT_TAB_STOP,
    ) -> "Document":
        """Split ``text`` into rows, dropping trailing CR/LF from each line."""

        return cls(split_lines(text), filename=filename, tab_stop=tab_stop)

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self._rows)

    @property
    def num_rows(self) -> int:
        return len(self._rows)

    @property
    def rows(self) -> Sequence[Row]:
        """Current rows without exposing the backing list."""

        return tuple(self._rows)

    @property
    def is_dirty(self) -> bool:
        return self.dirty > 0

    @property
    def display_name(self) -> str:
        return self.filename or "[No Name]"

    def row(self, index: int) -> Row:
        return self._rows[index]

    def row_length(self, cy: int) -> int:
        if 0 <= cy < len(self._rows):
            return self._rows[cy].size
        return 0

    def lines(self) -> list[str]:
        return [row.chars for row in self._rows]

    def mark_clean(self) -> None:
        self.dirty = 0

    # -- row operations -----------------------------------------------------

    def insert_row(self, at: int, text: str = "") -> bool:
        if at < 0 or at > len(self._rows):
            return False
        self._rows.insert(at, Row(text, tab_stop=self.tab_stop))
        self.dirty += 1
        return True

    def append_row(self, text: str = "") -> bool:
        return self.insert_row(len(self._rows), text)

    def delete_row(self, at: int) -> bool:
        if at < 0 or at >= len(self._rows):
            return False
        del self._rows[at]
        self.dirty += 1
        return True

    # -- character operations -----------------------------------------------

    def insert_char(self, cy: int, at: int, char: str) -> bool:
        if cy < 0 or cy >= len(self._rows):
            return False
        self._rows[cy].insert_char(at, char)
        self.dirty += 1
        return True

    def delete_char(self, cy: int, at: int) -> bool:
        if cy < 0 or cy >= len(self._rows):
            return False
        if not self._rows[cy].delete_char(at):
            return False
        self.dirty += 1
        return True

    def append_string(self, cy: int, suffix: str) -> bool:
        if cy < 0 or cy >= len(self._rows):
            return False
        self._rows[cy].append(suffix)
        self.dirty += 1
        return True

    # -- line structure -----------------------------------------------------

    def split_at(self, cy: int, cx: int) -> bool:
        """Break the line at ``(cy, cx)`` the way the Enter key does."""

        if cx == 0:
            return self.insert_row(cy, "")
        if cy < 0 or cy >= len(self._rows):
            return False
        row = self._rows[cy]
        cx = min(cx, row.size)
        if not self.insert_row(cy + 1, row.chars[cx:]):
            return False
        row.truncate(cx)
        return True

    def join_up(self, cy: int) -> Optional[int]:
        """Append row ``cy`` to the row above and remove it.

        Returns the column where the two lines were joined, which is where
        the cursor belongs afterwards, or ``None`` when there is no row above.
        """

        if cy <= 0 or cy >= len(self._rows):
            return None
        previous = self._rows[cy - 1]
        join_column = previous.size
        self.append_string(cy - 1, self._rows[cy].chars)
        self.delete_row(cy)
        return join_column

    # -- serialization ------------------------------------------------------

    def to_flat_text(self) -> str:
        """Rows joined by ``\\n``, including a newline after the last row."""

        return "".join(f"{row.chars}\n" for row in self._rows)


def split_lines(text: str) -> list[str]:
    """Split on ``\\n`` and strip trailing CR/LF bytes from each line."""

    if not text:
        return []
    pieces = text.split("\n")
    if text.endswith("\n"):
        pieces.pop()
    return [piece.rstrip("\r\n") for piece in pieces]


__all__ = ["Document", "split_lines"]

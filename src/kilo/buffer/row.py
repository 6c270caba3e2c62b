"""Single document line with its tab-expanded render cache."""

from __future__ import annotations

DEFAULT_TAB_STOP = 4


class Row:
    """One logical line.

    ``chars`` is the raw content, ``render`` the same line with tabs expanded
    to spaces. Assigning ``chars`` (directly or through any mutator) rebuilds
    ``render`` before returning, so the cache is never observed stale.
    """

    __slots__ = ("_chars", "_render", "tab_stop")

    def __init__(self, chars: str = "", *, tab_stop: int = DEFAULT_TAB_STOP) -> None:
        if tab_stop < 1:
            raise ValueError("tab_stop must be positive")
        self.tab_stop = tab_stop
        self._chars = ""
        self._render = ""
        self.chars = chars

    def __repr__(self) -> str:
        return f"Row({self._chars!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Row):
            return NotImplemented
        return self._chars == other._chars and self.tab_stop == other.tab_stop

    def __len__(self) -> int:
        return len(self._chars)

    @property
    def chars(self) -> str:
        return self._chars

    @chars.setter
    def chars(self, value: str) -> None:
        self._chars = value
        self._render = self._build_render(value)

    @property
    def size(self) -> int:
        return len(self._chars)

    @property
    def render(self) -> str:
        return self._render

    @property
    def rsize(self) -> int:
        return len(self._render)

    def _build_render(self, chars: str) -> str:
        if "\t" not in chars:
            return chars
        parts: list[str] = []
        width = 0
        for char in chars:
            if char == "\t":
                pad = self.tab_stop - (width % self.tab_stop)
                parts.append(" " * pad)
                width += pad
            else:
                parts.append(char)
                width += 1
        return "".join(parts)

    # -- mutation -----------------------------------------------------------

    def insert_char(self, at: int, char: str) -> None:
        at = min(max(at, 0), self.size)
        self.chars = self._chars[:at] + char + self._chars[at:]

    def delete_char(self, at: int) -> bool:
        if at < 0 or at >= self.size:
            return False
        self.chars = self._chars[:at] + self._chars[at + 1 :]
        return True

    def append(self, suffix: str) -> None:
        self.chars = self._chars + suffix

    def truncate(self, length: int) -> None:
        self.chars = self._chars[: max(length, 0)]

    # -- column conversion --------------------------------------------------

    def cx_to_rx(self, cx: int) -> int:
        """Render column of character index ``cx``."""

        rx = 0
        for char in self._chars[:cx]:
            if char == "\t":
                rx += (self.tab_stop - 1) - (rx % self.tab_stop)
            rx += 1
        return rx

    def rx_to_cx(self, rx: int) -> int:
        """Character index whose cell covers render column ``rx``."""

        cur_rx = 0
        for cx, char in enumerate(self._chars):
            if char == "\t":
                cur_rx += (self.tab_stop - 1) - (cur_rx % self.tab_stop)
            cur_rx += 1
            if cur_rx > rx:
                return cx
        return self.size


__all__ = ["Row", "DEFAULT_TAB_STOP"]

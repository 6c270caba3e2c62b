"""Full-frame renderer with viewport scrolling.

A frame is built as one string and written with a single call so the
terminal never shows a half-drawn screen. Output order is fixed: hide
cursor, home, body rows, status bar, message bar, cursor position, show
cursor.
"""

from __future__ import annotations

import time
from typing import List, Optional

from kilo.buffer import Document, EditState
from kilo.buffer.fileio import ENCODING
from kilo.config import KILO_VERSION, EditorConfig
from kilo.runtime import telemetry
from kilo.terminal import Terminal, ansi

from .message import StatusMessage

FILL_MARKER = "~"
NAME_WIDTH = 20
HELP_TEXT = "Ctrl-S = save | Ctrl-Q = quit | Ctrl-F = find"


class Renderer:
    def __init__(
        self,
        config: Optional[EditorConfig] = None,
        *,
        version: str = KILO_VERSION,
    ) -> None:
        self.config = config or EditorConfig()
        self.version = version

    # -- viewport -----------------------------------------------------------

    def scroll(self, state: EditState, document: Document) -> None:
        """Recompute ``rx`` and move the offsets so the cursor is on screen."""

        state.rx = 0
        if state.cy < document.num_rows:
            state.rx = document.row(state.cy).cx_to_rx(state.cx)

        if state.cy < state.row_offset:
            state.row_offset = state.cy
        if state.cy >= state.row_offset + state.screen_rows:
            state.row_offset = state.cy - state.screen_rows + 1
        if state.rx < state.col_offset:
            state.col_offset = state.rx
        if state.rx >= state.col_offset + state.screen_cols:
            state.col_offset = state.rx - state.screen_cols + 1

    # -- frame composition --------------------------------------------------

    def draw(
        self,
        state: EditState,
        document: Document,
        message: StatusMessage,
        *,
        now: Optional[float] = None,
    ) -> str:
        current = time.monotonic() if now is None else now
        frame: List[str] = [ansi.HIDE_CURSOR, ansi.CURSOR_HOME]
        self._draw_rows(frame, state, document)
        self._draw_status_bar(frame, state, document)
        self._draw_message_bar(frame, state, message, current)
        frame.append(
            ansi.cursor_position(
                state.cy - state.row_offset + 1, state.rx - state.col_offset + 1
            )
        )
        frame.append(ansi.SHOW_CURSOR)
        return "".join(frame)

    def refresh(
        self,
        terminal: Terminal,
        state: EditState,
        document: Document,
        message: StatusMessage,
        *,
        now: Optional[float] = None,
    ) -> str:
        with telemetry.span(
            "render::frame",
            component="render",
            metadata={"cy": state.cy, "cx": state.cx},
        ):
            self.scroll(state, document)
            frame = self.draw(state, document, message, now=now)
            terminal.write(encode_frame(frame))
        return frame

    def _draw_rows(self, frame: List[str], state: EditState, document: Document) -> None:
        banner_row = state.screen_rows // 3
        help_row = state.screen_rows // 2
        for y in range(state.screen_rows):
            file_row = y + state.row_offset
            if file_row < document.num_rows:
                render = document.row(file_row).render
                visible = render[state.col_offset : state.col_offset + state.screen_cols]
                frame.append(self.colorize(visible))
            elif document.num_rows == 0 and y == banner_row:
                frame.append(self._centered(f"Kilo editor -- version {self.version}", state))
            elif document.num_rows == 0 and y == help_row:
                frame.append(self._centered(HELP_TEXT, state))
            else:
                frame.append(FILL_MARKER)
            frame.append(ansi.ERASE_LINE)
            frame.append("\r\n")

    def _centered(self, text: str, state: EditState) -> str:
        text = text[: state.screen_cols]
        padding = (state.screen_cols - len(text)) // 2
        if padding:
            return FILL_MARKER + " " * (padding - 1) + text
        return text

    def _draw_status_bar(
        self, frame: List[str], state: EditState, document: Document
    ) -> None:
        modified = " (modified)" if document.is_dirty else ""
        left = f"{document.display_name[:NAME_WIDTH]} - {document.num_rows} lines{modified}"
        right = f"{state.cy + 1}/{document.num_rows}, {state.cx + 1}"
        width = state.screen_cols
        left = left[:width]
        gap = width - len(left) - len(right)
        if gap >= 0:
            line = left + " " * gap + right
        else:
            line = left + " " * (width - len(left))
        frame.append(ansi.REVERSE_VIDEO)
        frame.append(line)
        frame.append(ansi.RESET_ATTRIBUTES)
        frame.append("\r\n")

    def _draw_message_bar(
        self,
        frame: List[str],
        state: EditState,
        message: StatusMessage,
        now: float,
    ) -> None:
        frame.append(ansi.ERASE_LINE)
        if message.visible(now, self.config.message_timeout):
            frame.append(message.text[: state.screen_cols])

    # -- highlight hook -----------------------------------------------------

    def colorize(self, text: str) -> str:
        """Color runs of decimal digits; show control bytes in reverse video."""

        out: List[str] = []
        in_digits = False
        for char in text:
            code = ord(char)
            if code < 32 or code == 127:
                if in_digits:
                    out.append(ansi.DEFAULT_COLOR)
                    in_digits = False
                symbol = "?" if code == 127 else chr(ord("@") + code)
                out.append(ansi.REVERSE_VIDEO + symbol + ansi.RESET_ATTRIBUTES)
                continue
            is_digit = self.config.highlight_digits and "0" <= char <= "9"
            if is_digit and not in_digits:
                out.append(ansi.DIGIT_COLOR)
            elif not is_digit and in_digits:
                out.append(ansi.DEFAULT_COLOR)
            in_digits = is_digit
            out.append(char)
        if in_digits:
            out.append(ansi.DEFAULT_COLOR)
        return "".join(out)


def encode_frame(frame: str) -> bytes:
    """Row characters go out as the bytes they were read from.

    Text that never came from a row, such as a filename given on the command
    line, may hold characters above U+00FF; those are sent as UTF-8.
    """

    try:
        return frame.encode(ENCODING)
    except UnicodeEncodeError:
        return b"".join(
            char.encode(ENCODING) if ord(char) <= 0xFF else char.encode("utf-8")
            for char in frame
        )


__all__ = ["Renderer", "FILL_MARKER", "HELP_TEXT", "encode_frame"]

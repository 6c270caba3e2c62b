from kilo.buffer import Document, EditState
from kilo.config import EditorConfig
from kilo.render import FILL_MARKER, HELP_TEXT, Renderer, StatusMessage
from kilo.render.renderer import encode_frame
from kilo.terminal import ansi

from .virtual_terminal import VirtualTerminal


def make_state(rows: int = 24, cols: int = 80) -> EditState:
    return EditState.for_terminal(rows, cols)


def plain_renderer() -> Renderer:
    return Renderer(EditorConfig(highlight_digits=False), version="9.9")


def body_lines(frame: str) -> list[str]:
    body = frame[len(ansi.HIDE_CURSOR + ansi.CURSOR_HOME) :]
    return body.split("\r\n")


def test_frame_order_and_line_count() -> None:
    state = make_state()
    frame = plain_renderer().draw(state, Document(["hello"]), StatusMessage(), now=0.0)

    assert frame.startswith(ansi.HIDE_CURSOR + ansi.CURSOR_HOME)
    assert frame.endswith(ansi.cursor_position(1, 1) + ansi.SHOW_CURSOR)
    # Body rows plus the status bar each end with CRLF.
    assert frame.count("\r\n") == state.screen_rows + 1
    lines = body_lines(frame)
    assert lines[0] == "hello" + ansi.ERASE_LINE
    assert lines[1] == FILL_MARKER + ansi.ERASE_LINE


def test_empty_document_shows_banner_and_help() -> None:
    state = make_state()
    frame = plain_renderer().draw(state, Document(), StatusMessage(), now=0.0)
    lines = body_lines(frame)

    banner = lines[state.screen_rows // 3]
    assert "Kilo editor -- version 9.9" in banner
    assert banner.startswith(FILL_MARKER + " ")
    assert HELP_TEXT in lines[state.screen_rows // 2]


def test_banner_hidden_once_document_has_rows() -> None:
    frame = plain_renderer().draw(make_state(), Document([""]), StatusMessage(), now=0.0)

    assert "Kilo editor" not in frame


def test_status_bar_layout() -> None:
    state = make_state(cols=60)
    document = Document(["ab", "cde"], filename="a-rather-long-file-name.txt")
    document.insert_char(0, 0, "x")
    state.cy, state.cx = 1, 2

    frame = plain_renderer().draw(state, document, StatusMessage(), now=0.0)
    status = body_lines(frame)[state.screen_rows]

    assert status.startswith(ansi.REVERSE_VIDEO + "a-rather-long-file-n - 2 lines (modified)")
    bar = status[len(ansi.REVERSE_VIDEO) : -len(ansi.RESET_ATTRIBUTES)]
    assert len(bar) == 60
    assert bar.endswith("2/2, 3")


def test_status_bar_uses_placeholder_name() -> None:
    frame = plain_renderer().draw(make_state(), Document(), StatusMessage(), now=0.0)

    assert "[No Name] - 0 lines" in frame
    assert "(modified)" not in frame


def test_message_expires_after_timeout() -> None:
    renderer = plain_renderer()
    message = StatusMessage()
    message.set("HELP: hello", now=100.0)

    fresh = renderer.draw(make_state(), Document(), message, now=102.0)
    stale = renderer.draw(make_state(), Document(), message, now=106.0)

    assert "HELP: hello" in fresh
    assert "HELP: hello" not in stale


def test_scroll_keeps_cursor_in_viewport() -> None:
    renderer = plain_renderer()
    document = Document([f"line {n}" for n in range(100)])
    state = make_state()
    state.cy = 50

    renderer.scroll(state, document)
    assert state.row_offset == 50 - state.screen_rows + 1

    state.cy = 3
    renderer.scroll(state, document)
    assert state.row_offset == 3


def test_scroll_uses_render_column_for_tabs() -> None:
    renderer = plain_renderer()
    document = Document(["\tx" + "y" * 100])
    state = make_state(cols=20)
    state.cx = 1

    renderer.scroll(state, document)
    assert state.rx == 4
    assert state.col_offset == 0

    state.cx = 50
    renderer.scroll(state, document)
    assert state.rx == 53
    assert state.col_offset == 53 - 20 + 1


def test_rows_are_cut_at_column_offset() -> None:
    state = make_state(cols=5)
    state.col_offset = 2
    frame = plain_renderer().draw(state, Document(["abcdefghij"]), StatusMessage(), now=0.0)

    assert body_lines(frame)[0] == "cdefg" + ansi.ERASE_LINE


def test_colorize_wraps_digit_runs() -> None:
    renderer = Renderer(EditorConfig())

    assert renderer.colorize("a12b3") == (
        "a" + ansi.DIGIT_COLOR + "12" + ansi.DEFAULT_COLOR + "b"
        + ansi.DIGIT_COLOR + "3" + ansi.DEFAULT_COLOR
    )


def test_colorize_disabled_leaves_text_alone() -> None:
    assert plain_renderer().colorize("a12b3") == "a12b3"


def test_colorize_shows_control_bytes_in_reverse_video() -> None:
    rendered = plain_renderer().colorize("a\x01\x7f")

    assert rendered == (
        "a" + ansi.REVERSE_VIDEO + "A" + ansi.RESET_ATTRIBUTES
        + ansi.REVERSE_VIDEO + "?" + ansi.RESET_ATTRIBUTES
    )


def test_refresh_writes_single_frame() -> None:
    terminal = VirtualTerminal()
    state = make_state()
    document = Document(["x"])

    frame = plain_renderer().refresh(terminal, state, document, StatusMessage(), now=0.0)

    assert len(terminal.writes) == 1
    assert terminal.last_write == frame


def test_encode_frame_writes_row_bytes_back() -> None:
    assert encode_frame("caf\xc3\xa9") == b"caf\xc3\xa9"
    assert encode_frame("\xff") == b"\xff"


def test_encode_frame_sends_wide_names_as_utf8() -> None:
    assert encode_frame("ф.txt \xe9") == "ф.txt ".encode("utf-8") + b"\xe9"

"""Text editing actions: typing, Enter, Backspace, Delete."""

from __future__ import annotations

from kilo.buffer.fileio import decode_text
from kilo.context import ActionResult, EditorContext

_MAX_BYTE = 0xFF


def key_to_char(key: int) -> str:
    """Map a typed byte to the character stored in a row.

    Uses the same byte-per-character mapping as file loading, so a typed
    multi-byte sequence occupies the same columns as the same text read
    from disk.
    """

    return decode_text(bytes([key]))


def insert_character(context: EditorContext, key: int) -> ActionResult:
    if key < 0 or key > _MAX_BYTE:
        return ActionResult(status="ignored")
    document, state = context.document, context.state
    if state.cy == document.num_rows:
        document.append_row("")
    document.insert_char(state.cy, state.cx, key_to_char(key))
    state.cx += 1
    return ActionResult(status="edited")


def insert_newline(context: EditorContext, key: int) -> ActionResult:
    del key
    document, state = context.document, context.state
    document.split_at(state.cy, state.cx)
    state.cy += 1
    state.cx = 0
    return ActionResult(status="edited")


def delete_backward(context: EditorContext, key: int) -> ActionResult:
    """Delete the character left of the cursor, joining lines at column 0."""

    del key
    document, state = context.document, context.state
    if state.cy >= document.num_rows:
        return ActionResult(status="noop")
    if state.cx == 0 and state.cy == 0:
        return ActionResult(status="noop")

    if state.cx > 0:
        document.delete_char(state.cy, state.cx - 1)
        state.cx -= 1
    else:
        join_column = document.join_up(state.cy)
        if join_column is None:
            return ActionResult(status="noop")
        state.cy -= 1
        state.cx = join_column
    return ActionResult(status="edited")


def delete_forward(context: EditorContext, key: int) -> ActionResult:
    """Delete the character under the cursor.

    Implemented as a step right followed by a backspace. At the end of a line
    the step lands on the start of the next line, so the two lines are
    joined; at the end of the document there is nothing to delete.
    """

    document, state = context.document, context.state
    if state.cy >= document.num_rows:
        return ActionResult(status="noop")
    if state.cx < document.row_length(state.cy):
        state.cx += 1
    elif state.cy + 1 < document.num_rows:
        state.cy += 1
        state.cx = 0
    else:
        return ActionResult(status="noop")
    return delete_backward(context, key)


__all__ = [
    "key_to_char",
    "insert_character",
    "insert_newline",
    "delete_backward",
    "delete_forward",
]

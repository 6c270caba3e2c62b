"""Cursor movement actions."""

from __future__ import annotations

from kilo.context import ActionResult, EditorContext
from kilo.input import Key


def move_cursor(context: EditorContext, key: int) -> ActionResult:
    """Move one cell; horizontal moves stop at the line edges."""

    document, state = context.document, context.state
    if key == Key.ARROW_LEFT:
        if state.cx > 0:
            state.cx -= 1
    elif key == Key.ARROW_RIGHT:
        if state.cx < document.row_length(state.cy):
            state.cx += 1
    elif key == Key.ARROW_UP:
        if state.cy > 0:
            state.cy -= 1
    elif key == Key.ARROW_DOWN:
        if state.cy < document.num_rows:
            state.cy += 1
    state.clamp_cx(document)
    return ActionResult(status="moved")


def move_home(context: EditorContext, key: int) -> ActionResult:
    del key
    context.state.cx = 0
    return ActionResult(status="moved")


def move_end(context: EditorContext, key: int) -> ActionResult:
    del key
    context.state.cx = context.document.row_length(context.state.cy)
    return ActionResult(status="moved")


def move_page(context: EditorContext, key: int) -> ActionResult:
    """Jump to the viewport edge, then step a full screen in that direction."""

    document, state = context.document, context.state
    if key == Key.PAGE_UP:
        state.cy = state.row_offset
        step = Key.ARROW_UP
    else:
        bottom = state.row_offset + state.screen_rows - 1
        state.cy = max(min(bottom, document.num_rows), 0)
        step = Key.ARROW_DOWN

    for _ in range(state.screen_rows):
        move_cursor(context, step)
    state.clamp_cx(document)
    return ActionResult(status="moved")


__all__ = ["move_cursor", "move_home", "move_end", "move_page"]

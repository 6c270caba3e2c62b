"""Core actions shared by the controller: quit and no-op keys."""

from __future__ import annotations

from kilo.context import ActionResult, EditorContext
from kilo.runtime import telemetry


def quit_editor(context: EditorContext, key: int) -> ActionResult:
    """Stop the editor, asking for repeated presses when there are unsaved edits."""

    del key
    if context.document.is_dirty and context.quit_times > 1:
        context.quit_times -= 1
        plural = "s" if context.quit_times != 1 else ""
        context.set_status(
            "WARNING!!! File has unsaved changes. "
            f"Press Ctrl-Q {context.quit_times} more time{plural} to quit."
        )
        return ActionResult(status="quit_pending")

    context.running = False
    telemetry.record_event(
        "editor.quit", data={"dirty": context.document.dirty}
    )
    return ActionResult(status="quit")


def noop_action(context: EditorContext, key: int) -> ActionResult:
    del context, key
    return ActionResult(status="noop")


__all__ = ["quit_editor", "noop_action"]

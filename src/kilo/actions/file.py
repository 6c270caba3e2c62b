"""Saving the document."""

from __future__ import annotations

from kilo.buffer import save_document
from kilo.context import ActionResult, EditorContext

SAVE_AS_PROMPT = "Save as: {} (ESC to cancel)"


def save(context: EditorContext, key: int) -> ActionResult:
    del key
    document = context.document
    if document.filename is None:
        filename = context.require_prompt().prompt(SAVE_AS_PROMPT)
        if filename is None:
            context.set_status("Save aborted")
            return ActionResult(status="save_aborted")
        document.filename = filename

    result = save_document(document)
    if not result.ok:
        message = f"Can't save! I/O error: {result.error}"
        context.set_status(message)
        return ActionResult(status="save_failed", message=message)

    document.mark_clean()
    message = (
        f'"{result.filename}" {result.lines}L, '
        f"{result.bytes_written} bytes written to disk"
    )
    context.set_status(message)
    return ActionResult(status="saved", message=message)


__all__ = ["save", "SAVE_AS_PROMPT"]

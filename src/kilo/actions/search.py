"""Find action wrapping the incremental search prompt."""

from __future__ import annotations

from kilo.context import ActionResult, EditorContext
from kilo.modes import IncrementalSearch

SEARCH_PROMPT = "Search: {} (Use ESC/Arrows/Enter)"


def find(context: EditorContext, key: int) -> ActionResult:
    """Search interactively; Escape puts the cursor and viewport back."""

    del key
    saved = context.state.snapshot()
    search = IncrementalSearch(context.document, context.state)
    query = context.require_prompt().prompt(SEARCH_PROMPT, search)
    if query is None:
        context.state.restore(saved)
        context.set_status("Search cancelled")
        return ActionResult(status="search_cancelled")
    return ActionResult(status="search", message=query)


__all__ = ["find", "SEARCH_PROMPT"]

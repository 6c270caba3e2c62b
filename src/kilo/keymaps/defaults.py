"""Built-in key bindings for the editor."""

from __future__ import annotations

from typing import Iterable, Sequence

from kilo.actions import core as core_actions
from kilo.actions import edit as edit_actions
from kilo.actions import file as file_actions
from kilo.actions import motion as motion_actions
from kilo.actions import search as search_actions
from kilo.input import Key, ctrl_key

from .models import ActionRef, Binding
from .registry import KeymapRegistry

FALLBACK_ACTION = "edit.insert_char"

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(
        id="motion.move",
        handler=motion_actions.move_cursor,
        description="Move the cursor one cell",
    ),
    ActionRef(
        id="motion.home",
        handler=motion_actions.move_home,
        description="Move to the start of the line",
    ),
    ActionRef(
        id="motion.end",
        handler=motion_actions.move_end,
        description="Move to the end of the line",
    ),
    ActionRef(
        id="motion.page",
        handler=motion_actions.move_page,
        description="Scroll a full screen",
    ),
    ActionRef(
        id="edit.insert_char",
        handler=edit_actions.insert_character,
        description="Insert the typed character",
    ),
    ActionRef(
        id="edit.newline",
        handler=edit_actions.insert_newline,
        description="Split the line at the cursor",
    ),
    ActionRef(
        id="edit.delete_backward",
        handler=edit_actions.delete_backward,
        description="Delete the character before the cursor",
    ),
    ActionRef(
        id="edit.delete_forward",
        handler=edit_actions.delete_forward,
        description="Delete the character under the cursor",
    ),
    ActionRef(
        id="file.save",
        handler=file_actions.save,
        description="Write the document to disk",
    ),
    ActionRef(
        id="search.find",
        handler=search_actions.find,
        description="Incremental search",
    ),
    ActionRef(
        id="core.quit",
        handler=core_actions.quit_editor,
        description="Quit the editor",
    ),
    ActionRef(
        id="core.noop",
        handler=core_actions.noop_action,
        description="Ignore the key",
    ),
)

DEFAULT_BINDINGS: tuple[Binding, ...] = (
    Binding(id="motion.left", key=Key.ARROW_LEFT, action_id="motion.move"),
    Binding(id="motion.right", key=Key.ARROW_RIGHT, action_id="motion.move"),
    Binding(id="motion.up", key=Key.ARROW_UP, action_id="motion.move"),
    Binding(id="motion.down", key=Key.ARROW_DOWN, action_id="motion.move"),
    Binding(id="motion.home", key=Key.HOME, action_id="motion.home"),
    Binding(id="motion.end", key=Key.END, action_id="motion.end"),
    Binding(id="motion.page_up", key=Key.PAGE_UP, action_id="motion.page"),
    Binding(id="motion.page_down", key=Key.PAGE_DOWN, action_id="motion.page"),
    Binding(id="edit.enter", key=Key.ENTER, action_id="edit.newline"),
    Binding(id="edit.backspace", key=Key.BACKSPACE, action_id="edit.delete_backward"),
    Binding(
        id="edit.ctrl_h",
        key=ctrl_key("h"),
        action_id="edit.delete_backward",
        description="Ctrl-H acts as Backspace",
    ),
    Binding(id="edit.delete", key=Key.DELETE, action_id="edit.delete_forward"),
    Binding(id="file.save", key=ctrl_key("s"), action_id="file.save"),
    Binding(id="search.find", key=ctrl_key("f"), action_id="search.find"),
    Binding(id="core.quit", key=ctrl_key("q"), action_id="core.quit"),
    Binding(
        id="core.refresh",
        key=ctrl_key("l"),
        action_id="core.noop",
        description="The screen is redrawn every pass anyway",
    ),
    Binding(id="core.escape", key=Key.ESCAPE, action_id="core.noop"),
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
    exclude_bindings: Sequence[str] | None = None,
) -> None:
    """Register built-in actions, bindings, and the typing fallback."""

    excluded = set(exclude_bindings or ())

    for action in DEFAULT_ACTIONS:
        registry.register_action(action, replace=replace)

    for binding in DEFAULT_BINDINGS:
        if binding.id in excluded:
            continue
        registry.register_binding(binding, replace=replace)

    if extra_bindings:
        for binding in extra_bindings:
            registry.register_binding(binding, replace=True)

    registry.set_fallback(FALLBACK_ACTION)


__all__ = [
    "load_default_keymaps",
    "DEFAULT_ACTIONS",
    "DEFAULT_BINDINGS",
    "FALLBACK_ACTION",
]

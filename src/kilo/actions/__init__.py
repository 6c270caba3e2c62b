"""Editing verbs dispatched through the keymap registry."""

from .core import noop_action, quit_editor
from .edit import (
    delete_backward,
    delete_forward,
    insert_character,
    insert_newline,
    key_to_char,
)
from .file import save
from .motion import move_cursor, move_end, move_home, move_page
from .search import find

__all__ = [
    "noop_action",
    "quit_editor",
    "delete_backward",
    "delete_forward",
    "insert_character",
    "insert_newline",
    "key_to_char",
    "save",
    "move_cursor",
    "move_end",
    "move_home",
    "move_page",
    "find",
]

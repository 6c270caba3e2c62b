"""Logical key codes produced by the input decoder."""

from __future__ import annotations

from enum import IntEnum


class Key(IntEnum):
    """Keys that do not map to a single plain byte.

    Plain bytes are passed through as ``int`` values; the enum members below
    either name a meaningful byte or live above the byte range so they can
    never collide with typed input.
    """

    ENTER = 13
    ESCAPE = 27
    BACKSPACE = 127

    ARROW_LEFT = 1000
    ARROW_RIGHT = 1001
    ARROW_UP = 1002
    ARROW_DOWN = 1003
    DELETE = 1004
    HOME = 1005
    END = 1006
    PAGE_UP = 1007
    PAGE_DOWN = 1008


def ctrl_key(char: str) -> int:
    """Return the control byte produced by Ctrl + ``char``."""

    if len(char) != 1:
        raise ValueError("ctrl_key expects a single character")
    return ord(char) & 0x1F


def is_control(key: int) -> bool:
    return key < 32 or key == 127


def is_printable(key: int) -> bool:
    """ASCII bytes that may be typed into a prompt."""

    return 0 <= key < 128 and not is_control(key)


def describe_key(key: int) -> str:
    try:
        named = Key(key)
    except ValueError:
        return _describe_byte(key)
    return named.name


def _describe_byte(key: int) -> str:
    if 0 < key < 27:
        return f"CTRL+{chr(key + 64)}"
    if is_printable(key):
        return chr(key)
    return f"0x{key:02x}"


__all__ = ["Key", "ctrl_key", "is_control", "is_printable", "describe_key"]

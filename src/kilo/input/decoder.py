"""Turns the terminal byte stream into logical key events."""

from __future__ import annotations

from typing import Optional

from kilo.terminal import Terminal

from .keys import Key
from .sequences import ESC_BYTE, SequenceTrie

# ESC plus the two follow bytes always read before giving up.
MIN_LOOKAHEAD = 3


class InputDecoder:
    """Short-lookahead decoder over ``Terminal.read_byte``.

    Plain bytes come back unchanged, byte 127 is Backspace, and an escape
    byte starts a lookup in the sequence trie. Two follow bytes are read
    before an unknown sequence is abandoned; an incomplete or unknown
    sequence degrades to a literal Escape key.
    """

    def __init__(
        self,
        terminal: Terminal,
        *,
        timeout: float = 0.1,
        trie: Optional[SequenceTrie] = None,
    ) -> None:
        self._terminal = terminal
        self._timeout = timeout
        self._trie = trie or SequenceTrie()
        self._max_length = self._trie.max_length
        self._lookahead = min(MIN_LOOKAHEAD, self._max_length)

    def read_key(self) -> Optional[int]:
        """Return the next key, or ``None`` when the read timed out."""

        byte = self._terminal.read_byte(self._timeout)
        if byte is None:
            return None
        if byte == ESC_BYTE:
            return self._read_escape_sequence()
        if byte == Key.BACKSPACE:
            return Key.BACKSPACE
        return byte

    def _read_escape_sequence(self) -> int:
        pending = [ESC_BYTE]
        while len(pending) < self._max_length:
            byte = self._terminal.read_byte(self._timeout)
            if byte is None:
                return Key.ESCAPE
            pending.append(byte)
            if len(pending) < self._lookahead:
                continue
            result = self._trie.resolve(pending)
            if result.status == "match" and result.key is not None:
                return result.key
            if result.status == "miss":
                return Key.ESCAPE
        return Key.ESCAPE


__all__ = ["InputDecoder"]

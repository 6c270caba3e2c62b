"""Single-line prompt shown in the message bar."""

from __future__ import annotations

from typing import Callable, List, Optional, Protocol

from kilo.input import InputDecoder, Key, ctrl_key, is_printable
from kilo.runtime import telemetry

_ERASE_KEYS = frozenset({Key.BACKSPACE, Key.DELETE, ctrl_key("h")})


class PromptCallback(Protocol):
    """Invoked with the current input and the key just handled."""

    def __call__(self, query: str, key: int) -> None: ...


class PromptEngine:
    """Collects a line of input while the editor keeps redrawing.

    ``prompt`` runs its own render/read loop on top of the editor's: every
    pass shows the template with the current input, reads one key, and then
    hands the input and key to ``on_key``. Returns the input on Enter (only
    when non-empty) or ``None`` on Escape.
    """

    def __init__(
        self,
        decoder: InputDecoder,
        *,
        set_status: Callable[[str], None],
        refresh: Callable[[], None],
    ) -> None:
        self._decoder = decoder
        self._set_status = set_status
        self._refresh = refresh

    def prompt(
        self, template: str, on_key: Optional[PromptCallback] = None
    ) -> Optional[str]:
        typed: List[str] = []
        with telemetry.span("prompt::session", component="prompt") as handle:
            while True:
                current = "".join(typed)
                self._set_status(template.format(current))
                self._refresh()

                key = self._decoder.read_key()
                if key is None:
                    continue

                if key in _ERASE_KEYS:
                    if typed:
                        typed.pop()
                elif key == Key.ESCAPE:
                    self._set_status("")
                    if on_key is not None:
                        on_key(current, key)
                    handle.add_metadata("status", "cancel")
                    return None
                elif key == Key.ENTER:
                    if typed:
                        self._set_status("")
                        if on_key is not None:
                            on_key(current, key)
                        handle.add_metadata("status", "submit")
                        return current
                elif is_printable(key):
                    typed.append(chr(key))

                if on_key is not None:
                    on_key("".join(typed), key)


__all__ = ["PromptEngine", "PromptCallback"]

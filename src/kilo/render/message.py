"""Transient status message shown on the bottom line."""

from __future__ import annotations

import time
from dataclasses import dataclass, field


@dataclass(slots=True)
class StatusMessage:
    text: str = ""
    timestamp: float = field(default_factory=time.monotonic)

    def set(self, text: str, *, now: float | None = None) -> None:
        self.text = text
        self.timestamp = time.monotonic() if now is None else now

    def visible(self, now: float, timeout: float) -> bool:
        return bool(self.text) and (now - self.timestamp) < timeout


__all__ = ["StatusMessage"]

"""Editor context handed to every action, plus the action result type."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from kilo.buffer import Document, EditState
from kilo.config import EditorConfig
from kilo.render import StatusMessage

if TYPE_CHECKING:
    from kilo.modes.prompt import PromptEngine


@dataclass(slots=True)
class ActionResult:
    """Result returned from every editor action."""

    status: str = "ok"
    message: Optional[str] = None


@dataclass
class EditorContext:
    """All mutable editor state, owned by the controller.

    Actions receive the context explicitly; nothing reaches editor state
    through module globals.
    """

    document: Document
    state: EditState
    config: EditorConfig = field(default_factory=EditorConfig)
    message: StatusMessage = field(default_factory=StatusMessage)
    prompt: Optional["PromptEngine"] = None
    quit_times: int = -1
    running: bool = True

    def __post_init__(self) -> None:
        if self.quit_times < 0:
            self.quit_times = self.config.quit_times

    def set_status(self, text: str) -> None:
        self.message.set(text)

    def require_prompt(self) -> "PromptEngine":
        if self.prompt is None:
            raise RuntimeError("EditorContext has no prompt engine attached")
        return self.prompt


__all__ = ["ActionResult", "EditorContext"]

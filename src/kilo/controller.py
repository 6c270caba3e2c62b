"""Editor controller: owns the state and runs the render/read/dispatch loop."""

from __future__ import annotations

from typing import Optional

from kilo.buffer import Document, EditState, load_document
from kilo.config import EditorConfig
from kilo.context import ActionResult, EditorContext
from kilo.input import InputDecoder, describe_key
from kilo.keymaps import KeymapRegistry, load_default_keymaps
from kilo.modes import PromptEngine
from kilo.render import Renderer
from kilo.runtime import telemetry
from kilo.terminal import Terminal, ansi

HELP_MESSAGE = "HELP: Ctrl-S = save | Ctrl-Q = quit | Ctrl-F = find"


class EditorController:
    """Drives one editing session on a terminal.

    Each pass of the loop draws a frame, waits (with a short timeout) for a
    key, and dispatches it through the keymap registry. A timeout just
    causes another redraw, which is what expires old status messages.
    """

    def __init__(
        self,
        terminal: Terminal,
        config: Optional[EditorConfig] = None,
        *,
        keymap_registry: KeymapRegistry | None = None,
        renderer: Renderer | None = None,
    ) -> None:
        self.terminal = terminal
        self.config = config or EditorConfig()
        self.renderer = renderer or Renderer(self.config)
        self.decoder = InputDecoder(terminal, timeout=self.config.read_timeout)
        if keymap_registry is None:
            keymap_registry = KeymapRegistry(logger_name="kilo.keymaps")
            load_default_keymaps(keymap_registry)
        self.keymap_registry = keymap_registry

        rows, cols = terminal.query_dimensions()
        self.context = EditorContext(
            document=Document(tab_stop=self.config.tab_stop),
            state=EditState.for_terminal(rows, cols),
            config=self.config,
        )
        self.context.prompt = PromptEngine(
            self.decoder,
            set_status=self.context.set_status,
            refresh=self.refresh_screen,
        )

    @property
    def document(self) -> Document:
        return self.context.document

    @property
    def state(self) -> EditState:
        return self.context.state

    @property
    def running(self) -> bool:
        return self.context.running

    def open(self, path: str) -> None:
        """Load ``path`` into the editor. ``OSError`` propagates to the caller."""

        self.context.document = load_document(path, tab_stop=self.config.tab_stop)
        self.state.cx = self.state.cy = 0
        self.state.row_offset = self.state.col_offset = 0

    def set_status_message(self, text: str) -> None:
        self.context.set_status(text)

    def refresh_screen(self) -> str:
        return self.renderer.refresh(
            self.terminal, self.state, self.document, self.context.message
        )

    def process_keypress(self) -> Optional[ActionResult]:
        """Read one key and apply it. Returns ``None`` if no key arrived."""

        key = self.decoder.read_key()
        if key is None:
            return None
        return self.dispatch(key)

    def dispatch(self, key: int) -> ActionResult:
        action = self.keymap_registry.resolve(key)
        if action is None:
            return ActionResult(status="unbound")

        with telemetry.span(
            "editor::keypress",
            component="controller",
            metadata={"key": describe_key(key), "action": action.id},
        ) as handle:
            outcome = action(self.context, key)
            result = outcome if isinstance(outcome, ActionResult) else ActionResult()
            handle.add_metadata("status", result.status)

        if result.status != "quit_pending":
            self.context.quit_times = self.config.quit_times
        return result

    def run(self) -> None:
        """Loop until a quit action stops the editor, then clear the screen."""

        self.set_status_message(HELP_MESSAGE)
        while self.context.running:
            self.refresh_screen()
            self.process_keypress()
        self.terminal.write((ansi.CLEAR_SCREEN + ansi.CURSOR_HOME).encode("ascii"))


__all__ = ["EditorController", "HELP_MESSAGE"]

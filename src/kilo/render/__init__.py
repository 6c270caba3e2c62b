"""Frame rendering and the status message line."""

from .message import StatusMessage
from .renderer import FILL_MARKER, HELP_TEXT, Renderer

__all__ = ["Renderer", "StatusMessage", "FILL_MARKER", "HELP_TEXT"]

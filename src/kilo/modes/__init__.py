"""Modal input on top of the main loop: prompts and incremental search."""

from .prompt import PromptCallback, PromptEngine
from .search import BACKWARD, FORWARD, IncrementalSearch

__all__ = [
    "PromptEngine",
    "PromptCallback",
    "IncrementalSearch",
    "FORWARD",
    "BACKWARD",
]

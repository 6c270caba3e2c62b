"""Text buffer: rows, document, cursor state, and file I/O."""

from .document import Document, split_lines
from .fileio import SaveResult, load_document, save_document
from .row import DEFAULT_TAB_STOP, Row
from .state import RESERVED_ROWS, EditState

__all__ = [
    "DEFAULT_TAB_STOP",
    "Row",
    "Document",
    "split_lines",
    "EditState",
    "RESERVED_ROWS",
    "SaveResult",
    "load_document",
    "save_document",
]

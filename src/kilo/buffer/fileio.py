"""Loading and saving documents as plain text files."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from kilo.runtime import telemetry

from .document import Document
from .row import DEFAULT_TAB_STOP

# One character per byte: columns are byte offsets and every byte value
# survives a load/save cycle unchanged.
ENCODING = "latin-1"


@dataclass(frozen=True, slots=True)
class SaveResult:
    """Outcome of a save attempt; ``error`` holds the OS error text."""

    ok: bool
    filename: str
    bytes_written: int = 0
    lines: int = 0
    error: Optional[str] = None


def decode_text(data: bytes) -> str:
    return data.decode(ENCODING)


def encode_text(text: str) -> bytes:
    return text.encode(ENCODING)


def load_document(path: str, *, tab_stop: int = DEFAULT_TAB_STOP) -> Document:
    """Read ``path`` into a clean document. Raises ``OSError`` on failure."""

    with open(path, "rb") as handle:
        data = handle.read()
    document = Document.from_text(decode_text(data), filename=path, tab_stop=tab_stop)
    document.mark_clean()
    telemetry.record_event(
        "document.load",
        data={"filename": path, "lines": document.num_rows, "bytes": len(data)},
    )
    return document


def save_document(document: Document, path: Optional[str] = None) -> SaveResult:
    """Write the document's flat text to ``path`` (default: its filename).

    The file is opened without truncation, resized to the new length, then
    written, so a failed open leaves the previous contents alone. The
    document itself is never modified here.
    """

    target = path or document.filename
    if not target:
        return SaveResult(ok=False, filename="", error="no filename")

    data = encode_text(document.to_flat_text())
    try:
        fd = os.open(target, os.O_RDWR | os.O_CREAT, 0o644)
        try:
            os.ftruncate(fd, len(data))
            _write_all(fd, data)
        finally:
            os.close(fd)
    except OSError as exc:
        reason = exc.strerror or str(exc)
        telemetry.record_event(
            "document.save_failed",
            level="warning",
            data={"filename": target, "error": reason},
        )
        return SaveResult(ok=False, filename=target, error=reason)

    telemetry.record_event(
        "document.save",
        data={"filename": target, "lines": document.num_rows, "bytes": len(data)},
    )
    return SaveResult(
        ok=True, filename=target, bytes_written=len(data), lines=document.num_rows
    )


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        if written <= 0:
            raise OSError(0, "short write")
        view = view[written:]


__all__ = [
    "SaveResult",
    "load_document",
    "save_document",
    "decode_text",
    "encode_text",
]

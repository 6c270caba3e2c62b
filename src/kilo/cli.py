"""Command-line entry point."""

from __future__ import annotations

import argparse
import sys
from contextlib import suppress
from typing import Optional, Sequence

from kilo.config import KILO_VERSION, EditorConfig
from kilo.controller import EditorController
from kilo.runtime import telemetry
from kilo.terminal import ManagedTerminal, PosixTerminal, Terminal, TerminalError, ansi

EXIT_OK = 0
EXIT_FATAL = 1


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="kilo", description="A small terminal text editor."
    )
    parser.add_argument("filename", nargs="?", help="File to open")
    parser.add_argument(
        "--tab-stop",
        type=int,
        default=None,
        help="Columns per tab stop (default: $KILO_TAB_STOP or 4)",
    )
    parser.add_argument(
        "--no-highlight",
        action="store_true",
        help="Do not color digits",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {KILO_VERSION}"
    )
    return parser.parse_args(argv)


def run_editor(
    terminal: Terminal, config: EditorConfig, filename: Optional[str] = None
) -> None:
    editor = EditorController(terminal, config)
    if filename:
        editor.open(filename)
    editor.run()


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    terminal: Optional[ManagedTerminal] = None,
) -> int:
    args = _parse_args(argv)
    config = EditorConfig.from_env().with_overrides(tab_stop=args.tab_stop)
    if args.no_highlight:
        config = config.with_overrides(highlight_digits=False)

    session: ManagedTerminal = terminal or PosixTerminal()
    try:
        with session.raw_mode():
            run_editor(session, config, args.filename)
    except (TerminalError, OSError) as exc:
        telemetry.record_event("editor.fatal", level="error", data={"error": str(exc)})
        _restore_screen(session)
        print(f"kilo: {_describe(exc)}", file=sys.stderr)
        return EXIT_FATAL
    return EXIT_OK


def _restore_screen(terminal: Terminal) -> None:
    with suppress(TerminalError):
        terminal.write((ansi.CLEAR_SCREEN + ansi.CURSOR_HOME).encode("ascii"))


def _describe(exc: BaseException) -> str:
    if isinstance(exc, OSError) and exc.strerror:
        if exc.filename:
            return f"{exc.filename}: {exc.strerror}"
        return exc.strerror
    return str(exc)


__all__ = ["main", "run_editor"]

from pathlib import Path

import pytest

from kilo import __version__
from kilo.cli import main
from kilo.input import ctrl_key
from kilo.terminal import ManagedTerminal, PosixTerminal, ansi

from .virtual_terminal import VirtualTerminal


def test_quit_returns_zero_and_restores_terminal() -> None:
    terminal = VirtualTerminal(script=bytes([ctrl_key("q")]))

    assert main([], terminal=terminal) == 0
    assert terminal.enter_count == 1
    assert terminal.leave_count == 1
    assert not terminal.raw
    assert terminal.last_write == ansi.CLEAR_SCREEN + ansi.CURSOR_HOME


def test_opens_named_file(tmp_path: Path) -> None:
    path = tmp_path / "doc.txt"
    path.write_text("hello\n")
    terminal = VirtualTerminal(script=bytes([ctrl_key("q")]))

    assert main([str(path)], terminal=terminal) == 0
    assert "hello" in terminal.output


def test_missing_file_is_fatal(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    terminal = VirtualTerminal()
    missing = tmp_path / "missing.txt"

    assert main([str(missing)], terminal=terminal) == 1

    assert terminal.last_write == ansi.CLEAR_SCREEN + ansi.CURSOR_HOME
    assert not terminal.raw
    err = capsys.readouterr().err
    assert err.startswith("kilo: ")
    assert str(missing) in err


def test_tab_stop_option(tmp_path: Path) -> None:
    path = tmp_path / "tabs.txt"
    path.write_text("\tx\n")
    terminal = VirtualTerminal(script=bytes([ctrl_key("q")]))

    main(["--tab-stop", "8", str(path)], terminal=terminal)

    assert "        x" in terminal.output


def test_version_flag(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"], terminal=VirtualTerminal())

    assert excinfo.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_scripted_and_posix_terminals_are_managed_terminals() -> None:
    assert isinstance(VirtualTerminal(), ManagedTerminal)
    assert isinstance(PosixTerminal(fd_in=0, fd_out=1), ManagedTerminal)
    assert not isinstance(object(), ManagedTerminal)

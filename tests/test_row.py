import pytest

from kilo.buffer import Row

SAMPLE_ROWS = (
    "",
    "plain text",
    "\t",
    "\tindented",
    "a\tb\tc",
    "ab\t\tcd",
    "\t\t\t",
    "abc\t",
    "abcd\te",
)


def test_render_expands_tabs_to_next_stop() -> None:
    row = Row("a\tb", tab_stop=4)

    assert row.render == "a   b"
    assert row.rsize == 5
    assert row.size == 3


def test_tab_at_start_of_empty_row_advances_to_tab_stop() -> None:
    row = Row("", tab_stop=4)

    row.insert_char(0, "\t")

    assert row.cx_to_rx(1) == 4
    assert row.render == "    "


def test_render_cache_follows_every_mutation() -> None:
    row = Row("x", tab_stop=4)

    row.insert_char(0, "\t")
    assert row.render == "    x"

    row.append("\ty")
    assert row.render == "    x   y"

    row.delete_char(0)
    assert row.render == "x   y"

    row.truncate(1)
    assert row.render == "x"

    row.chars = "\t"
    assert row.render == "    "


@pytest.mark.parametrize("chars", SAMPLE_ROWS)
@pytest.mark.parametrize("tab_stop", (1, 4, 8))
def test_rx_to_cx_inverts_cx_to_rx(chars: str, tab_stop: int) -> None:
    row = Row(chars, tab_stop=tab_stop)

    for cx in range(row.size + 1):
        rx = row.cx_to_rx(cx)
        assert rx >= cx
        assert row.rx_to_cx(rx) == cx


def test_rx_inside_tab_maps_to_the_tab() -> None:
    row = Row("a\tb", tab_stop=4)

    assert row.rx_to_cx(1) == 1
    assert row.rx_to_cx(2) == 1
    assert row.rx_to_cx(3) == 1
    assert row.rx_to_cx(4) == 2
    assert row.rx_to_cx(99) == 3


@pytest.mark.parametrize("chars", SAMPLE_ROWS)
def test_insert_then_delete_is_identity(chars: str) -> None:
    original = Row(chars)

    for at in range(len(chars) + 1):
        row = Row(chars)
        row.insert_char(at, "Z")
        assert row.delete_char(at) is True
        assert row == original
        assert row.render == original.render


def test_insert_char_clamps_position() -> None:
    row = Row("ab")

    row.insert_char(10, "c")
    row.insert_char(-3, "_")

    assert row.chars == "_abc"


def test_delete_char_out_of_range_is_noop() -> None:
    row = Row("ab")

    assert row.delete_char(2) is False
    assert row.delete_char(-1) is False
    assert row.chars == "ab"


def test_invalid_tab_stop_rejected() -> None:
    with pytest.raises(ValueError):
        Row("x", tab_stop=0)

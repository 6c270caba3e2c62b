import pytest

from kilo.input import ESCAPE_SEQUENCES, Key, SequenceTrie, ctrl_key, describe_key
from kilo.input.keys import is_printable


def test_every_table_entry_resolves_to_its_key() -> None:
    trie = SequenceTrie()

    for sequence, key in ESCAPE_SEQUENCES.items():
        result = trie.resolve(list(sequence))
        assert result.status == "match"
        assert result.key is key
        assert result.consumed == len(sequence)


def test_prefix_is_pending_with_next_bytes() -> None:
    trie = SequenceTrie()

    result = trie.resolve(b"\x1b[")

    assert result.status == "pending"
    assert ord("A") in result.next_expected
    assert ord("3") in result.next_expected


def test_reserved_digit_prefix_is_pending() -> None:
    trie = SequenceTrie()

    assert trie.resolve(b"\x1b[9").status == "pending"
    assert trie.resolve(b"\x1b[9~").status == "miss"


def test_unknown_sequence_misses() -> None:
    trie = SequenceTrie()

    result = trie.resolve(b"\x1bx")

    assert result.status == "miss"
    assert result.consumed == 1


def test_custom_table_replaces_defaults() -> None:
    trie = SequenceTrie({b"\x1bZ": Key.HOME}, reserved=())

    assert trie.resolve(b"\x1bZ").key is Key.HOME
    assert trie.resolve(b"\x1b[A").status == "miss"
    assert trie.max_length == 2


def test_add_rejects_sequence_without_escape() -> None:
    trie = SequenceTrie()

    with pytest.raises(ValueError):
        trie.add(b"[A", Key.ARROW_UP)


def test_add_rejects_shadowing_prefix() -> None:
    trie = SequenceTrie()

    with pytest.raises(ValueError):
        trie.add(b"\x1b[", Key.HOME)


def test_max_length_covers_tilde_sequences() -> None:
    assert SequenceTrie().max_length == 4


def test_ctrl_key_masks_upper_bits() -> None:
    assert ctrl_key("q") == 17
    assert ctrl_key("s") == 19
    assert ctrl_key("f") == 6
    assert ctrl_key("h") == 8


def test_synthetic_keys_never_collide_with_bytes() -> None:
    synthetic = [key for key in Key if key not in (Key.ENTER, Key.ESCAPE, Key.BACKSPACE)]

    assert all(key > 255 for key in synthetic)
    assert len(set(Key)) == len(list(Key))


@pytest.mark.parametrize(
    ("key", "expected"),
    [
        (Key.ARROW_UP, "ARROW_UP"),
        (Key.ENTER, "ENTER"),
        (27, "ESCAPE"),
        (127, "BACKSPACE"),
        (1008, "PAGE_DOWN"),
        (999, "0x3e7"),
        (ctrl_key("s"), "CTRL+S"),
        (ord("a"), "a"),
        (0xE9, "0xe9"),
    ],
)
def test_describe_key(key: int, expected: str) -> None:
    assert describe_key(key) == expected


def test_printable_excludes_control_and_high_bytes() -> None:
    assert is_printable(ord(" "))
    assert is_printable(ord("~"))
    assert not is_printable(127)
    assert not is_printable(9)
    assert not is_printable(0xE9)

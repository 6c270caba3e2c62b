"""Trie-based escape-sequence resolution.

Each escape sequence is a path of bytes starting at ``ESC``. Feeding the
bytes read so far yields ``match`` (a complete sequence), ``pending`` (a
valid prefix, read another byte), or ``miss`` (not a known sequence).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Literal, Mapping, Optional, Sequence

from .keys import Key

ESC_BYTE = 0x1B

ESCAPE_SEQUENCES: Mapping[bytes, Key] = {
    b"\x1b[A": Key.ARROW_UP,
    b"\x1b[B": Key.ARROW_DOWN,
    b"\x1b[C": Key.ARROW_RIGHT,
    b"\x1b[D": Key.ARROW_LEFT,
    b"\x1b[H": Key.HOME,
    b"\x1b[F": Key.END,
    b"\x1b[1~": Key.HOME,
    b"\x1b[3~": Key.DELETE,
    b"\x1b[4~": Key.END,
    b"\x1b[5~": Key.PAGE_UP,
    b"\x1b[6~": Key.PAGE_DOWN,
    b"\x1b[7~": Key.HOME,
    b"\x1b[8~": Key.END,
    b"\x1bOH": Key.HOME,
    b"\x1bOF": Key.END,
}

# ``ESC [ <digit>`` always waits for one more byte, even for digits with no
# ``~`` mapping, so the terminator is consumed rather than typed.
RESERVED_PREFIXES: tuple[bytes, ...] = tuple(
    b"\x1b[" + bytes([digit]) for digit in b"0123456789"
)


@dataclass(slots=True)
class TrieNode:
    """Single trie node tracking the decoded key and child transitions."""

    key: Optional[Key] = None
    children: Dict[int, "TrieNode"] = field(default_factory=dict)

    def child(self, byte: int) -> "TrieNode":
        return self.children.setdefault(byte, TrieNode())

    def next_bytes(self) -> tuple[int, ...]:
        return tuple(sorted(self.children.keys()))


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    """Outcome of feeding a byte prefix to the trie."""

    status: Literal["match", "pending", "miss"]
    key: Optional[Key] = None
    consumed: int = 0
    next_expected: tuple[int, ...] = ()


class SequenceTrie:
    """Byte trie over escape sequences."""

    def __init__(
        self,
        sequences: Optional[Mapping[bytes, Key]] = None,
        *,
        reserved: Iterable[bytes] = RESERVED_PREFIXES,
    ) -> None:
        self.root = TrieNode()
        for prefix in reserved:
            self.reserve(prefix)
        table = ESCAPE_SEQUENCES if sequences is None else sequences
        for sequence, key in table.items():
            self.add(sequence, key)

    def add(self, sequence: bytes, key: Key) -> None:
        if not sequence or sequence[0] != ESC_BYTE:
            raise ValueError(f"escape sequence must start with ESC: {sequence!r}")
        node = self.reserve(sequence)
        if node.children:
            raise ValueError(f"sequence {sequence!r} shadows longer sequences")
        node.key = key

    def reserve(self, prefix: bytes) -> TrieNode:
        node = self.root
        for byte in prefix:
            if node.key is not None:
                raise ValueError(f"prefix {prefix!r} extends a complete sequence")
            node = node.child(byte)
        return node

    def resolve(self, data: Sequence[int]) -> ResolutionResult:
        node = self.root
        consumed = 0
        for byte in data:
            child = node.children.get(byte)
            if child is None:
                return ResolutionResult(status="miss", consumed=consumed)
            node = child
            consumed += 1

        if node.key is not None:
            return ResolutionResult(status="match", key=node.key, consumed=consumed)
        return ResolutionResult(
            status="pending", consumed=consumed, next_expected=node.next_bytes()
        )

    @property
    def max_length(self) -> int:
        longest = 0
        stack = [(self.root, 0)]
        while stack:
            node, depth = stack.pop()
            longest = max(longest, depth)
            stack.extend((child, depth + 1) for child in node.children.values())
        return longest


__all__ = [
    "ESC_BYTE",
    "ESCAPE_SEQUENCES",
    "RESERVED_PREFIXES",
    "ResolutionResult",
    "SequenceTrie",
    "TrieNode",
]

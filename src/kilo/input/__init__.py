"""Key decoding for raw terminal input."""

from .decoder import InputDecoder
from .keys import Key, ctrl_key, describe_key, is_control, is_printable
from .sequences import ESCAPE_SEQUENCES, ResolutionResult, SequenceTrie

__all__ = [
    "InputDecoder",
    "Key",
    "ctrl_key",
    "describe_key",
    "is_control",
    "is_printable",
    "ESCAPE_SEQUENCES",
    "ResolutionResult",
    "SequenceTrie",
]

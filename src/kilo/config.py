"""Editor configuration and constants."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from kilo import __version__

KILO_VERSION = __version__
ENV_PREFIX = "KILO_"


@dataclass(frozen=True)
class EditorConfig:
    """Tunables shared by the buffer, renderer, and controller."""

    tab_stop: int = 4
    quit_times: int = 3
    message_timeout: float = 5.0
    read_timeout: float = 0.1
    highlight_digits: bool = True

    def __post_init__(self) -> None:
        if self.tab_stop < 1:
            raise ValueError("tab_stop must be positive")
        if self.quit_times < 0:
            raise ValueError("quit_times cannot be negative")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EditorConfig":
        """Build a config from ``KILO_*`` variables, ignoring malformed values."""

        env = os.environ if environ is None else environ
        defaults = cls()
        tab_stop = _env_int(env, "TAB_STOP", defaults.tab_stop)
        return cls(
            tab_stop=tab_stop if tab_stop >= 1 else defaults.tab_stop,
            quit_times=max(0, _env_int(env, "QUIT_TIMES", defaults.quit_times)),
            message_timeout=_env_float(
                env, "MESSAGE_TIMEOUT", defaults.message_timeout
            ),
            read_timeout=_env_float(env, "READ_TIMEOUT", defaults.read_timeout),
            highlight_digits=_env_flag(
                env, "HIGHLIGHT_DIGITS", defaults.highlight_digits
            ),
        )

    def with_overrides(self, **changes: object) -> "EditorConfig":
        cleaned = {key: value for key, value in changes.items() if value is not None}
        return replace(self, **cleaned)


def _env_int(env: Mapping[str, str], key: str, fallback: int) -> int:
    value = env.get(f"{ENV_PREFIX}{key}")
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


def _env_float(env: Mapping[str, str], key: str, fallback: float) -> float:
    value = env.get(f"{ENV_PREFIX}{key}")
    if value is None:
        return fallback
    try:
        return float(value)
    except ValueError:
        return fallback


def _env_flag(env: Mapping[str, str], key: str, fallback: bool) -> bool:
    raw = env.get(f"{ENV_PREFIX}{key}")
    if raw is None:
        return fallback
    return raw.lower() in {"1", "true", "yes", "on"}


__all__ = ["EditorConfig", "KILO_VERSION"]

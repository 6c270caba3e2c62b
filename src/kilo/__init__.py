"""A small raw-terminal text editor."""

__all__ = [
    "actions",
    "buffer",
    "config",
    "context",
    "controller",
    "input",
    "keymaps",
    "modes",
    "render",
    "runtime",
    "terminal",
]

__version__ = "0.1.0"

"""Vim-style operand resolution: keystrokes to motions, text objects, and regions."""

__all__ = [
    "buffer",
    "motions",
    "operands",
    "operators",
    "runtime",
]

__version__ = "0.1.0"

"""Split a keystroke string into its repeat count and command suffix."""

from __future__ import annotations

from typing import Tuple

_DIGITS = frozenset("0123456789")


def split_counted_command(raw: str) -> Tuple[int, str]:
    """Return ``(count, suffix)`` for ``raw``.

    A leading ``0`` is the start-of-line motion, never a count digit; without
    count digits the count is 1.
    """

    if not raw or raw[0] == "0":
        return 1, raw
    digits = 0
    while digits < len(raw) and raw[digits] in _DIGITS:
        digits += 1
    if digits == 0:
        return 1, raw
    return int(raw[:digits]), raw[digits:]


__all__ = ["split_counted_command"]

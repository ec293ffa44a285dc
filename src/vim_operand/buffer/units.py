"""Text units and the boundary arithmetic behind cursor probes.

Every function here works on a plain ``str`` and an integer offset. Offsets are
clamped by the callers; the helpers never raise for points inside
``[0, len(text)]`` and simply return the input at a buffer edge.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Tuple


class TextUnit(str, Enum):
    """Granularity used by text objects and probes."""

    CHARACTER = "character"
    WORD = "word"
    BIG_WORD = "big_word"
    LINE = "line"
    VLINE = "vline"
    PARAGRAPH = "paragraph"
    DOCUMENT = "document"


class Direction(str, Enum):
    FORWARD = "forward"
    BACKWARD = "backward"


_BLANK = 0
_PUNCT = 1
_WORD = 2


def char_class(ch: str, *, big: bool = False) -> int:
    if ch.isspace():
        return _BLANK
    if big or ch.isalnum() or ch == "_":
        return _WORD
    return _PUNCT


def line_start(text: str, point: int) -> int:
    return text.rfind("\n", 0, point) + 1


def line_end(text: str, point: int) -> int:
    """Offset of the newline ending the line holding ``point`` (or ``len``)."""

    end = text.find("\n", point)
    return len(text) if end == -1 else end


def next_line_start(text: str, point: int) -> int:
    return min(line_end(text, point) + 1, len(text))


def is_blank_line(text: str, point: int) -> bool:
    start = line_start(text, point)
    return not text[start : line_end(text, start)].strip()


def first_non_blank(text: str, point: int) -> int:
    start = line_start(text, point)
    end = line_end(text, start)
    content = text[start:end]
    stripped = content.lstrip(" \t")
    if not stripped:
        return end
    return start + len(content) - len(stripped)


# Word helpers


def word_forward(text: str, point: int, *, big: bool = False) -> int:
    """Start of the next word, as Vim's ``w``; stops on empty lines."""

    end = len(text)
    if point >= end:
        return end
    cls = char_class(text[point], big=big)
    if cls != _BLANK:
        while point < end and char_class(text[point], big=big) == cls:
            point += 1
    after_newline = False
    while point < end and char_class(text[point], big=big) == _BLANK:
        if text[point] == "\n":
            if after_newline:
                return point
            after_newline = True
        else:
            after_newline = False
        point += 1
    return point


def word_backward(text: str, point: int, *, big: bool = False) -> int:
    """Start of the previous word, as Vim's ``b``."""

    if point <= 0:
        return 0
    point -= 1
    while point > 0 and char_class(text[point], big=big) == _BLANK:
        if text[point] == "\n" and text[point - 1] == "\n":
            return point
        point -= 1
    cls = char_class(text[point], big=big)
    if cls == _BLANK:
        return point
    while point > 0 and char_class(text[point - 1], big=big) == cls:
        point -= 1
    return point


def word_end(text: str, point: int, *, big: bool = False) -> int:
    """Last character of the current or next word, as Vim's ``e``."""

    end = len(text)
    if end == 0:
        return 0
    point += 1
    while point < end and char_class(text[point], big=big) == _BLANK:
        point += 1
    if point >= end:
        return end - 1
    cls = char_class(text[point], big=big)
    while point + 1 < end and char_class(text[point + 1], big=big) == cls:
        point += 1
    return point


def _run_start(text: str, point: int, big: bool) -> int:
    if point >= len(text) or text[point] == "\n":
        return point
    cls = char_class(text[point], big=big)
    while (
        point > 0
        and text[point - 1] != "\n"
        and char_class(text[point - 1], big=big) == cls
    ):
        point -= 1
    return point


# Paragraph helpers


def paragraph_forward(text: str, point: int) -> int:
    end = len(text)
    start = line_start(text, point)
    while start < end and is_blank_line(text, start):
        start = line_end(text, start) + 1
    while start < end and not is_blank_line(text, start):
        start = line_end(text, start) + 1
    return min(start, end)


def paragraph_backward(text: str, point: int) -> int:
    start = line_start(text, point)
    while start > 0 and is_blank_line(text, start):
        start = line_start(text, start - 1)
    while start > 0 and not is_blank_line(text, start):
        start = line_start(text, start - 1)
    return start


def _block_start(text: str, point: int) -> int:
    start = line_start(text, point)
    blank = is_blank_line(text, start)
    while start > 0:
        previous = line_start(text, start - 1)
        if is_blank_line(text, previous) != blank:
            break
        start = previous
    return start


def _block_end(text: str, point: int) -> int:
    end = len(text)
    start = line_start(text, point)
    blank = is_blank_line(text, start)
    while True:
        following = line_end(text, start) + 1
        if following >= end:
            return end
        if is_blank_line(text, following) != blank:
            return following
        start = following


# Probe table: (backward, forward) per unit

Probe = Callable[[str, int], int]


def _line_content_end(text: str, point: int) -> int:
    end = line_end(text, point)
    if end == point and point < len(text):
        return line_end(text, point + 1)
    return end


_PROBES: Dict[TextUnit, Tuple[Probe, Probe]] = {
    TextUnit.CHARACTER: (
        lambda text, point: point,
        lambda text, point: min(point + 1, len(text)),
    ),
    TextUnit.WORD: (
        lambda text, point: _run_start(text, point, False),
        lambda text, point: word_forward(text, point),
    ),
    TextUnit.BIG_WORD: (
        lambda text, point: _run_start(text, point, True),
        lambda text, point: word_forward(text, point, big=True),
    ),
    TextUnit.LINE: (line_start, _line_content_end),
    TextUnit.VLINE: (line_start, next_line_start),
    TextUnit.PARAGRAPH: (_block_start, _block_end),
    TextUnit.DOCUMENT: (
        lambda text, point: 0,
        lambda text, point: len(text),
    ),
}


def probe(text: str, point: int, unit: TextUnit, direction: Direction) -> int:
    """Boundary of ``unit`` reached from ``point`` in ``direction``.

    Backward yields the start of the unit holding ``point``; forward yields its
    end. Both are no-ops at the corresponding buffer edge.
    """

    point = max(0, min(point, len(text)))
    if point == len(text) and direction is Direction.FORWARD:
        return point
    backward, forward = _PROBES[unit]
    if direction is Direction.BACKWARD:
        return backward(text, point)
    return forward(text, point)


__all__ = [
    "TextUnit",
    "Direction",
    "char_class",
    "line_start",
    "line_end",
    "next_line_start",
    "is_blank_line",
    "first_non_blank",
    "word_forward",
    "word_backward",
    "word_end",
    "paragraph_forward",
    "paragraph_backward",
    "probe",
]

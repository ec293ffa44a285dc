"""Offset-addressed text storage for operand resolution."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field
from typing import Tuple

from .units import first_non_blank


def _index_lines(text: str) -> Tuple[int, ...]:
    starts = [0]
    position = text.find("\n")
    while position != -1:
        starts.append(position + 1)
        position = text.find("\n", position + 1)
    return tuple(starts)


@dataclass(frozen=True, slots=True)
class BufferDocument:
    """Immutable text plus a precomputed index of line start offsets.

    Points are offsets into ``text`` in ``[0, len(text)]``. A trailing newline
    opens an empty final line, matching how editors report the last line.
    """

    text: str = ""
    line_starts: Tuple[int, ...] = field(default=(0,), compare=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "line_starts", _index_lines(self.text))

    @classmethod
    def from_text(cls, text: str) -> "BufferDocument":
        return cls(text=text)

    @property
    def length(self) -> int:
        return len(self.text)

    @property
    def line_count(self) -> int:
        return len(self.line_starts)

    def line_and_column(self, point: int) -> Tuple[int, int]:
        line = bisect_right(self.line_starts, point) - 1
        return line, point - self.line_starts[line]

    def first_non_blank_column(self, line: int) -> int:
        start = self.line_starts[line]
        return first_non_blank(self.text, start) - start

"""Cursor capability consumed by region resolution."""

from __future__ import annotations

from typing import Protocol, Tuple

from .state import Point
from .units import Direction, TextUnit


class CursorCapability(Protocol):
    """What region resolution needs from an editor buffer.

    Implementations must treat ``probe_move`` as speculative: it reports where a
    move from ``point`` would land without moving the live cursor, and returns
    ``point`` unchanged when no move is possible.
    """

    def current_position(self) -> Point:
        ...

    def line_and_column(self, point: Point) -> Tuple[int, int]:
        ...

    def probe_move(self, point: Point, unit: TextUnit, direction: Direction) -> Point:
        ...

    def first_non_blank_column(self, line: int) -> int:
        ...

    def content(self) -> str:
        ...


class BufferValidationError(RuntimeError):
    """Raised when a caller hands the buffer a point outside its content."""

    def __init__(self, message: str, *, point: Point | None = None) -> None:
        super().__init__(message)
        self.point = point

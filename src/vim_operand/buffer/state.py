"""Mutable cursor state for a Buffer."""

from __future__ import annotations

from dataclasses import dataclass

Point = int


@dataclass(slots=True)
class BufferState:
    """Cursor point as an offset into the document text."""

    point: Point = 0

    def set_point(self, point: Point) -> None:
        self.point = point

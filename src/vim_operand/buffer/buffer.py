"""Buffer façade implementing the cursor capability over a document and state."""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Optional, Tuple

from vim_operand.runtime import telemetry

from .document import BufferDocument
from .state import BufferState, Point
from .units import Direction, TextUnit, probe
from .validation import clamp_point, ensure_point


class Buffer:
    def __init__(
        self,
        *,
        name: str = "default",
        document: Optional[BufferDocument] = None,
        state: Optional[BufferState] = None,
    ) -> None:
        self.name = name
        self.document = document or BufferDocument()
        self.state = state or BufferState()

    @classmethod
    def from_text(
        cls, text: str, *, point: Point = 0, name: str = "default"
    ) -> "Buffer":
        buffer = cls(name=name, document=BufferDocument.from_text(text))
        buffer.set_cursor(point)
        return buffer

    def content(self) -> str:
        return self.document.text

    def current_position(self) -> Point:
        return self.state.point

    def set_cursor(self, point: Point) -> None:
        ensure_point(self.document, point)
        self.state.set_point(point)

    def line_and_column(self, point: Point) -> Tuple[int, int]:
        return self.document.line_and_column(ensure_point(self.document, point))

    def first_non_blank_column(self, line: int) -> int:
        return self.document.first_non_blank_column(line)

    def probe_move(self, point: Point, unit: TextUnit, direction: Direction) -> Point:
        with SavedPoint(self):
            self.state.point = clamp_point(self.document, point)
            self._step(unit, direction)
            return self.state.point

    def move_cursor(
        self, unit: TextUnit, direction: Direction, count: int = 1
    ) -> Point:
        """Move the live cursor ``count`` units, committing the result."""

        with SavedPoint(self, label=f"move_{unit.value}") as saved:
            for _ in range(count):
                before = self.state.point
                self._step(unit, direction)
                if self.state.point == before:
                    break
            saved.commit()
        return self.state.point

    def _step(self, unit: TextUnit, direction: Direction) -> None:
        self.state.point = probe(self.document.text, self.state.point, unit, direction)


class SavedPoint(AbstractContextManager["SavedPoint"]):
    """Restores the cursor on exit unless ``commit`` was called.

    A ``label`` wraps the block in a telemetry span; probes run unlabelled so
    speculative moves stay quiet.
    """

    def __init__(self, buffer: Buffer, label: str | None = None) -> None:
        self.buffer = buffer
        self.label = label
        self.committed = False
        self._saved: Point = buffer.state.point
        self._span_cm: Optional[AbstractContextManager[object]] = None

    def __enter__(self) -> "SavedPoint":
        self._saved = self.buffer.state.point
        if self.label is not None:
            self._span_cm = telemetry.span(
                name=f"buffer::{self.label}",
                component=True,
                metadata={"buffer": self.buffer.name, "point": self._saved},
            )
            self._span_cm.__enter__()
        return self

    def commit(self) -> None:
        self.committed = True

    def __exit__(self, exc_type, exc, tb) -> bool:
        if not self.committed:
            self.buffer.state.point = self._saved
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False

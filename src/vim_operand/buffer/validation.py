"""Validation helpers shared across buffer services."""

from __future__ import annotations

from .capability import BufferValidationError
from .document import BufferDocument
from .state import Point


def ensure_point(document: BufferDocument, point: Point) -> Point:
    if point < 0 or point > document.length:
        raise BufferValidationError("Point out of range", point=point)
    return point


def clamp_point(document: BufferDocument, point: Point) -> Point:
    return max(0, min(point, document.length))

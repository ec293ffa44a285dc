"""Dataclasses describing primitive cursor motions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from vim_operand.buffer.region import RegionStyle
from vim_operand.buffer.state import Point

MotionHandler = Callable[[str, Point], Point]


@dataclass(frozen=True, slots=True)
class Motion:
    """A key string bound to a pure ``(text, point) -> point`` displacement."""

    id: str
    keys: str
    handler: MotionHandler
    style: RegionStyle = RegionStyle.EXCLUSIVE
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Motion id cannot be empty")
        if not self.keys:
            raise ValueError("Motion keys cannot be empty")
        if self.keys[0] in "123456789":
            raise ValueError(f"Motion keys '{self.keys}' would be read as a count")
        if not callable(self.handler):
            raise TypeError("handler must be callable")
        if not isinstance(self.style, RegionStyle):
            object.__setattr__(self, "style", RegionStyle(self.style))

    def __call__(self, text: str, point: Point) -> Point:
        return self.handler(text, point)


__all__ = ["Motion", "MotionHandler"]

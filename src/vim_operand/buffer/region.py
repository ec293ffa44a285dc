"""Regions of buffer content tagged with inclusion semantics."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .state import Point


class RegionStyle(str, Enum):
    """How a region's end point participates in an operation."""

    INCLUSIVE = "inclusive"
    EXCLUSIVE = "exclusive"
    LINEWISE = "linewise"


@dataclass(frozen=True, slots=True)
class Region:
    start: Point
    end: Point

    @classmethod
    def ordered(cls, first: Point, second: Point) -> "Region":
        if first <= second:
            return cls(first, second)
        return cls(second, first)


@dataclass(frozen=True, slots=True)
class StyledRegion:
    style: RegionStyle
    region: Region

    @property
    def start(self) -> Point:
        return self.region.start

    @property
    def end(self) -> Point:
        return self.region.end


__all__ = ["RegionStyle", "Region", "StyledRegion"]

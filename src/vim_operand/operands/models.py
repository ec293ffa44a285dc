"""Parsed-but-unresolved operand descriptions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from vim_operand.buffer.region import RegionStyle
from vim_operand.buffer.units import TextUnit
from vim_operand.motions.models import Motion


def _check_count(count: int) -> None:
    if count < 1:
        raise ValueError(f"count must be at least 1, got {count}")


@dataclass(frozen=True, slots=True)
class TextObject:
    """A unit of content to select, ``count`` times, with a region style."""

    count: int
    style: RegionStyle
    unit: TextUnit

    def __post_init__(self) -> None:
        _check_count(self.count)


@dataclass(frozen=True, slots=True)
class CountedMove:
    count: int
    motion: Motion

    def __post_init__(self) -> None:
        _check_count(self.count)


@dataclass(frozen=True, slots=True)
class JustTextObject:
    text_object: TextObject


@dataclass(frozen=True, slots=True)
class JustMove:
    move: CountedMove


@dataclass(frozen=True, slots=True)
class Partial:
    """Not decidable yet; keep accumulating keys."""


@dataclass(frozen=True, slots=True)
class Fail:
    """Can never become a valid operand; abort the pending operator."""


PARTIAL = Partial()
FAIL = Fail()

OperandDetectResult = Union[JustTextObject, JustMove, Partial, Fail]


__all__ = [
    "TextObject",
    "CountedMove",
    "JustTextObject",
    "JustMove",
    "Partial",
    "Fail",
    "PARTIAL",
    "FAIL",
    "OperandDetectResult",
]

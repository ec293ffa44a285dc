"""Classify operand keystrokes into moves, text objects, or pending/failed input."""

from __future__ import annotations

from dataclasses import replace
from typing import Callable, Optional

from vim_operand.buffer.region import RegionStyle
from vim_operand.buffer.units import TextUnit
from vim_operand.motions import Motion, default_motion_registry
from vim_operand.runtime import telemetry

from .models import (
    FAIL,
    PARTIAL,
    CountedMove,
    Fail,
    JustMove,
    JustTextObject,
    OperandDetectResult,
    Partial,
    TextObject,
)
from .splitter import split_counted_command

MotionLookup = Callable[[str], Optional[Motion]]

VISUAL_LINE_PREFIX = "V"
VISUAL_LINE_OBJECT = "Vl"


def parse_command(
    command: str, *, resolve_motion: MotionLookup | None = None
) -> OperandDetectResult:
    """Classify a count-free command suffix.

    Motion lookup runs before the literal cases, so a key string bound to a
    motion is always a move.
    """

    lookup = resolve_motion or default_motion_registry().resolve
    if not command:
        return PARTIAL
    motion = lookup(command)
    if motion is not None:
        return JustMove(CountedMove(1, motion))
    if command == VISUAL_LINE_PREFIX:
        return PARTIAL
    if command == VISUAL_LINE_OBJECT:
        return JustTextObject(TextObject(1, RegionStyle.LINEWISE, TextUnit.VLINE))
    return FAIL


def change_text_object_count(count: int, text_object: TextObject) -> TextObject:
    return replace(text_object, count=count)


def set_operand_count(count: int, result: OperandDetectResult) -> OperandDetectResult:
    if isinstance(result, JustTextObject):
        return JustTextObject(change_text_object_count(count, result.text_object))
    if isinstance(result, JustMove):
        return JustMove(replace(result.move, count=count))
    if isinstance(result, (Partial, Fail)):
        return result
    raise TypeError(f"Unknown operand result {result!r}")


def describe_result(result: OperandDetectResult) -> str:
    if isinstance(result, JustTextObject):
        return "text_object"
    if isinstance(result, JustMove):
        return "move"
    if isinstance(result, Partial):
        return "partial"
    if isinstance(result, Fail):
        return "fail"
    raise TypeError(f"Unknown operand result {result!r}")


def parse_text_object(
    raw: str, *, resolve_motion: MotionLookup | None = None
) -> OperandDetectResult:
    """Parse ``[count]command`` into an ``OperandDetectResult``."""

    with telemetry.span(
        "operands::parse",
        component="operands",
        metadata={"raw": raw},
    ) as handle:
        count, command = split_counted_command(raw)
        result = set_operand_count(
            count, parse_command(command, resolve_motion=resolve_motion)
        )
        handle.add_metadata("result", describe_result(result))
        if isinstance(result, Fail):
            telemetry.record_event(
                "operand.fail", level="debug", data={"raw": raw, "command": command}
            )
        return result


__all__ = [
    "MotionLookup",
    "VISUAL_LINE_PREFIX",
    "VISUAL_LINE_OBJECT",
    "change_text_object_count",
    "describe_result",
    "parse_command",
    "parse_text_object",
    "set_operand_count",
]

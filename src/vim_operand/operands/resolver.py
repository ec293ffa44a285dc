"""Resolve operands into styled regions of buffer content."""

from __future__ import annotations

from typing import Optional

from vim_operand.buffer.capability import CursorCapability
from vim_operand.buffer.region import Region, RegionStyle, StyledRegion
from vim_operand.buffer.state import Point
from vim_operand.buffer.units import Direction
from vim_operand.runtime import telemetry
from vim_operand.runtime.settings import get_settings

from .models import CountedMove, TextObject


def text_object_region(
    context: CursorCapability,
    text_object: TextObject,
    *,
    origin: Optional[Point] = None,
) -> StyledRegion:
    """Raw region of ``text_object`` around ``origin`` before adjustment.

    Both probes start from the same captured origin: one backward step gives
    one end, ``count`` chained forward steps give the other.
    """

    start = context.current_position() if origin is None else origin
    backward = context.probe_move(start, text_object.unit, Direction.BACKWARD)
    forward = start
    for _ in range(text_object.count):
        moved = context.probe_move(forward, text_object.unit, Direction.FORWARD)
        if moved == forward:
            break
        forward = moved
    return StyledRegion(text_object.style, Region.ordered(backward, forward))


def adjust_exclusive_region(
    context: CursorCapability,
    styled: StyledRegion,
    *,
    exclusive_linewise: Optional[bool] = None,
) -> StyledRegion:
    """Apply Vim's ``exclusive`` rules to a region.

    An exclusive region ending in column 0 drops its last character and becomes
    inclusive. With ``exclusive_linewise`` it instead becomes linewise when its
    start is at or before the first non-blank of the start line.
    """

    region = styled.region
    # an empty region has no character to drop
    if styled.style is not RegionStyle.EXCLUSIVE or region.end <= region.start:
        return styled
    _, end_column = context.line_and_column(region.end)
    if end_column != 0:
        return styled

    trimmed = Region(region.start, region.end - 1)
    if exclusive_linewise is None:
        exclusive_linewise = get_settings().exclusive_linewise
    if exclusive_linewise:
        start_line, start_column = context.line_and_column(region.start)
        if start_column <= context.first_non_blank_column(start_line):
            return StyledRegion(RegionStyle.LINEWISE, trimmed)
    return StyledRegion(RegionStyle.INCLUSIVE, trimmed)


def region_of_text_object(
    context: CursorCapability,
    text_object: TextObject,
    *,
    origin: Optional[Point] = None,
    exclusive_linewise: Optional[bool] = None,
) -> StyledRegion:
    with telemetry.span(
        "operands::region_of_text_object",
        component="operands",
        metadata={
            "unit": text_object.unit.value,
            "count": text_object.count,
            "style": text_object.style.value,
        },
    ) as handle:
        raw = text_object_region(context, text_object, origin=origin)
        styled = adjust_exclusive_region(
            context, raw, exclusive_linewise=exclusive_linewise
        )
        handle.add_metadata("region", (styled.start, styled.end))
        return styled


def region_of_move(
    context: CursorCapability,
    move: CountedMove,
    *,
    origin: Optional[Point] = None,
    exclusive_linewise: Optional[bool] = None,
) -> StyledRegion:
    """Region swept by applying ``move.motion`` ``move.count`` times."""

    with telemetry.span(
        "operands::region_of_move",
        component="operands",
        metadata={"motion": move.motion.id, "count": move.count},
    ) as handle:
        text = context.content()
        start = context.current_position() if origin is None else origin
        end = start
        for _ in range(move.count):
            moved = move.motion(text, end)
            if moved == end:
                break
            end = moved
        raw = StyledRegion(move.motion.style, Region.ordered(start, end))
        styled = adjust_exclusive_region(
            context, raw, exclusive_linewise=exclusive_linewise
        )
        handle.add_metadata("region", (styled.start, styled.end))
        return styled


__all__ = [
    "adjust_exclusive_region",
    "region_of_move",
    "region_of_text_object",
    "text_object_region",
]

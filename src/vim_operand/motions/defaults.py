"""Built-in motions seeding the default registry."""

from __future__ import annotations

from functools import partial
from typing import Iterable, Optional, Sequence

from vim_operand.buffer import units
from vim_operand.buffer.region import RegionStyle
from vim_operand.runtime import telemetry

from .models import Motion
from .registry import MotionRegistry


def _left(text: str, point: int) -> int:
    return max(units.line_start(text, point), point - 1)


def _right(text: str, point: int) -> int:
    return min(units.line_end(text, point), point + 1)


def _down(text: str, point: int) -> int:
    end = units.line_end(text, point)
    if end >= len(text):
        return point
    column = point - units.line_start(text, point)
    following = end + 1
    return min(following + column, units.line_end(text, following))


def _up(text: str, point: int) -> int:
    start = units.line_start(text, point)
    if start == 0:
        return point
    column = point - start
    previous = units.line_start(text, start - 1)
    return min(previous + column, start - 1)


def _line_last_char(text: str, point: int) -> int:
    start = units.line_start(text, point)
    return max(start, units.line_end(text, point) - 1)


DEFAULT_MOTIONS: tuple[Motion, ...] = (
    Motion("left", "h", _left, description="Character left"),
    Motion("right", "l", _right, description="Character right"),
    Motion("down", "j", _down, RegionStyle.LINEWISE, "Line down"),
    Motion("up", "k", _up, RegionStyle.LINEWISE, "Line up"),
    Motion("word_forward", "w", units.word_forward, description="Next word start"),
    Motion(
        "word_backward", "b", units.word_backward, description="Previous word start"
    ),
    Motion("word_end", "e", units.word_end, RegionStyle.INCLUSIVE, "Word end"),
    Motion(
        "big_word_forward",
        "W",
        partial(units.word_forward, big=True),
        description="Next WORD start",
    ),
    Motion(
        "big_word_backward",
        "B",
        partial(units.word_backward, big=True),
        description="Previous WORD start",
    ),
    Motion(
        "big_word_end",
        "E",
        partial(units.word_end, big=True),
        RegionStyle.INCLUSIVE,
        "WORD end",
    ),
    Motion("line_start", "0", units.line_start, description="Start of line"),
    Motion(
        "first_non_blank",
        "^",
        units.first_non_blank,
        description="First non-blank of line",
    ),
    Motion("line_end", "$", _line_last_char, RegionStyle.INCLUSIVE, "End of line"),
    Motion(
        "paragraph_backward",
        "{",
        units.paragraph_backward,
        description="Previous paragraph boundary",
    ),
    Motion(
        "paragraph_forward",
        "}",
        units.paragraph_forward,
        description="Next paragraph boundary",
    ),
)

_DEFAULT_REGISTRY: Optional[MotionRegistry] = None


def load_default_motions(
    registry: MotionRegistry,
    *,
    replace: bool = False,
    include: Sequence[str] | None = None,
    exclude: Sequence[str] | None = None,
    extra_motions: Iterable[Motion] | None = None,
) -> None:
    """Register the built-in motions, filtered by motion id."""

    allowed = set(include) if include is not None else None
    blocked = set(exclude or ())
    loaded = 0

    for motion in DEFAULT_MOTIONS:
        if allowed is not None and motion.id not in allowed:
            continue
        if motion.id in blocked:
            continue
        registry.register_motion(motion, replace=replace)
        loaded += 1

    for motion in extra_motions or ():
        registry.register_motion(motion, replace=replace)
        loaded += 1

    telemetry.record_event(
        "motions.loaded", level="debug", data={"count": loaded}
    )


def default_motion_registry() -> MotionRegistry:
    """Return the shared registry seeded with ``DEFAULT_MOTIONS``."""

    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        registry = MotionRegistry(logger_name="vim_operand.motions")
        load_default_motions(registry)
        _DEFAULT_REGISTRY = registry
    return _DEFAULT_REGISTRY


__all__ = ["DEFAULT_MOTIONS", "default_motion_registry", "load_default_motions"]

"""Operand parsing and region resolution."""

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
from .parser import (
    change_text_object_count,
    parse_command,
    parse_text_object,
    set_operand_count,
)
from .resolver import (
    adjust_exclusive_region,
    region_of_move,
    region_of_text_object,
    text_object_region,
)

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
    "split_counted_command",
    "parse_command",
    "parse_text_object",
    "set_operand_count",
    "change_text_object_count",
    "text_object_region",
    "adjust_exclusive_region",
    "region_of_text_object",
    "region_of_move",
]

"""Buffer content, cursor state, and the probe capability."""

from .buffer import Buffer, SavedPoint
from .capability import BufferValidationError, CursorCapability
from .document import BufferDocument
from .region import Region, RegionStyle, StyledRegion
from .state import BufferState, Point
from .units import Direction, TextUnit
from .validation import clamp_point, ensure_point

__all__ = [
    "Buffer",
    "BufferDocument",
    "BufferState",
    "BufferValidationError",
    "CursorCapability",
    "Direction",
    "Point",
    "Region",
    "RegionStyle",
    "SavedPoint",
    "StyledRegion",
    "TextUnit",
    "clamp_point",
    "ensure_point",
]

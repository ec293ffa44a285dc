"""Primitive motions and the registry that resolves them from key strings."""

from .models import Motion, MotionHandler
from .registry import MotionConflictError, MotionRegistry, RegistryStats
from .defaults import DEFAULT_MOTIONS, default_motion_registry, load_default_motions

__all__ = [
    "Motion",
    "MotionHandler",
    "MotionRegistry",
    "MotionConflictError",
    "RegistryStats",
    "DEFAULT_MOTIONS",
    "default_motion_registry",
    "load_default_motions",
]

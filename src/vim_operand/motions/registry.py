"""Motion registry: the lookup behind operand parsing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, Optional

from vim_operand.runtime.telemetry import span

from .models import Motion


@dataclass(slots=True)
class RegistryStats:
    """Lightweight snapshot describing registry state."""

    motion_count: int
    keys: tuple[str, ...]


class MotionConflictError(RuntimeError):
    """Raised when a motion's keys are already bound to another motion."""

    def __init__(self, motion: Motion, existing: Motion):
        super().__init__(
            f"Motion '{motion.id}' conflicts with '{existing.id}' on keys '{motion.keys}'"
        )
        self.motion = motion
        self.existing = existing


class MotionRegistry:
    """Owns motions and resolves key strings to them."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._motions: Dict[str, Motion] = {}
        self._by_keys: Dict[str, str] = {}
        self._logger_name = logger_name
        self._revision = 0

    def revision(self) -> int:
        return self._revision

    def get_motion(self, motion_id: str) -> Motion:
        try:
            return self._motions[motion_id]
        except KeyError as exc:
            raise KeyError(f"Motion '{motion_id}' is not registered") from exc

    def resolve(self, keys: str) -> Optional[Motion]:
        motion_id = self._by_keys.get(keys)
        if motion_id is None:
            return None
        return self._motions[motion_id]

    def register_motion(self, motion: Motion, *, replace: bool = False) -> Motion:
        with span(
            "motions::register",
            logger_name=self._logger_name,
            component="motions",
            metadata={"motion_id": motion.id, "keys": motion.keys},
        ) as handle:
            conflict = self.resolve(motion.keys)
            if conflict is not None and conflict.id != motion.id and not replace:
                handle.add_metadata("conflict", conflict.id)
                raise MotionConflictError(motion, conflict)

            existing = self._motions.get(motion.id)
            if existing is not None and not replace:
                raise ValueError(f"Motion id '{motion.id}' already registered")

            if existing is not None:
                self._drop(existing)
            if conflict is not None:
                self._drop(conflict)

            self._motions[motion.id] = motion
            self._by_keys[motion.keys] = motion.id
            self._revision += 1
            return motion

    def unregister_motion(self, keys: str) -> Optional[Motion]:
        with span(
            "motions::unregister",
            logger_name=self._logger_name,
            component="motions",
            metadata={"keys": keys},
        ):
            motion = self.resolve(keys)
            if motion is None:
                return None
            self._drop(motion)
            self._revision += 1
            return motion

    def iter_motions(self) -> Iterator[Motion]:
        yield from self._motions.values()

    def stats(self) -> RegistryStats:
        return RegistryStats(
            motion_count=len(self._motions),
            keys=tuple(sorted(self._by_keys)),
        )

    def _drop(self, motion: Motion) -> None:
        self._motions.pop(motion.id, None)
        if self._by_keys.get(motion.keys) == motion.id:
            self._by_keys.pop(motion.keys, None)


__all__ = [
    "MotionRegistry",
    "MotionConflictError",
    "RegistryStats",
]

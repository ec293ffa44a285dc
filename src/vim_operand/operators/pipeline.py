"""Operator-pending pipeline: ``[count]operator[count]operand`` to a plan."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, Optional, Sequence, Union

from vim_operand.buffer.capability import CursorCapability
from vim_operand.buffer.region import RegionStyle, StyledRegion
from vim_operand.buffer.units import TextUnit
from vim_operand.motions import MotionRegistry, default_motion_registry
from vim_operand.operands import (
    CountedMove,
    Fail,
    JustMove,
    JustTextObject,
    Partial,
    TextObject,
    change_text_object_count,
    parse_text_object,
    region_of_move,
    region_of_text_object,
    split_counted_command,
)
from vim_operand.runtime import telemetry
from vim_operand.runtime.settings import EngineSettings, get_settings

Operand = Union[TextObject, CountedMove]


@dataclass(slots=True)
class ExecutionPlan:
    operator_id: str
    count: int
    operand: Operand
    region: StyledRegion
    raw_input: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class PipelineResult:
    status: Literal["pending", "plan", "abort"]
    plan: Optional[ExecutionPlan] = None
    message: Optional[str] = None


@dataclass(slots=True)
class OperatorDraft:
    count: int = 1
    operator: Optional[str] = None
    prefix_keys: List[str] = field(default_factory=list)
    operand_keys: List[str] = field(default_factory=list)

    @property
    def raw_keys(self) -> tuple[str, ...]:
        return tuple(self.prefix_keys + self.operand_keys)


class OperatorPipeline:
    """Accumulates keys for one pending operator and resolves its operand.

    Operator and operand counts multiply, so ``2d3w`` resolves six words. A
    doubled operator (``dd``) selects whole lines.
    """

    def __init__(
        self,
        context: CursorCapability,
        *,
        registry: Optional[MotionRegistry] = None,
        operators: Optional[Sequence[str]] = None,
        settings: Optional[EngineSettings] = None,
    ) -> None:
        self.context = context
        self.settings = settings or get_settings()
        self.registry = registry or default_motion_registry()
        self.operators = tuple(operators or self.settings.operators)
        self.draft = OperatorDraft()

    def reset(self) -> None:
        self.draft = OperatorDraft()

    def parse(self, keys: Sequence[str]) -> PipelineResult:
        result = PipelineResult(status="pending")
        for key in keys:
            result = self.feed(key)
            if result.status != "pending":
                break
        return result

    def feed(self, key: str) -> PipelineResult:
        with telemetry.span(
            "operator::feed", component=True, metadata={"key": key}
        ) as handle:
            if self.draft.operator is None:
                result = self._feed_prefix(key)
            else:
                result = self._feed_operand(key)
            handle.add_metadata("status", result.status)
        if result.status != "pending":
            self.reset()
        return result

    def _feed_prefix(self, key: str) -> PipelineResult:
        draft = self.draft
        draft.prefix_keys.append(key)
        count, suffix = split_counted_command("".join(draft.prefix_keys))
        if not suffix:
            return PipelineResult(status="pending", message="awaiting_operator")
        if suffix in self.operators:
            draft.count = count
            draft.operator = suffix
            return PipelineResult(status="pending", message="awaiting_operand")
        if any(operator.startswith(suffix) for operator in self.operators):
            return PipelineResult(status="pending", message="awaiting_operator")
        return self._abort(f"unknown operator '{suffix}'")

    def _feed_operand(self, key: str) -> PipelineResult:
        draft = self.draft
        draft.operand_keys.append(key)
        raw = "".join(draft.operand_keys)

        count, suffix = split_counted_command(raw)
        if suffix == draft.operator:
            lines = TextObject(count, RegionStyle.LINEWISE, TextUnit.VLINE)
            return self._plan_text_object(lines)
        if suffix and draft.operator.startswith(suffix):
            return PipelineResult(status="pending", message="awaiting_operand")

        detected = parse_text_object(raw, resolve_motion=self.registry.resolve)
        if isinstance(detected, JustTextObject):
            return self._plan_text_object(detected.text_object)
        if isinstance(detected, JustMove):
            return self._plan_move(detected.move)
        if isinstance(detected, Partial):
            return PipelineResult(status="pending", message="awaiting_operand")
        if isinstance(detected, Fail):
            return self._abort(f"invalid operand '{raw}'")
        raise TypeError(f"Unknown operand result {detected!r}")

    def _plan_text_object(self, text_object: TextObject) -> PipelineResult:
        scaled = change_text_object_count(
            self.draft.count * text_object.count, text_object
        )
        region = region_of_text_object(
            self.context,
            scaled,
            exclusive_linewise=self.settings.exclusive_linewise,
        )
        return self._emit_plan(scaled, region)

    def _plan_move(self, move: CountedMove) -> PipelineResult:
        scaled = CountedMove(self.draft.count * move.count, move.motion)
        region = region_of_move(
            self.context,
            scaled,
            exclusive_linewise=self.settings.exclusive_linewise,
        )
        return self._emit_plan(scaled, region)

    def _emit_plan(self, operand: Operand, region: StyledRegion) -> PipelineResult:
        draft = self.draft
        assert draft.operator is not None
        plan = ExecutionPlan(
            operator_id=draft.operator,
            count=operand.count,
            operand=operand,
            region=region,
            raw_input=draft.raw_keys,
        )
        telemetry.record_event(
            "operator.plan",
            level="debug",
            data={
                "operator": plan.operator_id,
                "style": region.style.value,
                "start": region.start,
                "end": region.end,
            },
        )
        return PipelineResult(status="plan", plan=plan)

    def _abort(self, reason: str) -> PipelineResult:
        telemetry.record_event(
            "operator.abort",
            level="debug",
            data={"keys": "".join(self.draft.raw_keys), "reason": reason},
        )
        return PipelineResult(status="abort", message=reason)


__all__ = [
    "ExecutionPlan",
    "OperatorDraft",
    "OperatorPipeline",
    "PipelineResult",
]

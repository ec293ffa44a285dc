"""Operator-pending glue turning operator plus operand keys into plans."""

from .pipeline import ExecutionPlan, OperatorDraft, OperatorPipeline, PipelineResult

__all__ = [
    "ExecutionPlan",
    "OperatorDraft",
    "OperatorPipeline",
    "PipelineResult",
]

"""Pydantic schemas for simulated workflow runs."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from hrflow.models.enums import NodeType, StepStatus
from hrflow.schemas.base import BaseSchema
from hrflow.schemas.validation import ValidationError


class SimulationStep(BaseSchema):
    """One synthesized log entry for the modeled execution of a node."""

    node_id: str
    node_name: str
    node_type: NodeType
    status: StepStatus
    message: str
    timestamp: datetime
    duration: int = Field(..., ge=0, description="Synthetic duration in milliseconds")


class SimulationResult(BaseSchema):
    """Outcome of a simulated run.

    ``errors`` carries every validation finding. On success it holds only
    warnings; when validation blocked the run ``steps`` is empty.
    """

    workflow_id: str
    success: bool
    steps: list[SimulationStep] = Field(default_factory=list)
    errors: list[ValidationError] = Field(default_factory=list)
    completed_at: datetime
    total_duration: int = Field(default=0, ge=0, description="Milliseconds")

    @property
    def failed_step(self) -> SimulationStep | None:
        """The step that halted the run, if any."""
        if self.steps and self.steps[-1].status == StepStatus.FAILED:
            return self.steps[-1]
        return None


__all__ = [
    "SimulationResult",
    "SimulationStep",
]

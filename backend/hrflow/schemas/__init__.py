"""Pydantic schemas for the HRFlow API and services."""

from hrflow.schemas.automation import AutomationAction
from hrflow.schemas.base import BaseSchema
from hrflow.schemas.simulation import SimulationResult, SimulationStep
from hrflow.schemas.validation import (
    ValidationError,
    ValidationErrorCode,
    ValidationRequest,
)
from hrflow.schemas.workflow import (
    ApprovalNodeData,
    AutomatedNodeData,
    EndNodeData,
    ImportResult,
    KeyValuePair,
    Position,
    StartNodeData,
    TaskNodeData,
    Workflow,
    WorkflowEdge,
    WorkflowNode,
    WorkflowTemplateSummary,
)

__all__ = [
    "ApprovalNodeData",
    "AutomatedNodeData",
    "AutomationAction",
    "BaseSchema",
    "EndNodeData",
    "ImportResult",
    "KeyValuePair",
    "Position",
    "SimulationResult",
    "SimulationStep",
    "StartNodeData",
    "TaskNodeData",
    "ValidationError",
    "ValidationErrorCode",
    "ValidationRequest",
    "Workflow",
    "WorkflowEdge",
    "WorkflowNode",
    "WorkflowTemplateSummary",
]

"""Pydantic schemas for workflow validation.

Validation results are a flat, ordered list of findings. Each finding has a
stable machine-readable code and a severity: ``error`` findings block
simulation, ``warning`` findings are advisory.
"""

from __future__ import annotations

from enum import Enum

from pydantic import Field

from hrflow.models.enums import Severity
from hrflow.schemas.base import BaseSchema
from hrflow.schemas.workflow import WorkflowEdge, WorkflowNode

# =============================================================================
# Validation Enums
# =============================================================================


class ValidationErrorCode(str, Enum):
    """Validation finding codes."""

    # Structure
    EMPTY_WORKFLOW = "EMPTY_WORKFLOW"
    MISSING_START = "MISSING_START"
    MULTIPLE_START = "MULTIPLE_START"
    MISSING_END = "MISSING_END"

    # Edges
    INVALID_EDGE_SOURCE = "INVALID_EDGE_SOURCE"
    INVALID_EDGE_TARGET = "INVALID_EDGE_TARGET"
    DUPLICATE_EDGE = "DUPLICATE_EDGE"

    # Connectivity
    START_NO_CONNECTION = "START_NO_CONNECTION"
    END_NO_CONNECTION = "END_NO_CONNECTION"
    NODE_DISCONNECTED = "NODE_DISCONNECTED"
    DEAD_END_NODE = "DEAD_END_NODE"

    # Node configuration
    MISSING_TITLE = "MISSING_TITLE"
    TASK_NO_ASSIGNEE = "TASK_NO_ASSIGNEE"
    APPROVAL_NO_ROLE = "APPROVAL_NO_ROLE"
    AUTOMATED_NO_ACTION = "AUTOMATED_NO_ACTION"

    # Reachability
    UNREACHABLE_NODE = "UNREACHABLE_NODE"
    END_UNREACHABLE = "END_UNREACHABLE"
    CYCLE_DETECTED = "CYCLE_DETECTED"

    def __str__(self) -> str:
        return self.value


# =============================================================================
# Findings
# =============================================================================


class ValidationError(BaseSchema):
    """Single validation finding.

    Named after the designer's contract; not to be confused with
    ``pydantic.ValidationError``.
    """

    node_id: str | None = Field(
        default=None,
        description="Affected node ID, for node-scoped findings",
    )
    type: Severity = Field(
        ...,
        description="'error' blocks execution, 'warning' is informational",
    )
    message: str = Field(
        ...,
        description="Human-readable message, may embed node labels",
    )
    code: ValidationErrorCode = Field(
        ...,
        description="Machine-readable finding code",
    )

    @property
    def is_blocking(self) -> bool:
        return self.type == Severity.ERROR


class ValidationRequest(BaseSchema):
    """Graph snapshot submitted for validation."""

    nodes: list[WorkflowNode] = Field(default_factory=list)
    edges: list[WorkflowEdge] = Field(default_factory=list)


def has_blocking_errors(findings: list[ValidationError]) -> bool:
    """Return True when any finding prevents execution."""
    return any(finding.is_blocking for finding in findings)


__all__ = [
    "ValidationError",
    "ValidationErrorCode",
    "ValidationRequest",
    "has_blocking_errors",
]

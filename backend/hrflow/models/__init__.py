"""Domain models for HRFlow."""

from hrflow.models.enums import NodeType, Severity, StepStatus

__all__ = [
    "NodeType",
    "Severity",
    "StepStatus",
]

"""Domain enum definitions for HRFlow.

This module defines the enum types shared by the schemas and the
validation/simulation services.
"""

from enum import Enum


class NodeType(str, Enum):
    """Workflow node classification types.

    START and END are boundary nodes: they frame the process and are never
    subject to failure injection during simulation.
    """

    START = "start"
    TASK = "task"
    APPROVAL = "approval"
    AUTOMATED = "automated"
    END = "end"

    @property
    def is_boundary(self) -> bool:
        """Whether this type opens or closes a workflow."""
        return self in (NodeType.START, NodeType.END)

    def __str__(self) -> str:
        """Return the string value for serialization."""
        return self.value


class Severity(str, Enum):
    """Validation finding severity.

    ERROR findings block simulation, WARNING findings are advisory.
    """

    ERROR = "error"
    WARNING = "warning"

    def __str__(self) -> str:
        return self.value


class StepStatus(str, Enum):
    """Simulation step state."""

    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"
    SKIPPED = "skipped"

    def __str__(self) -> str:
        return self.value


__all__ = [
    "NodeType",
    "Severity",
    "StepStatus",
]

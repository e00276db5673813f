"""Pydantic schemas for workflow documents.

A workflow is a list of typed nodes and directed edges. Node payloads are a
tagged union discriminated by ``data.type``; the node's own ``type`` field
is authoritative and is copied onto the payload before the variant is
chosen, so a document where the two disagree is read as the node type says.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated, Any, Literal
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, model_validator

from hrflow.models.enums import NodeType
from hrflow.schemas.base import BaseSchema


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _new_id() -> str:
    return str(uuid4())


class Position(BaseSchema):
    """Canvas coordinates. Opaque to validation and simulation."""

    x: float = 0.0
    y: float = 0.0


class KeyValuePair(BaseSchema):
    """Ordered key/value entry used for metadata and custom fields."""

    key: str = ""
    value: str = ""


# =============================================================================
# Node Data Variants
# =============================================================================


class NodeDataBase(BaseSchema):
    """Fields shared by every node payload.

    Unknown keys are kept so documents round-trip unchanged.
    """

    model_config = ConfigDict(extra="allow")

    label: str = Field(default="", description="Display label shown on the canvas")


class StartNodeData(NodeDataBase):
    type: Literal["start"] = "start"
    title: str = ""
    metadata: list[KeyValuePair] = Field(default_factory=list)


class TaskNodeData(NodeDataBase):
    type: Literal["task"] = "task"
    title: str = ""
    description: str = ""
    assignee: str = ""
    due_date: str = ""
    custom_fields: list[KeyValuePair] = Field(default_factory=list)


class ApprovalNodeData(NodeDataBase):
    type: Literal["approval"] = "approval"
    title: str = ""
    approver_role: str = ""
    auto_approve_threshold: int = Field(default=0, ge=0)


class AutomatedNodeData(NodeDataBase):
    type: Literal["automated"] = "automated"
    title: str = ""
    action_id: str = ""
    action_params: dict[str, Any] = Field(default_factory=dict)


class EndNodeData(NodeDataBase):
    type: Literal["end"] = "end"
    end_message: str = ""
    show_summary: bool = True


NodeData = Annotated[
    StartNodeData | TaskNodeData | ApprovalNodeData | AutomatedNodeData | EndNodeData,
    Field(discriminator="type"),
]


# =============================================================================
# Graph Elements
# =============================================================================


class WorkflowNode(BaseSchema):
    """A typed step in the workflow graph."""

    id: str = Field(..., description="Unique node identifier")
    type: NodeType = Field(..., description="Node type (authoritative)")
    position: Position = Field(default_factory=Position)
    data: NodeData

    @model_validator(mode="before")
    @classmethod
    def align_data_type(cls, value: Any) -> Any:
        """Make ``type`` and ``data.type`` agree, node type winning."""
        if not isinstance(value, dict):
            return value

        raw = dict(value)
        if "data" not in raw:
            data: Any = {}
        elif isinstance(raw["data"], BaseModel):
            data = raw["data"].model_dump()
        elif isinstance(raw["data"], dict):
            data = dict(raw["data"])
        else:
            # Left as-is so the discriminated union rejects it
            return raw

        node_type = raw.get("type") or data.get("type")
        if isinstance(node_type, NodeType):
            node_type = node_type.value
        if node_type is not None:
            raw["type"] = node_type
            data["type"] = node_type
        raw["data"] = data
        return raw

    @property
    def label(self) -> str:
        """Display label, falling back to the node id."""
        return self.data.label or self.id


class WorkflowEdge(BaseSchema):
    """A directed connection between two nodes."""

    id: str = Field(default_factory=_new_id)
    source: str
    target: str
    source_handle: str | None = None
    target_handle: str | None = None


class Workflow(BaseSchema):
    """Complete workflow document as exchanged with the designer."""

    id: str = Field(default_factory=_new_id)
    name: str = "Untitled Workflow"
    description: str = ""
    nodes: list[WorkflowNode] = Field(default_factory=list)
    edges: list[WorkflowEdge] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)


# =============================================================================
# Import / Templates
# =============================================================================


class ImportResult(BaseSchema):
    """Outcome of importing a workflow document.

    Malformed input is reported here instead of being raised.
    """

    success: bool
    workflow: Workflow | None = None
    error: str | None = None


class WorkflowTemplateSummary(BaseSchema):
    id: str
    name: str
    description: str = ""


__all__ = [
    "ApprovalNodeData",
    "AutomatedNodeData",
    "EndNodeData",
    "ImportResult",
    "KeyValuePair",
    "NodeData",
    "NodeDataBase",
    "Position",
    "StartNodeData",
    "TaskNodeData",
    "Workflow",
    "WorkflowEdge",
    "WorkflowNode",
    "WorkflowTemplateSummary",
]

"""Tests for workflow, validation and simulation schemas."""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError as PydanticValidationError

from hrflow.models.enums import NodeType, Severity, StepStatus
from hrflow.schemas.simulation import SimulationResult, SimulationStep
from hrflow.schemas.validation import ValidationError, ValidationErrorCode
from hrflow.schemas.workflow import (
    AutomatedNodeData,
    EndNodeData,
    StartNodeData,
    WorkflowEdge,
    WorkflowNode,
)


class TestNodeType:
    """Tests for NodeType."""

    @pytest.mark.parametrize(
        ("node_type", "boundary"),
        [
            (NodeType.START, True),
            (NodeType.TASK, False),
            (NodeType.APPROVAL, False),
            (NodeType.AUTOMATED, False),
            (NodeType.END, True),
        ],
    )
    def test_is_boundary(self, node_type, boundary) -> None:
        """Test which node types frame a workflow."""
        assert node_type.is_boundary is boundary

    def test_str_is_value(self) -> None:
        """Test string conversion."""
        assert str(NodeType.AUTOMATED) == "automated"


class TestWorkflowNode:
    """Tests for WorkflowNode parsing."""

    def test_payload_variant_from_node_type(self) -> None:
        """Test that the node type picks the payload variant."""
        node = WorkflowNode.model_validate(
            {"id": "a1", "type": "automated", "data": {"actionId": "send_slack"}}
        )
        assert isinstance(node.data, AutomatedNodeData)
        assert node.data.action_id == "send_slack"

    def test_type_from_data_when_node_type_missing(self) -> None:
        """Test that data.type is used when the node has no type."""
        node = WorkflowNode.model_validate({"id": "s1", "data": {"type": "start"}})
        assert node.type == NodeType.START
        assert isinstance(node.data, StartNodeData)

    def test_data_model_instance(self) -> None:
        """Test construction from Python objects."""
        node = WorkflowNode(id="e1", type=NodeType.END, data=EndNodeData(endMessage="Bye"))
        assert node.data.end_message == "Bye"
        assert node.position.x == 0.0

    def test_label_falls_back_to_id(self) -> None:
        """Test the display label property."""
        node = WorkflowNode.model_validate({"id": "t1", "type": "task", "data": {}})
        assert node.label == "t1"

    def test_negative_threshold_rejected(self) -> None:
        """Test that autoApproveThreshold must be non-negative."""
        with pytest.raises(PydanticValidationError):
            WorkflowNode.model_validate(
                {"id": "a", "type": "approval", "data": {"autoApproveThreshold": -1}}
            )

    def test_wire_names(self) -> None:
        """Test camelCase output."""
        node = WorkflowNode.model_validate(
            {"id": "t1", "type": "task", "data": {"dueDate": "2025-03-01"}}
        )
        wire = node.to_wire()
        assert wire["data"]["dueDate"] == "2025-03-01"
        assert wire["data"]["customFields"] == []


class TestWorkflowEdge:
    """Tests for WorkflowEdge."""

    def test_generated_id_and_optional_handles(self) -> None:
        """Test edge defaults."""
        edge = WorkflowEdge(source="a", target="b")
        assert edge.id
        assert edge.source_handle is None
        assert edge.to_wire()["targetHandle"] is None


class TestResults:
    """Tests for validation findings and simulation results."""

    def test_finding_blocking(self) -> None:
        """Test that only errors block."""
        error = ValidationError(
            type=Severity.ERROR, message="x", code=ValidationErrorCode.MISSING_END
        )
        warning = ValidationError(
            type=Severity.WARNING, message="x", code=ValidationErrorCode.DUPLICATE_EDGE
        )
        assert error.is_blocking
        assert not warning.is_blocking
        assert error.to_wire() == {
            "nodeId": None,
            "type": "error",
            "message": "x",
            "code": "MISSING_END",
        }

    def test_failed_step(self) -> None:
        """Test the failed_step helper."""
        now = datetime.now(UTC)
        step = SimulationStep(
            node_id="t1",
            node_name="Task",
            node_type=NodeType.TASK,
            status=StepStatus.FAILED,
            message="Failed: Approval request timed out",
            timestamp=now,
            duration=700,
        )
        result = SimulationResult(
            workflow_id="wf", success=False, steps=[step], completed_at=now, total_duration=700
        )
        assert result.failed_step == step
        assert SimulationResult(workflow_id="wf", success=True, completed_at=now).failed_step is None

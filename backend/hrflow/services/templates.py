"""Built-in workflow templates and default node payloads.

Templates are stored as builders rather than shared instances so each
caller gets a fresh Workflow with its own id and timestamps.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from hrflow.core.exceptions import TemplateNotFoundError
from hrflow.models.enums import NodeType
from hrflow.schemas.workflow import (
    ApprovalNodeData,
    AutomatedNodeData,
    EndNodeData,
    NodeDataBase,
    Position,
    StartNodeData,
    TaskNodeData,
    Workflow,
    WorkflowEdge,
    WorkflowNode,
    WorkflowTemplateSummary,
)


def create_default_node_data(node_type: NodeType) -> NodeDataBase:
    """Return the payload a freshly dropped node of ``node_type`` starts with."""
    match node_type:
        case NodeType.START:
            return StartNodeData(label="Start", title="Workflow Start")
        case NodeType.TASK:
            return TaskNodeData(label="Task", title="New Task")
        case NodeType.APPROVAL:
            return ApprovalNodeData(
                label="Approval",
                title="Approval Required",
                approver_role="Manager",
                auto_approve_threshold=0,
            )
        case NodeType.AUTOMATED:
            return AutomatedNodeData(label="Automated", title="Automated Step")
        case NodeType.END:
            return EndNodeData(label="End", end_message="Workflow completed", show_summary=True)
    raise ValueError(f"Unsupported node type: {node_type}")


def _node(node_id: str, x: float, data: NodeDataBase) -> WorkflowNode:
    return WorkflowNode(
        id=node_id,
        type=NodeType(data.type),
        position=Position(x=x, y=200),
        data=data,
    )


def _chain(node_ids: list[str]) -> list[WorkflowEdge]:
    """Connect nodes in order with edges ``tpl-e1``, ``tpl-e2``..."""
    return [
        WorkflowEdge(id=f"tpl-e{index}", source=source, target=target)
        for index, (source, target) in enumerate(zip(node_ids, node_ids[1:]), start=1)
    ]


def _onboarding_nodes() -> list[WorkflowNode]:
    return [
        _node("tpl-start", 50, StartNodeData(label="Start", title="Begin Onboarding")),
        _node(
            "tpl-task1",
            280,
            TaskNodeData(
                label="Task",
                title="Collect Documents",
                description="Gather required documents from new employee",
                assignee="HR Coordinator",
            ),
        ),
        _node(
            "tpl-approval",
            510,
            ApprovalNodeData(
                label="Approval",
                title="Manager Approval",
                approver_role="Manager",
                auto_approve_threshold=0,
            ),
        ),
        _node(
            "tpl-auto",
            740,
            AutomatedNodeData(
                label="Automated",
                title="Send Welcome Email",
                action_id="send_email",
                action_params={"to": "employee@company.com", "subject": "Welcome to the team!"},
            ),
        ),
        _node(
            "tpl-end",
            970,
            EndNodeData(label="End", end_message="Onboarding Complete", show_summary=True),
        ),
    ]


def _leave_approval_nodes() -> list[WorkflowNode]:
    return [
        _node("tpl-start", 50, StartNodeData(label="Start", title="Leave Request")),
        _node(
            "tpl-approval1",
            280,
            ApprovalNodeData(
                label="Approval",
                title="Manager Approval",
                approver_role="Manager",
                auto_approve_threshold=3,
            ),
        ),
        _node(
            "tpl-approval2",
            510,
            ApprovalNodeData(
                label="Approval",
                title="HR Review",
                approver_role="HRBP",
                auto_approve_threshold=0,
            ),
        ),
        _node(
            "tpl-auto",
            740,
            AutomatedNodeData(
                label="Automated",
                title="Update Calendar",
                action_id="schedule_meeting",
            ),
        ),
        _node(
            "tpl-end",
            970,
            EndNodeData(label="End", end_message="Leave Approved", show_summary=True),
        ),
    ]


def _document_verification_nodes() -> list[WorkflowNode]:
    return [
        _node("tpl-start", 50, StartNodeData(label="Start", title="Document Submitted")),
        _node(
            "tpl-task1",
            280,
            TaskNodeData(
                label="Task",
                title="Initial Review",
                description="Check document completeness",
                assignee="Document Specialist",
            ),
        ),
        _node(
            "tpl-task2",
            510,
            TaskNodeData(
                label="Task",
                title="Verify Authenticity",
                description="Verify document authenticity",
                assignee="Compliance Officer",
            ),
        ),
        _node(
            "tpl-auto",
            740,
            AutomatedNodeData(
                label="Automated",
                title="Archive Document",
                action_id="archive_record",
            ),
        ),
        _node(
            "tpl-end",
            970,
            EndNodeData(label="End", end_message="Verification Complete", show_summary=True),
        ),
    ]


@dataclass(frozen=True)
class WorkflowTemplate:
    """A named sample workflow."""

    id: str
    name: str
    description: str
    build_nodes: Callable[[], list[WorkflowNode]]

    def summary(self) -> WorkflowTemplateSummary:
        return WorkflowTemplateSummary(id=self.id, name=self.name, description=self.description)

    def instantiate(self) -> Workflow:
        nodes = self.build_nodes()
        return Workflow(
            name=self.name,
            description=self.description,
            nodes=nodes,
            edges=_chain([node.id for node in nodes]),
        )


TEMPLATES: dict[str, WorkflowTemplate] = {
    template.id: template
    for template in (
        WorkflowTemplate(
            id="onboarding",
            name="Employee Onboarding",
            description="Standard onboarding workflow for new employees",
            build_nodes=_onboarding_nodes,
        ),
        WorkflowTemplate(
            id="leaveApproval",
            name="Leave Approval",
            description="Leave request approval workflow",
            build_nodes=_leave_approval_nodes,
        ),
        WorkflowTemplate(
            id="documentVerification",
            name="Document Verification",
            description="Employee document verification process",
            build_nodes=_document_verification_nodes,
        ),
    )
}


def list_templates() -> list[WorkflowTemplateSummary]:
    """Summaries of every built-in template in display order."""
    return [template.summary() for template in TEMPLATES.values()]


def get_template(template_id: str) -> Workflow:
    """Build a fresh workflow from a built-in template.

    Raises:
        TemplateNotFoundError: If ``template_id`` is unknown.
    """
    template = TEMPLATES.get(template_id)
    if template is None:
        raise TemplateNotFoundError(template_id)
    return template.instantiate()


__all__ = [
    "TEMPLATES",
    "WorkflowTemplate",
    "create_default_node_data",
    "get_template",
    "list_templates",
]

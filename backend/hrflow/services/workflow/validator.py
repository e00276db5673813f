"""Structural validation service for workflow graphs.

This module provides WorkflowValidator, which runs a fixed battery of
independent checks over a graph snapshot and reports every problem as a
finding instead of raising. Findings are returned in check order:

1. Empty workflow (short-circuits everything else)
2. Start / End cardinality
3. Edge referential integrity and duplicate edges
4. Connectivity (start, end, incoming, outgoing)
5. Per-node configuration completeness
6. Reachability from Start, End reachability
7. Cycle detection (first cycle only)
"""

from __future__ import annotations

from collections.abc import Sequence

from hrflow.core.logging import get_logger
from hrflow.models.enums import NodeType, Severity
from hrflow.schemas.validation import ValidationError, ValidationErrorCode
from hrflow.schemas.workflow import WorkflowEdge, WorkflowNode
from hrflow.services.workflow.algorithms import GraphAlgorithms
from hrflow.services.workflow.graph import WorkflowGraph

logger = get_logger(__name__)


def _finding(
    severity: Severity,
    code: ValidationErrorCode,
    message: str,
    node_id: str | None = None,
) -> ValidationError:
    return ValidationError(node_id=node_id, type=severity, message=message, code=code)


def _is_blank(value: object) -> bool:
    return not isinstance(value, str) or value.strip() == ""


class WorkflowValidator:
    """Stateless structural validator.

    Instances hold no per-call state, so one validator can serve any number
    of concurrent callers.

    Example:
        >>> findings = WorkflowValidator().validate(workflow.nodes, workflow.edges)
        >>> blocking = [f for f in findings if f.is_blocking]
    """

    def validate(
        self,
        nodes: Sequence[WorkflowNode],
        edges: Sequence[WorkflowEdge],
    ) -> list[ValidationError]:
        """Validate a workflow graph snapshot.

        Args:
            nodes: Workflow nodes in document order.
            edges: Workflow edges in document order.

        Returns:
            Ordered list of findings. Empty when the graph is clean.
        """
        findings: list[ValidationError] = []

        if not nodes:
            findings.append(
                _finding(
                    Severity.ERROR,
                    ValidationErrorCode.EMPTY_WORKFLOW,
                    "Workflow is empty - add at least a Start and End node",
                )
            )
            return findings

        graph = WorkflowGraph.from_workflow(nodes, edges)
        start_nodes = [n for n in nodes if n.type == NodeType.START]
        end_nodes = [n for n in nodes if n.type == NodeType.END]

        self._check_cardinality(start_nodes, end_nodes, findings)
        self._check_edge_references(graph, edges, findings)
        self._check_duplicate_edges(graph, edges, findings)
        self._check_connectivity(graph, nodes, start_nodes, end_nodes, findings)
        self._check_node_configuration(nodes, findings)

        if len(start_nodes) == 1:
            start_id = start_nodes[0].id
            self._check_reachability(graph, nodes, start_id, findings)
            if end_nodes:
                self._check_end_reachable(graph, start_id, end_nodes, findings)

        self._check_cycles(graph, nodes, findings)

        logger.debug(
            "Workflow validated",
            extra={
                "context": {
                    "node_count": len(nodes),
                    "edge_count": len(edges),
                    "errors": sum(1 for f in findings if f.is_blocking),
                    "warnings": sum(1 for f in findings if not f.is_blocking),
                }
            },
        )
        return findings

    # ==========================================================================
    # Structural checks
    # ==========================================================================

    def _check_cardinality(
        self,
        start_nodes: list[WorkflowNode],
        end_nodes: list[WorkflowNode],
        findings: list[ValidationError],
    ) -> None:
        """Exactly one Start and at least one End."""
        if not start_nodes:
            findings.append(
                _finding(
                    Severity.ERROR,
                    ValidationErrorCode.MISSING_START,
                    "Workflow must have a Start node",
                )
            )
        elif len(start_nodes) > 1:
            findings.append(
                _finding(
                    Severity.ERROR,
                    ValidationErrorCode.MULTIPLE_START,
                    "Workflow can only have one Start node",
                )
            )

        if not end_nodes:
            findings.append(
                _finding(
                    Severity.ERROR,
                    ValidationErrorCode.MISSING_END,
                    "Workflow must have an End node",
                )
            )

    def _check_edge_references(
        self,
        graph: WorkflowGraph,
        edges: Sequence[WorkflowEdge],
        findings: list[ValidationError],
    ) -> None:
        for edge in edges:
            if edge.source not in graph:
                findings.append(
                    _finding(
                        Severity.ERROR,
                        ValidationErrorCode.INVALID_EDGE_SOURCE,
                        f'Edge "{edge.id}" references non-existent source node',
                    )
                )
            if edge.target not in graph:
                findings.append(
                    _finding(
                        Severity.ERROR,
                        ValidationErrorCode.INVALID_EDGE_TARGET,
                        f'Edge "{edge.id}" references non-existent target node',
                    )
                )

    def _check_duplicate_edges(
        self,
        graph: WorkflowGraph,
        edges: Sequence[WorkflowEdge],
        findings: list[ValidationError],
    ) -> None:
        """Warn once per repeated source->target occurrence."""
        seen: set[tuple[str, str]] = set()
        for edge in edges:
            key = (edge.source, edge.target)
            if key in seen:
                findings.append(
                    _finding(
                        Severity.WARNING,
                        ValidationErrorCode.DUPLICATE_EDGE,
                        f'Duplicate connection from "{graph.label_for(edge.source)}" '
                        f'to "{graph.label_for(edge.target)}"',
                    )
                )
            seen.add(key)

    # ==========================================================================
    # Connectivity checks
    # ==========================================================================

    def _check_connectivity(
        self,
        graph: WorkflowGraph,
        nodes: Sequence[WorkflowNode],
        start_nodes: list[WorkflowNode],
        end_nodes: list[WorkflowNode],
        findings: list[ValidationError],
    ) -> None:
        if len(start_nodes) == 1 and not graph.has_outgoing(start_nodes[0].id):
            findings.append(
                _finding(
                    Severity.WARNING,
                    ValidationErrorCode.START_NO_CONNECTION,
                    "Start node has no outgoing connections",
                    node_id=start_nodes[0].id,
                )
            )

        for end_node in end_nodes:
            if not graph.has_incoming(end_node.id):
                findings.append(
                    _finding(
                        Severity.WARNING,
                        ValidationErrorCode.END_NO_CONNECTION,
                        "End node has no incoming connections",
                        node_id=end_node.id,
                    )
                )

        for node in nodes:
            if node.type != NodeType.START and not graph.has_incoming(node.id):
                findings.append(
                    _finding(
                        Severity.WARNING,
                        ValidationErrorCode.NODE_DISCONNECTED,
                        f'Node "{node.label}" has no incoming connections',
                        node_id=node.id,
                    )
                )

        for node in nodes:
            if node.type != NodeType.END and not graph.has_outgoing(node.id):
                findings.append(
                    _finding(
                        Severity.WARNING,
                        ValidationErrorCode.DEAD_END_NODE,
                        f'Node "{node.label}" has no outgoing connections (dead end)',
                        node_id=node.id,
                    )
                )

    # ==========================================================================
    # Node configuration checks
    # ==========================================================================

    def _check_node_configuration(
        self,
        nodes: Sequence[WorkflowNode],
        findings: list[ValidationError],
    ) -> None:
        """Missing titles, assignees, approver roles and actions.

        End nodes have no title field, so they always report MISSING_TITLE
        unless the document carries one as an extra field.
        """
        for node in nodes:
            data = node.data
            title = getattr(data, "title", None)
            display_name = title if not _is_blank(title) else node.label

            if _is_blank(title):
                findings.append(
                    _finding(
                        Severity.WARNING,
                        ValidationErrorCode.MISSING_TITLE,
                        f'{node.type.value.capitalize()} node "{node.label}" has no title',
                        node_id=node.id,
                    )
                )

            if node.type == NodeType.TASK and _is_blank(getattr(data, "assignee", None)):
                findings.append(
                    _finding(
                        Severity.WARNING,
                        ValidationErrorCode.TASK_NO_ASSIGNEE,
                        f'Task "{display_name}" has no assignee',
                        node_id=node.id,
                    )
                )

            if node.type == NodeType.APPROVAL and _is_blank(
                getattr(data, "approver_role", None)
            ):
                findings.append(
                    _finding(
                        Severity.WARNING,
                        ValidationErrorCode.APPROVAL_NO_ROLE,
                        f'Approval "{display_name}" has no approver role',
                        node_id=node.id,
                    )
                )

            if node.type == NodeType.AUTOMATED and _is_blank(
                getattr(data, "action_id", None)
            ):
                findings.append(
                    _finding(
                        Severity.ERROR,
                        ValidationErrorCode.AUTOMATED_NO_ACTION,
                        f'Automated step "{display_name}" has no action selected',
                        node_id=node.id,
                    )
                )

    # ==========================================================================
    # Reachability and cycle checks
    # ==========================================================================

    def _check_reachability(
        self,
        graph: WorkflowGraph,
        nodes: Sequence[WorkflowNode],
        start_id: str,
        findings: list[ValidationError],
    ) -> None:
        reachable = GraphAlgorithms.reachable_from(graph, start_id)
        for node in nodes:
            if node.id not in reachable and node.type != NodeType.START:
                findings.append(
                    _finding(
                        Severity.ERROR,
                        ValidationErrorCode.UNREACHABLE_NODE,
                        f'Node "{node.label}" is unreachable from Start',
                        node_id=node.id,
                    )
                )

    def _check_end_reachable(
        self,
        graph: WorkflowGraph,
        start_id: str,
        end_nodes: list[WorkflowNode],
        findings: list[ValidationError],
    ) -> None:
        reachable = GraphAlgorithms.reachable_from(graph, start_id)
        if not any(end.id in reachable for end in end_nodes):
            findings.append(
                _finding(
                    Severity.ERROR,
                    ValidationErrorCode.END_UNREACHABLE,
                    "No End node is reachable from Start - workflow cannot complete",
                )
            )

    def _check_cycles(
        self,
        graph: WorkflowGraph,
        nodes: Sequence[WorkflowNode],
        findings: list[ValidationError],
    ) -> None:
        """Report only the first cycle found."""
        cycle = GraphAlgorithms.detect_cycle(graph, (n.id for n in nodes))
        if cycle:
            path = " → ".join(graph.label_for(node_id) for node_id in cycle)
            findings.append(
                _finding(
                    Severity.ERROR,
                    ValidationErrorCode.CYCLE_DETECTED,
                    f"Workflow contains a cycle: {path}",
                )
            )


def validate_workflow(
    nodes: Sequence[WorkflowNode],
    edges: Sequence[WorkflowEdge],
) -> list[ValidationError]:
    """Module-level shortcut for WorkflowValidator().validate()."""
    return WorkflowValidator().validate(nodes, edges)


__all__ = ["WorkflowValidator", "validate_workflow"]

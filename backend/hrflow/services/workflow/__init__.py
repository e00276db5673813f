"""Workflow validation and simulation package.

Components:
- WorkflowGraph: adjacency index over a workflow snapshot
- GraphAlgorithms: reachability, cycle detection, topological order
- WorkflowValidator: structural checks reported as findings
- WorkflowSimulator: step-by-step simulated execution
- Serialization: JSON wire document export and import

Example:
    >>> from hrflow.services.workflow import WorkflowValidator, WorkflowSimulator
    >>> findings = WorkflowValidator().validate(workflow.nodes, workflow.edges)
    >>> result = await WorkflowSimulator().simulate(workflow)
"""

from hrflow.services.workflow.algorithms import GraphAlgorithms
from hrflow.services.workflow.graph import WorkflowGraph
from hrflow.services.workflow.serialization import (
    export_filename,
    export_workflow,
    import_workflow,
    parse_workflow_document,
)
from hrflow.services.workflow.simulator import FAILURE_REASONS, WorkflowSimulator
from hrflow.services.workflow.validator import WorkflowValidator, validate_workflow

__all__ = [
    # Data structures
    "WorkflowGraph",
    # Algorithms
    "GraphAlgorithms",
    # Validation
    "WorkflowValidator",
    "validate_workflow",
    # Simulation
    "FAILURE_REASONS",
    "WorkflowSimulator",
    # Serialization
    "export_filename",
    "export_workflow",
    "import_workflow",
    "parse_workflow_document",
]

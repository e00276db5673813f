"""Simulated execution of validated workflows.

The simulator never dispatches real work. It validates the workflow, orders
the nodes with Kahn's algorithm and synthesizes one timed step per node.
Non-boundary steps (task, approval, automated) can fail at a configurable
rate; the first failure halts the walk and later nodes are never logged.

Randomness, time and pacing are injected so runs can be made deterministic:

    >>> values = iter([0.5, 0.9, 0.5, 0.9])
    >>> simulator = WorkflowSimulator(random_source=lambda: next(values))

Each node draws one value for its duration and, if it is not a boundary
node, a second value for failure injection.
"""

from __future__ import annotations

import asyncio
import random
from collections.abc import Callable
from datetime import UTC, datetime

from hrflow.core.config import settings
from hrflow.core.logging import get_logger
from hrflow.models.enums import NodeType, StepStatus
from hrflow.schemas.simulation import SimulationResult, SimulationStep
from hrflow.schemas.validation import has_blocking_errors
from hrflow.schemas.workflow import Workflow, WorkflowNode
from hrflow.services.automation_catalog import AutomationCatalog
from hrflow.services.workflow.algorithms import GraphAlgorithms
from hrflow.services.workflow.graph import WorkflowGraph
from hrflow.services.workflow.validator import WorkflowValidator

logger = get_logger(__name__)

RandomSource = Callable[[], float]
Clock = Callable[[], datetime]

FAILURE_REASONS: dict[NodeType, str] = {
    NodeType.TASK: "Task could not be assigned - assignee not found",
    NodeType.APPROVAL: "Approval request timed out",
    NodeType.AUTOMATED: "Automation service unavailable",
}
DEFAULT_FAILURE_REASON = "Unknown error occurred"


def _utcnow() -> datetime:
    return datetime.now(UTC)


class WorkflowSimulator:
    """Step-by-step execution simulator.

    Attributes:
        failure_rate: Probability that a non-boundary step fails.
        min_step_ms: Inclusive lower bound of synthetic step durations.
        max_step_ms: Exclusive upper bound of synthetic step durations.
        step_delay: Seconds to sleep between steps (0 disables pacing).
    """

    def __init__(
        self,
        random_source: RandomSource | None = None,
        catalog: AutomationCatalog | None = None,
        validator: WorkflowValidator | None = None,
        clock: Clock | None = None,
        failure_rate: float | None = None,
        min_step_ms: int | None = None,
        max_step_ms: int | None = None,
        step_delay: float | None = None,
    ) -> None:
        """Initialize the simulator.

        Args:
            random_source: Returns a uniform float in [0, 1) per call.
                Defaults to ``random.random``.
            catalog: Optional automation catalog used to label automated steps.
            validator: Validator run before every simulation.
            clock: Returns the current time for step timestamps.
            failure_rate: Defaults to settings.SIMULATION_FAILURE_RATE.
            min_step_ms: Defaults to settings.SIMULATION_MIN_STEP_MS.
            max_step_ms: Defaults to settings.SIMULATION_MAX_STEP_MS.
            step_delay: Defaults to settings.SIMULATION_STEP_DELAY_SECONDS.

        Raises:
            ValueError: If the duration bounds or failure rate are invalid.
        """
        self.random_source: RandomSource = random_source or random.random
        self.catalog = catalog
        self.validator = validator or WorkflowValidator()
        self.clock: Clock = clock or _utcnow
        self.failure_rate = (
            settings.SIMULATION_FAILURE_RATE if failure_rate is None else failure_rate
        )
        self.min_step_ms = (
            settings.SIMULATION_MIN_STEP_MS if min_step_ms is None else min_step_ms
        )
        self.max_step_ms = (
            settings.SIMULATION_MAX_STEP_MS if max_step_ms is None else max_step_ms
        )
        self.step_delay = (
            settings.SIMULATION_STEP_DELAY_SECONDS if step_delay is None else step_delay
        )

        if not 0.0 <= self.failure_rate <= 1.0:
            raise ValueError(f"failure_rate must be within [0, 1], got {self.failure_rate}")
        if self.max_step_ms <= self.min_step_ms:
            raise ValueError("max_step_ms must be greater than min_step_ms")

    async def simulate(self, workflow: Workflow) -> SimulationResult:
        """Simulate a workflow run.

        Args:
            workflow: Workflow snapshot to run. Never mutated.

        Returns:
            SimulationResult. ``success`` is False when validation found
            blocking errors (no steps) or when a step failed (steps up to
            and including the failed one).
        """
        findings = self.validator.validate(workflow.nodes, workflow.edges)

        if has_blocking_errors(findings):
            logger.info(
                "Simulation blocked by validation errors",
                extra={"context": {"workflow_id": workflow.id, "findings": len(findings)}},
            )
            return SimulationResult(
                workflow_id=workflow.id,
                success=False,
                steps=[],
                errors=findings,
                completed_at=self.clock(),
                total_duration=0,
            )

        graph = WorkflowGraph.from_workflow(workflow.nodes, workflow.edges)
        order = GraphAlgorithms.topological_order(graph)
        logger.info(
            f"Simulation started with {len(order)} steps",
            extra={"context": {"workflow_id": workflow.id}},
        )

        steps: list[SimulationStep] = []
        total_duration = 0

        for node in order:
            duration = self._draw_duration()
            total_duration += duration

            if self.step_delay > 0:
                await asyncio.sleep(self.step_delay)

            failed = not node.type.is_boundary and self._should_fail()
            steps.append(
                SimulationStep(
                    node_id=node.id,
                    node_name=node.data.label,
                    node_type=node.type,
                    status=StepStatus.FAILED if failed else StepStatus.COMPLETED,
                    message=self._failure_message(node) if failed else self._step_message(node),
                    timestamp=self.clock(),
                    duration=duration,
                )
            )

            if failed:
                logger.warning(
                    f'Simulated failure at node "{node.label}"',
                    extra={"context": {"workflow_id": workflow.id, "node_id": node.id}},
                )
                return SimulationResult(
                    workflow_id=workflow.id,
                    success=False,
                    steps=steps,
                    errors=findings,
                    completed_at=self.clock(),
                    total_duration=total_duration,
                )

        logger.info(
            f"Simulation completed in {total_duration}ms",
            extra={"context": {"workflow_id": workflow.id, "steps": len(steps)}},
        )
        return SimulationResult(
            workflow_id=workflow.id,
            success=True,
            steps=steps,
            errors=findings,
            completed_at=self.clock(),
            total_duration=total_duration,
        )

    # ==========================================================================
    # Private Helper Methods
    # ==========================================================================

    def _draw_duration(self) -> int:
        """Uniform integer milliseconds in [min_step_ms, max_step_ms)."""
        span = self.max_step_ms - self.min_step_ms
        return self.min_step_ms + min(int(self.random_source() * span), span - 1)

    def _should_fail(self) -> bool:
        return self.random_source() < self.failure_rate

    def _step_message(self, node: WorkflowNode) -> str:
        data = node.data
        match node.type:
            case NodeType.START:
                return f"Workflow started: {data.title or 'Untitled'}"
            case NodeType.TASK:
                return f'Task "{data.title}" assigned to {data.assignee or "Unassigned"}'
            case NodeType.APPROVAL:
                return f"Approval requested from {data.approver_role or 'Manager'}"
            case NodeType.AUTOMATED:
                return f"Automated action executed: {self._describe_action(data.action_id)}"
            case NodeType.END:
                return f"Workflow completed: {data.end_message or 'Process finished'}"
        return "Step completed"

    def _describe_action(self, action_id: str) -> str:
        if not action_id:
            return "Unknown action"
        if self.catalog is not None:
            action = self.catalog.find_action(action_id)
            if action is not None:
                return f"{action_id} ({action.label})"
        return action_id

    def _failure_message(self, node: WorkflowNode) -> str:
        return f"Failed: {FAILURE_REASONS.get(node.type, DEFAULT_FAILURE_REASON)}"


__all__ = ["FAILURE_REASONS", "WorkflowSimulator"]

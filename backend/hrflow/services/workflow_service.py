"""Workflow service layer.

WorkflowService is the facade the API layer talks to. It owns no state of
its own beyond its collaborators: the automation catalog, the validator
and the simulator. Every call works on the snapshot it is given.
"""

from __future__ import annotations

from collections.abc import Sequence

from hrflow.core.exceptions import AutomationNotFoundError
from hrflow.core.logging import get_logger
from hrflow.schemas.automation import AutomationAction
from hrflow.schemas.simulation import SimulationResult
from hrflow.schemas.validation import ValidationError
from hrflow.schemas.workflow import (
    ImportResult,
    Workflow,
    WorkflowEdge,
    WorkflowNode,
    WorkflowTemplateSummary,
)
from hrflow.services import templates
from hrflow.services.automation_catalog import AutomationCatalog, StaticAutomationCatalog
from hrflow.services.workflow import serialization
from hrflow.services.workflow.simulator import WorkflowSimulator
from hrflow.services.workflow.validator import WorkflowValidator

logger = get_logger(__name__)


class WorkflowService:
    """Facade over validation, simulation, the catalog and templates.

    Example:
        >>> service = WorkflowService()
        >>> findings = service.validate_workflow_api(workflow.nodes, workflow.edges)
        >>> result = await service.simulate_workflow(workflow)
    """

    def __init__(
        self,
        catalog: AutomationCatalog | None = None,
        validator: WorkflowValidator | None = None,
        simulator: WorkflowSimulator | None = None,
    ) -> None:
        """Initialize workflow service.

        A simulator built here shares the service's catalog and validator.
        """
        self.catalog: AutomationCatalog = catalog or StaticAutomationCatalog()
        self.validator = validator or WorkflowValidator()
        self.simulator = simulator or WorkflowSimulator(
            catalog=self.catalog,
            validator=self.validator,
        )

    # ==========================================================================
    # Automations
    # ==========================================================================

    def get_automations(self) -> list[AutomationAction]:
        """List every automation action the catalog offers."""
        return self.catalog.list_actions()

    def get_automation(self, action_id: str) -> AutomationAction:
        """Get a single automation action.

        Raises:
            AutomationNotFoundError: If the id is not in the catalog.
        """
        action = self.catalog.find_action(action_id)
        if action is None:
            raise AutomationNotFoundError(action_id)
        return action

    # ==========================================================================
    # Validation and simulation
    # ==========================================================================

    def validate_workflow_api(
        self,
        nodes: Sequence[WorkflowNode],
        edges: Sequence[WorkflowEdge],
    ) -> list[ValidationError]:
        """Validate a graph snapshot and return its findings."""
        return self.validator.validate(nodes, edges)

    async def simulate_workflow(self, workflow: Workflow) -> SimulationResult:
        """Run a simulated execution of ``workflow``."""
        return await self.simulator.simulate(workflow)

    # ==========================================================================
    # Documents and templates
    # ==========================================================================

    def export_workflow(self, workflow: Workflow) -> str:
        return serialization.export_workflow(workflow)

    def import_workflow(self, text: str | bytes) -> ImportResult:
        result = serialization.import_workflow(text)
        if result.success and result.workflow is not None:
            logger.info(
                f'Imported workflow "{result.workflow.name}"',
                extra={
                    "context": {
                        "workflow_id": result.workflow.id,
                        "nodes": len(result.workflow.nodes),
                        "edges": len(result.workflow.edges),
                    }
                },
            )
        return result

    def list_templates(self) -> list[WorkflowTemplateSummary]:
        return templates.list_templates()

    def get_template(self, template_id: str) -> Workflow:
        """Build a workflow from a built-in template.

        Raises:
            TemplateNotFoundError: If ``template_id`` is unknown.
        """
        return templates.get_template(template_id)


__all__ = ["WorkflowService"]

"""Tests for the WorkflowService facade."""

import pytest

from hrflow.core.exceptions import AutomationNotFoundError, TemplateNotFoundError
from hrflow.schemas.automation import AutomationAction
from hrflow.schemas.validation import ValidationErrorCode
from hrflow.services.automation_catalog import StaticAutomationCatalog
from hrflow.services.workflow_service import WorkflowService


class TestAutomations:
    """Tests for catalog access through the service."""

    def test_get_automations(self, workflow_service) -> None:
        """Test that the default catalog is used."""
        actions = workflow_service.get_automations()
        assert len(actions) == 8
        assert actions[0].id == "send_email"

    def test_injected_catalog(self) -> None:
        """Test that a caller-supplied catalog replaces the default."""
        catalog = StaticAutomationCatalog(
            [AutomationAction(id="notify", label="Notify", params=[])]
        )
        service = WorkflowService(catalog=catalog)
        assert [a.id for a in service.get_automations()] == ["notify"]
        assert service.simulator.catalog is catalog

    def test_get_unknown_automation(self, workflow_service) -> None:
        """Test that unknown ids raise AutomationNotFoundError."""
        with pytest.raises(AutomationNotFoundError) as exc_info:
            workflow_service.get_automation("fax_document")
        assert exc_info.value.action_id == "fax_document"


class TestValidationAndSimulation:
    """Tests for validate_workflow_api and simulate_workflow."""

    def test_validate_workflow_api(self, workflow_service) -> None:
        """Test validation of an empty snapshot."""
        findings = workflow_service.validate_workflow_api([], [])
        assert [f.code for f in findings] == [ValidationErrorCode.EMPTY_WORKFLOW]

    @pytest.mark.asyncio
    async def test_simulate_workflow(self, workflow_service, valid_workflow) -> None:
        """Test a deterministic successful simulation."""
        result = await workflow_service.simulate_workflow(valid_workflow)
        assert result.success is True
        assert len(result.steps) == 5


class TestDocuments:
    """Tests for import/export and templates through the service."""

    def test_export_import_round_trip(self, workflow_service, valid_workflow) -> None:
        """Test that an exported workflow imports successfully."""
        result = workflow_service.import_workflow(workflow_service.export_workflow(valid_workflow))
        assert result.success is True
        assert [n.id for n in result.workflow.nodes] == [n.id for n in valid_workflow.nodes]

    def test_import_failure(self, workflow_service) -> None:
        """Test that malformed input is reported, not raised."""
        result = workflow_service.import_workflow("nope")
        assert result.success is False
        assert result.error == "document is not valid JSON"

    def test_templates(self, workflow_service) -> None:
        """Test template listing and lookup."""
        assert len(workflow_service.list_templates()) == 3
        assert workflow_service.get_template("leaveApproval").name == "Leave Approval"
        with pytest.raises(TemplateNotFoundError):
            workflow_service.get_template("missing")

"""Business logic services.

This package contains the workflow engine, the automation catalog, the
built-in templates and the WorkflowService facade the API layer uses.
"""

from hrflow.services.automation_catalog import (
    AutomationCatalog,
    StaticAutomationCatalog,
)
from hrflow.services.workflow_service import WorkflowService

__all__ = [
    "AutomationCatalog",
    "StaticAutomationCatalog",
    "WorkflowService",
]

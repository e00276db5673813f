"""API dependencies.

Shared dependencies for API routes. The workflow service is built once per
process; tests override get_workflow_service through
``app.dependency_overrides`` to inject deterministic collaborators.
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from hrflow.services.workflow_service import WorkflowService

# =============================================================================
# Service Dependencies
# =============================================================================


@lru_cache
def get_workflow_service() -> WorkflowService:
    """Get the process-wide workflow service.

    Returns:
        WorkflowService: Service wired with the static automation catalog.
    """
    return WorkflowService()


WorkflowServiceDep = Annotated[WorkflowService, Depends(get_workflow_service)]
"""Type alias for workflow service dependency injection.

Usage:
    @router.get("/automations")
    async def list_automations(service: WorkflowServiceDep):
        return service.get_automations()
"""


__all__ = [
    "WorkflowServiceDep",
    "get_workflow_service",
]

"""Automation catalog API endpoints.

This module provides read-only endpoints over the automation catalog
that automated workflow steps choose their action from.
"""

from fastapi import APIRouter, HTTPException, status

from hrflow.api.deps import WorkflowServiceDep
from hrflow.core.exceptions import AutomationNotFoundError
from hrflow.schemas.automation import AutomationAction

router = APIRouter()


@router.get(
    "",
    response_model=list[AutomationAction],
    summary="List automation actions",
)
async def list_automations(service: WorkflowServiceDep) -> list[AutomationAction]:
    """List every automation action in catalog order."""
    return service.get_automations()


@router.get(
    "/{action_id}",
    response_model=AutomationAction,
    summary="Get automation action",
    responses={404: {"description": "Automation action not found"}},
)
async def get_automation(action_id: str, service: WorkflowServiceDep) -> AutomationAction:
    """Get a single automation action by id.

    Raises:
        HTTPException: If the action is not in the catalog (404).
    """
    try:
        return service.get_automation(action_id)
    except AutomationNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        ) from e

"""Validation API Router.

This module provides the REST endpoint for structural workflow validation.
Structural problems are returned as findings with status 200; only a
request body that does not match the workflow schema is rejected (422).
"""

from __future__ import annotations

from fastapi import APIRouter

from hrflow.api.deps import WorkflowServiceDep
from hrflow.schemas.validation import ValidationError, ValidationRequest

router = APIRouter(prefix="/validation", tags=["validation"])


# =============================================================================
# Validation Endpoints
# =============================================================================


@router.post(
    "/workflows",
    response_model=list[ValidationError],
    summary="Validate Workflow Graph",
    description="Run every structural check over a workflow graph snapshot.",
    responses={
        200: {"description": "Validation completed; findings may be empty"},
        422: {"description": "Request body is not a workflow graph"},
    },
)
async def validate_workflow(
    request: ValidationRequest,
    service: WorkflowServiceDep,
) -> list[ValidationError]:
    """Validate a workflow graph.

    Args:
        request: Nodes and edges to validate.
        service: Workflow service (injected).

    Returns:
        Ordered list of findings (errors and warnings).
    """
    return service.validate_workflow_api(request.nodes, request.edges)

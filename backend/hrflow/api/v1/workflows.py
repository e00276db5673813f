"""Workflow document API endpoints.

This module provides endpoints for:
- Exporting a workflow as a downloadable JSON document
- Importing a JSON document into a workflow
- Listing and instantiating built-in workflow templates
"""

from fastapi import APIRouter, HTTPException, Request, Response, status

from hrflow.api.deps import WorkflowServiceDep
from hrflow.core.exceptions import TemplateNotFoundError
from hrflow.schemas.workflow import ImportResult, Workflow, WorkflowTemplateSummary
from hrflow.services.workflow.serialization import export_filename

router = APIRouter()


# =============================================================================
# Import / Export
# =============================================================================


@router.post(
    "/import",
    response_model=ImportResult,
    summary="Import workflow document",
    description=(
        "Parse a raw JSON workflow document. Malformed documents are reported "
        "with success=false instead of an error status."
    ),
)
async def import_workflow(request: Request, service: WorkflowServiceDep) -> ImportResult:
    """Import a workflow from the raw request body."""
    body = await request.body()
    return service.import_workflow(body)


@router.post(
    "/export",
    summary="Export workflow document",
    response_class=Response,
    responses={200: {"content": {"application/json": {}}}},
)
async def export_workflow(workflow: Workflow, service: WorkflowServiceDep) -> Response:
    """Export a workflow as a JSON attachment."""
    return Response(
        content=service.export_workflow(workflow),
        media_type="application/json",
        headers={
            "Content-Disposition": f'attachment; filename="{export_filename(workflow)}"'
        },
    )


# =============================================================================
# Templates
# =============================================================================


@router.get(
    "/templates",
    response_model=list[WorkflowTemplateSummary],
    summary="List workflow templates",
)
async def list_templates(service: WorkflowServiceDep) -> list[WorkflowTemplateSummary]:
    """List built-in workflow templates."""
    return service.list_templates()


@router.get(
    "/templates/{template_id}",
    response_model=Workflow,
    summary="Get workflow template",
    responses={404: {"description": "Template not found"}},
)
async def get_template(template_id: str, service: WorkflowServiceDep) -> Workflow:
    """Instantiate a built-in template as a new workflow.

    Raises:
        HTTPException: If the template id is unknown (404).
    """
    try:
        return service.get_template(template_id)
    except TemplateNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        ) from e

"""Simulation API Router.

This module exposes simulated execution of a workflow document.
"""

from __future__ import annotations

from fastapi import APIRouter

from hrflow.api.deps import WorkflowServiceDep
from hrflow.schemas.simulation import SimulationResult
from hrflow.schemas.workflow import Workflow

router = APIRouter()


@router.post(
    "/simulate",
    response_model=SimulationResult,
    summary="Simulate Workflow",
    description=(
        "Validate the workflow and, when no blocking errors are found, "
        "walk it in topological order producing one simulated step per node."
    ),
    responses={
        200: {"description": "Simulation finished (success or failure)"},
        422: {"description": "Request body is not a workflow document"},
    },
)
async def simulate_workflow(
    workflow: Workflow,
    service: WorkflowServiceDep,
) -> SimulationResult:
    """Simulate a workflow run.

    A blocked or failed run is still a 200 response; inspect
    ``success``, ``errors`` and ``steps`` in the result.
    """
    return await service.simulate_workflow(workflow)

"""API v1 routing configuration.

This module defines all v1 API routes.
"""

from fastapi import APIRouter

from hrflow.api.v1 import automations, simulation, validation, workflows

router = APIRouter()

# Domain routers
router.include_router(automations.router, prefix="/automations", tags=["Automations"])
router.include_router(workflows.router, prefix="/workflows", tags=["Workflows"])
router.include_router(simulation.router, tags=["Simulation"])
router.include_router(validation.router, tags=["Validation"])


@router.get("/status", tags=["Status"])
async def api_status() -> dict[str, str]:
    """API v1 status check."""
    return {"status": "ok", "version": "v1"}

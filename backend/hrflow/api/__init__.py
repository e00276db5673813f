"""HTTP layer for the HRFlow engine.

Routes are grouped by API version; main mounts ``router`` under
settings.API_V1_PREFIX.
"""

from fastapi import APIRouter

from hrflow.api.v1 import router as v1_router

router = APIRouter()
router.include_router(v1_router)

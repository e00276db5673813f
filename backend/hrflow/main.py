"""FastAPI application entry point.

create_app() assembles the service: CORS, the versioned API router and
the unversioned health and root endpoints. The module-level ``app`` is
what ``uvicorn hrflow.main:app`` serves.

Logging is configured once, on import, from settings.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hrflow import __version__
from hrflow.api import router as api_router
from hrflow.core.config import Settings, settings
from hrflow.core.logging import get_logger, setup_logging

setup_logging(
    log_level=settings.LOG_LEVEL,
    log_file=settings.LOG_FILE,
    service_name=settings.PROJECT_NAME,
    enable_json=settings.LOG_JSON_FORMAT,
    debug=settings.DEBUG,
)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Log startup and shutdown.

    The engine keeps no connections or background workers, so there is
    nothing to open or close here.
    """
    logger.info(
        f"Starting {app.title}",
        extra={
            "context": {
                "action": "application_startup",
                "version": app.version,
                "debug": settings.DEBUG,
                "failure_rate": settings.SIMULATION_FAILURE_RATE,
                "step_delay": settings.SIMULATION_STEP_DELAY_SECONDS,
            }
        },
    )
    yield
    logger.info(
        f"Shutting down {app.title}",
        extra={"context": {"action": "application_shutdown"}},
    )


def create_app(config: Settings = settings) -> FastAPI:
    """Build the FastAPI application.

    Args:
        config: Settings to build from. Defaults to the process settings.

    Returns:
        Configured FastAPI instance.
    """
    application = FastAPI(
        title=config.PROJECT_NAME,
        description="Workflow validation and execution simulation for HR process design",
        version=__version__,
        openapi_url=f"{config.API_V1_PREFIX}/openapi.json",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=config.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.include_router(api_router, prefix=config.API_V1_PREFIX)

    @application.get("/health", tags=["Health"])
    async def health_check() -> dict[str, str]:
        """Liveness probe."""
        return {"status": "healthy"}

    @application.get("/", tags=["Root"])
    async def root() -> dict[str, str]:
        """Basic service information."""
        return {
            "name": application.title,
            "version": application.version,
            "docs": application.docs_url or "",
        }

    return application


app = create_app()

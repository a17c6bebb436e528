from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.project_manager.api.middlewares import setup_middlewares
from src.project_manager.api.v1.router import api_router
from src.project_manager.core.config import get_settings
from src.project_manager.core.db import create_schema, dispose_engine
from src.project_manager.core.exceptions import setup_exception_handlers
from src.project_manager.core.health import setup_health_endpoint, setup_metrics_endpoint
from src.project_manager.core.logging import get_logger, setup_logging
from src.project_manager.core.seed import seed_demo_projects

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan - startup and shutdown."""
    settings = get_settings()
    setup_logging(settings.debug)
    logger.info(f"Starting {settings.app_name}", app_env=settings.app_env)

    if settings.auto_create_schema:
        await create_schema()
    if settings.seed_demo_data:
        await seed_demo_projects()

    yield

    logger.info("Closing connections...")
    await dispose_engine()
    logger.info("Shutdown complete")


OPENAPI_TAGS = [
    {"name": "projects", "description": "Project CRUD, search and category filtering"},
    {"name": "health", "description": "Service health"},
]


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Project Manager API",
        version="0.1.0",
        openapi_tags=OPENAPI_TAGS,
        openapi_url="/openapi.json" if settings.enable_openapi else None,
        lifespan=lifespan,
    )

    setup_exception_handlers(app)
    setup_middlewares(app, settings)

    app.include_router(api_router)

    setup_metrics_endpoint(app)
    setup_health_endpoint(app)

    return app


app = create_app()

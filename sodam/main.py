"""
FastAPI application - entry point of the sodam backend
"""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from sodam.api.dependencies import Container, build_container
from sodam.api.v1.router import api_router
from sodam.config import Settings, load_settings
from sodam.core.logging import get_logger, setup_logging
from sodam.instrumentation.metrics import metrics_endpoint

logger = get_logger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    container: Optional[Container] = None,
    configure_logging: bool = True
) -> FastAPI:
    """
    Build the application

    Settings are bound here, before anything else, so an invalid
    configuration stops startup with a ConfigurationError.

    Args:
        settings: Settings snapshot (loaded from all sources if None)
        container: Prebuilt service container (built from settings if None)
        configure_logging: Apply structlog configuration
    """
    if settings is None:
        settings = container.settings if container is not None else load_settings()

    if configure_logging:
        setup_logging(log_level=settings.log_level, is_debug=settings.debug)

    if container is None:
        container = build_container(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Lifecycle events
        Runs on application startup and shutdown
        """
        # Startup
        logger.info(
            "Starting sodam",
            app_name=settings.app_name,
            version=settings.app_version,
            debug=settings.debug,
            store_default_radius=settings.get_store_default_radius(),
            redis_cache_database=settings.get_redis_cache_database()
        )

        yield

        # Shutdown
        logger.info("Shutting down sodam")
        container.close()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Payroll and attendance management backend",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json"
    )
    app.state.settings = settings
    app.state.container = container

    app.include_router(api_router)

    @app.get("/ping", include_in_schema=False)
    async def ping():
        """Simple ping endpoint"""
        return {"status": "pong"}

    app.add_api_route("/metrics", metrics_endpoint, methods=["GET"], include_in_schema=False)

    return app

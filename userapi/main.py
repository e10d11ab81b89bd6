"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (one per bounded context)
- Response mapper (centralized error-to-HTTP translation)
- Logging configuration

No business logic belongs here.
"""

import logging

from fastapi import FastAPI

from userapi.core.config import Settings, get_settings
from userapi.interfaces.health import router as health_router
from userapi.interfaces.users.router import router as users_router
from userapi.shared.errors.handlers import register_error_handlers
from userapi.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers and the response mapper.
    This is the composition root of the application.

    Args:
        settings: Settings to build from. Defaults to the process-wide ones.

    Returns:
        A fully configured FastAPI application instance.
    """
    explicit = settings is not None
    settings = settings or get_settings()
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # --- Response Mapper ---
    register_error_handlers(app, legacy_error_bodies=settings.legacy_error_bodies)

    # --- Routers ---
    logger.info("Register user handler")
    app.include_router(health_router)
    app.include_router(users_router)

    if explicit:
        app.dependency_overrides[get_settings] = lambda: settings

    return app


app = create_app()

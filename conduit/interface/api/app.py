"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from conduit.config import Settings
from conduit.interface.api.errors import register_error_handlers
from conduit.interface.api.routes import (
    articles,
    comments,
    health,
    profiles,
    tags,
    users,
)
from conduit.interface.api.security import SecurityProvider
from conduit.util.di.container import create_container, setup_di
from conduit.util.observability import instrument_fastapi

API_PREFIX = "/api"


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to serve requests from; defaults to the
            production container
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Conduit API",
        description="Backend API for Conduit - a social publishing platform",
        version="0.1.0",
        docs_url="/docs" if settings.api.docs_enabled else None,
        redoc_url=None,
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    if container is None:
        container = create_container(SecurityProvider())
    setup_di(app_instance, container)

    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    for module in (users, profiles, articles, comments, tags):
        app_instance.include_router(module.router, prefix=API_PREFIX)

    return app_instance

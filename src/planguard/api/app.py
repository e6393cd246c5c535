"""FastAPI application factory for the planguard delete guard."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from planguard import __version__
from planguard.api.deps import init_delete_guard, reset_delete_guard
from planguard.api.middleware import RequestBodyLimitMiddleware, RequestTimingMiddleware
from planguard.api.routers import delete_validation
from planguard.api.schemas import HealthResponse
from planguard.service.delete_guard import build_delete_guard
from planguard.settings import Settings


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Build the DeleteGuard for the configured project at startup."""
    settings: Settings = app.state.settings
    init_delete_guard(build_delete_guard(settings))
    try:
        yield
    finally:
        reset_delete_guard()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if settings is None:
        settings = Settings()

    app = FastAPI(
        title="planguard",
        description="Warns before deleting planning solutions whose scoreHolder global is in use.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Middleware
    app.add_middleware(RequestTimingMiddleware)
    app.add_middleware(RequestBodyLimitMiddleware)

    app.include_router(
        delete_validation.router, prefix="/delete-validation", tags=["delete-validation"]
    )

    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health() -> HealthResponse:
        return HealthResponse(status="ok", version=__version__)

    return app


def main() -> None:
    """Run the REST API server using settings from environment / .env file."""
    settings = Settings()

    logging.basicConfig(level=settings.log_level.upper())
    logger = logging.getLogger("planguard.api")
    logger.info(
        "planguard API server v%s starting (host=%s, port=%d, project=%s)",
        __version__, settings.api_server_host, settings.effective_port, settings.project_root,
    )

    uvicorn.run(
        "planguard.api.app:create_app",
        factory=True,
        host=settings.api_server_host,
        port=settings.effective_port,
        log_level=settings.log_level.lower(),
    )

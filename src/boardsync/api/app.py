"""FastAPI application setup."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from boardsync.api.dependencies import (
    close_orchestrator,
    close_state_store,
    init_orchestrator,
    init_state_store,
)
from boardsync.api.models import APIResponse
from boardsync.api.routes import config, control, logs, rules, webhooks
from boardsync.config import Settings
from boardsync.logging import log_event
from boardsync.orchestrator import PlatformFactory, SyncOrchestrator, connect_platforms
from boardsync.records.exceptions import ConfigurationError, SyncError
from boardsync.state_store import LogSeverity, SyncStateStore

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    settings: Settings = app.state.settings or Settings.from_env()

    # Startup
    store = SyncStateStore(credentials=settings.credentials)
    if settings.sync_enabled:
        try:
            store.enable_sync()
        except ConfigurationError as e:
            log_event(logger, store, f"Auto-sync not enabled: {e}", LogSeverity.ERROR)
    init_state_store(store)

    orchestrator = SyncOrchestrator(
        store=store,
        connect=app.state.connect,
        webhook_delay=settings.webhook_delay,
    )
    init_orchestrator(orchestrator)

    timer: asyncio.Task[None] | None = None
    if app.state.run_scheduler:
        timer = asyncio.create_task(orchestrator.run_periodic(settings.sync_interval))

    log_event(logger, store, "Server started successfully", LogSeverity.SUCCESS)

    yield
    # Shutdown
    if timer is not None:
        timer.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await timer
    await orchestrator.aclose()
    close_orchestrator()
    close_state_store()


def create_app(
    settings: Settings | None = None,
    connect: PlatformFactory = connect_platforms,
    run_scheduler: bool = True,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Service settings. Loaded from the environment at startup if None.
        connect: Builds the platform collaborators for each pass.
        run_scheduler: Whether to start the periodic sync loop.
    """
    app = FastAPI(
        title="BoardSync API",
        description="Two-way HubSpot ticket ↔ Monday.com board synchronization",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Store config for lifespan manager
    app.state.settings = settings
    app.state.connect = connect
    app.state.run_scheduler = run_scheduler

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    @app.exception_handler(ConfigurationError)
    async def configuration_error_handler(
        _request: Request, exc: ConfigurationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=APIResponse[None](data=None, error=str(exc)).model_dump(),
        )

    @app.exception_handler(SyncError)
    async def sync_error_handler(_request: Request, exc: SyncError) -> JSONResponse:
        logger.error("Unhandled sync error: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content=APIResponse[None](data=None, error="Remote platform error").model_dump(),
        )

    # Include routers
    app.include_router(config.router, prefix="/api/v1")
    app.include_router(rules.router, prefix="/api/v1")
    app.include_router(control.router, prefix="/api/v1")
    app.include_router(logs.router, prefix="/api/v1")
    app.include_router(webhooks.router)

    return app


# Default app instance
app = create_app()

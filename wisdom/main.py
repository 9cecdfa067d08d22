"""Wisdom API — FastAPI application factory.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map WisdomError → {"error", "code"} JSON bodies
    - Settings passed in by the caller and stored on app.state (no ambient globals)
    - Database pool opened and pinged on startup, disposed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - A failed ping raises inside the lifespan, so uvicorn aborts startup
    - Interactive docs and trailing-slash redirects disabled: unknown paths are a plain 404
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from wisdom.api.error_handlers import register_error_handlers
from wisdom.api.middleware import ResponseHeadersMiddleware
from wisdom.api.routes import catalog, index, quotes
from wisdom.config import Settings
from wisdom.infrastructure.database import DatabaseSessionManager
from wisdom.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    logger.info("Opening connection to database ...")
    db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Ping database connection ...")
    if not await db_manager.health_check():
        logger.error("Ping database connection: failure")
        await db_manager.dispose()
        raise RuntimeError("Database ping failed")
    logger.info("Ping database connection: success")
    app.state.db_manager = db_manager
    yield
    logger.info("Wisdom API shutting down")
    await db_manager.dispose()


def create_app(settings: Settings) -> FastAPI:
    """Build the application around an explicit Settings instance."""
    setup_logging(settings.log_level, settings.log_format)

    app = FastAPI(
        title="Wisdom API",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )
    app.state.settings = settings

    app.add_middleware(
        ResponseHeadersMiddleware,
        server_name=settings.server_name,
        media_type=settings.media_type,
    )
    register_error_handlers(app, settings.server_name, settings.media_type)

    app.include_router(index.router)
    app.include_router(quotes.router)
    app.include_router(catalog.router)
    return app

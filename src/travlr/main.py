"""FastAPI application entry point."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from travlr import __version__
from travlr.api.router import api_router
from travlr.config import settings
from travlr.core.audit import setup_audit_listeners
from travlr.core.auth.middleware import AuthContextMiddleware, RequestIdMiddleware
from travlr.core.database import Database
from travlr.core.errors import register_exception_handlers
from travlr.core.logging import RequestLoggingMiddleware, configure_logging
from travlr.core.observability import (
    instrument_sqlalchemy,
    setup_tracing,
    shutdown_tracing,
)


configure_logging(settings)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler.

    Creates tables on startup when enabled and releases the connection
    pool on shutdown.
    """
    database: Database = app.state.database

    logger.info(
        "application_startup",
        app_name=settings.app_name,
        environment=settings.environment,
    )

    if settings.database_create_all:
        await database.create_all()
        logger.info("database_tables_created")

    yield

    logger.info("application_shutdown")

    shutdown_tracing()
    await database.dispose()
    logger.info("database_disposed")


def create_app(database: Database | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        database: Database to serve requests from. Built from settings
            when omitted; tests pass their own.

    Returns:
        Configured FastAPI application instance.
    """
    app = FastAPI(
        title=settings.app_name,
        description="Admin API for the Travlr trip booking catalogue",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
        # Disable docs in production
        docs_url="/docs" if not settings.is_production else None,
        redoc_url="/redoc" if not settings.is_production else None,
        openapi_url="/openapi.json" if not settings.is_production else None,
    )

    app.state.database = database or Database.from_settings(settings)
    setup_audit_listeners()

    # Middleware added last runs first
    app.add_middleware(AuthContextMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIdMiddleware)

    cors_origins = settings.cors_origins
    if settings.is_development and not cors_origins:
        cors_origins = ["http://localhost:4200", "http://localhost:3000"]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "X-Request-ID"],
    )

    register_exception_handlers(app)

    app.include_router(api_router)

    if setup_tracing(app, settings):
        instrument_sqlalchemy(app.state.database.engine)

    return app


app = create_app()

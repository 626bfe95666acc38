"""
notes_api.api.app

FastAPI app factory for the notes service.

Responsibilities:
- Build the FastAPI application and register routers/middleware/error handlers.
- Initialize and dispose shared infrastructure (DB engine/session factory).
- Provide a single composition root where cross-cutting concerns live.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from notes_api import __version__
from notes_api.api.errors import register_exception_handlers
from notes_api.api.routers.auth import router as auth_router
from notes_api.api.routers.health import router as health_router
from notes_api.api.routers.notes import router as notes_router
from notes_api.api.routers.users import router as users_router
from notes_api.db.init_db import init_db
from notes_api.db.session import create_engine, create_sessionmaker
from notes_api.observability.logging import configure_logging, get_logger
from notes_api.observability.middleware import RequestContextMiddleware
from notes_api.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings) -> FastAPI:
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env)
        # One engine (connection pool) per process; sessions are per request.
        engine = create_engine(settings)
        app.state.engine = engine
        app.state.sessionmaker = create_sessionmaker(engine)
        if settings.env in ("dev", "test"):
            # Prod schema is managed by Alembic migrations.
            await init_db(engine)
        try:
            yield
        finally:
            await engine.dispose()
            log.info("shutdown")

    app = FastAPI(
        title="Notes API",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(RequestContextMiddleware)
    register_exception_handlers(app, settings=settings)
    app.include_router(health_router, tags=["health"])
    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(notes_router)

    return app

"""
ptf_publisher.api.app

FastAPI app factory for the publisher service.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Initialize and dispose shared infrastructure (DB engine, object store, mail sender).
- Translate domain errors into HTTP responses.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ptf_publisher.api.routers.admin_audience import router as admin_audience_router
from ptf_publisher.api.routers.admin_posts import router as admin_posts_router
from ptf_publisher.api.routers.auth import router as auth_router
from ptf_publisher.api.routers.functions import router as functions_router
from ptf_publisher.api.routers.health import router as health_router
from ptf_publisher.api.routers.navigation import router as navigation_router
from ptf_publisher.api.routers.posts import router as posts_router
from ptf_publisher.db.init_db import init_db
from ptf_publisher.db.session import create_engine, create_sessionmaker
from ptf_publisher.errors import PublisherError
from ptf_publisher.mail.sender import MailSender, build_sender
from ptf_publisher.observability.logging import configure_logging, get_logger
from ptf_publisher.observability.middleware import RequestContextMiddleware
from ptf_publisher.services.accounts import bootstrap_admin
from ptf_publisher.settings import Settings
from ptf_publisher.storage.object_store import ObjectStore, S3ObjectStore

log = get_logger(__name__)


def create_app(
    *,
    settings: Settings,
    object_store: ObjectStore | None = None,
    mail_sender: MailSender | None = None,
) -> FastAPI:
    configure_logging(
        service_name=settings.service_name,
        level=settings.log_level,
        app_version=settings.app_version,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env, version=settings.app_version)
        engine = create_engine(settings)
        app.state.engine = engine
        app.state.sessionmaker = create_sessionmaker(engine)
        app.state.object_store = object_store or S3ObjectStore(settings=settings)
        app.state.mail_sender = mail_sender or build_sender(settings)
        if settings.env in ("dev", "test"):
            # Prod runs Alembic migrations instead.
            await init_db(engine)
        await bootstrap_admin(app.state.sessionmaker, settings)
        try:
            yield
        finally:
            await engine.dispose()
            log.info("shutdown")

    app = FastAPI(
        title="Project Timothy Fund Publisher",
        version=settings.app_version,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(RequestContextMiddleware)
    _register_error_handlers(app)

    app.include_router(health_router, tags=["health"])
    app.include_router(navigation_router)
    app.include_router(auth_router)
    app.include_router(posts_router)
    app.include_router(admin_posts_router)
    app.include_router(admin_audience_router)
    app.include_router(functions_router)

    return app


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(PublisherError)
    async def _publisher_error(request: Request, exc: PublisherError) -> JSONResponse:
        if exc.status_code >= 500:
            log.error("request_failed", error=str(exc), error_type=type(exc).__name__)
        return JSONResponse(status_code=exc.status_code, content={"detail": str(exc)})


# --- Module Notes -----------------------------------------------------------
# App composition stays here; business logic stays in services.

"""FastAPI application instance and startup hooks."""
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from pocketbook import __version__
from pocketbook.cache import CacheStore
from pocketbook.core.config import Settings, get_settings
from pocketbook.core.errors import (
    AuthenticationError,
    AuthorizationError,
    ServiceError,
    ValidationError,
)
from pocketbook.core.log import LoggingConfig, get_logger, init_logging, shutdown_logging
from pocketbook.db.engine import create_engine, dispose_engine
from pocketbook.routers import (
    auth_router,
    currencies_router,
    health_router,
    locations_router,
    people_router,
    users_router,
)

LOGGER = get_logger(__name__)


def _logging_config(settings: Settings) -> LoggingConfig:
    return LoggingConfig(
        level=settings.logging.level,
        log_dir=settings.logging.log_dir,
        console=settings.logging.console,
        rich_tracebacks=settings.logging.rich_tracebacks,
        queue=settings.logging.queue,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the database pool and the optional cache pool for the app's lifetime."""

    settings: Settings = app.state.settings
    app.state.engine = create_engine(settings.database)
    app.state.cache_store = None
    if settings.cache.is_active:
        app.state.cache_store = CacheStore.from_settings(settings.cache)
        LOGGER.info("Cache enabled (ttl=%ss, strict=%s)", settings.cache.default_ttl, settings.cache.strict)
    else:
        LOGGER.info("Cache disabled")
    try:
        yield
    finally:
        if app.state.cache_store is not None:
            await app.state.cache_store.close()
        await dispose_engine(app.state.engine)
        shutdown_logging()


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ValidationError)
    async def _validation(request: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})

    @app.exception_handler(AuthenticationError)
    async def _authentication(request: Request, exc: AuthenticationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"detail": str(exc)},
            headers={"WWW-Authenticate": "Bearer"},
        )

    @app.exception_handler(AuthorizationError)
    async def _authorization(request: Request, exc: AuthorizationError) -> JSONResponse:
        return JSONResponse(status_code=status.HTTP_403_FORBIDDEN, content={"detail": str(exc)})

    @app.exception_handler(ServiceError)
    async def _service(request: Request, exc: ServiceError) -> JSONResponse:
        # The message names only the operation; the cause was logged by the service
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"detail": str(exc)}
        )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""

    settings = settings or get_settings()
    init_logging(_logging_config(settings))

    app = FastAPI(title="Pocketbook", version=__version__, lifespan=lifespan)
    app.state.settings = settings
    _register_error_handlers(app)
    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(currencies_router)
    app.include_router(people_router)
    app.include_router(locations_router)

    LOGGER.info("FastAPI application initialised (%s)", settings.environment)
    return app


app = create_app()

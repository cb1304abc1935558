"""Async database engine factories."""
from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from pocketbook.core.config import DatabaseSettings, get_settings
from pocketbook.core.log import get_logger

LOGGER = get_logger(__name__)


def create_engine(settings: DatabaseSettings | None = None, **kwargs) -> AsyncEngine:
    """Create the pooled async SQLAlchemy engine shared by every request."""

    db = settings or get_settings().database

    options = dict(kwargs)
    options.setdefault("echo", db.echo)
    options.setdefault("pool_size", db.pool_size)
    options.setdefault("max_overflow", db.max_overflow)
    options.setdefault("pool_timeout", db.pool_timeout)
    options.setdefault("pool_recycle", db.pool_recycle)
    options.setdefault("pool_pre_ping", True)

    LOGGER.debug("Creating SQLAlchemy engine", extra={"url": db.masked_url, "options": options})
    return create_async_engine(db.sqlalchemy_url, **options)


async def dispose_engine(engine: AsyncEngine) -> None:
    """Return pooled connections and close the engine."""

    await engine.dispose()
    LOGGER.info("Database engine disposed")


__all__ = ["create_engine", "dispose_engine"]

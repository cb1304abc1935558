"""Key/value cache store backed by redis."""
from __future__ import annotations

import logging

from redis.asyncio import BlockingConnectionPool, Redis
from redis.exceptions import RedisError

from pocketbook.core.config import CacheSettings
from pocketbook.core.errors import CacheError
from pocketbook.core.log import get_logger, timeit

LOGGER = get_logger(__name__)


class CacheStore:
    """Thin async wrapper exposing ``get``/``set``/``delete`` over redis.

    Every driver failure is re-raised as :class:`CacheError`; deciding whether
    that failure is fatal is left to :class:`pocketbook.cache.aside.CacheAside`.
    """

    def __init__(
        self,
        client: Redis,
        *,
        default_ttl: int = 3600,
        logger: logging.Logger | None = None,
    ) -> None:
        self._client = client
        self.default_ttl = default_ttl
        self._logger = logger or LOGGER

    @classmethod
    def from_settings(cls, settings: CacheSettings) -> "CacheStore":
        """Build a store with its own bounded connection pool."""

        pool = BlockingConnectionPool.from_url(
            settings.url,
            max_connections=settings.max_connections,
            decode_responses=True,
        )
        return cls(Redis(connection_pool=pool), default_ttl=settings.default_ttl)

    async def get(self, key: str) -> str | None:
        try:
            with timeit(f"[CACHE] [GET] {key}", logger=self._logger, unit="hits") as timer:
                value = await self._client.get(key)
                timer.set_count(0 if value is None else 1)
        except RedisError as exc:
            raise CacheError(f"cache get failed: {exc}", key=key) from exc
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    async def set(self, key: str, value: str, ttl: int | None = None) -> None:
        expires = ttl if ttl is not None else self.default_ttl
        try:
            with timeit(f"[CACHE] [SET] {key}", logger=self._logger):
                await self._client.set(key, value, ex=expires)
        except RedisError as exc:
            raise CacheError(f"cache set failed: {exc}", key=key) from exc

    async def delete(self, *keys: str) -> int:
        if not keys:
            return 0
        label = f"[CACHE] [DELETE] {', '.join(keys)}"
        try:
            with timeit(label, logger=self._logger, unit="keys") as timer:
                removed = await self._client.delete(*keys)
                timer.set_count(int(removed))
        except RedisError as exc:
            raise CacheError(f"cache delete failed: {exc}", key=", ".join(keys)) from exc
        return int(removed)

    async def close(self) -> None:
        await self._client.aclose()
        self._logger.info("Cache connection pool closed")


__all__ = ["CacheStore"]

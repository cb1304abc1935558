"""Cache-aside helper shared by the services."""
from __future__ import annotations

import logging
from typing import Awaitable, Callable, TypeVar

from pydantic import TypeAdapter
from pydantic import ValidationError as SchemaValidationError

from pocketbook.core.errors import CacheError
from pocketbook.core.log import get_logger

from .store import CacheStore

LOGGER = get_logger(__name__)

T = TypeVar("T")


class CacheAside:
    """Read-through and invalidate-on-write access to an optional cache.

    With no store every read is a miss and every write a no-op. In strict mode
    a :class:`CacheError` propagates to the caller; otherwise it is logged and
    the operation carries on as if the cache were absent.
    """

    def __init__(
        self,
        store: CacheStore | None,
        *,
        strict: bool = True,
        ttl: int | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._store = store
        self.strict = strict
        self.ttl = ttl
        self._logger = logger or LOGGER

    @property
    def enabled(self) -> bool:
        return self._store is not None

    def _degrade(self, exc: CacheError) -> None:
        if self.strict:
            raise exc
        self._logger.warning("[CACHE] bypassed after failure: %s", exc)

    async def read(self, key: str, adapter: TypeAdapter[T]) -> T | None:
        """Return the cached value for ``key`` or ``None`` on a miss."""

        if self._store is None:
            return None
        try:
            payload = await self._store.get(key)
        except CacheError as exc:
            self._degrade(exc)
            return None
        if payload is None:
            return None
        try:
            return adapter.validate_json(payload)
        except SchemaValidationError:
            self._logger.warning("[CACHE] [GET] %s held an undecodable value, evicting", key)
            await self.invalidate(key)
            return None

    async def write(self, key: str, value: T, adapter: TypeAdapter[T]) -> None:
        if self._store is None:
            return
        payload = adapter.dump_json(value).decode("utf-8")
        try:
            await self._store.set(key, payload, self.ttl)
        except CacheError as exc:
            self._degrade(exc)

    async def invalidate(self, *keys: str) -> None:
        if self._store is None or not keys:
            return
        try:
            await self._store.delete(*keys)
        except CacheError as exc:
            self._degrade(exc)

    async def get_or_load(
        self,
        key: str,
        adapter: TypeAdapter[T],
        loader: Callable[[], Awaitable[T | None]],
    ) -> T | None:
        """Serve ``key`` from cache, falling back to ``loader`` and caching its result.

        A ``None`` result means "not found" and is never cached.
        """

        cached = await self.read(key, adapter)
        if cached is not None:
            return cached
        value = await loader()
        if value is not None:
            await self.write(key, value, adapter)
        return value


__all__ = ["CacheAside"]

"""Shared fixtures: a recording async engine, an in-memory redis and entity factories."""
from __future__ import annotations

import os
from collections import Counter
from contextlib import asynccontextmanager
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Any, AsyncIterator, Callable
from uuid import UUID, uuid4

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

# Keep the application importable without a .env or running services
os.environ.setdefault("LOG_QUEUE", "0")
os.environ.setdefault("LOG_CONSOLE", "0")

from pocketbook.cache import CacheAside, CacheStore  # noqa: E402
from pocketbook.core.security import AuthUser, UserRole  # noqa: E402
from pocketbook.models import Currency, FxRate, Location, Person, User  # noqa: E402

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


class FakeResult:
    def __init__(self, columns: list[str], rows: list[tuple[Any, ...]]) -> None:
        self._columns = columns
        self._rows = rows

    @property
    def returns_rows(self) -> bool:
        return bool(self._columns)

    def keys(self) -> list[str]:
        return list(self._columns)

    def fetchall(self) -> list[tuple[Any, ...]]:
        return list(self._rows)


class FakeConnection:
    def __init__(self, engine: "FakeEngine") -> None:
        self._engine = engine

    async def execute(self, statement) -> FakeResult:
        compiled = statement.compile()
        self._engine.calls.append((str(statement), dict(compiled.params)))
        if self._engine.error is not None:
            raise self._engine.error
        if self._engine.results:
            return self._engine.results.pop(0)
        return FakeResult([], [])


class FakeEngine:
    """Stand-in for ``AsyncEngine`` recording every ``CALL`` and its bound values."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self.results: list[FakeResult] = []
        self.error: Exception | None = None

    def queue(self, columns: list[str], *rows: tuple[Any, ...]) -> None:
        self.results.append(FakeResult(columns, list(rows)))

    @asynccontextmanager
    async def begin(self) -> AsyncIterator[FakeConnection]:
        yield FakeConnection(self)


class FakeRedis:
    """Async in-memory subset of the redis client counting round trips."""

    def __init__(self) -> None:
        self.data: dict[str, str] = {}
        self.expiry: dict[str, int | None] = {}
        self.calls: Counter[str] = Counter()
        self.fail = False

    def _check(self, operation: str) -> None:
        self.calls[operation] += 1
        if self.fail:
            raise RedisConnectionError("cache unavailable")

    async def get(self, key: str) -> str | None:
        self._check("get")
        return self.data.get(key)

    async def set(self, key: str, value: str, ex: int | None = None) -> bool:
        self._check("set")
        self.data[key] = value
        self.expiry[key] = ex
        return True

    async def delete(self, *keys: str) -> int:
        self._check("delete")
        removed = 0
        for key in keys:
            if self.data.pop(key, None) is not None:
                removed += 1
        return removed

    async def aclose(self) -> None:
        return None


@pytest.fixture()
def engine() -> FakeEngine:
    return FakeEngine()


@pytest.fixture()
def redis() -> FakeRedis:
    return FakeRedis()


@pytest.fixture()
def cache(redis: FakeRedis) -> CacheAside:
    return CacheAside(CacheStore(redis, default_ttl=3600))


@pytest.fixture()
def owner() -> AuthUser:
    return AuthUser(user_id=uuid4(), role=UserRole.USER)


@pytest.fixture()
def stranger() -> AuthUser:
    return AuthUser(user_id=uuid4(), role=UserRole.USER)


@pytest.fixture()
def admin() -> AuthUser:
    return AuthUser(user_id=uuid4(), role=UserRole.ADMIN)


@pytest.fixture()
def make_person() -> Callable[..., Person]:
    def factory(user_id: UUID, **overrides: Any) -> Person:
        values: dict[str, Any] = {
            "id": uuid4(),
            "user_id": user_id,
            "name": "Ada Lovelace",
            "email": "ada@example.com",
            "phone": None,
            "image_url": None,
            "note": "met at the conference",
            "archived": False,
            "created_at": NOW,
            "updated_at": NOW,
        }
        values.update(overrides)
        return Person(**values)

    return factory


@pytest.fixture()
def make_location() -> Callable[..., Location]:
    def factory(user_id: UUID, **overrides: Any) -> Location:
        values: dict[str, Any] = {
            "id": uuid4(),
            "user_id": user_id,
            "name": "Home",
            "address": "1 Main Street",
            "city": "Lyon",
            "region": None,
            "postal_code": "69001",
            "country_code": "FR",
            "latitude": Decimal("45.764043"),
            "longitude": Decimal("4.835659"),
            "archived": False,
            "created_at": NOW,
            "updated_at": NOW,
        }
        values.update(overrides)
        return Location(**values)

    return factory


@pytest.fixture()
def make_user() -> Callable[..., User]:
    def factory(**overrides: Any) -> User:
        values: dict[str, Any] = {
            "id": uuid4(),
            "email": "dana@example.com",
            "password_hash": "$2b$12$notarealhashnotarealhashnotarealhashnotarealhash",
            "role": UserRole.USER,
            "first_name": "Dana",
            "last_name": "Carvey",
            "base_currency_code": "EUR",
            "created_at": NOW,
            "updated_at": NOW,
        }
        values.update(overrides)
        return User(**values)

    return factory


@pytest.fixture()
def make_currency() -> Callable[..., Currency]:
    def factory(code: str = "EUR", name: str = "Euro", minor_unit: int = 2) -> Currency:
        return Currency(code=code, name=name, minor_unit=minor_unit)

    return factory


@pytest.fixture()
def make_fx_rate() -> Callable[..., FxRate]:
    def factory(**overrides: Any) -> FxRate:
        values: dict[str, Any] = {
            "id": uuid4(),
            "base_code": "EUR",
            "quote_code": "USD",
            "rate": Decimal("1.0850"),
            "as_of_date": date(2024, 5, 1),
            "source": "ECB",
            "created_at": NOW,
        }
        values.update(overrides)
        return FxRate(**values)

    return factory

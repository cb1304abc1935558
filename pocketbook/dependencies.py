"""Shared FastAPI dependency definitions.

The engine and the optional cache store are created once in the application
lifespan and kept on ``app.state``; every request builds its lightweight
repositories and services on top of them.
"""
from __future__ import annotations

from fastapi import Depends, Request

from pocketbook.cache import CacheAside, CacheStore
from pocketbook.core.config import get_settings
from pocketbook.core.security import JwtManager, get_jwt_manager
from pocketbook.db.procedures import ProcedureInvoker
from pocketbook.repositories import (
    CurrencyRepository,
    FxRateRepository,
    LocationRepository,
    PeopleRepository,
    UserRepository,
)
from pocketbook.services import (
    AuthService,
    CurrencyService,
    LocationService,
    PeopleService,
    UserService,
)


def get_invoker(request: Request) -> ProcedureInvoker:
    """Return a procedure invoker bound to the shared engine."""

    return ProcedureInvoker(request.app.state.engine)


def get_cache(request: Request) -> CacheAside:
    """Return the cache-aside helper; a no-op when caching is disabled."""

    store: CacheStore | None = getattr(request.app.state, "cache_store", None)
    settings = getattr(request.app.state, "settings", None) or get_settings()
    return CacheAside(store, strict=settings.cache.strict, ttl=settings.cache.default_ttl)


def get_user_service(
    invoker: ProcedureInvoker = Depends(get_invoker),
    cache: CacheAside = Depends(get_cache),
) -> UserService:
    return UserService(UserRepository(invoker), cache)


def get_auth_service(
    invoker: ProcedureInvoker = Depends(get_invoker),
    jwt_manager: JwtManager = Depends(get_jwt_manager),
) -> AuthService:
    return AuthService(UserRepository(invoker), jwt_manager)


def get_currency_service(
    invoker: ProcedureInvoker = Depends(get_invoker),
    cache: CacheAside = Depends(get_cache),
) -> CurrencyService:
    return CurrencyService(CurrencyRepository(invoker), FxRateRepository(invoker), cache)


def get_people_service(
    invoker: ProcedureInvoker = Depends(get_invoker),
    cache: CacheAside = Depends(get_cache),
) -> PeopleService:
    return PeopleService(PeopleRepository(invoker), cache)


def get_location_service(
    invoker: ProcedureInvoker = Depends(get_invoker),
    cache: CacheAside = Depends(get_cache),
) -> LocationService:
    return LocationService(LocationRepository(invoker), cache)


__all__ = [
    "get_auth_service",
    "get_cache",
    "get_currency_service",
    "get_invoker",
    "get_location_service",
    "get_people_service",
    "get_user_service",
]

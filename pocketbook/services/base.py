"""Helpers shared by the service layer: error flattening and access checks."""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator
from uuid import UUID

from pocketbook.core.errors import (
    AuthorizationError,
    CacheError,
    MappingError,
    PersistenceError,
    ServiceError,
)
from pocketbook.core.log import get_logger
from pocketbook.core.security import AuthUser

LOGGER = get_logger(__name__)

# Failures that are logged and collapsed into an opaque ServiceError
_FLATTENED = (PersistenceError, MappingError, CacheError)


@contextmanager
def service_errors(
    entity: str, operation: str, *, logger: logging.Logger | None = None
) -> Iterator[None]:
    """Translate store and cache failures into ``ServiceError(entity, operation)``.

    The cause is logged with its traceback and chained, never rendered.
    Validation and authorization errors pass through untouched.
    """

    try:
        yield
    except _FLATTENED as exc:
        (logger or LOGGER).exception("error during %s %s", operation, entity)
        raise ServiceError(entity, operation) from exc


def owns(auth_user: AuthUser, owner_id: UUID) -> bool:
    """Return whether ``auth_user`` may address data owned by ``owner_id``."""

    return auth_user.is_admin or auth_user.user_id == owner_id


def ensure_admin(auth_user: AuthUser) -> None:
    if not auth_user.is_admin:
        raise AuthorizationError("Administrator access required")


def ensure_self_or_admin(auth_user: AuthUser, user_id: UUID) -> None:
    if not owns(auth_user, user_id):
        raise AuthorizationError("Access to another user's data is not allowed")


__all__ = ["ensure_admin", "ensure_self_or_admin", "owns", "service_errors"]

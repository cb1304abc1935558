"""Error taxonomy shared by the data-access, cache and service layers.

"Not found" is deliberately absent: lookups and scoped updates report a missing
identity by returning ``None``.
"""
from __future__ import annotations


class PocketbookError(Exception):
    """Base class for errors raised by the pocketbook core."""


class PersistenceError(PocketbookError):
    """A stored procedure call failed or returned an unexpected shape."""

    def __init__(self, message: str, *, procedure: str | None = None) -> None:
        self.procedure = procedure
        prefix = f"{procedure}: " if procedure else ""
        super().__init__(f"{prefix}{message}")


class MappingError(PocketbookError):
    """A result row did not match the schema expected by an entity."""

    def __init__(self, column: str, expected: str, detail: str | None = None) -> None:
        self.column = column
        self.expected = expected
        message = f"column '{column}' could not be read as {expected}"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class CacheError(PocketbookError):
    """The cache store failed or returned an unusable value."""

    def __init__(self, message: str, *, key: str | None = None) -> None:
        self.key = key
        super().__init__(f"{message} ({key})" if key else message)


class ValidationError(PocketbookError):
    """Input or a cross-entity precondition was rejected before any write."""


class AuthenticationError(PocketbookError):
    """Credentials or a bearer token could not be verified."""


class AuthorizationError(PocketbookError):
    """The authenticated identity may not perform the requested action."""


class ServiceError(PocketbookError):
    """Opaque failure of a service operation.

    The message only names the operation and entity; the underlying cause is
    chained (``raise ... from``) and logged, never rendered to callers.
    """

    def __init__(self, entity: str, operation: str) -> None:
        self.entity = entity
        self.operation = operation
        super().__init__(f"error during {operation} {entity}")


__all__ = [
    "AuthenticationError",
    "AuthorizationError",
    "CacheError",
    "MappingError",
    "PersistenceError",
    "PocketbookError",
    "ServiceError",
    "ValidationError",
]

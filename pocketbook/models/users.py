"""User entity as stored by the user procedures."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from pocketbook.core.errors import MappingError
from pocketbook.core.security import UserRole
from pocketbook.db.rows import RowReader


@dataclass(frozen=True, slots=True)
class User:
    """Account row including the password hash; never rendered as is."""

    id: UUID
    email: str
    password_hash: str
    role: UserRole
    first_name: str
    last_name: str
    base_currency_code: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_row(cls, row: RowReader) -> "User":
        raw_role = row.text("role").upper()
        try:
            role = UserRole(raw_role)
        except ValueError as exc:
            raise MappingError("role", "ADMIN|USER", f"got {raw_role!r}") from exc
        return cls(
            id=row.uuid("id"),
            email=row.text("email"),
            password_hash=row.text("password_hash"),
            role=role,
            first_name=row.text("first_name"),
            last_name=row.text("last_name"),
            base_currency_code=row.text("base_currency_code"),
            created_at=row.datetime("created_at"),
            updated_at=row.datetime("updated_at"),
        )

"""Contact entity owned by a user."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from pocketbook.db.rows import RowReader


@dataclass(frozen=True, slots=True)
class Person:
    id: UUID
    user_id: UUID
    name: str
    email: str | None
    phone: str | None
    image_url: str | None
    note: str | None
    archived: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_row(cls, row: RowReader) -> "Person":
        return cls(
            id=row.uuid("id"),
            user_id=row.uuid("user_id"),
            name=row.text("name"),
            email=row.optional_text("email"),
            phone=row.optional_text("phone"),
            image_url=row.optional_text("image_url"),
            note=row.optional_text("note"),
            archived=row.boolean("archived"),
            created_at=row.datetime("created_at"),
            updated_at=row.datetime("updated_at"),
        )

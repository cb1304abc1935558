"""Location entity owned by a user."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pocketbook.db.rows import RowReader


@dataclass(frozen=True, slots=True)
class Location:
    id: UUID
    user_id: UUID
    name: str
    address: str | None
    city: str | None
    region: str | None
    postal_code: str | None
    country_code: str | None
    latitude: Decimal | None
    longitude: Decimal | None
    archived: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_row(cls, row: RowReader) -> "Location":
        return cls(
            id=row.uuid("id"),
            user_id=row.uuid("user_id"),
            name=row.text("name"),
            address=row.optional_text("address"),
            city=row.optional_text("city"),
            region=row.optional_text("region"),
            postal_code=row.optional_text("postal_code"),
            country_code=row.optional_text("country_code"),
            latitude=row.optional_decimal("latitude"),
            longitude=row.optional_decimal("longitude"),
            archived=row.boolean("archived"),
            created_at=row.datetime("created_at"),
            updated_at=row.datetime("updated_at"),
        )

"""Currency and FX rate entities."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from pocketbook.db.rows import RowReader


@dataclass(frozen=True, slots=True)
class Currency:
    """ISO-like currency keyed by its code."""

    code: str
    name: str
    minor_unit: int

    @classmethod
    def from_row(cls, row: RowReader) -> "Currency":
        return cls(
            code=row.text("code"),
            name=row.text("name"),
            minor_unit=row.integer("minor_unit"),
        )


@dataclass(frozen=True, slots=True)
class FxRate:
    """Quoted rate where 1 unit of ``base_code`` buys ``rate`` of ``quote_code``."""

    id: UUID
    base_code: str
    quote_code: str
    rate: Decimal
    as_of_date: date
    source: str
    created_at: datetime

    @classmethod
    def from_row(cls, row: RowReader) -> "FxRate":
        return cls(
            id=row.uuid("id"),
            base_code=row.text("base_code"),
            quote_code=row.text("quote_code"),
            rate=row.decimal("rate"),
            as_of_date=row.date("as_of_date"),
            source=row.text("source"),
            created_at=row.datetime("created_at"),
        )

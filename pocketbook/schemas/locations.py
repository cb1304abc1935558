"""Schemas for places owned by a user."""
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field, field_serializer

from pocketbook.models import Location


class LocationResponse(BaseModel):
    location_id: UUID
    user_id: UUID
    location_name: str
    location_address: str | None = None
    location_city: str | None = None
    location_region: str | None = None
    location_postal_code: str | None = None
    location_country_code: str | None = None
    location_latitude: Decimal | None = None
    location_longitude: Decimal | None = None
    location_archived: bool = False
    location_created_at: datetime | None = None
    location_updated_at: datetime | None = None

    @field_serializer("location_latitude", "location_longitude")
    def _serialize_coordinate(self, value: Decimal | None) -> str | None:
        return None if value is None else str(value)

    @classmethod
    def from_entity(cls, location: Location) -> "LocationResponse":
        return cls(
            location_id=location.id,
            user_id=location.user_id,
            location_name=location.name,
            location_address=location.address,
            location_city=location.city,
            location_region=location.region,
            location_postal_code=location.postal_code,
            location_country_code=location.country_code,
            location_latitude=location.latitude,
            location_longitude=location.longitude,
            location_archived=location.archived,
            location_created_at=location.created_at,
            location_updated_at=location.updated_at,
        )


class LocationCreateRequest(BaseModel):
    location_name: str = Field(min_length=1)
    location_address: str | None = None
    location_city: str | None = None
    location_region: str | None = None
    location_postal_code: str | None = None
    location_country_code: str | None = None
    location_latitude: Decimal | None = Field(default=None, ge=-90, le=90)
    location_longitude: Decimal | None = Field(default=None, ge=-180, le=180)


class LocationUpdateNameRequest(BaseModel):
    location_name: str = Field(min_length=1)


class LocationUpdateRequest(BaseModel):
    location_address: str | None = None
    location_city: str | None = None
    location_region: str | None = None
    location_postal_code: str | None = None
    location_country_code: str | None = None


class LocationUpdateLatLongRequest(BaseModel):
    location_latitude: Decimal | None = Field(default=None, ge=-90, le=90)
    location_longitude: Decimal | None = Field(default=None, ge=-180, le=180)


class LocationUpdateArchivedRequest(BaseModel):
    location_archived: bool

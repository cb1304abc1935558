"""Commands for locations; creation stamps the owner from the caller."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from pocketbook.core.security import AuthUser
from pocketbook.schemas.locations import (
    LocationCreateRequest,
    LocationUpdateArchivedRequest,
    LocationUpdateLatLongRequest,
    LocationUpdateNameRequest,
    LocationUpdateRequest,
)
from pocketbook.schemas.pagination import PaginationRequest


@dataclass(frozen=True, slots=True)
class LocationGetCommand:
    location_id: UUID
    auth_user: AuthUser


@dataclass(frozen=True, slots=True)
class LocationCreateCommand:
    user_id: UUID
    location_name: str
    location_address: str | None
    location_city: str | None
    location_region: str | None
    location_postal_code: str | None
    location_country_code: str | None
    location_latitude: Decimal | None
    location_longitude: Decimal | None
    auth_user: AuthUser

    @classmethod
    def from_request(
        cls, request: LocationCreateRequest, auth_user: AuthUser
    ) -> "LocationCreateCommand":
        return cls(
            user_id=auth_user.user_id,
            location_name=request.location_name.strip(),
            location_address=request.location_address,
            location_city=request.location_city,
            location_region=request.location_region,
            location_postal_code=request.location_postal_code,
            location_country_code=request.location_country_code,
            location_latitude=request.location_latitude,
            location_longitude=request.location_longitude,
            auth_user=auth_user,
        )


@dataclass(frozen=True, slots=True)
class LocationUpdateNameCommand:
    location_id: UUID
    location_name: str
    auth_user: AuthUser

    @classmethod
    def from_request(
        cls, location_id: UUID, request: LocationUpdateNameRequest, auth_user: AuthUser
    ) -> "LocationUpdateNameCommand":
        return cls(
            location_id=location_id,
            location_name=request.location_name.strip(),
            auth_user=auth_user,
        )


@dataclass(frozen=True, slots=True)
class LocationUpdateCommand:
    location_id: UUID
    location_address: str | None
    location_city: str | None
    location_region: str | None
    location_postal_code: str | None
    location_country_code: str | None
    auth_user: AuthUser

    @classmethod
    def from_request(
        cls, location_id: UUID, request: LocationUpdateRequest, auth_user: AuthUser
    ) -> "LocationUpdateCommand":
        return cls(
            location_id=location_id,
            location_address=request.location_address,
            location_city=request.location_city,
            location_region=request.location_region,
            location_postal_code=request.location_postal_code,
            location_country_code=request.location_country_code,
            auth_user=auth_user,
        )


@dataclass(frozen=True, slots=True)
class LocationUpdateLatLongCommand:
    location_id: UUID
    location_latitude: Decimal | None
    location_longitude: Decimal | None
    auth_user: AuthUser

    @classmethod
    def from_request(
        cls, location_id: UUID, request: LocationUpdateLatLongRequest, auth_user: AuthUser
    ) -> "LocationUpdateLatLongCommand":
        return cls(
            location_id=location_id,
            location_latitude=request.location_latitude,
            location_longitude=request.location_longitude,
            auth_user=auth_user,
        )


@dataclass(frozen=True, slots=True)
class LocationArchivedCommand:
    location_id: UUID
    location_archived: bool
    auth_user: AuthUser

    @classmethod
    def from_request(
        cls, location_id: UUID, request: LocationUpdateArchivedRequest, auth_user: AuthUser
    ) -> "LocationArchivedCommand":
        return cls(
            location_id=location_id,
            location_archived=request.location_archived,
            auth_user=auth_user,
        )


@dataclass(frozen=True, slots=True)
class LocationDeleteCommand:
    location_id: UUID
    auth_user: AuthUser


@dataclass(frozen=True, slots=True)
class LocationListCommand:
    pagination: PaginationRequest | None
    auth_user: AuthUser


@dataclass(frozen=True, slots=True)
class LocationListByUserCommand:
    user_id: UUID
    auth_user: AuthUser
    search: str | None = None

"""Service for locations, scoped to the owning user."""
from __future__ import annotations

from uuid import UUID

from pydantic import TypeAdapter

from pocketbook.cache import CacheAside
from pocketbook.cache import keys
from pocketbook.commands.locations import (
    LocationArchivedCommand,
    LocationCreateCommand,
    LocationDeleteCommand,
    LocationGetCommand,
    LocationListByUserCommand,
    LocationListCommand,
    LocationUpdateCommand,
    LocationUpdateLatLongCommand,
    LocationUpdateNameCommand,
)
from pocketbook.core.log import get_logger
from pocketbook.core.security import AuthUser
from pocketbook.models import Location
from pocketbook.repositories import LocationRepository
from pocketbook.schemas.locations import LocationResponse
from pocketbook.schemas.pagination import PaginationRequest

from .base import ensure_admin, ensure_self_or_admin, owns, service_errors

LOGGER = get_logger(__name__)

ENTITY = "location"
_LOCATION = TypeAdapter(LocationResponse)
_LOCATIONS = TypeAdapter(list[LocationResponse])


class LocationService:
    def __init__(self, repository: LocationRepository, cache: CacheAside | None = None) -> None:
        self._repository = repository
        self._cache = cache or CacheAside(None)

    async def _load(self, location_id: UUID, auth_user: AuthUser) -> LocationResponse | None:
        async def load() -> LocationResponse | None:
            location = await self._repository.get(location_id, auth_user.user_id)
            return None if location is None else LocationResponse.from_entity(location)

        location = await self._cache.get_or_load(keys.location_key(location_id), _LOCATION, load)
        if location is None or not owns(auth_user, location.user_id):
            return None
        return location

    async def _after_update(
        self, location_id: UUID, location: Location | None
    ) -> LocationResponse | None:
        if location is None:
            await self._cache.invalidate(keys.location_key(location_id))
            return None
        await self._cache.invalidate(
            keys.location_key(location.id), keys.locations_by_owner_key(location.user_id)
        )
        return LocationResponse.from_entity(location)

    async def get(self, command: LocationGetCommand) -> LocationResponse | None:
        with service_errors(ENTITY, "get", logger=LOGGER):
            return await self._load(command.location_id, command.auth_user)

    async def create(self, command: LocationCreateCommand) -> LocationResponse:
        with service_errors(ENTITY, "create", logger=LOGGER):
            location = await self._repository.create(
                user_id=command.user_id,
                name=command.location_name,
                address=command.location_address,
                city=command.location_city,
                region=command.location_region,
                postal_code=command.location_postal_code,
                country_code=command.location_country_code,
                latitude=command.location_latitude,
                longitude=command.location_longitude,
                meta_user=command.auth_user.user_id,
            )
            response = LocationResponse.from_entity(location)
            await self._cache.write(keys.location_key(location.id), response, _LOCATION)
            await self._cache.invalidate(keys.locations_by_owner_key(location.user_id))
        return response

    async def update_name(self, command: LocationUpdateNameCommand) -> LocationResponse | None:
        with service_errors(ENTITY, "update name", logger=LOGGER):
            if await self._load(command.location_id, command.auth_user) is None:
                return None
            location = await self._repository.update_name(
                command.location_id, command.location_name, command.auth_user.user_id
            )
            return await self._after_update(command.location_id, location)

    async def update(self, command: LocationUpdateCommand) -> LocationResponse | None:
        with service_errors(ENTITY, "update", logger=LOGGER):
            if await self._load(command.location_id, command.auth_user) is None:
                return None
            location = await self._repository.update(
                command.location_id,
                address=command.location_address,
                city=command.location_city,
                region=command.location_region,
                postal_code=command.location_postal_code,
                country_code=command.location_country_code,
                meta_user=command.auth_user.user_id,
            )
            return await self._after_update(command.location_id, location)

    async def update_lat_long(
        self, command: LocationUpdateLatLongCommand
    ) -> LocationResponse | None:
        with service_errors(ENTITY, "update lat long", logger=LOGGER):
            if await self._load(command.location_id, command.auth_user) is None:
                return None
            location = await self._repository.update_lat_long(
                command.location_id,
                command.location_latitude,
                command.location_longitude,
                command.auth_user.user_id,
            )
            return await self._after_update(command.location_id, location)

    async def update_archived(self, command: LocationArchivedCommand) -> LocationResponse | None:
        with service_errors(ENTITY, "update archived", logger=LOGGER):
            if await self._load(command.location_id, command.auth_user) is None:
                return None
            location = await self._repository.update_archived(
                command.location_id, command.location_archived, command.auth_user.user_id
            )
            return await self._after_update(command.location_id, location)

    async def delete(self, command: LocationDeleteCommand) -> bool:
        with service_errors(ENTITY, "delete", logger=LOGGER):
            location = await self._load(command.location_id, command.auth_user)
            if location is None:
                return False
            await self._repository.delete(command.location_id, command.auth_user.user_id)
            await self._cache.invalidate(
                keys.location_key(command.location_id),
                keys.locations_by_owner_key(location.user_id),
            )
        return True

    async def list(self, command: LocationListCommand) -> list[LocationResponse]:
        ensure_admin(command.auth_user)
        pagination = command.pagination or PaginationRequest()
        if pagination.query:
            return await self.search(command)
        limit, offset = pagination.limit_offset()
        with service_errors(ENTITY, "list", logger=LOGGER):
            locations = await self._repository.list(limit, offset, command.auth_user.user_id)
        return [LocationResponse.from_entity(location) for location in locations]

    async def search(self, command: LocationListCommand) -> list[LocationResponse]:
        ensure_admin(command.auth_user)
        pagination = command.pagination or PaginationRequest()
        limit, offset = pagination.limit_offset()
        with service_errors(ENTITY, "search", logger=LOGGER):
            locations = await self._repository.search(
                pagination.query or "", limit, offset, command.auth_user.user_id
            )
        return [LocationResponse.from_entity(location) for location in locations]

    async def list_by_owner(self, command: LocationListByUserCommand) -> list[LocationResponse]:
        ensure_self_or_admin(command.auth_user, command.user_id)
        meta_user = command.auth_user.user_id
        query = (command.search or "").strip()
        if query:
            with service_errors(ENTITY, "search", logger=LOGGER):
                locations = await self._repository.search_by_owner(
                    command.user_id, query, meta_user
                )
            return [LocationResponse.from_entity(location) for location in locations]

        async def load() -> list[LocationResponse]:
            locations = await self._repository.list_by_owner(command.user_id, meta_user)
            return [LocationResponse.from_entity(location) for location in locations]

        with service_errors(ENTITY, "list by owner", logger=LOGGER):
            result = await self._cache.get_or_load(
                keys.locations_by_owner_key(command.user_id), _LOCATIONS, load
            )
        return result or []


__all__ = ["LocationService"]

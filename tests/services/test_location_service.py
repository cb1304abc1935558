from decimal import Decimal
from unittest.mock import create_autospec
from uuid import uuid4

import pytest

from pocketbook.cache import keys
from pocketbook.commands.locations import (
    LocationCreateCommand,
    LocationDeleteCommand,
    LocationGetCommand,
    LocationListByUserCommand,
    LocationListCommand,
    LocationUpdateLatLongCommand,
    LocationUpdateNameCommand,
)
from pocketbook.core.errors import AuthorizationError, MappingError, ServiceError
from pocketbook.repositories import LocationRepository
from pocketbook.services import LocationService


@pytest.fixture()
def repository() -> LocationRepository:
    return create_autospec(LocationRepository, instance=True)


@pytest.mark.asyncio
async def test_create_then_get_hits_cache(repository, cache, owner, make_location) -> None:
    location = make_location(owner.user_id)
    repository.create.return_value = location
    service = LocationService(repository, cache)

    await service.create(
        LocationCreateCommand(
            user_id=owner.user_id,
            location_name="Home",
            location_address="1 Main Street",
            location_city="Lyon",
            location_region=None,
            location_postal_code="69001",
            location_country_code="FR",
            location_latitude=Decimal("45.764043"),
            location_longitude=Decimal("4.835659"),
            auth_user=owner,
        )
    )
    fetched = await service.get(LocationGetCommand(location_id=location.id, auth_user=owner))

    assert fetched.location_latitude == Decimal("45.764043")
    assert fetched.location_city == "Lyon"
    repository.get.assert_not_awaited()


@pytest.mark.asyncio
async def test_coordinates_are_cached_as_strings(repository, cache, redis, owner, make_location) -> None:
    location = make_location(owner.user_id)
    repository.get.return_value = location
    service = LocationService(repository, cache)

    await service.get(LocationGetCommand(location_id=location.id, auth_user=owner))

    assert '"location_latitude":"45.764043"' in redis.data[keys.location_key(location.id)]


@pytest.mark.asyncio
async def test_update_lat_long_invalidates(repository, cache, redis, owner, make_location) -> None:
    location = make_location(owner.user_id)
    moved = make_location(
        owner.user_id, id=location.id, latitude=Decimal("48.8566"), longitude=Decimal("2.3522")
    )
    repository.get.return_value = location
    repository.update_lat_long.return_value = moved
    service = LocationService(repository, cache)

    result = await service.update_lat_long(
        LocationUpdateLatLongCommand(
            location_id=location.id,
            location_latitude=Decimal("48.8566"),
            location_longitude=Decimal("2.3522"),
            auth_user=owner,
        )
    )

    assert result.location_latitude == Decimal("48.8566")
    assert keys.location_key(location.id) not in redis.data
    repository.update_lat_long.assert_awaited_once_with(
        location.id, Decimal("48.8566"), Decimal("2.3522"), owner.user_id
    )


@pytest.mark.asyncio
async def test_rename_of_foreign_location_returns_none(repository, cache, owner, stranger, make_location) -> None:
    location = make_location(owner.user_id)
    repository.get.return_value = location
    service = LocationService(repository, cache)

    result = await service.update_name(
        LocationUpdateNameCommand(location_id=location.id, location_name="Mine now", auth_user=stranger)
    )

    assert result is None
    repository.update_name.assert_not_awaited()


@pytest.mark.asyncio
async def test_delete_of_missing_location_returns_false(repository, owner) -> None:
    repository.get.return_value = None
    service = LocationService(repository)

    assert await service.delete(LocationDeleteCommand(location_id=uuid4(), auth_user=owner)) is False
    repository.delete.assert_not_awaited()


@pytest.mark.asyncio
async def test_owner_listing_is_cached(repository, cache, owner, make_location) -> None:
    repository.list_by_owner.return_value = [make_location(owner.user_id), make_location(owner.user_id)]
    service = LocationService(repository, cache)
    command = LocationListByUserCommand(user_id=owner.user_id, auth_user=owner)

    first = await service.list_by_owner(command)
    second = await service.list_by_owner(command)

    assert len(first) == 2
    assert first == second
    repository.list_by_owner.assert_awaited_once_with(owner.user_id, owner.user_id)


@pytest.mark.asyncio
async def test_empty_owner_listing(repository, cache, owner) -> None:
    repository.list_by_owner.return_value = []
    service = LocationService(repository, cache)

    assert await service.list_by_owner(LocationListByUserCommand(user_id=owner.user_id, auth_user=owner)) == []


@pytest.mark.asyncio
async def test_unscoped_listing_requires_admin(repository, owner) -> None:
    service = LocationService(repository)

    with pytest.raises(AuthorizationError):
        await service.list(LocationListCommand(pagination=None, auth_user=owner))


@pytest.mark.asyncio
async def test_mapping_failure_becomes_service_error(repository, owner) -> None:
    repository.get.side_effect = MappingError("latitude", "decimal", "got bytes")
    service = LocationService(repository)

    with pytest.raises(ServiceError) as excinfo:
        await service.get(LocationGetCommand(location_id=uuid4(), auth_user=owner))

    assert str(excinfo.value) == "error during get location"

"""Location routes; every call is scoped to the bearer's identity."""
from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

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
from pocketbook.core.security import AuthUser, get_auth_user
from pocketbook.dependencies import get_location_service
from pocketbook.schemas.locations import (
    LocationCreateRequest,
    LocationResponse,
    LocationUpdateArchivedRequest,
    LocationUpdateLatLongRequest,
    LocationUpdateNameRequest,
    LocationUpdateRequest,
)
from pocketbook.schemas.pagination import PaginationRequest
from pocketbook.services import LocationService

from .common import found, not_found, pagination_params

router = APIRouter(prefix="/locations", tags=["locations"])


@router.get("", response_model=list[LocationResponse])
async def list_locations(
    pagination: PaginationRequest = Depends(pagination_params),
    auth_user: AuthUser = Depends(get_auth_user),
    service: LocationService = Depends(get_location_service),
) -> list[LocationResponse]:
    return await service.list(LocationListCommand(pagination=pagination, auth_user=auth_user))


@router.get("/me", response_model=list[LocationResponse])
async def list_my_locations(
    search: str | None = None,
    auth_user: AuthUser = Depends(get_auth_user),
    service: LocationService = Depends(get_location_service),
) -> list[LocationResponse]:
    command = LocationListByUserCommand(
        user_id=auth_user.user_id, auth_user=auth_user, search=search
    )
    return await service.list_by_owner(command)


@router.get("/users/{user_id}", response_model=list[LocationResponse])
async def list_locations_by_user(
    user_id: UUID,
    search: str | None = None,
    auth_user: AuthUser = Depends(get_auth_user),
    service: LocationService = Depends(get_location_service),
) -> list[LocationResponse]:
    command = LocationListByUserCommand(user_id=user_id, auth_user=auth_user, search=search)
    return await service.list_by_owner(command)


@router.post("", response_model=LocationResponse, status_code=status.HTTP_201_CREATED)
async def create_location(
    request: LocationCreateRequest,
    auth_user: AuthUser = Depends(get_auth_user),
    service: LocationService = Depends(get_location_service),
) -> LocationResponse:
    return await service.create(LocationCreateCommand.from_request(request, auth_user))


@router.get("/{location_id}", response_model=LocationResponse)
async def get_location(
    location_id: UUID,
    auth_user: AuthUser = Depends(get_auth_user),
    service: LocationService = Depends(get_location_service),
) -> LocationResponse:
    command = LocationGetCommand(location_id=location_id, auth_user=auth_user)
    return found(await service.get(command), "Location")


@router.put("/{location_id}", response_model=LocationResponse)
async def update_location(
    location_id: UUID,
    request: LocationUpdateRequest,
    auth_user: AuthUser = Depends(get_auth_user),
    service: LocationService = Depends(get_location_service),
) -> LocationResponse:
    command = LocationUpdateCommand.from_request(location_id, request, auth_user)
    return found(await service.update(command), "Location")


@router.put("/{location_id}/name", response_model=LocationResponse)
async def update_location_name(
    location_id: UUID,
    request: LocationUpdateNameRequest,
    auth_user: AuthUser = Depends(get_auth_user),
    service: LocationService = Depends(get_location_service),
) -> LocationResponse:
    command = LocationUpdateNameCommand.from_request(location_id, request, auth_user)
    return found(await service.update_name(command), "Location")


@router.put("/{location_id}/lat-long", response_model=LocationResponse)
async def update_location_lat_long(
    location_id: UUID,
    request: LocationUpdateLatLongRequest,
    auth_user: AuthUser = Depends(get_auth_user),
    service: LocationService = Depends(get_location_service),
) -> LocationResponse:
    command = LocationUpdateLatLongCommand.from_request(location_id, request, auth_user)
    return found(await service.update_lat_long(command), "Location")


@router.put("/{location_id}/archived", response_model=LocationResponse)
async def update_location_archived(
    location_id: UUID,
    request: LocationUpdateArchivedRequest,
    auth_user: AuthUser = Depends(get_auth_user),
    service: LocationService = Depends(get_location_service),
) -> LocationResponse:
    command = LocationArchivedCommand.from_request(location_id, request, auth_user)
    return found(await service.update_archived(command), "Location")


@router.delete("/{location_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_location(
    location_id: UUID,
    auth_user: AuthUser = Depends(get_auth_user),
    service: LocationService = Depends(get_location_service),
) -> Response:
    command = LocationDeleteCommand(location_id=location_id, auth_user=auth_user)
    if not await service.delete(command):
        raise not_found("Location")
    return Response(status_code=status.HTTP_204_NO_CONTENT)

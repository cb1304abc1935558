"""Contact routes; every call is scoped to the bearer's identity."""
from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from pocketbook.commands.people import (
    PeopleArchivedCommand,
    PeopleCreateCommand,
    PeopleDeleteCommand,
    PeopleGetCommand,
    PeopleListByUserCommand,
    PeopleListCommand,
    PeopleUpdateCommand,
    PeopleUpdateImageCommand,
)
from pocketbook.core.security import AuthUser, get_auth_user
from pocketbook.dependencies import get_people_service
from pocketbook.schemas.pagination import PaginationRequest
from pocketbook.schemas.people import (
    PeopleCreateRequest,
    PeopleResponse,
    PeopleUpdateArchivedRequest,
    PeopleUpdateImageRequest,
    PeopleUpdateRequest,
)
from pocketbook.services import PeopleService

from .common import found, not_found, pagination_params

router = APIRouter(prefix="/people", tags=["people"])


@router.get("", response_model=list[PeopleResponse])
async def list_people(
    pagination: PaginationRequest = Depends(pagination_params),
    auth_user: AuthUser = Depends(get_auth_user),
    service: PeopleService = Depends(get_people_service),
) -> list[PeopleResponse]:
    return await service.list(PeopleListCommand(pagination=pagination, auth_user=auth_user))


@router.get("/me", response_model=list[PeopleResponse])
async def list_my_people(
    search: str | None = None,
    auth_user: AuthUser = Depends(get_auth_user),
    service: PeopleService = Depends(get_people_service),
) -> list[PeopleResponse]:
    command = PeopleListByUserCommand(user_id=auth_user.user_id, auth_user=auth_user, search=search)
    return await service.list_by_owner(command)


@router.get("/users/{user_id}", response_model=list[PeopleResponse])
async def list_people_by_user(
    user_id: UUID,
    search: str | None = None,
    auth_user: AuthUser = Depends(get_auth_user),
    service: PeopleService = Depends(get_people_service),
) -> list[PeopleResponse]:
    command = PeopleListByUserCommand(user_id=user_id, auth_user=auth_user, search=search)
    return await service.list_by_owner(command)


@router.post("", response_model=PeopleResponse, status_code=status.HTTP_201_CREATED)
async def create_person(
    request: PeopleCreateRequest,
    auth_user: AuthUser = Depends(get_auth_user),
    service: PeopleService = Depends(get_people_service),
) -> PeopleResponse:
    return await service.create(PeopleCreateCommand.from_request(request, auth_user))


@router.get("/{people_id}", response_model=PeopleResponse)
async def get_person(
    people_id: UUID,
    auth_user: AuthUser = Depends(get_auth_user),
    service: PeopleService = Depends(get_people_service),
) -> PeopleResponse:
    person = await service.get(PeopleGetCommand(people_id=people_id, auth_user=auth_user))
    return found(person, "Person")


@router.put("/{people_id}", response_model=PeopleResponse)
async def update_person(
    people_id: UUID,
    request: PeopleUpdateRequest,
    auth_user: AuthUser = Depends(get_auth_user),
    service: PeopleService = Depends(get_people_service),
) -> PeopleResponse:
    command = PeopleUpdateCommand.from_request(people_id, request, auth_user)
    return found(await service.update(command), "Person")


@router.put("/{people_id}/image", response_model=PeopleResponse)
async def update_person_image(
    people_id: UUID,
    request: PeopleUpdateImageRequest,
    auth_user: AuthUser = Depends(get_auth_user),
    service: PeopleService = Depends(get_people_service),
) -> PeopleResponse:
    command = PeopleUpdateImageCommand.from_request(people_id, request, auth_user)
    return found(await service.update_image(command), "Person")


@router.put("/{people_id}/archived", response_model=PeopleResponse)
async def update_person_archived(
    people_id: UUID,
    request: PeopleUpdateArchivedRequest,
    auth_user: AuthUser = Depends(get_auth_user),
    service: PeopleService = Depends(get_people_service),
) -> PeopleResponse:
    command = PeopleArchivedCommand.from_request(people_id, request, auth_user)
    return found(await service.update_archived(command), "Person")


@router.delete("/{people_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_person(
    people_id: UUID,
    auth_user: AuthUser = Depends(get_auth_user),
    service: PeopleService = Depends(get_people_service),
) -> Response:
    command = PeopleDeleteCommand(people_id=people_id, auth_user=auth_user)
    if not await service.delete(command):
        raise not_found("Person")
    return Response(status_code=status.HTTP_204_NO_CONTENT)

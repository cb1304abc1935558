"""User account routes."""
from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from pocketbook.commands.users import (
    UserCreateCommand,
    UserDeleteCommand,
    UserGetCommand,
    UserListCommand,
    UserUpdateBaseCurrencyCommand,
    UserUpdateNameCommand,
    UserUpdatePasswordCommand,
)
from pocketbook.core.security import AuthUser, get_auth_user
from pocketbook.dependencies import get_user_service
from pocketbook.schemas.pagination import PaginationRequest
from pocketbook.schemas.users import (
    UserCreateRequest,
    UserResponse,
    UserUpdateBaseCurrencyRequest,
    UserUpdateNameRequest,
    UserUpdatePasswordRequest,
)
from pocketbook.services import UserService

from .common import found, pagination_params

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[UserResponse])
async def list_users(
    pagination: PaginationRequest = Depends(pagination_params),
    auth_user: AuthUser = Depends(get_auth_user),
    service: UserService = Depends(get_user_service),
) -> list[UserResponse]:
    return await service.list(UserListCommand(pagination=pagination, auth_user=auth_user))


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    request: UserCreateRequest,
    auth_user: AuthUser = Depends(get_auth_user),
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    return await service.create(UserCreateCommand.from_request(request, auth_user))


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: UUID,
    auth_user: AuthUser = Depends(get_auth_user),
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    user = await service.get(UserGetCommand(user_id=user_id, auth_user=auth_user))
    return found(user, "User")


@router.put("/{user_id}/password", response_model=UserResponse)
async def update_password(
    user_id: UUID,
    request: UserUpdatePasswordRequest,
    auth_user: AuthUser = Depends(get_auth_user),
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    command = UserUpdatePasswordCommand.from_request(user_id, request, auth_user)
    return found(await service.update_password(command), "User")


@router.put("/{user_id}/name", response_model=UserResponse)
async def update_name(
    user_id: UUID,
    request: UserUpdateNameRequest,
    auth_user: AuthUser = Depends(get_auth_user),
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    command = UserUpdateNameCommand.from_request(user_id, request, auth_user)
    return found(await service.update_name(command), "User")


@router.put("/{user_id}/base-currency", response_model=UserResponse)
async def update_base_currency(
    user_id: UUID,
    request: UserUpdateBaseCurrencyRequest,
    auth_user: AuthUser = Depends(get_auth_user),
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    command = UserUpdateBaseCurrencyCommand.from_request(user_id, request, auth_user)
    return found(await service.update_base_currency(command), "User")


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: UUID,
    auth_user: AuthUser = Depends(get_auth_user),
    service: UserService = Depends(get_user_service),
) -> Response:
    await service.delete(UserDeleteCommand(user_id=user_id, auth_user=auth_user))
    return Response(status_code=status.HTTP_204_NO_CONTENT)

"""Authentication routes: login and the current identity."""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from pocketbook.commands.auth import LoginCommand
from pocketbook.commands.users import UserGetCommand
from pocketbook.core.log import get_logger
from pocketbook.core.security import AuthUser, get_auth_user
from pocketbook.dependencies import get_auth_service, get_user_service
from pocketbook.schemas.auth import LoginRequest, LoginResponse
from pocketbook.schemas.users import UserResponse
from pocketbook.services import AuthService, UserService

from .common import found

LOGGER = get_logger(__name__)
router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    service: AuthService = Depends(get_auth_service),
) -> LoginResponse:
    result = await service.login(LoginCommand.from_request(request))
    if result is None:
        # Unknown email is reported like a bad password
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return result


@router.get("/me", response_model=UserResponse)
async def me(
    auth_user: AuthUser = Depends(get_auth_user),
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    user = await service.get(UserGetCommand(user_id=auth_user.user_id, auth_user=auth_user))
    return found(user, "User")

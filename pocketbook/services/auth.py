"""Login: exchange credentials for a signed bearer token."""
from __future__ import annotations

from starlette.concurrency import run_in_threadpool

from pocketbook.commands.auth import LoginCommand
from pocketbook.core.errors import AuthenticationError
from pocketbook.core.log import get_logger
from pocketbook.core.security import AuthUser, JwtManager, verify_password
from pocketbook.repositories import UserRepository
from pocketbook.schemas.auth import LoginResponse

from .base import service_errors

LOGGER = get_logger(__name__)


class AuthService:
    """Registration and password reset are not offered yet."""

    def __init__(self, repository: UserRepository, jwt_manager: JwtManager) -> None:
        self._repository = repository
        self._jwt = jwt_manager

    async def login(self, command: LoginCommand) -> LoginResponse | None:
        """Return a token, ``None`` for an unknown email.

        Raises:
            AuthenticationError: The password does not match.
        """

        with service_errors("user", "login", logger=LOGGER):
            user = await self._repository.get_by_email(command.email, None)
        if user is None:
            return None
        if not await run_in_threadpool(verify_password, command.password, user.password_hash):
            LOGGER.warning("Rejected login for user %s", user.id)
            raise AuthenticationError("Invalid credentials")
        token = self._jwt.create_access_token(AuthUser(user_id=user.id, role=user.role))
        return LoginResponse(access_token=token, expires_in=self._jwt.token_ttl_seconds)


__all__ = ["AuthService"]

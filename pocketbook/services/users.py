"""Service orchestrating user accounts over the repository and cache."""
from __future__ import annotations

from pydantic import TypeAdapter
from starlette.concurrency import run_in_threadpool

from pocketbook.cache import CacheAside
from pocketbook.cache import keys
from pocketbook.commands.users import (
    UserCreateCommand,
    UserDeleteCommand,
    UserGetCommand,
    UserListCommand,
    UserUpdateBaseCurrencyCommand,
    UserUpdateNameCommand,
    UserUpdatePasswordCommand,
)
from pocketbook.core.errors import ValidationError
from pocketbook.core.log import get_logger
from pocketbook.core.security import generate_password, hash_password, verify_password
from pocketbook.models import User
from pocketbook.repositories import UserRepository
from pocketbook.schemas.users import UserResponse

from .base import ensure_admin, ensure_self_or_admin, service_errors

LOGGER = get_logger(__name__)

ENTITY = "user"
_USER = TypeAdapter(UserResponse)


class UserService:
    """Accounts: cached by id, never cached as pages."""

    def __init__(self, repository: UserRepository, cache: CacheAside | None = None) -> None:
        self._repository = repository
        self._cache = cache or CacheAside(None)

    async def _after_update(self, user: User | None) -> UserResponse | None:
        if user is None:
            return None
        await self._cache.invalidate(keys.user_key(user.id))
        return UserResponse.from_entity(user)

    async def get(self, command: UserGetCommand) -> UserResponse | None:
        ensure_self_or_admin(command.auth_user, command.user_id)

        async def load() -> UserResponse | None:
            user = await self._repository.get(command.user_id, command.auth_user.user_id)
            return None if user is None else UserResponse.from_entity(user)

        with service_errors(ENTITY, "get", logger=LOGGER):
            return await self._cache.get_or_load(keys.user_key(command.user_id), _USER, load)

    async def create(self, command: UserCreateCommand) -> UserResponse:
        """Create an account with role USER and a generated password."""

        ensure_admin(command.auth_user)
        password_hash = await run_in_threadpool(hash_password, generate_password())
        with service_errors(ENTITY, "create", logger=LOGGER):
            user = await self._repository.create(
                email=command.user_email,
                password_hash=password_hash,
                first_name=command.user_first_name,
                last_name=command.user_last_name,
                base_currency_code=command.user_base_currency_code,
                meta_user=command.auth_user.user_id,
            )
            response = UserResponse.from_entity(user)
            await self._cache.write(keys.user_key(user.id), response, _USER)
        LOGGER.info("Created user %s", user.id)
        return response

    async def update_password(self, command: UserUpdatePasswordCommand) -> UserResponse | None:
        ensure_self_or_admin(command.auth_user, command.user_id)
        meta_user = command.auth_user.user_id
        with service_errors(ENTITY, "update password", logger=LOGGER):
            current = await self._repository.get(command.user_id, meta_user)
        if current is None:
            return None
        if not await run_in_threadpool(
            verify_password, command.user_old_password, current.password_hash
        ):
            raise ValidationError("Invalid password")
        new_hash = await run_in_threadpool(hash_password, command.user_new_password)
        with service_errors(ENTITY, "update password", logger=LOGGER):
            user = await self._repository.update_password(command.user_id, new_hash, meta_user)
            return await self._after_update(user)

    async def update_name(self, command: UserUpdateNameCommand) -> UserResponse | None:
        ensure_self_or_admin(command.auth_user, command.user_id)
        with service_errors(ENTITY, "update name", logger=LOGGER):
            user = await self._repository.update_name(
                command.user_id,
                command.user_first_name,
                command.user_last_name,
                command.auth_user.user_id,
            )
            return await self._after_update(user)

    async def update_base_currency(
        self, command: UserUpdateBaseCurrencyCommand
    ) -> UserResponse | None:
        ensure_self_or_admin(command.auth_user, command.user_id)
        with service_errors(ENTITY, "update base currency", logger=LOGGER):
            user = await self._repository.update_base_currency(
                command.user_id, command.user_base_currency_code, command.auth_user.user_id
            )
            return await self._after_update(user)

    async def delete(self, command: UserDeleteCommand) -> None:
        """Hard delete; also drops the per-owner list views of that user."""

        ensure_admin(command.auth_user)
        with service_errors(ENTITY, "delete", logger=LOGGER):
            await self._repository.delete(command.user_id, command.auth_user.user_id)
            await self._cache.invalidate(
                keys.user_key(command.user_id),
                keys.people_by_owner_key(command.user_id),
                keys.locations_by_owner_key(command.user_id),
            )

    async def list(self, command: UserListCommand) -> list[UserResponse]:
        ensure_admin(command.auth_user)
        limit, offset = command.pagination.limit_offset() if command.pagination else (None, None)
        with service_errors(ENTITY, "list", logger=LOGGER):
            users = await self._repository.list(limit, offset, command.auth_user.user_id)
        return [UserResponse.from_entity(user) for user in users]


__all__ = ["UserService"]

from unittest.mock import create_autospec
from uuid import uuid4

import pytest

from pocketbook.cache import keys
from pocketbook.commands.users import (
    UserCreateCommand,
    UserDeleteCommand,
    UserGetCommand,
    UserListCommand,
    UserUpdateNameCommand,
    UserUpdatePasswordCommand,
)
from pocketbook.core.errors import AuthorizationError, ValidationError
from pocketbook.core.security import hash_password, verify_password
from pocketbook.repositories import UserRepository
from pocketbook.schemas.pagination import PaginationRequest
from pocketbook.services import UserService


@pytest.fixture()
def repository() -> UserRepository:
    return create_autospec(UserRepository, instance=True)


@pytest.mark.asyncio
async def test_user_reads_own_account_from_cache(repository, cache, make_user, owner) -> None:
    user = make_user(id=owner.user_id)
    repository.get.return_value = user
    service = UserService(repository, cache)

    first = await service.get(UserGetCommand(user_id=owner.user_id, auth_user=owner))
    second = await service.get(UserGetCommand(user_id=owner.user_id, auth_user=owner))

    assert first.user_email == "dana@example.com"
    assert first == second
    repository.get.assert_awaited_once()


@pytest.mark.asyncio
async def test_response_never_exposes_password_hash(repository, make_user, owner) -> None:
    repository.get.return_value = make_user(id=owner.user_id)
    service = UserService(repository)

    result = await service.get(UserGetCommand(user_id=owner.user_id, auth_user=owner))

    assert "password" not in result.model_dump_json()


@pytest.mark.asyncio
async def test_reading_another_account_is_forbidden(repository, owner, stranger) -> None:
    service = UserService(repository)

    with pytest.raises(AuthorizationError):
        await service.get(UserGetCommand(user_id=owner.user_id, auth_user=stranger))
    repository.get.assert_not_awaited()


@pytest.mark.asyncio
async def test_create_stores_a_bcrypt_hash(repository, cache, redis, make_user, admin) -> None:
    user = make_user(email="new@example.com")
    repository.create.return_value = user
    service = UserService(repository, cache)

    created = await service.create(
        UserCreateCommand(
            user_email="new@example.com",
            user_first_name="New",
            user_last_name="Person",
            user_base_currency_code="EUR",
            auth_user=admin,
        )
    )

    kwargs = repository.create.await_args.kwargs
    assert kwargs["password_hash"].startswith("$2")
    assert kwargs["meta_user"] == admin.user_id
    assert created.user_id == user.id
    assert keys.user_key(user.id) in redis.data


@pytest.mark.asyncio
async def test_create_requires_admin(repository, owner) -> None:
    service = UserService(repository)

    with pytest.raises(AuthorizationError):
        await service.create(
            UserCreateCommand(
                user_email="new@example.com",
                user_first_name="New",
                user_last_name="Person",
                user_base_currency_code="EUR",
                auth_user=owner,
            )
        )


@pytest.mark.asyncio
async def test_password_change_with_wrong_old_password(repository, make_user, owner) -> None:
    repository.get.return_value = make_user(id=owner.user_id, password_hash=hash_password("correct-horse"))
    service = UserService(repository)

    with pytest.raises(ValidationError, match="Invalid password"):
        await service.update_password(
            UserUpdatePasswordCommand(
                user_id=owner.user_id,
                user_old_password="wrong",
                user_new_password="battery-staple",
                auth_user=owner,
            )
        )
    repository.update_password.assert_not_awaited()


@pytest.mark.asyncio
async def test_password_change_stores_new_hash(repository, cache, redis, make_user, owner) -> None:
    user = make_user(id=owner.user_id, password_hash=hash_password("correct-horse"))
    repository.get.return_value = user
    repository.update_password.return_value = user
    redis.data[keys.user_key(owner.user_id)] = "{}"
    service = UserService(repository, cache)

    result = await service.update_password(
        UserUpdatePasswordCommand(
            user_id=owner.user_id,
            user_old_password="correct-horse",
            user_new_password="battery-staple",
            auth_user=owner,
        )
    )

    assert result is not None
    user_id, new_hash, meta_user = repository.update_password.await_args.args
    assert user_id == owner.user_id
    assert verify_password("battery-staple", new_hash)
    assert keys.user_key(owner.user_id) not in redis.data


@pytest.mark.asyncio
async def test_password_change_for_unknown_user(repository, admin) -> None:
    repository.get.return_value = None
    service = UserService(repository)

    result = await service.update_password(
        UserUpdatePasswordCommand(
            user_id=uuid4(), user_old_password="a", user_new_password="b", auth_user=admin
        )
    )

    assert result is None


@pytest.mark.asyncio
async def test_rename_invalidates_cached_account(repository, cache, redis, make_user, owner) -> None:
    renamed = make_user(id=owner.user_id, first_name="Dana", last_name="Scully")
    repository.update_name.return_value = renamed
    redis.data[keys.user_key(owner.user_id)] = "{}"
    service = UserService(repository, cache)

    result = await service.update_name(
        UserUpdateNameCommand(
            user_id=owner.user_id, user_first_name="Dana", user_last_name="Scully", auth_user=owner
        )
    )

    assert result.user_last_name == "Scully"
    assert keys.user_key(owner.user_id) not in redis.data


@pytest.mark.asyncio
async def test_delete_drops_owner_views(repository, cache, redis, admin) -> None:
    user_id = uuid4()
    for key in (
        keys.user_key(user_id),
        keys.people_by_owner_key(user_id),
        keys.locations_by_owner_key(user_id),
    ):
        redis.data[key] = "[]"
    service = UserService(repository, cache)

    await service.delete(UserDeleteCommand(user_id=user_id, auth_user=admin))

    repository.delete.assert_awaited_once_with(user_id, admin.user_id)
    assert redis.data == {}


@pytest.mark.asyncio
async def test_list_is_paged_and_admin_only(repository, admin, owner, make_user) -> None:
    repository.list.return_value = [make_user(), make_user(email="other@example.com")]
    service = UserService(repository)

    with pytest.raises(AuthorizationError):
        await service.list(UserListCommand(pagination=None, auth_user=owner))

    users = await service.list(
        UserListCommand(pagination=PaginationRequest(page=2, page_size=2), auth_user=admin)
    )

    assert len(users) == 2
    repository.list.assert_awaited_once_with(2, 2, admin.user_id)

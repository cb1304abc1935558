"""Service for contacts, scoped to the owning user."""
from __future__ import annotations

from uuid import UUID

from pydantic import TypeAdapter

from pocketbook.cache import CacheAside
from pocketbook.cache import keys
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
from pocketbook.core.log import get_logger
from pocketbook.core.security import AuthUser
from pocketbook.models import Person
from pocketbook.repositories import PeopleRepository
from pocketbook.schemas.pagination import PaginationRequest
from pocketbook.schemas.people import PeopleResponse

from .base import ensure_admin, ensure_self_or_admin, owns, service_errors

LOGGER = get_logger(__name__)

ENTITY = "person"
_PERSON = TypeAdapter(PeopleResponse)
_PEOPLE = TypeAdapter(list[PeopleResponse])


class PeopleService:
    """Contacts are only visible to their owner (and administrators).

    A contact owned by someone else is reported exactly like a missing one.
    """

    def __init__(self, repository: PeopleRepository, cache: CacheAside | None = None) -> None:
        self._repository = repository
        self._cache = cache or CacheAside(None)

    async def _load(self, people_id: UUID, auth_user: AuthUser) -> PeopleResponse | None:
        async def load() -> PeopleResponse | None:
            person = await self._repository.get(people_id, auth_user.user_id)
            return None if person is None else PeopleResponse.from_entity(person)

        person = await self._cache.get_or_load(keys.person_key(people_id), _PERSON, load)
        if person is None or not owns(auth_user, person.user_id):
            return None
        return person

    async def _after_update(self, people_id: UUID, person: Person | None) -> PeopleResponse | None:
        if person is None:
            await self._cache.invalidate(keys.person_key(people_id))
            return None
        await self._cache.invalidate(
            keys.person_key(person.id), keys.people_by_owner_key(person.user_id)
        )
        return PeopleResponse.from_entity(person)

    async def get(self, command: PeopleGetCommand) -> PeopleResponse | None:
        with service_errors(ENTITY, "get", logger=LOGGER):
            return await self._load(command.people_id, command.auth_user)

    async def create(self, command: PeopleCreateCommand) -> PeopleResponse:
        with service_errors(ENTITY, "create", logger=LOGGER):
            person = await self._repository.create(
                user_id=command.user_id,
                name=command.people_name,
                email=command.people_email,
                phone=command.people_phone,
                image_url=command.people_image_url,
                note=command.people_note,
                meta_user=command.auth_user.user_id,
            )
            response = PeopleResponse.from_entity(person)
            await self._cache.write(keys.person_key(person.id), response, _PERSON)
            await self._cache.invalidate(keys.people_by_owner_key(person.user_id))
        return response

    async def update_image(self, command: PeopleUpdateImageCommand) -> PeopleResponse | None:
        with service_errors(ENTITY, "update image", logger=LOGGER):
            if await self._load(command.people_id, command.auth_user) is None:
                return None
            person = await self._repository.update_image(
                command.people_id, command.people_image_url, command.auth_user.user_id
            )
            return await self._after_update(command.people_id, person)

    async def update(self, command: PeopleUpdateCommand) -> PeopleResponse | None:
        with service_errors(ENTITY, "update", logger=LOGGER):
            if await self._load(command.people_id, command.auth_user) is None:
                return None
            person = await self._repository.update(
                command.people_id,
                name=command.people_name,
                email=command.people_email,
                phone=command.people_phone,
                note=command.people_note,
                meta_user=command.auth_user.user_id,
            )
            return await self._after_update(command.people_id, person)

    async def update_archived(self, command: PeopleArchivedCommand) -> PeopleResponse | None:
        """Flip the soft-delete flag; the contact stays readable either way."""

        with service_errors(ENTITY, "update archived", logger=LOGGER):
            if await self._load(command.people_id, command.auth_user) is None:
                return None
            person = await self._repository.update_archived(
                command.people_id, command.people_archived, command.auth_user.user_id
            )
            return await self._after_update(command.people_id, person)

    async def delete(self, command: PeopleDeleteCommand) -> bool:
        """Hard delete. Returns ``False`` when there was nothing to delete."""

        with service_errors(ENTITY, "delete", logger=LOGGER):
            person = await self._load(command.people_id, command.auth_user)
            if person is None:
                return False
            await self._repository.delete(command.people_id, command.auth_user.user_id)
            await self._cache.invalidate(
                keys.person_key(command.people_id), keys.people_by_owner_key(person.user_id)
            )
        return True

    async def list(self, command: PeopleListCommand) -> list[PeopleResponse]:
        """Page through every contact; administrators only."""

        ensure_admin(command.auth_user)
        pagination = command.pagination or PaginationRequest()
        if pagination.query:
            return await self.search(command)
        limit, offset = pagination.limit_offset()
        with service_errors(ENTITY, "list", logger=LOGGER):
            people = await self._repository.list(limit, offset, command.auth_user.user_id)
        return [PeopleResponse.from_entity(person) for person in people]

    async def search(self, command: PeopleListCommand) -> list[PeopleResponse]:
        """Free-text search; results are never cached."""

        ensure_admin(command.auth_user)
        pagination = command.pagination or PaginationRequest()
        query = pagination.query or ""
        limit, offset = pagination.limit_offset()
        with service_errors(ENTITY, "search", logger=LOGGER):
            people = await self._repository.search(query, limit, offset, command.auth_user.user_id)
        return [PeopleResponse.from_entity(person) for person in people]

    async def list_by_owner(self, command: PeopleListByUserCommand) -> list[PeopleResponse]:
        ensure_self_or_admin(command.auth_user, command.user_id)
        meta_user = command.auth_user.user_id
        query = (command.search or "").strip()
        if query:
            with service_errors(ENTITY, "search", logger=LOGGER):
                people = await self._repository.search_by_owner(command.user_id, query, meta_user)
            return [PeopleResponse.from_entity(person) for person in people]

        async def load() -> list[PeopleResponse]:
            people = await self._repository.list_by_owner(command.user_id, meta_user)
            return [PeopleResponse.from_entity(person) for person in people]

        with service_errors(ENTITY, "list by owner", logger=LOGGER):
            result = await self._cache.get_or_load(
                keys.people_by_owner_key(command.user_id), _PEOPLE, load
            )
        return result or []


__all__ = ["PeopleService"]

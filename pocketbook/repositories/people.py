"""Procedure bindings for contacts."""
from __future__ import annotations

from uuid import UUID

from pocketbook.db import params
from pocketbook.models import Person

from .base import ProcedureRepository


class PeopleRepository(ProcedureRepository):
    async def get(self, people_id: UUID, meta_user: UUID | None) -> Person | None:
        return await self._optional(
            "proc_people_get_by_id", [params.uuid(people_id)], meta_user, Person.from_row
        )

    async def create(
        self,
        *,
        user_id: UUID,
        name: str,
        email: str | None,
        phone: str | None,
        image_url: str | None,
        note: str | None,
        archived: bool = False,
        meta_user: UUID | None,
    ) -> Person:
        args = [
            params.uuid(user_id),
            params.text(name),
            params.optional_text(email),
            params.optional_text(phone),
            params.optional_text(image_url),
            params.optional_text(note),
            params.boolean(archived),
        ]
        return await self._one("proc_people_create", args, meta_user, Person.from_row)

    async def update_image(
        self, people_id: UUID, image_url: str | None, meta_user: UUID | None
    ) -> Person | None:
        args = [params.uuid(people_id), params.optional_text(image_url)]
        return await self._optional("proc_people_update_image", args, meta_user, Person.from_row)

    async def update(
        self,
        people_id: UUID,
        *,
        name: str,
        email: str | None,
        phone: str | None,
        note: str | None,
        meta_user: UUID | None,
    ) -> Person | None:
        args = [
            params.uuid(people_id),
            params.text(name),
            params.optional_text(email),
            params.optional_text(phone),
            params.optional_text(note),
        ]
        return await self._optional("proc_people_update", args, meta_user, Person.from_row)

    async def update_archived(
        self, people_id: UUID, archived: bool, meta_user: UUID | None
    ) -> Person | None:
        args = [params.uuid(people_id), params.boolean(archived)]
        return await self._optional(
            "proc_people_update_archived", args, meta_user, Person.from_row
        )

    async def delete(self, people_id: UUID, meta_user: UUID | None) -> None:
        await self._execute("proc_people_delete", [params.uuid(people_id)], meta_user)

    async def list(
        self, limit: int | None, offset: int | None, meta_user: UUID | None
    ) -> list[Person]:
        args = [params.optional_u32(limit), params.optional_u32(offset)]
        return await self._list("proc_people_list", args, meta_user, Person.from_row)

    async def list_by_owner(self, user_id: UUID, meta_user: UUID | None) -> list[Person]:
        return await self._list(
            "proc_people_by_user", [params.uuid(user_id)], meta_user, Person.from_row
        )

    async def search(
        self, query: str, limit: int | None, offset: int | None, meta_user: UUID | None
    ) -> list[Person]:
        args = [params.text(query), params.optional_u32(limit), params.optional_u32(offset)]
        return await self._list("proc_people_search", args, meta_user, Person.from_row)

    async def search_by_owner(
        self, user_id: UUID, query: str, meta_user: UUID | None
    ) -> list[Person]:
        args = [params.uuid(user_id), params.text(query)]
        return await self._list("proc_people_search_by_user", args, meta_user, Person.from_row)

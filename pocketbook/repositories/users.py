"""Procedure bindings for user accounts."""
from __future__ import annotations

from uuid import UUID

from pocketbook.db import params
from pocketbook.models import User

from .base import ProcedureRepository


class UserRepository(ProcedureRepository):
    async def get(self, user_id: UUID, meta_user: UUID | None) -> User | None:
        return await self._optional(
            "proc_user_get_by_id", [params.uuid(user_id)], meta_user, User.from_row
        )

    async def get_by_email(self, email: str, meta_user: UUID | None) -> User | None:
        return await self._optional(
            "proc_user_get_by_email", [params.text(email)], meta_user, User.from_row
        )

    async def create(
        self,
        *,
        email: str,
        password_hash: str,
        first_name: str,
        last_name: str,
        base_currency_code: str,
        meta_user: UUID | None,
    ) -> User:
        args = [
            params.text(email),
            params.text(password_hash),
            params.text(first_name),
            params.text(last_name),
            params.text(base_currency_code),
        ]
        return await self._one("proc_user_insert", args, meta_user, User.from_row)

    async def update_password(
        self, user_id: UUID, password_hash: str, meta_user: UUID | None
    ) -> User | None:
        args = [params.uuid(user_id), params.text(password_hash)]
        return await self._optional("proc_user_update_password", args, meta_user, User.from_row)

    async def update_name(
        self, user_id: UUID, first_name: str, last_name: str, meta_user: UUID | None
    ) -> User | None:
        args = [params.uuid(user_id), params.text(first_name), params.text(last_name)]
        return await self._optional("proc_user_update_name", args, meta_user, User.from_row)

    async def update_base_currency(
        self, user_id: UUID, base_currency_code: str, meta_user: UUID | None
    ) -> User | None:
        args = [params.uuid(user_id), params.text(base_currency_code)]
        return await self._optional(
            "proc_user_update_base_currency", args, meta_user, User.from_row
        )

    async def delete(self, user_id: UUID, meta_user: UUID | None) -> None:
        await self._execute("proc_user_delete", [params.uuid(user_id)], meta_user)

    async def list(
        self, limit: int | None, offset: int | None, meta_user: UUID | None
    ) -> list[User]:
        args = [params.optional_u32(limit), params.optional_u32(offset)]
        return await self._list("proc_user_list", args, meta_user, User.from_row)

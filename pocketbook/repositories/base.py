"""Shared plumbing for the procedure-backed repositories."""
from __future__ import annotations

from typing import Sequence, TypeVar
from uuid import UUID

from pocketbook.db import params
from pocketbook.db.params import ProcedureParam
from pocketbook.db.procedures import ProcedureInvoker
from pocketbook.db.rows import RowMapper

T = TypeVar("T")


class ProcedureRepository:
    """Base repository binding procedure names to a :class:`ProcedureInvoker`.

    Every helper appends the acting identity as the trailing ``meta_user``
    audit parameter, so subclasses only list the procedure's own arguments.
    Persistence and mapping failures propagate unchanged.
    """

    def __init__(self, invoker: ProcedureInvoker) -> None:
        self._invoker = invoker

    @staticmethod
    def _with_meta(
        args: Sequence[ProcedureParam], meta_user: UUID | None
    ) -> list[ProcedureParam]:
        return [*args, params.meta_user(meta_user)]

    async def _execute(
        self, procedure: str, args: Sequence[ProcedureParam], meta_user: UUID | None
    ) -> None:
        await self._invoker.execute(procedure, self._with_meta(args, meta_user))

    async def _optional(
        self,
        procedure: str,
        args: Sequence[ProcedureParam],
        meta_user: UUID | None,
        mapper: RowMapper[T],
    ) -> T | None:
        return await self._invoker.fetch_optional(
            procedure, self._with_meta(args, meta_user), mapper
        )

    async def _one(
        self,
        procedure: str,
        args: Sequence[ProcedureParam],
        meta_user: UUID | None,
        mapper: RowMapper[T],
    ) -> T:
        return await self._invoker.fetch_one(procedure, self._with_meta(args, meta_user), mapper)

    async def _list(
        self,
        procedure: str,
        args: Sequence[ProcedureParam],
        meta_user: UUID | None,
        mapper: RowMapper[T],
    ) -> list[T]:
        return await self._invoker.fetch_list(procedure, self._with_meta(args, meta_user), mapper)


__all__ = ["ProcedureRepository"]

"""Stored procedure invocation over the shared async engine.

Procedures used by the service never return a rowset and a status together, so
callers choose the call shape that matches the procedure contract:

``execute``         side effect only, no rows expected
``fetch_optional``  zero or one row, ``None`` when nothing came back
``fetch_one``       exactly one row, zero rows is a :class:`PersistenceError`
``fetch_list``      any number of rows, empty list when nothing came back
"""
from __future__ import annotations

import logging
import re
from typing import Any, Sequence, TypeVar

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.sql.elements import TextClause

from pocketbook.core.errors import PersistenceError
from pocketbook.core.log import get_logger, timeit

from .params import ProcedureParam
from .rows import RowMapper, RowReader, column_index_map

LOGGER = get_logger(__name__)

T = TypeVar("T")

_PROCEDURE_NAME = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def build_call(procedure: str, params: Sequence[ProcedureParam]) -> TextClause:
    """Build ``CALL procedure(:p0, :p1, ...)`` with typed bound values."""

    if not _PROCEDURE_NAME.match(procedure):
        raise ValueError(f"invalid procedure name: {procedure!r}")
    names = [f"p{index}" for index in range(len(params))]
    placeholders = ", ".join(f":{name}" for name in names)
    statement = text(f"CALL {procedure}({placeholders})")
    if params:
        statement = statement.bindparams(
            *(param.bind(name) for name, param in zip(names, params))
        )
    return statement


class ProcedureInvoker:
    """Run named stored procedures against a pooled :class:`AsyncEngine`."""

    def __init__(self, engine: AsyncEngine, *, logger: logging.Logger | None = None) -> None:
        self._engine = engine
        self._logger = logger or LOGGER

    async def _call(
        self,
        procedure: str,
        params: Sequence[ProcedureParam],
        *,
        shape: str,
        fetch: bool,
    ) -> tuple[list[str], list[Sequence[Any]]]:
        statement = build_call(procedure, params)
        label = f"[REPOSITORY] [CALL PROCEDURE] [{shape}] {procedure}"
        try:
            with timeit(label, logger=self._logger) as timer:
                async with self._engine.begin() as connection:
                    result = await connection.execute(statement)
                    if not fetch or not result.returns_rows:
                        timer.set_count(0)
                        return [], []
                    columns = list(result.keys())
                    rows = list(result.fetchall())
                timer.set_count(len(rows))
        except SQLAlchemyError as exc:
            raise PersistenceError(str(exc), procedure=procedure) from exc
        return columns, rows

    async def execute(self, procedure: str, params: Sequence[ProcedureParam]) -> None:
        """Run a procedure for its side effect."""

        await self._call(procedure, params, shape="EXECUTE", fetch=False)

    async def fetch_optional(
        self,
        procedure: str,
        params: Sequence[ProcedureParam],
        mapper: RowMapper[T],
    ) -> T | None:
        """Return the mapped first row, or ``None`` when no row was produced."""

        columns, rows = await self._call(procedure, params, shape="FOR OPTIONAL", fetch=True)
        if not rows:
            self._logger.warning("[REPOSITORY] [FOR OPTIONAL] %s returned no row", procedure)
            return None
        return mapper(RowReader(rows[0], column_index_map(columns)))

    async def fetch_one(
        self,
        procedure: str,
        params: Sequence[ProcedureParam],
        mapper: RowMapper[T],
    ) -> T:
        """Return the single mapped row the procedure is contracted to produce."""

        columns, rows = await self._call(procedure, params, shape="FOR ONE", fetch=True)
        if not rows:
            self._logger.error("[REPOSITORY] [FOR ONE] %s returned no row", procedure)
            raise PersistenceError("expected exactly one row, got none", procedure=procedure)
        return mapper(RowReader(rows[0], column_index_map(columns)))

    async def fetch_list(
        self,
        procedure: str,
        params: Sequence[ProcedureParam],
        mapper: RowMapper[T],
    ) -> list[T]:
        """Return every row mapped in order; rows share the first row's schema."""

        columns, rows = await self._call(procedure, params, shape="FOR LIST", fetch=True)
        if not rows:
            return []
        index = column_index_map(columns)
        return [mapper(RowReader(row, index)) for row in rows]


__all__ = ["ProcedureInvoker", "build_call"]

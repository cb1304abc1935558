"""Procedure bindings for currencies and FX rates."""
from __future__ import annotations

from datetime import date
from decimal import Decimal
from uuid import UUID

from pocketbook.db import params
from pocketbook.models import Currency, FxRate

from .base import ProcedureRepository


class CurrencyRepository(ProcedureRepository):
    """Currencies are global and keyed by their code."""

    async def get(self, code: str, meta_user: UUID | None) -> Currency | None:
        return await self._optional(
            "proc_currency_get_by_code", [params.text(code)], meta_user, Currency.from_row
        )

    async def create(
        self, *, code: str, name: str, minor_unit: int, meta_user: UUID | None
    ) -> Currency:
        args = [params.text(code), params.text(name), params.u8(minor_unit)]
        return await self._one("proc_currency_insert", args, meta_user, Currency.from_row)

    async def update_name(self, code: str, name: str, meta_user: UUID | None) -> Currency | None:
        args = [params.text(code), params.text(name)]
        return await self._optional(
            "proc_currency_update_name", args, meta_user, Currency.from_row
        )

    async def delete(self, code: str, meta_user: UUID | None) -> None:
        await self._execute("proc_currency_delete", [params.text(code)], meta_user)

    async def list(self, meta_user: UUID | None) -> list[Currency]:
        return await self._list("proc_currency_list", [], meta_user, Currency.from_row)


class FxRateRepository(ProcedureRepository):
    async def get(self, fx_rate_id: UUID, meta_user: UUID | None) -> FxRate | None:
        return await self._optional(
            "proc_fx_rate_get_by_id", [params.uuid(fx_rate_id)], meta_user, FxRate.from_row
        )

    async def create(
        self,
        *,
        base_code: str,
        quote_code: str,
        rate: Decimal,
        as_of_date: date,
        source: str,
        meta_user: UUID | None,
    ) -> FxRate:
        args = [
            params.text(base_code),
            params.text(quote_code),
            params.decimal(rate),
            params.day(as_of_date),
            params.text(source),
        ]
        return await self._one("proc_fx_rate_create", args, meta_user, FxRate.from_row)

    async def update_rate(
        self, fx_rate_id: UUID, rate: Decimal, meta_user: UUID | None
    ) -> FxRate | None:
        args = [params.uuid(fx_rate_id), params.decimal(rate)]
        return await self._optional("proc_fx_rate_update_rate", args, meta_user, FxRate.from_row)

    async def delete(self, fx_rate_id: UUID, meta_user: UUID | None) -> None:
        await self._execute("proc_fx_rate_delete", [params.uuid(fx_rate_id)], meta_user)

    async def list(self, meta_user: UUID | None) -> list[FxRate]:
        return await self._list("proc_fx_rate_list", [], meta_user, FxRate.from_row)

    async def list_by_base_code(self, base_code: str, meta_user: UUID | None) -> list[FxRate]:
        return await self._list(
            "proc_fx_rate_by_code", [params.text(base_code)], meta_user, FxRate.from_row
        )

"""Procedure bindings for locations."""
from __future__ import annotations

from decimal import Decimal
from uuid import UUID

from pocketbook.db import params
from pocketbook.models import Location

from .base import ProcedureRepository


class LocationRepository(ProcedureRepository):
    async def get(self, location_id: UUID, meta_user: UUID | None) -> Location | None:
        return await self._optional(
            "proc_location_get_by_id", [params.uuid(location_id)], meta_user, Location.from_row
        )

    async def create(
        self,
        *,
        user_id: UUID,
        name: str,
        address: str | None = None,
        city: str | None = None,
        region: str | None = None,
        postal_code: str | None = None,
        country_code: str | None = None,
        latitude: Decimal | None = None,
        longitude: Decimal | None = None,
        archived: bool = False,
        meta_user: UUID | None,
    ) -> Location:
        args = [
            params.uuid(user_id),
            params.text(name),
            params.optional_text(address),
            params.optional_text(city),
            params.optional_text(region),
            params.optional_text(postal_code),
            params.optional_text(country_code),
            params.optional_decimal(latitude),
            params.optional_decimal(longitude),
            params.boolean(archived),
        ]
        return await self._one("proc_location_create", args, meta_user, Location.from_row)

    async def update_name(
        self, location_id: UUID, name: str, meta_user: UUID | None
    ) -> Location | None:
        args = [params.uuid(location_id), params.text(name)]
        return await self._optional(
            "proc_location_update_name", args, meta_user, Location.from_row
        )

    async def update(
        self,
        location_id: UUID,
        *,
        address: str | None,
        city: str | None,
        region: str | None,
        postal_code: str | None,
        country_code: str | None,
        meta_user: UUID | None,
    ) -> Location | None:
        args = [
            params.uuid(location_id),
            params.optional_text(address),
            params.optional_text(city),
            params.optional_text(region),
            params.optional_text(postal_code),
            params.optional_text(country_code),
        ]
        return await self._optional("proc_location_update", args, meta_user, Location.from_row)

    async def update_lat_long(
        self,
        location_id: UUID,
        latitude: Decimal | None,
        longitude: Decimal | None,
        meta_user: UUID | None,
    ) -> Location | None:
        args = [
            params.uuid(location_id),
            params.optional_decimal(latitude),
            params.optional_decimal(longitude),
        ]
        return await self._optional(
            "proc_location_update_lat_long", args, meta_user, Location.from_row
        )

    async def update_archived(
        self, location_id: UUID, archived: bool, meta_user: UUID | None
    ) -> Location | None:
        args = [params.uuid(location_id), params.boolean(archived)]
        return await self._optional(
            "proc_location_update_archived", args, meta_user, Location.from_row
        )

    async def delete(self, location_id: UUID, meta_user: UUID | None) -> None:
        await self._execute("proc_location_delete", [params.uuid(location_id)], meta_user)

    async def list(
        self, limit: int | None, offset: int | None, meta_user: UUID | None
    ) -> list[Location]:
        args = [params.optional_u32(limit), params.optional_u32(offset)]
        return await self._list("proc_location_list", args, meta_user, Location.from_row)

    async def list_by_owner(self, user_id: UUID, meta_user: UUID | None) -> list[Location]:
        return await self._list(
            "proc_location_by_user", [params.uuid(user_id)], meta_user, Location.from_row
        )

    async def search(
        self, query: str, limit: int | None, offset: int | None, meta_user: UUID | None
    ) -> list[Location]:
        args = [params.text(query), params.optional_u32(limit), params.optional_u32(offset)]
        return await self._list("proc_location_search", args, meta_user, Location.from_row)

    async def search_by_owner(
        self, user_id: UUID, query: str, meta_user: UUID | None
    ) -> list[Location]:
        args = [params.uuid(user_id), params.text(query)]
        return await self._list(
            "proc_location_search_by_user", args, meta_user, Location.from_row
        )

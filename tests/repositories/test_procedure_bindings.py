"""Repositories bind the documented procedures with meta_user appended last."""
from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from uuid import uuid4

import pytest

from pocketbook.db.procedures import ProcedureInvoker
from pocketbook.repositories import (
    CurrencyRepository,
    FxRateRepository,
    LocationRepository,
    PeopleRepository,
    UserRepository,
)

NOW = datetime(2024, 5, 1, 12, 0)

PERSON_COLUMNS = [
    "id", "user_id", "name", "email", "phone", "image_url", "note",
    "archived", "created_at", "updated_at",
]
LOCATION_COLUMNS = [
    "id", "user_id", "name", "address", "city", "region", "postal_code",
    "country_code", "latitude", "longitude", "archived", "created_at", "updated_at",
]
FX_COLUMNS = ["id", "base_code", "quote_code", "rate", "as_of_date", "source", "created_at"]


def _ordered(bound: dict) -> list:
    return [bound[f"p{index}"] for index in range(len(bound))]


@pytest.mark.asyncio
async def test_people_create_round_trip(engine) -> None:
    owner, person_id = uuid4(), uuid4()
    engine.queue(
        PERSON_COLUMNS,
        (person_id.bytes, owner.bytes, "Grace", None, "+33 1 23", None, None, 0, NOW, NOW),
    )
    repository = PeopleRepository(ProcedureInvoker(engine))

    person = await repository.create(
        user_id=owner,
        name="Grace",
        email=None,
        phone="+33 1 23",
        image_url=None,
        note=None,
        meta_user=owner,
    )

    statement, bound = engine.calls[0]
    assert statement.startswith("CALL proc_people_create(")
    assert _ordered(bound) == [
        owner.bytes, "Grace", None, "+33 1 23", None, None, False, owner.bytes,
    ]
    assert person.id == person_id
    assert person.user_id == owner
    assert person.name == "Grace"
    assert person.phone == "+33 1 23"
    assert person.archived is False


@pytest.mark.asyncio
async def test_people_update_unknown_identity_returns_none(engine) -> None:
    engine.queue(PERSON_COLUMNS)
    repository = PeopleRepository(ProcedureInvoker(engine))

    result = await repository.update_archived(uuid4(), True, None)

    assert result is None
    statement, bound = engine.calls[0]
    assert statement == "CALL proc_people_update_archived(:p0, :p1, :p2)"
    assert _ordered(bound)[1:] == [True, None]


@pytest.mark.asyncio
async def test_people_search_passes_query_and_page(engine) -> None:
    repository = PeopleRepository(ProcedureInvoker(engine))
    meta_user = uuid4()

    assert await repository.search("ada", 20, 40, meta_user) == []

    statement, bound = engine.calls[0]
    assert statement == "CALL proc_people_search(:p0, :p1, :p2, :p3)"
    assert _ordered(bound) == ["ada", 20, 40, meta_user.bytes]


@pytest.mark.asyncio
async def test_location_lat_long_and_owner_listing(engine) -> None:
    owner, location_id = uuid4(), uuid4()
    engine.queue(
        LOCATION_COLUMNS,
        (
            location_id.bytes, owner.bytes, "Cabin", None, None, None, None, None,
            Decimal("61.5"), Decimal("-149.9"), 0, NOW, NOW,
        ),
    )
    repository = LocationRepository(ProcedureInvoker(engine))

    location = await repository.update_lat_long(
        location_id, Decimal("61.5"), Decimal("-149.9"), owner
    )
    await repository.list_by_owner(owner, owner)

    assert location is not None
    assert location.latitude == Decimal("61.5")
    update_call, list_call = engine.calls
    assert update_call[0] == "CALL proc_location_update_lat_long(:p0, :p1, :p2, :p3)"
    assert _ordered(update_call[1]) == [
        location_id.bytes, Decimal("61.5"), Decimal("-149.9"), owner.bytes,
    ]
    assert list_call[0] == "CALL proc_location_by_user(:p0, :p1)"


@pytest.mark.asyncio
async def test_currency_create_binds_minor_unit(engine) -> None:
    engine.queue(["code", "name", "minor_unit"], ("JPY", "Yen", 0))
    repository = CurrencyRepository(ProcedureInvoker(engine))

    currency = await repository.create(code="JPY", name="Yen", minor_unit=0, meta_user=None)

    assert currency.minor_unit == 0
    assert _ordered(engine.calls[0][1]) == ["JPY", "Yen", 0, None]


@pytest.mark.asyncio
async def test_currency_list_has_only_meta_user(engine) -> None:
    repository = CurrencyRepository(ProcedureInvoker(engine))

    await repository.list(None)

    assert engine.calls[0][0] == "CALL proc_currency_list(:p0)"


@pytest.mark.asyncio
async def test_fx_rate_create_and_by_code(engine) -> None:
    fx_rate_id = uuid4()
    engine.queue(
        FX_COLUMNS,
        (fx_rate_id.bytes, "EUR", "USD", Decimal("1.0850"), date(2024, 5, 1), "ECB", NOW),
    )
    repository = FxRateRepository(ProcedureInvoker(engine))

    fx_rate = await repository.create(
        base_code="EUR",
        quote_code="USD",
        rate=Decimal("1.0850"),
        as_of_date=date(2024, 5, 1),
        source="ECB",
        meta_user=None,
    )
    await repository.list_by_base_code("EUR", None)

    assert fx_rate.id == fx_rate_id
    assert fx_rate.rate == Decimal("1.0850")
    assert engine.calls[0][0].startswith("CALL proc_fx_rate_create(")
    assert _ordered(engine.calls[0][1]) == [
        "EUR", "USD", Decimal("1.0850"), date(2024, 5, 1), "ECB", None,
    ]
    assert engine.calls[1][0] == "CALL proc_fx_rate_by_code(:p0, :p1)"


@pytest.mark.asyncio
async def test_user_delete_and_paged_list(engine) -> None:
    user_id, meta_user = uuid4(), uuid4()
    repository = UserRepository(ProcedureInvoker(engine))

    await repository.delete(user_id, meta_user)
    await repository.list(None, None, meta_user)

    assert engine.calls[0] == (
        "CALL proc_user_delete(:p0, :p1)",
        {"p0": user_id.bytes, "p1": meta_user.bytes},
    )
    assert _ordered(engine.calls[1][1]) == [None, None, meta_user.bytes]

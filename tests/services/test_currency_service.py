from datetime import date
from decimal import Decimal
from unittest.mock import create_autospec
from uuid import uuid4

import pytest

from pocketbook.cache import keys
from pocketbook.commands.currencies import (
    CurrencyConvertCommand,
    CurrencyCreateCommand,
    CurrencyDeleteCommand,
    CurrencyGetCommand,
    CurrencyListCommand,
    CurrencyUpdateNameCommand,
    FxRateCreateCommand,
    FxRateGetCommand,
    FxRateListByBaseCodeCommand,
    FxRateListCommand,
    FxRateUpdateRateCommand,
)
from pocketbook.core.errors import AuthorizationError, ValidationError
from pocketbook.repositories import CurrencyRepository, FxRateRepository
from pocketbook.services import CurrencyService


@pytest.fixture()
def currencies() -> CurrencyRepository:
    return create_autospec(CurrencyRepository, instance=True)


@pytest.fixture()
def fx_rates() -> FxRateRepository:
    return create_autospec(FxRateRepository, instance=True)


def _catalogue(*known):
    by_code = {currency.code: currency for currency in known}

    async def lookup(code, meta_user):
        return by_code.get(code)

    return lookup


@pytest.mark.asyncio
async def test_get_currency_normalises_code_and_caches(currencies, fx_rates, cache, redis, owner, make_currency) -> None:
    currencies.get.return_value = make_currency("EUR", "Euro", 2)
    service = CurrencyService(currencies, fx_rates, cache)

    command = CurrencyGetCommand.new(" eur ", owner)
    first = await service.get_currency(command)
    second = await service.get_currency(command)

    assert first.currency_code == "EUR"
    assert first == second
    assert keys.currency_key("EUR") in redis.data
    currencies.get.assert_awaited_once_with("EUR", owner.user_id)


@pytest.mark.asyncio
async def test_create_requires_admin(currencies, fx_rates, owner) -> None:
    service = CurrencyService(currencies, fx_rates)

    with pytest.raises(AuthorizationError):
        await service.create_currency(
            CurrencyCreateCommand(currency_code="JPY", currency_name="Yen", currency_minor_unit=0, auth_user=owner)
        )
    currencies.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_create_invalidates_currency_list(currencies, fx_rates, cache, redis, admin, make_currency) -> None:
    currencies.list.return_value = [make_currency("EUR", "Euro", 2)]
    currencies.create.return_value = make_currency("JPY", "Yen", 0)
    service = CurrencyService(currencies, fx_rates, cache)

    await service.list_currencies(CurrencyListCommand(auth_user=admin))
    assert keys.currency_list_key() in redis.data

    created = await service.create_currency(
        CurrencyCreateCommand(currency_code="JPY", currency_name="Yen", currency_minor_unit=0, auth_user=admin)
    )

    assert created.currency_minor_unit == 0
    assert keys.currency_list_key() not in redis.data
    assert keys.currency_key("JPY") in redis.data


@pytest.mark.asyncio
async def test_rename_of_unknown_currency_returns_none(currencies, fx_rates, cache, admin) -> None:
    currencies.update_name.return_value = None
    service = CurrencyService(currencies, fx_rates, cache)

    result = await service.update_currency_name(
        CurrencyUpdateNameCommand(currency_code="XXX", currency_name="Nothing", auth_user=admin)
    )

    assert result is None


@pytest.mark.asyncio
async def test_delete_drops_entity_and_list(currencies, fx_rates, cache, redis, admin) -> None:
    redis.data[keys.currency_key("EUR")] = "{}"
    redis.data[keys.currency_list_key()] = "[]"
    service = CurrencyService(currencies, fx_rates, cache)

    await service.delete_currency(CurrencyDeleteCommand.new("eur", admin))

    currencies.delete.assert_awaited_once_with("EUR", admin.user_id)
    assert redis.data == {}


@pytest.mark.asyncio
async def test_fx_rate_with_unknown_quote_is_not_created(currencies, fx_rates, admin, make_currency) -> None:
    """USD exists, ZZZ does not: nothing is inserted."""

    currencies.get.side_effect = _catalogue(make_currency("USD", "US Dollar", 2))
    service = CurrencyService(currencies, fx_rates)

    result = await service.create_fx_rate(
        FxRateCreateCommand(
            fx_rate_base_code="USD",
            fx_rate_quote_code="ZZZ",
            fx_rate_rate=Decimal("1.5"),
            fx_rate_as_of_date=date(2024, 5, 1),
            fx_rate_source="manual",
            auth_user=admin,
        )
    )

    assert result is None
    fx_rates.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_fx_rate_created_when_both_codes_exist(currencies, fx_rates, cache, redis, admin, make_currency, make_fx_rate) -> None:
    currencies.get.side_effect = _catalogue(make_currency("EUR", "Euro", 2), make_currency("USD", "US Dollar", 2))
    fx_rate = make_fx_rate()
    fx_rates.create.return_value = fx_rate
    service = CurrencyService(currencies, fx_rates, cache)

    result = await service.create_fx_rate(
        FxRateCreateCommand(
            fx_rate_base_code="EUR",
            fx_rate_quote_code="USD",
            fx_rate_rate=Decimal("1.0850"),
            fx_rate_as_of_date=date(2024, 5, 1),
            fx_rate_source="ECB",
            auth_user=admin,
        )
    )

    assert result.fx_rate_id == fx_rate.id
    assert result.fx_rate_rate == Decimal("1.0850")
    assert keys.fx_rate_key(fx_rate.id) in redis.data
    fx_rates.create.assert_awaited_once_with(
        base_code="EUR",
        quote_code="USD",
        rate=Decimal("1.0850"),
        as_of_date=date(2024, 5, 1),
        source="ECB",
        meta_user=admin.user_id,
    )


@pytest.mark.asyncio
async def test_fx_rate_is_served_from_cache(currencies, fx_rates, cache, redis, owner, make_fx_rate) -> None:
    fx_rate = make_fx_rate()
    fx_rates.get.return_value = fx_rate
    service = CurrencyService(currencies, fx_rates, cache)

    command = FxRateGetCommand(fx_rate_id=fx_rate.id, auth_user=owner)
    first = await service.get_fx_rate(command)
    second = await service.get_fx_rate(command)

    assert first == second
    assert second.fx_rate_rate == Decimal("1.0850")
    assert '"fx_rate_rate":"1.0850"' in redis.data[keys.fx_rate_key(fx_rate.id)]
    fx_rates.get.assert_awaited_once_with(fx_rate.id, owner.user_id)


@pytest.mark.asyncio
async def test_fx_rate_list_is_served_from_cache(currencies, fx_rates, cache, redis, owner, make_fx_rate) -> None:
    fx_rates.list.return_value = [make_fx_rate(), make_fx_rate(quote_code="GBP", rate=Decimal("0.8561"))]
    service = CurrencyService(currencies, fx_rates, cache)

    first = await service.list_fx_rates(FxRateListCommand(auth_user=owner))
    second = await service.list_fx_rates(FxRateListCommand(auth_user=owner))

    assert first == second
    assert [rate.fx_rate_rate for rate in second] == [Decimal("1.0850"), Decimal("0.8561")]
    assert '"fx_rate_rate":"0.8561"' in redis.data[keys.fx_rate_list_key()]
    fx_rates.list.assert_awaited_once_with(owner.user_id)


@pytest.mark.asyncio
async def test_fx_rate_update_invalidates_list(currencies, fx_rates, cache, redis, admin, make_fx_rate) -> None:
    fx_rate = make_fx_rate(rate=Decimal("1.1000"))
    fx_rates.list.return_value = [make_fx_rate()]
    fx_rates.update_rate.return_value = fx_rate
    service = CurrencyService(currencies, fx_rates, cache)

    await service.list_fx_rates(FxRateListCommand(auth_user=admin))
    updated = await service.update_fx_rate(
        FxRateUpdateRateCommand(fx_rate_id=fx_rate.id, fx_rate_rate=Decimal("1.1000"), auth_user=admin)
    )

    assert updated.fx_rate_rate == Decimal("1.1000")
    assert keys.fx_rate_list_key() not in redis.data


@pytest.mark.asyncio
async def test_fx_rate_update_of_unknown_id_returns_none(currencies, fx_rates, admin) -> None:
    fx_rates.update_rate.return_value = None
    service = CurrencyService(currencies, fx_rates)

    result = await service.update_fx_rate(
        FxRateUpdateRateCommand(fx_rate_id=uuid4(), fx_rate_rate=Decimal("2"), auth_user=admin)
    )

    assert result is None


@pytest.mark.asyncio
async def test_rates_by_unknown_base_code(currencies, fx_rates, owner) -> None:
    currencies.get.return_value = None
    service = CurrencyService(currencies, fx_rates)

    assert await service.list_fx_rates_by_base_code(FxRateListByBaseCodeCommand.new("zzz", owner)) is None
    fx_rates.list_by_base_code.assert_not_awaited()


@pytest.mark.asyncio
async def test_zero_decimal_currency_converts_identically_at_rate_one(currencies, fx_rates, owner, make_currency) -> None:
    currencies.get.side_effect = _catalogue(make_currency("JPY", "Yen", 0))
    service = CurrencyService(currencies, fx_rates)

    result = await service.convert_to_base(
        CurrencyConvertCommand.new(100, "JPY", "JPY", Decimal("1"), owner)
    )

    assert result.base_amount_minor == 100
    assert result.source_code == "JPY"


@pytest.mark.asyncio
async def test_conversion_across_minor_units(currencies, fx_rates, owner, make_currency) -> None:
    currencies.get.side_effect = _catalogue(make_currency("JPY", "Yen", 0), make_currency("EUR", "Euro", 2))
    service = CurrencyService(currencies, fx_rates)

    result = await service.convert_to_base(
        CurrencyConvertCommand.new(16000, "JPY", "EUR", Decimal("160"), owner)
    )

    assert result.base_amount_minor == 10000


@pytest.mark.asyncio
async def test_conversion_with_unknown_currency(currencies, fx_rates, owner, make_currency) -> None:
    currencies.get.side_effect = _catalogue(make_currency("EUR", "Euro", 2))
    service = CurrencyService(currencies, fx_rates)

    result = await service.convert_to_base(
        CurrencyConvertCommand.new(100, "ZZZ", "EUR", Decimal("1"), owner)
    )

    assert result is None


@pytest.mark.asyncio
async def test_conversion_rejects_non_positive_rate(currencies, fx_rates, owner, make_currency) -> None:
    currencies.get.side_effect = _catalogue(make_currency("EUR", "Euro", 2))
    service = CurrencyService(currencies, fx_rates)

    with pytest.raises(ValidationError):
        await service.convert_to_base(CurrencyConvertCommand.new(100, "EUR", "EUR", Decimal("0"), owner))

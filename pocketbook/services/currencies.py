"""Service for currencies, FX rates and minor-unit conversion.

FX rate creation checks that both currency codes exist before inserting. The
check and the insert are two separate procedure calls and are not atomic.
"""
from __future__ import annotations

from pydantic import TypeAdapter

from pocketbook.cache import CacheAside
from pocketbook.cache import keys
from pocketbook.commands.currencies import (
    CurrencyConvertCommand,
    CurrencyCreateCommand,
    CurrencyDeleteCommand,
    CurrencyGetCommand,
    CurrencyListCommand,
    CurrencyUpdateNameCommand,
    FxRateCreateCommand,
    FxRateDeleteCommand,
    FxRateGetCommand,
    FxRateListByBaseCodeCommand,
    FxRateListCommand,
    FxRateUpdateRateCommand,
)
from pocketbook.core.log import get_logger
from pocketbook.core.money import convert_to_base_minor
from pocketbook.core.security import AuthUser
from pocketbook.models import FxRate
from pocketbook.repositories import CurrencyRepository, FxRateRepository
from pocketbook.schemas.currencies import (
    CurrencyConversionResponse,
    CurrencyResponse,
    FxRateResponse,
)

from .base import ensure_admin, service_errors

LOGGER = get_logger(__name__)

CURRENCY = "currency"
FX_RATE = "fx rate"

_CURRENCY = TypeAdapter(CurrencyResponse)
_CURRENCIES = TypeAdapter(list[CurrencyResponse])
_FX_RATE = TypeAdapter(FxRateResponse)
_FX_RATES = TypeAdapter(list[FxRateResponse])


class CurrencyService:
    def __init__(
        self,
        currencies: CurrencyRepository,
        fx_rates: FxRateRepository,
        cache: CacheAside | None = None,
    ) -> None:
        self._currencies = currencies
        self._fx_rates = fx_rates
        self._cache = cache or CacheAside(None)

    # -- currencies -----------------------------------------------------

    async def _load_currency(self, code: str, auth_user: AuthUser) -> CurrencyResponse | None:
        async def load() -> CurrencyResponse | None:
            currency = await self._currencies.get(code, auth_user.user_id)
            return None if currency is None else CurrencyResponse.from_entity(currency)

        return await self._cache.get_or_load(keys.currency_key(code), _CURRENCY, load)

    async def get_currency(self, command: CurrencyGetCommand) -> CurrencyResponse | None:
        with service_errors(CURRENCY, "get", logger=LOGGER):
            return await self._load_currency(command.currency_code, command.auth_user)

    async def create_currency(self, command: CurrencyCreateCommand) -> CurrencyResponse:
        ensure_admin(command.auth_user)
        with service_errors(CURRENCY, "create", logger=LOGGER):
            currency = await self._currencies.create(
                code=command.currency_code,
                name=command.currency_name,
                minor_unit=command.currency_minor_unit,
                meta_user=command.auth_user.user_id,
            )
            response = CurrencyResponse.from_entity(currency)
            await self._cache.write(keys.currency_key(currency.code), response, _CURRENCY)
            await self._cache.invalidate(keys.currency_list_key())
        return response

    async def update_currency_name(
        self, command: CurrencyUpdateNameCommand
    ) -> CurrencyResponse | None:
        ensure_admin(command.auth_user)
        with service_errors(CURRENCY, "update name", logger=LOGGER):
            currency = await self._currencies.update_name(
                command.currency_code, command.currency_name, command.auth_user.user_id
            )
            if currency is None:
                return None
            await self._cache.invalidate(
                keys.currency_key(currency.code), keys.currency_list_key()
            )
        return CurrencyResponse.from_entity(currency)

    async def delete_currency(self, command: CurrencyDeleteCommand) -> None:
        ensure_admin(command.auth_user)
        with service_errors(CURRENCY, "delete", logger=LOGGER):
            await self._currencies.delete(command.currency_code, command.auth_user.user_id)
            await self._cache.invalidate(
                keys.currency_key(command.currency_code), keys.currency_list_key()
            )

    async def list_currencies(self, command: CurrencyListCommand) -> list[CurrencyResponse]:
        async def load() -> list[CurrencyResponse]:
            currencies = await self._currencies.list(command.auth_user.user_id)
            return [CurrencyResponse.from_entity(currency) for currency in currencies]

        with service_errors(CURRENCY, "list", logger=LOGGER):
            result = await self._cache.get_or_load(keys.currency_list_key(), _CURRENCIES, load)
        return result or []

    async def convert_to_base(
        self, command: CurrencyConvertCommand
    ) -> CurrencyConversionResponse | None:
        """Convert an amount between minor units; ``None`` if a currency is unknown."""

        with service_errors(CURRENCY, "convert", logger=LOGGER):
            source = await self._load_currency(command.source_code, command.auth_user)
            base = await self._load_currency(command.base_code, command.auth_user)
        if source is None or base is None:
            return None
        base_amount = convert_to_base_minor(
            command.amount_minor,
            source.currency_minor_unit,
            base.currency_minor_unit,
            command.rate,
        )
        return CurrencyConversionResponse(
            source_code=source.currency_code,
            base_code=base.currency_code,
            rate=command.rate,
            amount_minor=command.amount_minor,
            base_amount_minor=base_amount,
        )

    # -- fx rates -------------------------------------------------------

    async def _after_fx_update(self, fx_rate: FxRate | None) -> FxRateResponse | None:
        if fx_rate is None:
            return None
        await self._cache.invalidate(keys.fx_rate_key(fx_rate.id), keys.fx_rate_list_key())
        return FxRateResponse.from_entity(fx_rate)

    async def get_fx_rate(self, command: FxRateGetCommand) -> FxRateResponse | None:
        async def load() -> FxRateResponse | None:
            fx_rate = await self._fx_rates.get(command.fx_rate_id, command.auth_user.user_id)
            return None if fx_rate is None else FxRateResponse.from_entity(fx_rate)

        with service_errors(FX_RATE, "get", logger=LOGGER):
            return await self._cache.get_or_load(
                keys.fx_rate_key(command.fx_rate_id), _FX_RATE, load
            )

    async def create_fx_rate(self, command: FxRateCreateCommand) -> FxRateResponse | None:
        """Insert a rate once both codes resolve; ``None`` when either is unknown."""

        ensure_admin(command.auth_user)
        with service_errors(FX_RATE, "create", logger=LOGGER):
            base = await self._load_currency(command.fx_rate_base_code, command.auth_user)
            if base is None:
                LOGGER.info("Unknown base currency %s", command.fx_rate_base_code)
                return None
            quote = await self._load_currency(command.fx_rate_quote_code, command.auth_user)
            if quote is None:
                LOGGER.info("Unknown quote currency %s", command.fx_rate_quote_code)
                return None
            fx_rate = await self._fx_rates.create(
                base_code=base.currency_code,
                quote_code=quote.currency_code,
                rate=command.fx_rate_rate,
                as_of_date=command.fx_rate_as_of_date,
                source=command.fx_rate_source,
                meta_user=command.auth_user.user_id,
            )
            response = FxRateResponse.from_entity(fx_rate)
            await self._cache.write(keys.fx_rate_key(fx_rate.id), response, _FX_RATE)
            await self._cache.invalidate(keys.fx_rate_list_key())
        return response

    async def update_fx_rate(self, command: FxRateUpdateRateCommand) -> FxRateResponse | None:
        ensure_admin(command.auth_user)
        with service_errors(FX_RATE, "update rate", logger=LOGGER):
            fx_rate = await self._fx_rates.update_rate(
                command.fx_rate_id, command.fx_rate_rate, command.auth_user.user_id
            )
            return await self._after_fx_update(fx_rate)

    async def delete_fx_rate(self, command: FxRateDeleteCommand) -> None:
        ensure_admin(command.auth_user)
        with service_errors(FX_RATE, "delete", logger=LOGGER):
            await self._fx_rates.delete(command.fx_rate_id, command.auth_user.user_id)
            await self._cache.invalidate(
                keys.fx_rate_key(command.fx_rate_id), keys.fx_rate_list_key()
            )

    async def list_fx_rates(self, command: FxRateListCommand) -> list[FxRateResponse]:
        async def load() -> list[FxRateResponse]:
            fx_rates = await self._fx_rates.list(command.auth_user.user_id)
            return [FxRateResponse.from_entity(fx_rate) for fx_rate in fx_rates]

        with service_errors(FX_RATE, "list", logger=LOGGER):
            result = await self._cache.get_or_load(keys.fx_rate_list_key(), _FX_RATES, load)
        return result or []

    async def list_fx_rates_by_base_code(
        self, command: FxRateListByBaseCodeCommand
    ) -> list[FxRateResponse] | None:
        with service_errors(FX_RATE, "list by base code", logger=LOGGER):
            base = await self._load_currency(command.base_code, command.auth_user)
            if base is None:
                return None
            fx_rates = await self._fx_rates.list_by_base_code(
                base.currency_code, command.auth_user.user_id
            )
        return [FxRateResponse.from_entity(fx_rate) for fx_rate in fx_rates]


__all__ = ["CurrencyService"]

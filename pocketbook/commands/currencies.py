"""Commands for currencies, FX rates and conversions."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID

from pocketbook.core.security import AuthUser
from pocketbook.schemas.currencies import (
    CurrencyCreateRequest,
    CurrencyUpdateNameRequest,
    FxRateCreateRequest,
    FxRateUpdateRateRequest,
)


def _code(value: str) -> str:
    return value.strip().upper()


@dataclass(frozen=True, slots=True)
class CurrencyGetCommand:
    currency_code: str
    auth_user: AuthUser

    @classmethod
    def new(cls, currency_code: str, auth_user: AuthUser) -> "CurrencyGetCommand":
        return cls(currency_code=_code(currency_code), auth_user=auth_user)


@dataclass(frozen=True, slots=True)
class CurrencyCreateCommand:
    currency_code: str
    currency_name: str
    currency_minor_unit: int
    auth_user: AuthUser

    @classmethod
    def from_request(
        cls, request: CurrencyCreateRequest, auth_user: AuthUser
    ) -> "CurrencyCreateCommand":
        return cls(
            currency_code=_code(request.currency_code),
            currency_name=request.currency_name.strip(),
            currency_minor_unit=request.currency_minor_unit,
            auth_user=auth_user,
        )


@dataclass(frozen=True, slots=True)
class CurrencyUpdateNameCommand:
    currency_code: str
    currency_name: str
    auth_user: AuthUser

    @classmethod
    def from_request(
        cls, currency_code: str, request: CurrencyUpdateNameRequest, auth_user: AuthUser
    ) -> "CurrencyUpdateNameCommand":
        return cls(
            currency_code=_code(currency_code),
            currency_name=request.currency_name.strip(),
            auth_user=auth_user,
        )


@dataclass(frozen=True, slots=True)
class CurrencyDeleteCommand:
    currency_code: str
    auth_user: AuthUser

    @classmethod
    def new(cls, currency_code: str, auth_user: AuthUser) -> "CurrencyDeleteCommand":
        return cls(currency_code=_code(currency_code), auth_user=auth_user)


@dataclass(frozen=True, slots=True)
class CurrencyListCommand:
    auth_user: AuthUser


@dataclass(frozen=True, slots=True)
class CurrencyConvertCommand:
    """Convert ``amount_minor`` of ``source_code`` into ``base_code`` at ``rate``."""

    amount_minor: int
    source_code: str
    base_code: str
    rate: Decimal
    auth_user: AuthUser

    @classmethod
    def new(
        cls,
        amount_minor: int,
        source_code: str,
        base_code: str,
        rate: Decimal,
        auth_user: AuthUser,
    ) -> "CurrencyConvertCommand":
        return cls(
            amount_minor=amount_minor,
            source_code=_code(source_code),
            base_code=_code(base_code),
            rate=rate,
            auth_user=auth_user,
        )


@dataclass(frozen=True, slots=True)
class FxRateGetCommand:
    fx_rate_id: UUID
    auth_user: AuthUser


@dataclass(frozen=True, slots=True)
class FxRateCreateCommand:
    fx_rate_base_code: str
    fx_rate_quote_code: str
    fx_rate_rate: Decimal
    fx_rate_as_of_date: date
    fx_rate_source: str
    auth_user: AuthUser

    @classmethod
    def from_request(
        cls, request: FxRateCreateRequest, auth_user: AuthUser
    ) -> "FxRateCreateCommand":
        return cls(
            fx_rate_base_code=_code(request.fx_rate_base_code),
            fx_rate_quote_code=_code(request.fx_rate_quote_code),
            fx_rate_rate=request.fx_rate_rate,
            fx_rate_as_of_date=request.fx_rate_as_of_date,
            fx_rate_source=request.fx_rate_source.strip(),
            auth_user=auth_user,
        )


@dataclass(frozen=True, slots=True)
class FxRateUpdateRateCommand:
    fx_rate_id: UUID
    fx_rate_rate: Decimal
    auth_user: AuthUser

    @classmethod
    def from_request(
        cls, fx_rate_id: UUID, request: FxRateUpdateRateRequest, auth_user: AuthUser
    ) -> "FxRateUpdateRateCommand":
        return cls(fx_rate_id=fx_rate_id, fx_rate_rate=request.fx_rate_rate, auth_user=auth_user)


@dataclass(frozen=True, slots=True)
class FxRateDeleteCommand:
    fx_rate_id: UUID
    auth_user: AuthUser


@dataclass(frozen=True, slots=True)
class FxRateListCommand:
    auth_user: AuthUser


@dataclass(frozen=True, slots=True)
class FxRateListByBaseCodeCommand:
    base_code: str
    auth_user: AuthUser

    @classmethod
    def new(cls, base_code: str, auth_user: AuthUser) -> "FxRateListByBaseCodeCommand":
        return cls(base_code=_code(base_code), auth_user=auth_user)

"""Schemas for currencies and FX rates."""
from __future__ import annotations

from datetime import date
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field, field_serializer

from pocketbook.models import Currency, FxRate


class CurrencyResponse(BaseModel):
    currency_code: str
    currency_name: str
    currency_minor_unit: int

    @classmethod
    def from_entity(cls, currency: Currency) -> "CurrencyResponse":
        return cls(
            currency_code=currency.code,
            currency_name=currency.name,
            currency_minor_unit=currency.minor_unit,
        )


class CurrencyCreateRequest(BaseModel):
    currency_code: str = Field(min_length=1, max_length=8)
    currency_name: str = Field(min_length=1)
    currency_minor_unit: int = Field(ge=0, le=255)


class CurrencyUpdateNameRequest(BaseModel):
    currency_name: str = Field(min_length=1)


class FxRateResponse(BaseModel):
    """Quoted rate: one unit of the base currency buys ``rate`` of the quote."""

    fx_rate_id: UUID
    fx_rate_base_code: str
    fx_rate_quote_code: str
    fx_rate_rate: Decimal
    fx_rate_as_of_date: date
    fx_rate_source: str

    @field_serializer("fx_rate_rate")
    def _serialize_rate(self, value: Decimal) -> str:
        return str(value)

    @classmethod
    def from_entity(cls, fx_rate: FxRate) -> "FxRateResponse":
        return cls(
            fx_rate_id=fx_rate.id,
            fx_rate_base_code=fx_rate.base_code,
            fx_rate_quote_code=fx_rate.quote_code,
            fx_rate_rate=fx_rate.rate,
            fx_rate_as_of_date=fx_rate.as_of_date,
            fx_rate_source=fx_rate.source,
        )


class FxRateCreateRequest(BaseModel):
    fx_rate_base_code: str = Field(min_length=1, max_length=8)
    fx_rate_quote_code: str = Field(min_length=1, max_length=8)
    fx_rate_rate: Decimal
    fx_rate_as_of_date: date
    fx_rate_source: str


class FxRateUpdateRateRequest(BaseModel):
    fx_rate_rate: Decimal


class CurrencyConversionResponse(BaseModel):
    """Result of converting an amount expressed in minor units."""

    source_code: str
    base_code: str
    rate: Decimal
    amount_minor: int
    base_amount_minor: int

    @field_serializer("rate")
    def _serialize_rate(self, value: Decimal) -> str:
        return str(value)

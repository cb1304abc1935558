"""Currency, FX rate and conversion routes."""
from __future__ import annotations

from decimal import Decimal
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

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
from pocketbook.core.security import AuthUser, get_auth_user
from pocketbook.dependencies import get_currency_service
from pocketbook.schemas.currencies import (
    CurrencyConversionResponse,
    CurrencyCreateRequest,
    CurrencyResponse,
    CurrencyUpdateNameRequest,
    FxRateCreateRequest,
    FxRateResponse,
    FxRateUpdateRateRequest,
)
from pocketbook.services import CurrencyService

from .common import found

router = APIRouter(prefix="/currencies", tags=["currencies"])


@router.get("/fx/rates", response_model=list[FxRateResponse])
async def list_fx_rates(
    auth_user: AuthUser = Depends(get_auth_user),
    service: CurrencyService = Depends(get_currency_service),
) -> list[FxRateResponse]:
    return await service.list_fx_rates(FxRateListCommand(auth_user=auth_user))


@router.post("/fx/rates", response_model=FxRateResponse, status_code=status.HTTP_201_CREATED)
async def create_fx_rate(
    request: FxRateCreateRequest,
    auth_user: AuthUser = Depends(get_auth_user),
    service: CurrencyService = Depends(get_currency_service),
) -> FxRateResponse:
    fx_rate = await service.create_fx_rate(FxRateCreateCommand.from_request(request, auth_user))
    return found(fx_rate, "Currency")


@router.get("/fx/rates/{fx_rate_id}", response_model=FxRateResponse)
async def get_fx_rate(
    fx_rate_id: UUID,
    auth_user: AuthUser = Depends(get_auth_user),
    service: CurrencyService = Depends(get_currency_service),
) -> FxRateResponse:
    command = FxRateGetCommand(fx_rate_id=fx_rate_id, auth_user=auth_user)
    return found(await service.get_fx_rate(command), "FX rate")


@router.put("/fx/rates/{fx_rate_id}", response_model=FxRateResponse)
async def update_fx_rate(
    fx_rate_id: UUID,
    request: FxRateUpdateRateRequest,
    auth_user: AuthUser = Depends(get_auth_user),
    service: CurrencyService = Depends(get_currency_service),
) -> FxRateResponse:
    command = FxRateUpdateRateCommand.from_request(fx_rate_id, request, auth_user)
    return found(await service.update_fx_rate(command), "FX rate")


@router.delete("/fx/rates/{fx_rate_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_fx_rate(
    fx_rate_id: UUID,
    auth_user: AuthUser = Depends(get_auth_user),
    service: CurrencyService = Depends(get_currency_service),
) -> Response:
    await service.delete_fx_rate(FxRateDeleteCommand(fx_rate_id=fx_rate_id, auth_user=auth_user))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Declared before "/{code}" so the literal path wins
@router.get("/convert", response_model=CurrencyConversionResponse)
async def convert(
    amount_minor: int,
    source_code: str,
    base_code: str,
    rate: Decimal = Query(..., gt=0),
    auth_user: AuthUser = Depends(get_auth_user),
    service: CurrencyService = Depends(get_currency_service),
) -> CurrencyConversionResponse:
    command = CurrencyConvertCommand.new(amount_minor, source_code, base_code, rate, auth_user)
    return found(await service.convert_to_base(command), "Currency")


@router.get("", response_model=list[CurrencyResponse])
async def list_currencies(
    auth_user: AuthUser = Depends(get_auth_user),
    service: CurrencyService = Depends(get_currency_service),
) -> list[CurrencyResponse]:
    return await service.list_currencies(CurrencyListCommand(auth_user=auth_user))


@router.post("", response_model=CurrencyResponse, status_code=status.HTTP_201_CREATED)
async def create_currency(
    request: CurrencyCreateRequest,
    auth_user: AuthUser = Depends(get_auth_user),
    service: CurrencyService = Depends(get_currency_service),
) -> CurrencyResponse:
    return await service.create_currency(CurrencyCreateCommand.from_request(request, auth_user))


@router.get("/{code}", response_model=CurrencyResponse)
async def get_currency(
    code: str,
    auth_user: AuthUser = Depends(get_auth_user),
    service: CurrencyService = Depends(get_currency_service),
) -> CurrencyResponse:
    currency = await service.get_currency(CurrencyGetCommand.new(code, auth_user))
    return found(currency, "Currency")


@router.put("/{code}", response_model=CurrencyResponse)
async def update_currency_name(
    code: str,
    request: CurrencyUpdateNameRequest,
    auth_user: AuthUser = Depends(get_auth_user),
    service: CurrencyService = Depends(get_currency_service),
) -> CurrencyResponse:
    command = CurrencyUpdateNameCommand.from_request(code, request, auth_user)
    return found(await service.update_currency_name(command), "Currency")


@router.delete("/{code}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_currency(
    code: str,
    auth_user: AuthUser = Depends(get_auth_user),
    service: CurrencyService = Depends(get_currency_service),
) -> Response:
    await service.delete_currency(CurrencyDeleteCommand.new(code, auth_user))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{code}/fx/rates", response_model=list[FxRateResponse])
async def list_fx_rates_by_base_code(
    code: str,
    auth_user: AuthUser = Depends(get_auth_user),
    service: CurrencyService = Depends(get_currency_service),
) -> list[FxRateResponse]:
    command = FxRateListByBaseCodeCommand.new(code, auth_user)
    return found(await service.list_fx_rates_by_base_code(command), "Currency")

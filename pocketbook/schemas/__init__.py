"""Request and response models exposed by the HTTP API."""

from .auth import LoginRequest, LoginResponse
from .currencies import (
    CurrencyConversionResponse,
    CurrencyCreateRequest,
    CurrencyResponse,
    CurrencyUpdateNameRequest,
    FxRateCreateRequest,
    FxRateResponse,
    FxRateUpdateRateRequest,
)
from .locations import (
    LocationCreateRequest,
    LocationResponse,
    LocationUpdateArchivedRequest,
    LocationUpdateLatLongRequest,
    LocationUpdateNameRequest,
    LocationUpdateRequest,
)
from .pagination import PaginationRequest
from .people import (
    PeopleCreateRequest,
    PeopleResponse,
    PeopleUpdateArchivedRequest,
    PeopleUpdateImageRequest,
    PeopleUpdateRequest,
)
from .users import (
    UserCreateRequest,
    UserResponse,
    UserUpdateBaseCurrencyRequest,
    UserUpdateNameRequest,
    UserUpdatePasswordRequest,
)

__all__ = [
    "CurrencyConversionResponse",
    "CurrencyCreateRequest",
    "CurrencyResponse",
    "CurrencyUpdateNameRequest",
    "FxRateCreateRequest",
    "FxRateResponse",
    "FxRateUpdateRateRequest",
    "LocationCreateRequest",
    "LocationResponse",
    "LocationUpdateArchivedRequest",
    "LocationUpdateLatLongRequest",
    "LocationUpdateNameRequest",
    "LocationUpdateRequest",
    "LoginRequest",
    "LoginResponse",
    "PaginationRequest",
    "PeopleCreateRequest",
    "PeopleResponse",
    "PeopleUpdateArchivedRequest",
    "PeopleUpdateImageRequest",
    "PeopleUpdateRequest",
    "UserCreateRequest",
    "UserResponse",
    "UserUpdateBaseCurrencyRequest",
    "UserUpdateNameRequest",
    "UserUpdatePasswordRequest",
]

"""Immutable command objects carrying caller intent plus the authenticated identity."""

from .auth import LoginCommand
from .currencies import (
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
from .locations import (
    LocationArchivedCommand,
    LocationCreateCommand,
    LocationDeleteCommand,
    LocationGetCommand,
    LocationListByUserCommand,
    LocationListCommand,
    LocationUpdateCommand,
    LocationUpdateLatLongCommand,
    LocationUpdateNameCommand,
)
from .people import (
    PeopleArchivedCommand,
    PeopleCreateCommand,
    PeopleDeleteCommand,
    PeopleGetCommand,
    PeopleListByUserCommand,
    PeopleListCommand,
    PeopleUpdateCommand,
    PeopleUpdateImageCommand,
)
from .users import (
    UserCreateCommand,
    UserDeleteCommand,
    UserGetCommand,
    UserListCommand,
    UserUpdateBaseCurrencyCommand,
    UserUpdateNameCommand,
    UserUpdatePasswordCommand,
)

__all__ = [
    "CurrencyConvertCommand",
    "CurrencyCreateCommand",
    "CurrencyDeleteCommand",
    "CurrencyGetCommand",
    "CurrencyListCommand",
    "CurrencyUpdateNameCommand",
    "FxRateCreateCommand",
    "FxRateDeleteCommand",
    "FxRateGetCommand",
    "FxRateListByBaseCodeCommand",
    "FxRateListCommand",
    "FxRateUpdateRateCommand",
    "LocationArchivedCommand",
    "LocationCreateCommand",
    "LocationDeleteCommand",
    "LocationGetCommand",
    "LocationListByUserCommand",
    "LocationListCommand",
    "LocationUpdateCommand",
    "LocationUpdateLatLongCommand",
    "LocationUpdateNameCommand",
    "LoginCommand",
    "PeopleArchivedCommand",
    "PeopleCreateCommand",
    "PeopleDeleteCommand",
    "PeopleGetCommand",
    "PeopleListByUserCommand",
    "PeopleListCommand",
    "PeopleUpdateCommand",
    "PeopleUpdateImageCommand",
    "UserCreateCommand",
    "UserDeleteCommand",
    "UserGetCommand",
    "UserListCommand",
    "UserUpdateBaseCurrencyCommand",
    "UserUpdateNameCommand",
    "UserUpdatePasswordCommand",
]

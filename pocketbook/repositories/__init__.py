"""Named stored procedure bindings, one repository per entity family."""

from .currencies import CurrencyRepository, FxRateRepository
from .locations import LocationRepository
from .people import PeopleRepository
from .users import UserRepository

__all__ = [
    "CurrencyRepository",
    "FxRateRepository",
    "LocationRepository",
    "PeopleRepository",
    "UserRepository",
]

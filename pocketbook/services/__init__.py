"""Service layer orchestrating repositories, cache and response mapping."""

from .auth import AuthService
from .currencies import CurrencyService
from .locations import LocationService
from .people import PeopleService
from .users import UserService

__all__ = [
    "AuthService",
    "CurrencyService",
    "LocationService",
    "PeopleService",
    "UserService",
]

"""Entities mapped one-to-one from procedure result rows."""

from .currencies import Currency, FxRate
from .locations import Location
from .people import Person
from .users import User

__all__ = ["Currency", "FxRate", "Location", "Person", "User"]

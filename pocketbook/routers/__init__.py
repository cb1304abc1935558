"""Router exports for the HTTP API."""

from .auth import router as auth_router
from .currencies import router as currencies_router
from .health import router as health_router
from .locations import router as locations_router
from .people import router as people_router
from .users import router as users_router

__all__ = [
    "auth_router",
    "currencies_router",
    "health_router",
    "locations_router",
    "people_router",
    "users_router",
]

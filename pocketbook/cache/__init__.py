"""Look-aside cache: store, key scheme and read-through helper."""

from .aside import CacheAside
from .store import CacheStore

__all__ = ["CacheAside", "CacheStore"]

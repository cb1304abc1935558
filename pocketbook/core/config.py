"""Environment driven configuration for the pocketbook service."""
from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env file from project root
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

_FALSE_VALUES = {"0", "false", "no", "off"}


def _get_env(name: str, default: str) -> str:
    return os.getenv(name, default)


def _get_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in _FALSE_VALUES


@dataclass(slots=True)
class DatabaseSettings:
    """Connection and pool details for the relational store."""

    driver: str
    host: str
    port: int
    user: str
    password: str
    name: str
    pool_size: int = 10
    max_overflow: int = 5
    pool_timeout: int = 30
    pool_recycle: int = 1800
    echo: bool = False

    @property
    def sqlalchemy_url(self) -> str:
        """Build a SQLAlchemy compatible URL."""

        if self.password:
            credentials = f"{self.user}:{self.password}"
        else:
            credentials = self.user
        return f"{self.driver}://{credentials}@{self.host}:{self.port}/{self.name}"

    @property
    def masked_url(self) -> str:
        """Return the URL with the password hidden, for log output."""

        pwd = ":***" if self.password else ""
        return f"{self.driver}://{self.user}{pwd}@{self.host}:{self.port}/{self.name}"

    @classmethod
    def from_env(cls) -> "DatabaseSettings":
        return cls(
            driver=_get_env("DB_DRIVER", "mysql+aiomysql"),
            host=_get_env("DB_HOST", "127.0.0.1"),
            port=int(_get_env("DB_PORT", "3306")),
            user=_get_env("DB_USER", "pocketbook"),
            password=_get_env("DB_PASSWORD", "pocketbook"),
            name=_get_env("DB_NAME", "pocketbook"),
            pool_size=int(_get_env("DB_POOL_SIZE", "10")),
            max_overflow=int(_get_env("DB_MAX_OVERFLOW", "5")),
            pool_timeout=int(_get_env("DB_POOL_TIMEOUT", "30")),
            pool_recycle=int(_get_env("DB_POOL_RECYCLE", "1800")),
            echo=_get_flag("SQLALCHEMY_ECHO", False),
        )


@dataclass(slots=True)
class CacheSettings:
    """Look-aside cache configuration.

    An empty ``url`` or ``enabled=False`` runs the service without a cache.
    ``strict`` decides whether a cache outage fails the enclosing call or is
    logged and bypassed.
    """

    url: str
    enabled: bool = True
    default_ttl: int = 3600
    max_connections: int = 20
    strict: bool = True

    @property
    def is_active(self) -> bool:
        return self.enabled and bool(self.url)

    @classmethod
    def from_env(cls) -> "CacheSettings":
        return cls(
            url=_get_env("CACHE_URL", "redis://127.0.0.1:6379/0"),
            enabled=_get_flag("CACHE_ENABLED", True),
            default_ttl=int(_get_env("CACHE_DEFAULT_TTL", "3600")),
            max_connections=int(_get_env("CACHE_MAX_CONNECTIONS", "20")),
            strict=_get_flag("CACHE_STRICT", True),
        )


@dataclass(slots=True)
class AuthSettings:
    """Bearer token settings loaded from environment variables."""

    secret_key: str
    algorithm: str = "HS256"
    issuer: str = "pocketbook"
    audience: str = "pocketbook-api"
    access_token_expire_minutes: int = 60 * 24

    @classmethod
    def from_env(cls) -> "AuthSettings":
        return cls(
            secret_key=_get_env("JWT_SECRET_KEY", "change-me"),
            algorithm=_get_env("JWT_ALGORITHM", "HS256"),
            issuer=_get_env("JWT_ISSUER", "pocketbook"),
            audience=_get_env("JWT_AUDIENCE", "pocketbook-api"),
            access_token_expire_minutes=int(_get_env("JWT_EXPIRE_MINUTES", str(60 * 24))),
        )


@dataclass(slots=True)
class LoggingSettings:
    """Values forwarded to :class:`pocketbook.core.log.LoggingConfig`."""

    level: str = "INFO"
    console: bool = True
    log_dir: Path | None = None
    rich_tracebacks: bool = True
    queue: bool = True

    @classmethod
    def from_env(cls) -> "LoggingSettings":
        raw_dir = _get_env("LOG_DIR", "")
        return cls(
            level=_get_env("LOG_LEVEL", "INFO"),
            console=_get_flag("LOG_CONSOLE", True),
            log_dir=Path(raw_dir) if raw_dir else None,
            rich_tracebacks=_get_flag("LOG_RICH_TRACEBACKS", True),
            queue=_get_flag("LOG_QUEUE", True),
        )


@dataclass(slots=True)
class Settings:
    """Top-level application configuration container."""

    database: DatabaseSettings
    cache: CacheSettings
    auth: AuthSettings
    logging: LoggingSettings = field(default_factory=LoggingSettings)
    environment: str = "development"

    @classmethod
    def from_env(cls) -> "Settings":
        """Load configuration values from environment variables."""

        return cls(
            database=DatabaseSettings.from_env(),
            cache=CacheSettings.from_env(),
            auth=AuthSettings.from_env(),
            logging=LoggingSettings.from_env(),
            environment=_get_env("APP_ENV", "development"),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached ``Settings`` instance."""

    settings = Settings.from_env()

    # Import locally to avoid circular dependencies during module import time.
    from .log import get_logger

    logger = get_logger(__name__)
    logger.debug(
        "Settings initialised",
        extra={
            "environment": settings.environment,
            "database": {
                "url": settings.database.masked_url,
                "pool_size": settings.database.pool_size,
                "echo": settings.database.echo,
            },
            "cache": {
                "active": settings.cache.is_active,
                "ttl": settings.cache.default_ttl,
                "strict": settings.cache.strict,
            },
            "auth": {
                "algorithm": settings.auth.algorithm,
                "issuer": settings.auth.issuer,
                "token_ttl": settings.auth.access_token_expire_minutes,
            },
        },
    )
    return settings


__all__ = [
    "AuthSettings",
    "CacheSettings",
    "DatabaseSettings",
    "LoggingSettings",
    "Settings",
    "get_settings",
]

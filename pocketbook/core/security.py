"""Bearer token and password helpers plus the FastAPI identity dependencies."""
from __future__ import annotations

import secrets
import string
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from functools import lru_cache
from uuid import UUID

import bcrypt
import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jwt import ExpiredSignatureError, InvalidTokenError

from pocketbook.core.config import AuthSettings, get_settings
from pocketbook.core.errors import AuthenticationError
from pocketbook.core.log import get_logger, log_context

LOGGER = get_logger(__name__)

_PASSWORD_ALPHABET = string.ascii_letters + string.digits + "!@#$%^&*"


class UserRole(str, Enum):
    """Roles an authenticated identity can carry."""

    ADMIN = "ADMIN"
    USER = "USER"


# Immutable dataclass for the resolved caller identity
@dataclass(frozen=True, slots=True)
class AuthUser:
    """Identity attached to every command: the tenant and its role."""

    user_id: UUID
    role: UserRole

    @property
    def is_admin(self) -> bool:
        return self.role is UserRole.ADMIN


def hash_password(password: str) -> str:
    """Return a bcrypt hash of ``password`` suitable for storage."""

    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check ``password`` against a stored bcrypt hash."""

    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        LOGGER.warning("Stored password hash has an unexpected format")
        return False


def generate_password(length: int = 12) -> str:
    """Generate a random password drawn from letters, digits and symbols."""

    return "".join(secrets.choice(_PASSWORD_ALPHABET) for _ in range(length))


class JwtManager:
    """Issue and verify signed access tokens for :class:`AuthUser` identities."""

    def __init__(self, settings: AuthSettings) -> None:
        self._settings = settings

    @property
    def token_ttl_seconds(self) -> int:
        """Return the access token lifetime in seconds."""

        return int(self._settings.access_token_expire_minutes * 60)

    def create_access_token(self, user: AuthUser) -> str:
        """Create a signed JWT for the authenticated user."""

        now = datetime.now(tz=timezone.utc)
        expires = now + timedelta(minutes=self._settings.access_token_expire_minutes)
        payload: dict[str, object] = {
            "sub": str(user.user_id),
            "role": user.role.value,
            "iss": self._settings.issuer,
            "aud": self._settings.audience,
            "iat": int(now.timestamp()),
            "exp": int(expires.timestamp()),
        }
        return jwt.encode(payload, self._settings.secret_key, algorithm=self._settings.algorithm)

    def decode_token(self, token: str) -> AuthUser:
        """Decode a JWT and return the corresponding :class:`AuthUser`."""

        try:
            payload = jwt.decode(
                token,
                self._settings.secret_key,
                algorithms=[self._settings.algorithm],
                audience=self._settings.audience,
                issuer=self._settings.issuer,
            )
        except ExpiredSignatureError as exc:
            raise AuthenticationError("Token expired") from exc
        except InvalidTokenError as exc:
            raise AuthenticationError("Invalid token") from exc

        subject = payload.get("sub")
        role = payload.get("role")
        if not isinstance(subject, str) or not isinstance(role, str):
            raise AuthenticationError("Token payload missing required claims")
        try:
            return AuthUser(user_id=UUID(subject), role=UserRole(role))
        except ValueError as exc:
            raise AuthenticationError("Token claims invalid") from exc


@lru_cache(maxsize=1)
def get_jwt_manager() -> JwtManager:
    """Return a cached token manager built from settings."""

    return JwtManager(get_settings().auth)


_bearer = HTTPBearer(auto_error=False)


async def get_auth_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
    manager: JwtManager = Depends(get_jwt_manager),
) -> AuthUser:
    """Resolve the bearer token on the request into an :class:`AuthUser`."""

    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Login required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        user = manager.decode_token(credentials.credentials)
    except AuthenticationError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exc),
            headers={"WWW-Authenticate": "Bearer"},
        ) from exc
    log_context.bind(user_id=str(user.user_id))
    return user


__all__ = [
    "AuthUser",
    "JwtManager",
    "UserRole",
    "generate_password",
    "get_auth_user",
    "get_jwt_manager",
    "hash_password",
    "verify_password",
]

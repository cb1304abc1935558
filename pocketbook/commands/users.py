"""Commands for user accounts."""
from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from pocketbook.core.security import AuthUser
from pocketbook.schemas.pagination import PaginationRequest
from pocketbook.schemas.users import (
    UserCreateRequest,
    UserUpdateBaseCurrencyRequest,
    UserUpdateNameRequest,
    UserUpdatePasswordRequest,
)


@dataclass(frozen=True, slots=True)
class UserGetCommand:
    user_id: UUID
    auth_user: AuthUser


@dataclass(frozen=True, slots=True)
class UserCreateCommand:
    """Accounts are global: no owner is stamped, the creator is only audited."""

    user_email: str
    user_first_name: str
    user_last_name: str
    user_base_currency_code: str
    auth_user: AuthUser

    @classmethod
    def from_request(cls, request: UserCreateRequest, auth_user: AuthUser) -> "UserCreateCommand":
        return cls(
            user_email=request.user_email.strip().lower(),
            user_first_name=request.user_first_name.strip(),
            user_last_name=request.user_last_name.strip(),
            user_base_currency_code=request.user_base_currency_code.strip().upper(),
            auth_user=auth_user,
        )


@dataclass(frozen=True, slots=True)
class UserUpdatePasswordCommand:
    user_id: UUID
    user_old_password: str
    user_new_password: str
    auth_user: AuthUser

    @classmethod
    def from_request(
        cls, user_id: UUID, request: UserUpdatePasswordRequest, auth_user: AuthUser
    ) -> "UserUpdatePasswordCommand":
        return cls(
            user_id=user_id,
            user_old_password=request.user_old_password,
            user_new_password=request.user_new_password,
            auth_user=auth_user,
        )


@dataclass(frozen=True, slots=True)
class UserUpdateNameCommand:
    user_id: UUID
    user_first_name: str
    user_last_name: str
    auth_user: AuthUser

    @classmethod
    def from_request(
        cls, user_id: UUID, request: UserUpdateNameRequest, auth_user: AuthUser
    ) -> "UserUpdateNameCommand":
        return cls(
            user_id=user_id,
            user_first_name=request.user_first_name.strip(),
            user_last_name=request.user_last_name.strip(),
            auth_user=auth_user,
        )


@dataclass(frozen=True, slots=True)
class UserUpdateBaseCurrencyCommand:
    user_id: UUID
    user_base_currency_code: str
    auth_user: AuthUser

    @classmethod
    def from_request(
        cls, user_id: UUID, request: UserUpdateBaseCurrencyRequest, auth_user: AuthUser
    ) -> "UserUpdateBaseCurrencyCommand":
        return cls(
            user_id=user_id,
            user_base_currency_code=request.user_base_currency_code.strip().upper(),
            auth_user=auth_user,
        )


@dataclass(frozen=True, slots=True)
class UserDeleteCommand:
    user_id: UUID
    auth_user: AuthUser


@dataclass(frozen=True, slots=True)
class UserListCommand:
    pagination: PaginationRequest | None
    auth_user: AuthUser

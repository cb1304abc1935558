"""Schemas describing user accounts."""
from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, Field

from pocketbook.core.security import UserRole
from pocketbook.models import User


class UserResponse(BaseModel):
    """Public view of an account; the password hash never leaves the service."""

    user_id: UUID
    user_email: str
    user_role: UserRole
    user_first_name: str
    user_last_name: str
    user_base_currency_code: str

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(
            user_id=user.id,
            user_email=user.email,
            user_role=user.role,
            user_first_name=user.first_name,
            user_last_name=user.last_name,
            user_base_currency_code=user.base_currency_code,
        )


class UserCreateRequest(BaseModel):
    user_email: str = Field(min_length=3)
    user_first_name: str
    user_last_name: str
    user_base_currency_code: str = Field(min_length=1, max_length=8)


class UserUpdateNameRequest(BaseModel):
    user_first_name: str
    user_last_name: str


class UserUpdateBaseCurrencyRequest(BaseModel):
    user_base_currency_code: str = Field(min_length=1, max_length=8)


class UserUpdatePasswordRequest(BaseModel):
    user_old_password: str
    user_new_password: str = Field(min_length=8)

"""Commands for contacts; creation stamps the owner from the caller."""
from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from pocketbook.core.security import AuthUser
from pocketbook.schemas.pagination import PaginationRequest
from pocketbook.schemas.people import (
    PeopleCreateRequest,
    PeopleUpdateArchivedRequest,
    PeopleUpdateImageRequest,
    PeopleUpdateRequest,
)


@dataclass(frozen=True, slots=True)
class PeopleGetCommand:
    people_id: UUID
    auth_user: AuthUser


@dataclass(frozen=True, slots=True)
class PeopleCreateCommand:
    user_id: UUID
    people_name: str
    people_email: str | None
    people_phone: str | None
    people_image_url: str | None
    people_note: str | None
    auth_user: AuthUser

    @classmethod
    def from_request(cls, request: PeopleCreateRequest, auth_user: AuthUser) -> "PeopleCreateCommand":
        return cls(
            user_id=auth_user.user_id,
            people_name=request.people_name.strip(),
            people_email=request.people_email,
            people_phone=request.people_phone,
            people_image_url=request.people_image_url,
            people_note=request.people_note,
            auth_user=auth_user,
        )


@dataclass(frozen=True, slots=True)
class PeopleUpdateImageCommand:
    people_id: UUID
    people_image_url: str | None
    auth_user: AuthUser

    @classmethod
    def from_request(
        cls, people_id: UUID, request: PeopleUpdateImageRequest, auth_user: AuthUser
    ) -> "PeopleUpdateImageCommand":
        return cls(
            people_id=people_id,
            people_image_url=request.people_image_url,
            auth_user=auth_user,
        )


@dataclass(frozen=True, slots=True)
class PeopleUpdateCommand:
    people_id: UUID
    people_name: str
    people_email: str | None
    people_phone: str | None
    people_note: str | None
    auth_user: AuthUser

    @classmethod
    def from_request(
        cls, people_id: UUID, request: PeopleUpdateRequest, auth_user: AuthUser
    ) -> "PeopleUpdateCommand":
        return cls(
            people_id=people_id,
            people_name=request.people_name.strip(),
            people_email=request.people_email,
            people_phone=request.people_phone,
            people_note=request.people_note,
            auth_user=auth_user,
        )


@dataclass(frozen=True, slots=True)
class PeopleArchivedCommand:
    people_id: UUID
    people_archived: bool
    auth_user: AuthUser

    @classmethod
    def from_request(
        cls, people_id: UUID, request: PeopleUpdateArchivedRequest, auth_user: AuthUser
    ) -> "PeopleArchivedCommand":
        return cls(
            people_id=people_id,
            people_archived=request.people_archived,
            auth_user=auth_user,
        )


@dataclass(frozen=True, slots=True)
class PeopleDeleteCommand:
    people_id: UUID
    auth_user: AuthUser


@dataclass(frozen=True, slots=True)
class PeopleListCommand:
    pagination: PaginationRequest | None
    auth_user: AuthUser


@dataclass(frozen=True, slots=True)
class PeopleListByUserCommand:
    user_id: UUID
    auth_user: AuthUser
    search: str | None = None

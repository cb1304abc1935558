"""Schemas for contacts owned by a user."""
from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from pocketbook.models import Person


class PeopleResponse(BaseModel):
    people_id: UUID
    user_id: UUID
    people_name: str
    people_email: str | None = None
    people_phone: str | None = None
    people_image_url: str | None = None
    people_note: str | None = None
    people_archived: bool = False
    people_created_at: datetime | None = None
    people_updated_at: datetime | None = None

    @classmethod
    def from_entity(cls, person: Person) -> "PeopleResponse":
        return cls(
            people_id=person.id,
            user_id=person.user_id,
            people_name=person.name,
            people_email=person.email,
            people_phone=person.phone,
            people_image_url=person.image_url,
            people_note=person.note,
            people_archived=person.archived,
            people_created_at=person.created_at,
            people_updated_at=person.updated_at,
        )


class PeopleCreateRequest(BaseModel):
    people_name: str = Field(min_length=1)
    people_email: str | None = None
    people_phone: str | None = None
    people_image_url: str | None = None
    people_note: str | None = None


class PeopleUpdateRequest(BaseModel):
    people_name: str = Field(min_length=1)
    people_email: str | None = None
    people_phone: str | None = None
    people_note: str | None = None


class PeopleUpdateImageRequest(BaseModel):
    people_image_url: str | None = None


class PeopleUpdateArchivedRequest(BaseModel):
    people_archived: bool

"""Deterministic, colon-delimited cache keys.

``<entity>:<id>`` addresses a single entity, ``<entity>:list`` an unscoped list
and ``user:<owner>:<view>`` a per-owner list.
"""
from __future__ import annotations

from uuid import UUID

USER = "user"
CURRENCY = "currency"
FX_RATE = "fx_rate"
PERSON = "person"
LOCATION = "location"

PEOPLE_VIEW = "people"
LOCATION_VIEW = "location"


def entity_key(entity: str, identity: object) -> str:
    return f"{entity}:{identity}"


def list_key(entity: str) -> str:
    return f"{entity}:list"


def owner_list_key(owner_id: UUID, view: str) -> str:
    return f"{USER}:{owner_id}:{view}"


def user_key(user_id: UUID) -> str:
    return entity_key(USER, user_id)


def currency_key(code: str) -> str:
    return entity_key(CURRENCY, code)


def currency_list_key() -> str:
    return list_key(CURRENCY)


def fx_rate_key(fx_rate_id: UUID) -> str:
    return entity_key(FX_RATE, fx_rate_id)


def fx_rate_list_key() -> str:
    return list_key(FX_RATE)


def person_key(person_id: UUID) -> str:
    return entity_key(PERSON, person_id)


def people_by_owner_key(owner_id: UUID) -> str:
    return owner_list_key(owner_id, PEOPLE_VIEW)


def location_key(location_id: UUID) -> str:
    return entity_key(LOCATION, location_id)


def locations_by_owner_key(owner_id: UUID) -> str:
    return owner_list_key(owner_id, LOCATION_VIEW)

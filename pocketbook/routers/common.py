"""Helpers shared by the routers."""
from __future__ import annotations

from typing import TypeVar

from fastapi import HTTPException, Query, status

from pocketbook.schemas.pagination import PaginationRequest

T = TypeVar("T")


def found(value: T | None, entity: str) -> T:
    """Map a ``None`` service result to a 404 response."""

    if value is None:
        raise not_found(entity)
    return value


def not_found(entity: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{entity} not found")


def pagination_params(
    page: int | None = Query(default=None, ge=1),
    page_size: int | None = Query(default=None, ge=1),
    search: str | None = Query(default=None),
) -> PaginationRequest:
    return PaginationRequest(page=page, page_size=page_size, search=search)

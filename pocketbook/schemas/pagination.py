"""Page/page-size query parameters shared by the list endpoints."""
from __future__ import annotations

from pydantic import BaseModel, Field

DEFAULT_PAGE_SIZE = 50
MAX_PAGE_SIZE = 200


class PaginationRequest(BaseModel):
    """1-based pagination with an optional free-text search.

    When neither ``page`` nor ``page_size`` is supplied the listing is
    unbounded and :meth:`limit_offset` returns ``(None, None)``.
    """

    page: int | None = Field(default=None, ge=1)
    page_size: int | None = Field(default=None, ge=1)
    search: str | None = None

    @property
    def is_paged(self) -> bool:
        return self.page is not None or self.page_size is not None

    @property
    def query(self) -> str | None:
        if self.search is None:
            return None
        stripped = self.search.strip()
        return stripped or None

    def limit_offset(self) -> tuple[int | None, int | None]:
        """Translate the page into a ``(limit, offset)`` pair."""

        if not self.is_paged:
            return None, None
        page = max(self.page or 1, 1)
        size = min(max(self.page_size or DEFAULT_PAGE_SIZE, 1), MAX_PAGE_SIZE)
        return size, (page - 1) * size


__all__ = ["DEFAULT_PAGE_SIZE", "MAX_PAGE_SIZE", "PaginationRequest"]

import pytest
from pydantic import ValidationError

from pocketbook.schemas.pagination import MAX_PAGE_SIZE, PaginationRequest


def test_unpaged_request_is_unbounded() -> None:
    assert PaginationRequest().limit_offset() == (None, None)
    assert PaginationRequest(search="ada").limit_offset() == (None, None)


def test_page_translates_to_limit_and_offset() -> None:
    assert PaginationRequest(page=1, page_size=10).limit_offset() == (10, 0)
    assert PaginationRequest(page=3, page_size=10).limit_offset() == (10, 20)


def test_page_without_size_uses_default() -> None:
    assert PaginationRequest(page=2).limit_offset() == (50, 50)


def test_page_size_is_capped() -> None:
    limit, offset = PaginationRequest(page=2, page_size=10_000).limit_offset()

    assert limit == MAX_PAGE_SIZE
    assert offset == MAX_PAGE_SIZE


def test_blank_search_is_ignored() -> None:
    assert PaginationRequest(search="   ").query is None
    assert PaginationRequest(search="  ada ").query == "ada"


@pytest.mark.parametrize("field", ["page", "page_size"])
def test_zero_is_rejected(field: str) -> None:
    with pytest.raises(ValidationError):
        PaginationRequest(**{field: 0})

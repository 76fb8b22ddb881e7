"""Pagination — verifies metadata math for pages of a filtered collection."""

import pytest

from tiffin.core.pagination import PageRequest, build_pagination


def test_offset_skips_previous_pages():
    assert PageRequest(page=1, limit=10).offset == 0
    assert PageRequest(page=3, limit=10).offset == 20


def test_partial_last_page_rounds_up():
    meta = build_pagination(page=1, limit=10, total=25)
    assert meta == {
        "page": 1, "limit": 10, "total": 25, "totalPages": 3,
        "hasNextPage": True, "hasPrevPage": False,
    }


def test_last_page_has_no_next():
    meta = build_pagination(page=3, limit=10, total=25)
    assert meta["hasNextPage"] is False
    assert meta["hasPrevPage"] is True


def test_empty_collection_has_zero_pages():
    meta = build_pagination(page=1, limit=10, total=0)
    assert meta["totalPages"] == 0
    assert meta["hasNextPage"] is False
    assert meta["hasPrevPage"] is False


def test_page_beyond_end_reports_previous_only():
    meta = build_pagination(page=5, limit=10, total=12)
    assert meta["totalPages"] == 2
    assert meta["hasNextPage"] is False
    assert meta["hasPrevPage"] is True


@pytest.mark.parametrize("total,limit,pages", [(10, 10, 1), (11, 10, 2), (1, 100, 1)])
def test_total_pages_is_ceiling(total, limit, pages):
    assert build_pagination(1, limit, total)["totalPages"] == pages

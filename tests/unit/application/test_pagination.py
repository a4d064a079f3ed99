"""Unit tests for pagination primitives."""

from __future__ import annotations

import pytest

from mp_query.application.pagination import DEFAULT_LIMIT, Page, PageRequest


# ---------------------------------------------------------------------------
# PageRequest
# ---------------------------------------------------------------------------


class TestPageRequest:
    def test_defaults(self) -> None:
        pr = PageRequest()
        assert pr.page == 1
        assert pr.limit == DEFAULT_LIMIT == 20

    def test_offset(self) -> None:
        assert PageRequest(page=3, limit=10).offset == 20  # (3-1)*10

    def test_page_zero_raises(self) -> None:
        with pytest.raises(ValueError):
            PageRequest(page=0)

    def test_limit_zero_raises(self) -> None:
        with pytest.raises(ValueError):
            PageRequest(limit=0)


class TestPageRequestFromParams:
    def test_string_values(self) -> None:
        assert PageRequest.from_params({"page": "3", "limit": "15"}) == PageRequest(3, 15)

    def test_int_values(self) -> None:
        assert PageRequest.from_params({"page": 2, "limit": 5}) == PageRequest(2, 5)

    def test_missing_values(self) -> None:
        assert PageRequest.from_params({}) == PageRequest(1, 20)

    @pytest.mark.parametrize("page", ["0", "-1", "x", None, False, 0.4])
    def test_bad_page(self, page: object) -> None:
        assert PageRequest.from_params({"page": page}).page == 1

    @pytest.mark.parametrize("limit", ["0", "-10", "x", None, 0.9])
    def test_bad_limit(self, limit: object) -> None:
        assert PageRequest.from_params({"limit": limit}).limit == 20

    def test_truncates_float_strings(self) -> None:
        assert PageRequest.from_params({"page": "2.9", "limit": "7.5"}) == PageRequest(2, 7)

    def test_custom_default_limit(self) -> None:
        assert PageRequest.from_params({}, default_limit=50).limit == 50

    def test_max_limit(self) -> None:
        assert PageRequest.from_params({"limit": "500"}, max_limit=100).limit == 100

    def test_max_limit_none_is_unbounded(self) -> None:
        assert PageRequest.from_params({"limit": "500"}, max_limit=None).limit == 500


# ---------------------------------------------------------------------------
# Page
# ---------------------------------------------------------------------------


class TestPage:
    def test_of_slices_items(self) -> None:
        page = Page.of(list(range(100)), PageRequest(page=2, limit=10))
        assert page.items == list(range(10, 20))
        assert page.total == 100
        assert page.page == 2

    def test_total_pages(self) -> None:
        assert Page.of(list(range(25)), PageRequest(page=1, limit=10)).total_pages == 3

    def test_total_pages_exact_division(self) -> None:
        assert Page.of(list(range(20)), PageRequest(page=1, limit=10)).total_pages == 2

    def test_has_next(self) -> None:
        assert Page.of(list(range(25)), PageRequest(page=1, limit=10)).has_next

    def test_no_next_on_last_page(self) -> None:
        assert not Page.of(list(range(25)), PageRequest(page=3, limit=10)).has_next

    def test_has_previous(self) -> None:
        assert Page.of(list(range(25)), PageRequest(page=2, limit=10)).has_previous

    def test_last_page_partial(self) -> None:
        assert len(Page.of(list(range(25)), PageRequest(page=3, limit=10)).items) == 5

    def test_past_the_end_is_empty(self) -> None:
        page = Page.of(list(range(5)), PageRequest(page=4, limit=10))
        assert page.items == []
        assert page.total == 5

    def test_empty_list(self) -> None:
        page = Page.of([], PageRequest(page=1, limit=10))
        assert page.items == []
        assert page.total_pages == 0

    def test_tuple_input(self) -> None:
        assert Page.of((1, 2, 3), PageRequest(page=1, limit=2)).items == [1, 2]

    def test_map_preserves_pagination(self) -> None:
        page = Page.of(list(range(30)), PageRequest(page=2, limit=10))
        mapped = page.map(str)
        assert mapped.items == [str(i) for i in range(10, 20)]
        assert (mapped.page, mapped.limit, mapped.total) == (2, 10, 30)

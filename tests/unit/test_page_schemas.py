"""
Tests for PageRequest, SortOrder, Page and MemberSearchCondition models.
"""

import pytest
from pydantic import ValidationError

from querypage.constants import MAX_PAGE_SIZE
from querypage.exceptions import InvalidPageRequest
from querypage.schemas.filters import MemberSearchCondition
from querypage.schemas.page import (
    NullHandling,
    Page,
    PageRequest,
    SortDirection,
    SortOrder,
)
from querypage.schemas.response import PageResponseModel
from querypage.settings import app_settings


class TestPageRequest:
    """Tests for PageRequest validation."""

    def test_defaults(self):
        request = PageRequest()

        assert request.offset == 0
        assert request.limit == app_settings.DEFAULT_PAGE_SIZE
        assert request.sort == ()

    @pytest.mark.parametrize("size", [MAX_PAGE_SIZE + 1, 0])
    def test_configured_default_limit_is_validated(self, monkeypatch, size):
        monkeypatch.setattr(app_settings, "DEFAULT_PAGE_SIZE", size)

        with pytest.raises(InvalidPageRequest, match="limit"):
            PageRequest()

    def test_negative_offset_rejected(self):
        with pytest.raises(InvalidPageRequest, match="offset"):
            PageRequest(offset=-1, limit=10)

    @pytest.mark.parametrize("limit", [0, -5])
    def test_non_positive_limit_rejected(self, limit):
        with pytest.raises(InvalidPageRequest, match="limit"):
            PageRequest(offset=0, limit=limit)

    def test_oversize_limit_rejected(self):
        with pytest.raises(InvalidPageRequest, match=str(MAX_PAGE_SIZE)):
            PageRequest(limit=MAX_PAGE_SIZE + 1)

    def test_max_limit_accepted(self):
        assert PageRequest(limit=MAX_PAGE_SIZE).limit == MAX_PAGE_SIZE

    def test_non_integer_offset_is_validation_error(self):
        with pytest.raises(ValidationError):
            PageRequest(offset="abc", limit=10)  # type: ignore[arg-type]

    def test_request_is_immutable(self):
        request = PageRequest(offset=0, limit=10)

        with pytest.raises(ValidationError):
            request.offset = 5  # type: ignore[misc]

    def test_of_page_number(self):
        request = PageRequest.of(3, 10)

        assert request.offset == 20
        assert request.limit == 10

    def test_of_first_page(self):
        assert PageRequest.of(1, 5).offset == 0

    def test_of_rejects_page_zero(self):
        with pytest.raises(InvalidPageRequest, match="page"):
            PageRequest.of(0, 10)


class TestSortOrder:
    """Tests for SortOrder parsing."""

    def test_parse_field_only(self):
        order = SortOrder.parse("username")

        assert order.field == "username"
        assert order.direction == SortDirection.ASC
        assert order.nulls == NullHandling.NATIVE

    def test_parse_direction(self):
        order = SortOrder.parse("age,DESC")

        assert order.field == "age"
        assert order.direction == SortDirection.DESC

    def test_parse_nulls(self):
        order = SortOrder.parse("team_name, asc, last")

        assert order.field == "team_name"
        assert order.nulls == NullHandling.LAST

    @pytest.mark.parametrize(
        "expression", ["", ",desc", "age,sideways", "age,asc,middle", "a,b,c,d"]
    )
    def test_parse_invalid(self, expression):
        with pytest.raises(InvalidPageRequest):
            SortOrder.parse(expression)


class TestPage:
    """Tests for Page invariants and derived properties."""

    def test_total_smaller_than_content_rejected(self):
        with pytest.raises(ValidationError, match="smaller than content"):
            Page(content=[1, 2, 3], offset=0, limit=5, total=2)

    def test_content_larger_than_limit_rejected(self):
        with pytest.raises(ValidationError, match="limit"):
            Page(content=[1, 2, 3], offset=0, limit=2, total=3)

    def test_negative_total_rejected(self):
        with pytest.raises(ValidationError):
            Page(content=[], offset=0, limit=5, total=-1)

    def test_first_of_several_pages(self):
        page = Page(content=["a", "b"], offset=0, limit=2, total=5)

        assert page.number == 1
        assert page.number_of_elements == 2
        assert page.total_pages == 3
        assert page.has_next is True
        assert page.has_previous is False
        assert page.is_first is True
        assert page.is_last is False

    def test_last_page(self):
        page = Page(content=["e"], offset=4, limit=2, total=5)

        assert page.number == 3
        assert page.has_next is False
        assert page.is_last is True
        assert page.has_previous is True

    def test_empty_page(self):
        page = Page(content=[], offset=0, limit=10, total=0)

        assert page.total_pages == 0
        assert page.is_first is True
        assert page.is_last is True

    def test_response_model_from_page(self):
        page = Page(content=["c", "d"], offset=2, limit=2, total=4)

        response = PageResponseModel[str].from_page(page)

        assert response.items == ["c", "d"]
        assert response.offset == 2
        assert response.total == 4
        assert response.meta.page == 2
        assert response.meta.per_page == 2
        assert response.meta.pages == 2


class TestMemberSearchCondition:
    """Tests for the search condition schema."""

    def test_to_dict_excludes_none_values(self):
        condition = MemberSearchCondition(username_eq="member1")

        assert condition.to_dict() == {"username_eq": "member1"}

    def test_blank_text_is_kept_on_the_model(self):
        condition = MemberSearchCondition(username_eq="  ")

        assert condition.username_eq == "  "

    def test_extra_fields_forbidden(self):
        with pytest.raises(
            ValidationError, match="Extra inputs are not permitted"
        ):
            MemberSearchCondition(nickname="x")  # type: ignore[call-arg]

    def test_invalid_age_type(self):
        with pytest.raises(
            ValidationError, match="Input should be a valid integer"
        ):
            MemberSearchCondition(age_goe="old")  # type: ignore[arg-type]

    def test_condition_is_immutable(self):
        condition = MemberSearchCondition(age_goe=10)

        with pytest.raises(ValidationError):
            condition.age_goe = 20  # type: ignore[misc]

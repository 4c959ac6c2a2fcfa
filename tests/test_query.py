"""
Tests for the query serializer.

This module tests parse_query / serialize_query and the per-field sanitizers:
- Parsing each URL parameter
- Dropping malformed and out-of-range values
- Omitting defaults when serializing
- Round-tripping valid models
"""

import pytest

from recipe_browser.models import FilterModel
from recipe_browser.query import (
    build_api_params,
    build_url,
    parse_int,
    parse_query,
    sanitize_tag_ids,
    serialize_query,
)

TAG_A = "123e4567-e89b-12d3-a456-426614174000"
TAG_B = "123e4567-e89b-12d3-a456-426614174001"


class TestParseQuery:
    """Test cases for parse_query."""

    def test_empty_query_gives_defaults(self):
        """Test that an empty query parses to the default model."""
        filters = parse_query("")
        assert filters == FilterModel()
        assert filters.sort_by == "createdAt"
        assert filters.sort_order == "desc"
        assert filters.page == 1

    def test_leading_question_mark_is_accepted(self):
        """Test that "?search=pasta" and "search=pasta" parse the same."""
        assert parse_query("?search=pasta") == parse_query("search=pasta")

    def test_parse_all_fields(self):
        """Test parsing a query with every parameter set."""
        filters = parse_query(
            f"search=pasta&tags={TAG_A},{TAG_B}&maxCalories=500&maxPrepTime=30"
            "&sortBy=title&sortOrder=asc&page=3"
        )
        assert filters.search == "pasta"
        assert filters.tag_ids == (TAG_A, TAG_B)
        assert filters.max_calories == 500
        assert filters.max_prep_time == 30
        assert filters.sort_by == "title"
        assert filters.sort_order == "asc"
        assert filters.page == 3

    def test_search_is_trimmed_and_decoded(self):
        """Test that search values are URL-decoded and trimmed."""
        assert parse_query("search=%20%20chicken+curry%20").search == "chicken curry"

    def test_blank_search_is_dropped(self):
        """Test that a whitespace-only search is treated as absent."""
        assert parse_query("search=%20%20").search is None

    def test_overlong_search_is_dropped(self):
        """Test that searches longer than 255 characters are dropped."""
        assert parse_query("search=" + "a" * 256).search is None
        assert parse_query("search=" + "a" * 255).search == "a" * 255

    def test_search_length_counts_surrounding_spaces(self):
        """Test that the 255-character limit applies before trimming."""
        assert parse_query("search=" + "a" * 255 + "%20%20").search is None
        assert parse_query("search=%20" + "a" * 253 + "%20").search == "a" * 253

    @pytest.mark.parametrize("param", ["page", "maxCalories", "maxPrepTime"])
    def test_huge_numbers_fall_back(self, param):
        """Test that thousands of digits are treated as invalid, not raised."""
        filters = parse_query(f"{param}=" + "9" * 5000)
        assert filters == FilterModel()

    def test_non_ascii_digits_are_invalid(self):
        """Test that only ASCII digits count as numbers."""
        filters = parse_query("page=%D9%A3&maxCalories=%D9%A3%D9%A0%D9%A0")
        assert filters.page == 1
        assert filters.max_calories is None

    def test_invalid_tag_ids_are_dropped(self):
        """Test that only well-formed tag ids survive."""
        filters = parse_query(f"tags=bad-id,{TAG_A}")
        assert filters.tag_ids == (TAG_A,)

    def test_all_invalid_tags_leave_field_absent(self):
        """Test that no valid tag id means tag_ids is None, not empty."""
        assert parse_query("tags=bad-id,also-bad").tag_ids is None
        assert parse_query("tags=").tag_ids is None

    def test_tag_ids_are_case_insensitive(self):
        """Test that uppercase hex tag ids are accepted."""
        upper = TAG_A.upper()
        assert parse_query(f"tags={upper}").tag_ids == (upper,)

    @pytest.mark.parametrize("value", ["0", "10001", "-5", "abc", ""])
    def test_invalid_max_calories(self, value):
        """Test that out-of-range or malformed calories fall back to None."""
        assert parse_query(f"maxCalories={value}").max_calories is None

    @pytest.mark.parametrize("value,expected", [("1", 1), ("10000", 10000), ("450kcal", 450)])
    def test_valid_max_calories(self, value, expected):
        """Test calorie bounds and lenient leading-digit parsing."""
        assert parse_query(f"maxCalories={value}").max_calories == expected

    @pytest.mark.parametrize("value", ["0", "1441", "soon"])
    def test_invalid_max_prep_time(self, value):
        """Test that out-of-range or malformed prep times fall back to None."""
        assert parse_query(f"maxPrepTime={value}").max_prep_time is None

    def test_max_prep_time_upper_bound(self):
        """Test that a full day of prep time is still valid."""
        assert parse_query("maxPrepTime=1440").max_prep_time == 1440

    def test_unknown_sort_values_fall_back(self):
        """Test that unknown sort values use the defaults."""
        filters = parse_query("sortBy=rating&sortOrder=sideways")
        assert filters.sort_by == "createdAt"
        assert filters.sort_order == "desc"

    @pytest.mark.parametrize("value", ["0", "-2", "abc"])
    def test_invalid_page_falls_back(self, value):
        """Test that invalid pages fall back to page 1."""
        assert parse_query(f"page={value}").page == 1

    def test_invalid_values_do_not_affect_valid_ones(self):
        """Test that one bad parameter doesn't spoil the rest."""
        filters = parse_query("maxCalories=invalid&page=abc&search=soup")
        assert filters.max_calories is None
        assert filters.page == 1
        assert filters.search == "soup"

    def test_unknown_parameters_are_ignored(self):
        """Test that unrecognized parameters are ignored."""
        assert parse_query("utm_source=newsletter") == FilterModel()

    def test_repeated_parameter_uses_first_value(self):
        """Test that the first occurrence of a repeated parameter wins."""
        assert parse_query("page=2&page=5").page == 2


class TestSerializeQuery:
    """Test cases for serialize_query and build_url."""

    def test_default_model_serializes_to_empty_string(self):
        """Test that the default model produces no query at all."""
        assert serialize_query(FilterModel()) == ""

    def test_defaults_are_omitted(self):
        """Test that fields equal to their default are left out."""
        query = serialize_query(FilterModel(search="pasta", sort_by="createdAt", sort_order="desc", page=1))
        assert query == "search=pasta"

    def test_field_order_is_fixed(self):
        """Test that parameters always appear in the encoding order."""
        filters = FilterModel(
            page=2,
            sort_order="asc",
            sort_by="title",
            max_prep_time=30,
            max_calories=500,
            tag_ids=(TAG_A,),
            search="pasta",
        )
        assert serialize_query(filters) == (
            f"search=pasta&tags={TAG_A}&maxCalories=500&maxPrepTime=30"
            "&sortBy=title&sortOrder=asc&page=2"
        )

    def test_tags_are_comma_joined(self):
        """Test that multiple tags are joined with literal commas."""
        assert serialize_query(FilterModel(tag_ids=(TAG_A, TAG_B))) == f"tags={TAG_A},{TAG_B}"

    def test_search_is_encoded(self):
        """Test that special characters in search are URL-encoded."""
        query = serialize_query(FilterModel(search="mac & cheese"))
        assert query == "search=mac+%26+cheese"

    def test_build_url_without_query(self):
        """Test that the default model yields the bare path."""
        assert build_url("/recipes", FilterModel()) == "/recipes"

    def test_build_url_with_query(self):
        """Test that non-default filters are appended after "?"."""
        assert build_url("/recipes", FilterModel(page=4)) == "/recipes?page=4"


class TestRoundTrip:
    """parse_query(serialize_query(m)) == m for valid models."""

    @pytest.mark.parametrize("filters", [
        FilterModel(),
        FilterModel(search="pasta"),
        FilterModel(search="mac & cheese, extra = crispy"),
        FilterModel(tag_ids=(TAG_A, TAG_B)),
        FilterModel(max_calories=1, max_prep_time=1440),
        FilterModel(sort_by="prepTime", sort_order="asc", page=12),
        FilterModel(search="soup", tag_ids=(TAG_B,), max_calories=10000, max_prep_time=1,
                    sort_by="updatedAt", sort_order="desc", page=2),
    ])
    def test_round_trip(self, filters):
        """Test that valid models survive serialization unchanged."""
        assert parse_query(serialize_query(filters)) == filters


class TestHelpers:
    """Test cases for the parsing helpers and API parameters."""

    def test_parse_int(self):
        """Test the lenient integer parser."""
        assert parse_int("42") == 42
        assert parse_int(" 7 ") == 7
        assert parse_int("30min") == 30
        assert parse_int("-3") == -3
        assert parse_int("abc") is None
        assert parse_int(None) is None
        assert parse_int(True) is None
        assert parse_int(5) == 5

    def test_parse_int_limits(self):
        """Test that oversized digit runs and non-ASCII digits are rejected."""
        assert parse_int("9" * 12) == 999999999999
        assert parse_int("9" * 13) is None
        assert parse_int("1" * 5000) is None
        assert parse_int("٣") is None
        assert parse_int("-" + "9" * 13) is None

    def test_sanitize_tag_ids_dedupes(self):
        """Test that duplicate tag ids keep only the first occurrence."""
        assert sanitize_tag_ids([TAG_A, TAG_B, TAG_A]) == (TAG_A, TAG_B)

    def test_sanitize_tag_ids_empty(self):
        """Test that an empty selection becomes None."""
        assert sanitize_tag_ids([]) is None
        assert sanitize_tag_ids(None) is None

    def test_build_api_params_always_sends_paging_and_sort(self):
        """Test that API params include page, limit and sort even at defaults."""
        assert build_api_params(FilterModel()) == {
            "page": "1",
            "limit": "20",
            "sortBy": "createdAt",
            "sortOrder": "desc",
        }

    def test_build_api_params_includes_filters(self):
        """Test that active filters are forwarded to the service."""
        params = build_api_params(FilterModel(search="pasta", tag_ids=(TAG_A, TAG_B), max_calories=600), limit=12)
        assert params["search"] == "pasta"
        assert params["tags"] == f"{TAG_A},{TAG_B}"
        assert params["maxCalories"] == "600"
        assert "maxPrepTime" not in params
        assert params["limit"] == "12"

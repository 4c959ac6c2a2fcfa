"""
Tests for the filter model.

Direct construction must reject anything the query serializer could not
reproduce, so every constructed model survives a URL round trip.
"""

import pytest
from pydantic import ValidationError

from recipe_browser.models import FilterModel
from recipe_browser.query import parse_query, serialize_query
from recipe_browser.store import FilterStateStore

TAG_A = "123e4567-e89b-12d3-a456-426614174000"


class TestFilterModelValidation:
    """Test cases for FilterModel construction rules."""

    @pytest.mark.parametrize("tag_ids", [("bad",), ("not-a-uuid",), (TAG_A, "x" * 36), (TAG_A + "0",)])
    def test_invalid_tag_ids_rejected(self, tag_ids):
        """Test that malformed tag identifiers raise."""
        with pytest.raises(ValidationError):
            FilterModel(tag_ids=tag_ids)

    def test_duplicate_tag_ids_rejected(self):
        """Test that a tag id may appear only once."""
        with pytest.raises(ValidationError):
            FilterModel(tag_ids=(TAG_A, TAG_A))

    def test_empty_tag_ids_rejected(self):
        """Test that no selection must be None, not an empty tuple."""
        with pytest.raises(ValidationError):
            FilterModel(tag_ids=())

    @pytest.mark.parametrize("search", [" soup", "soup ", "", "a" * 256])
    def test_invalid_search_rejected(self, search):
        """Test that untrimmed, empty and overlong search terms raise."""
        with pytest.raises(ValidationError):
            FilterModel(search=search)

    def test_uppercase_tag_ids_accepted(self):
        """Test that the tag id pattern is case-insensitive."""
        filters = FilterModel(tag_ids=(TAG_A.upper(),))
        assert filters.tag_ids == (TAG_A.upper(),)

    def test_valid_model_round_trips(self):
        """Test that a constructed model survives serialization unchanged."""
        filters = FilterModel(search="soup", tag_ids=(TAG_A,), max_calories=500, page=2)
        assert parse_query(serialize_query(filters)) == filters

    def test_replace_cannot_receive_invalid_model(self):
        """Test that invalid tags fail before they reach the store."""
        store = FilterStateStore()
        with pytest.raises(ValidationError):
            store.replace(FilterModel(tag_ids=("not-a-uuid",)))
        assert store.filters == FilterModel()

"""
Tests for the active filter chips.
"""

from recipe_browser.chips import FilterChip, build_filter_chips, show_clear_all
from recipe_browser.models import FilterModel, Tag
from recipe_browser.store import FilterStateStore

TAG_A = "123e4567-e89b-12d3-a456-426614174000"
TAG_B = "123e4567-e89b-12d3-a456-426614174001"
TAGS = [Tag(id=TAG_A, name="Vegan"), Tag(id=TAG_B, name="Quick")]


class TestFilterChips:
    """Test cases for build_filter_chips."""

    def test_no_filters_no_chips(self):
        """Test that the default model shows no chips."""
        assert build_filter_chips(FilterModel(), TAGS) == []

    def test_all_chips(self):
        """Test chip labels and removal keys for every filter type."""
        filters = FilterModel(search="pasta", tag_ids=(TAG_B, TAG_A), max_calories=500, max_prep_time=30)
        assert build_filter_chips(filters, TAGS) == [
            FilterChip(key="search", label='Search: "pasta"'),
            FilterChip(key="tagId", label="Quick", value=TAG_B),
            FilterChip(key="tagId", label="Vegan", value=TAG_A),
            FilterChip(key="maxCalories", label="Max 500 kcal"),
            FilterChip(key="maxPrepTime", label="Max 30 min"),
        ]

    def test_unknown_tags_are_skipped(self):
        """Test that tags without a known name get no chip."""
        filters = FilterModel(tag_ids=(TAG_A,))
        assert build_filter_chips(filters, []) == []

    def test_clear_all_needs_two_chips(self):
        """Test that "Clear all" only shows with more than one chip."""
        one = build_filter_chips(FilterModel(search="pasta"), TAGS)
        two = build_filter_chips(FilterModel(search="pasta", max_calories=400), TAGS)
        assert not show_clear_all(one)
        assert show_clear_all(two)

    def test_chip_removes_its_filter(self):
        """Test that a chip's key/value removes exactly that filter from the store."""
        store = FilterStateStore(FilterModel(tag_ids=(TAG_A, TAG_B), max_calories=400))
        chip = build_filter_chips(store.filters, TAGS)[0]
        store.remove_filter(chip.key, chip.value)
        assert store.filters.tag_ids == (TAG_B,)
        assert store.filters.max_calories == 400

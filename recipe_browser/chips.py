"""
Active filter chips.

Turns the current filters into removable chips for display above the recipe
grid. Each chip carries the key/value pair to hand back to
FilterStateStore.remove_filter().
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional

from recipe_browser.models import FilterModel, Tag
from recipe_browser.store import (
    FILTER_KEY_MAX_CALORIES,
    FILTER_KEY_MAX_PREP_TIME,
    FILTER_KEY_SEARCH,
    FILTER_KEY_TAG,
)


@dataclass(frozen=True)
class FilterChip:
    key: str
    label: str
    value: Optional[str] = None


def build_filter_chips(filters: FilterModel, tags: Iterable[Tag] = ()) -> List[FilterChip]:
    """
    Build the chips for all active filters.

    Tag chips show the tag name; selected tags missing from tags are skipped
    since there is no name to show for them.
    """
    chips = []

    if filters.search:
        chips.append(FilterChip(key=FILTER_KEY_SEARCH, label=f'Search: "{filters.search}"'))

    if filters.tag_ids:
        names = {tag.id: tag.name for tag in tags}
        for tag_id in filters.tag_ids:
            if tag_id in names:
                chips.append(FilterChip(key=FILTER_KEY_TAG, label=names[tag_id], value=tag_id))

    if filters.max_calories is not None:
        chips.append(FilterChip(key=FILTER_KEY_MAX_CALORIES, label=f"Max {filters.max_calories} kcal"))

    if filters.max_prep_time is not None:
        chips.append(FilterChip(key=FILTER_KEY_MAX_PREP_TIME, label=f"Max {filters.max_prep_time} min"))

    return chips


def show_clear_all(chips: List[FilterChip]) -> bool:
    """The "Clear all" action only appears once more than one chip is shown."""
    return len(chips) > 1

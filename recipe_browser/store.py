"""
Filter State Store.

Holds the current FilterModel and exposes one mutator per logical field.
Every filter mutation resets the page to 1; only set_page() moves between
pages. Values go through the same sanitizers as the URL parser, so the store
never holds a value that could not be serialized.

Two kinds of listeners:
- subscribe(): every model change, including navigation replaces. Data
  fetchers observe this.
- subscribe_mutations(): only changes made through the mutators. The history
  bridge observes this to push URL entries.

replace() is the browser-navigation entry point and never notifies mutation
listeners.
"""

import logging
from typing import Callable, Iterable, List, Optional

from recipe_browser.models import DEFAULT_PAGE, FilterModel
from recipe_browser.query import (
    sanitize_max_calories,
    sanitize_max_prep_time,
    sanitize_search,
    sanitize_sort_by,
    sanitize_sort_order,
    sanitize_tag_ids,
)

logger = logging.getLogger(__name__)

Listener = Callable[[FilterModel], None]

FILTER_KEY_SEARCH = "search"
FILTER_KEY_TAG = "tagId"
FILTER_KEY_MAX_CALORIES = "maxCalories"
FILTER_KEY_MAX_PREP_TIME = "maxPrepTime"

# Scalar removal keys mapped to FilterModel attributes
_SCALAR_FILTER_FIELDS = {
    FILTER_KEY_SEARCH: "search",
    FILTER_KEY_MAX_CALORIES: "max_calories",
    FILTER_KEY_MAX_PREP_TIME: "max_prep_time",
}


def count_active_filters(filters: FilterModel) -> int:
    """
    Count active filters for badges: one per scalar filter, one per tag.

    Sort fields and page are not filters and are never counted.
    """
    count = 0
    if filters.search:
        count += 1
    if filters.tag_ids:
        count += len(filters.tag_ids)
    if filters.max_calories is not None:
        count += 1
    if filters.max_prep_time is not None:
        count += 1
    return count


def _unsubscriber(listeners: List[Listener], listener: Listener) -> Callable[[], None]:
    def unsubscribe() -> None:
        if listener in listeners:
            listeners.remove(listener)
    return unsubscribe


class FilterStateStore:
    """
    Single source of truth for the recipe filters of one page load.

    Args:
        initial: Starting model, normally parsed from the current URL
    """

    def __init__(self, initial: Optional[FilterModel] = None):
        self._filters = initial if initial is not None else FilterModel()
        self._listeners: List[Listener] = []
        self._mutation_listeners: List[Listener] = []
        self.is_filter_panel_open = False

    @property
    def filters(self) -> FilterModel:
        return self._filters

    @property
    def active_filter_count(self) -> int:
        return count_active_filters(self._filters)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Observe every model change. Returns an unsubscribe callable."""
        self._listeners.append(listener)
        return _unsubscriber(self._listeners, listener)

    def subscribe_mutations(self, listener: Listener) -> Callable[[], None]:
        """Observe changes made through the mutators only. Returns an unsubscribe callable."""
        self._mutation_listeners.append(listener)
        return _unsubscriber(self._mutation_listeners, listener)

    def _notify(self, listeners: Iterable[Listener]) -> None:
        for listener in list(listeners):
            listener(self._filters)

    def _commit(self, filters: FilterModel) -> None:
        self._filters = filters
        self._notify(self._mutation_listeners)
        self._notify(self._listeners)

    def _update_filter(self, **changes) -> None:
        """Apply filter changes and reset to the first page."""
        changes["page"] = DEFAULT_PAGE
        self._commit(self._filters.model_copy(update=changes))

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def set_search(self, value: Optional[str]) -> None:
        self._update_filter(search=sanitize_search(value))

    def set_tag_ids(self, ids: Optional[Iterable[str]]) -> None:
        self._update_filter(tag_ids=sanitize_tag_ids(list(ids) if ids is not None else None))

    def set_max_calories(self, value: Optional[int]) -> None:
        self._update_filter(max_calories=sanitize_max_calories(value))

    def set_max_prep_time(self, value: Optional[int]) -> None:
        self._update_filter(max_prep_time=sanitize_max_prep_time(value))

    def set_sort_by(self, sort_by: str, sort_order: Optional[str] = None) -> None:
        """
        Change the sort field and, optionally, the sort direction.

        An omitted sort_order keeps the current direction.
        """
        order = self._filters.sort_order if sort_order is None else sanitize_sort_order(sort_order)
        self._update_filter(sort_by=sanitize_sort_by(sort_by), sort_order=order)

    def set_page(self, page: int) -> None:
        """Move to a page (clamped to >= 1). Other fields are untouched."""
        try:
            target = max(DEFAULT_PAGE, int(page))
        except (TypeError, ValueError, OverflowError):
            logger.debug("Ignoring non-numeric page: %r", page)
            target = DEFAULT_PAGE
        self._commit(self._filters.model_copy(update={"page": target}))

    def clear_filters(self) -> None:
        """Reset all filters to defaults, keeping the current sort."""
        self._commit(FilterModel(
            sort_by=self._filters.sort_by,
            sort_order=self._filters.sort_order,
            page=DEFAULT_PAGE,
        ))

    def remove_filter(self, key: str, value: Optional[str] = None) -> None:
        """
        Remove a single active filter.

        Args:
            key: "search", "maxCalories", "maxPrepTime" or "tagId"
            value: Tag identifier to remove when key is "tagId"

        Unknown keys leave the filters as they are (a warning is logged);
        the page is reset to 1 in every case.
        """
        changes = {}

        if key in _SCALAR_FILTER_FIELDS:
            changes[_SCALAR_FILTER_FIELDS[key]] = None
        elif key == FILTER_KEY_TAG:
            if value and self._filters.tag_ids:
                remaining = tuple(tag_id for tag_id in self._filters.tag_ids if tag_id != value)
                changes["tag_ids"] = remaining or None
        else:
            logger.warning("Unknown filter key: %s", key)

        self._update_filter(**changes)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def replace(self, filters: FilterModel) -> None:
        """
        Replace the whole model after browser navigation.

        The page is taken as-is and mutation listeners are not notified.
        """
        self._filters = filters
        self._notify(self._listeners)

    # ------------------------------------------------------------------
    # UI state
    # ------------------------------------------------------------------

    def toggle_filter_panel(self) -> None:
        self.is_filter_panel_open = not self.is_filter_panel_open

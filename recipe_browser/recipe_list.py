"""
Recipe list controller.

Observes the filter store and keeps the current page of recipes loaded. Any
filter change triggers a fetch: changes made while a search term is active
are debounced, everything else fetches right away and cancels a pending
debounced fetch.

Debounced fetches run on a timer thread. Every filter change and every load
takes a new request token, and a response is applied only while its token is
still the newest, so a slow fetch never overwrites results for a later
filter change.

Errors from the service are logged and kept in `error`; recipes and
pagination are cleared so stale results are never shown next to an error.
"""

import logging
import threading
from typing import Callable, List, Optional

from recipe_browser.config import FilterUiConfig
from recipe_browser.debounce import Debouncer
from recipe_browser.models import FilterModel, PaginationModel, RecipeListItem, RecipeListResponse
from recipe_browser.service import RecipeServiceError
from recipe_browser.store import FilterStateStore

logger = logging.getLogger(__name__)

FetchRecipes = Callable[[FilterModel], RecipeListResponse]


class RecipeListController:
    """
    Data-fetching collaborator for the recipe list.

    Args:
        store: Filter store to observe
        fetch: Callable returning a RecipeListResponse for a FilterModel,
            typically RecipeService(...).list_recipes
        debounce_ms: Quiet window for search-driven fetches (default:
            SEARCH_DEBOUNCE_MS)
        timer_factory: Passed to Debouncer (tests)
        autoload: Fetch for the initial filters right away
    """

    def __init__(
        self,
        store: FilterStateStore,
        fetch: FetchRecipes,
        debounce_ms: Optional[int] = None,
        timer_factory=None,
        autoload: bool = True,
    ):
        self.store = store
        self._fetch = fetch
        if debounce_ms is None:
            debounce_ms = FilterUiConfig.get_search_debounce_ms()
        self._debounced_load = Debouncer(self.load, wait_ms=debounce_ms, timer_factory=timer_factory)

        self._lock = threading.Lock()
        self._request = 0

        self.recipes: List[RecipeListItem] = []
        self.pagination: Optional[PaginationModel] = None
        self.error: Optional[str] = None
        self.is_loading = False

        self._unsubscribe = store.subscribe(self._on_filters_changed)
        if autoload:
            self.load(store.filters)

    def _next_request(self) -> int:
        with self._lock:
            self._request += 1
            self.is_loading = True
            return self._request

    def _on_filters_changed(self, filters: FilterModel) -> None:
        if filters.search is not None:
            # In-flight results are for older filters from here on
            self._next_request()
            self._debounced_load(filters)
        else:
            self._debounced_load.cancel()
            self.load(filters)

    def load(self, filters: FilterModel) -> None:
        """Fetch recipes for filters and update the controller state."""
        request = self._next_request()
        with self._lock:
            self.error = None

        try:
            response = self._fetch(filters)
        except RecipeServiceError as e:
            with self._lock:
                if request != self._request:
                    logger.debug("Discarding error from superseded request %d", request)
                    return
                logger.error("Error fetching recipes: %s", e.message)
                self.error = e.message
                self.recipes = []
                self.pagination = None
                self.is_loading = False
            return

        with self._lock:
            if request != self._request:
                logger.debug("Discarding results from superseded request %d", request)
                return
            self.recipes = response.recipes
            self.pagination = response.pagination
            self.is_loading = False

    def refetch(self) -> None:
        """Reload the current filters immediately, e.g. after an error."""
        self._debounced_load.cancel()
        self.load(self.store.filters)

    def close(self) -> None:
        """Cancel pending fetches and stop observing the store."""
        self._debounced_load.cancel()
        self._unsubscribe()

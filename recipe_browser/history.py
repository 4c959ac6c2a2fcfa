"""
History Bridge between the filter store and the browser location.

The browser location is modelled as an injected Location so the store and the
bridge can be exercised without a browser. Two entry points, one per
direction:

- handle_mutation(): a store mutator changed the filters -> push a new
  history entry whose query is serialize_query(filters).
- handle_navigation(): the user went back/forward -> re-parse the current
  query and replace the store model wholesale. No history entry is pushed.

Implementations:
- InMemoryLocation: a history stack with back()/forward(), used in tests and
  headless runs.
- streamlit_app.utils.location.StreamlitLocation: backed by st.query_params.
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Tuple

from recipe_browser.models import FilterModel
from recipe_browser.query import build_url, parse_query
from recipe_browser.store import FilterStateStore

logger = logging.getLogger(__name__)

NavigationListener = Callable[[], None]


class Location(ABC):
    """
    Read/write access to the current URL plus navigation notifications.

    Attributes:
        path: Path part of the current URL (e.g. "/recipes")
    """
    path: str

    @abstractmethod
    def get_query(self) -> str:
        """
        Return the current query string, without the leading "?".
        """
        pass

    @abstractmethod
    def push(self, url: str) -> None:
        """
        Add a history entry for url (path with optional "?query") without reloading.
        """
        pass

    @abstractmethod
    def subscribe(self, listener: NavigationListener) -> Callable[[], None]:
        """
        Call listener after each back/forward navigation. Returns an unsubscribe callable.
        """
        pass


class InMemoryLocation(Location):
    """
    History stack kept in memory.

    push() drops any forward entries, like a browser does. back() and
    forward() move through the stack and notify navigation listeners.
    """

    def __init__(self, url: str = "/recipes"):
        self._entries: List[str] = [url]
        self._index = 0
        self._listeners: List[NavigationListener] = []

    @staticmethod
    def _split(url: str) -> Tuple[str, str]:
        path, _, query = url.partition("?")
        return path, query

    @property
    def url(self) -> str:
        return self._entries[self._index]

    @property
    def path(self) -> str:
        return self._split(self.url)[0]

    @property
    def entries(self) -> List[str]:
        return list(self._entries)

    def get_query(self) -> str:
        return self._split(self.url)[1]

    def push(self, url: str) -> None:
        del self._entries[self._index + 1:]
        self._entries.append(url)
        self._index += 1

    def subscribe(self, listener: NavigationListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)
        return unsubscribe

    def _navigate(self, step: int) -> bool:
        target = self._index + step
        if target < 0 or target >= len(self._entries):
            return False
        self._index = target
        for listener in list(self._listeners):
            listener()
        return True

    def back(self) -> bool:
        """Go one entry back. Returns False when already at the oldest entry."""
        return self._navigate(-1)

    def forward(self) -> bool:
        """Go one entry forward. Returns False when already at the newest entry."""
        return self._navigate(1)


class HistoryBridge:
    """
    Keeps a FilterStateStore and a Location in sync.

    Call attach() to start listening and detach() on teardown.
    """

    def __init__(self, store: FilterStateStore, location: Location):
        self.store = store
        self.location = location
        self._unsubscribers: List[Callable[[], None]] = []

    @property
    def attached(self) -> bool:
        return bool(self._unsubscribers)

    def attach(self) -> "HistoryBridge":
        if not self.attached:
            self._unsubscribers = [
                self.store.subscribe_mutations(self.handle_mutation),
                self.location.subscribe(self.handle_navigation),
            ]
        return self

    def detach(self) -> None:
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []

    def handle_mutation(self, filters: FilterModel) -> None:
        """Push a history entry for filters changed through a store mutator."""
        url = build_url(self.location.path, filters)
        logger.debug("Pushing history entry: %s", url)
        self.location.push(url)

    def handle_navigation(self) -> None:
        """Re-derive the filters from the current URL after back/forward."""
        filters = parse_query(self.location.get_query())
        logger.debug("Navigation restored filters: %s", filters)
        self.store.replace(filters)


def connect_filters(location: Location, store: Optional[FilterStateStore] = None) -> Tuple[FilterStateStore, HistoryBridge]:
    """
    Build the filter store for a page load and attach it to the location.

    Args:
        location: Browser location to read the initial query from
        store: Existing store to attach instead of parsing the URL

    Returns:
        (store, attached bridge)
    """
    if store is None:
        store = FilterStateStore(parse_query(location.get_query()))
    bridge = HistoryBridge(store, location).attach()
    return store, bridge

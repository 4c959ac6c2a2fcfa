"""
Browser location backed by Streamlit's query parameters.

StreamlitLocation implements recipe_browser.history.Location on top of
st.query_params so the filter store and history bridge work unchanged inside
the Streamlit app.

Streamlit has no popstate event. Instead, poll() runs at the top of every
script run: if the address-bar query no longer matches the last query this
app wrote or saw, the user navigated (back/forward or an edited URL) and the
navigation listeners fire.
"""

from typing import Callable, Dict, List
from urllib.parse import parse_qsl, urlencode

import streamlit as st

from recipe_browser.history import Location


def _as_dict(query: str) -> Dict[str, str]:
    params: Dict[str, str] = {}
    for key, value in parse_qsl(query.lstrip("?"), keep_blank_values=True):
        params.setdefault(key, value)
    return params


class StreamlitLocation(Location):
    """
    Location over st.query_params.

    Args:
        path: Page path used when building URLs (query params are page-relative)
    """

    def __init__(self, path: str = "/"):
        self.path = path
        self._listeners: List[Callable[[], None]] = []
        self._known = self._current_params()

    @staticmethod
    def _current_params() -> Dict[str, str]:
        return {key: st.query_params[key] for key in st.query_params}

    def get_query(self) -> str:
        return urlencode(list(self._current_params().items()), safe=",")

    def push(self, url: str) -> None:
        _, _, query = url.partition("?")
        params = _as_dict(query)
        st.query_params.from_dict(params)
        self._known = params

    def subscribe(self, listener: Callable[[], None]) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)
        return unsubscribe

    def poll(self) -> bool:
        """
        Detect a URL change made outside the app and notify listeners.

        Returns:
            True when a navigation was detected
        """
        current = self._current_params()
        if current == self._known:
            return False
        self._known = current
        for listener in list(self._listeners):
            listener()
        return True

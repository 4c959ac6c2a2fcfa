"""
Filter State Management Module.

This module keeps one FilterStateStore per Streamlit session in
st.session_state, attached to the browser URL through a HistoryBridge over
StreamlitLocation.

Widget values mirror the store: every store change (including back/forward
navigation) writes the filter values into the widget keys below, and widget
on_change callbacks call the store mutators.

# NOTE: This module uses session_state, so the store persists only for the
    current Streamlit session. A page reload starts a new session and the
    filters are parsed from the URL again.
"""

from typing import Optional, Tuple

import streamlit as st

from recipe_browser.history import HistoryBridge, connect_filters
from recipe_browser.models import FilterModel
from recipe_browser.store import FilterStateStore
from utils.location import StreamlitLocation

# Session state keys
FILTERS_KEY = "recipe_filters"

SEARCH_WIDGET_KEY = "filter_search"
TAGS_WIDGET_KEY = "filter_tags"
MAX_CALORIES_WIDGET_KEY = "filter_max_calories"
MAX_PREP_TIME_WIDGET_KEY = "filter_max_prep_time"
SORT_WIDGET_KEY = "filter_sort"


def sort_option(filters: FilterModel) -> str:
    """Encode the sort fields as a single select option, e.g. "title:asc"."""
    return f"{filters.sort_by}:{filters.sort_order}"


def split_sort_option(option: str) -> Tuple[str, Optional[str]]:
    sort_by, _, sort_order = option.partition(":")
    return sort_by, sort_order or None


def sync_filter_widgets(filters: FilterModel) -> None:
    """Write the filter values into the widget keys."""
    st.session_state[SEARCH_WIDGET_KEY] = filters.search or ""
    st.session_state[TAGS_WIDGET_KEY] = list(filters.tag_ids or ())
    st.session_state[MAX_CALORIES_WIDGET_KEY] = filters.max_calories
    st.session_state[MAX_PREP_TIME_WIDGET_KEY] = filters.max_prep_time
    st.session_state[SORT_WIDGET_KEY] = sort_option(filters)


def init_filters(path: str = "/") -> None:
    """
    Ensure the filter store exists in session state.

    Call this at the start of any page that shows the recipe filters.
    """
    if FILTERS_KEY not in st.session_state:
        location = StreamlitLocation(path)
        store, bridge = connect_filters(location)
        store.subscribe(sync_filter_widgets)
        sync_filter_widgets(store.filters)
        st.session_state[FILTERS_KEY] = bridge


def get_bridge() -> HistoryBridge:
    init_filters()
    return st.session_state[FILTERS_KEY]


def get_filter_store() -> FilterStateStore:
    """
    Get the session's filter store, creating it from the URL on first use.
    """
    return get_bridge().store


def poll_navigation() -> bool:
    """
    Route a browser navigation (if any) through the history bridge.

    Call once per script run, before rendering widgets.
    """
    location = get_bridge().location
    return location.poll()


# Widget callbacks

def on_search_change() -> None:
    get_filter_store().set_search(st.session_state.get(SEARCH_WIDGET_KEY))


def on_tags_change() -> None:
    get_filter_store().set_tag_ids(st.session_state.get(TAGS_WIDGET_KEY) or [])


def on_max_calories_change() -> None:
    get_filter_store().set_max_calories(st.session_state.get(MAX_CALORIES_WIDGET_KEY))


def on_max_prep_time_change() -> None:
    get_filter_store().set_max_prep_time(st.session_state.get(MAX_PREP_TIME_WIDGET_KEY))


def on_sort_change() -> None:
    sort_by, sort_order = split_sort_option(st.session_state.get(SORT_WIDGET_KEY, ""))
    get_filter_store().set_sort_by(sort_by, sort_order)

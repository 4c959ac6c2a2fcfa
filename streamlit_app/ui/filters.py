"""
Filter panel and active filter chips.

Widgets are keyed by the constants in utils.state and call the store
mutators from their on_change callbacks, so every change goes through the
filter store (and from there into the URL).
"""

from typing import List

import streamlit as st

from recipe_browser.chips import build_filter_chips, show_clear_all
from recipe_browser.models import MAX_CALORIES_RANGE, MAX_PREP_TIME_RANGE, Tag
from recipe_browser.store import FilterStateStore
from utils import state

SORT_LABELS = {
    "createdAt:desc": "Newest first",
    "createdAt:asc": "Oldest first",
    "updatedAt:desc": "Recently updated",
    "title:asc": "Title A-Z",
    "title:desc": "Title Z-A",
    "prepTime:asc": "Quickest first",
    "prepTime:desc": "Longest prep first",
}


def render_filter_panel(store: FilterStateStore, tags: List[Tag]) -> None:
    """
    Render search, tag, calorie, prep-time and sort controls.

    Args:
        store: Session filter store
        tags: Tags available for filtering
    """
    st.text_input(
        "Search",
        key=state.SEARCH_WIDGET_KEY,
        placeholder="e.g. pasta, curry, salad…",
        on_change=state.on_search_change,
    )

    names = {tag.id: tag.name for tag in tags}
    # Selected ids stay selectable even when the tag list failed to load
    options = list(names) + [tag_id for tag_id in (store.filters.tag_ids or ()) if tag_id not in names]
    st.multiselect(
        "Tags",
        options=options,
        key=state.TAGS_WIDGET_KEY,
        format_func=lambda tag_id: names.get(tag_id, tag_id),
        on_change=state.on_tags_change,
    )

    st.number_input(
        "Max calories per serving",
        min_value=MAX_CALORIES_RANGE[0],
        max_value=MAX_CALORIES_RANGE[1],
        step=50,
        key=state.MAX_CALORIES_WIDGET_KEY,
        placeholder="Any",
        on_change=state.on_max_calories_change,
    )

    st.number_input(
        "Max prep time (minutes)",
        min_value=MAX_PREP_TIME_RANGE[0],
        max_value=MAX_PREP_TIME_RANGE[1],
        step=5,
        key=state.MAX_PREP_TIME_WIDGET_KEY,
        placeholder="Any",
        on_change=state.on_max_prep_time_change,
    )

    sort_options = list(SORT_LABELS)
    current = state.sort_option(store.filters)
    if current not in sort_options:
        sort_options.append(current)
    st.selectbox(
        "Sort by",
        options=sort_options,
        key=state.SORT_WIDGET_KEY,
        format_func=lambda option: SORT_LABELS.get(option, option),
        on_change=state.on_sort_change,
    )

    count = store.active_filter_count
    if count:
        st.caption(f"{count} active filter(s)")


def render_active_filter_chips(store: FilterStateStore, tags: List[Tag]) -> None:
    """Render one removable chip per active filter, plus "Clear all" when useful."""
    chips = build_filter_chips(store.filters, tags)
    if not chips:
        return

    columns = st.columns(len(chips) + (1 if show_clear_all(chips) else 0))
    for column, chip in zip(columns, chips):
        with column:
            st.button(
                f"✕ {chip.label}",
                key=f"chip_{chip.key}_{chip.value or ''}",
                help=f"Remove filter: {chip.label}",
                on_click=store.remove_filter,
                args=(chip.key, chip.value),
            )

    if show_clear_all(chips):
        with columns[-1]:
            st.button("Clear all", key="chip_clear_all", on_click=store.clear_filters, type="tertiary")

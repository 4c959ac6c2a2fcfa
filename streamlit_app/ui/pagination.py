"""
Pagination bar.

Renders recipe_browser.pagination.PaginationControls as a row of buttons.
Clicking a page calls FilterStateStore.set_page(), which pushes the new page
into the URL.
"""

import streamlit as st

from recipe_browser.models import PaginationModel
from recipe_browser.pagination import build_pagination_controls
from recipe_browser.store import FilterStateStore


def render_pagination(store: FilterStateStore, pagination: PaginationModel) -> None:
    """
    Render the "showing X - Y of Z" summary and the page buttons.

    Args:
        store: Session filter store
        pagination: Pagination metadata from the recipe service
    """
    controls = build_pagination_controls(pagination)

    st.markdown(f'<div class="rb-pagination-summary">{controls.summary}</div>', unsafe_allow_html=True)

    if controls.total_pages <= 1:
        return

    columns = st.columns(len(controls.buttons) + 2)

    with columns[0]:
        st.button(
            "‹",
            key="page_prev",
            help="Previous page",
            disabled=not controls.previous_enabled,
            on_click=store.set_page,
            args=(controls.page - 1,),
        )

    for index, button in enumerate(controls.buttons, start=1):
        with columns[index]:
            if button.is_ellipsis:
                st.markdown(f"<div style='text-align:center'>{button.label}</div>", unsafe_allow_html=True)
                continue
            st.button(
                button.label,
                key=f"page_{button.page}",
                help=f"Page {button.page}",
                disabled=button.disabled,
                type="primary" if button.is_current else "secondary",
                on_click=store.set_page,
                args=(button.page,),
            )

    with columns[-1]:
        st.button(
            "›",
            key="page_next",
            help="Next page",
            disabled=not controls.next_enabled,
            on_click=store.set_page,
            args=(controls.page + 1,),
        )

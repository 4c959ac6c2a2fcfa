"""
Standardized feedback utilities for consistent error, empty, and loading states.

Provides reusable components for displaying errors, empty states, and loading
indicators across all pages in a consistent manner.
"""

from contextlib import contextmanager
from typing import Callable, Optional

import streamlit as st


def show_error(message: str, hint: Optional[str] = None) -> None:
    """
    Display a standardized error message with optional hint.

    Args:
        message: Main error message to display
        hint: Optional hint text to help users resolve the issue
    """
    st.error(f"⚠️ {message}")
    if hint:
        st.caption(f"💡 {hint}")


def show_empty_state(
    title: str,
    subtitle: Optional[str] = None,
    action_label: str = "Clear filters",
    on_action: Optional[Callable[[], None]] = None,
    key: str = "empty_state_action",
) -> None:
    """
    Display a standardized empty state with optional action button.

    Args:
        title: Main empty state title
        subtitle: Optional subtitle/description text
        action_label: Label for the action button
        on_action: Optional callback run when the button is clicked
        key: Widget key for the action button
    """
    st.info(f"📭 **{title}**")
    if subtitle:
        st.caption(subtitle)

    if on_action is not None:
        st.button(action_label, key=key, on_click=on_action, type="primary")


@contextmanager
def working_spinner(label: str = "Loading recipes…"):
    """
    Context manager wrapper for standardized loading spinners.

    Usage:
        with working_spinner("Preparing…"):
            # Do work here
            pass
    """
    with st.spinner(label):
        yield

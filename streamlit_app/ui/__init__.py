"""
UI Styling and Components Module.

This module provides global CSS styling and reusable UI components
for the recipe browser Streamlit app.
"""

from ui.styles import load_global_styles
from ui.layout import page_header, section, card
from ui.feedback import show_error, show_empty_state, working_spinner

__all__ = [
    "load_global_styles",
    "page_header",
    "section",
    "card",
    "show_error",
    "show_empty_state",
    "working_spinner",
]

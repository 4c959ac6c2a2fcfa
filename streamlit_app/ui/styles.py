"""
Global CSS Styling for the Recipe Browser.

This module provides load_global_styles() to inject consistent styling
across all pages: typography, rounded buttons, recipe cards and filter chips.
"""

import streamlit as st


def load_global_styles() -> None:
    """
    Inject global CSS styles for the recipe browser.

    This function:
    - Imports Google Fonts (Nunito) for friendly typography
    - Rounds buttons into pills
    - Styles recipe cards, tag pills and active filter chips
    - Marks the current page button in the pagination bar
    """
    css = """
    <style>
        @import url('https://fonts.googleapis.com/css2?family=Nunito:wght@400;600;700&display=swap');

        html, body, [class*="css"] {
            font-family: 'Nunito', 'sans serif' !important;
        }

        h1, h2, h3, h4, h5, h6 {
            font-weight: 600 !important;
            letter-spacing: 0.02em !important;
        }

        .stButton > button {
            border-radius: 50px !important;
            font-weight: 600 !important;
        }

        .main .block-container {
            max-width: 1200px !important;
            padding-top: 1.5rem !important;
            padding-bottom: 2.5rem !important;
        }

        .rb-page-header .subtitle {
            color: #666 !important;
            margin-bottom: 1rem !important;
        }

        .rb-card {
            border-radius: 12px !important;
            padding: 1rem 1.25rem !important;
            background-color: #ffffff !important;
            border: 1px solid rgba(22, 163, 74, 0.12) !important;
            margin-bottom: 1rem !important;
        }

        .recipe-tag {
            display: inline-block;
            padding: 0.2rem 0.65rem;
            border-radius: 50px;
            background: #DCFCE7;
            color: #166534;
            font-size: 0.75rem;
            font-weight: 600;
            margin: 0 0.25rem 0.25rem 0;
        }

        .rb-pagination-summary {
            color: #4b5563;
            font-size: 0.9rem;
        }
    </style>
    """
    st.markdown(css, unsafe_allow_html=True)

"""
Recipe Browser - Streamlit Frontend Main Entry Point.

This is the main Streamlit application entry point. It sets up the page
configuration and a short landing page that links to the recipe browser.

Note: Multi-page routing is handled automatically by Streamlit via the `pages/`
folder. Files in `pages/` starting with numbered prefixes (e.g.,
`01_🍳_Recipes.py`) appear as pages in the sidebar navigation.

Run with:
    streamlit run streamlit_app/app.py
"""

import sys
from pathlib import Path

# Ensure the streamlit_app directory is in the Python path
# This allows imports to work regardless of how the app is run
streamlit_app_dir = Path(__file__).parent
if str(streamlit_app_dir) not in sys.path:
    sys.path.insert(0, str(streamlit_app_dir))

# Add project root to path so recipe_browser imports without installing
project_root = streamlit_app_dir.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Import config early to load .env before anything reads the environment
from recipe_browser.config import RecipeApiConfig, configure_logging

import streamlit as st

from ui.styles import load_global_styles
from ui.layout import page_header, section

configure_logging()

# Page configuration - must be called before any other Streamlit commands
st.set_page_config(
    page_title="Recipe Browser",
    page_icon="🍳",
    layout="wide",
    initial_sidebar_state="expanded",
)

load_global_styles()

with st.sidebar:
    st.markdown("### 🍳 **Recipe Browser**")
    st.divider()
    st.caption(f"Recipe service: `{RecipeApiConfig.get_base_url()}`")

page_header(
    "Find your next recipe",
    subtitle="Search, filter by tags, calories and prep time, and share the exact view with a link.",
)

section("Get started", caption="Filters live in the address bar, so back/forward and shared links just work.")
st.page_link("pages/01_🍳_Recipes.py", label="Browse recipes", icon="🍳")

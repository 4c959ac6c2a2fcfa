"""
Recipe Service API Client Module.

Streamlit-side wrappers around recipe_browser.service.RecipeService. All HTTP
calls from the pages go through functions in this module.

Key principles:
- Results are cached briefly with st.cache_data so reruns don't refetch
- Errors are shown to the user via ui.feedback and never crash the page
- Functions return None (or an empty list) when the service is unavailable
"""

import logging
from typing import Any, Dict, List, Optional

import streamlit as st

from recipe_browser.config import RecipeApiConfig
from recipe_browser.models import FilterModel, RecipeListResponse, Tag
from recipe_browser.service import AuthenticationRequiredError, RecipeService, RecipeServiceError
from ui.feedback import show_error

logger = logging.getLogger(__name__)


@st.cache_resource
def get_service() -> RecipeService:
    """Shared RecipeService for the Streamlit process."""
    return RecipeService(RecipeApiConfig.get_base_url(), timeout=RecipeApiConfig.get_timeout())


@st.cache_data(ttl=30, show_spinner=False)
def _list_recipes_cached(filters_json: str, limit: int) -> Dict[str, Any]:
    filters = FilterModel.model_validate_json(filters_json)
    return get_service().list_recipes(filters, limit=limit).model_dump(by_alias=True)


def fetch_recipes(filters: FilterModel) -> Optional[RecipeListResponse]:
    """
    Fetch the recipe page for the given filters.

    Returns:
        RecipeListResponse, or None on error (an error message is shown).
    """
    try:
        data = _list_recipes_cached(filters.model_dump_json(), RecipeApiConfig.get_page_size())
    except AuthenticationRequiredError as e:
        show_error(e.message, hint="Your session has expired. Log in again to browse recipes.")
        return None
    except RecipeServiceError as e:
        logger.error("Error fetching recipes: %s", e.message)
        show_error(e.message, hint="Check that the recipe service is running and try again.")
        return None
    return RecipeListResponse.model_validate(data)


@st.cache_data(ttl=300, show_spinner=False)
def _list_tags_cached() -> List[Dict[str, Any]]:
    return [tag.model_dump() for tag in get_service().list_tags()]


def fetch_tags() -> List[Tag]:
    """
    Fetch the tags available for filtering.

    Returns:
        List of tags, empty on error (tag filters are a nice-to-have).
    """
    try:
        return [Tag.model_validate(item) for item in _list_tags_cached()]
    except RecipeServiceError as e:
        logger.warning("Could not load tags: %s", e.message)
        return []


@st.cache_data(ttl=300, show_spinner=False)
def _get_recipe_cached(recipe_id: str) -> Dict[str, Any]:
    return get_service().get_recipe(recipe_id)


def fetch_recipe_detail(recipe_id: str) -> Optional[Dict[str, Any]]:
    """Fetch a recipe's full detail, or None on error."""
    try:
        return _get_recipe_cached(recipe_id)
    except RecipeServiceError as e:
        show_error(e.message)
        return None

"""
Recipe grid and cards.
"""

from typing import List

import streamlit as st

from recipe_browser.models import RecipeListItem
from ui.layout import card
from utils.api_client import fetch_recipe_detail


def _format_meta(recipe: RecipeListItem) -> str:
    parts = []
    if recipe.prep_time_minutes:
        parts.append(f"{recipe.prep_time_minutes} min")
    calories = recipe.nutrition_per_serving.calories
    if calories is not None:
        parts.append(f"{calories:.0f} kcal / serving")
    if recipe.servings:
        parts.append(f"{recipe.servings} servings")
    return " · ".join(parts)


def render_recipe_detail(recipe_id: str) -> None:
    detail = fetch_recipe_detail(recipe_id)
    if not detail:
        return

    st.markdown("**Ingredients**")
    for item in detail.get("ingredients") or []:
        amount = " ".join(str(part) for part in (item.get("amount"), item.get("unit")) if part)
        st.markdown(f"- {amount} {item.get('name', '')}" if amount else f"- {item.get('name', '')}")

    st.markdown("**Steps**")
    steps = detail.get("steps") or []
    if not steps:
        st.caption("Instructions not available.")
    for i, step in enumerate(steps, start=1):
        st.markdown(f"{step.get('stepNumber', i)}. {step.get('instruction', '')}")


def render_recipe_card(recipe: RecipeListItem) -> None:
    """
    Render a compact recipe card.

    Args:
        recipe: Recipe list item to display
    """
    with card():
        st.markdown(f"**{recipe.title}**")

        if recipe.description:
            description = recipe.description
            st.caption(description[:100] + "..." if len(description) > 100 else description)

        meta = _format_meta(recipe)
        if meta:
            st.caption(meta)

        if recipe.tags:
            tags_html = " ".join(f"<span class='recipe-tag'>{tag.name}</span>" for tag in recipe.tags[:5])
            st.markdown(tags_html, unsafe_allow_html=True)

        # Details are fetched only once the toggle is switched on
        if st.toggle("Show ingredients & steps", key=f"detail_{recipe.id}"):
            render_recipe_detail(recipe.id)


def render_recipe_grid(recipes: List[RecipeListItem], columns: int = 3) -> None:
    cols = st.columns(columns, gap="large")
    for idx, recipe in enumerate(recipes):
        with cols[idx % columns]:
            render_recipe_card(recipe)

"""
Recipe Ideas - Streamlit Frontend Main Entry Point.

Single-page app: a search bar (ingredient / name mode, category and area filters),
the favorites shelf, the paged results grid, and the recipe detail dialog.

All state lives in the session's RecipeController (utils.state); widgets only call
its transitions through callbacks and this script renders whatever state results.

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

# Add project root to path so we can import recipes
project_root = streamlit_app_dir.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Import config early to load .env file before any other code accesses environment variables
from recipes.config import configure_logging

import streamlit as st

from recipes.models import SearchMode, SearchStatus
from ui.cards import render_detail_dialog, render_pagination, render_recipe_grid
from ui.feedback import show_empty_state, show_error, show_info
from ui.layout import footer, page_header, section
from ui.styles import load_global_styles
from utils.state import (
    AREA_INPUT_KEY,
    CATEGORY_INPUT_KEY,
    MODE_INPUT_KEY,
    QUERY_INPUT_KEY,
    get_controller,
    reset_search_widgets,
)

configure_logging()

# Page configuration - must be called before any other Streamlit commands
st.set_page_config(
    page_title="Recipe Ideas",
    page_icon="🍲",
    layout="wide",
)

load_global_styles()

controller = get_controller()

MODE_LABELS = {
    SearchMode.INGREDIENT: "By ingredient",
    SearchMode.NAME: "By name",
}


# ---------------------------------------------------------------------------
# Widget callbacks
# ---------------------------------------------------------------------------

def _on_mode_change() -> None:
    controller.set_mode(st.session_state[MODE_INPUT_KEY])


def _on_query_change() -> None:
    controller.set_query(st.session_state[QUERY_INPUT_KEY])
    # Name mode searches through the debouncer; ingredient mode searches on Enter
    if controller.state.search.mode == SearchMode.INGREDIENT:
        controller.submit_query()


def _on_category_change() -> None:
    controller.set_category(st.session_state[CATEGORY_INPUT_KEY])


def _on_area_change() -> None:
    controller.set_area(st.session_state[AREA_INPUT_KEY])


def _on_clear() -> None:
    controller.clear()
    reset_search_widgets()


# ---------------------------------------------------------------------------
# Search bar
# ---------------------------------------------------------------------------

page_header("🍲 Recipe Ideas", "Find something to cook with what you have, or look up a dish by name.")

st.radio(
    "Search mode",
    options=list(MODE_LABELS),
    format_func=lambda mode: MODE_LABELS[mode],
    key=MODE_INPUT_KEY,
    horizontal=True,
    on_change=_on_mode_change,
    label_visibility="collapsed",
)

placeholder = (
    "Type an ingredient (e.g., chicken)"
    if controller.state.search.mode == SearchMode.INGREDIENT
    else "Type a recipe name (e.g., Arrabiata)"
)

col_query, col_search, col_clear = st.columns([6, 1, 1])
with col_query:
    st.text_input(
        "Query",
        key=QUERY_INPUT_KEY,
        placeholder=placeholder,
        on_change=_on_query_change,
        label_visibility="collapsed",
    )
with col_search:
    st.button("Search", key="search-btn", on_click=controller.submit_query_once,
              type="primary", use_container_width=True, disabled=controller.state.loading)
with col_clear:
    st.button("Clear", key="clear-btn", on_click=_on_clear, use_container_width=True)

col_category, col_area = st.columns(2)
with col_category:
    st.selectbox(
        "Category",
        options=[""] + controller.state.categories,
        format_func=lambda value: value or "All",
        key=CATEGORY_INPUT_KEY,
        on_change=_on_category_change,
    )
with col_area:
    st.selectbox(
        "Area",
        options=[""] + controller.state.areas,
        format_func=lambda value: value or "All",
        key=AREA_INPUT_KEY,
        on_change=_on_area_change,
    )

# ---------------------------------------------------------------------------
# Detail dialog
# ---------------------------------------------------------------------------

render_detail_dialog(controller)

# ---------------------------------------------------------------------------
# Favorites
# ---------------------------------------------------------------------------

favorites = controller.favorites
if favorites:
    col_fav_title, col_fav_clear = st.columns([5, 1])
    with col_fav_title:
        section(f"⭐ Favorites ({len(favorites)})")
    with col_fav_clear:
        st.button("Clear favorites", key="clear-favorites-btn",
                  on_click=controller.clear_favorites, use_container_width=True)
    render_recipe_grid(controller, favorites, key_prefix="favorite")
    st.divider()

# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

state = controller.state
if state.status == SearchStatus.LOADING:
    st.caption("Searching…")
elif state.status == SearchStatus.ERROR:
    show_error(state.message, on_retry=controller.retry, key="search-retry")
elif state.status == SearchStatus.NO_MATCHES:
    show_info(state.message)
elif state.status == SearchStatus.OK:
    section(
        f"Results ({len(state.results)})",
        caption=f"Page {state.page} of {controller.total_pages}",
    )
    render_recipe_grid(controller, controller.page_items, key_prefix="result")
    render_pagination(controller)
else:
    show_empty_state(
        "Search for recipes to get started.",
        "Tip: type an ingredient like chicken, or switch to name search and narrow it down with a category or area.",
    )

footer()

controller.end_interaction()

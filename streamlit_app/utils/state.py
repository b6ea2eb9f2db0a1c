"""
Session State Management Module.

This module wraps Streamlit's session_state to hold one RecipeController per
browser session. All pages and UI components get the controller through
get_controller() and drive it only through its transition methods.

The controller is built with an InlineScheduler: Streamlit delivers text input
only once the user commits it (Enter or leaving the field), so the name-mode
auto search runs right away instead of on a timer thread that could not
trigger a rerun.

# NOTE: The controller lives in session_state, so search state resets when the
    user refreshes the page. Favorites survive because they are persisted to
    FAVORITES_STORE_PATH and reloaded when a new controller is created.
"""

import logging

import streamlit as st

from recipes.connectors import MealDBConnector
from recipes.controller import RecipeController
from recipes.scheduling import InlineScheduler

logger = logging.getLogger(__name__)

# Session state key for the controller
CONTROLLER_KEY = "recipe_controller"

# Widget keys that mirror controller inputs
QUERY_INPUT_KEY = "query_input"
MODE_INPUT_KEY = "mode_input"
CATEGORY_INPUT_KEY = "category_input"
AREA_INPUT_KEY = "area_input"

# Set by View Details; the detail dialog opens on the rerun that consumes it
DETAIL_DIALOG_KEY = "detail_dialog_requested"


def init_controller() -> None:
    """
    Ensure the controller exists in session state.

    On first creation the category and area option lists are prefetched; a
    failure there only leaves the filter selects empty.
    """
    if CONTROLLER_KEY not in st.session_state:
        controller = RecipeController.from_config(MealDBConnector(), scheduler=InlineScheduler())
        controller.load_filter_options()
        st.session_state[CONTROLLER_KEY] = controller
        logger.info("Created recipe controller for new session")


def get_controller() -> RecipeController:
    """Get the session's RecipeController, creating it on first use."""
    init_controller()
    return st.session_state[CONTROLLER_KEY]


def reset_search_widgets() -> None:
    """Clear the query and filter widgets after the controller's Clear action."""
    st.session_state[QUERY_INPUT_KEY] = ""
    st.session_state[CATEGORY_INPUT_KEY] = ""
    st.session_state[AREA_INPUT_KEY] = ""

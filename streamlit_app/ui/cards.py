"""
Recipe card grid, pagination bar, and detail dialog.

All widgets are wired to RecipeController transitions through on_click callbacks,
so each click updates controller state before the rerun renders it.
"""

import html
from typing import List

import streamlit as st

from recipes.controller import RecipeController
from recipes.models import DetailStatus, MealDetail, MealSummary
from ui.feedback import show_error
from utils.state import DETAIL_DIALOG_KEY

GRID_COLUMNS = 4


def render_recipe_grid(controller: RecipeController, meals: List[MealSummary], key_prefix: str) -> None:
    """
    Render recipe cards in a responsive grid.

    Args:
        controller: Session controller
        meals: Recipes to show
        key_prefix: Widget key prefix, unique per grid on the page
    """
    for start in range(0, len(meals), GRID_COLUMNS):
        cols = st.columns(GRID_COLUMNS)
        for col, meal in zip(cols, meals[start:start + GRID_COLUMNS]):
            with col:
                _recipe_card(controller, meal, key_prefix)


def _recipe_card(controller: RecipeController, meal: MealSummary, key_prefix: str) -> None:
    with st.container(border=True):
        if meal.thumbnail_url:
            st.image(meal.thumbnail_url, use_container_width=True)
        st.markdown(f'<div class="ri-card-title">{html.escape(meal.name)}</div>', unsafe_allow_html=True)

        favorite = controller.is_favorite(meal.id)
        st.button(
            "★ Favorited" if favorite else "☆ Favorite",
            key=f"{key_prefix}-fav-{meal.id}",
            on_click=controller.toggle_favorite,
            args=(meal,),
            help="Remove from favorites" if favorite else "Add to favorites",
            use_container_width=True,
        )
        st.button(
            "View Details",
            key=f"{key_prefix}-details-{meal.id}",
            on_click=_open_details,
            args=(controller, meal.id),
            type="primary",
            use_container_width=True,
        )
        st.link_button("Source", meal.source_page_url, use_container_width=True)


def render_pagination(controller: RecipeController) -> None:
    """Render First / Prev / page indicator / Next / Last; hidden for a single page."""
    pages = controller.total_pages
    if pages <= 1:
        return

    page = controller.state.page
    col_first, col_prev, col_label, col_next, col_last = st.columns([1, 1, 2, 1, 1])
    with col_first:
        st.button("« First", key="page-first", on_click=controller.first_page,
                  disabled=page == 1, use_container_width=True)
    with col_prev:
        st.button("‹ Prev", key="page-prev", on_click=controller.prev_page,
                  disabled=page == 1, use_container_width=True)
    with col_label:
        st.markdown(f'<div class="ri-page-indicator">Page {page} of {pages}</div>', unsafe_allow_html=True)
    with col_next:
        st.button("Next ›", key="page-next", on_click=controller.next_page,
                  disabled=page == pages, use_container_width=True)
    with col_last:
        st.button("Last »", key="page-last", on_click=controller.last_page,
                  disabled=page == pages, use_container_width=True)


def _open_details(controller: RecipeController, meal_id: str) -> None:
    controller.open_details(meal_id)
    st.session_state[DETAIL_DIALOG_KEY] = True


def render_detail_dialog(controller: RecipeController) -> None:
    """
    Show the open recipe in a modal dialog.

    The dialog is shown only on the rerun triggered by View Details. Dismissing it
    with Escape or a click outside does not rerun the app, so an open view found on
    any later rerun is closed to match what the user sees.
    """
    fresh = st.session_state.pop(DETAIL_DIALOG_KEY, False)
    view = controller.detail_view
    if not view.is_open:
        return
    if not fresh:
        controller.close_details()
        return
    st.dialog(view.title, width="large")(_detail_dialog_body)(controller)


def _detail_dialog_body(controller: RecipeController) -> None:
    view = controller.detail_view
    if view.status == DetailStatus.LOADING:
        st.caption("Loading…")
    elif view.status == DetailStatus.FAILED:
        show_error(view.error)
    elif view.detail is not None:
        _detail_body(controller, view.detail)

    if st.button("✕ Close", key="detail-close", use_container_width=True):
        controller.close_details()
        st.rerun()


def _detail_body(controller: RecipeController, detail: MealDetail) -> None:
    col_image, col_meta = st.columns([1, 2])
    with col_image:
        if detail.thumbnail_url:
            st.image(detail.thumbnail_url, use_container_width=True)
    with col_meta:
        if detail.category:
            st.markdown(f"**Category:** {detail.category}")
        if detail.area:
            st.markdown(f"**Area:** {detail.area}")
        if detail.tags:
            pills = "".join(
                f'<span class="ri-pill-tag">{html.escape(tag.strip())}</span>'
                for tag in detail.tags.split(",") if tag.strip()
            )
            st.markdown(pills, unsafe_allow_html=True)
        links = []
        if detail.source_url:
            links.append(f"[Original source]({detail.source_url})")
        if detail.video_url:
            links.append(f"[Watch on YouTube]({detail.video_url})")
        if links:
            st.markdown(" · ".join(links))

        summary = detail.summary()
        favorite = controller.is_favorite(summary.id)
        st.button(
            "★ Favorited" if favorite else "☆ Favorite",
            key="detail-fav",
            on_click=controller.toggle_favorite,
            args=(summary,),
        )

    if detail.ingredients:
        st.markdown("### Ingredients")
        st.markdown("\n".join(f"- {line.display}" for line in detail.ingredients))

    if detail.instructions:
        st.markdown("### Instructions")
        st.write(detail.instructions)

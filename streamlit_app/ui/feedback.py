"""
Standardized feedback utilities for consistent error, empty, and info states.

Provides reusable components for displaying errors (with an optional Retry action),
informational empty results, and the first-visit empty state.
"""

from typing import Callable, Optional

import streamlit as st


def show_error(
    message: str,
    on_retry: Optional[Callable[[], object]] = None,
    key: str = "retry",
) -> None:
    """
    Display a standardized error message with an optional Retry button.

    Args:
        message: Main error message to display
        on_retry: Optional callback wired to a Retry button
        key: Widget key for the Retry button
    """
    if on_retry is None:
        st.error(f"⚠️ {message}")
        return

    col_msg, col_action = st.columns([5, 1])
    with col_msg:
        st.error(f"⚠️ {message}")
    with col_action:
        st.button("Retry", key=key, on_click=on_retry, type="primary", use_container_width=True)


def show_info(message: str) -> None:
    """Display an informational message (no action attached)."""
    st.info(f"🔎 {message}")


def show_empty_state(title: str, subtitle: Optional[str] = None) -> None:
    """
    Display a standardized empty state.

    Args:
        title: Main empty state text
        subtitle: Optional tip shown below
    """
    st.info(f"📭 {title}")
    if subtitle:
        st.caption(subtitle)

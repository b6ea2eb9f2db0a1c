"""
Layout primitives for consistent page structure.

Provides reusable components for the page header, section headers, and the footer.
"""

from typing import Optional

import streamlit as st


def page_header(title: str, subtitle: Optional[str] = None) -> None:
    """
    Render a consistent page header with title and optional subtitle.

    Args:
        title: Main page title
        subtitle: Optional subtitle/description text
    """
    st.markdown('<div class="ri-page-header">', unsafe_allow_html=True)
    st.markdown(f"# {title}")
    if subtitle:
        st.markdown(f'<div class="subtitle">{subtitle}</div>', unsafe_allow_html=True)
    st.markdown('</div>', unsafe_allow_html=True)


def section(title: str, caption: Optional[str] = None) -> None:
    """
    Render a section header with optional caption.

    Args:
        title: Section title
        caption: Optional caption/help text below title
    """
    st.markdown('<div class="ri-section">', unsafe_allow_html=True)
    st.markdown(f"## {title}")
    if caption:
        st.markdown(f'<div class="ri-section-caption">{caption}</div>', unsafe_allow_html=True)
    st.markdown('</div>', unsafe_allow_html=True)


def footer() -> None:
    """Render the attribution footer."""
    st.markdown(
        '<div class="ri-footer">Recipe data by '
        '<a href="https://www.themealdb.com" target="_blank">TheMealDB</a></div>',
        unsafe_allow_html=True,
    )

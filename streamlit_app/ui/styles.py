"""
Global CSS Styling for Recipe Ideas.

This module provides load_global_styles() to inject consistent styling
for the app. Focuses on typography, spacing, and the recipe card grid.
"""

import streamlit as st


def load_global_styles() -> None:
    """
    Inject global CSS styles for the Recipe Ideas app.

    This function:
    - Imports Google Fonts (Nunito) for friendly typography
    - Sets global styles for headings, buttons, and recipe cards
    - Creates a slightly narrower content width on large screens
    - Styles the footer
    """
    css = """
    <style>
        @import url('https://fonts.googleapis.com/css2?family=Nunito:wght@400;600;700&display=swap');

        /* Global font family */
        html, body, [class*="css"] {
            font-family: 'Nunito', 'sans serif' !important;
        }

        h1, h2, h3, h4, h5, h6 {
            font-weight: 600 !important;
            letter-spacing: 0.02em !important;
        }

        h1 {
            font-size: 2.5rem !important;
            margin-bottom: 0.5rem !important;
        }

        h2 {
            font-size: 1.6rem !important;
            margin-top: 0.5rem !important;
            margin-bottom: 0.5rem !important;
        }

        .ri-page-header .subtitle {
            color: #6b5b4b !important;
            font-size: 1.05rem !important;
            margin-bottom: 1rem !important;
        }

        .ri-section-caption {
            color: #666 !important;
            font-size: 0.9rem !important;
            margin-bottom: 0.75rem !important;
        }

        /* Buttons - rounded pills */
        .stButton > button {
            border-radius: 50px !important;
            box-shadow: 0 2px 6px rgba(214, 104, 41, 0.12) !important;
            transition: all 0.3s ease !important;
            font-weight: 600 !important;
        }

        .stButton > button:hover {
            box-shadow: 0 3px 10px rgba(214, 104, 41, 0.2) !important;
            transform: translateY(-1px) !important;
        }

        /* Recipe card title, clamped to two lines */
        .ri-card-title {
            font-weight: 700 !important;
            font-size: 1rem !important;
            line-height: 1.3 !important;
            min-height: 2.6em !important;
            overflow: hidden !important;
            display: -webkit-box !important;
            -webkit-line-clamp: 2 !important;
            -webkit-box-orient: vertical !important;
            margin: 0.5rem 0 !important;
        }

        .ri-pill-tag {
            display: inline-block;
            padding: 0.25rem 0.75rem;
            border-radius: 50px;
            background: #FDEBDD;
            color: #B5541C;
            font-size: 0.75rem;
            font-weight: 600;
            margin: 0 0.25rem 0.25rem 0;
        }

        .ri-page-indicator {
            text-align: center !important;
            font-weight: 600 !important;
            padding-top: 0.5rem !important;
        }

        .main .block-container {
            max-width: 1200px !important;
            padding-top: 1.5rem !important;
            padding-bottom: 2.5rem !important;
        }

        .ri-footer {
            margin-top: 2rem !important;
            padding: 1.5rem 0 !important;
            text-align: center !important;
            color: #6b5b4b !important;
            font-size: 0.9rem !important;
            border-top: 1px solid rgba(214, 104, 41, 0.15) !important;
        }
    </style>
    """
    st.markdown(css, unsafe_allow_html=True)

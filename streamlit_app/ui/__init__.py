"""
UI Styling and Components Module.

This module provides global CSS styling and reusable UI components
for the Recipe Ideas Streamlit app.
"""

from ui.styles import load_global_styles
from ui.layout import page_header, section
from ui.feedback import show_error, show_info, show_empty_state

__all__ = [
    "load_global_styles",
    "page_header",
    "section",
    "show_error",
    "show_info",
    "show_empty_state",
]

"""UI module: interaction controller, UI state and the Streamlit front end."""

from src.ui.api_client import APIClient
from src.ui.controller import InteractionController
from src.ui.state import FormState, GenerationStatus, UIState, ViewMode
from src.ui.utils import (
    build_download_filename,
    format_mode_label,
    sanitize_html,
    split_meta_description,
)

__all__ = [
    "APIClient",
    "FormState",
    "GenerationStatus",
    "InteractionController",
    "UIState",
    "ViewMode",
    "build_download_filename",
    "format_mode_label",
    "sanitize_html",
    "split_meta_description",
]

"""API module for FastAPI REST endpoints and the HTMX web UI."""

from src.api.models import (
    ArticleRequest,
    ClusterRequest,
    ErrorResponse,
    GenerateResponse,
    GenerationRequest,
    ToolMode,
)

__all__ = [
    "ArticleRequest",
    "ClusterRequest",
    "ErrorResponse",
    "GenerateResponse",
    "GenerationRequest",
    "ToolMode",
]

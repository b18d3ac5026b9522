"""LangChain chains for SEO content generation."""

from src.chains.seo_generator import (
    ArticleRequest,
    ClusterRequest,
    GenerationRequest,
    SEOContentGenerator,
    ToolMode,
)

__all__ = [
    "ArticleRequest",
    "ClusterRequest",
    "GenerationRequest",
    "SEOContentGenerator",
    "ToolMode",
]

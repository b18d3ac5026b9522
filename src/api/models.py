"""API request and response models."""

from pydantic import BaseModel, Field

from src.chains.seo_generator import (
    ArticleRequest,
    ClusterRequest,
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


class GenerateResponse(BaseModel):
    """Response model for content generation."""

    mode: ToolMode = Field(description="Công cụ đã dùng (article | cluster)")
    content: str = Field(description="HTML/văn bản do mô hình tạo, chưa qua xử lý")
    model: str = Field(description="Mô hình Gemini đã dùng")
    template_version: str = Field(description="Phiên bản instruction template")


class ErrorResponse(BaseModel):
    """Error response model."""

    error: str = Field(description="Loại lỗi")
    detail: str = Field(description="Chi tiết lỗi")

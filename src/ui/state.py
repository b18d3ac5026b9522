"""State management models for the UI."""

from enum import Enum

from pydantic import BaseModel, Field, model_validator

from src.chains.seo_generator import ToolMode


class GenerationStatus(str, Enum):
    """Where the current mode session is in the generation lifecycle."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    FAILURE = "failure"


class ViewMode(str, Enum):
    """How a successful result is displayed."""

    PREVIEW = "preview"
    CODE = "code"


class FormState(BaseModel):
    """Raw form field values, bound as the user types."""

    primary_keyword: str = Field(default="", description="KEY BLOG")
    secondary_keywords: str = Field(default="", description="KEY PHỤ (mỗi dòng một keyword)")
    related_product: str = Field(default="", description="SẢN PHẨM LIÊN QUAN")
    seed_keyword: str = Field(default="", description="KEY CHÍNH")


class UIState(BaseModel):
    """Single source of truth for what the interaction surface displays.

    ``result`` is only set on success and ``error_message`` only on failure.
    """

    mode: ToolMode = Field(default=ToolMode.ARTICLE, description="Công cụ đang chọn")
    form: FormState = Field(default_factory=FormState)
    status: GenerationStatus = Field(default=GenerationStatus.IDLE)
    result: str | None = Field(default=None, description="Kết quả đã tạo")
    error_message: str | None = Field(default=None, description="Thông báo lỗi")
    view_mode: ViewMode = Field(default=ViewMode.PREVIEW)

    @model_validator(mode="after")
    def check_status_payload(self) -> "UIState":
        if (self.result is not None) != (self.status == GenerationStatus.SUCCESS):
            raise ValueError("result must be set exactly when status is success")
        if (self.error_message is not None) != (self.status == GenerationStatus.FAILURE):
            raise ValueError("error_message must be set exactly when status is failure")
        return self

    @property
    def is_loading(self) -> bool:
        return self.status == GenerationStatus.LOADING

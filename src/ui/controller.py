"""Interaction controller: binds form input to requests and drives UIState."""

import logging
from typing import Any, Protocol

from src.chains.seo_generator import ArticleRequest, ClusterRequest, ToolMode
from src.errors import ConfigurationError, EmptyGenerationError, FormValidationError
from src.ui.state import FormState, GenerationStatus, UIState, ViewMode

logger = logging.getLogger(__name__)

GenerationRequestType = ArticleRequest | ClusterRequest

# Shown when the service answers with nothing usable
EMPTY_RESULT_MESSAGES = {
    ToolMode.ARTICLE: "Không thể tạo nội dung. Vui lòng thử lại.",
    ToolMode.CLUSTER: "Không thể phân tích keyword. Vui lòng thử lại.",
}

# Shown when the call fails without a message of its own
GENERIC_ERROR_MESSAGES = {
    ToolMode.ARTICLE: "Đã xảy ra lỗi trong quá trình tạo bài viết.",
    ToolMode.CLUSTER: "Đã xảy ra lỗi trong quá trình phân tích.",
}

REQUIRED_FIELDS = {
    ToolMode.ARTICLE: "primary_keyword",
    ToolMode.CLUSTER: "seed_keyword",
}


class ContentGenerator(Protocol):
    """Anything that turns a request into generated text.

    Implemented by SEOContentGenerator (direct Gemini calls) and by the
    UI's APIClient (calls through the HTTP API).
    """

    def generate(self, request: GenerationRequestType) -> str: ...

    async def agenerate(self, request: GenerationRequestType) -> str: ...


class InteractionController:
    """Owns the UIState of one session and orchestrates generation calls."""

    def __init__(self, generator: ContentGenerator, state: UIState | None = None):
        self.generator = generator
        self._state = state or UIState()

    @property
    def state(self) -> UIState:
        return self._state

    # ---------- input binding ----------

    def switch_mode(self, mode: ToolMode | str) -> None:
        """Select a tool and reset to idle, discarding any result or error."""
        mode = ToolMode(mode)
        logger.debug(f"Switching mode: {self._state.mode.value} -> {mode.value}")
        self._transition(GenerationStatus.IDLE, mode=mode)

    def update_field(self, name: str, value: str) -> None:
        if name not in FormState.model_fields:
            raise KeyError(f"Unknown form field: {name}")
        form = self._state.form.model_copy(update={name: value})
        self._state = self._state.model_copy(update={"form": form})

    def update_form(self, **fields: str) -> None:
        for name, value in fields.items():
            self.update_field(name, value)

    def set_view_mode(self, view_mode: ViewMode | str) -> None:
        self._state = self._state.model_copy(update={"view_mode": ViewMode(view_mode)})

    # ---------- validation ----------

    def can_submit(self) -> bool:
        """Whether the submit control is enabled."""
        if self._state.is_loading:
            return False
        field = REQUIRED_FIELDS[self._state.mode]
        return bool(getattr(self._state.form, field).strip())

    def build_request(self) -> GenerationRequestType:
        """Build a fresh request from the current form.

        Raises:
            FormValidationError: If the mode's required field is blank.
        """
        form = self._state.form
        field = REQUIRED_FIELDS[self._state.mode]
        if not getattr(form, field).strip():
            raise FormValidationError(field)

        if self._state.mode == ToolMode.ARTICLE:
            return ArticleRequest(
                primary_keyword=form.primary_keyword,
                secondary_keywords=form.secondary_keywords,
                related_product=form.related_product,
            )
        return ClusterRequest(seed_keyword=form.seed_keyword)

    # ---------- submission ----------

    def submit(self) -> bool:
        """Run one generation for the current form.

        Returns:
            False when submission is disabled (nothing was called), True otherwise.
            The outcome is in ``state``.
        """
        request = self._start()
        if request is None:
            return False
        try:
            content = self.generator.generate(request)
        except ConfigurationError:
            self._transition(GenerationStatus.IDLE)
            raise
        except Exception as e:
            self._fail(e)
        else:
            self._finish(content)
        return True

    async def asubmit(self) -> bool:
        """Async version of submit; suspends only at the generator call."""
        request = self._start()
        if request is None:
            return False
        try:
            content = await self.generator.agenerate(request)
        except ConfigurationError:
            self._transition(GenerationStatus.IDLE)
            raise
        except Exception as e:
            self._fail(e)
        else:
            self._finish(content)
        return True

    def _start(self) -> GenerationRequestType | None:
        if not self.can_submit():
            logger.debug("Submit ignored: required field blank or generation in progress")
            return None
        request = self.build_request()
        self._transition(GenerationStatus.LOADING)
        return request

    def _finish(self, content: str | None) -> None:
        if content and content.strip():
            self._transition(GenerationStatus.SUCCESS, result=content)
        else:
            self._transition(
                GenerationStatus.FAILURE,
                error_message=EMPTY_RESULT_MESSAGES[self._state.mode],
            )

    def _fail(self, error: Exception) -> None:
        mode = self._state.mode
        if isinstance(error, EmptyGenerationError):
            message = EMPTY_RESULT_MESSAGES[mode]
        else:
            logger.error(f"{mode.value} generation failed: {error}")
            message = str(error) or GENERIC_ERROR_MESSAGES[mode]
        self._transition(GenerationStatus.FAILURE, error_message=message)

    def _transition(self, status: GenerationStatus, **changes: Any) -> None:
        data = self._state.model_dump()
        data.update(result=None, error_message=None)
        data.update(status=status, **changes)
        self._state = UIState.model_validate(data)

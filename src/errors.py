"""Exception types shared across the generator, controller and API layers."""


class SEOWriterError(Exception):
    """Base class for application errors."""


class ConfigurationError(SEOWriterError):
    """Required configuration (e.g. the Gemini API key) is missing or invalid."""


class FormValidationError(SEOWriterError):
    """A required form field is blank."""

    def __init__(self, field: str, message: str | None = None):
        self.field = field
        super().__init__(message or f"Field '{field}' is required")


class GenerationError(SEOWriterError):
    """The upstream generation call failed or produced no usable text."""


class EmptyGenerationError(GenerationError):
    """The upstream service answered with an empty payload."""

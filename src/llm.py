"""LLM factory for the Gemini chat model.

Provides centralized LLM instance creation so every chain shares the same
model id, credential and default temperature.
"""

import logging

from langchain_google_genai import ChatGoogleGenerativeAI

from src.config import get_settings

logger = logging.getLogger(__name__)


def get_llm(temperature: float | None = None) -> ChatGoogleGenerativeAI:
    """Get a Gemini chat model instance.

    Args:
        temperature: Override default temperature. If None, uses settings.llm_temperature.

    Returns:
        ChatGoogleGenerativeAI configured with the API key from settings.

    Raises:
        ConfigurationError: If no Gemini API key is configured.

    Examples:
        >>> llm = get_llm()  # settings.llm_model at temperature 0.7
    """
    settings = get_settings()
    api_key = settings.require_api_key()

    temp = temperature if temperature is not None else settings.llm_temperature
    logger.debug(f"Creating Gemini client: model={settings.llm_model}, temperature={temp}")

    # One round trip per generation, no client-side retries
    return ChatGoogleGenerativeAI(
        model=settings.llm_model,
        google_api_key=api_key,
        temperature=temp,
        max_retries=0,
    )

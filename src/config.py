"""Configuration management using Pydantic Settings.

Priority order:
1. Environment variables (highest priority, for Cloud Run)
2. Google Cloud Secret Manager (for the Gemini API key)
3. .env file (for local development fallback)
"""

import os
from functools import lru_cache
from typing import Any

from pydantic import AliasChoices, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.errors import ConfigurationError


def _get_secret_value(key: str) -> str | None:
    """Lazy import to avoid circular dependency."""
    # Only try Secret Manager if we have a project ID
    project_id = os.environ.get("GOOGLE_PROJECT_ID")
    if not project_id:
        return None

    try:
        from src.secret_manager import get_app_secret

        return get_app_secret(key)
    except Exception:
        return None


class Settings(BaseSettings):
    """Application settings with Secret Manager integration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Google Cloud (only needed for Secret Manager lookups)
    google_project_id: str | None = None
    environment: str = "dev"

    # Gemini
    gemini_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("gemini_api_key", "google_api_key"),
    )
    llm_model: str = "gemini-3.1-pro-preview"
    llm_temperature: float = 0.7

    # UI -> API
    api_url: str = "http://localhost:8000"
    api_timeout: float = 300.0  # long-form articles take 30-60s upstream

    log_level: str = "INFO"

    @model_validator(mode="before")
    @classmethod
    def load_secrets_from_secret_manager(cls, data: dict[str, Any]) -> dict[str, Any]:
        """Load secret values from Secret Manager if not already set.

        Environment variables and .env still win over Secret Manager.
        """
        secret_fields = ["gemini_api_key"]

        for field in secret_fields:
            if data.get(field) or data.get("google_api_key"):
                continue

            value = _get_secret_value(field)
            if value:
                data[field] = value

        return data

    def require_api_key(self) -> str:
        """Return the Gemini API key or fail loudly.

        Raises:
            ConfigurationError: If no key was configured.
        """
        if not self.gemini_api_key:
            raise ConfigurationError(
                "GEMINI_API_KEY (or GOOGLE_API_KEY) is not set. "
                "Export it or store it in Secret Manager."
            )
        return self.gemini_api_key


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Default settings instance
settings = get_settings()

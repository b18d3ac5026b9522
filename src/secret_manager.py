"""Secret Manager integration for configuration management.

Fetches secrets from Google Cloud Secret Manager so the Gemini API key does
not have to live in .env files on deployed instances.
"""

import logging
import os
from functools import lru_cache

from google.api_core import exceptions as gcp_exceptions
from google.cloud import secretmanager

logger = logging.getLogger(__name__)

SECRET_PREFIX = "rankmath-seo-writer"

# Config key -> secret base name
SECRET_NAMES = {
    "gemini_api_key": "gemini-api-key",
}


@lru_cache
def get_secret_manager_client() -> secretmanager.SecretManagerServiceClient:
    """Get cached Secret Manager client."""
    return secretmanager.SecretManagerServiceClient()


def get_secret(
    secret_id: str,
    project_id: str | None = None,
    version: str = "latest",
    default: str | None = None,
) -> str | None:
    """Fetch a secret value from Google Cloud Secret Manager.

    Args:
        secret_id: The secret ID (e.g., 'rankmath-seo-writer-gemini-api-key-dev')
        project_id: GCP project ID. If None, uses GOOGLE_PROJECT_ID env var.
        version: Secret version (default: 'latest')
        default: Default value if secret is not found

    Returns:
        The secret value as a string, or default if not found.
    """
    project = project_id or os.environ.get("GOOGLE_PROJECT_ID")
    if not project:
        return default

    try:
        client = get_secret_manager_client()
        name = f"projects/{project}/secrets/{secret_id}/versions/{version}"
        response = client.access_secret_version(request={"name": name})
        return response.payload.data.decode("UTF-8").strip()
    except (gcp_exceptions.NotFound, gcp_exceptions.PermissionDenied) as e:
        logger.debug(f"Secret {secret_id} unavailable: {e}")
        return default
    except Exception as e:
        # No credentials on a developer machine, for example
        logger.debug(f"Secret Manager lookup failed for {secret_id}: {e}")
        return default


def build_secret_id(base_name: str, environment: str | None = None) -> str:
    """Build a secret ID with environment suffix.

    >>> build_secret_id("gemini-api-key", "prod")
    'rankmath-seo-writer-gemini-api-key-prod'
    """
    env = environment or os.environ.get("ENVIRONMENT", "dev")
    return f"{SECRET_PREFIX}-{base_name}-{env}"


def get_app_secret(key: str, default: str | None = None) -> str | None:
    """Get an application secret by its config key.

    Unknown keys return ``default`` without touching Secret Manager.
    """
    if key not in SECRET_NAMES:
        return default

    secret_id = build_secret_id(SECRET_NAMES[key])
    return get_secret(secret_id, default=default)

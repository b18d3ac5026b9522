"""API client for communicating with the FastAPI backend."""

import logging
from typing import Any

import httpx

from src.chains.seo_generator import ArticleRequest, ClusterRequest
from src.config import get_settings
from src.errors import EmptyGenerationError, GenerationError

logger = logging.getLogger(__name__)


def _get_id_token(audience: str) -> str | None:
    """Get ID token for Cloud Run service-to-service authentication.

    Args:
        audience: The URL of the target service.

    Returns:
        ID token string, or None if not running on GCP or token fetch fails.
    """
    try:
        import google.auth.transport.requests
        import google.oauth2.id_token

        request = google.auth.transport.requests.Request()
        return google.oauth2.id_token.fetch_id_token(request, audience)
    except Exception as e:
        logger.debug(f"Could not get ID token (likely running locally): {e}")
        return None


def _error_from_response(response: httpx.Response) -> GenerationError:
    """Turn an error response from /generate into the matching exception."""
    try:
        body: Any = response.json()
    except ValueError:
        return GenerationError(f"HTTP {response.status_code}: {response.text}")

    # FastAPI wraps HTTPException payloads in "detail"
    if isinstance(body, dict) and isinstance(body.get("detail"), (dict, str)):
        if "error" not in body:
            body = body["detail"]
    if isinstance(body, dict):
        detail = str(body.get("detail") or "")
        if body.get("error") == "EmptyGenerationError":
            return EmptyGenerationError(detail)
        return GenerationError(detail)
    return GenerationError(str(body))


class APIClient:
    """Client for the SEO content generation API.

    Implements the same ``generate``/``agenerate`` interface as
    SEOContentGenerator so the InteractionController can use either.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the API client.

        Args:
            base_url: Base URL of the API server. Defaults to settings.api_url.
            timeout: Request timeout in seconds for generation calls.
            transport: Optional httpx transport (used by tests).
        """
        settings = get_settings()
        self.base_url = (base_url or settings.api_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.api_timeout
        self._transport = transport

    def _get_auth_headers(self) -> dict[str, str]:
        token = _get_id_token(self.base_url)
        if token:
            return {"Authorization": f"Bearer {token}"}
        return {}

    def _client(self, timeout: float) -> httpx.Client:
        return httpx.Client(timeout=timeout, transport=self._transport)

    def health_check(self) -> bool:
        """Check if the API is healthy.

        Returns:
            True if API is healthy, False otherwise.
        """
        try:
            headers = self._get_auth_headers()
            with self._client(5.0) as client:
                response = client.get(f"{self.base_url}/health", headers=headers)
                return response.status_code == 200
        except httpx.RequestError:
            return False

    def generate(self, request: ArticleRequest | ClusterRequest) -> str:
        """Generate content through the API.

        Args:
            request: Article or cluster request.

        Returns:
            Raw generated text.

        Raises:
            GenerationError: On transport failures or error responses.
            EmptyGenerationError: If the service reported an empty payload.
        """
        headers = self._get_auth_headers()
        try:
            with self._client(self.timeout) as client:
                response = client.post(
                    f"{self.base_url}/generate",
                    json=request.model_dump(mode="json"),
                    headers=headers,
                )
        except httpx.RequestError as e:
            logger.error(f"Request error during generation: {e}")
            raise GenerationError(str(e)) from e
        return self._read_content(response)

    async def agenerate(self, request: ArticleRequest | ClusterRequest) -> str:
        """Async version of generate."""
        headers = self._get_auth_headers()
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.post(
                    f"{self.base_url}/generate",
                    json=request.model_dump(mode="json"),
                    headers=headers,
                )
        except httpx.RequestError as e:
            logger.error(f"Request error during generation: {e}")
            raise GenerationError(str(e)) from e
        return self._read_content(response)

    @staticmethod
    def _read_content(response: httpx.Response) -> str:
        if response.is_error:
            raise _error_from_response(response)
        return response.json().get("content", "")

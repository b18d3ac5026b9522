"""Tests for the FastAPI REST API."""

from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from src.errors import ConfigurationError, EmptyGenerationError, GenerationError


@pytest.fixture
def client():
    """Create test client (lifespan not run, generator patched per test)."""
    from src.api.main import app

    return TestClient(app)


class TestHealthEndpoint:
    """Test health check endpoint."""

    def test_health_check_returns_ok(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"


class TestGenerateEndpoint:
    """Test POST /generate."""

    def test_generate_article(self, client):
        with patch("src.api.main.generator") as mock_generator:
            mock_generator.agenerate = AsyncMock(return_value="<article>...</article>")

            response = client.post(
                "/generate",
                json={"mode": "article", "primary_keyword": "Cách chọn máy lọc nước 2025"},
            )

        assert response.status_code == 200
        data = response.json()
        assert data["mode"] == "article"
        assert data["content"] == "<article>...</article>"
        assert data["template_version"]

        request = mock_generator.agenerate.call_args.args[0]
        assert request.primary_keyword == "Cách chọn máy lọc nước 2025"

    def test_generate_cluster(self, client):
        with patch("src.api.main.generator") as mock_generator:
            mock_generator.agenerate = AsyncMock(return_value="<table></table>")

            response = client.post(
                "/generate",
                json={"mode": "cluster", "seed_keyword": "Máy lọc nước ion kiềm"},
            )

        assert response.status_code == 200
        assert response.json()["mode"] == "cluster"
        assert mock_generator.agenerate.call_args.args[0].seed_keyword == "Máy lọc nước ion kiềm"

    def test_blank_keyword_rejected_without_call(self, client):
        with patch("src.api.main.generator") as mock_generator:
            mock_generator.agenerate = AsyncMock(return_value="<article/>")

            response = client.post("/generate", json={"mode": "article", "primary_keyword": " "})

        assert response.status_code == 422
        mock_generator.agenerate.assert_not_called()

    def test_unknown_mode_rejected(self, client):
        with patch("src.api.main.generator") as mock_generator:
            mock_generator.agenerate = AsyncMock(return_value="x")

            response = client.post("/generate", json={"mode": "outline", "seed_keyword": "k"})

        assert response.status_code == 422

    def test_generation_error_returns_502(self, client):
        with patch("src.api.main.generator") as mock_generator:
            mock_generator.agenerate = AsyncMock(side_effect=GenerationError("quota exceeded"))

            response = client.post("/generate", json={"mode": "cluster", "seed_keyword": "k"})

        assert response.status_code == 502
        assert response.json() == {"error": "GenerationError", "detail": "quota exceeded"}

    def test_empty_generation_returns_502(self, client):
        with patch("src.api.main.generator") as mock_generator:
            mock_generator.agenerate = AsyncMock(side_effect=EmptyGenerationError("empty"))

            response = client.post("/generate", json={"mode": "cluster", "seed_keyword": "k"})

        assert response.status_code == 502
        assert response.json()["error"] == "EmptyGenerationError"

    def test_configuration_error_returns_500(self, client):
        with patch("src.api.main.generator") as mock_generator:
            mock_generator.agenerate = AsyncMock(side_effect=ConfigurationError("no key"))

            response = client.post("/generate", json={"mode": "cluster", "seed_keyword": "k"})

        assert response.status_code == 500
        assert response.json()["error"] == "ConfigurationError"

    def test_generator_not_initialized(self, client):
        with patch("src.api.main.generator", None):
            response = client.post("/generate", json={"mode": "cluster", "seed_keyword": "k"})

        assert response.status_code == 500


class TestLifespan:
    """Test startup behaviour."""

    def test_missing_api_key_fails_startup(self):
        from src.api.main import app

        with patch(
            "src.api.main.SEOContentGenerator", side_effect=ConfigurationError("no key")
        ):
            with pytest.raises(ConfigurationError):
                with TestClient(app):
                    pass

    def test_startup_creates_generator(self):
        from src.api import main

        with patch("src.api.main.SEOContentGenerator") as mock_cls:
            with TestClient(main.app):
                assert main.generator is mock_cls.return_value
        main.generator = None


class TestAPIModels:
    """Test API model utilities."""

    def test_generate_response_model(self):
        from src.api.models import GenerateResponse

        response = GenerateResponse(
            mode="cluster",
            content="<table></table>",
            model="gemini-test",
            template_version="2025.1",
        )

        assert response.mode.value == "cluster"

    def test_error_response_model(self):
        from src.api.models import ErrorResponse

        error = ErrorResponse(error="GenerationError", detail="Không thể tạo nội dung")

        assert error.error == "GenerationError"
        assert error.detail == "Không thể tạo nội dung"

"""Tests for /ui/generate endpoint."""

from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from src.errors import EmptyGenerationError, GenerationError


@pytest.fixture
def client():
    """Create test client."""
    from src.api.main import app

    return TestClient(app)


class TestUIGenerateEndpoint:
    """Test /ui/generate endpoint for HTMX partial updates."""

    def test_generate_returns_html_partial(self, client: TestClient):
        """POST /ui/generate returns the result partial with preview and raw code."""
        content = "<article><h1>Cách chọn máy lọc nước 2025</h1></article>"

        with patch("src.api.main.generator") as mock_generator:
            mock_generator.agenerate = AsyncMock(return_value=content)

            response = client.post(
                "/ui/generate",
                data={
                    "mode": "article",
                    "primary_keyword": "Cách chọn máy lọc nước 2025",
                    "secondary_keywords": "",
                    "related_product": "",
                },
            )

        assert response.status_code == 200
        assert "text/html" in response.headers.get("content-type", "")

        html = response.text
        assert "<!DOCTYPE" not in html
        assert 'data-status="success"' in html
        assert "<h1>Cách chọn máy lọc nước 2025</h1>" in html
        assert "&lt;h1&gt;Cách chọn máy lọc nước 2025&lt;/h1&gt;" in html

        mock_generator.agenerate.assert_awaited_once()
        request = mock_generator.agenerate.call_args.args[0]
        assert request.primary_keyword == "Cách chọn máy lọc nước 2025"

    def test_preview_is_sanitized(self, client: TestClient):
        content = "<article><p>ok</p><script>alert(1)</script></article>"

        with patch("src.api.main.generator") as mock_generator:
            mock_generator.agenerate = AsyncMock(return_value=content)

            response = client.post("/ui/generate", data={"mode": "article", "primary_keyword": "k"})

        html = response.text
        assert "<script>alert(1)</script>" not in html
        assert "&lt;script&gt;alert(1)&lt;/script&gt;" in html

    def test_meta_description_shown(self, client: TestClient):
        meta = "Mô tả ngắn về máy lọc nước."
        content = f"<article><h1>T</h1></article>\n{meta}"

        with patch("src.api.main.generator") as mock_generator:
            mock_generator.agenerate = AsyncMock(return_value=content)

            response = client.post("/ui/generate", data={"mode": "article", "primary_keyword": "k"})

        assert f"Meta description ({len(meta)} ký tự)" in response.text

    def test_generate_cluster(self, client: TestClient):
        with patch("src.api.main.generator") as mock_generator:
            mock_generator.agenerate = AsyncMock(return_value="<table><tr><td>1</td></tr></table>")

            response = client.post(
                "/ui/generate",
                data={"mode": "cluster", "seed_keyword": "Máy lọc nước ion kiềm"},
            )

        assert response.status_code == 200
        assert "<table><tr><td>1</td></tr></table>" in response.text
        assert mock_generator.agenerate.call_args.args[0].seed_keyword == "Máy lọc nước ion kiềm"


class TestUIGenerateFailures:
    """Test error notices in the result partial."""

    def test_empty_cluster_response_shows_fallback(self, client: TestClient):
        with patch("src.api.main.generator") as mock_generator:
            mock_generator.agenerate = AsyncMock(side_effect=EmptyGenerationError("empty"))

            response = client.post(
                "/ui/generate",
                data={"mode": "cluster", "seed_keyword": "Máy lọc nước ion kiềm"},
            )

        assert response.status_code == 200
        assert 'role="alert"' in response.text
        assert "Không thể phân tích keyword. Vui lòng thử lại." in response.text

    def test_generation_error_message_shown(self, client: TestClient):
        with patch("src.api.main.generator") as mock_generator:
            mock_generator.agenerate = AsyncMock(side_effect=GenerationError("Network unreachable"))

            response = client.post("/ui/generate", data={"mode": "article", "primary_keyword": "k"})

        assert "Network unreachable" in response.text
        assert 'data-status="success"' not in response.text

    def test_blank_keyword_does_not_call_generator(self, client: TestClient):
        with patch("src.api.main.generator") as mock_generator:
            mock_generator.agenerate = AsyncMock(return_value="<article/>")

            response = client.post("/ui/generate", data={"mode": "article", "primary_keyword": "  "})

        assert response.status_code == 200
        assert 'data-status="idle"' in response.text
        mock_generator.agenerate.assert_not_called()

    def test_unknown_mode(self, client: TestClient):
        with patch("src.api.main.generator") as mock_generator:
            mock_generator.agenerate = AsyncMock(return_value="x")

            response = client.post("/ui/generate", data={"mode": "outline", "seed_keyword": "k"})

        assert response.status_code == 400

    def test_generator_not_initialized(self, client: TestClient):
        with patch("src.api.main.generator", None):
            response = client.post("/ui/generate", data={"mode": "article", "primary_keyword": "k"})

        assert response.status_code == 500

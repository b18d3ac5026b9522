"""Tests for HTMX base template and configuration."""

from fastapi.testclient import TestClient


class TestJinja2TemplatesConfiguration:
    """Test Jinja2Templates is properly configured in FastAPI app."""

    def test_jinja2_templates_configured(self):
        """FastAPI app has Jinja2Templates configured with src/templates directory."""
        from fastapi.templating import Jinja2Templates

        from src.api.main import app

        assert hasattr(app.state, "templates"), "app.state.templates should be configured"
        assert isinstance(app.state.templates, Jinja2Templates)

    def test_static_files_mounted(self):
        """Static files are mounted at /static path."""
        from src.api.main import app

        routes = [route.path for route in app.routes]
        static_paths = [r for r in routes if r.startswith("/static")]

        assert len(static_paths) > 0, "Static files should be mounted at /static"

    def test_static_assets_served(self):
        from src.api.main import app

        client = TestClient(app)

        assert client.get("/static/style.css").status_code == 200
        assert client.get("/static/app.js").status_code == 200

    def test_index_returns_html(self):
        """GET / returns HTML page with proper content type."""
        from src.api.main import app

        client = TestClient(app)
        response = client.get("/")

        assert response.status_code == 200
        assert "text/html" in response.headers.get("content-type", "")

    def test_html_structure(self):
        """Base template includes HTML5 structure with Vietnamese lang attribute."""
        from src.api.main import app

        client = TestClient(app)
        response = client.get("/")

        html = response.text
        assert "<!DOCTYPE html>" in html
        assert 'lang="vi"' in html
        assert "<html" in html
        assert "<head>" in html
        assert "<body>" in html
        assert "htmx.org" in html

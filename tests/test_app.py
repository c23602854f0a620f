"""
Tests for application assembly.

Tests cover:
- Health response on the root path
- Error envelope for infrastructure failures
- CORS headers for the configured client origin
"""

import sqlite3

from fastapi.testclient import TestClient

from tr_bot_api.app.core.config import Settings
from tr_bot_api.app.main import create_app
from tr_bot_api.app.services.pattern_service import PatternService


async def _failing_list(self):
    raise sqlite3.OperationalError("no such table: patterns")


class TestRoot:
    """Tests for GET /."""

    def test_root_responds_ok(self, client: TestClient) -> None:
        response = client.get("/")
        assert response.status_code == 200
        assert response.json() == {"ok": True}


class TestErrorBoundary:
    """Store errors reach the generic handler."""

    def test_store_error_shows_message_outside_production(self, test_settings: Settings, monkeypatch) -> None:
        monkeypatch.setattr(PatternService, "list_patterns", _failing_list)
        app = create_app(test_settings)
        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get("/api/patterns/")
        assert response.status_code == 500
        assert response.json() == {"error": {"message": "no such table: patterns"}}

    def test_store_error_hidden_in_production(self, tmp_path, monkeypatch) -> None:
        monkeypatch.setattr(PatternService, "list_patterns", _failing_list)
        app_settings = Settings(database_url=str(tmp_path / "prod.db"), environment="production")
        app = create_app(app_settings)
        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get("/api/patterns/")
        assert response.status_code == 500
        assert response.json() == {"error": {"message": "server error"}}

    def test_unknown_route_uses_error_envelope(self, client: TestClient) -> None:
        response = client.get("/api/unknown")
        assert response.status_code == 404
        assert response.json() == {"error": {"message": "Not Found"}}


class TestCors:
    """CORS is opened to the configured client origin only."""

    def test_allowed_origin(self, client: TestClient, test_settings: Settings) -> None:
        response = client.get("/", headers={"Origin": test_settings.client_origin})
        assert response.headers["access-control-allow-origin"] == test_settings.client_origin

    def test_other_origin(self, client: TestClient) -> None:
        response = client.get("/", headers={"Origin": "https://elsewhere.example"})
        assert "access-control-allow-origin" not in response.headers

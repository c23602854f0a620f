"""
Pytest configuration and shared fixtures.
"""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from tr_bot_api.app.core.config import Settings
from tr_bot_api.app.core.db import Database
from tr_bot_api.app.main import create_app
from tr_bot_api.app.services.pattern_service import PatternService

from tests.patterns_fixtures import make_patterns_array


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings pointing at a database file in a temporary directory."""
    return Settings(database_url=str(tmp_path / "tr_bot_test.db"), environment="test")


@pytest.fixture
def database(test_settings: Settings) -> Database:
    db = Database(test_settings.database_url)
    db.init_db()
    return db


@pytest.fixture
def service(database: Database) -> PatternService:
    return PatternService(database)


@pytest.fixture
def client(test_settings: Settings) -> TestClient:
    """Test client for an app backed by an empty temporary database."""
    app = create_app(test_settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def seeded_client(client: TestClient) -> TestClient:
    """Test client whose database already holds ``make_patterns_array()``."""
    for pattern in make_patterns_array():
        response = client.post("/api/patterns/", json=pattern)
        assert response.status_code == 201
    return client

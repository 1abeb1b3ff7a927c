"""
Shared fixtures for the API tests.

Every test gets a fresh, empty data directory so collection files
never leak between tests.
"""
import pytest
from fastapi.testclient import TestClient

from community_reports_api.app.core.config import settings
from community_reports_api.app.main import app


@pytest.fixture(autouse=True)
def data_dir(tmp_path, monkeypatch):
    """Point the JSON store at a temporary directory."""
    monkeypatch.setattr(settings, "data_dir", str(tmp_path))
    return tmp_path


@pytest.fixture
def client():
    return TestClient(app)

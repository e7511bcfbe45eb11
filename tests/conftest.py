"""Pytest configuration and shared fixtures."""

from typing import Any, Dict

import pytest
from fastapi.testclient import TestClient

from ride_api.app.core.config import settings
from ride_api.app.core.db import init_db
from ride_api.app.main import app


@pytest.fixture(autouse=True)
def database(tmp_path, monkeypatch):
    """Point the settings at a fresh SQLite file and apply migrations."""
    monkeypatch.setattr(settings, "database_url", str(tmp_path / "ride-test.db"))
    init_db()
    yield tmp_path / "ride-test.db"


@pytest.fixture
def client():
    """Test client for the FastAPI app."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def lenient_client():
    """Test client that turns unhandled errors into 500 responses."""
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def sample_car() -> Dict[str, Any]:
    return {"userId": 1, "brand": "AAAAA", "model": "AAAAA", "color": "AAAAA"}


@pytest.fixture
def sample_place() -> Dict[str, Any]:
    return {"latitude": 1.0, "longitude": 1.0, "postcode": 1, "cityName": "AAAAA"}


@pytest.fixture
def sample_ride() -> Dict[str, Any]:
    return {
        "driverId": 1,
        "startDateTime": "1970-01-01T00:00:00Z",
        "flexibleStartPlace": 1,
        "flexibleEndPlace": 1,
        "price": 1.0,
        "numberOfSeats": 1,
        "description": "AAAAA",
        "createdAt": "1970-01-01T00:00:00Z",
        "deleted": False,
    }


@pytest.fixture
def sample_reservation() -> Dict[str, Any]:
    return {"passengerId": 1, "confirmed": False, "cancled": False}

import pytest
from fastapi.testclient import TestClient

from exercise_tracker_api.app.core.config import Settings
from exercise_tracker_api.app.core.db import Database
from exercise_tracker_api.app.main import create_app


@pytest.fixture
def app_settings(tmp_path):
    return Settings(
        database_url=str(tmp_path / "exercise_tracker.db"),
        date_filter_mode="lexicographic",
    )


@pytest.fixture
def app(app_settings):
    return create_app(app_settings)


# Entering the client runs the lifespan, which opens the database.
@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db(tmp_path):
    database = Database(str(tmp_path / "service.db"))
    database.open()
    yield database
    database.close()


@pytest.fixture
def make_user(client):
    def _make_user(username="alice"):
        response = client.post("/api/users", json={"username": username})
        assert response.status_code == 200
        return response.json()["_id"]

    return _make_user

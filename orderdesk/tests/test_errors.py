import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from ..core import config
from ..core.database import Database
from ..core.exceptions import StoreError
from ..main import create_app


@pytest.fixture
def failing_client(database):
    app = create_app(database)

    @app.get("/store-failure")
    def store_failure():
        raise StoreError("Access denied for user 'root'@'db-host'")

    @app.get("/sqlalchemy-failure")
    def sqlalchemy_failure():
        raise OperationalError("SELECT 1", {}, Exception("Lost connection to db-host"))

    with TestClient(app) as test_client:
        yield test_client


def test_store_error_hides_details(failing_client):
    response = failing_client.get("/store-failure")
    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}


def test_sqlalchemy_error_hides_details(failing_client):
    response = failing_client.get("/sqlalchemy-failure")
    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}


def test_debug_exposes_raw_store_messages(failing_client, monkeypatch):
    monkeypatch.setattr(config, "DEBUG", True)

    response = failing_client.get("/store-failure")
    assert response.status_code == 500
    assert "db-host" in response.json()["detail"]

    response = failing_client.get("/sqlalchemy-failure")
    assert response.status_code == 500
    assert "Lost connection to db-host" in response.json()["detail"]


def test_startup_aborts_when_schema_cannot_be_created(tmp_path):
    unreachable = Database(f"sqlite:///{tmp_path}/missing-dir/app.db")

    with pytest.raises(StoreError):
        with TestClient(create_app(unreachable)):
            pass

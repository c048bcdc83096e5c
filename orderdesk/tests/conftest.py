import os

# Must be set before orderdesk.core.config is imported
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient

from ..core.database import Database
from ..core.schema import ensure_schema
from ..main import create_app


@pytest.fixture
def database():
    db = Database("sqlite://")
    ensure_schema(db)
    yield db
    db.dispose()


@pytest.fixture
def db_session(database):
    session = database.session()
    yield session
    session.close()


@pytest.fixture
def client(database):
    with TestClient(create_app(database)) as test_client:
        yield test_client


def signup(client, email="a@x.com", password="p1", **fields):
    response = client.post("/api/auth/signup", json={"email": email, "password": password, **fields})
    assert response.status_code == 200, response.text
    body = response.json()
    return body["user"]["id"], body["session"]["access_token"]


def auth_header(token):
    return {"Authorization": f"Bearer {token}"}
